"""
PyMatrix: dense float64 matrices for Python.

A small matrix value type with elementwise arithmetic, LU-based linear
algebra on LAPACK (with optional CUDA acceleration), and the elementwise
helpers needed for simple machine-learning models.

Submodules:
    matrix: Matrix type, operations, linear algebra, functions
    io: CSV and pandas interoperability
    core: exceptions, validation, compute infrastructure
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)
from pymatrix.matrix import (
    Matrix,
    add,
    subtract,
    add_scalar,
    subtract_scalar,
    subtract_scalar_from_matrix,
    scale,
    negate,
    element_multiply,
    equals,
    transpose,
    multiply,
    inverse,
    lu,
    solve,
    det,
    condition_number,
    sigmoid,
    log,
    sum_elements,
    sum_rows,
    allclose,
)
from pymatrix import io

__all__ = [
    "__version__",
    "io",
    "Matrix",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidDimensionsError",
    "IndexOutOfRangeError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    # Elementwise
    "add",
    "subtract",
    "add_scalar",
    "subtract_scalar",
    "subtract_scalar_from_matrix",
    "scale",
    "negate",
    "element_multiply",
    "equals",
    # Linear algebra
    "transpose",
    "multiply",
    "inverse",
    "lu",
    "solve",
    "det",
    "condition_number",
    # Functions
    "sigmoid",
    "log",
    "sum_elements",
    "sum_rows",
    "allclose",
]
