"""
Matrix module.

Dense float64 matrix value type with elementwise arithmetic, LU-based
linear algebra, and machine-learning helpers.

Public API:
    Matrix                       - the value type (operators +, -, *, @, ==)
    transpose(A), multiply(A, B) - linear-algebra kernels
    inverse(A), lu(A), solve(A, B), det(A), condition_number(A)
    add, subtract, add_scalar, subtract_scalar,
    subtract_scalar_from_matrix, scale, negate,
    element_multiply, equals     - named elementwise operations
    sigmoid, log, sum_elements, sum_rows, allclose
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.operations import (
    add,
    subtract,
    add_scalar,
    subtract_scalar,
    subtract_scalar_from_matrix,
    scale,
    negate,
    element_multiply,
    equals,
)
from pymatrix.matrix.solvers import (
    transpose,
    multiply,
    inverse,
    lu,
    solve,
    det,
    condition_number,
)
from pymatrix.matrix.functions import (
    sigmoid,
    log,
    sum_elements,
    sum_rows,
    allclose,
)

__all__ = [
    "Matrix",
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
