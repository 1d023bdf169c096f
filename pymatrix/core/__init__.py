"""
Core infrastructure for PyMatrix.

This module provides shared abstractions, utilities, and compute
infrastructure used by the Matrix type and its backends.

Key components:
    protocols: Backend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, precision, linear algebra kernels
"""

from pymatrix.core.protocols import Backend
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

__all__ = [
    # Protocols
    "Backend",
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
]
