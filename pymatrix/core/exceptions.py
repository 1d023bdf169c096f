"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape and index problems are ValidationErrors;
problems discovered while computing are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionsError(ValidationError):
    """
    Matrix cannot be constructed with the requested dimensions.

    Raised when a row or column count is not positive, or when the
    supplied data does not hold exactly rows * columns values.

    Attributes:
        rows: Requested row count
        columns: Requested column count
        length: Number of data values supplied, if any
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        columns: int | None = None,
        length: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns
        self.length = length


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access outside the matrix.

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: (rows, columns) of the matrix accessed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent for an operation.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible.

    Raised by elementwise operators when the shapes differ, and by the
    matrix product when the inner dimensions disagree.

    Attributes:
        operation: Name of the operation that was attempted
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when LU factorization meets an exactly-zero pivot, so the
    matrix has no inverse.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: 0-based index of the first zero pivot, if known
        condition_number: Estimated condition number, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None,
        condition_number: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index
        self.condition_number = condition_number
