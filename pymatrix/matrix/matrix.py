"""
Matrix: dense float64 matrix value type.

A Matrix has a fixed shape and mutable content. Data is stored row-major
(element (i, j) at offset i * columns + j) in a C-contiguous float64 array
that the Matrix owns exclusively: input data is copied on construction,
accessors return copies, and every operation builds a new Matrix. The only
in-place mutation is single-element assignment, matrix[i, j] = value.

Construction:
    Matrix(rows, columns)            # zero-filled
    Matrix(rows, columns, data)      # row-major data, len == rows * columns
    Matrix.identity(size)
    Matrix.from_array(array_2d)

Operators:
    A + B, A - B                 elementwise (shapes must match)
    A + s, s + A, A - s, s - A   scalar broadcast
    A * s, s * A, -A             scaling
    A * B, A @ B                 matrix product
    A == B                       exact elementwise equality
"""

from __future__ import annotations

import numbers
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidDimensionsError
from pymatrix.core.validation import (
    check_array,
    check_dimension,
    check_data_length,
    check_index,
    check_same_shape,
)


class Matrix:
    """
    Dense matrix of float64 values with value semantics.

    Invariant: rows > 0, columns > 0 and the data holds exactly
    rows * columns values. Every constructor checks it before returning.
    """

    __slots__ = ('_grid',)

    # Make NumPy scalars defer to our reflected operators (2.0 * A)
    # instead of broadcasting over the Matrix as an object.
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        columns: int,
        data: ArrayLike | None = None,
    ):
        """
        Build a matrix from its dimensions and optional row-major data.

        Parameters
        ----------
        rows, columns : int
            Positive dimensions.
        data : array-like, optional
            Flat sequence of rows * columns numbers in row-major order.
            Copied. If omitted the matrix is zero-filled.

        Raises
        ------
        InvalidDimensionsError
            If a dimension is not positive or len(data) != rows * columns.
        ValidationError
            If a dimension is not an integer or data is not numeric.
        """
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')

        if data is None:
            grid = np.zeros((rows, columns), dtype=np.float64)
        else:
            values = check_array(data, 'data')
            check_data_length(values, rows, columns)
            grid = values.reshape(rows, columns).copy()

        self._grid = grid

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Square size x size matrix with ones on the diagonal."""
        size = check_dimension(size, 'size')
        return cls._from_grid(np.eye(size, dtype=np.float64))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like (nested lists, ndarray, ...).

        The input is copied.
        """
        values = check_array(array, 'array')
        if values.ndim != 2:
            raise InvalidDimensionsError(
                f"array: expected 2D, got {values.ndim}D with shape {values.shape}"
            )
        rows, columns = values.shape
        if rows == 0 or columns == 0:
            raise InvalidDimensionsError(
                f"array: dimensions must be positive, got {rows}x{columns}",
                rows=rows,
                columns=columns,
            )
        return cls._from_grid(values.copy())

    @classmethod
    def _from_grid(cls, grid: NDArray[np.floating[Any]]) -> Matrix:
        """
        Wrap a freshly computed 2D array without copying it.

        Callers hand over ownership; the array must not be referenced
        anywhere else.
        """
        if grid.ndim != 2 or grid.shape[0] == 0 or grid.shape[1] == 0:
            raise InvalidDimensionsError(
                f"Matrix data must be a non-empty 2D grid, got shape {grid.shape}"
            )
        matrix = cls.__new__(cls)
        matrix._grid = np.ascontiguousarray(grid, dtype=np.float64)
        return matrix

    # === Shape and data ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._grid.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._grid.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._grid.shape[0], self._grid.shape[1])

    @property
    def data(self) -> list[float]:
        """Row-major copy of the elements."""
        return self._grid.ravel().tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, columns) float64 array."""
        return self._grid.copy()

    def copy(self) -> Matrix:
        """Independent copy of this matrix."""
        return Matrix._from_grid(self._grid.copy())

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    # === Element access ===

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = check_index(key, self.shape)
        return float(self._grid[row, column])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = check_index(key, self.shape)
        if not isinstance(value, numbers.Real):
            raise TypeError(
                f"Matrix elements must be real numbers, got {type(value).__name__}"
            )
        self._grid[row, column] = float(value)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    # Mutable content: not hashable.
    __hash__ = None  # type: ignore[assignment]

    # === Elementwise helpers ===

    def _combine(
        self,
        other: Matrix,
        ufunc: Callable[[Any, Any], Any],
        operation: str,
    ) -> Matrix:
        check_same_shape(self.shape, other.shape, operation)
        return Matrix._from_grid(ufunc(self._grid, other._grid))

    def _broadcast(self, ufunc: Callable[[Any, Any], Any], scalar: float) -> Matrix:
        return Matrix._from_grid(ufunc(self._grid, float(scalar)))

    # === Operators ===

    def __add__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._combine(other, np.add, 'add')
        if isinstance(other, numbers.Real):
            return self._broadcast(np.add, other)
        return NotImplemented

    def __radd__(self, other: float) -> Matrix:
        if isinstance(other, numbers.Real):
            return self._broadcast(np.add, other)
        return NotImplemented

    def __sub__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            return self._combine(other, np.subtract, 'subtract')
        if isinstance(other, numbers.Real):
            return self._broadcast(np.subtract, other)
        return NotImplemented

    def __rsub__(self, other: float) -> Matrix:
        if isinstance(other, numbers.Real):
            return Matrix._from_grid(float(other) - self._grid)
        return NotImplemented

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            from pymatrix.matrix.solvers import multiply
            return multiply(self, other)
        if isinstance(other, numbers.Real):
            return self._broadcast(np.multiply, other)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, numbers.Real):
            return self._broadcast(np.multiply, other)
        return NotImplemented

    def __matmul__(self, other: Matrix) -> Matrix:
        if isinstance(other, Matrix):
            from pymatrix.matrix.solvers import multiply
            return multiply(self, other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self._broadcast(np.multiply, -1.0)

    # === Methods ===

    def element_multiply(self, other: Matrix) -> Matrix:
        """Elementwise (Hadamard) product; shapes must match."""
        if not isinstance(other, Matrix):
            raise TypeError(
                f"element_multiply expects a Matrix, got {type(other).__name__}"
            )
        return self._combine(other, np.multiply, 'element_multiply')

    def transpose(self) -> Matrix:
        """New columns x rows matrix with result[j, i] == self[i, j]."""
        return Matrix._from_grid(self._grid.T.copy())

    @property
    def T(self) -> Matrix:
        """Shorthand for transpose()."""
        return self.transpose()

    def inverse(self) -> Matrix:
        """Inverse via LU with partial pivoting (CPU reference backend)."""
        from pymatrix.matrix.solvers import inverse
        return inverse(self)

    def sum(self) -> float:
        """Sum of all elements."""
        return float(np.sum(self._grid))

    # === Display ===

    def __str__(self) -> str:
        from pymatrix.matrix._format import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, data={self.data!r})"
