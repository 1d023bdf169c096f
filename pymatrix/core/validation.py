"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    InvalidDimensionsError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    NotSquareError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric
    data) and complex data, which has no float64 representation.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row/column count is a positive integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        ValidationError: If value is not an integer
        InvalidDimensionsError: If value is not positive
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name}: expected an integer, got bool")
    try:
        dimension = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e

    if dimension <= 0:
        raise InvalidDimensionsError(
            f"{name}: must be positive, got {dimension}"
        )
    return dimension


def check_data_length(
    data: NDArray[np.float64],
    rows: int,
    columns: int,
) -> None:
    """
    Verify flat matrix data holds exactly rows * columns values.

    Args:
        data: Candidate row-major data
        rows: Row count
        columns: Column count

    Raises:
        InvalidDimensionsError: If data is not 1D or has the wrong length
    """
    if data.ndim != 1:
        raise InvalidDimensionsError(
            f"data: expected a flat sequence, got {data.ndim}D with shape {data.shape}",
            rows=rows,
            columns=columns,
        )
    expected = rows * columns
    if data.shape[0] != expected:
        raise InvalidDimensionsError(
            f"data: expected {expected} values for a {rows}x{columns} matrix, "
            f"got {data.shape[0]}",
            rows=rows,
            columns=columns,
            length=int(data.shape[0]),
        )


def check_index(key: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify an element key is an in-range (row, column) pair.

    Negative indices are out of range; there is no wrap-around.

    Args:
        key: Subscript passed to __getitem__/__setitem__
        shape: (rows, columns) of the matrix

    Returns:
        (row, column) as plain ints

    Raises:
        TypeError: If key is not a pair of integers
        IndexOutOfRangeError: If either index is outside the matrix
    """
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"Matrix indices must be a (row, column) pair, got {key!r}"
        )
    try:
        row = operator.index(key[0])
        column = operator.index(key[1])
    except TypeError as e:
        raise TypeError(
            f"Matrix indices must be integers, got {key!r}"
        ) from e

    rows, columns = shape
    if not (0 <= row < rows and 0 <= column < columns):
        raise IndexOutOfRangeError(
            f"Index ({row}, {column}) out of range for {rows}x{columns} matrix",
            row=row,
            column=column,
            shape=shape,
        )
    return row, column


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have identical shape.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes differ, {left[0]}x{left[1]} vs {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.columns == right.rows for a matrix product or solve.

    Raises:
        DimensionMismatchError: If the inner dimensions disagree
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left operand has {left[1]} columns but right "
            f"operand has {right[0]} rows",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NotSquareError: If rows != columns
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{name}: expected a square matrix, got {shape[0]}x{shape[1]}",
            shape=shape,
        )
