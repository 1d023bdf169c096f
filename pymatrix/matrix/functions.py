"""
Elementwise transcendental functions and reductions.

Helpers used when building simple machine-learning models on top of
Matrix (logistic regression cost functions and the like).

Floating-point special values are part of the contract: log of a
non-positive number gives NaN or -inf, and exp overflow inside sigmoid
saturates to 0.0 or 1.0. None of these raise or warn.
"""

from __future__ import annotations

import numbers
import numpy as np

from pymatrix.core.compute.precision import is_close
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.matrix.matrix import Matrix


def sigmoid(x: float | Matrix) -> float | Matrix:
    """
    Logistic function 1 / (1 + e^-x).

    Scalar input gives a float; Matrix input is mapped elementwise and
    keeps its shape.
    """
    if isinstance(x, Matrix):
        with np.errstate(over='ignore'):
            return Matrix._from_grid(1.0 / (1.0 + np.exp(-x._grid)))
    if isinstance(x, numbers.Real):
        with np.errstate(over='ignore'):
            return float(1.0 / (1.0 + np.exp(-np.float64(x))))
    raise TypeError(f"sigmoid expects a number or Matrix, got {type(x).__name__}")


def log(a: Matrix) -> Matrix:
    """Elementwise natural logarithm."""
    if not isinstance(a, Matrix):
        raise TypeError(f"log expects a Matrix, got {type(a).__name__}")
    with np.errstate(divide='ignore', invalid='ignore'):
        return Matrix._from_grid(np.log(a._grid))


def sum_elements(a: Matrix) -> float:
    """Sum of every element (pairwise summation, so order may differ from a plain loop)."""
    if not isinstance(a, Matrix):
        raise TypeError(f"sum_elements expects a Matrix, got {type(a).__name__}")
    return a.sum()


def sum_rows(a: Matrix) -> Matrix:
    """
    Add the rows together: a 1 x columns matrix whose j-th element is the
    sum down column j.
    """
    if not isinstance(a, Matrix):
        raise TypeError(f"sum_rows expects a Matrix, got {type(a).__name__}")
    return Matrix._from_grid(a._grid.sum(axis=0, keepdims=True))


def allclose(
    a: Matrix,
    b: Matrix,
    *,
    rtol: float = CPU_FP64.rtol,
    atol: float = CPU_FP64.atol,
) -> bool:
    """
    Tolerant equality: same shape and |a - b| <= atol + rtol * |b| everywhere.

    Not symmetric in a and b, like numpy.isclose.
    """
    if not isinstance(a, Matrix) or not isinstance(b, Matrix):
        raise TypeError("allclose expects two matrices")
    if a.shape != b.shape:
        return False
    return bool(np.all(is_close(a._grid, b._grid, rtol=rtol, atol=atol)))
