"""
Solver dispatch for the linear-algebra kernels.

Provides transpose(), multiply(), inverse(), lu(), solve(), det() and
condition_number(). The heavy kernels accept a backend choice; the CPU
backend is the float64 reference and the default.
"""

from __future__ import annotations

from typing import Literal

from pymatrix.core.compute.device import select_device
from pymatrix.core.compute.linalg.lu import LUResult
from pymatrix.core.compute.precision import condition_number as _condition_number
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_inner_dimensions,
    check_square,
)
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.backends.cpu import CPUMatrixBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']


def _check_matrix(value: object, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise TypeError(f"{name}: expected a Matrix, got {type(value).__name__}")
    return value


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPUMatrixBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.device_type == 'cuda':
            try:
                from pymatrix.matrix.backends.gpu import GPUMatrixBackend
                return GPUMatrixBackend(device=device)
            except ImportError:
                return CPUMatrixBackend()
        return CPUMatrixBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from pymatrix.matrix.backends.gpu import GPUMatrixBackend
        return GPUMatrixBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def transpose(a: Matrix) -> Matrix:
    """
    Transpose of a matrix.

    Returns a new a.columns x a.rows matrix with result[j, i] == a[i, j].
    """
    return _check_matrix(a, 'a').transpose()


def multiply(
    a: Matrix,
    b: Matrix,
    *,
    backend: BackendChoice = 'cpu',
) -> Matrix:
    """
    Matrix product a @ b.

    Parameters
    ----------
    a : Matrix
        Left operand (m x k).
    b : Matrix
        Right operand (k x n).
    backend : str
        'cpu' (BLAS dgemm, default), 'gpu', or 'auto'.

    Returns
    -------
    Matrix of shape (m, n) with result[i, j] = sum_k a[i, k] * b[k, j].

    Raises
    ------
    DimensionMismatchError
        If a.columns != b.rows.
    """
    _check_matrix(a, 'a')
    _check_matrix(b, 'b')
    check_inner_dimensions(a.shape, b.shape, 'multiply')
    be = _get_backend(backend)
    return Matrix._from_grid(be.matmul(a._grid, b._grid))


def inverse(a: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Inverse of a square matrix via LU decomposition with partial pivoting.

    Factors a = P @ L @ U (LAPACK getrf) and inverts from the factors
    (getri).

    Parameters
    ----------
    a : Matrix
        Square matrix.
    backend : str
        'cpu' (default), 'gpu', or 'auto'.

    Raises
    ------
    NotSquareError
        If a.rows != a.columns.
    SingularMatrixError
        If the factorization meets an exactly-zero pivot.
    """
    _check_matrix(a, 'a')
    check_square(a.shape, 'inverse')
    be = _get_backend(backend)
    return Matrix._from_grid(be.inverse(a._grid))


def lu(a: Matrix, *, backend: BackendChoice = 'cpu') -> LUResult:
    """
    LU decomposition with partial pivoting: a == P @ L @ U.

    Singular matrices are factorized without error; check
    LUResult.is_singular before using the factors to solve.

    Raises
    ------
    NotSquareError
        If a.rows != a.columns.
    """
    _check_matrix(a, 'a')
    check_square(a.shape, 'lu')
    be = _get_backend(backend)
    return be.lu(a._grid)


def solve(a: Matrix, b: Matrix, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Solve the linear system a @ x = b for x.

    Parameters
    ----------
    a : Matrix
        Square coefficient matrix (n x n).
    b : Matrix
        Right-hand side (n x k).

    Returns
    -------
    Matrix x of shape (n, k).

    Raises
    ------
    NotSquareError
        If a is not square.
    DimensionMismatchError
        If b.rows != a.rows.
    SingularMatrixError
        If a is singular.
    """
    _check_matrix(a, 'a')
    _check_matrix(b, 'b')
    check_square(a.shape, 'solve')
    check_inner_dimensions(a.shape, b.shape, 'solve')
    be = _get_backend(backend)
    return Matrix._from_grid(be.solve(a._grid, b._grid))


def det(a: Matrix) -> float:
    """
    Determinant via LU: sign(P) times the product of U's diagonal.

    Exactly-singular matrices give 0.0.

    Raises
    ------
    NotSquareError
        If a is not square.
    """
    return lu(a).determinant()


def condition_number(a: Matrix) -> float:
    """2-norm condition number (ratio of extreme singular values); inf if singular."""
    _check_matrix(a, 'a')
    return _condition_number(a._grid)
