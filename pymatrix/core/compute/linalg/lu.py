"""
LU decomposition implementations.

Provides a consistent LU interface across CPU (LAPACK getrf/getri/getrs via
SciPy) and GPU (PyTorch). Factorization uses partial pivoting:

    A = P @ L @ U

with L unit lower triangular and U upper triangular. An exactly-zero pivot
in U means A is singular; inverse and solve refuse such matrices with
SingularMatrixError instead of returning the garbage LAPACK leaves behind.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import lapack

from pymatrix.core.exceptions import SingularMatrixError

if TYPE_CHECKING:
    import torch


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting.

    Attributes:
        lu: Packed factors (n x n). The strict lower triangle holds L
            (whose unit diagonal is implicit), the upper triangle holds U.
        piv: 0-based LAPACK pivot indices: during factorization row i was
             interchanged with row piv[i].
        zero_pivot: 0-based index of the first exactly-zero pivot, or None
                    if the matrix is non-singular.
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    zero_pivot: int | None

    @property
    def n(self) -> int:
        """Order of the factorized matrix."""
        return self.lu.shape[0]

    @property
    def is_singular(self) -> bool:
        """True if U has an exactly-zero diagonal entry."""
        return self.zero_pivot is not None

    @property
    def L(self) -> NDArray[np.floating[Any]]:
        """Unit lower triangular factor."""
        return np.tril(self.lu, k=-1) + np.eye(self.n)

    @property
    def U(self) -> NDArray[np.floating[Any]]:
        """Upper triangular factor."""
        return np.triu(self.lu)

    @property
    def permutation(self) -> NDArray[np.intp]:
        """
        Row order produced by the pivoting: A[permutation] == L @ U.
        """
        perm = np.arange(self.n)
        for i, p in enumerate(self.piv):
            perm[i], perm[p] = perm[p], perm[i]
        return perm

    @property
    def P(self) -> NDArray[np.floating[Any]]:
        """Permutation matrix with A == P @ L @ U."""
        return np.eye(self.n)[self.permutation].T

    @property
    def permutation_sign(self) -> float:
        """Determinant of P: +1.0 for an even number of interchanges, else -1.0."""
        swaps = int(np.count_nonzero(self.piv != np.arange(self.n)))
        return -1.0 if swaps % 2 else 1.0

    def determinant(self) -> float:
        """Determinant of the factorized matrix (0.0 if singular)."""
        return self.permutation_sign * float(np.prod(np.diag(self.lu)))


def _raise_singular(zero_pivot: int, matrix_name: str) -> None:
    raise SingularMatrixError(
        f"{matrix_name} is singular: pivot {zero_pivot} of its LU "
        f"factorization is exactly zero",
        matrix_name=matrix_name,
        pivot_index=zero_pivot,
        condition_number=float(np.inf),
    )


def lu_cpu(
    A: NDArray[np.floating[Any]],
    check_singular: bool,
    matrix_name: str = 'A',
) -> LUResult:
    """
    LU decomposition with partial pivoting using LAPACK dgetrf (via SciPy).

    Args:
        A: Square matrix to decompose (n x n). Not modified.
        check_singular: If True, raise SingularMatrixError on a zero pivot
        matrix_name: Name used in error messages

    Returns:
        LUResult with packed factors and pivots

    Raises:
        SingularMatrixError: If A is singular and check_singular=True
    """
    lu, piv, info = lapack.dgetrf(A, overwrite_a=False)
    if info < 0:
        raise ValueError(f"dgetrf: illegal value in argument {-info}")

    zero_pivot = info - 1 if info > 0 else None
    if check_singular and zero_pivot is not None:
        _raise_singular(zero_pivot, matrix_name)

    return LUResult(lu=lu, piv=piv, zero_pivot=zero_pivot)


def lu_inverse_cpu(
    factors: LUResult,
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Inverse from LU factors using LAPACK dgetri.

    Args:
        factors: Result of lu_cpu
        matrix_name: Name used in error messages

    Returns:
        A⁻¹ (n x n)

    Raises:
        SingularMatrixError: If the factors contain a zero pivot
    """
    if factors.zero_pivot is not None:
        _raise_singular(factors.zero_pivot, matrix_name)

    inv, info = lapack.dgetri(factors.lu, factors.piv)
    if info < 0:
        raise ValueError(f"dgetri: illegal value in argument {-info}")
    if info > 0:
        _raise_singular(info - 1, matrix_name)
    return np.ascontiguousarray(inv)


def lu_solve_cpu(
    factors: LUResult,
    B: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Solve A @ X = B from LU factors of A using LAPACK dgetrs.

    Args:
        factors: Result of lu_cpu for A
        B: Right-hand side (n x k)
        matrix_name: Name used in error messages

    Returns:
        X (n x k)

    Raises:
        SingularMatrixError: If the factors contain a zero pivot
    """
    if factors.zero_pivot is not None:
        _raise_singular(factors.zero_pivot, matrix_name)

    X, info = lapack.dgetrs(factors.lu, factors.piv, B)
    if info < 0:
        raise ValueError(f"dgetrs: illegal value in argument {-info}")
    return np.ascontiguousarray(X)


def lu_gpu(
    A: 'torch.Tensor',
    check_singular: bool,
    matrix_name: str = 'A',
) -> tuple['torch.Tensor', 'torch.Tensor', LUResult]:
    """
    LU decomposition using PyTorch (GPU-accelerated).

    Args:
        A: Square tensor (n x n), must already be on desired device
        check_singular: If True, raise SingularMatrixError on a zero pivot
        matrix_name: Name used in error messages

    Returns:
        (LU tensor, pivots tensor, LUResult). The tensors stay on the
        device for follow-up solves; the LUResult holds NumPy copies with
        pivots converted to the 0-based convention of lu_cpu.
    """
    import torch

    LU, pivots, info = torch.linalg.lu_factor_ex(A)
    info_value = int(info.item())

    zero_pivot = info_value - 1 if info_value > 0 else None
    if check_singular and zero_pivot is not None:
        _raise_singular(zero_pivot, matrix_name)

    result = LUResult(
        lu=LU.cpu().numpy(),
        piv=(pivots - 1).cpu().numpy().astype(np.int32),
        zero_pivot=zero_pivot,
    )
    return LU, pivots, result


def lu_solve_gpu(
    A: 'torch.Tensor',
    B: 'torch.Tensor',
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Solve A @ X = B via LU on the GPU.

    Args:
        A: Square tensor (n x n), on GPU
        B: Right-hand side tensor (n x k), on the same device

    Returns:
        X as NumPy array (n x k)

    Raises:
        SingularMatrixError: If A is singular
    """
    import torch

    LU, pivots, _ = lu_gpu(A, check_singular=True, matrix_name=matrix_name)
    X = torch.linalg.lu_solve(LU, pivots, B)
    return X.cpu().numpy()


def lu_inverse_gpu(
    A: 'torch.Tensor',
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Inverse via LU on the GPU: solves A @ X = I.

    Raises:
        SingularMatrixError: If A is singular
    """
    import torch

    eye = torch.eye(A.shape[0], dtype=A.dtype, device=A.device)
    return lu_solve_gpu(A, eye, matrix_name=matrix_name)
