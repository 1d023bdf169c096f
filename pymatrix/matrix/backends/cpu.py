"""
CPU backend for the Matrix kernels.

Reference implementation: BLAS dgemm (through NumPy matmul) for products,
LAPACK getrf/getri/getrs (through SciPy) for everything LU-based. All
arithmetic is float64.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_inverse_cpu,
    lu_solve_cpu,
)


class CPUMatrixBackend:
    """
    CPU backend for dense float64 linear algebra.

    Stateless; safe to share between calls.
    """

    @property
    def name(self) -> str:
        return 'cpu_fp64'

    def matmul(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """a @ b via BLAS dgemm."""
        return np.matmul(a, b)

    def lu(self, a: NDArray[np.floating[Any]]) -> LUResult:
        """LU factors of a; singular matrices are reported, not rejected."""
        return lu_cpu(a, check_singular=False)

    def inverse(self, a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """a⁻¹ via dgetrf + dgetri."""
        factors = lu_cpu(a, check_singular=True)
        return lu_inverse_cpu(factors)

    def solve(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """x with a @ x = b via dgetrf + dgetrs."""
        factors = lu_cpu(a, check_singular=True)
        return lu_solve_cpu(factors, b)
