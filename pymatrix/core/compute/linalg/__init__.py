"""
Linear algebra kernels for PyMatrix.

This module provides CPU and GPU implementations of the factorizations the
Matrix type is built on.

All functions follow these conventions:
    - CPU functions use SciPy's LAPACK wrappers (getrf/getri/getrs)
    - GPU functions use PyTorch and return NumPy arrays (data moved to CPU)
    - Factorizations return a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    lu: LU decomposition with partial pivoting, inverse and solve
"""

from pymatrix.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_gpu,
    lu_inverse_cpu,
    lu_inverse_gpu,
    lu_solve_cpu,
    lu_solve_gpu,
)

__all__ = [
    # LU decomposition
    "LUResult",
    "lu_cpu",
    "lu_gpu",
    "lu_inverse_cpu",
    "lu_inverse_gpu",
    "lu_solve_cpu",
    "lu_solve_gpu",
]
