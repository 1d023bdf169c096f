"""
Core protocols for PyMatrix.

These define structural interfaces that compute backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to provide the right methods, not inherit from anything.

Design Principles:
    - Minimal contracts: prescribe only the kernels the Matrix type needs
    - Backends work on float64 numpy arrays and return float64 numpy arrays
    - Backends are stateless apart from device selection at construction
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Backend(Protocol):
    """
    Protocol for dense linear-algebra backends.

    Arguments have already been validated (shape, squareness) by the
    caller. Backends raise SingularMatrixError themselves because only
    the factorization knows where the zero pivot is.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{precision}'
        Examples: 'cpu_fp64', 'gpu_fp64'
        """
        ...

    def matmul(
        self,
        a: NDArray[np.float64],
        b: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Dense matrix product a @ b."""
        ...

    def inverse(self, a: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Inverse of a square matrix via LU with partial pivoting.

        Raises:
            SingularMatrixError: If a zero pivot is encountered
        """
        ...

    def lu(self, a: NDArray[np.float64]) -> Any:
        """LU factorization returning an LUResult."""
        ...

    def solve(
        self,
        a: NDArray[np.float64],
        b: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """
        Solve a @ x = b for x.

        Raises:
            SingularMatrixError: If a zero pivot is encountered
        """
        ...
