"""
Compute backends for the Matrix kernels.

    cpu: NumPy/SciPy (BLAS + LAPACK), the float64 reference
    gpu: PyTorch on CUDA, float64

The GPU backend is imported lazily by the solvers so that torch is only
needed when it is asked for.
"""

from pymatrix.matrix.backends.cpu import CPUMatrixBackend

__all__ = ["CPUMatrixBackend"]
