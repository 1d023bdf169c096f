"""
GPU backend for the Matrix kernels using PyTorch.

Performance path for large matrices, validated against the CPU reference.
CUDA only: every kernel runs in float64 and MPS has no float64 support.
Results are returned as float64 NumPy arrays on the host.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.device import DeviceInfo
from pymatrix.core.compute.linalg.lu import (
    LUResult,
    lu_gpu,
    lu_inverse_gpu,
    lu_solve_gpu,
)


class GPUMatrixBackend:
    """
    GPU backend for dense float64 linear algebra.

    Tensors are moved to the device per call and the result is moved back,
    so the backend holds no matrix state between calls.
    """

    def __init__(self, device: DeviceInfo | None = None):
        """
        Initialize GPU backend.

        Parameters
        ----------
        device : DeviceInfo, optional
            Device info from select_device(). If None, auto-selects a CUDA
            device and falls back to torch's CPU device with a warning.
        """
        import torch

        self._torch = torch
        self.dtype = torch.float64

        if device is not None:
            if device.device_type == 'mps' or not device.supports_fp64:
                raise RuntimeError(
                    f"{device} does not support float64. "
                    f"Use backend='cpu' instead."
                )
            if device.device_type != 'cuda':
                raise ValueError(
                    f"GPUMatrixBackend requires GPU device, got {device.device_type}"
                )
            self.device = torch.device(f'cuda:{device.device_index or 0}')
            self.device_name = device.name
        elif torch.cuda.is_available():
            self.device = torch.device('cuda')
            self.device_name = torch.cuda.get_device_properties(0).name
        else:
            warnings.warn(
                "No CUDA device available for float64 kernels. "
                "Using torch CPU fallback (will be slow).",
                RuntimeWarning,
                stacklevel=2,
            )
            self.device = torch.device('cpu')
            self.device_name = 'cpu'

    @property
    def name(self) -> str:
        return 'gpu_fp64'

    def _to_device(self, array: NDArray[np.floating[Any]]):
        return self._torch.as_tensor(
            np.ascontiguousarray(array), dtype=self.dtype, device=self.device
        )

    def matmul(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        result = self._to_device(a) @ self._to_device(b)
        return result.cpu().numpy()

    def lu(self, a: NDArray[np.floating[Any]]) -> LUResult:
        _, _, result = lu_gpu(self._to_device(a), check_singular=False)
        return result

    def inverse(self, a: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        return lu_inverse_gpu(self._to_device(a))

    def solve(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        return lu_solve_gpu(self._to_device(a), self._to_device(b))
