"""
Shared compute infrastructure for PyMatrix.

This module provides hardware detection, precision utilities, tolerance
tiers, and the linear algebra kernels the Matrix backends call into.

IMPORTANT: This is NOT where the Matrix backends live. Those go in
pymatrix/matrix/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    device: Hardware detection and device selection
    precision: Numerical precision constants and utilities
    tolerances: Tolerance tiers for numerical comparison
    linalg: Linear algebra kernels (LU)
"""

from pymatrix.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
]
