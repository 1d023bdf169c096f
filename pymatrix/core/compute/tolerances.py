"""
Tolerance tiers for numerical validation.

Defines precision expectations for the compute paths:
- CPU FP64 (reference): LAPACK/BLAS double precision
- CPU FP64, ill-conditioned: relaxed for inverses of badly conditioned input
- GPU FP64: same as CPU, CUDA only

Used by allclose() defaults and the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision reference',
)

# CPU reference, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# GPU with FP64 (CUDA)
GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision, matches CPU reference',
)

# Condition number above which results are compared with the
# ill-conditioned tier.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(
    backend_name: str,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a given backend."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    if 'gpu' in backend_name:
        return GPU_FP64
    return CPU_FP64
