"""
Precision defaults and tolerance tiers.

Defines the deflation precision used when the caller does not supply one,
and the accuracy expectations for each working dtype:
- FP64 (reference): backward error a small multiple of n * eps
- FP32: same rule, single-precision epsilon

Used by the Schur engine, the solution self-checks, and the test suite.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np

# Multiple of n * eps allowed for orthogonality and reconstruction residuals.
RESIDUAL_FACTOR = 1000.0

# Macro-steps allowed per unit of max(10, n), as in LAPACK xLAHQR.
ITERATIONS_PER_ROW = 30

# Consecutive macro-steps without a deflation before an exceptional shift.
EXCEPTIONAL_SHIFT_PERIOD = 10


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, LAPACK working accuracy',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='single precision',
)


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select the tolerance tier for a working dtype."""
    if np.dtype(dtype) == np.float32:
        return FP32
    return FP64


def default_precision(dtype: Any) -> float:
    """Deflation precision used when none is configured: machine epsilon."""
    return float(np.finfo(dtype).eps)


def default_max_iterations(n: int) -> int:
    """Total macro-step budget for an n x n matrix."""
    return ITERATIONS_PER_ROW * max(10, n)


def residual_tolerance(n: int, dtype: Any, factor: float = RESIDUAL_FACTOR) -> float:
    """
    Relative residual bound proportional to matrix size times epsilon.
    
    Applies to ||Q'Q - I|| and ||Q T Q' - A|| / ||A|| (Frobenius norms).
    """
    return factor * max(n, 1) * float(np.finfo(dtype).eps)
