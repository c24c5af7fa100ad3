"""
Shift selection for the implicit double-shift QR iteration.

Both shifts are expressed as the (trace, determinant) pair of a 2x2 matrix
whose eigenvalues are the two shifts, so complex-conjugate shifts never
need complex arithmetic.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def francis_shift(H: NDArray[np.floating[Any]], hi: int) -> tuple[float, float]:
    """Trace and determinant of the trailing 2x2 corner H[hi-1:hi+1, hi-1:hi+1]."""
    a = H[hi - 1, hi - 1]
    b = H[hi - 1, hi]
    c = H[hi, hi - 1]
    d = H[hi, hi]
    return float(a + d), float(a * d - b * c)


def exceptional_shift(H: NDArray[np.floating[Any]], hi: int) -> tuple[float, float]:
    """
    Ad hoc shift used when the window stagnates (LAPACK xLAHQR constants).
    
    Built from s = |H[hi, hi-1]| + |H[hi-1, hi-2]| as the shifts of
    [[0.75 s + H[hi, hi], -0.4375 s], [s, 0.75 s + H[hi, hi]]].
    """
    s = abs(H[hi, hi - 1]) + abs(H[hi - 1, hi - 2])
    h11 = 0.75 * s + H[hi, hi]
    return float(2.0 * h11), float(h11 * h11 + 0.4375 * s * s)


def seed_column(
    H: NDArray[np.floating[Any]],
    lo: int,
    trace: float,
    det: float,
) -> NDArray[np.floating[Any]]:
    """
    First column of (M^2 - trace*M + det*I) for the leading corner M at row lo.
    
    Only three entries are nonzero because M is upper Hessenberg. The column
    is rescaled by its largest entry, which leaves the reflector unchanged.
    """
    h00 = H[lo, lo]
    h01 = H[lo, lo + 1]
    h10 = H[lo + 1, lo]
    h11 = H[lo + 1, lo + 1]
    h21 = H[lo + 2, lo + 1]
    x = np.array([
        h00 * h00 + h01 * h10 - trace * h00 + det,
        h10 * (h00 + h11 - trace),
        h10 * h21,
    ], dtype=H.dtype)
    scale = np.max(np.abs(x))
    if scale > 0:
        x /= scale
    return x
