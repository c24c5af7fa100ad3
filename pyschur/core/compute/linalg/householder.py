"""
Householder reflectors.

A reflector H = I - 2 v v' built from a vector x maps x onto a multiple of
the first unit vector, zeroing every entry below the first. The Hessenberg
reduction and the Schur QR iteration both work by building a reflector from
a short column segment and applying it in place to row and column blocks of
the working matrices.

Blocks are numpy views into the caller's matrix (basic slicing), so
reflect_left/reflect_right modify the backing storage directly.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyschur.core.exceptions import DimensionError, NumericalError


class Reflector:
    """
    Householder reflector of length k.
    
    Construction:
        Reflector(x)   # x is a 1D array-like of length k >= 1
        
    The reflector vector is v = x + sign(x[0]) * ||x|| * e1, normalized, and
    the image of x is -sign(x[0]) * ||x|| * e1 (sign(0) taken as +1).
    
    When x[1:] is already zero there is nothing to eliminate and the
    reflector is the identity. This covers the zero vector, so exact-zero
    subdiagonal segments are well defined.
    
    Example:
        >>> r = Reflector(H[i + 1:, i])
        >>> r.reflect_left(H[i + 1:, :])
        >>> r.reflect_right(H[:, i + 1:])
    """
    
    def __init__(self, x: ArrayLike):
        x = np.asarray(x)
        if x.ndim == 2 and x.shape[1] == 1:
            x = x[:, 0]
        if x.ndim != 1 or x.shape[0] == 0:
            raise DimensionError(
                f"x: expected non-empty 1D vector, got shape {x.shape}"
            )
        if not np.issubdtype(x.dtype, np.floating):
            x = x.astype(np.float64)
        
        self._length = x.shape[0]
        self._v: NDArray[np.floating[Any]] | None = None
        
        if self._length == 1 or not np.any(x[1:]):
            return
        
        norm = np.linalg.norm(x)
        if not np.isfinite(norm):
            raise NumericalError(
                f"reflector input has non-finite norm {norm} (overflow or NaN)"
            )
        v = x.copy()
        v[0] += np.copysign(norm, x[0]) if x[0] != 0 else norm
        self._v = v / np.linalg.norm(v)
    
    # === Properties ===
    
    @property
    def length(self) -> int:
        """Number of rows (or columns) the reflector acts on."""
        return self._length
    
    @property
    def is_identity(self) -> bool:
        """True when the input already had a zero tail."""
        return self._v is None
    
    @property
    def vector(self) -> NDArray[np.floating[Any]] | None:
        """Unit reflector vector v, or None for the identity."""
        return self._v
    
    def as_matrix(self) -> NDArray[np.floating[Any]]:
        """Dense k x k matrix I - 2 v v'."""
        H = np.eye(self._length)
        if self._v is not None:
            H = H - 2.0 * np.outer(self._v, self._v)
        return H
    
    # === In-place application ===
    
    def reflect_left(self, block: NDArray[np.floating[Any]]) -> None:
        """
        Premultiply a block in place: block <- H @ block.
        
        Args:
            block: View with exactly `length` rows
            
        Raises:
            DimensionError: If block does not have `length` rows
        """
        if block.ndim != 2 or block.shape[0] != self._length:
            raise DimensionError(
                f"block: expected {self._length} rows, got shape {block.shape}"
            )
        if self._v is None:
            return
        block -= 2.0 * np.outer(self._v, self._v @ block)
    
    def reflect_right(self, block: NDArray[np.floating[Any]]) -> None:
        """
        Postmultiply a block in place: block <- block @ H.
        
        Args:
            block: View with exactly `length` columns
            
        Raises:
            DimensionError: If block does not have `length` columns
        """
        if block.ndim != 2 or block.shape[1] != self._length:
            raise DimensionError(
                f"block: expected {self._length} columns, got shape {block.shape}"
            )
        if self._v is None:
            return
        block -= 2.0 * np.outer(block @ self._v, self._v)
    
    def __repr__(self) -> str:
        return f"Reflector(length={self._length}, identity={self.is_identity})"
