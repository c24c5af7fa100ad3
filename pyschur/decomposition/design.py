"""
Schur Design.

Design wraps the validated input matrix. It is the single place where
array-likes are checked and converted; everything downstream trusts it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyschur.core.validation import check_array, check_finite, check_square


@dataclass(frozen=True)
class SchurDesign:
    """
    Square real matrix ready for decomposition.
    
    Immutable after construction. The stored array is a private copy, so
    later changes to the caller's matrix do not leak into a design.
    
    Construction:
        SchurDesign.from_array(A)
    """
    _A: NDArray[np.floating[Any]]
    _n: int
    
    @classmethod
    def from_array(cls, A: ArrayLike) -> SchurDesign:
        """
        Build a design from any square real array-like.
        
        Raises:
            ValidationError: If A is non-numeric, complex, or non-finite
            DimensionError: If A is not a square 2D matrix
        """
        arr = check_array(A, 'A')
        check_square(arr, 'A')
        check_finite(arr, 'A')
        arr = np.array(arr, copy=True)
        arr.flags.writeable = False
        return cls(_A=arr, _n=arr.shape[0])
    
    # === Properties ===
    
    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Input matrix (n x n), read-only."""
        return self._A
    
    @property
    def n(self) -> int:
        """Matrix side length."""
        return self._n
    
    @property
    def dtype(self) -> np.dtype:
        """Working floating dtype."""
        return self._A.dtype
    
    def norm(self) -> float:
        """Frobenius norm of A."""
        return float(np.linalg.norm(self._A))
