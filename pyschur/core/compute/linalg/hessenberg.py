"""
Orthogonal reduction to upper Hessenberg form.

For each column i = 0 .. n-3 a Reflector built from the segment below the
subdiagonal zeroes entries (i+2:, i). Applying it from both sides keeps the
matrix similar to the input; accumulating it from the right into the
unitary buffer gives Q with Q @ H @ Q' = A.

Single deterministic sweep, no convergence concerns.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyschur.core.exceptions import DimensionError
from pyschur.core.compute.linalg.householder import Reflector


class HessenbergReducer:
    """
    In-place Householder reduction to upper Hessenberg form.
    
    Stateless apart from the reflector count of the last run, so one
    instance can be reused across matrices.
    """
    
    def __init__(self):
        self.n_reflectors = 0
    
    def run(
        self,
        matrix: NDArray[np.floating[Any]],
        unitary: NDArray[np.floating[Any]],
    ) -> None:
        """
        Reduce `matrix` to upper Hessenberg form in place.
        
        `unitary` is reset to the identity and then accumulates every
        reflector, so that unitary @ matrix_out @ unitary.T == matrix_in.
        Entries eliminated below the first subdiagonal are stored as exact
        zeros.
        
        Args:
            matrix: Square (n, n) float array, overwritten with H
            unitary: (n, n) float array, overwritten with Q
            
        Raises:
            DimensionError: If matrix is not square or unitary has the wrong shape
        """
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise DimensionError(
                f"matrix: expected square matrix, got shape {matrix.shape}"
            )
        n = matrix.shape[0]
        if unitary.shape != (n, n):
            raise DimensionError(
                f"unitary: expected shape {(n, n)}, got {unitary.shape}"
            )
        
        unitary[...] = np.eye(n, dtype=unitary.dtype)
        self.n_reflectors = 0
        
        for i in range(n - 2):
            reflector = Reflector(matrix[i + 1:, i])
            if reflector.is_identity:
                continue
            reflector.reflect_left(matrix[i + 1:, :])
            reflector.reflect_right(matrix[:, i + 1:])
            reflector.reflect_right(unitary[:, i + 1:])
            matrix[i + 2:, i] = 0.0
            self.n_reflectors += 1
