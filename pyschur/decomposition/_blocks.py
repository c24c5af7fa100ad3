"""
Diagonal-block handling for real Schur forms.

A real Schur form is quasi-upper-triangular: its diagonal consists of 1x1
blocks (real eigenvalues) and 2x2 blocks, the latter marked by a nonzero
subdiagonal entry. Deflation stores negligible subdiagonals as exact
zeros, so block boundaries are read off exactly.
"""

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyschur.core.compute.linalg.householder import Reflector


def diagonal_blocks(T: NDArray[np.floating[Any]]) -> list[tuple[int, int]]:
    """
    Partition the diagonal into blocks.
    
    Returns:
        List of (start, size) pairs with size 1 or 2, in diagonal order
    """
    n = T.shape[0]
    blocks = []
    i = 0
    while i < n:
        if i < n - 1 and T[i + 1, i] != 0:
            blocks.append((i, 2))
            i += 2
        else:
            blocks.append((i, 1))
            i += 1
    return blocks


def block_eigenvalues(
    a: float, b: float, c: float, d: float
) -> tuple[complex, complex]:
    """Eigenvalues of [[a, b], [c, d]], larger real part first for real pairs."""
    mean = 0.5 * (a + d)
    p = 0.5 * (a - d)
    disc = p * p + b * c
    if disc >= 0:
        root = math.sqrt(disc)
        return complex(mean + root), complex(mean - root)
    root = math.sqrt(-disc)
    return complex(mean, root), complex(mean, -root)


def schur_eigenvalues(T: NDArray[np.floating[Any]]) -> NDArray[np.complexfloating[Any, Any]]:
    """
    Eigenvalues read from the diagonal blocks of a real Schur form.
    
    Returns:
        Complex array of length n in diagonal order; conjugate pairs are
        adjacent with positive imaginary part first.
    """
    eigenvalues = np.empty(T.shape[0], dtype=np.complex128)
    for start, size in diagonal_blocks(T):
        if size == 1:
            eigenvalues[start] = T[start, start]
        else:
            eigenvalues[start:start + 2] = block_eigenvalues(
                float(T[start, start]), float(T[start, start + 1]),
                float(T[start + 1, start]), float(T[start + 1, start + 1]),
            )
    return eigenvalues


def split_real_block(
    T: NDArray[np.floating[Any]],
    Q: NDArray[np.floating[Any]],
    i: int,
) -> bool:
    """
    Triangularize the 2x2 block at (i, i) if its eigenvalues are real.
    
    A length-2 Reflector maps an eigenvector of the block onto e1, which
    zeroes T[i+1, i]. The transform is applied to the full rows and columns
    of T and accumulated into Q.
    
    Returns:
        True if the block was split
    """
    a, b = float(T[i, i]), float(T[i, i + 1])
    c, d = float(T[i + 1, i]), float(T[i + 1, i + 1])
    p = 0.5 * (a - d)
    disc = p * p + b * c
    if disc < 0:
        return False
    
    eigenvalue = d + p + math.copysign(math.sqrt(disc), p)
    candidates = (
        np.array([b, eigenvalue - a]),
        np.array([eigenvalue - d, c]),
    )
    x = max(candidates, key=np.linalg.norm)
    
    reflector = Reflector(x.astype(T.dtype))
    reflector.reflect_left(T[i:i + 2, i:])
    reflector.reflect_right(T[:i + 2, i:i + 2])
    reflector.reflect_right(Q[:, i:i + 2])
    T[i + 1, i] = 0.0
    return True

