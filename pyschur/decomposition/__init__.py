"""
Real Schur and Hessenberg decompositions.

Public API:
    schur(A, ...) -> SchurSolution
    hessenberg(A) -> HessenbergSolution
    
schur() is the main entry point. It handles:
    - Input validation
    - Design construction
    - Running the SchurEngine (Hessenberg reduction + Francis QR iteration)
    - Result wrapping

Example:
    >>> from pyschur.decomposition import schur
    >>> result = schur(A)
    >>> T, Q = result
    >>> print(result.eigenvalues)
    >>> print(result.summary())
"""

from pyschur.decomposition.design import SchurDesign
from pyschur.decomposition.solution import (
    HessenbergParams,
    HessenbergSolution,
    SchurParams,
    SchurSolution,
)
from pyschur.decomposition.backends.cpu import CPUHessenbergBackend, SchurEngine
from pyschur.decomposition.solvers import hessenberg, schur

__all__ = [
    "schur",
    "hessenberg",
    "SchurEngine",
    "CPUHessenbergBackend",
    "SchurDesign",
    "SchurSolution",
    "SchurParams",
    "HessenbergSolution",
    "HessenbergParams",
]
