"""
Public entry points for the decompositions.

This module provides schur() and hessenberg(): validation, design
construction, backend dispatch and result wrapping all happen here.
"""

from numpy.typing import ArrayLike

from pyschur.decomposition.design import SchurDesign
from pyschur.decomposition.solution import HessenbergSolution, SchurSolution
from pyschur.decomposition.backends.cpu import CPUHessenbergBackend, SchurEngine


def schur(
    A: ArrayLike,
    *,
    precision: float | None = None,
    max_iterations: int | None = None,
    standardize: bool = True,
) -> SchurSolution:
    """
    Real Schur decomposition.
    
    Computes A = Q T Q' where Q is orthogonal and T is quasi-upper-triangular:
    1x1 diagonal blocks hold real eigenvalues, 2x2 blocks hold
    complex-conjugate pairs.
    
    Args:
        A: Square real matrix (n x n). Can be any array-like. Integer input
            is promoted to float64; float32 is kept.
        precision: Relative deflation threshold. A subdiagonal entry is
            treated as zero once |h[i,i-1]| <= precision * (|h[i,i]| + |h[i-1,i-1]|).
            Defaults to machine epsilon of the working dtype.
        max_iterations: Total QR macro-step budget. Defaults to 30 * max(10, n).
        standardize: If True, 2x2 blocks whose eigenvalues are real are
            split into two 1x1 blocks as they deflate.
            
    Returns:
        SchurSolution with T, Q, eigenvalues and residual checks
        
    Raises:
        ValidationError: If A is non-numeric, complex or non-finite
        DimensionError: If A is not square
        PrecisionError: If precision is negative or max_iterations < 1
        ConvergenceError: If the QR iteration exhausts its budget
        
    Example:
        >>> import numpy as np
        >>> from pyschur.decomposition import schur
        >>> 
        >>> A = np.array([[0., -1., 0.], [1., 0., 0.], [0., 0., 2.]])
        >>> result = schur(A)
        >>> T, Q = result
        >>> result.eigenvalues
        array([0.+1.j, 0.-1.j, 2.+0.j])
    """
    # Configuration is validated before the input matrix
    engine = SchurEngine(
        precision,
        max_iterations=max_iterations,
        standardize=standardize,
    )
    design = SchurDesign.from_array(A)
    result = engine.solve(design)
    return SchurSolution(_result=result, _design=design)


def hessenberg(A: ArrayLike) -> HessenbergSolution:
    """
    Hessenberg decomposition A = Q H Q'.
    
    H is upper Hessenberg (zero below the first subdiagonal) and Q is
    orthogonal, computed with n - 2 Householder reflectors.
    
    Raises:
        ValidationError: If A is non-numeric, complex or non-finite
        DimensionError: If A is not square
    """
    design = SchurDesign.from_array(A)
    result = CPUHessenbergBackend().solve(design)
    return HessenbergSolution(_result=result, _design=design)
