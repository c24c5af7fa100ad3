"""
Decomposition solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers.
"""

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pyschur.core.result import Result
from pyschur.core.compute.tolerances import residual_tolerance, select_tolerance

if TYPE_CHECKING:
    from pyschur.decomposition.design import SchurDesign


@dataclass(frozen=True)
class SchurParams:
    """
    Parameter payload for the real Schur decomposition A = Q T Q'.
    
    This is the immutable data computed by backends.
    """
    T: NDArray[np.floating[Any]]
    Q: NDArray[np.floating[Any]]
    eigenvalues: NDArray[np.complexfloating[Any, Any]]
    blocks: tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class HessenbergParams:
    """Parameter payload for the Hessenberg decomposition A = Q H Q'."""
    H: NDArray[np.floating[Any]]
    Q: NDArray[np.floating[Any]]


def _relative_error(approx: NDArray, exact: NDArray, scale: float) -> float:
    err = float(np.linalg.norm(approx - exact))
    return err / scale if scale > 0 else err


def _orthogonality_error(Q: NDArray) -> float:
    return float(np.linalg.norm(Q.T @ Q - np.eye(Q.shape[0])))


@dataclass
class SchurSolution:
    """
    User-facing real Schur decomposition.
    
    Wraps the backend Result and provides accessors for the factors,
    the eigenvalues encoded by the diagonal blocks, and residual checks.
    Iterating yields (T, Q), so `T, Q = schur(A)` works.
    """
    _result: Result[SchurParams]
    _design: 'SchurDesign'
    
    @property
    def T(self) -> NDArray[np.floating[Any]]:
        """Quasi-upper-triangular Schur form."""
        return self._result.params.T
    
    @property
    def Q(self) -> NDArray[np.floating[Any]]:
        """Orthogonal factor."""
        return self._result.params.Q
    
    schur_form = T
    unitary = Q
    
    @property
    def eigenvalues(self) -> NDArray[np.complexfloating[Any, Any]]:
        return self._result.params.eigenvalues
    
    @property
    def blocks(self) -> tuple[tuple[int, int], ...]:
        """(start, size) of each diagonal block."""
        return self._result.params.blocks
    
    @property
    def n(self) -> int:
        return self._design.n
    
    @property
    def iterations(self) -> int:
        return self._result.info['iterations']
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """Q @ T @ Q'."""
        return self.Q @ self.T @ self.Q.T
    
    def reconstruction_error(self) -> float:
        """||Q T Q' - A||_F / ||A||_F (absolute when A is zero)."""
        return _relative_error(self.reconstruct(), self._design.A, self._design.norm())
    
    def orthogonality_error(self) -> float:
        """||Q'Q - I||_F."""
        return _orthogonality_error(self.Q)
    
    def is_quasi_triangular(self) -> bool:
        """
        True if T is zero below the first subdiagonal and its nonzero
        subdiagonal entries are isolated (no two adjacent).
        """
        T = self.T
        if np.any(np.tril(T, -2)):
            return False
        sub = np.diag(T, -1) != 0
        return not np.any(sub[1:] & sub[:-1])
    
    def summary(self) -> str:
        """Generate a text report of the decomposition."""
        tol = residual_tolerance(self.n, self.T.dtype)
        tier = select_tolerance(self.T.dtype)
        lines = [
            "Real Schur Decomposition",
            "=" * 60,
            f"Size: {self.n} x {self.n}",
            f"Working precision: {tier.name} ({tier.description})",
            f"Blocks: {sum(1 for _, s in self.blocks if s == 1)} real, "
            f"{sum(1 for _, s in self.blocks if s == 2)} complex pair",
            f"QR iterations: {self.info.get('iterations', 0)}",
            f"Precision: {self.info.get('precision', float('nan')):.3e}",
            f"Reconstruction error: {self.reconstruction_error():.3e} (tol {tol:.1e})",
            f"Orthogonality error: {self.orthogonality_error():.3e} (tol {tol:.1e})",
            "",
            "Eigenvalues:",
            "-" * 60,
        ]
        
        for (start, size) in self.blocks:
            if size == 1:
                lines.append(f"  λ[{start}]: {self.eigenvalues[start].real:14.6f}")
            else:
                lam = self.eigenvalues[start]
                lines.append(
                    f"  λ[{start}:{start + 2}]: {lam.real:14.6f} ± {abs(lam.imag):.6f}i"
                )
        
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        
        return "\n".join(lines)
    
    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.T, self.Q))
    
    def __repr__(self) -> str:
        return (
            f"SchurSolution(n={self.n}, blocks={len(self.blocks)}, "
            f"iterations={self.info.get('iterations', 0)})"
        )


@dataclass
class HessenbergSolution:
    """User-facing Hessenberg decomposition. Iterating yields (H, Q)."""
    _result: Result[HessenbergParams]
    _design: 'SchurDesign'
    
    @property
    def H(self) -> NDArray[np.floating[Any]]:
        return self._result.params.H
    
    @property
    def Q(self) -> NDArray[np.floating[Any]]:
        return self._result.params.Q
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    def reconstruct(self) -> NDArray[np.floating[Any]]:
        """Q @ H @ Q'."""
        return self.Q @ self.H @ self.Q.T
    
    def reconstruction_error(self) -> float:
        return _relative_error(self.reconstruct(), self._design.A, self._design.norm())
    
    def orthogonality_error(self) -> float:
        return _orthogonality_error(self.Q)
    
    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        return iter((self.H, self.Q))
    
    def __repr__(self) -> str:
        return f"HessenbergSolution(n={self._design.n})"
