"""
Core protocols for pyschur.

These define structural interfaces that decomposition backends must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so a
backend only has to look right, not inherit from anything.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pyschur.core.result import Result

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    Each backend takes a validated design and produces a decomposition
    payload wrapped in a Result. Configuration (precision, iteration budget)
    is fixed at construction time, so a backend instance can be reused
    across designs.
    
    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}'
        Examples: 'cpu_francis', 'cpu_householder'
        """
        ...
    
    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the decomposition.
        
        Args:
            design: Validated design
            
        Returns:
            Result envelope containing the payload and metadata
        """
        ...
