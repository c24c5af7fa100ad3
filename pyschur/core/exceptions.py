"""
Exception hierarchy for pyschur.

All exceptions inherit from PySchurError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Preconditions are checked before any output buffer is written
"""


class PySchurError(Exception):
    """Base exception for all pyschur errors."""
    pass


class ValidationError(PySchurError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when a matrix is not square, an output buffer has the wrong
    shape, or a block handed to a reflector does not match its length.
    """
    pass


class PrecisionError(ValidationError):
    """
    Deflation precision or iteration budget is invalid.
    
    Attributes:
        value: The rejected value
    """
    
    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class NumericalError(PySchurError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class ConvergenceError(PySchurError):
    """
    QR iteration failed to converge.
    
    Raised when the deflating QR iteration exhausts its iteration budget
    before the active block shrinks below 2x2.
    
    Attributes:
        iterations: Number of macro-steps completed
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The iteration budget that was exceeded
        active_size: Index of the last unconverged row when iteration stopped
    """
    
    def __init__(
        self, 
        message: str, 
        iterations: int, 
        reason: str | None = None,
        threshold: int | None = None,
        active_size: int | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.reason = reason
        self.threshold = threshold
        self.active_size = active_size
