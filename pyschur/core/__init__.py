"""
Core infrastructure for pyschur.

This module provides shared abstractions and utilities used by the
decomposition package.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, Householder and Hessenberg primitives
"""

from pyschur.core.protocols import Backend
from pyschur.core.result import Result
from pyschur.core.exceptions import (
    PySchurError,
    ValidationError,
    DimensionError,
    PrecisionError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PySchurError",
    "ValidationError",
    "DimensionError",
    "PrecisionError",
    "NumericalError",
    "ConvergenceError",
]
