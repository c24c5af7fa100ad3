"""
Input validation utilities for pyschur.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every check runs before any
output buffer is written.

Design principles:
    - No silent type coercion (except integer -> float64)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyschur.core.exceptions import ValidationError, DimensionError, PrecisionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a real floating numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects object,
    non-numeric and complex dtypes. Integer and boolean-free numeric input
    is promoted to float64; float32 and float64 are kept as they are.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with real floating dtype
        
    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real matrices are supported"
        )

    if result.dtype not in (np.float32, np.float64):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is a square matrix.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is not 2D or not square
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {array.shape}"
        )


def check_buffer(
    buffer: Any,
    shape: tuple[int, ...],
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Verify a caller-supplied output buffer can be written in place.
    
    Args:
        buffer: The candidate output array
        shape: Required shape
        name: Parameter name for error messages
        
    Returns:
        The buffer itself (never a copy)
        
    Raises:
        DimensionError: If buffer is not an ndarray of the required shape
        ValidationError: If buffer is read-only or not real floating point
    """
    if not isinstance(buffer, np.ndarray):
        raise DimensionError(
            f"{name}: expected numpy.ndarray output buffer, got {type(buffer).__name__}"
        )
    if buffer.shape != shape:
        raise DimensionError(
            f"{name}: expected buffer of shape {shape}, got {buffer.shape}"
        )
    if buffer.dtype not in (np.float32, np.float64):
        raise ValidationError(
            f"{name}: output buffer dtype {buffer.dtype}, expected float32 or float64"
        )
    if not buffer.flags.writeable:
        raise ValidationError(f"{name}: output buffer is read-only")
    return buffer


def check_precision(precision: Any, name: str = 'precision') -> float:
    """
    Verify a deflation precision is a finite non-negative number.
    
    Args:
        precision: Candidate precision
        name: Parameter name for error messages
        
    Returns:
        The precision as a Python float
        
    Raises:
        PrecisionError: If precision is negative, NaN, infinite or not a number
    """
    try:
        value = float(precision)
    except (TypeError, ValueError) as e:
        raise PrecisionError(
            f"{name}: expected a real number, got {precision!r}"
        ) from e
    if math.isnan(value) or math.isinf(value):
        raise PrecisionError(f"{name}: must be finite, got {value}", value=value)
    if value < 0:
        raise PrecisionError(f"{name}: must be non-negative, got {value}", value=value)
    return value


def check_max_iterations(max_iterations: Any, name: str = 'max_iterations') -> int:
    """
    Verify an iteration budget is a positive integer.
    
    Raises:
        PrecisionError: If the budget is not a positive integer
    """
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, (int, np.integer)):
        raise PrecisionError(
            f"{name}: expected a positive integer, got {max_iterations!r}"
        )
    if max_iterations < 1:
        raise PrecisionError(
            f"{name}: must be at least 1, got {max_iterations}",
            value=float(max_iterations),
        )
    return int(max_iterations)
