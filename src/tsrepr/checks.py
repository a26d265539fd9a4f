"""
Input Checks
============
Precondition checks shared by every public entry point.

Non-finite policy: reject. NaN compares false against everything, so a
single NaN silently flips bits in the level/trend encodings and poisons
every mean. Inputs containing NaN or +/-inf raise NumericPrecondition
before any computation starts.
"""

import numpy as np

from tsrepr.errors import InvalidArgument, NumericPrecondition


def as_sequence(values, min_length: int = 1, name: str = 'x') -> np.ndarray:
    """
    Coerce input to a 1D float64 array and validate it.

    Args:
        values: Anything np.asarray accepts.
        min_length: Minimum number of samples required.
        name: Argument name used in error messages.

    Returns:
        1D float64 array. May share memory with the input; callers never
        write to it.
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"{name}: not a numeric sequence ({e})") from e

    if arr.ndim > 1:
        if sum(d > 1 for d in arr.shape) > 1:
            raise InvalidArgument(f"{name}: expected 1D sequence, got shape {arr.shape}")
        arr = arr.ravel()
    elif arr.ndim == 0:
        arr = arr.reshape(1)

    n = len(arr)
    if n < min_length:
        raise InvalidArgument(
            f"{name}: needs at least {min_length} value(s), got {n}")

    if not np.all(np.isfinite(arr)):
        bad = int(np.sum(~np.isfinite(arr)))
        raise NumericPrecondition(f"{name}: contains {bad} non-finite value(s)")

    return arr


def require_positive_int(value, name: str) -> int:
    """Validate a strictly positive integer parameter."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    value = int(value)
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return value
