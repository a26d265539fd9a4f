"""
Chunking
========
Named boundary policies for splitting a sequence.

    chunk_bounds(n, size, keep_remainder=True)
        Contiguous chunks of `size`. The trailing n % size samples form a
        shorter final chunk when keep_remainder, and are dropped otherwise.

    phase_matrix(x, period)
        (cycles, period) view of the complete cycles of x. Samples of an
        incomplete trailing cycle are excluded from every phase.
"""

import numpy as np
from typing import List, Tuple

from tsrepr.errors import InvalidArgument


def chunk_bounds(n: int, size: int, keep_remainder: bool = True) -> List[Tuple[int, int]]:
    """
    (start, stop) pairs of consecutive chunks covering range(n).

    Args:
        n: Sequence length.
        size: Chunk length, > 0.
        keep_remainder: Emit the shorter trailing chunk if n % size != 0.
    """
    if size <= 0:
        raise InvalidArgument(f"chunk size must be positive, got {size}")
    n_full = n // size
    bounds = [(i * size, (i + 1) * size) for i in range(n_full)]
    if keep_remainder and n % size:
        bounds.append((n_full * size, n))
    return bounds


def phase_matrix(x: np.ndarray, period: int) -> np.ndarray:
    """
    Reshape the complete cycles of x into rows; column i holds phase i.

    Returns:
        Array of shape (n // period, period).
    """
    if period <= 0:
        raise InvalidArgument(f"period must be positive, got {period}")
    cycles = len(x) // period
    if cycles == 0:
        raise InvalidArgument(
            f"period {period} exceeds sequence length {len(x)}: no complete cycle")
    return x[:cycles * period].reshape(cycles, period)
