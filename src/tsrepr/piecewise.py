"""
Piecewise Representations
=========================
Block and cyclic reductions of a series with a pluggable aggregator.

    block_aggregate(x, q, agg)
        PAA. One value per block of q samples; a shorter final block
        holding the n % q leftover samples is aggregated too.

    cyclic_aggregate(x, freq, agg)
        Seasonal profile. One value per phase of a cycle of length freq,
        aggregated over the complete cycles only.

Usage:
    from tsrepr.piecewise import block_aggregate, cyclic_aggregate
    block_aggregate(np.random.randn(11), 2, 'mean')       # 6 values
    cyclic_aggregate(np.random.randn(48 * 10), 48, 'median')  # 48 values
"""

import numpy as np
from typing import Union

from tsrepr.aggregate import Aggregator, resolve_aggregator
from tsrepr.checks import as_sequence, require_positive_int
from tsrepr.chunking import chunk_bounds, phase_matrix
from tsrepr.errors import InvalidArgument


def block_aggregate(x, q: int, agg: Union[str, Aggregator]) -> np.ndarray:
    """
    Piecewise Aggregate Approximation.

    Args:
        x: 1D sequence, length n.
        q: Block length, 1 <= q <= n.
        agg: Aggregator name or callable.

    Returns:
        float64 array of length ceil(n / q), in block order.
    """
    x = as_sequence(x)
    q = require_positive_int(q, 'q')
    func = resolve_aggregator(agg)
    if q > len(x):
        raise InvalidArgument(f"q must be <= len(x) = {len(x)}, got {q}")

    bounds = chunk_bounds(len(x), q, keep_remainder=True)
    return np.array([func(x[start:stop].copy()) for start, stop in bounds],
                    dtype=np.float64)


def cyclic_aggregate(x, freq: int, agg: Union[str, Aggregator]) -> np.ndarray:
    """
    Seasonal profile over complete cycles.

    Samples at index >= (n // freq) * freq belong to an incomplete
    trailing cycle and are excluded from every phase.

    Args:
        x: 1D sequence, length n.
        freq: Cycle length, 1 <= freq <= n.
        agg: Aggregator name or callable.

    Returns:
        float64 array of length freq.
    """
    x = as_sequence(x)
    freq = require_positive_int(freq, 'freq')
    func = resolve_aggregator(agg)

    cycles = phase_matrix(x, freq)
    return np.array([func(cycles[:, i].copy()) for i in range(freq)],
                    dtype=np.float64)
