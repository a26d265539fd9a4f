"""
Aggregation Functions
=====================
Reductions of a non-empty sequence to one scalar. Used by the block,
cyclic and FeaTrend representations to collapse each block/phase/piece.

Any callable f(np.ndarray) -> float with the same contract can be passed
instead: pure, deterministic, defined for every non-empty input.

Usage:
    from tsrepr.aggregate import resolve_aggregator
    agg = resolve_aggregator('median')
    agg(np.array([1.0, 2.0, 3.0, 4.0]))   → 2.5
"""

import numpy as np
from typing import Callable, Dict, Union

from tsrepr.errors import InvalidArgument

Aggregator = Callable[[np.ndarray], float]


def _values(x) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64).ravel()
    if len(x) == 0:
        raise InvalidArgument("aggregation of an empty sequence")
    return x


def max_agg(x) -> float:
    return float(np.max(_values(x)))


def min_agg(x) -> float:
    return float(np.min(_values(x)))


def mean_agg(x) -> float:
    return float(np.mean(_values(x)))


def sum_agg(x) -> float:
    return float(np.sum(_values(x)))


def median_agg(x) -> float:
    """
    Middle order statistic for odd length, mean of the two middle
    order statistics for even length. Selection via np.partition, O(n).
    """
    x = _values(x)
    n = len(x)
    half = n // 2
    if n % 2 == 1:
        return float(np.partition(x, half)[half])
    part = np.partition(x, [half - 1, half])
    return float((part[half - 1] + part[half]) / 2.0)


AGGREGATORS: Dict[str, Aggregator] = {
    'max': max_agg,
    'min': min_agg,
    'mean': mean_agg,
    'sum': sum_agg,
    'median': median_agg,
}


def resolve_aggregator(agg: Union[str, Aggregator]) -> Aggregator:
    """
    Accept a registered name or a callable, return the callable.

    Raises:
        InvalidArgument: unknown name, or neither a string nor callable.
    """
    if isinstance(agg, str):
        if agg not in AGGREGATORS:
            raise InvalidArgument(
                f"Unknown aggregator: {agg}. Available: {list(AGGREGATORS)}")
        return AGGREGATORS[agg]
    if callable(agg):
        return agg
    raise InvalidArgument(f"Aggregator must be a name or callable, got {type(agg).__name__}")
