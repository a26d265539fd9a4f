"""
Run-Based Features
==================
Fixed-length representations built from runs of the bit-level encodings.

    level_features(x)                        FeaClip, 8 values
    trend_features(x, agg, pieces, order)    FeaTrend, 2 * pieces values
    combined_features(x, agg, pieces, order) FeaClipTrend, 8 + 2 * pieces

Usage:
    from tsrepr.features import combined_features
    combined_features(np.random.randn(200), 'max', pieces=4, order=8)
"""

import numpy as np
from typing import Union

from tsrepr.aggregate import Aggregator, resolve_aggregator
from tsrepr.checks import as_sequence, require_positive_int
from tsrepr.chunking import chunk_bounds
from tsrepr.config import CONFIG
from tsrepr.encoding import level_encode, trend_encode
from tsrepr.errors import InvalidArgument
from tsrepr.rle import run_length_encode, split_run_lengths
from tsrepr.smoothing import smooth

LEVEL_FEATURE_NAMES = [
    'max_ones', 'sum_ones', 'max_zeros', 'crossings',
    'first_zeros', 'last_zeros', 'first_ones', 'last_ones',
]


def level_features(x) -> np.ndarray:
    """
    FeaClip: features of the runs in the mean-clipped series.

    Returns:
        float64 array of length 8, ordered as LEVEL_FEATURE_NAMES:
            [0] longest run of 1s
            [1] total length of 1-runs (count of samples above mean)
            [2] longest run of 0s
            [3] number of runs - 1 (level crossings)
            [4] first run length if it is 0s, else 0
            [5] last run length if it is 0s, else 0
            [6] first run length if it is 1s, else 0
            [7] last run length if it is 1s, else 0
        A single run is both first and last.
    """
    x = as_sequence(x)
    runs = run_length_encode(level_encode(x))
    ones, zeros = split_run_lengths(runs)
    first, last = runs[0], runs[-1]

    repr_ = np.zeros(len(LEVEL_FEATURE_NAMES), dtype=np.float64)
    if ones:
        repr_[0] = max(ones)
        repr_[1] = sum(ones)
    if zeros:
        repr_[2] = max(zeros)
    repr_[3] = len(runs) - 1
    repr_[4] = first.length if first.value == 0 else 0
    repr_[5] = last.length if last.value == 0 else 0
    repr_[6] = first.length if first.value == 1 else 0
    repr_[7] = last.length if last.value == 1 else 0
    return repr_


def trend_features(
    x,
    agg: Union[str, Aggregator] = CONFIG['features']['default_agg'],
    pieces: int = CONFIG['features']['pieces'],
    order: int = CONFIG['features']['order'],
) -> np.ndarray:
    """
    FeaTrend: aggregated run lengths of rises and non-rises, per piece.

    The series is smoothed with smooth(x, order), then split into `pieces`
    equal contiguous blocks of len // pieces samples. Samples past
    pieces * (len // pieces) are discarded. Each block is trend-encoded
    and run-length encoded; its run lengths are split into 1-runs and
    0-runs and each group is reduced with `agg` (0 for an empty group).

    Args:
        x: 1D sequence.
        agg: Aggregator name ('max', 'sum', ...) or callable.
            Default CONFIG['features']['default_agg'].
        pieces: Number of blocks, > 0.
        order: Moving-average order, 1 <= order < len(x).

    Returns:
        float64 array of length 2 * pieces:
        [agg(ones_0), agg(zeros_0), agg(ones_1), agg(zeros_1), ...]
    """
    func = resolve_aggregator(agg)
    pieces = require_positive_int(pieces, 'pieces')
    smoothed = smooth(x, order)

    size = len(smoothed) // pieces
    if size < 2:
        raise InvalidArgument(
            f"{len(smoothed)} smoothed values cannot fill {pieces} pieces "
            f"of at least 2 samples (order={order})")

    bounds = chunk_bounds(len(smoothed), size, keep_remainder=False)[:pieces]

    repr_ = np.zeros(2 * pieces, dtype=np.float64)
    for j, (start, stop) in enumerate(bounds):
        runs = run_length_encode(trend_encode(smoothed[start:stop]))
        ones, zeros = split_run_lengths(runs)
        if ones:
            repr_[2 * j] = func(np.asarray(ones, dtype=np.float64))
        if zeros:
            repr_[2 * j + 1] = func(np.asarray(zeros, dtype=np.float64))
    return repr_


def combined_features(
    x,
    agg: Union[str, Aggregator] = CONFIG['features']['default_agg'],
    pieces: int = CONFIG['features']['pieces'],
    order: int = CONFIG['features']['order'],
) -> np.ndarray:
    """FeaClipTrend: level_features(x) followed by trend_features(x, ...)."""
    return np.concatenate([
        level_features(x),
        trend_features(x, agg, pieces=pieces, order=order),
    ])
