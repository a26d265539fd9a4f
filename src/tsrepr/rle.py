"""
Run-Length Encoding
===================
Maximal runs of equal values, as an ordered list of (value, length).

Values are compared with exact equality. The encoder is fed the 0/1
outputs of level_encode / trend_encode, where exactness holds by
construction.

Invariants of the returned run list:
    - lengths sum to len(x)
    - adjacent runs never share a value
    - expand_runs(run_length_encode(x)) reproduces x
"""

import numpy as np
from typing import List, NamedTuple, Tuple

from tsrepr.checks import as_sequence


class Run(NamedTuple):
    value: float
    length: int


def run_length_encode(x) -> List[Run]:
    """
    Encode a non-empty sequence into maximal runs.

    Args:
        x: 1D sequence of values.

    Returns:
        List of Run(value, length), in order of appearance.
    """
    x = as_sequence(x)

    runs = []
    prev = x[0]
    length = 1
    for value in x[1:]:
        if value == prev:
            length += 1
        else:
            runs.append(Run(float(prev), length))
            prev = value
            length = 1
    runs.append(Run(float(prev), length))

    return runs


def expand_runs(runs: List[Run]) -> np.ndarray:
    """Inverse of run_length_encode."""
    if not runs:
        return np.empty(0, dtype=np.float64)
    values = np.array([r.value for r in runs], dtype=np.float64)
    lengths = np.array([r.length for r in runs], dtype=np.int64)
    return np.repeat(values, lengths)


def split_run_lengths(runs: List[Run]) -> Tuple[List[int], List[int]]:
    """
    Partition run lengths of a binary run list by value, in one pass.

    Returns:
        (ones, zeros): lengths of runs with value 1 and value 0,
        each in order of appearance. Either may be empty.
    """
    ones, zeros = [], []
    for run in runs:
        if run.value == 1:
            ones.append(run.length)
        else:
            zeros.append(run.length)
    return ones, zeros
