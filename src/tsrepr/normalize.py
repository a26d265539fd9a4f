"""
Normalisation
=============
Per-series scaling applied before computing representations, so that
series of different magnitude become comparable.

    norm_z(x)          (x - mean) / sd, sample sd (ddof=1)
    norm_min_max(x)    (x - min) / (max - min)

Constant series (spread below CONFIG['normalize']['eps']) map to zeros.
"""

import numpy as np

from tsrepr.checks import as_sequence
from tsrepr.config import CONFIG
from tsrepr.errors import InvalidArgument


def norm_z(x) -> np.ndarray:
    x = as_sequence(x)
    if len(x) < 2:
        return np.zeros_like(x)
    sd = float(np.std(x, ddof=1))
    if sd < CONFIG['normalize']['eps']:
        return np.zeros_like(x)
    return (x - np.mean(x)) / sd


def norm_min_max(x) -> np.ndarray:
    x = as_sequence(x)
    lo, hi = float(np.min(x)), float(np.max(x))
    if hi - lo < CONFIG['normalize']['eps']:
        return np.zeros_like(x)
    return (x - lo) / (hi - lo)


def denorm_z(x, mean: float, sd: float) -> np.ndarray:
    """Inverse of norm_z given the original mean and sd."""
    x = as_sequence(x)
    return x * sd + mean


def denorm_min_max(x, min_: float, max_: float) -> np.ndarray:
    """Inverse of norm_min_max given the original min and max."""
    x = as_sequence(x)
    if max_ < min_:
        raise InvalidArgument(f"max_ ({max_}) < min_ ({min_})")
    return x * (max_ - min_) + min_


NORMALIZERS = {
    'z': norm_z,
    'min_max': norm_min_max,
}
