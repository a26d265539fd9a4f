"""
Bit-Level Encodings
===================
Two binary views of a series.

    level_encode(x)   1 where x[i] > mean(x)           (clipping)
    trend_encode(x)   1 where x[i] < x[i+1], a rise     (trending)
"""

import numpy as np

from tsrepr.checks import as_sequence


def level_encode(x) -> np.ndarray:
    """
    Clip a series at its mean.

    Returns:
        int8 array of length n. Values equal to the mean encode as 0.
    """
    x = as_sequence(x, min_length=1)
    return (x > np.mean(x)).astype(np.int8)


def trend_encode(x) -> np.ndarray:
    """
    Mark rising steps between consecutive samples.

    Returns:
        int8 array of length n - 1. Flat and falling steps encode as 0.
    """
    x = as_sequence(x, min_length=2)
    return (x[:-1] < x[1:]).astype(np.int8)
