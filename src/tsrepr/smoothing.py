"""Simple moving average (SMA) smoother."""

import numpy as np

from tsrepr.checks import as_sequence, require_positive_int
from tsrepr.errors import InvalidArgument


def smooth(x, order: int) -> np.ndarray:
    """
    Sliding-window mean of width `order`.

    out[i] = mean(x[i : i + order]) for i in [0, n - order).
    Each window is summed after scaling by 1 / order, so partial sums stay
    at the scale of the samples and finite input gives finite output.

    Args:
        x: 1D sequence, length n.
        order: Window width, 1 <= order < n.

    Returns:
        float64 array of length n - order.
    """
    x = as_sequence(x)
    order = require_positive_int(order, 'order')
    n = len(x)
    if order >= n:
        raise InvalidArgument(f"order must be < len(x) = {n}, got {order}")

    windows = np.lib.stride_tricks.sliding_window_view(x, order)[:n - order]
    return np.sum(windows / order, axis=1)
