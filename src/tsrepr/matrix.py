"""
Batch Representations
=====================
Representations of many series at once, and of consecutive windows of
one long series.

Usage:
    from tsrepr.matrix import repr_matrix, repr_windowing

    # One row per series, z-normalised first
    reprs = repr_matrix(X, 'paa', normalise=True, q=4)

    # Daily seasonal profile per week of half-hourly data
    weekly = repr_windowing(x, 'seas_profile', win_size=48 * 7, freq=48)
"""

import functools
import logging
import numpy as np
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Union

from tsrepr.checks import as_sequence, require_positive_int
from tsrepr.chunking import chunk_bounds
from tsrepr.config import CONFIG
from tsrepr.errors import InvalidArgument, ReprError
from tsrepr.normalize import NORMALIZERS
from tsrepr.registry import get_registry

logger = logging.getLogger(__name__)

ReprFunc = Union[str, Callable[..., Any]]


def bind_representation(func: ReprFunc, params: dict) -> Callable[[np.ndarray], np.ndarray]:
    """Resolve a registry name or callable to f(x) with params bound."""
    if isinstance(func, str):
        return get_registry().get_compute(func, **params)
    if callable(func):
        return functools.partial(func, **params) if params else func
    raise InvalidArgument(
        f"func must be a representation name or callable, got {type(func).__name__}")


def _resolve_norm(func_norm) -> Callable[[np.ndarray], np.ndarray]:
    if isinstance(func_norm, str):
        if func_norm not in NORMALIZERS:
            raise InvalidArgument(
                f"Unknown normalisation: {func_norm}. Available: {list(NORMALIZERS)}")
        return NORMALIZERS[func_norm]
    if callable(func_norm):
        return func_norm
    raise InvalidArgument(
        f"func_norm must be a name or callable, got {type(func_norm).__name__}")


def repr_windowing(x, func: ReprFunc, win_size: int, **params) -> np.ndarray:
    """
    Apply a representation to consecutive non-overlapping windows.

    The trailing len(x) % win_size samples do not fill a window and are
    dropped.

    Args:
        x: 1D sequence.
        func: Registry name or callable f(window, **params).
        win_size: Window length, 1 <= win_size <= len(x).
        **params: Passed to func.

    Returns:
        Concatenation of the per-window representations.
    """
    x = as_sequence(x)
    win_size = require_positive_int(win_size, 'win_size')
    if win_size > len(x):
        raise InvalidArgument(f"win_size must be <= len(x) = {len(x)}, got {win_size}")

    compute = bind_representation(func, params)
    parts = [np.asarray(compute(x[start:stop]), dtype=np.float64).ravel()
             for start, stop in chunk_bounds(len(x), win_size, keep_remainder=False)]
    return np.concatenate(parts)


def repr_matrix(
    X,
    func: ReprFunc,
    normalise: bool = False,
    func_norm: Union[str, Callable] = CONFIG['normalize']['default'],
    windowing: bool = False,
    win_size: Optional[int] = None,
    workers: Optional[int] = None,
    **params,
) -> np.ndarray:
    """
    Compute a representation for every row of a matrix.

    Args:
        X: 2D array, rows = series, columns = time.
        func: Registry name or callable f(x, **params).
        normalise: Normalise each row with func_norm first.
        func_norm: 'z', 'min_max' or a callable.
        windowing: Apply func per window of win_size (see repr_windowing).
        win_size: Window length, required when windowing.
        workers: Thread count for rows. None = CONFIG['matrix']['workers'].
        **params: Passed to func.

    Returns:
        (n_rows, repr_length) float64 array, rows in input order.

    Raises:
        InvalidArgument: X not 2D, or rows yield different lengths.
        ReprError raised for a row propagates with the row index prepended.
    """
    try:
        X = np.asarray(X, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"X: not a numeric matrix ({e})") from e
    if X.ndim != 2:
        raise InvalidArgument(f"X must be 2D, got shape {X.shape}")
    if windowing and win_size is None:
        raise InvalidArgument("win_size is required when windowing=True")

    compute = bind_representation(func, params)
    norm = _resolve_norm(func_norm) if normalise else None
    if workers is None:
        workers = CONFIG['matrix']['workers']

    def one_row(i: int) -> np.ndarray:
        row = X[i]
        try:
            if norm is not None:
                row = norm(row)
            if windowing:
                return repr_windowing(row, compute, win_size)
            return np.asarray(compute(row), dtype=np.float64).ravel()
        except ReprError as e:
            raise type(e)(f"row {i}: {e}") from e

    n_rows = X.shape[0]
    logger.debug("repr_matrix: %d rows, workers=%d", n_rows, workers)

    if workers > 1 and n_rows > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rows: List[np.ndarray] = list(pool.map(one_row, range(n_rows)))
    else:
        rows = [one_row(i) for i in range(n_rows)]

    if not rows:
        return np.empty((0, 0), dtype=np.float64)

    lengths = {len(r) for r in rows}
    if len(lengths) > 1:
        raise InvalidArgument(f"rows produced representations of different lengths: {sorted(lengths)}")

    return np.vstack(rows)
