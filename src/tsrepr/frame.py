"""
Frame Adapter
=============
Representations for every signal of a long-format observations frame.

Input (long format, one row per observation):
    signal_id | signal_0 | value

Output (wide format, one row per signal):
    signal_id | {repr}_0 | {repr}_1 | ...

Signals whose representations are shorter than others (e.g. PAA over
signals of different length) are padded with nulls.

Usage:
    import polars as pl
    from tsrepr.frame import compute_frame

    obs = pl.read_parquet('observations.parquet')
    wide = compute_frame(obs, 'feacliptrend', pieces=4)
"""

import logging
import numpy as np
import polars as pl
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Union

from tsrepr.config import CONFIG
from tsrepr.errors import InvalidArgument, ReprError
from tsrepr.matrix import ReprFunc, bind_representation

logger = logging.getLogger(__name__)


def compute_frame(
    observations: Union[pl.DataFrame, pl.LazyFrame],
    representation: ReprFunc,
    signal_col: Optional[str] = None,
    index_col: Optional[str] = None,
    value_col: Optional[str] = None,
    workers: Optional[int] = None,
    **params,
) -> pl.DataFrame:
    """
    Compute one representation per signal.

    Args:
        observations: Long-format frame (or lazy frame).
        representation: Registry name or callable f(x, **params).
        signal_col: Signal id column. Default CONFIG['frame']['signal_col'].
        index_col: Ordering column. Default CONFIG['frame']['index_col'].
        value_col: Value column. Default CONFIG['frame']['value_col'].
        workers: Thread count for signals. None = CONFIG['matrix']['workers'].
        **params: Passed to the representation.

    Returns:
        Wide DataFrame sorted by signal id.
    """
    signal_col = signal_col or CONFIG['frame']['signal_col']
    index_col = index_col or CONFIG['frame']['index_col']
    value_col = value_col or CONFIG['frame']['value_col']
    if workers is None:
        workers = CONFIG['matrix']['workers']

    if isinstance(observations, pl.LazyFrame):
        observations = observations.collect()

    missing = [c for c in (signal_col, index_col, value_col) if c not in observations.columns]
    if missing:
        raise InvalidArgument(
            f"observations missing column(s) {missing}. Found: {observations.columns}")

    compute = bind_representation(representation, params)
    prefix = representation if isinstance(representation, str) else getattr(
        representation, '__name__', 'repr')

    grouped = (
        observations
        .sort([signal_col, index_col])
        .group_by(signal_col, maintain_order=True)
        .agg(pl.col(value_col))
    )
    signals = grouped[signal_col].to_list()
    series = grouped[value_col].to_list()

    logger.debug("compute_frame: %s over %d signals", prefix, len(signals))

    def one_signal(k: int) -> Dict[str, Any]:
        signal_id = signals[k]
        try:
            values = np.asarray(compute(series[k]), dtype=np.float64).ravel()
        except ReprError as e:
            raise type(e)(f"signal {signal_id}: {e}") from e
        row = {signal_col: signal_id}
        for i, v in enumerate(values):
            row[f'{prefix}_{i}'] = float(v)
        return row

    if workers > 1 and len(signals) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rows: List[Dict[str, Any]] = list(pool.map(one_signal, range(len(signals))))
    else:
        rows = [one_signal(k) for k in range(len(signals))]

    if not rows:
        return pl.DataFrame({signal_col: []}, schema={signal_col: observations.schema[signal_col]})

    return pl.from_dicts(rows, infer_schema_length=None)
