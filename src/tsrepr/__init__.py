"""
tsrepr: Time Series Representations
===================================

Compact fixed- or reduced-length vectors from raw series, for clustering,
indexing and compression.

Core transforms (pure functions, 1D input):

    tsrepr.smooth(x, order)                  moving average, n - order values
    tsrepr.level_encode(x) / trend_encode(x) bit-level encodings
    tsrepr.run_length_encode(x)              [Run(value, length), ...]
    tsrepr.level_features(x)                 FeaClip, 8 values
    tsrepr.trend_features(x, agg, ...)       FeaTrend, 2 * pieces values
    tsrepr.combined_features(x, agg, ...)    FeaClipTrend, 8 + 2 * pieces
    tsrepr.block_aggregate(x, q, agg)        PAA, ceil(n / q) values
    tsrepr.cyclic_aggregate(x, freq, agg)    seasonal profile, freq values

Aggregators: 'max', 'min', 'mean', 'sum', 'median', or any callable.

Batch:
    tsrepr.repr_matrix(X, 'feaclip', normalise=True)
    tsrepr.compute_frame(observations_df, 'paa', q=4)

Registry:
    tsrepr.get_registry()
        → Registry of YAML-configured representations, lazily loaded.
"""

__version__ = '0.1.0'

from tsrepr.aggregate import (
    AGGREGATORS, max_agg, min_agg, mean_agg, sum_agg, median_agg,
    resolve_aggregator,
)
from tsrepr.encoding import level_encode, trend_encode
from tsrepr.errors import ReprError, InvalidArgument, NumericPrecondition
from tsrepr.features import level_features, trend_features, combined_features
from tsrepr.frame import compute_frame
from tsrepr.matrix import repr_matrix, repr_windowing
from tsrepr.normalize import norm_z, norm_min_max, denorm_z, denorm_min_max
from tsrepr.piecewise import block_aggregate, cyclic_aggregate
from tsrepr.registry import get_registry, Registry
from tsrepr.rle import Run, run_length_encode, expand_runs, split_run_lengths
from tsrepr.smoothing import smooth
