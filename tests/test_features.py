"""Tests for FeaClip, FeaTrend and FeaClipTrend."""

import numpy as np
import pytest

from tsrepr.encoding import level_encode
from tsrepr.errors import InvalidArgument, NumericPrecondition
from tsrepr.features import (
    LEVEL_FEATURE_NAMES, level_features, trend_features, combined_features,
)
from tsrepr.rle import run_length_encode


class TestLevelFeatures:

    def test_alternating(self):
        # bits 0 1 0 1 0
        repr_ = level_features([1, 4, 2, 5, 3])
        np.testing.assert_array_equal(repr_, [1, 2, 1, 4, 1, 1, 0, 0])

    def test_starts_and_ends_high(self):
        # mean = 19/6, bits 1 1 0 0 0 1
        repr_ = level_features([5, 5, 1, 1, 1, 6])
        np.testing.assert_array_equal(repr_, [2, 3, 3, 2, 0, 0, 2, 1])

    def test_constant_single_run(self):
        # one run of 0s is both first and last
        repr_ = level_features([3.0, 3.0, 3.0, 3.0])
        np.testing.assert_array_equal(repr_, [0, 0, 4, 0, 4, 4, 0, 0])

    def test_crossings_match_run_count(self):
        np.random.seed(42)
        for _ in range(10):
            x = np.random.randn(100)
            n_runs = len(run_length_encode(level_encode(x)))
            assert level_features(x)[3] == n_runs - 1

    def test_sum_ones_counts_above_mean(self):
        np.random.seed(42)
        x = np.random.randn(100)
        assert level_features(x)[1] == np.sum(x > np.mean(x))

    def test_shape_and_names(self):
        repr_ = level_features(np.arange(20.0))
        assert repr_.shape == (8,)
        assert repr_.dtype == np.float64
        assert len(LEVEL_FEATURE_NAMES) == 8

    def test_nan_rejected(self):
        with pytest.raises(NumericPrecondition):
            level_features([1.0, np.nan, 2.0])


class TestTrendFeatures:

    def test_two_pieces(self):
        # order=1 smooths to x[:-1] = [1,2,3,2 | 1,2,3,4]
        x = [1, 2, 3, 2, 1, 2, 3, 4, 5]
        repr_ = trend_features(x, 'max', pieces=2, order=1)
        # piece 0: trend 1 1 0 → ones [2], zeros [1]
        # piece 1: trend 1 1 1 → ones [3], zeros [] → 0
        np.testing.assert_array_equal(repr_, [2, 1, 3, 0])

    def test_one_piece_aggregators(self):
        # trend of [1,2,3,2,1,2,3,4] = 1 1 0 0 1 1 1 → ones [2, 3], zeros [2]
        x = [1, 2, 3, 2, 1, 2, 3, 4, 5]
        np.testing.assert_array_equal(trend_features(x, 'max', pieces=1, order=1), [3, 2])
        np.testing.assert_array_equal(trend_features(x, 'sum', pieces=1, order=1), [5, 2])
        np.testing.assert_allclose(trend_features(x, 'mean', pieces=1, order=1), [2.5, 2])

    def test_remainder_discarded(self):
        # smoothed length 9, pieces 2 → blocks of 4, the 9th value is dropped.
        # Keeping it would extend the last rise run to 4.
        x = [1, 2, 3, 2, 1, 2, 3, 4, 5, 0]
        repr_ = trend_features(x, 'max', pieces=2, order=1)
        np.testing.assert_array_equal(repr_, [2, 1, 3, 0])

    def test_pieces_do_not_share_runs(self):
        # Every piece is a pure rise: no zero-runs anywhere
        x = [1, 2, 3, 1, 2, 3, 1, 2, 3, 9]
        repr_ = trend_features(x, 'sum', pieces=3, order=1)
        np.testing.assert_array_equal(repr_, [2, 0, 2, 0, 2, 0])

    def test_callable_aggregator(self):
        x = [1, 2, 3, 2, 1, 2, 3, 4, 5]
        repr_ = trend_features(x, lambda v: float(len(v)), pieces=1, order=1)
        np.testing.assert_array_equal(repr_, [2, 1])

    def test_defaults(self):
        np.random.seed(42)
        repr_ = trend_features(np.random.randn(50), 'max')
        assert repr_.shape == (4,)
        assert np.all(repr_ >= 0)

    def test_more_pieces(self):
        np.random.seed(42)
        repr_ = trend_features(np.random.randn(200), 'median', pieces=5, order=8)
        assert repr_.shape == (10,)

    def test_invalid_pieces(self):
        with pytest.raises(InvalidArgument):
            trend_features(np.arange(20.0), 'max', pieces=0)

    def test_invalid_order(self):
        with pytest.raises(InvalidArgument):
            trend_features(np.arange(5.0), 'max', pieces=1, order=5)

    def test_degenerate_block(self):
        # 6 - 4 = 2 smoothed values cannot fill 2 pieces with a trend step
        with pytest.raises(InvalidArgument):
            trend_features(np.arange(6.0), 'max', pieces=2, order=4)

    def test_empty_blocks(self):
        # 8 - 4 = 4 smoothed values, 5 pieces → block size 0
        with pytest.raises(InvalidArgument):
            trend_features(np.arange(8.0), 'max', pieces=5, order=4)

    def test_large_finite_values(self):
        x = np.concatenate([np.full(2000, 1e305), np.arange(20.0) * 1e303])
        repr_ = trend_features(x, 'max')
        assert repr_.shape == (4,)
        assert np.all(np.isfinite(repr_))

    def test_default_aggregator(self):
        np.random.seed(42)
        x = np.random.randn(60)
        np.testing.assert_array_equal(trend_features(x), trend_features(x, 'max'))

    def test_nan_rejected(self):
        with pytest.raises(NumericPrecondition):
            trend_features([1.0, 2.0, np.nan, 4.0, 5.0, 6.0, 7.0, 8.0], 'max', order=1)

    def test_unknown_aggregator(self):
        with pytest.raises(InvalidArgument):
            trend_features(np.arange(20.0), 'mode')


class TestCombinedFeatures:

    def test_concatenation(self):
        np.random.seed(42)
        x = np.random.randn(100)
        repr_ = combined_features(x, 'sum', pieces=3, order=4)
        assert repr_.shape == (8 + 6,)
        np.testing.assert_array_equal(repr_[:8], level_features(x))
        np.testing.assert_array_equal(repr_[8:], trend_features(x, 'sum', pieces=3, order=4))

    def test_default_length(self):
        np.random.seed(42)
        assert len(combined_features(np.random.randn(60), 'max')) == 12

    def test_inf_rejected(self):
        x = np.arange(20.0)
        x[7] = -np.inf
        with pytest.raises(NumericPrecondition):
            combined_features(x, 'sum')

    def test_propagates_trend_errors(self):
        with pytest.raises(InvalidArgument):
            combined_features(np.arange(4.0), 'max')
