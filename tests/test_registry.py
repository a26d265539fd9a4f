"""Tests for the representation registry."""

import numpy as np
import pytest

import tsrepr
from tsrepr.errors import InvalidArgument
from tsrepr.features import level_features, trend_features
from tsrepr.registry import Registry, get_registry


class TestRegistry:

    def test_discovers_representations(self):
        reg = get_registry()
        assert set(reg.repr_names) == {
            'sma', 'feaclip', 'featrend', 'feacliptrend', 'paa', 'seas_profile',
        }

    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_get_spec(self):
        spec = get_registry().get_spec('paa')
        assert spec.function == 'tsrepr.piecewise.block_aggregate'
        assert spec.params == {'q': 2, 'agg': 'mean'}
        assert spec.requires_agg is True
        assert spec.category == 'piecewise'

    def test_unknown(self):
        with pytest.raises(InvalidArgument, match='Available'):
            get_registry().get_spec('nonexistent_repr')

    def test_compute_matches_function(self):
        np.random.seed(42)
        x = np.random.randn(100)
        reg = get_registry()
        np.testing.assert_array_equal(reg.compute('feaclip', x), level_features(x))
        np.testing.assert_array_equal(
            reg.compute('featrend', x, pieces=3),
            trend_features(x, 'max', pieces=3, order=4))

    def test_feature_defaults_come_from_config(self):
        from tsrepr.config import CONFIG
        np.random.seed(42)
        x = np.random.randn(80)
        reg = get_registry()
        assert reg.get_spec('featrend').params == {}
        np.testing.assert_array_equal(
            reg.compute('featrend', x),
            trend_features(x, CONFIG['features']['default_agg'],
                           pieces=CONFIG['features']['pieces'],
                           order=CONFIG['features']['order']))

    def test_defaults_bound(self):
        np.random.seed(42)
        x = np.random.randn(40)
        reg = get_registry()
        assert len(reg.compute('feacliptrend', x)) == 12
        assert len(reg.compute('sma', x)) == 36
        assert len(reg.compute('paa', x)) == 20

    def test_required_param(self):
        reg = get_registry()
        with pytest.raises(InvalidArgument, match='freq'):
            reg.get_compute('seas_profile')
        out = reg.compute('seas_profile', np.arange(12.0), freq=4)
        np.testing.assert_allclose(out, [4, 5, 6, 7])

    def test_unknown_param(self):
        with pytest.raises(InvalidArgument, match='unknown parameter'):
            get_registry().get_compute('paa', window=3)

    def test_output_names(self):
        assert get_registry().output_names('paa', 3) == ['paa_0', 'paa_1', 'paa_2']

    def test_by_category(self):
        groups = get_registry().by_category()
        assert sorted(groups['run_features']) == ['feaclip', 'feacliptrend', 'featrend']
        assert sorted(groups['piecewise']) == ['paa', 'seas_profile']

    def test_custom_config_dir(self, tmp_path):
        (tmp_path / 'block_max.yaml').write_text(
            "version: '2.0'\n"
            "function: tsrepr.piecewise.block_aggregate\n"
            "params:\n"
            "  q: 3\n"
            "  agg: max\n"
            "metadata:\n"
            "  category: custom\n"
        )
        reg = Registry(config_dir=tmp_path)
        assert reg.repr_names == ['block_max']
        assert reg.get_spec('block_max').version == '2.0'
        np.testing.assert_array_equal(
            reg.compute('block_max', [1.0, 4.0, 2.0, 0.0, 9.0]), [4.0, 9.0])

    def test_missing_function(self, tmp_path):
        (tmp_path / 'broken.yaml').write_text("version: '1.0'\n")
        with pytest.raises(InvalidArgument):
            Registry(config_dir=tmp_path)

    def test_missing_dir(self, tmp_path):
        reg = Registry(config_dir=tmp_path / 'absent')
        assert reg.repr_names == []

    def test_package_exports(self):
        assert tsrepr.__version__ == '0.1.0'
        assert tsrepr.get_registry() is get_registry()


class TestConfig:

    def test_dotted_get(self):
        from tsrepr.config import get
        assert get('features.order') == 4
        assert get('frame.value_col') == 'value'
        assert get('features.missing', 'fallback') == 'fallback'

    def test_workers_positive(self):
        from tsrepr.config import CONFIG
        assert CONFIG['matrix']['workers'] >= 1
