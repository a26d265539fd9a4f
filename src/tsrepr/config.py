"""
tsrepr Configuration
====================
Defaults for feature extraction, normalisation and batch computation.
Single source of truth. Every module reads its defaults from here.

Usage:
    from tsrepr.config import CONFIG, get
    pieces = CONFIG['features']['pieces']
    workers = get('matrix.workers')
"""

import os

CONFIG = {

    # =================================================================
    # Run-based features (FeaTrend / FeaClipTrend)
    # =================================================================
    'features': {
        'pieces': 2,
        'order': 4,
        'default_agg': 'max',
    },

    # =================================================================
    # Normalisation (applied per row by repr_matrix)
    # =================================================================
    'normalize': {
        'default': 'z',
        # Spread below this is treated as a constant series
        'eps': 1e-12,
    },

    # =================================================================
    # Batch computation
    # =================================================================
    'matrix': {
        # Set TSREPR_WORKERS=N for N-way threaded rows, default = 1
        'workers': int(os.environ.get('TSREPR_WORKERS', '0')) or 1,
    },

    # =================================================================
    # Long-format observation frames
    # =================================================================
    'frame': {
        'signal_col': 'signal_id',
        'index_col': 'signal_0',
        'value_col': 'value',
    },

    # =================================================================
    # Representation registry
    # =================================================================
    'registry': {
        'config_dir': 'repr_configs',
    },
}


def get(path: str, default=None):
    """
    Get a config value by dot-separated path.

    Usage:
        get('features.order')     → 4
        get('frame.value_col')    → 'value'
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val
