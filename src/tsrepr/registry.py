"""
Representation Registry
=======================
Auto-discovers representations from YAML configs in repr_configs/.
Each YAML declares: the compute function, default parameters, metadata.

Usage:
    from tsrepr.registry import get_registry
    reg = get_registry()
    func = reg.get_compute('featrend', pieces=4)
    result = func(values)
    # → np.ndarray of length 8
"""

import functools
import importlib
import inspect
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Callable, List, Optional
from dataclasses import dataclass, field

import numpy as np

from tsrepr.config import CONFIG
from tsrepr.errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass
class ReprSpec:
    """Representation specification from YAML config."""
    name: str
    version: str
    function: str
    params: Dict[str, Any] = field(default_factory=dict)
    requires_agg: bool = False
    category: str = 'unknown'
    description: str = ''


class Registry:
    """
    Representation registry. Discovers representations from YAML configs.
    Lazily imports compute functions on first use.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self._specs: Dict[str, ReprSpec] = {}
        self._func_cache: Dict[str, Callable] = {}
        if config_dir is None:
            config_dir = Path(__file__).parent / CONFIG['registry']['config_dir']
        self._discover(Path(config_dir))

    def _discover(self, config_dir: Path):
        """Scan config_dir for YAML files."""
        if not config_dir.exists():
            logger.warning("representation config dir %s does not exist", config_dir)
            return
        for path in sorted(config_dir.glob('*.yaml')):
            name = path.stem
            with open(path) as f:
                cfg = yaml.safe_load(f) or {}
            if 'function' not in cfg:
                raise InvalidArgument(f"{path.name}: missing 'function'")
            meta = cfg.get('metadata', {})
            self._specs[name] = ReprSpec(
                name=name,
                version=str(cfg.get('version', '1.0')),
                function=cfg['function'],
                params=dict(cfg.get('params') or {}),
                requires_agg=bool(cfg.get('requires_agg', False)),
                category=meta.get('category', 'unknown'),
                description=meta.get('description', ''),
            )
        logger.debug("discovered %d representations in %s", len(self._specs), config_dir)

    @property
    def repr_names(self) -> List[str]:
        """All discovered representation names."""
        return list(self._specs.keys())

    def get_spec(self, name: str) -> ReprSpec:
        """Get representation specification."""
        if name not in self._specs:
            raise InvalidArgument(
                f"Unknown representation: {name}. Available: {self.repr_names}")
        return self._specs[name]

    def _function(self, name: str) -> Callable:
        if name in self._func_cache:
            return self._func_cache[name]

        spec = self.get_spec(name)
        module_path, _, attr = spec.function.rpartition('.')
        module = importlib.import_module(module_path)
        func = getattr(module, attr)
        self._func_cache[name] = func
        return func

    def get_compute(self, name: str, **overrides) -> Callable[[Any], np.ndarray]:
        """
        Get compute function for a representation, YAML defaults bound.
        Returns a function: compute(x) → np.ndarray

        Raises:
            InvalidArgument: unknown parameter, or a required parameter
                (declared null in YAML) left unset.
        """
        spec = self.get_spec(name)
        func = self._function(name)

        accepted = set(inspect.signature(func).parameters) - {'x'}
        unknown = set(overrides) - accepted
        if unknown:
            raise InvalidArgument(
                f"{name}: unknown parameter(s) {sorted(unknown)}. Accepted: {sorted(accepted)}")

        params = {**spec.params, **overrides}
        missing = [k for k, v in params.items() if v is None]
        if missing:
            raise InvalidArgument(f"{name}: parameter(s) {missing} must be set")

        return functools.partial(func, **params)

    def compute(self, name: str, x, **overrides) -> np.ndarray:
        """Compute one representation of x."""
        return self.get_compute(name, **overrides)(x)

    def output_names(self, name: str, length: int) -> List[str]:
        """Column names for a representation of the given length."""
        self.get_spec(name)
        return [f'{name}_{i}' for i in range(length)]

    def by_category(self) -> Dict[str, List[str]]:
        """
        Group representations by metadata category.
        Returns {category: [names]}.
        """
        groups: Dict[str, List[str]] = {}
        for name, spec in self._specs.items():
            groups.setdefault(spec.category, []).append(name)
        return groups


# Module-level singleton
_registry: Optional[Registry] = None


def get_registry() -> Registry:
    """Get or create the global representation registry."""
    global _registry
    if _registry is None:
        _registry = Registry()
    return _registry
