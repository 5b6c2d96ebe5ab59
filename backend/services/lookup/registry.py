"""Lazy resolver registry for the HTTP layer.

Owns one process-wide LookupCache and injects it into each resolver on
first access. Tests build resolvers directly with their own cache instead.
"""

import logging

from config import settings
from services.lookup.base import BaseTableResolver
from services.lookup.cache import LookupCache

logger = logging.getLogger(__name__)

_cache = LookupCache()
_registry: dict[str, BaseTableResolver] = {}


def _create_resolver(name: str) -> BaseTableResolver:
    """Factory: create a resolver by name with deferred imports."""
    if name == "geo":
        from services.lookup.geo import GeoResolver
        return GeoResolver(_cache, settings.data_dir, settings.zip_state_table)
    elif name == "crosswalk":
        from services.lookup.crosswalk import CrosswalkResolver
        return CrosswalkResolver(_cache, settings.data_dir, settings.crosswalk_table)
    elif name == "wage":
        from services.lookup.wage import WageResolver
        return WageResolver(_cache, settings.data_dir, settings.wage_table)
    else:
        raise ValueError(f"Unknown resolver: {name}")


def get_resolver(name: str) -> BaseTableResolver:
    """Get a resolver by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_resolver(name)
        logger.info("Resolver ready: %s", name)
    return _registry[name]


def get_cache() -> LookupCache:
    return _cache


def loaded_tables() -> list[str]:
    """Names of tables currently held in the shared cache."""
    return sorted(k.split(":", 1)[1] for k in _cache.keys() if k.startswith("table:"))


def clear() -> None:
    """Drop all resolvers and cached lookups. Useful for testing."""
    _registry.clear()
    _cache.clear()
