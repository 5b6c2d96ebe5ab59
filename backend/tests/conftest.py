"""Shared test configuration, pytest markers and lookup fixtures."""

from pathlib import Path

import pytest

from config import settings
from services.lookup.cache import LookupCache
from services.lookup.crosswalk import CrosswalkResolver
from services.lookup.geo import GeoResolver
from services.lookup.wage import WageResolver

BUNDLED_DATA = Path(settings.data_dir)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "bundled_data: reads the tables shipped in backend/data"
    )


@pytest.fixture
def cache():
    """A fresh cache per test so lookups never leak between tests."""
    return LookupCache()


@pytest.fixture
def geo(cache):
    return GeoResolver(cache, BUNDLED_DATA, settings.zip_state_table)


@pytest.fixture
def crosswalk(cache):
    return CrosswalkResolver(cache, BUNDLED_DATA, settings.crosswalk_table)


@pytest.fixture
def wage(cache):
    return WageResolver(cache, BUNDLED_DATA, settings.wage_table)


@pytest.fixture
def write_table(tmp_path):
    """Write a delimited table into tmp_path and return its directory."""

    def _write(name: str, text: str) -> Path:
        (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return _write
