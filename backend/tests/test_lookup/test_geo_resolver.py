"""Tests for ZIP -> state/metro resolution."""

import pytest

from models.schemas.occupation import GeoLocation
from services.lookup.geo import GeoResolver, resolve_by_range


class TestRangeFallback:
    @pytest.mark.parametrize(
        "zip_number, state, metro",
        [
            (90210, "CA", "Los Angeles"),
            (39201, "MS", "Jackson"),
            (33101, "FL", None),
            (10001, "NY", None),
            (20500, "DC", None),
            (22201, "VA", None),
            (77001, "TX", "Houston"),
        ],
    )
    def test_known_ranges(self, zip_number, state, metro):
        assert resolve_by_range(zip_number) == GeoLocation(state=state, metro=metro)

    def test_range_bounds_are_inclusive(self):
        assert resolve_by_range(90000).state == "CA"
        assert resolve_by_range(96199).state == "CA"
        assert resolve_by_range(96200) is None

    def test_unmapped_zip(self):
        assert resolve_by_range(60601) is None


class TestGeoResolver:
    def test_bundled_ranges_for_regression_zips(self, geo):
        assert geo.resolve("90210").state == "CA"
        assert geo.resolve("39201").state == "MS"

    def test_table_hit_has_no_metro(self, geo):
        # 60601 is only in the table, not in any range
        assert geo.resolve("60601") == GeoLocation(state="IL")

    def test_table_takes_priority_over_range(self, cache, write_table):
        data_dir = write_table("zips.csv", "zip,state\n90210,NV\n")
        resolver = GeoResolver(cache, data_dir, "zips.csv")
        assert resolver.resolve("90210") == GeoLocation(state="NV")

    def test_only_first_five_characters_used(self, geo):
        assert geo.resolve("90210-1234").state == "CA"

    @pytest.mark.parametrize("zip_code", ["", "abcde", "ZIP90", "  "])
    def test_non_numeric_returns_none(self, geo, zip_code):
        assert geo.resolve(zip_code) is None

    def test_unmapped_zip_returns_none(self, geo):
        assert geo.resolve("59001") is None

    def test_missing_table_falls_back_to_ranges(self, cache, tmp_path):
        resolver = GeoResolver(cache, tmp_path, "missing.csv")
        assert resolver.resolve("39201") == GeoLocation(state="MS", metro="Jackson")
        assert resolver.resolve("60601") is None
        assert len(cache) == 0

    def test_table_loaded_into_cache_once(self, geo, cache):
        geo.resolve("10001")
        assert "table:zip_state" in cache
        table = cache.get("table:zip_state")
        geo.resolve("20001")
        assert cache.get("table:zip_state") is table
