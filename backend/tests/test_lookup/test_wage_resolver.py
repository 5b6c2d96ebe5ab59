"""Tests for SOC + state wage lookup and its two cache policies."""

from unittest.mock import patch

import pytest

from models.schemas.occupation import WageDistribution
from services.lookup import wage as wage_module
from services.lookup.wage import WageResolver, heuristic_wage


class TestHeuristic:
    def test_tech_soc_gets_higher_base(self):
        assert heuristic_wage("15-1299.00") == WageDistribution(median=75000, p25=60000, p75=93750)

    def test_other_soc_base(self):
        assert heuristic_wage("47-2061.00") == WageDistribution(median=60000, p25=48000, p75=75000)


class TestTableTier:
    def test_table_row(self, wage):
        result = wage.resolve("15-1232.00", "CA")
        assert result == WageDistribution(median=72820, p25=55210, p75=94130)

    def test_table_hit_cached_by_soc_and_state(self, wage, cache):
        wage.resolve("15-1232.00", "CA", "Los Angeles")
        assert isinstance(cache.get("wage:15-1232.00:CA"), WageDistribution)

    def test_metro_not_part_of_lookup(self, wage):
        assert wage.resolve("15-1232.00", "MS", "Jackson") == wage.resolve("15-1232.00", "MS")

    def test_cache_hit_skips_table(self, wage, cache):
        cached = WageDistribution(median=1, p25=1, p75=1)
        cache.set("wage:15-1232.00:CA", cached)
        with patch.object(WageResolver, "load_table") as load:
            assert wage.resolve("15-1232.00", "CA") == cached
        load.assert_not_called()

    def test_returned_wage_is_a_copy(self, wage, cache):
        first = wage.resolve("15-1232.00", "CA")
        first.median = 1
        assert cache.get("wage:15-1232.00:CA").median == 72820
        assert wage.resolve("15-1232.00", "CA").median == 72820

    def test_non_numeric_fields_coerce_to_zero(self, cache, write_table):
        data_dir = write_table("w.csv", "soc,state,median,p25,p75\n15-1232.00,CA,n/a,,50000\n")
        resolver = WageResolver(cache, data_dir, "w.csv")
        assert resolver.resolve("15-1232.00", "CA") == WageDistribution(median=0, p25=0, p75=50000)


class TestHeuristicTier:
    def test_missing_row_uses_heuristic(self, wage):
        assert wage.resolve("15-9999.00", "CA").median == 75000

    def test_heuristic_results_never_cached(self, wage, cache):
        with patch.object(wage_module, "heuristic_wage", wraps=heuristic_wage) as spy:
            first = wage.resolve("99-9999.00", "CA")
            second = wage.resolve("99-9999.00", "CA")

        assert spy.call_count == 2
        assert first == second
        assert "wage:99-9999.00:CA" not in cache

    def test_missing_table_uses_heuristic(self, cache, tmp_path):
        resolver = WageResolver(cache, tmp_path, "missing.csv")
        assert resolver.resolve("15-1232.00", "CA").median == 75000
        assert len(cache) == 0

    @pytest.mark.parametrize("soc, state, median", [("", "CA", 60000), ("15-1232.00", "", 75000)])
    def test_blank_inputs_fall_back_to_heuristic(self, wage, cache, soc, state, median):
        assert wage.resolve(soc, state).median == median
        assert f"wage:{soc}:{state}" not in cache
