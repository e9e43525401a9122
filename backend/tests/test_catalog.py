"""Tests for the region catalog ordering."""

from __future__ import annotations

import itertools

import pytest

from conftest import NZ_PAYLOAD, region
from costindicator.catalog import list_regions, title_sort_key
from costindicator.models.estimate import RegionOption
from costindicator.models.pricing import FALLBACK_REGION_KEY, PricingTable


class TestListRegions:
    def test_alphabetical_with_fallback_last(self, nz_table: PricingTable) -> None:
        titles = [option.title for option in list_regions(nz_table)]
        # 'Aotearoa' would sort first, but it is the fallback region
        assert titles == [
            "Auckland",
            "Christchurch",
            "Queenstown",
            "Wellington",
            "Aotearoa",
        ]

    def test_options_carry_keys(self, nz_table: PricingTable) -> None:
        options = list_regions(nz_table)
        assert options[0] == RegionOption(key="auckland", title="Auckland")
        assert options[-1].key == FALLBACK_REGION_KEY

    def test_order_independent_of_insertion_order(self) -> None:
        entries = list(NZ_PAYLOAD.items())
        expected = list_regions(PricingTable.from_payload(NZ_PAYLOAD))
        for permutation in itertools.permutations(entries):
            table = PricingTable.from_payload(dict(permutation))
            assert list_regions(table) == expected

    def test_without_fallback(self) -> None:
        table = PricingTable.from_payload(
            {"b": region("Hamilton"), "a": region("Dunedin")}
        )
        assert [o.key for o in list_regions(table)] == ["a", "b"]

    def test_only_fallback(self) -> None:
        table = PricingTable.from_payload({FALLBACK_REGION_KEY: region("New Zealand")})
        assert list_regions(table) == [
            RegionOption(key=FALLBACK_REGION_KEY, title="New Zealand")
        ]

    @pytest.mark.parametrize("table", [None, PricingTable.from_payload({})])
    def test_absent_or_empty_table(self, table: PricingTable | None) -> None:
        assert list_regions(table) == []

    def test_sorted_by_title_not_key(self) -> None:
        table = PricingTable.from_payload(
            {"zz": region("Ashburton"), "aa": region("Westport")}
        )
        assert [o.title for o in list_regions(table)] == ["Ashburton", "Westport"]


class TestTitleCollation:
    def test_case_insensitive(self) -> None:
        titles = ["nelson", "Auckland", "Masterton"]
        assert sorted(titles, key=title_sort_key) == ["Auckland", "Masterton", "nelson"]

    def test_macrons_sort_with_base_letter(self) -> None:
        titles = ["Paraparaumu", "Ōtaki", "Oamaru"]
        assert sorted(titles, key=title_sort_key) == ["Oamaru", "Ōtaki", "Paraparaumu"]
