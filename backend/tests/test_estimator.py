"""Tests for area parsing and cost range computation."""

from __future__ import annotations

import pytest

from costindicator.estimator import estimate, parse_area
from costindicator.models.estimate import CostRange, RatePair

PAIR = RatePair(low=2000, high=3500)


class TestParseArea:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("120", 120.0),
            ("120.5", 120.5),
            (" 85 ", 85.0),
            ("0.5", 0.5),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("+42", 42.0),
        ],
    )
    def test_valid(self, text: str, expected: float) -> None:
        assert parse_area(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "0", "0.0", "-5", "abc", "NaN", "nan", "Infinity", "inf",
         "1e999", "12abc", "1_000", "1,000", None],
    )
    def test_invalid(self, text: str | None) -> None:
        assert parse_area(text) is None


class TestEstimate:
    def test_totals(self) -> None:
        assert estimate(PAIR, "120") == CostRange(
            rate_low=2000, rate_high=3500, total_low=240_000, total_high=420_000
        )

    @pytest.mark.parametrize("text", ["", "0", "-5", "abc", "NaN"])
    def test_invalid_area_is_absent(self, text: str) -> None:
        assert estimate(PAIR, text) is None

    def test_no_rates_is_absent(self) -> None:
        assert estimate(None, "120") is None

    def test_no_rounding(self) -> None:
        result = estimate(RatePair(low=2500.5, high=4000.25), "10.1")
        assert result is not None
        assert result.total_low == pytest.approx(25255.05)
        assert result.total_high == pytest.approx(40402.525)

    def test_inverted_rates_not_reordered(self) -> None:
        result = estimate(RatePair(low=4000, high=2500), "2")
        assert result is not None
        assert (result.total_low, result.total_high) == (8000, 5000)

    def test_format_shows_totals(self) -> None:
        result = estimate(PAIR, "120")
        assert f"{result}" == "240,000 – 420,000"
