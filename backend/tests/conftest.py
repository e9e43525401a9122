"""Shared fixtures: sample pricing payloads and an in-memory pricing source."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from costindicator.exceptions import PricingLoadError
from costindicator.models.pricing import PricingTable

WELLINGTON_PAYLOAD: dict[str, Any] = {
    "wellington": {
        "title": "Wellington",
        "p_residential_low": 2500,
        "p_residential_high": 4000,
        "p_commercial_low": 3000,
        "p_commercial_high": 5000,
    },
    "generic": {
        "title": "New Zealand",
        "p_residential_low": 2200,
        "p_residential_high": 3800,
        "p_commercial_low": 2800,
        "p_commercial_high": 4800,
    },
}


def region(
    title: str,
    residential: tuple[Any, Any] = (2000, 3000),
    commercial: tuple[Any, Any] = (2500, 4000),
) -> dict[str, Any]:
    """Build one region entry in the wire format."""
    return {
        "title": title,
        "p_residential_low": residential[0],
        "p_residential_high": residential[1],
        "p_commercial_low": commercial[0],
        "p_commercial_high": commercial[1],
    }


NZ_PAYLOAD: dict[str, Any] = {
    "wellington": region("Wellington", (2500, 4000), (3000, 5000)),
    "generic": region("Aotearoa", (2200, 3800), (2800, 4800)),
    "auckland": region("Auckland", (2800, 4500), (2000, 3500)),
    "queenstown": region("Queenstown", (3200, 5200), (3500, 6000)),
    "christchurch": region("Christchurch", (2400, 3800), (2800, 4700)),
}


class FakePricingSource:
    """Pricing source that returns a table, raises, or waits to be released."""

    def __init__(
        self,
        table: PricingTable | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.table = table
        self.error = error
        self.gate = gate
        self.calls = 0

    async def load(self) -> PricingTable:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        assert self.table is not None
        return self.table


@pytest.fixture()
def wellington_table() -> PricingTable:
    return PricingTable.from_payload(WELLINGTON_PAYLOAD)


@pytest.fixture()
def nz_table() -> PricingTable:
    return PricingTable.from_payload(NZ_PAYLOAD)


@pytest.fixture()
def failing_source() -> FakePricingSource:
    return FakePricingSource(error=PricingLoadError("HTTP 404"))
