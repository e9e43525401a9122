"""Pricing table models: the data contract for the external pricing file.

The pricing file is a JSON object keyed by region id. Each value carries a
display ``title`` and four per-square-metre rates::

    {
        "wellington": {
            "title": "Wellington",
            "p_commercial_low": 3000,
            "p_commercial_high": 5000,
            "p_residential_low": 2500,
            "p_residential_high": 4000
        },
        "generic": {"title": "New Zealand", ...}
    }

A rate that is missing, non-numeric, non-finite or negative is kept as
``None`` so that one bad region never invalidates the whole table; the rate
selector treats such a region as having no rates.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    ValidationError,
    field_validator,
    model_validator,
)

from costindicator.exceptions import PricingFormatError

logger = logging.getLogger(__name__)

FALLBACK_REGION_KEY = "generic"

RATE_FIELDS: tuple[str, ...] = (
    "commercial_low",
    "commercial_high",
    "residential_low",
    "residential_high",
)


def _coerce_rate(value: Any) -> float | None:
    # bool is an int subclass; true/false in the JSON is not a rate
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


class RegionRates(BaseModel):
    """Rates for one region, in currency per square metre."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    commercial_low: float | None = Field(default=None, alias="p_commercial_low")
    commercial_high: float | None = Field(default=None, alias="p_commercial_high")
    residential_low: float | None = Field(default=None, alias="p_residential_low")
    residential_high: float | None = Field(
        default=None, alias="p_residential_high"
    )

    @field_validator(*RATE_FIELDS, mode="before")
    @classmethod
    def malformed_rate_is_absent(cls, v: Any) -> float | None:
        return _coerce_rate(v)

    @property
    def malformed_fields(self) -> list[str]:
        """Names of rate fields that could not be read as valid rates."""
        return [name for name in RATE_FIELDS if getattr(self, name) is None]


class PricingTable(RootModel[dict[str, RegionRates]]):
    """Immutable mapping of region key -> RegionRates."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def regions_are_objects(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            msg = f"Pricing data must be a JSON object, got {type(data).__name__}"
            raise ValueError(msg)
        regions: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, RegionRates):
                regions[key] = value
                continue
            if not isinstance(value, Mapping):
                msg = f"Region '{key}' must be a JSON object"
                raise ValueError(msg)
            region = dict(value)
            if not isinstance(region.get("title"), str):
                region["title"] = key
            regions[key] = region
        return regions

    @classmethod
    def from_payload(cls, payload: Any) -> PricingTable:
        """Build a table from a decoded JSON value.

        Raises:
            PricingFormatError: If the payload is not an object of objects.
        """
        try:
            table = cls.model_validate(payload)
        except ValidationError as exc:
            msg = f"Malformed pricing data: {exc.errors()[0]['msg']}"
            raise PricingFormatError(msg) from exc

        for key, rates in table.items():
            if rates.malformed_fields:
                logger.warning(
                    "Region '%s' has malformed rate fields: %s",
                    key,
                    ", ".join(rates.malformed_fields),
                )
        return table

    @property
    def regions(self) -> Mapping[str, RegionRates]:
        return MappingProxyType(self.root)

    def get(self, key: str) -> RegionRates | None:
        return self.root.get(key)

    def items(self) -> Iterator[tuple[str, RegionRates]]:
        return iter(self.root.items())

    def __getitem__(self, key: str) -> RegionRates:
        return self.root[key]

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
