"""Derived value models: rate pairs, cost ranges and region options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RatePair(BaseModel):
    """Resolved per-square-metre rate bounds for a region and category."""

    model_config = ConfigDict(frozen=True)

    low: float
    high: float


class CostRange(BaseModel):
    """Rate bounds and the matching total cost bounds for an area.

    ``low <= high`` is expected but not enforced; values pass through
    exactly as the pricing table supplies them.
    """

    model_config = ConfigDict(frozen=True)

    rate_low: float
    rate_high: float
    total_low: float
    total_high: float

    def __format__(self, format_spec: str) -> str:
        if format_spec:
            return (
                f"{format(self.total_low, format_spec)} – "
                f"{format(self.total_high, format_spec)}"
            )
        return f"{self.total_low:,.0f} – {self.total_high:,.0f}"


class RegionOption(BaseModel):
    """A selectable region: the key to store and the title to show."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
