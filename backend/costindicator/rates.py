"""Rate selector: resolve a region and category to a rate pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

from costindicator.models.enums import Category
from costindicator.models.estimate import RatePair

if TYPE_CHECKING:
    from costindicator.models.pricing import PricingTable

# Category -> (low field, high field) on RegionRates.
# Adding a category means adding a row here and fields on RegionRates.
CATEGORY_RATE_FIELDS: dict[Category, tuple[str, str]] = {
    Category.COMMERCIAL: ("commercial_low", "commercial_high"),
    Category.RESIDENTIAL: ("residential_low", "residential_high"),
}


def select_rates(
    table: PricingTable | None,
    region_key: str | None,
    category: Category,
) -> RatePair | None:
    """Project the rates for ``category`` out of the selected region.

    Returns None when there is no table, no selection, an unknown region
    key, or a region whose rates for this category are malformed.
    """
    if table is None or not region_key:
        return None

    region = table.get(region_key)
    if region is None:
        return None

    low_field, high_field = CATEGORY_RATE_FIELDS[Category(category)]
    low = getattr(region, low_field)
    high = getattr(region, high_field)
    if low is None or high is None:
        return None
    return RatePair(low=low, high=high)
