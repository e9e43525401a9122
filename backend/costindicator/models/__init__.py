"""Domain models for the cost indicator."""

from costindicator.models.enums import Category, LoadStatus
from costindicator.models.estimate import CostRange, RatePair, RegionOption
from costindicator.models.pricing import (
    FALLBACK_REGION_KEY,
    PricingTable,
    RegionRates,
)
from costindicator.models.view import EstimatorView

__all__ = [
    "FALLBACK_REGION_KEY",
    "Category",
    "CostRange",
    "EstimatorView",
    "LoadStatus",
    "PricingTable",
    "RatePair",
    "RegionOption",
    "RegionRates",
]
