"""Pricing data layer for the cost indicator."""

from costindicator.data.repository import NO_CACHE_HEADERS, PricingRepository

__all__ = [
    "NO_CACHE_HEADERS",
    "PricingRepository",
]
