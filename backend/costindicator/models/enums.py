"""Enums for the cost indicator domain models."""

from enum import StrEnum


class Category(StrEnum):
    """Building category; selects which rate pair of a region applies."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class LoadStatus(StrEnum):
    """Pricing load status: idle -> loading -> ready | failed."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
