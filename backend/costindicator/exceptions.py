"""Custom exception hierarchy for the cost indicator."""

from __future__ import annotations


class CostIndicatorError(Exception):
    """Base exception for all cost indicator errors."""


class PricingLoadError(CostIndicatorError):
    """Raised when the pricing table cannot be loaded.

    ``cause`` is a short human-readable reason suitable for display.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


class PricingFormatError(PricingLoadError):
    """Raised when the pricing payload is not the expected schema."""


class SessionStateError(CostIndicatorError):
    """Raised when an estimator session is used outside its lifecycle."""
