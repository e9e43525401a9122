"""Factory functions for creating pre-configured repositories and sessions."""

from __future__ import annotations

from costindicator.config import Settings
from costindicator.data.repository import PricingRepository
from costindicator.session import EstimatorSession


def create_default_repository(settings: Settings | None = None) -> PricingRepository:
    """Create a PricingRepository pointed at the configured pricing URL."""
    settings = settings or Settings.from_env()
    return PricingRepository(
        settings.pricing_url,
        timeout=settings.fetch_timeout_seconds,
    )


def create_session(settings: Settings | None = None) -> EstimatorSession:
    """Create an EstimatorSession wired to the configured repository.

    The session still has to be started::

        session = create_session()
        await session.start()
    """
    settings = settings or Settings.from_env()
    return EstimatorSession(
        create_default_repository(settings),
        currency=settings.currency,
    )
