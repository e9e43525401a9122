"""Construction cost indicator: regional cost-range estimates.

Usage::

    from costindicator import create_session

    session = create_session()
    await session.start()
    session.select_region("wellington")
    session.set_area_text("150")
    session.view().total_range_text  # '$375,000 – $600,000'
"""

from costindicator.catalog import list_regions
from costindicator.data.repository import PricingRepository
from costindicator.estimator import estimate, parse_area
from costindicator.exceptions import (
    CostIndicatorError,
    PricingFormatError,
    PricingLoadError,
    SessionStateError,
)
from costindicator.factory import create_default_repository, create_session
from costindicator.formatting import CurrencyFormat, format_currency, format_range
from costindicator.models.enums import Category, LoadStatus
from costindicator.models.estimate import CostRange, RatePair, RegionOption
from costindicator.models.pricing import (
    FALLBACK_REGION_KEY,
    PricingTable,
    RegionRates,
)
from costindicator.models.view import EstimatorView
from costindicator.rates import CATEGORY_RATE_FIELDS, select_rates
from costindicator.session import EstimatorSession

__all__ = [
    "CATEGORY_RATE_FIELDS",
    "FALLBACK_REGION_KEY",
    "Category",
    "CostIndicatorError",
    "CostRange",
    "CurrencyFormat",
    "EstimatorSession",
    "EstimatorView",
    "LoadStatus",
    "PricingFormatError",
    "PricingLoadError",
    "PricingRepository",
    "PricingTable",
    "RatePair",
    "RegionOption",
    "RegionRates",
    "SessionStateError",
    "create_default_repository",
    "create_session",
    "estimate",
    "format_currency",
    "format_range",
    "list_regions",
    "parse_area",
    "select_rates",
]
