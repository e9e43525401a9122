"""Interaction state for one calculator session.

The session owns the only mutable state: the pricing load status, the
loaded table, and the three user inputs (region key, area text, category).
Rate pairs and cost ranges are never stored; every accessor recomputes
them from the current inputs, so a reader can never observe a cost range
from an earlier region/category/area combination.

Typical use::

    session = EstimatorSession(repository)
    await session.start()
    session.select_region("wellington")
    session.set_area_text("150")
    session.cost_range  # CostRange(total_low=375000.0, ...)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from costindicator.catalog import list_regions
from costindicator.estimator import estimate
from costindicator.exceptions import PricingLoadError, SessionStateError
from costindicator.formatting import (
    DEFAULT_CURRENCY_FORMAT,
    PLACEHOLDER,
    format_range,
)
from costindicator.models.enums import Category, LoadStatus
from costindicator.models.view import EstimatorView
from costindicator.rates import select_rates

if TYPE_CHECKING:
    from collections.abc import Callable

    from costindicator.formatting import CurrencyFormat
    from costindicator.models.estimate import CostRange, RatePair, RegionOption
    from costindicator.models.pricing import PricingTable, RegionRates

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading pricing..."
PROMPT_MESSAGE = "Select a region and enter details to see cost range"
LOADING_REGIONS_PLACEHOLDER = "Loading regions..."
SELECT_REGION_PLACEHOLDER = "Select a region"
DISCLAIMER = (
    "This is an estimate based on internal research and actual costs may vary "
    "based on your plan-specifics and finishing requirements."
)


class PricingSource(Protocol):
    async def load(self) -> PricingTable: ...


class EstimatorSession:
    """Holds user selections and derives rates and cost ranges from them.

    Args:
        repository: Where the pricing table is loaded from on ``start()``.
        currency: Display options for rates and totals.
    """

    def __init__(
        self,
        repository: PricingSource,
        *,
        currency: CurrencyFormat = DEFAULT_CURRENCY_FORMAT,
    ) -> None:
        self._repository = repository
        self._currency = currency

        self._status = LoadStatus.IDLE
        self._error: str | None = None
        self._table: PricingTable | None = None

        self._region_key = ""
        self._area_text = ""
        self._category = Category.RESIDENTIAL

        self._alive = True
        self._listeners: list[Callable[[EstimatorView], None]] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Load pricing once: idle -> loading -> ready | failed.

        Load failures are recorded on the session, never raised. If the
        session is closed before the load finishes, the result is dropped.

        Raises:
            SessionStateError: If the session was already started or closed.
        """
        self._ensure_alive()
        if self._status is not LoadStatus.IDLE:
            msg = f"Session already started (status: {self._status})"
            raise SessionStateError(msg)

        self._status = LoadStatus.LOADING
        self._notify()

        try:
            table = await self._repository.load()
        except PricingLoadError as exc:
            if self._alive:
                logger.warning("Pricing load failed: %s", exc.cause)
                self._fail(exc.cause)
            return
        except Exception as exc:
            if self._alive:
                logger.exception("Unexpected error while loading pricing")
                self._fail(str(exc) or "Unknown error")
            return

        if not self._alive:
            logger.debug("Session closed before pricing loaded; result dropped")
            return
        self._table = table
        self._status = LoadStatus.READY
        self._notify()

    def close(self) -> None:
        """End the session. Pending loads will not touch state afterwards."""
        self._alive = False
        self._listeners.clear()

    @property
    def closed(self) -> bool:
        return not self._alive

    def subscribe(
        self, listener: Callable[[EstimatorView], None]
    ) -> Callable[[], None]:
        """Call ``listener`` with a fresh view after every state change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def table(self) -> PricingTable | None:
        return self._table

    @property
    def region_key(self) -> str:
        return self._region_key

    @property
    def area_text(self) -> str:
        return self._area_text

    @property
    def category(self) -> Category:
        return self._category

    @property
    def is_commercial(self) -> bool:
        return self._category is Category.COMMERCIAL

    # ------------------------------------------------------------------
    # User input
    # ------------------------------------------------------------------

    def select_region(self, key: str) -> None:
        """Select a region by key; an empty key clears the selection.

        Raises:
            SessionStateError: If pricing is not loaded.
        """
        self._ensure_alive()
        if not self.region_selection_enabled:
            msg = f"Region selection is unavailable while pricing is {self._status}"
            raise SessionStateError(msg)
        if key != self._region_key:
            self._region_key = key
            self._notify()

    def set_area_text(self, text: str) -> None:
        self._ensure_alive()
        if text != self._area_text:
            self._area_text = text
            self._notify()

    def set_category(self, category: Category | str) -> None:
        self._ensure_alive()
        category = Category(category)
        if category is not self._category:
            self._category = category
            self._notify()

    def set_commercial(self, commercial: bool) -> None:
        """Toggle between commercial (True) and residential (False)."""
        self.set_category(Category.COMMERCIAL if commercial else Category.RESIDENTIAL)

    # ------------------------------------------------------------------
    # Derived values (recomputed on every access)
    # ------------------------------------------------------------------

    @property
    def loading(self) -> bool:
        return self._status is LoadStatus.LOADING

    @property
    def region_selection_enabled(self) -> bool:
        return self._status is LoadStatus.READY and self._table is not None

    @property
    def inputs_enabled(self) -> bool:
        return self._alive and not self.loading

    @property
    def regions(self) -> list[RegionOption]:
        return list_regions(self._table)

    @property
    def selected_region(self) -> RegionRates | None:
        if self._table is None or not self._region_key:
            return None
        return self._table.get(self._region_key)

    @property
    def rate_pair(self) -> RatePair | None:
        return select_rates(self._table, self._region_key, self._category)

    @property
    def cost_range(self) -> CostRange | None:
        return estimate(self.rate_pair, self._area_text)

    def view(self) -> EstimatorView:
        """Snapshot the session for display."""
        region = self.selected_region
        rate_pair = select_rates(self._table, self._region_key, self._category)
        cost_range = estimate(rate_pair, self._area_text)

        message: str | None = None
        if self.loading:
            message = LOADING_MESSAGE
        elif region is None:
            message = PROMPT_MESSAGE

        return EstimatorView(
            status=self._status,
            loading=self.loading,
            error=self._error,
            region_options=self.regions,
            selected_region_key=self._region_key,
            region_selection_enabled=self.region_selection_enabled,
            region_placeholder=(
                LOADING_REGIONS_PLACEHOLDER
                if self.loading
                else SELECT_REGION_PLACEHOLDER
            ),
            area_text=self._area_text,
            is_commercial=self.is_commercial,
            inputs_enabled=self.inputs_enabled,
            selected_region_title=region.title if region is not None else None,
            rate_range_text=(
                format_range(rate_pair.low, rate_pair.high, self._currency)
                if region is not None and rate_pair is not None
                else None
            ),
            total_range_text=(
                format_range(cost_range.total_low, cost_range.total_high, self._currency)
                if cost_range is not None
                else PLACEHOLDER
            ),
            cost_range=cost_range,
            message=message,
            disclaimer=DISCLAIMER if cost_range is not None else None,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_alive(self) -> None:
        if not self._alive:
            msg = "Session is closed"
            raise SessionStateError(msg)

    def _fail(self, cause: str) -> None:
        self._error = f"Failed to load pricing: {cause}"
        self._status = LoadStatus.FAILED
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.view()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Session listener %r failed", listener)
