"""Display snapshot of an estimator session."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from costindicator.models.enums import LoadStatus  # noqa: TCH001 (pydantic resolves at runtime)
from costindicator.models.estimate import CostRange, RegionOption  # noqa: TCH001


class EstimatorView(BaseModel):
    """Everything a front end needs to render the calculator card.

    Built from the session state in one pass, so all fields agree with
    each other and with the latest inputs.
    """

    model_config = ConfigDict(frozen=True)

    status: LoadStatus
    loading: bool
    error: str | None = None

    region_options: list[RegionOption]
    selected_region_key: str
    region_selection_enabled: bool
    region_placeholder: str

    area_text: str
    is_commercial: bool
    inputs_enabled: bool

    selected_region_title: str | None = None
    rate_range_text: str | None = None
    total_range_text: str
    cost_range: CostRange | None = None

    message: str | None = None
    disclaimer: str | None = None
