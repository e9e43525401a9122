"""Cost estimator: turn a rate pair and an area into a cost range.

Invalid area text is not an error; it means there is no total to show yet.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from costindicator.models.estimate import CostRange

if TYPE_CHECKING:
    from costindicator.models.estimate import RatePair

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_area(text: str | None) -> float | None:
    """Parse area text into a positive, finite number of square metres.

    Only plain decimal literals are accepted; 'NaN', 'Infinity', '1_000'
    and the like are rejected, as are zero and negative values.
    """
    if text is None:
        return None
    candidate = text.strip()
    if not _DECIMAL_RE.fullmatch(candidate):
        return None
    area = float(candidate)
    if not math.isfinite(area) or area <= 0:
        return None
    return area


def estimate(rate_pair: RatePair | None, area_text: str | None) -> CostRange | None:
    """Compute the cost range for an area at the given rates.

    No rounding is applied; formatting is left to the display layer.
    """
    if rate_pair is None:
        return None
    area = parse_area(area_text)
    if area is None:
        return None
    return CostRange(
        rate_low=rate_pair.low,
        rate_high=rate_pair.high,
        total_low=area * rate_pair.low,
        total_high=area * rate_pair.high,
    )
