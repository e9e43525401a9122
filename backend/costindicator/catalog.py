"""Region catalog: the ordered list of selectable regions."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from costindicator.models.estimate import RegionOption
from costindicator.models.pricing import FALLBACK_REGION_KEY

if TYPE_CHECKING:
    from costindicator.models.pricing import PricingTable


def title_sort_key(title: str) -> tuple[str, str]:
    """Collation key for region titles.

    Accents are stripped and case is folded so that 'Ōtaki' sorts with
    'Otaki' and 'auckland' with 'Auckland'; the raw title breaks ties.
    """
    decomposed = unicodedata.normalize("NFKD", title.strip())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), title


def list_regions(table: PricingTable | None) -> list[RegionOption]:
    """List regions alphabetically by title, with the fallback region last."""
    if not table:
        return []

    ordinary = sorted(
        (
            RegionOption(key=key, title=rates.title)
            for key, rates in table.items()
            if key != FALLBACK_REGION_KEY
        ),
        key=lambda option: (*title_sort_key(option.title), option.key),
    )

    fallback = table.get(FALLBACK_REGION_KEY)
    if fallback is not None:
        ordinary.append(RegionOption(key=FALLBACK_REGION_KEY, title=fallback.title))
    return ordinary
