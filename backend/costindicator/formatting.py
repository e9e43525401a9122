"""Formatting helpers for displaying rates and cost ranges.

Renders amounts the way the calculator shows them, e.g. '$375,000' for
en-NZ / NZD with no decimals. Only a handful of currencies and locales are
known; anything else falls back to the currency code and English
separators.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from pydantic import BaseModel, ConfigDict, Field

PLACEHOLDER = "—"
RANGE_SEPARATOR = " – "

_DECIMAL_PRECISION = 400

_CURRENCY_SYMBOLS: dict[str, str] = {
    "NZD": "$",
    "AUD": "$",
    "USD": "$",
    "CAD": "$",
    "GBP": "£",
    "EUR": "€",
}

# language -> (group separator, decimal separator)
_LOCALE_SEPARATORS: dict[str, tuple[str, str]] = {
    "en": (",", "."),
    "de": (".", ","),
    "nl": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "pt": (".", ","),
    "fr": ("\u202f", ","),
}


class CurrencyFormat(BaseModel):
    """Currency display options."""

    model_config = ConfigDict(frozen=True)

    locale: str = "en-NZ"
    currency: str = "NZD"
    decimals: int = Field(default=0, ge=0, le=6)

    @property
    def symbol(self) -> str:
        code = self.currency.upper()
        return _CURRENCY_SYMBOLS.get(code, f"{code} ")

    @property
    def separators(self) -> tuple[str, str]:
        language = self.locale.replace("_", "-").split("-")[0].lower()
        return _LOCALE_SEPARATORS.get(language, _LOCALE_SEPARATORS["en"])


DEFAULT_CURRENCY_FORMAT = CurrencyFormat()


def format_currency(
    amount: float, fmt: CurrencyFormat = DEFAULT_CURRENCY_FORMAT
) -> str:
    """Format an amount as currency, rounding half up to ``fmt.decimals``."""
    if not math.isfinite(amount):
        return PLACEHOLDER
    with localcontext() as ctx:
        # a float can need 309 integer digits; the default 28 is not enough
        ctx.prec = _DECIMAL_PRECISION
        quantum = Decimal(1).scaleb(-fmt.decimals)
        rounded = Decimal(repr(float(amount))).quantize(
            quantum, rounding=ROUND_HALF_UP
        )
        sign = "-" if rounded < 0 else ""
        grouped = f"{abs(rounded):,.{fmt.decimals}f}"

    group_sep, decimal_sep = fmt.separators
    grouped = grouped.replace(",", "\0").replace(".", decimal_sep)
    grouped = grouped.replace("\0", group_sep)
    return f"{sign}{fmt.symbol}{grouped}"


def format_range(
    low: float, high: float, fmt: CurrencyFormat = DEFAULT_CURRENCY_FORMAT
) -> str:
    """Format a low/high pair as '$X – $Y'."""
    return f"{format_currency(low, fmt)}{RANGE_SEPARATOR}{format_currency(high, fmt)}"
