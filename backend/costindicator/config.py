"""Runtime settings, read from the environment and optional .env files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from costindicator.formatting import CurrencyFormat

_backend_dir = Path(__file__).resolve().parent.parent
_project_root = _backend_dir.parent

BUNDLED_PRICING_PATH = Path(__file__).resolve().parent / "data" / "bciPricing.json"
PRICING_ASSET_ROUTE = "/assets/bciPricing.json"

_ENV_PREFIX = "COSTINDICATOR_"


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{_ENV_PREFIX}{name}", default).strip() or default


def _env_float(name: str, default: float) -> float:
    raw = _env(name, str(default))
    try:
        return float(raw)
    except ValueError:
        msg = f"{_ENV_PREFIX}{name} must be a number, got '{raw}'"
        raise ValueError(msg) from None


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        msg = f"{_ENV_PREFIX}{name} must be an integer, got '{raw}'"
        raise ValueError(msg) from None


@dataclass(frozen=True)
class Settings:
    """Where pricing comes from and how amounts are displayed."""

    pricing_url: str = f"http://localhost:8000{PRICING_ASSET_ROUTE}"
    pricing_path: Path = BUNDLED_PRICING_PATH
    fetch_timeout_seconds: float = 10.0
    currency: CurrencyFormat = field(default_factory=CurrencyFormat)
    cors_origins: tuple[str, ...] = ("http://localhost:3000",)

    @classmethod
    def from_env(cls, *, load_env_files: bool = True) -> Settings:
        """Build settings from ``COSTINDICATOR_*`` environment variables.

        Loads ``.env`` from the project root and ``backend/`` first unless
        ``load_env_files`` is False. Variables already set win.

        Raises:
            ValueError: If a numeric setting cannot be parsed.
        """
        if load_env_files:
            load_dotenv(_project_root / ".env")
            load_dotenv(_backend_dir / ".env")

        defaults = cls()
        currency = CurrencyFormat(
            locale=_env("LOCALE", defaults.currency.locale),
            currency=_env("CURRENCY", defaults.currency.currency),
            decimals=_env_int("CURRENCY_DECIMALS", defaults.currency.decimals),
        )
        origins = _env("CORS_ORIGINS", ",".join(defaults.cors_origins))
        return cls(
            pricing_url=_env("PRICING_URL", defaults.pricing_url),
            pricing_path=Path(_env("PRICING_PATH", str(defaults.pricing_path))),
            fetch_timeout_seconds=_env_float(
                "FETCH_TIMEOUT", defaults.fetch_timeout_seconds
            ),
            currency=currency,
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )
