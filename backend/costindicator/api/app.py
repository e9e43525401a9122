"""FastAPI application: serves the pricing asset to calculator clients.

All estimation happens client-side; this app only hosts the pricing file
(never cached) and a health check.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from costindicator.config import PRICING_ASSET_ROUTE, Settings
from costindicator.data.repository import NO_CACHE_HEADERS, PricingRepository
from costindicator.exceptions import PricingLoadError

if TYPE_CHECKING:
    from costindicator.models.pricing import PricingTable

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def create_app(*, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings (e.g. tests pointing at a temporary pricing
        file). Read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    app = FastAPI(title="Construction Cost Indicator", version=VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.settings = settings

    def _load_table() -> PricingTable:
        # Re-read on every request so edits to the file show up immediately
        return PricingRepository.from_file(app.state.settings.pricing_path)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": VERSION}

    # ------------------------------------------------------------------
    # GET /assets/bciPricing.json
    # ------------------------------------------------------------------

    @app.get(PRICING_ASSET_ROUTE)
    def pricing_asset() -> JSONResponse:
        try:
            table = _load_table()
        except PricingLoadError as exc:
            logger.exception("Pricing asset unavailable")
            raise HTTPException(status_code=503, detail=exc.cause) from exc

        content: dict[str, Any] = table.model_dump(mode="json", by_alias=True)
        return JSONResponse(content=content, headers=NO_CACHE_HEADERS)

    return app
