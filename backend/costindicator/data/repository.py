"""Pricing repository: loads the pricing table once per session."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from costindicator.exceptions import PricingFormatError, PricingLoadError
from costindicator.models.pricing import PricingTable

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Always revalidate; the pricing file is updated in place.
NO_CACHE_HEADERS: dict[str, str] = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


class PricingRepository:
    """Fetches the pricing JSON over HTTP and parses it into a PricingTable.

    Args:
        url: Location of the pricing file.
        client: Optional shared ``httpx.AsyncClient`` (e.g. tests with a
            ``MockTransport``). When omitted a client is opened per load.
        timeout: Request timeout in seconds for a self-managed client.
    """

    def __init__(
        self,
        url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    async def load(self) -> PricingTable:
        """Fetch and parse the pricing table.

        Raises:
            PricingLoadError: On network failure or a non-success status.
            PricingFormatError: If the body is not the expected JSON shape.
        """
        if self._client is not None:
            payload = await self._fetch(self._client)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                payload = await self._fetch(client)

        table = PricingTable.from_payload(payload)
        logger.info("Loaded pricing for %d regions from %s", len(table), self._url)
        return table

    async def _fetch(self, client: httpx.AsyncClient) -> Any:
        try:
            response = await client.get(self._url, headers=NO_CACHE_HEADERS)
        except httpx.HTTPError as exc:
            msg = f"Network error: {exc}" if str(exc) else "Network error"
            raise PricingLoadError(msg) from exc

        if not response.is_success:
            msg = f"HTTP {response.status_code}"
            raise PricingLoadError(msg)

        try:
            return response.json()
        except ValueError as exc:
            msg = "Pricing data is not valid JSON"
            raise PricingFormatError(msg) from exc

    @staticmethod
    def from_file(path: Path) -> PricingTable:
        """Read the pricing table from a local JSON file.

        Raises:
            PricingLoadError: If the file cannot be read.
            PricingFormatError: If it is not the expected JSON shape.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot read pricing file {path}: {exc.strerror or exc}"
            raise PricingLoadError(msg) from exc

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Pricing file {path} is not valid JSON"
            raise PricingFormatError(msg) from exc
        return PricingTable.from_payload(payload)
