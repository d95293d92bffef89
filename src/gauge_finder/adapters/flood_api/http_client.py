"""HTTP client for the flood-monitoring API.

API Documentation: https://environment.data.gov.uk/flood-monitoring/doc/reference
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp

from gauge_finder.adapters.api_request_logger import log_api_request
from gauge_finder.adapters.flood_api.constants import (
    DEFAULT_HEADERS,
    FLOOD_API_BASE_URL,
    STATIONS_PATH,
)
from gauge_finder.domain.errors import RemoteFetchError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class FloodApiHttpClient:
    """HTTP client for the /id/stations endpoints.

    Returns raw station items; turning them into Station objects is the
    repository's job.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = FLOOD_API_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API root, without trailing slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def list_stations(self, params: Mapping[str, str | int | float]) -> list[dict[str, Any]]:
        """Fetch station items from /id/stations.

        Args:
            params: Query parameters, e.g. {"_limit": 10000} or {"lat": .., "long": .., "dist": ..}.

        Returns:
            List of raw station items, in the order the API returned them.

        Raises:
            RemoteFetchError: On transport failure, a non-200 status or an unexpected body.
        """
        url = f"{self._base_url}{STATIONS_PATH}"
        data = await self._get_json(url, params)
        if data is None:
            raise RemoteFetchError(f"Station list not found at {url}", status_code=404)
        return self._extract_items(data, url)

    async def get_station(self, notation: str) -> list[dict[str, Any]]:
        """Fetch a single station from /id/stations/{notation}.

        Returns:
            The station's items (normally one), or an empty list if the API knows no such station.

        Raises:
            RemoteFetchError: On transport failure, an error status or an unexpected body.
        """
        url = f"{self._base_url}{STATIONS_PATH}/{quote(notation, safe='')}"
        data = await self._get_json(url)
        if data is None:
            return []
        return self._extract_items(data, url)

    async def _get_json(
        self, url: str, params: Mapping[str, str | int | float] | None = None
    ) -> Any | None:
        """GET a URL and decode its JSON body; None for 404."""
        if not self._session:
            raise RemoteFetchError("No HTTP session available for the flood-monitoring API")

        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(
                url,
                params=dict(params) if params else None,
                headers=DEFAULT_HEADERS,
                timeout=self._timeout,
            ) as response:
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error fetching {url}: {e!r}")
            raise RemoteFetchError(f"Error fetching {url}: {e!r}") from e

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any | None:
        if response.status == 404:
            logger.debug(f"Flood API returned 404 for {url}")
            return None
        if response.status != 200:
            response_text = await response.text()
            logger.warning(f"Flood API returned status {response.status}: {response_text[:200]}")
            raise RemoteFetchError(
                f"Flood API returned status {response.status} for {url}",
                status_code=response.status,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise RemoteFetchError(f"Flood API returned invalid JSON for {url}") from e

    @staticmethod
    def _extract_items(data: Any, url: str) -> list[dict[str, Any]]:
        """Pull station items out of a response body.

        List endpoints return {"items": [...]}, single-station endpoints {"items": {...}}.
        """
        items = data.get("items") if isinstance(data, dict) else None
        if isinstance(items, dict):
            return [items]
        if isinstance(items, list):
            return [item for item in items if isinstance(item, dict)]
        raise RemoteFetchError(f"Unexpected response body from {url}")
