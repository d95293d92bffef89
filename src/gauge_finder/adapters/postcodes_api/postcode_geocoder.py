"""postcodes.io geocoder adapter."""

import asyncio
import logging
import re
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError

from gauge_finder.adapters.api_request_logger import log_api_request
from gauge_finder.adapters.postcodes_api.constants import (
    DEFAULT_HEADERS,
    POSTCODES_API_BASE_URL,
    POSTCODES_PATH,
)
from gauge_finder.domain.errors import GeocodeError
from gauge_finder.domain.models.location import GeoPoint
from gauge_finder.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


def normalise_postcode(text: str) -> str:
    """Collapse whitespace and upper-case, e.g. " bs20  7xn " -> "BS20 7XN"."""
    return re.sub(r"\s+", " ", text).strip().upper()


class PostcodeGeocoder(Geocoder):
    """Adapter resolving UK postcodes to WGS84 coordinates via postcodes.io."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = POSTCODES_API_BASE_URL,
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

    async def lookup(self, text: str) -> GeoPoint | None:
        """Resolve a postcode to coordinates.

        Args:
            text: Postcode as typed by the user.

        Returns:
            The postcode's coordinates, or None if it is unknown or has no position.

        Raises:
            GeocodeError: On transport failure or an unexpected response.
        """
        postcode = normalise_postcode(text)
        if not postcode:
            return None
        if not self._session:
            raise GeocodeError("No HTTP session available for postcodes.io")

        url = f"{self._base_url}{POSTCODES_PATH}/{quote(postcode, safe='')}"
        log_api_request("GET", url, headers=DEFAULT_HEADERS)
        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, postcode)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error geocoding postcode {postcode!r}: {e!r}")
            raise GeocodeError(f"Error geocoding postcode {postcode!r}: {e!r}") from e

    async def _handle_response(self, response: "ClientResponse", postcode: str) -> GeoPoint | None:
        if response.status == 404:
            logger.info(f"Postcode {postcode!r} not found")
            return None
        if response.status != 200:
            response_text = await response.text()
            logger.warning(f"postcodes.io returned status {response.status}: {response_text[:200]}")
            raise GeocodeError(f"postcodes.io returned status {response.status}")

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise GeocodeError("postcodes.io returned invalid JSON") from e
        return self._parse_point(data, postcode)

    @staticmethod
    def _parse_point(data: Any, postcode: str) -> GeoPoint | None:
        result = data.get("result") if isinstance(data, dict) else None
        if not isinstance(result, dict):
            raise GeocodeError(f"Unexpected response body for postcode {postcode!r}")

        latitude = result.get("latitude")
        longitude = result.get("longitude")
        # Some postcodes (e.g. Channel Islands) are valid but carry no coordinates
        if latitude is None or longitude is None:
            logger.info(f"Postcode {postcode!r} has no coordinates")
            return None
        try:
            return GeoPoint(latitude=latitude, longitude=longitude)
        except ValidationError as e:
            logger.warning(f"Invalid coordinates for postcode {postcode!r}: {latitude!r}, {longitude!r}")
            raise GeocodeError(f"Invalid coordinates for postcode {postcode!r}") from e
