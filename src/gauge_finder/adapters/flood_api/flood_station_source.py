"""Flood-monitoring API station source adapter."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from gauge_finder.adapters.flood_api.constants import (
    FLOOD_API_BASE_URL,
    PASSTHROUGH_FIELDS,
    STATUS_PREFIX,
)
from gauge_finder.adapters.flood_api.http_client import FloodApiHttpClient
from gauge_finder.domain.models.location import Location
from gauge_finder.domain.models.station import Station
from gauge_finder.domain.ports.station_source import RemoteStationSource

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class FloodStationSource(RemoteStationSource):
    """Adapter for the Environment Agency station endpoints."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = FLOOD_API_BASE_URL,
        timeout_seconds: float = 10.0,
        fetch_limit: int = 10000,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: API root, without trailing slash.
            timeout_seconds: Total timeout per request.
            fetch_limit: Maximum number of stations requested by fetch_all.
        """
        self._http_client = FloodApiHttpClient(session, base_url, timeout_seconds)
        self._fetch_limit = fetch_limit

    async def fetch_all(self) -> list[Station]:
        """Fetch the full station dataset."""
        items = await self._http_client.list_stations({"_limit": self._fetch_limit})
        stations = self._build_stations(items)
        logger.info(f"Fetched {len(stations)} stations from flood-monitoring API")
        return stations

    async def fetch_by_query(self, params: Mapping[str, str | float]) -> list[Station]:
        """Fetch stations by notation or by distance from a point.

        Args:
            params: {"notation": ...} or {"lat": ..., "long": ..., "dist": ...}.

        Returns:
            Matching stations; for distance queries in the API's order.
        """
        if "notation" in params:
            items = await self._http_client.get_station(str(params["notation"]))
        else:
            items = await self._http_client.list_stations(params)
        return self._build_stations(items)

    def _build_stations(self, items: list[dict[str, Any]]) -> list[Station]:
        stations = []
        for item in items:
            station = build_station(item)
            if station is None:
                logger.debug(f"Skipping station item without notation: {item.get('@id')}")
                continue
            stations.append(station)
        return stations


def build_station(item: Mapping[str, Any]) -> Station | None:
    """Build a Station from a raw API item.

    Args:
        item: Station item as returned by the API.

    Returns:
        Station domain object, or None if the item has no notation.
    """
    notation = _text(item.get("notation"))
    if not notation:
        return None

    return Station(
        notation=notation,
        label=_text(item.get("label")) or notation,
        river=_text(item.get("riverName")),
        catchment=_text(item.get("catchmentName")),
        location=_build_location(item),
        status=_status_name(item.get("status")),
        attributes={key: item[key] for key in PASSTHROUGH_FIELDS if key in item},
    )


def _build_location(item: Mapping[str, Any]) -> Location | None:
    location = Location(
        latitude=_number(item.get("lat")),
        longitude=_number(item.get("long")),
        easting=_number(item.get("easting")),
        northing=_number(item.get("northing")),
    )
    if not (location.has_geodetic or location.has_projected):
        return None
    return location


def _first(value: Any) -> Any:
    """Some stations carry several values for a field; the first one wins."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _text(value: Any) -> str | None:
    value = _first(value)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _number(value: Any) -> float | None:
    value = _first(value)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _status_name(value: Any) -> str | None:
    """Reduce a status URI such as ".../def/core/statusActive" to "Active"."""
    text = _text(value)
    if text is None:
        return None
    name = text.rsplit("/", 1)[-1]
    if name.startswith(STATUS_PREFIX) and len(name) > len(STATUS_PREFIX):
        name = name[len(STATUS_PREFIX) :]
    return name
