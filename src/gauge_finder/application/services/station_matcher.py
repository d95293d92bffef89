"""Matching search queries to stations."""

import asyncio
import logging
from typing import TYPE_CHECKING

from gauge_finder.domain.models.search_query import (
    IdentityQuery,
    LabelQuery,
    LocationQuery,
    SearchQuery,
)
from gauge_finder.domain.models.station import Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from gauge_finder.domain.contracts.station_cache import StationCacheProtocol
    from gauge_finder.domain.ports.station_source import RemoteStationSource


class StationMatcher:
    """Matches a query against stations using the strategy its shape calls for.

    Label queries run locally against the cached collection. Identity and
    location queries go to the remote source, which normalises identifiers and
    ranks by distance itself.
    """

    def __init__(self, cache: "StationCacheProtocol", source: "RemoteStationSource") -> None:
        """Initialize with the station cache and the remote source."""
        self._cache = cache
        self._source = source

    async def match_stations(self, query: SearchQuery) -> list[Station]:
        """Find the stations matching a query.

        Args:
            query: One of IdentityQuery, LabelQuery or LocationQuery.

        Returns:
            Matching stations, de-duplicated by notation. Label matches come in
            no particular order; location matches keep the source's order.

        Raises:
            TypeError: If the query is not one of the supported shapes.
            RemoteFetchError: If the collection or a remote query fails.
        """
        if isinstance(query, LabelQuery):
            stations = await self._match_label(query.label)
        elif isinstance(query, IdentityQuery):
            stations = await self._source.fetch_by_query({"notation": query.notation})
        elif isinstance(query, LocationQuery):
            stations = await self._match_location(query)
        else:
            raise TypeError(f"Unsupported search query: {query!r}")

        return _unique_by_notation(stations)

    async def _match_label(self, label: str) -> list[Station]:
        stations = await asyncio.shield(self._cache.collection())
        matches = [station for station in stations if station.matches_label(label)]
        logger.debug(f"Label {label!r} matched {len(matches)} of {len(stations)} stations")
        return matches

    async def _match_location(self, query: LocationQuery) -> list[Station]:
        stations = await self._source.fetch_by_query(
            {"lat": query.latitude, "long": query.longitude, "dist": query.radius_km}
        )
        # Stations without coordinates cannot be placed within a radius
        located = [s for s in stations if s.location is not None and s.location.has_geodetic]
        if len(located) < len(stations):
            logger.debug(f"Dropped {len(stations) - len(located)} stations without a location")
        return located


def _unique_by_notation(stations: list[Station]) -> list[Station]:
    seen: set[str] = set()
    unique = []
    for station in stations:
        if station.notation not in seen:
            seen.add(station.notation)
            unique.append(station)
    return unique
