"""Composition root: wires the cache, index, matcher and orchestrator together."""

import asyncio
from typing import TYPE_CHECKING

from gauge_finder.adapters.config import AppConfig
from gauge_finder.adapters.flood_api import FloodStationSource
from gauge_finder.adapters.postcodes_api import PostcodeGeocoder
from gauge_finder.application.services import (
    SearchOrchestrator,
    SearchSettings,
    StationCache,
    StationIndex,
    StationMatcher,
)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from gauge_finder.domain.contracts.search_listener import SearchListenerProtocol
    from gauge_finder.domain.models import SearchOutcome, SearchQuery, Station
    from gauge_finder.domain.ports import Geocoder, RemoteStationSource


class StationFinder:
    """Facade the views talk to.

    Owns the one StationCache of the session and shares it between the index,
    the matcher and the orchestrator.
    """

    def __init__(
        self,
        source: "RemoteStationSource",
        geocoder: "Geocoder",
        settings: SearchSettings | None = None,
    ) -> None:
        """Initialize with the remote collaborators.

        Args:
            source: Remote station source.
            geocoder: Postcode geocoder.
            settings: Search pipeline settings.
        """
        self._cache = StationCache(source)
        self._index = StationIndex(self._cache)
        self._matcher = StationMatcher(self._cache, source)
        self._orchestrator = SearchOrchestrator(self._matcher, geocoder, settings)

    def has_cached_stations(self) -> bool:
        """Check whether the station collection has loaded."""
        return self._cache.has_cached_stations()

    def stations_collection(self) -> "asyncio.Future[list[Station]]":
        """Get the shared (pending or resolved) station collection."""
        return self._cache.collection()

    async def station_names(self) -> list[str]:
        """Labels of all stations."""
        return await self._index.station_names()

    async def river_names(self) -> list[str]:
        """Distinct river names."""
        return await self._index.river_names()

    async def catchment_names(self) -> list[str]:
        """Distinct catchment names."""
        return await self._index.catchment_names()

    async def station_with_id(self, notation: str) -> "Station | None":
        """Station with this exact notation, or None."""
        return await self._index.station_with_id(notation)

    async def match_stations(self, query: "SearchQuery") -> "list[Station]":
        """Stations matching a structured query."""
        return await self._matcher.match_stations(query)

    async def search_by(self, text: str, show_all: bool = False) -> "SearchOutcome | None":
        """Run the name, postcode and radius search pipeline."""
        return await self._orchestrator.search_by(text, show_all)

    def add_search_listener(self, listener: "SearchListenerProtocol") -> None:
        """Follow every search through its states."""
        self._orchestrator.add_listener(listener)


def create_station_finder(config: AppConfig, session: "ClientSession") -> StationFinder:
    """Build a StationFinder backed by the public flood-monitoring and postcodes APIs.

    Args:
        config: Application configuration.
        session: aiohttp session shared by both adapters.

    Returns:
        A ready StationFinder; nothing is fetched until first use.
    """
    source = FloodStationSource(
        session=session,
        base_url=config.flood_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
        fetch_limit=config.station_fetch_limit,
    )
    geocoder = PostcodeGeocoder(
        session=session,
        base_url=config.postcodes_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
    )
    settings = SearchSettings(
        page_limit=config.page_limit,
        radius_km=config.search_radius_km,
        min_search_length=config.min_search_length,
    )
    return StationFinder(source, geocoder, settings)
