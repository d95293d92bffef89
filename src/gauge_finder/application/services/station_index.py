"""Name lists and identifier lookup over the cached station collection."""

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from gauge_finder.domain.models.station import Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from gauge_finder.domain.contracts.station_cache import StationCacheProtocol


class StationIndex:
    """Derives station, river and catchment names from the cached collection.

    Every operation waits for the cache to resolve. The collection never changes
    once loaded, so derived lists are built once and reused.
    """

    def __init__(self, cache: "StationCacheProtocol") -> None:
        """Initialize with the station cache."""
        self._cache = cache
        self._indexed: list[Station] | None = None
        self._by_notation: dict[str, Station] = {}
        self._rivers: list[str] = []
        self._catchments: list[str] = []

    async def station_names(self) -> list[str]:
        """Labels of all stations, in dataset order."""
        stations = await asyncio.shield(self._cache.collection())
        return [station.label for station in stations]

    async def river_names(self) -> list[str]:
        """Distinct, non-empty river names, sorted ignoring case."""
        await self._ensure_indexed()
        return list(self._rivers)

    async def catchment_names(self) -> list[str]:
        """Distinct, non-empty catchment names, sorted ignoring case."""
        await self._ensure_indexed()
        return list(self._catchments)

    async def station_with_id(self, notation: str) -> Station | None:
        """Find the station with exactly this notation.

        Args:
            notation: Station identifier, compared case-sensitively.

        Returns:
            The station, or None if no station has that notation.
        """
        await self._ensure_indexed()
        station = self._by_notation.get(notation)
        if station is None:
            logger.debug(f"No station with notation {notation!r}")
        return station

    async def _ensure_indexed(self) -> None:
        stations = await asyncio.shield(self._cache.collection())
        if stations is self._indexed:
            return

        by_notation: dict[str, Station] = {}
        for station in stations:
            by_notation.setdefault(station.notation, station)

        self._by_notation = by_notation
        self._rivers = _distinct_names(stations, lambda s: s.river)
        self._catchments = _distinct_names(stations, lambda s: s.catchment)
        self._indexed = stations
        logger.debug(
            f"Indexed {len(by_notation)} stations, {len(self._rivers)} rivers, "
            f"{len(self._catchments)} catchments"
        )


def _distinct_names(stations: list[Station], name_of: Callable[[Station], str | None]) -> list[str]:
    names = {name.strip() for name in map(name_of, stations) if name and name.strip()}
    return sorted(names, key=lambda name: (name.casefold(), name))
