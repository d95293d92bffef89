"""Session-wide, load-once station cache."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from gauge_finder.domain.contracts.station_cache import StationCacheProtocol

if TYPE_CHECKING:
    from gauge_finder.domain.models.station import Station
    from gauge_finder.domain.ports.station_source import RemoteStationSource

logger = logging.getLogger(__name__)


class StationCache(StationCacheProtocol):
    """Holds the one in-flight or resolved load of the full station collection.

    Every caller gets the same task, so concurrent demands share a single remote
    fetch. A failed load is handed to everyone awaiting it and then forgotten:
    the next demand starts a fresh fetch.
    """

    def __init__(self, source: RemoteStationSource) -> None:
        """Initialize with the remote source to load from.

        Args:
            source: Where the full station dataset comes from.
        """
        self._source = source
        self._pending: asyncio.Task[list[Station]] | None = None
        self._loaded = False

    def collection(self) -> asyncio.Task[list[Station]]:
        """Get the pending or resolved station collection.

        Must be called from inside a running event loop. Await the task through
        asyncio.shield so that cancelling one caller leaves the shared load running.

        Returns:
            The shared load task; await it for the list of stations.
        """
        if self._pending is None:
            logger.info("Loading station collection from remote source")
            self._pending = asyncio.get_running_loop().create_task(self._load())
        return self._pending

    def has_cached_stations(self) -> bool:
        """Check whether the collection has finished loading.

        Returns:
            True once the first load has completed successfully.
        """
        return self._loaded

    async def _load(self) -> list[Station]:
        try:
            stations = await self._source.fetch_all()
        except (Exception, asyncio.CancelledError) as e:
            logger.error(f"Failed to load station collection: {e!r}")
            self._pending = None
            raise
        self._loaded = True
        logger.info(f"Cached {len(stations)} stations")
        return stations
