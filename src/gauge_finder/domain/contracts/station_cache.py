"""Protocol for the session-wide station cache."""

import asyncio
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from gauge_finder.domain.models.station import Station


class StationCacheProtocol(Protocol):
    """Protocol for a lazily loaded, load-once station collection."""

    def collection(self) -> "asyncio.Future[list[Station]]":
        """Get the pending or resolved station collection.

        Returns:
            The same awaitable to every caller for a given load.
        """
        ...

    def has_cached_stations(self) -> bool:
        """Check whether the collection has finished loading.

        Returns:
            True once the first load has completed successfully.
        """
        ...
