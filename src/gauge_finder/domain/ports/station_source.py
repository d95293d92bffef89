"""Remote station source port."""

from collections.abc import Mapping
from typing import Protocol

from gauge_finder.domain.models.station import Station


class RemoteStationSource(Protocol):
    """Port for retrieving stations from the gauge-data API."""

    async def fetch_all(self) -> list[Station]:
        """Fetch the full station dataset.

        Raises:
            RemoteFetchError: If the dataset cannot be retrieved.
        """
        ...

    async def fetch_by_query(self, params: Mapping[str, str | float]) -> list[Station]:
        """Fetch stations matching a structured query.

        Accepts {"notation": ...} or {"lat": ..., "long": ..., "dist": ...} shaped params.

        Raises:
            RemoteFetchError: If the query cannot be answered.
        """
        ...
