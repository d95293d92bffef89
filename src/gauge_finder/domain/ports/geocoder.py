"""Geocoder port."""

from typing import Protocol

from gauge_finder.domain.models.location import GeoPoint


class Geocoder(Protocol):
    """Port for resolving postcodes to coordinates."""

    async def lookup(self, text: str) -> GeoPoint | None:
        """Resolve a postcode, returning None when it is not known.

        Raises:
            GeocodeError: Only on transport or service failure.
        """
        ...
