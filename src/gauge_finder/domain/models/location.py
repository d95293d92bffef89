"""Location domain models."""

import math
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

EARTH_RADIUS_KM = 6371.0088


class GeoPoint(BaseModel):
    """A WGS84 coordinate, as returned by a geocoder."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Location:
    """Where a station is, in geodetic and/or projected (British National Grid) coordinates."""

    latitude: float | None = None
    longitude: float | None = None
    easting: float | None = None
    northing: float | None = None

    @property
    def has_geodetic(self) -> bool:
        """True when a latitude/longitude pair is known."""
        return self.latitude is not None and self.longitude is not None

    @property
    def has_projected(self) -> bool:
        """True when an easting/northing pair is known."""
        return self.easting is not None and self.northing is not None

    def distance_km(self, point: GeoPoint) -> float | None:
        """Great-circle distance to a point, or None without a latitude/longitude pair."""
        if self.latitude is None or self.longitude is None:
            return None
        lat1, lat2 = math.radians(self.latitude), math.radians(point.latitude)
        d_lat = lat2 - lat1
        d_long = math.radians(point.longitude - self.longitude)
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_long / 2) ** 2
        return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))
