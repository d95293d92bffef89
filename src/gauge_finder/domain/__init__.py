"""Domain layer - core models, ports and errors."""

from gauge_finder.domain.errors import GaugeFinderError, GeocodeError, RemoteFetchError
from gauge_finder.domain.models import (
    GeoPoint,
    IdentityQuery,
    LabelQuery,
    Location,
    LocationQuery,
    SearchOutcome,
    Station,
)
from gauge_finder.domain.ports import Geocoder, RemoteStationSource

__all__ = [
    "GaugeFinderError",
    "GeoPoint",
    "GeocodeError",
    "Geocoder",
    "IdentityQuery",
    "LabelQuery",
    "Location",
    "LocationQuery",
    "RemoteFetchError",
    "RemoteStationSource",
    "SearchOutcome",
    "Station",
]
