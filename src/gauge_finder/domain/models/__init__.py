"""Domain models for the gauge station finder."""

from gauge_finder.domain.models.location import GeoPoint, Location
from gauge_finder.domain.models.search_outcome import SearchOrigin, SearchOutcome, SearchState
from gauge_finder.domain.models.search_query import (
    IdentityQuery,
    LabelQuery,
    LocationQuery,
    SearchQuery,
)
from gauge_finder.domain.models.station import Station

__all__ = [
    "GeoPoint",
    "IdentityQuery",
    "LabelQuery",
    "Location",
    "LocationQuery",
    "SearchOrigin",
    "SearchOutcome",
    "SearchQuery",
    "SearchState",
    "Station",
]
