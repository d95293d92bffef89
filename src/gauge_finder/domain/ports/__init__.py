"""Ports (interfaces) for the ports-and-adapters architecture."""

from gauge_finder.domain.ports.geocoder import Geocoder
from gauge_finder.domain.ports.station_source import RemoteStationSource

__all__ = [
    "Geocoder",
    "RemoteStationSource",
]
