"""Flood-monitoring API adapters."""

from gauge_finder.adapters.flood_api.flood_station_source import FloodStationSource
from gauge_finder.adapters.flood_api.http_client import FloodApiHttpClient

__all__ = [
    "FloodApiHttpClient",
    "FloodStationSource",
]
