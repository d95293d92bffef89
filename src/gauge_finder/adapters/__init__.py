"""Adapters layer - external system integrations."""

from gauge_finder.adapters.config import AppConfig
from gauge_finder.adapters.flood_api import FloodStationSource
from gauge_finder.adapters.postcodes_api import PostcodeGeocoder

__all__ = [
    "AppConfig",
    "FloodStationSource",
    "PostcodeGeocoder",
]
