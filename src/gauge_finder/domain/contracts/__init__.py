"""Contracts (protocols) shared between application services and adapters."""

from gauge_finder.domain.contracts.search_listener import SearchListenerProtocol
from gauge_finder.domain.contracts.station_cache import StationCacheProtocol

__all__ = [
    "SearchListenerProtocol",
    "StationCacheProtocol",
]
