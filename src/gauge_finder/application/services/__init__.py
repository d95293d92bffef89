"""Application services (use cases) for finding gauge stations."""

from gauge_finder.application.services.search_orchestrator import (
    SearchOrchestrator,
    SearchSettings,
)
from gauge_finder.application.services.station_cache import StationCache
from gauge_finder.application.services.station_index import StationIndex
from gauge_finder.application.services.station_matcher import StationMatcher

__all__ = [
    "SearchOrchestrator",
    "SearchSettings",
    "StationCache",
    "StationIndex",
    "StationMatcher",
]
