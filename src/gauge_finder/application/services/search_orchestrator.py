"""Search pipeline: station names first, then postcode, then radius."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gauge_finder.domain.errors import GeocodeError, RemoteFetchError
from gauge_finder.domain.models.search_outcome import SearchOrigin, SearchOutcome, SearchState
from gauge_finder.domain.models.search_query import LabelQuery, LocationQuery
from gauge_finder.domain.models.station import Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from gauge_finder.application.services.station_matcher import StationMatcher
    from gauge_finder.domain.contracts.search_listener import SearchListenerProtocol
    from gauge_finder.domain.ports.geocoder import Geocoder

NO_MATCHES_SUMMARY = "No matches."


@dataclass(frozen=True)
class SearchSettings:
    """Tunables for the search pipeline."""

    page_limit: int = 20
    radius_km: float = 10.0
    min_search_length: int = 2


class SearchOrchestrator:
    """Turns a typed search term into a page of stations and a summary line.

    A term is first matched against station labels. Only when that finds
    nothing is it treated as a postcode: a geocoded postcode leads to a single
    radius query around that point. The steps always run one after another.
    """

    def __init__(
        self,
        matcher: "StationMatcher",
        geocoder: "Geocoder",
        settings: SearchSettings | None = None,
    ) -> None:
        """Initialize with the station matcher and the postcode geocoder.

        Args:
            matcher: Matches label and location queries to stations.
            geocoder: Resolves postcodes to coordinates.
            settings: Page size, radius and minimum term length.
        """
        self._matcher = matcher
        self._geocoder = geocoder
        self._settings = settings or SearchSettings()
        self._listeners: "list[SearchListenerProtocol]" = []

    def add_listener(self, listener: "SearchListenerProtocol") -> None:
        """Register a callback notified on every state a search enters.

        A too-short term is reported as IDLE. A listener that raises is logged
        and skipped; the search carries on to its terminal state.
        """
        self._listeners.append(listener)

    async def search_by(self, text: str, show_all: bool = False) -> SearchOutcome | None:
        """Search for stations by name, falling back to a postcode radius search.

        Args:
            text: The raw search term as typed.
            show_all: Display every match instead of the first page.

        Returns:
            The search outcome, or None when the term is too short to search for.

        Raises:
            RemoteFetchError: If the station collection itself cannot be loaded.
        """
        term = text.strip()
        if len(term) < self._settings.min_search_length:
            logger.debug(f"Ignoring search term {term!r}: too short")
            self._enter(term, SearchState.IDLE)
            return None

        self._enter(term, SearchState.NAME_SEARCHING)
        matches = await self._matcher.match_stations(LabelQuery(term))
        if matches:
            return self._rank(term, matches, SearchOrigin.NAME, show_all)

        nearby = await self._search_near_postcode(term)
        if nearby is None:
            self._enter(term, SearchState.NO_MATCH)
            return SearchOutcome(
                term=term,
                displayed=[],
                remainder=0,
                summary=NO_MATCHES_SUMMARY,
                state=SearchState.NO_MATCH,
                origin=SearchOrigin.LOCATION,
            )
        return self._rank(term, nearby, SearchOrigin.LOCATION, show_all)

    async def _search_near_postcode(self, term: str) -> list[Station] | None:
        """Geocode the term and query around it; None means there is nothing to rank."""
        self._enter(term, SearchState.POSTCODE_LOOKUP)
        try:
            point = await self._geocoder.lookup(term)
        except GeocodeError as e:
            logger.warning(f"Geocoding {term!r} failed: {e}")
            return None
        if point is None:
            logger.info(f"No station or postcode matches {term!r}")
            return None

        self._enter(term, SearchState.RADIUS_SEARCHING)
        query = LocationQuery(
            latitude=point.latitude,
            longitude=point.longitude,
            radius_km=self._settings.radius_km,
        )
        try:
            return await self._matcher.match_stations(query)
        except RemoteFetchError as e:
            logger.warning(f"Radius search near {term!r} failed: {e}")
            return None

    def _rank(
        self, term: str, stations: list[Station], origin: SearchOrigin, show_all: bool
    ) -> SearchOutcome:
        self._enter(term, SearchState.RANKING)
        if origin is SearchOrigin.NAME:
            # Location results arrive distance-ranked from the source; keep that order
            stations = sorted(stations, key=lambda s: (s.label.casefold(), s.notation))

        limit = len(stations) if show_all else self._settings.page_limit
        displayed = stations[:limit]
        remainder = len(stations) - len(displayed)
        return SearchOutcome(
            term=term,
            displayed=displayed,
            remainder=remainder,
            summary=summarise(term, len(stations), len(displayed), origin),
            state=SearchState.RANKING,
            origin=origin,
        )

    def _enter(self, term: str, state: SearchState) -> None:
        logger.debug(f"Search {term!r} -> {state.value}")
        for listener in self._listeners:
            try:
                listener(term, state)
            except Exception as e:
                logger.error(f"Search listener failed on {state.value}: {e}", exc_info=True)


def summarise(term: str, total: int, shown: int, origin: SearchOrigin) -> str:
    """Build the human-readable result line.

    Args:
        term: The search term.
        total: How many stations were found.
        shown: How many of them are displayed.
        origin: Whether the stations came from the name or the location step.

    Returns:
        e.g. "Found 3 stations near to BS20 7XN. Showing the first 2."
    """
    if total == 0:
        return NO_MATCHES_SUMMARY

    found = "Found one station" if total == 1 else f"Found {total} stations"
    if origin is SearchOrigin.LOCATION:
        found += f" near to {term.upper()}"
    summary = f"{found}."
    if shown < total:
        summary += f" Showing the first {shown}."
    return summary
