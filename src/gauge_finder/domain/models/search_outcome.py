"""Search outcome domain models."""

from dataclasses import dataclass
from enum import Enum

from gauge_finder.domain.models.station import Station


class SearchState(str, Enum):
    """States a single search passes through."""

    IDLE = "idle"
    NAME_SEARCHING = "name_searching"
    POSTCODE_LOOKUP = "postcode_lookup"
    RADIUS_SEARCHING = "radius_searching"
    RANKING = "ranking"
    NO_MATCH = "no_match"


class SearchOrigin(str, Enum):
    """Which step of the pipeline produced the results."""

    NAME = "name"
    LOCATION = "location"


@dataclass(frozen=True)
class SearchOutcome:
    """A page of search results with its summary line."""

    term: str
    displayed: list[Station]
    remainder: int
    summary: str
    state: SearchState
    origin: SearchOrigin = SearchOrigin.NAME

    @property
    def total(self) -> int:
        """Number of stations found, displayed or not."""
        return len(self.displayed) + self.remainder
