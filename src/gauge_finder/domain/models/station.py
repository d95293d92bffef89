"""Station domain model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from gauge_finder.domain.models.location import Location


@dataclass(frozen=True)
class Station:
    """Represents a river-gauging station.

    The notation is the station's identity: lookups and de-duplication key on it
    alone. Attributes holds pass-through fields (grid reference, town, ...) that
    the finder never interprets.
    """

    notation: str
    label: str
    river: str | None = None
    catchment: str | None = None
    location: Location | None = None
    status: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def display_name(self) -> str:
        """Label qualified with the river name when one is known."""
        if self.river:
            return f"{self.label} ({self.river})"
        return self.label

    def matches_label(self, fragment: str) -> bool:
        """Case-insensitive substring match against the label."""
        return fragment.casefold() in self.label.casefold()
