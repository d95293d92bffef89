"""Search query domain models.

A search query is exactly one of the three shapes below.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityQuery:
    """Find stations by notation."""

    notation: str


@dataclass(frozen=True)
class LabelQuery:
    """Find stations whose label contains a fragment, ignoring case."""

    label: str


@dataclass(frozen=True)
class LocationQuery:
    """Find stations within a radius of a point."""

    latitude: float
    longitude: float
    radius_km: float


SearchQuery = IdentityQuery | LabelQuery | LocationQuery
