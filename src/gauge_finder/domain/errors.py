"""Errors raised by the gauge station finder.

Not-found outcomes are never errors: lookups return None or an empty list.
"""


class GaugeFinderError(Exception):
    """Base class for finder errors."""


class RemoteFetchError(GaugeFinderError):
    """The gauge-data API could not be reached or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GeocodeError(GaugeFinderError):
    """The geocoding service failed (transport or server error, not a missing postcode)."""
