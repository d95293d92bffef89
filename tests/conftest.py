"""Shared fixtures for gauge finder tests."""

import pytest

from gauge_finder.domain.models import Station
from tests.doubles import load_example_stations, make_station


@pytest.fixture
def example_stations() -> list[Station]:
    """Stations from the recorded API response."""
    return load_example_stations()


@pytest.fixture
def weir_stations() -> list[Station]:
    """Twenty-five stations whose labels all contain "Weir", in reverse label order."""
    return [make_station(f"W{i:03d}", f"Weir {i:02d}") for i in range(25, 0, -1)]
