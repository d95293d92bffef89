"""Tests for station, river and catchment name derivation."""

import pytest

from gauge_finder.application.services import StationCache, StationIndex
from gauge_finder.domain.models import Station
from tests.doubles import MockStationSource, make_station


@pytest.fixture
def index(example_stations: list[Station]) -> StationIndex:
    """Index over the example stations."""
    return StationIndex(StationCache(MockStationSource(example_stations)))


@pytest.mark.asyncio
async def test_station_names_keep_dataset_order(
    index: StationIndex, example_stations: list[Station]
) -> None:
    """Given the example dataset, when listing station names, then labels come in dataset order."""
    names = await index.station_names()

    assert names == [station.label for station in example_stations]
    assert names[0] == "Avonmouth Portbury"


@pytest.mark.asyncio
async def test_river_names_are_distinct_and_non_empty(index: StationIndex) -> None:
    """Given stations sharing and lacking rivers, when listing rivers, then names are distinct and non-empty."""
    rivers = await index.river_names()

    assert "Tide" in rivers
    assert "" not in rivers
    assert len(rivers) == len(set(rivers))


@pytest.mark.asyncio
async def test_catchment_names_are_distinct_and_non_empty(index: StationIndex) -> None:
    """Given stations sharing and lacking catchments, when listing catchments, then names are distinct and non-empty."""
    catchments = await index.catchment_names()

    assert "England - South Coast" in catchments
    assert "" not in catchments
    assert len(catchments) == len(set(catchments))


@pytest.mark.asyncio
async def test_whitespace_only_names_are_excluded() -> None:
    """Given blank and padded river names, when listing rivers, then blanks are dropped and names trimmed."""
    stations = [
        make_station("A", "Alpha", river="  "),
        make_station("B", "Bravo", river=" Eden "),
        make_station("C", "Charlie", river="Eden"),
        make_station("D", "Delta", river="eden"),
    ]
    index = StationIndex(StationCache(MockStationSource(stations)))

    assert await index.river_names() == ["Eden", "eden"]


@pytest.mark.asyncio
async def test_station_with_id_finds_station(index: StationIndex) -> None:
    """Given a known notation, when looking it up, then the station is returned."""
    station = await index.station_with_id("E72639")

    assert station is not None
    assert station.label == "Avonmouth Portbury"


@pytest.mark.asyncio
async def test_station_with_unknown_id_returns_none(index: StationIndex) -> None:
    """Given an unknown notation, when looking it up, then None is returned rather than raised."""
    assert await index.station_with_id("522039999999999999999") is None


@pytest.mark.asyncio
async def test_station_with_id_is_case_sensitive(index: StationIndex) -> None:
    """Given a notation in the wrong case, when looking it up, then nothing is found."""
    assert await index.station_with_id("e72639") is None


@pytest.mark.asyncio
async def test_index_fetches_collection_once(example_stations: list[Station]) -> None:
    """Given several index operations, when they run, then the remote fetch happens once."""
    source = MockStationSource(example_stations)
    index = StationIndex(StationCache(source))

    await index.river_names()
    await index.catchment_names()
    await index.station_with_id("E70039")
    await index.station_names()

    assert source.fetch_all_calls == 1
