"""Tests for the command-line front end."""

import json

import pytest

from gauge_finder.bootstrap import StationFinder
from gauge_finder.cli import build_parser, format_station, run_command, station_to_dict
from gauge_finder.domain.models import Station
from tests.doubles import MockGeocoder, MockStationSource


@pytest.fixture
def finder(example_stations: list[Station]) -> StationFinder:
    """Finder over the example stations with a geocoder that knows no postcodes."""
    return StationFinder(MockStationSource(example_stations), MockGeocoder())


def test_parser_reads_search_options() -> None:
    """Given search arguments, when parsing, then term and flags are set."""
    args = build_parser().parse_args(["search", "avonmouth", "--all", "--json"])

    assert args.command == "search"
    assert args.term == "avonmouth"
    assert args.all is True
    assert args.json is True


def test_format_station(example_stations: list[Station]) -> None:
    """Given a station, when formatting, then name, river, notation and catchment are shown."""
    line = format_station(example_stations[1])

    assert line == "  Newhaven (Tide)  [E70039]  England - South Coast"


def test_station_to_dict_flattens_location(example_stations: list[Station]) -> None:
    """Given a located station, when converting, then coordinates and attributes are top-level."""
    data = station_to_dict(example_stations[0])

    assert data["notation"] == "E72639"
    assert data["latitude"] == 51.499999
    assert data["gridReference"] == "ST5042077580"


@pytest.mark.asyncio
async def test_search_prints_summary_and_stations(
    finder: StationFinder, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a matching term, when running search, then the summary and stations are printed."""
    args = build_parser().parse_args(["search", "avonmouth"])

    status = await run_command(finder, args)

    out = capsys.readouterr().out
    assert status == 0
    assert out.splitlines()[0] == "Found 2 stations."
    assert "[E72639]" in out


@pytest.mark.asyncio
async def test_search_as_json(finder: StationFinder, capsys: pytest.CaptureFixture[str]) -> None:
    """Given --json, when running search, then a JSON document is printed."""
    args = build_parser().parse_args(["search", "newhaven", "--json"])

    await run_command(finder, args)

    data = json.loads(capsys.readouterr().out)
    assert data["summary"] == "Found one station."
    assert data["origin"] == "name"
    assert [s["notation"] for s in data["stations"]] == ["E70039"]


@pytest.mark.asyncio
async def test_short_search_term_fails(
    finder: StationFinder, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a one-letter term, when running search, then a non-zero status is returned."""
    args = build_parser().parse_args(["search", "a"])

    assert await run_command(finder, args) == 1
    assert "too short" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_station_lookup_miss_fails(
    finder: StationFinder, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given an unknown notation, when running station, then a non-zero status is returned."""
    args = build_parser().parse_args(["station", "522039999999999999999"])

    assert await run_command(finder, args) == 1
    assert "not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_rivers_are_listed(finder: StationFinder, capsys: pytest.CaptureFixture[str]) -> None:
    """Given the example stations, when listing rivers, then one river per line is printed."""
    args = build_parser().parse_args(["rivers"])

    await run_command(finder, args)

    rivers = capsys.readouterr().out.splitlines()
    assert "Tide" in rivers
    assert rivers.count("Tide") == 1
