"""Command-line front end for searching gauge stations."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from gauge_finder.adapters.config import AppConfig
from gauge_finder.bootstrap import StationFinder, create_station_finder
from gauge_finder.domain.errors import GaugeFinderError
from gauge_finder.domain.models import SearchOutcome, Station

logger = logging.getLogger(__name__)


def station_to_dict(station: Station) -> dict[str, Any]:
    """Convert a station to a JSON-friendly dictionary."""
    location = station.location
    return {
        "notation": station.notation,
        "label": station.label,
        "river": station.river,
        "catchment": station.catchment,
        "status": station.status,
        "latitude": location.latitude if location else None,
        "longitude": location.longitude if location else None,
        "easting": location.easting if location else None,
        "northing": location.northing if location else None,
        **dict(station.attributes),
    }


def format_station(station: Station) -> str:
    """One line per station: name, notation and catchment."""
    line = f"  {station.display_name}  [{station.notation}]"
    if station.catchment:
        line += f"  {station.catchment}"
    return line


def print_outcome(outcome: SearchOutcome, as_json: bool) -> None:
    """Print a search outcome as text or JSON."""
    if as_json:
        print(
            json.dumps(
                {
                    "summary": outcome.summary,
                    "origin": outcome.origin.value,
                    "remainder": outcome.remainder,
                    "stations": [station_to_dict(s) for s in outcome.displayed],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    print(outcome.summary)
    for station in outcome.displayed:
        print(format_station(station))
    if outcome.remainder:
        print(f"\n{outcome.remainder} more; use --all to list them.")


async def run_command(finder: StationFinder, args: argparse.Namespace) -> int:
    """Execute a parsed command against a station finder.

    Returns:
        Process exit status.
    """
    if args.command == "search":
        outcome = await finder.search_by(args.term, show_all=args.all)
        if outcome is None:
            print(f"Search term '{args.term}' is too short.", file=sys.stderr)
            return 1
        print_outcome(outcome, args.json)
        return 0

    if args.command == "station":
        station = await finder.station_with_id(args.notation)
        if station is None:
            print(f"Station {args.notation} not found.", file=sys.stderr)
            return 1
        if args.json:
            print(json.dumps(station_to_dict(station), indent=2, ensure_ascii=False))
        else:
            print(format_station(station))
        return 0

    if args.command == "rivers":
        names = await finder.river_names()
    else:
        names = await finder.catchment_names()
    for name in names:
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Find river-gauging stations by name, postcode or identifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search by station name (falls back to a postcode search)
  gauge-finder search "avonmouth"
  gauge-finder search "BS20 7XN" --all

  # Show one station
  gauge-finder station E72639

  # List rivers or catchments
  gauge-finder rivers
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search stations by name or postcode")
    search_parser.add_argument("term", help="Station name fragment or postcode")
    search_parser.add_argument("--all", action="store_true", help="Show every match")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    station_parser = subparsers.add_parser("station", help="Show a station by notation")
    station_parser.add_argument("notation", help="Station notation (e.g., E72639)")
    station_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("rivers", help="List river names")
    subparsers.add_parser("catchments", help="List catchment names")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    async with aiohttp.ClientSession() as session:
        finder = create_station_finder(config, session)
        try:
            return await run_command(finder, args)
        except GaugeFinderError as e:
            logger.error(f"Station search failed: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
