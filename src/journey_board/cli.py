"""Command line interface for the journey board."""

import argparse
import asyncio
import sys

from journey_board.adapters.config import AppConfig
from journey_board.adapters.live.formatters import clean_station_name
from journey_board.adapters.vbb_api import VbbStationRepository
from journey_board.application.services import FavoritesService
from journey_board.domain.models.station import Station
from journey_board.main import configure_logging, create_favorites_service, load_config, run_board


def create_station_repository(config: AppConfig) -> VbbStationRepository:
    return VbbStationRepository(
        base_url=config.api_base_url,
        timeout_seconds=config.api_timeout_seconds,
        results=config.station_search_results,
    )


async def search_stations(config: AppConfig, query: str) -> list[Station]:
    """Search stops, reporting failures on stderr as an empty result."""
    try:
        return await create_station_repository(config).search_stations(query)
    except Exception as e:
        print(f"Error searching VBB stations: {e}", file=sys.stderr)
        return []


async def search_and_print(config: AppConfig, query: str) -> int:
    print(f"Searching VBB REST API for: '{query}'\n")
    stations = await search_stations(config, query)
    if not stations:
        print(f"No stations found for '{query}'", file=sys.stderr)
        return 1

    print(f"Found {len(stations)} station(s):\n")
    for station in stations:
        print(f"{station.id}  {station.name}")
    return 0


async def select_station(
    config: AppConfig, favorites: FavoritesService, target: str, query: str
) -> int:
    """Make the first stop matching query the new origin or destination."""
    stations = await search_stations(config, query)
    if not stations:
        print(f"No stations found for '{query}'", file=sys.stderr)
        return 1

    station = stations[0]
    if target == "origin":
        favorites.select_origin(station)
    else:
        favorites.select_destination(station)
    print(f"{target.capitalize()} set to {station.name} ({station.id})")
    print_current_route(favorites)
    return 0


def format_route(origin: Station, dest: Station) -> str:
    return f"{clean_station_name(origin.name)} → {clean_station_name(dest.name)}"


def print_current_route(favorites: FavoritesService) -> None:
    print(f"Current route: {format_route(favorites.origin, favorites.dest)}")


def print_favorites(favorites: FavoritesService) -> int:
    routes = favorites.routes
    if not routes:
        print("No favorites saved")
        return 0
    for number, route in enumerate(routes, 1):
        print(f"{number}. {format_route(route.origin, route.dest)}")
    return 0


def run_favorites_command(favorites: FavoritesService, args: argparse.Namespace) -> int:
    """Handle ``favorites list|add|remove N|load N``. Favorites are numbered from 1."""
    action = args.favorites_command
    if action == "list":
        return print_favorites(favorites)

    if action == "add":
        if favorites.add_current():
            print("★ Added to favorites!")
        else:
            print("Already in favorites")
        return 0

    if action == "remove":
        removed = favorites.remove(args.number - 1)
        if removed is None:
            print(f"No favorite number {args.number}", file=sys.stderr)
            return 1
        print(f"Removed {format_route(removed.origin, removed.dest)}")
        return 0

    if action == "load":
        loaded = favorites.load(args.number - 1)
        if loaded is None:
            print(f"No favorite number {args.number}", file=sys.stderr)
            return 1
        print_current_route(favorites)
        return 0

    return print_favorites(favorites)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="journey-board",
        description="Live Berlin (VBB) journey board for a single origin/destination pair",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find station ids
  journey-board search "Alexanderplatz"

  # Pick stations by name and watch the board
  journey-board origin "S Köpenick"
  journey-board destination "Hauptbahnhof"
  journey-board watch

  # Save and reuse routes
  journey-board favorites add
  journey-board favorites load 1
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for VBB stops")
    search_parser.add_argument("query", help="Station name to search for")

    watch_parser = subparsers.add_parser("watch", help="Show the live journey board")
    watch_parser.add_argument("--from", dest="origin_id", help="Origin stop id")
    watch_parser.add_argument("--to", dest="dest_id", help="Destination stop id")

    origin_parser = subparsers.add_parser("origin", help="Set the origin by name")
    origin_parser.add_argument("query", help="Station name to search for")

    destination_parser = subparsers.add_parser("destination", help="Set the destination by name")
    destination_parser.add_argument("query", help="Station name to search for")

    subparsers.add_parser("reverse", help="Swap origin and destination")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite routes")
    favorites_subparsers = favorites_parser.add_subparsers(dest="favorites_command")
    favorites_subparsers.add_parser("list", help="List favorite routes")
    favorites_subparsers.add_parser("add", help="Save the current route")
    remove_parser = favorites_subparsers.add_parser("remove", help="Delete a favorite")
    remove_parser.add_argument("number", type=int, help="Favorite number from 'favorites list'")
    load_parser = favorites_subparsers.add_parser("load", help="Make a favorite the current route")
    load_parser.add_argument("number", type=int, help="Favorite number from 'favorites list'")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    configure_logging(config)

    if args.command == "search":
        return await search_and_print(config, args.query)

    favorites = create_favorites_service(config)

    if args.command == "watch":
        origin = Station(id=args.origin_id, name=args.origin_id) if args.origin_id else None
        dest = Station(id=args.dest_id, name=args.dest_id) if args.dest_id else None
        await run_board(config, favorites, origin, dest)
        return 0
    if args.command in ("origin", "destination"):
        return await select_station(config, favorites, args.command, args.query)
    if args.command == "reverse":
        favorites.reverse()
        print_current_route(favorites)
        return 0
    if args.command == "favorites":
        return run_favorites_command(favorites, args)

    parser.print_help()
    return 1


def cli_main() -> None:
    """CLI entry point for setuptools."""
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        exit_code = 0
    sys.exit(exit_code)


if __name__ == "__main__":
    cli_main()
