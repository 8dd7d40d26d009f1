"""Command-line interface for metro-network."""

import argparse
import logging
import sys

from metro_network.api import load_network, plan_trip, validate
from metro_network.errors import MetroNetworkError
from metro_network.network.models import LoadConfig, TransitGraph
from metro_network.output.text import render_fare, render_nearby, render_route, render_transfers
from metro_network.query.fares import CARD_DISCOUNT, card_fare, fare
from metro_network.query.nearby import nearby_stations
from metro_network.query.transfers import transfer_stations
from metro_network.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load(args: argparse.Namespace) -> TransitGraph:
    config = LoadConfig(input_path=args.input, encoding=args.encoding)
    return load_network(args.input, config)


def cmd_transfers(args: argparse.Namespace) -> int:
    """Execute transfers command."""
    graph = _load(args)
    print(render_transfers(transfer_stations(graph)))
    return 0


def cmd_nearby(args: argparse.Namespace) -> int:
    """Execute nearby command."""
    graph = _load(args)
    if not graph.has_station(args.station):
        print(f"Warning: station {args.station!r} is not in the network", file=sys.stderr)
    nearby = nearby_stations(graph, args.station, args.distance)
    print(render_nearby(args.station, args.distance, nearby))
    return 0


def cmd_route(args: argparse.Namespace) -> int:
    """Execute route command."""
    graph = _load(args)
    plan = plan_trip(graph, args.start, args.end, discount=args.discount)
    print(render_route(plan))
    return 0


def cmd_fare(args: argparse.Namespace) -> int:
    """Execute fare command."""
    print(render_fare(fare(args.distance), card_fare(args.distance, args.discount)))
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    report = validate(args.input, LoadConfig(input_path=args.input, encoding=args.encoding))
    if report.valid:
        print("\nValidation successful!")
        print(f"Stats: {report.stats}")
        if report.warnings:
            print(f"Warnings ({len(report.warnings)}):")
            for warning in report.warnings:
                print(f"  - {warning}")
        return 0

    print(f"\nValidation failed with {len(report.errors)} errors:")
    for error in report.errors:
        print(f"  - {error}")
    return 1


def _add_input(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--input", required=True, help="Path to line-table file")
    parser.add_argument(
        "--encoding", default="utf-8", help="Line-table file encoding (default: utf-8)"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="metro",
        description="Query a metro network: transfers, nearby stations, routes and fares",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Transfers command
    transfers_parser = subparsers.add_parser("transfers", help="List interchange stations")
    _add_input(transfers_parser)
    transfers_parser.set_defaults(func=cmd_transfers)

    # Nearby command
    nearby_parser = subparsers.add_parser("nearby", help="Stations within a distance along lines")
    _add_input(nearby_parser)
    nearby_parser.add_argument("--station", required=True, help="Station name")
    nearby_parser.add_argument("--distance", type=float, required=True, help="Radius in km")
    nearby_parser.set_defaults(func=cmd_nearby)

    # Route command
    route_parser = subparsers.add_parser("route", help="Shortest route between two stations")
    _add_input(route_parser)
    route_parser.add_argument("--from", dest="start", required=True, help="Departure station")
    route_parser.add_argument("--to", dest="end", required=True, help="Arrival station")
    route_parser.add_argument(
        "--discount",
        type=float,
        default=CARD_DISCOUNT,
        help=f"Stored-value card discount factor (default: {CARD_DISCOUNT})",
    )
    route_parser.set_defaults(func=cmd_route)

    # Fare command
    fare_parser = subparsers.add_parser("fare", help="Fare for a trip distance")
    fare_parser.add_argument("--distance", type=float, required=True, help="Trip length in km")
    fare_parser.add_argument(
        "--discount",
        type=float,
        default=CARD_DISCOUNT,
        help=f"Stored-value card discount factor (default: {CARD_DISCOUNT})",
    )
    fare_parser.set_defaults(func=cmd_fare)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a line-table file")
    _add_input(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        code = args.func(args)
    except (MetroNetworkError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Command failed")
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
