"""
Airline Router - Command Line Entry Point.

Loads the flight CSV export and answers one routing or connectivity
query per invocation.

Usage:
    airline-routing route ATL MIA
    airline-routing state ATL FL
    airline-routing stops ATL MIA 1
    airline-routing connections
    airline-routing mst --algorithm kruskal
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.airline_router.application.airline_network import AirlineNetwork
from src.airline_router.config import Config
from src.airline_router.ports.graph_repository import GraphNotInitializedError
from src.network.exceptions import NetworkError
from src.network.reporting import (
    format_connections,
    format_route,
    format_state_routes,
    format_stops_route,
    format_tree,
)

# Module-level logger
logger = logging.getLogger(__name__)


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """
    Configure logging to output to stderr.

    Keeps stdout free for query results.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airline-routing",
        description="Shortest routes and spanning trees over an airline network",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help=f"Flight CSV export (default: {Config.CSV_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=Config.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="Shortest route between two airports")
    route.add_argument("origin")
    route.add_argument("destination")

    state = sub.add_parser("state", help="Shortest routes to every airport of a state")
    state.add_argument("origin")
    state.add_argument("state")

    stops = sub.add_parser("stops", help="Shortest route with an exact number of stops")
    stops.add_argument("origin")
    stops.add_argument("destination")
    stops.add_argument("stops", type=int)

    sub.add_parser("connections", help="Direct connection counts per airport")

    mst = sub.add_parser("mst", help="Minimum spanning tree of the undirected network")
    mst.add_argument(
        "--algorithm",
        choices=["prim", "kruskal"],
        default=None,
        help=f"Spanning tree algorithm (default: {Config.DEFAULT_MST_ALGORITHM})",
    )

    return parser


def run(args: argparse.Namespace, network: AirlineNetwork) -> str:
    """Execute one parsed command and return its console output."""
    if args.command == "route":
        route = network.shortest_route(args.origin, args.destination)
        return format_route(
            args.origin, args.destination, route.path if route else None
        )

    if args.command == "state":
        routes = network.routes_to_state(args.origin, args.state)
        return format_state_routes(
            args.origin, args.state, {code: r.path for code, r in routes.items()}
        )

    if args.command == "stops":
        route = network.route_with_stops(args.origin, args.destination, args.stops)
        return format_stops_route(
            args.origin, args.destination, args.stops, route.path if route else None
        )

    if args.command == "connections":
        return format_connections(network.connections())

    if args.command == "mst":
        result = network.minimum_spanning_tree(args.algorithm)
        return format_tree(result.edges)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level.upper())

    network = AirlineNetwork(csv_path=args.csv)
    try:
        print(run(args, network))
    except (NetworkError, GraphNotInitializedError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
