"""
Input validation for the network module.

Provides validation functions that check inputs before graph construction
and search execution, ensuring fail-fast behavior with clear error messages.
"""

from typing import Iterable, Set

import pandas as pd

from .exceptions import (
    EmptyFlightsError,
    InvalidStopsError,
    MissingColumnsError,
    UnknownAirportError,
)
from .graph import Graph

# Columns graph construction reads from every flight row
REQUIRED_COLUMNS: Set[str] = {
    "departure_airport",
    "arrival_airport",
    "departure_state",
    "arrival_state",
    "distance",
    "cost",
}


def validate_flights_df(flights_df: pd.DataFrame) -> None:
    """
    Check that the flight table has rows and every required column.

    Raises:
        EmptyFlightsError: If there are no rows.
        MissingColumnsError: If any of REQUIRED_COLUMNS is absent.
    """
    if flights_df.empty:
        raise EmptyFlightsError()

    missing = REQUIRED_COLUMNS.difference(flights_df.columns)
    if missing:
        raise MissingColumnsError(missing)


def validate_airport_exists(
    airport: str,
    graph: Graph,
    context: str = "graph",
) -> None:
    """
    Validate that an airport exists in the graph.

    Raises:
        UnknownAirportError: If airport is not found.
    """
    if airport not in graph:
        raise UnknownAirportError(airport, context)


def validate_airports_exist(airports: Iterable[str], graph: Graph) -> None:
    """Validate several airports at once, failing on the first unknown one."""
    for airport in airports:
        validate_airport_exists(airport, graph)


def validate_stops(stops: int) -> None:
    """
    Validate the stop count of a constrained search.

    Raises:
        InvalidStopsError: If stops is negative.
    """
    if stops < 0:
        raise InvalidStopsError(stops)
