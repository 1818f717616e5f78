"""
Directed, weighted airline graph.

Airports are vertices, flights are directed edges carrying two independent
weights: distance and cost. The Graph owns every Airport, and every Airport
owns its outgoing Flights. Flights refer to their destination by airport
code only; all traversal resolves codes through the Graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import UnknownAirportError


@dataclass(frozen=True)
class Flight:
    """
    One-way connection to another airport.

    Attributes:
        destination: Code of the arrival airport.
        distance: Flight distance (non-negative).
        cost: Flight cost (non-negative).
    """

    destination: str
    distance: int
    cost: int


@dataclass(eq=False)
class Airport:
    """
    A vertex of the airline graph.

    Attributes:
        code: Unique airport identifier (e.g. 'ATL').
        state: Region tag used for "all airports in state X" queries.
        inbound: Number of flights arriving at this airport.
        outbound: Number of flights departing from this airport.
    """

    code: str
    state: str
    inbound: int = 0
    outbound: int = 0
    _flights: Dict[str, Flight] = field(default_factory=dict, repr=False)

    @property
    def flights(self) -> Dict[str, Flight]:
        """Outgoing flights keyed by destination code (copy)."""
        return dict(self._flights)

    @property
    def connections(self) -> int:
        """Total number of direct connections (inbound + outbound)."""
        return self.inbound + self.outbound

    def has_flight_to(self, code: str) -> bool:
        return code in self._flights

    def is_terminal(self) -> bool:
        """True iff no flight departs from this airport."""
        return not self._flights


class Graph:
    """
    Airline graph: airport code -> Airport, plus a state -> codes index.

    The state index is kept consistent with the primary mapping on every
    insertion. Airports are never removed.
    """

    def __init__(self) -> None:
        self._airports: Dict[str, Airport] = {}
        self._by_state: Dict[str, List[str]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_airport(self, code: str, state: str) -> bool:
        """
        Create an airport and register it in its state's bucket.

        Returns:
            True if the airport was created, False if the code already
            existed (the existing airport and its flights are untouched).
        """
        if code in self._airports:
            return False
        self._airports[code] = Airport(code=code, state=state)
        self._by_state.setdefault(state, []).append(code)
        return True

    def add_flight(
        self, depart: str, arrive: str, distance: int, cost: int
    ) -> bool:
        """
        Insert a directed flight depart -> arrive.

        A second flight for the same ordered pair is silently dropped:
        the first one inserted wins.

        Returns:
            True if the flight was inserted, False if it was dropped.

        Raises:
            UnknownAirportError: If either airport is absent.
        """
        source = self.airport(depart)
        target = self.airport(arrive)
        if source.has_flight_to(arrive):
            return False
        source._flights[arrive] = Flight(
            destination=arrive, distance=distance, cost=cost
        )
        source.outbound += 1
        target.inbound += 1
        return True

    # Graph-theory aliases
    add_vertex = add_airport
    add_edge = add_flight

    # --- Query API -----------------------------------------------------------

    def airport(self, code: str) -> Airport:
        """
        Return the airport with the given code.

        Raises:
            UnknownAirportError: If the code is not in the graph.
        """
        airport = self._airports.get(code)
        if airport is None:
            raise UnknownAirportError(code)
        return airport

    def find_airport(self, code: str) -> Optional[Airport]:
        """Return the airport with the given code, or None."""
        return self._airports.get(code)

    def has_airport(self, code: str) -> bool:
        return code in self._airports

    def neighbors(self, code: str) -> Dict[str, Flight]:
        """
        Outgoing flights of an airport, keyed by destination code.

        Raises:
            UnknownAirportError: If the code is not in the graph.
        """
        return self.airport(code).flights

    def is_terminal(self, code: str) -> bool:
        """
        True iff no flight departs from the airport.

        Raises:
            UnknownAirportError: If the code is not in the graph.
        """
        return self.airport(code).is_terminal()

    def codes(self) -> List[str]:
        """Airport codes in insertion order."""
        return list(self._airports)

    def airports(self) -> List[Airport]:
        """Airports in insertion order."""
        return list(self._airports.values())

    def flights(self) -> Iterator[Tuple[str, Flight]]:
        """Yield (departure code, Flight) for every flight in the graph."""
        for code, airport in self._airports.items():
            for flight in airport._flights.values():
                yield code, flight

    def states(self) -> Dict[str, Tuple[str, ...]]:
        """Copy of the state index (state -> airport codes)."""
        return {state: tuple(codes) for state, codes in self._by_state.items()}

    def airports_in_state(self, state: str) -> Tuple[str, ...]:
        """Airport codes registered in a state; empty for an unknown state."""
        return tuple(self._by_state.get(state, ()))

    def connection_counts(self) -> List[Tuple[str, int, int, int]]:
        """
        Direct connection counts per airport.

        Returns:
            (code, inbound, outbound, total) tuples sorted by total
            descending, then by code.
        """
        counts = [
            (a.code, a.inbound, a.outbound, a.connections)
            for a in self._airports.values()
        ]
        counts.sort(key=lambda row: (-row[3], row[0]))
        return counts

    @property
    def flight_count(self) -> int:
        return sum(a.outbound for a in self._airports.values())

    def __contains__(self, code: object) -> bool:
        return code in self._airports

    def __len__(self) -> int:
        return len(self._airports)

    def __repr__(self) -> str:
        return f"Graph(airports={len(self)}, flights={self.flight_count})"
