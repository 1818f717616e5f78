"""
Tests for the directed airline graph.

Tests cover:
- Airport creation and the state index
- Flight insertion, first-write-wins and connection counters
- Lookup failures (UnknownAirportError)
- Terminal airports
"""

import pytest

from src.network.exceptions import NetworkError, UnknownAirportError, UnknownVertex
from src.network.graph import Flight, Graph


# -------------------------
# Airports
# -------------------------


class TestAddAirport:
    """Tests for Graph.add_airport."""

    def test_creates_airport_and_state_bucket(self) -> None:
        """A new airport is registered in its state's bucket."""
        g = Graph()

        assert g.add_airport("ATL", "GA") is True
        assert "ATL" in g
        assert g.airport("ATL").state == "GA"
        assert g.airports_in_state("GA") == ("ATL",)

    def test_appends_to_existing_state(self) -> None:
        """Airports of the same state share one bucket in insertion order."""
        g = Graph()
        g.add_airport("MIA", "FL")
        g.add_airport("MCO", "FL")

        assert g.airports_in_state("FL") == ("MIA", "MCO")
        assert g.states() == {"FL": ("MIA", "MCO")}

    def test_duplicate_airport_keeps_existing_flights(self) -> None:
        """Re-adding a code is a no-op and does not clobber its flights."""
        g = Graph()
        g.add_airport("ATL", "GA")
        g.add_airport("BOS", "MA")
        g.add_flight("ATL", "BOS", 946, 183)

        assert g.add_airport("ATL", "XX") is False
        assert g.airport("ATL").state == "GA"
        assert g.neighbors("ATL") == {"BOS": Flight("BOS", 946, 183)}
        assert g.airports_in_state("XX") == ()
        assert len(g) == 2

    def test_unknown_state_is_empty(self) -> None:
        assert Graph().airports_in_state("ZZ") == ()

    def test_vertex_alias(self) -> None:
        g = Graph()
        assert g.add_vertex("A", "XX") is True
        assert g.has_airport("A")


# -------------------------
# Flights
# -------------------------


class TestAddFlight:
    """Tests for Graph.add_flight."""

    def test_inserts_flight_and_updates_counters(self, abc_graph: Graph) -> None:
        """Counters track outbound and inbound flights."""
        a = abc_graph.airport("A")
        c = abc_graph.airport("C")

        assert a.outbound == 2
        assert a.inbound == 0
        assert c.inbound == 2
        assert c.outbound == 0
        assert abc_graph.flight_count == 3

    def test_second_flight_for_same_pair_is_dropped(self) -> None:
        """First write wins: the later flight is silently ignored."""
        g = Graph()
        g.add_airport("A", "XX")
        g.add_airport("B", "XX")

        assert g.add_flight("A", "B", 5, 5) is True
        assert g.add_flight("A", "B", 1, 1) is False

        assert g.neighbors("A")["B"] == Flight("B", 5, 5)
        assert g.airport("A").outbound == 1
        assert g.airport("B").inbound == 1

    def test_reverse_direction_is_a_different_flight(self) -> None:
        g = Graph()
        g.add_airport("A", "XX")
        g.add_airport("B", "XX")

        assert g.add_flight("A", "B", 5, 5) is True
        assert g.add_flight("B", "A", 5, 7) is True
        assert g.flight_count == 2

    @pytest.mark.parametrize("depart,arrive", [("ZZZ", "A"), ("A", "ZZZ")])
    def test_unknown_endpoint_raises(self, depart: str, arrive: str) -> None:
        """Both endpoints must exist."""
        g = Graph()
        g.add_airport("A", "XX")

        with pytest.raises(UnknownAirportError) as exc_info:
            g.add_flight(depart, arrive, 1, 1)

        assert exc_info.value.code == "ZZZ"
        assert g.flight_count == 0

    def test_flights_iterates_in_insertion_order(self, abc_graph: Graph) -> None:
        assert [(dep, f.destination) for dep, f in abc_graph.flights()] == [
            ("A", "B"),
            ("A", "C"),
            ("B", "C"),
        ]

    def test_edge_alias(self) -> None:
        g = Graph()
        g.add_vertex("A", "XX")
        g.add_vertex("B", "XX")
        assert g.add_edge("A", "B", 1, 2) is True


# -------------------------
# Queries
# -------------------------


class TestQueries:
    """Tests for neighbor, terminal and lookup queries."""

    def test_neighbors_returns_copy(self, abc_graph: Graph) -> None:
        """Mutating the result must not touch the graph."""
        out = abc_graph.neighbors("A")
        out.clear()

        assert set(abc_graph.neighbors("A")) == {"B", "C"}

    @pytest.mark.parametrize("code,terminal", [("A", False), ("B", False), ("C", True)])
    def test_is_terminal_iff_no_neighbors(
        self, abc_graph: Graph, code: str, terminal: bool
    ) -> None:
        assert abc_graph.is_terminal(code) is terminal
        assert abc_graph.is_terminal(code) == (not abc_graph.neighbors(code))

    @pytest.mark.parametrize("method", ["neighbors", "is_terminal", "airport"])
    def test_unknown_airport_raises(self, abc_graph: Graph, method: str) -> None:
        with pytest.raises(UnknownAirportError):
            getattr(abc_graph, method)("ZZZ")

    def test_find_airport_returns_none(self, abc_graph: Graph) -> None:
        assert abc_graph.find_airport("ZZZ") is None
        assert abc_graph.find_airport("A").code == "A"

    def test_unknown_vertex_alias(self) -> None:
        """The graph-theory name refers to the same exception."""
        assert UnknownVertex is UnknownAirportError
        assert issubclass(UnknownAirportError, NetworkError)


class TestConnectionCounts:
    """Tests for Graph.connection_counts."""

    def test_sorted_by_total_then_code(self, abc_graph: Graph) -> None:
        assert abc_graph.connection_counts() == [
            ("A", 0, 2, 2),
            ("B", 1, 1, 2),
            ("C", 2, 0, 2),
        ]

    def test_busiest_first(self) -> None:
        g = Graph()
        for code in ("X", "Y", "Z"):
            g.add_airport(code, "ST")
        g.add_flight("Z", "X", 1, 1)
        g.add_flight("Z", "Y", 1, 1)
        g.add_flight("X", "Z", 1, 1)

        assert [row[0] for row in g.connection_counts()] == ["Z", "X", "Y"]
