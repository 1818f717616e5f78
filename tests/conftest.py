"""Shared fixtures for airline routing tests."""

import pandas as pd
import pytest

from src.airline_router.adapters.data_providers.csv_provider import (
    DataFrameFlightDataProvider,
)
from src.network.graph import Graph

CSV_HEADER = "Origin_airport,Destination_airport,Origin_city,Destination_city,Distance,Cost"


# =============================================================================
# GRAPH FIXTURES
# =============================================================================


@pytest.fixture
def abc_graph() -> Graph:
    """A -> B (5, 5), B -> C (3, 3), A -> C (10, 10)."""
    g = Graph()
    g.add_airport("A", "XX")
    g.add_airport("B", "XX")
    g.add_airport("C", "YY")
    g.add_flight("A", "B", 5, 5)
    g.add_flight("B", "C", 3, 3)
    g.add_flight("A", "C", 10, 10)
    return g


@pytest.fixture
def stops_graph() -> Graph:
    """
    Graph with routes to D using 0, 1 and 2 intermediate stops.

    A -> D (10), A -> B -> D (1 + 7), A -> B -> C -> D (1 + 1 + 1),
    plus A -> C (5). Costs equal distances.
    """
    g = Graph()
    for code in ("A", "B", "C", "D"):
        g.add_airport(code, "ST")
    g.add_flight("A", "B", 1, 1)
    g.add_flight("B", "C", 1, 1)
    g.add_flight("A", "C", 5, 5)
    g.add_flight("C", "D", 1, 1)
    g.add_flight("A", "D", 10, 10)
    g.add_flight("B", "D", 7, 7)
    return g


# =============================================================================
# FLIGHT DATA FIXTURES
# =============================================================================


SAMPLE_ROWS = [
    ["ATL", "BOS", "Atlanta, GA", "Boston, MA", 946, 183],
    ["BOS", "ATL", "Boston, MA", "Atlanta, GA", 946, 176],
    ["ATL", "MIA", "Atlanta, GA", "Miami, FL", 595, 130],
    ["MIA", "ATL", "Miami, FL", "Atlanta, GA", 595, 128],
    ["ATL", "MCO", "Atlanta, GA", "Orlando, FL", 404, 98],
    ["MCO", "MIA", "Orlando, FL", "Miami, FL", 192, 65],
    ["ORD", "ATL", "Chicago, IL", "Atlanta, GA", 606, 142],
    ["ATL", "ORD", "Atlanta, GA", "Chicago, IL", 606, 150],
    ["LGA", "BOS", "New York, NY", "Boston, MA", 184, 80],
    ["ORD", "LGA", "Chicago, IL", "New York, NY", 733, 155],
    # Duplicate of the first row: dropped, the first flight wins
    ["ATL", "BOS", "Atlanta, GA", "Boston, MA", 1000, 99],
]


@pytest.fixture
def sample_flights_df() -> pd.DataFrame:
    """Flights in the CSV export's column layout."""
    return pd.DataFrame(SAMPLE_ROWS, columns=CSV_HEADER.split(","))


@pytest.fixture
def sample_provider(sample_flights_df: pd.DataFrame) -> DataFrameFlightDataProvider:
    return DataFrameFlightDataProvider(sample_flights_df, name="Sample flights")


@pytest.fixture
def sample_csv(tmp_path) -> str:
    """The sample flights written as a CSV export with quoted cities."""
    lines = [CSV_HEADER]
    for dep, arr, dep_city, arr_city, distance, cost in SAMPLE_ROWS:
        lines.append(f'{dep},{arr},"{dep_city}","{arr_city}",{distance},{cost}')
    path = tmp_path / "airports.csv"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)
