"""
Data provider adapters for flight data.
"""

from src.airline_router.adapters.data_providers.csv_provider import (
    CsvFlightDataProvider,
    DataFrameFlightDataProvider,
    extract_state,
    normalize_flights_df,
)

__all__ = [
    "CsvFlightDataProvider",
    "DataFrameFlightDataProvider",
    "extract_state",
    "normalize_flights_df",
]
