"""
Port for flight data sources.

A provider turns some backend (a CSV export, an in-memory frame) into the
flight table that graph construction consumes.
"""

from abc import ABC, abstractmethod

from src.airline_router.schemas.flight import FlightDataFrame


class FlightDataProvider(ABC):
    """
    Source of directed flight records.

    Providers hand back one validated DataFrame; the schema is checked once
    at this boundary instead of per flight. Row order is significant: when
    two rows describe the same directed flight, graph construction keeps
    the first.

    Implementations:
    - CsvFlightDataProvider: CSV export -> DataFrame
    - DataFrameFlightDataProvider: in-memory DataFrame (tests, notebooks)
    """

    @abstractmethod
    def get_flights_df(self) -> FlightDataFrame:
        """
        Load the flight table.

        Returns:
            DataFrame conforming to FlightRecordSchema.

        Raises:
            pandera.errors.SchemaError: If values violate the schema.
            ValidationError: If the frame is empty or misses columns.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Label used in log messages."""
        ...
