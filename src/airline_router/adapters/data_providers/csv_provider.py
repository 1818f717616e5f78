"""
CSV Data Provider - CSV export to DataFrame adapter.

Reads the flight export (one directed flight per line) and transforms it
into FlightRecordSchema-compliant DataFrames.

Expected header:
    Origin_airport,Destination_airport,Origin_city,Destination_city,Distance,Cost

Cities are quoted with their state, e.g. "Allentown, PA"; the state is the
last two letters of the city field.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from src.airline_router.ports.flight_data_provider import FlightDataProvider
from src.airline_router.schemas.flight import (
    CSV_COLUMN_MAP,
    FlightDataFrame,
    FlightRecordSchema,
)
from src.network.validation import validate_flights_df

logger = logging.getLogger(__name__)


def extract_state(cities: pd.Series) -> pd.Series:
    """
    Vectorized state extraction from "City, ST" strings.

    Examples:
        >>> extract_state(pd.Series(["Allentown, PA", " Boston, MA "]))
        0    PA
        1    MA
        dtype: object
    """
    return cities.astype(str).str.strip().str[-2:]


def normalize_flights_df(raw: pd.DataFrame) -> FlightDataFrame:
    """
    Rename export columns, derive states and validate.

    Frames already using the schema's column names pass through unchanged
    apart from validation. Row order is preserved.

    Raises:
        EmptyFlightsError: If there are no rows.
        MissingColumnsError: If required columns cannot be derived.
        pandera.errors.SchemaError: If values violate the schema.
    """
    df = raw.rename(columns=CSV_COLUMN_MAP)

    for col in ("departure_airport", "arrival_airport"):
        if col in df.columns:
            df[col] = df[col].astype(str).str.strip()

    if "departure_state" not in df.columns and "departure_city" in df.columns:
        df["departure_state"] = extract_state(df["departure_city"])
    if "arrival_state" not in df.columns and "arrival_city" in df.columns:
        df["arrival_state"] = extract_state(df["arrival_city"])

    validate_flights_df(df)
    return FlightRecordSchema.validate(df)


class CsvFlightDataProvider(FlightDataProvider):
    """
    Data provider for the flight CSV export.

    The file is read on every call; caching is the repository's job.

    Attributes:
        csv_path: Path to the CSV file.
    """

    def __init__(self, csv_path: Union[str, Path]) -> None:
        self._csv_path = Path(csv_path)

    @property
    def csv_path(self) -> Path:
        return self._csv_path

    def get_flights_df(self) -> FlightDataFrame:
        """
        Read and validate the CSV export.

        Raises:
            FileNotFoundError: If the CSV file does not exist.
        """
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Flights CSV not found: {self._csv_path}")

        raw = pd.read_csv(self._csv_path, skipinitialspace=True)
        logger.debug("Read %d rows from %s", len(raw), self._csv_path)

        return normalize_flights_df(raw)

    @property
    def name(self) -> str:
        return f"CSV ({self._csv_path.name})"


class DataFrameFlightDataProvider(FlightDataProvider):
    """
    In-memory provider wrapping an existing DataFrame.

    Accepts either the CSV export columns or the schema's columns.
    """

    def __init__(self, df: pd.DataFrame, name: Optional[str] = None) -> None:
        self._df = df
        self._name = name or "In-memory DataFrame"

    def get_flights_df(self) -> FlightDataFrame:
        return normalize_flights_df(self._df.copy())

    @property
    def name(self) -> str:
        return self._name
