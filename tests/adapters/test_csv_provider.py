"""
Tests for the CSV and in-memory flight data providers.

Tests cover:
- State extraction from "City, ST" fields
- Column normalization and schema validation
- File handling (missing file, quoted cities, header-only export)
"""

import pandas as pd
import pandera as pa
import pytest

from src.airline_router.adapters.data_providers.csv_provider import (
    CsvFlightDataProvider,
    DataFrameFlightDataProvider,
    extract_state,
    normalize_flights_df,
)
from src.network.exceptions import EmptyFlightsError, MissingColumnsError

CSV_HEADER = "Origin_airport,Destination_airport,Origin_city,Destination_city,Distance,Cost"


# =============================================================================
# NORMALIZATION
# =============================================================================


class TestExtractState:
    def test_last_two_letters(self) -> None:
        cities = pd.Series(["Allentown, PA", " Boston, MA ", "Dallas/Fort Worth, TX"])
        assert extract_state(cities).tolist() == ["PA", "MA", "TX"]


class TestNormalizeFlightsDf:
    """Tests for normalize_flights_df."""

    def test_renames_export_columns(self, sample_flights_df: pd.DataFrame) -> None:
        df = normalize_flights_df(sample_flights_df)

        for col in (
            "departure_airport",
            "arrival_airport",
            "departure_state",
            "arrival_state",
            "distance",
            "cost",
        ):
            assert col in df.columns

    def test_derives_states(self, sample_flights_df: pd.DataFrame) -> None:
        df = normalize_flights_df(sample_flights_df)

        assert df["departure_state"].iloc[0] == "GA"
        assert df["arrival_state"].iloc[0] == "MA"

    def test_preserves_row_order(self, sample_flights_df: pd.DataFrame) -> None:
        df = normalize_flights_df(sample_flights_df)
        assert df["departure_airport"].tolist() == sample_flights_df["Origin_airport"].tolist()

    def test_accepts_schema_columns(self) -> None:
        raw = pd.DataFrame({
            "departure_airport": ["ATL"],
            "arrival_airport": ["BOS"],
            "departure_state": ["GA"],
            "arrival_state": ["MA"],
            "distance": [946],
            "cost": [183],
        })
        df = normalize_flights_df(raw)
        assert len(df) == 1

    def test_strips_airport_codes(self) -> None:
        raw = pd.DataFrame({
            "Origin_airport": [" ATL "],
            "Destination_airport": ["BOS"],
            "Origin_city": ["Atlanta, GA"],
            "Destination_city": ["Boston, MA"],
            "Distance": [946],
            "Cost": [183],
        })
        assert normalize_flights_df(raw)["departure_airport"].iloc[0] == "ATL"

    def test_missing_columns_raise(self) -> None:
        raw = pd.DataFrame({"Origin_airport": ["ATL"], "Destination_airport": ["BOS"]})

        with pytest.raises(MissingColumnsError):
            normalize_flights_df(raw)

    def test_negative_cost_rejected_by_schema(self, sample_flights_df: pd.DataFrame) -> None:
        sample_flights_df.loc[0, "Cost"] = -5

        with pytest.raises(pa.errors.SchemaError):
            normalize_flights_df(sample_flights_df)


# =============================================================================
# PROVIDERS
# =============================================================================


class TestCsvFlightDataProvider:
    """Tests for CsvFlightDataProvider."""

    def test_reads_quoted_cities(self, sample_csv: str) -> None:
        df = CsvFlightDataProvider(sample_csv).get_flights_df()

        assert len(df) == 11
        assert df["departure_state"].iloc[0] == "GA"
        assert df["distance"].iloc[0] == 946

    def test_name_mentions_file(self, sample_csv: str) -> None:
        assert CsvFlightDataProvider(sample_csv).name == "CSV (airports.csv)"

    def test_missing_file_raises(self, tmp_path) -> None:
        provider = CsvFlightDataProvider(tmp_path / "absent.csv")

        with pytest.raises(FileNotFoundError):
            provider.get_flights_df()

    def test_header_only_raises_empty(self, tmp_path) -> None:
        path = tmp_path / "empty.csv"
        path.write_text(CSV_HEADER + "\n", encoding="utf-8")

        with pytest.raises(EmptyFlightsError):
            CsvFlightDataProvider(path).get_flights_df()


class TestDataFrameFlightDataProvider:
    def test_does_not_mutate_input(self, sample_flights_df: pd.DataFrame) -> None:
        provider = DataFrameFlightDataProvider(sample_flights_df)
        provider.get_flights_df()

        assert "departure_airport" not in sample_flights_df.columns

    def test_default_name(self, sample_flights_df: pd.DataFrame) -> None:
        assert DataFrameFlightDataProvider(sample_flights_df).name == "In-memory DataFrame"
