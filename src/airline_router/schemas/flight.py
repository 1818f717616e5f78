"""
Flight data schemas using Pandera.

Defines the core contract for flight data flowing from data providers
into graph construction. Schema validation happens at the provider
boundary only, not per-row.
"""

import pandera as pa
from pandera.typing import DataFrame, Series

# Column names of the raw CSV export, mapped to the schema's columns
CSV_COLUMN_MAP = {
    "Origin_airport": "departure_airport",
    "Destination_airport": "arrival_airport",
    "Origin_city": "departure_city",
    "Destination_city": "arrival_city",
    "Distance": "distance",
    "Cost": "cost",
}


class FlightRecordSchema(pa.DataFrameModel):
    """
    Core contract - graph construction requirements.

    One row per directed flight. States are derived from the city columns
    by the provider. Extra columns are allowed and preserved.
    """

    departure_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Departure airport code (e.g., 'ATL')",
    )
    arrival_airport: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Arrival airport code",
    )
    departure_state: Series[str] = pa.Field(
        nullable=False,
        description="Two-letter state of the departure airport",
    )
    arrival_state: Series[str] = pa.Field(
        nullable=False,
        description="Two-letter state of the arrival airport",
    )
    distance: Series[int] = pa.Field(
        ge=0,
        description="Flight distance",
    )
    cost: Series[int] = pa.Field(
        ge=0,
        description="Flight cost",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightRecordSchema"
        description = "Directed flight records required to build the airline graph"


FlightDataFrame = DataFrame[FlightRecordSchema]
