"""
Schema definitions for the Airline Router.

Pandera-validated DataFrames as the input contract, frozen dataclasses
as the output contract.
"""

from .flight import CSV_COLUMN_MAP, FlightDataFrame, FlightRecordSchema
from .route import RouteLeg, RouteResult
from .tree import SpanningTreeResult

__all__ = [
    # Flight schemas
    "CSV_COLUMN_MAP",
    "FlightRecordSchema",
    "FlightDataFrame",
    # Result schemas
    "RouteLeg",
    "RouteResult",
    "SpanningTreeResult",
]
