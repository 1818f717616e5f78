"""
Configuration module for the Airline Router.

This module handles loading environment variables and provides
centralized configuration for data location and application settings.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Application configuration class.

    Attributes:
        CSV_PATH: Path to the flight CSV export.
        LOG_LEVEL: Logging level name for the CLI.
        DEFAULT_MST_ALGORITHM: Spanning tree algorithm used when none is given.
    """

    CSV_PATH: str = os.getenv("AIRLINE_ROUTING_CSV", "data/airports.csv")
    LOG_LEVEL: str = os.getenv("AIRLINE_ROUTING_LOG_LEVEL", "INFO").upper()
    DEFAULT_MST_ALGORITHM: str = os.getenv(
        "AIRLINE_ROUTING_MST_ALGORITHM", "prim"
    ).lower()
