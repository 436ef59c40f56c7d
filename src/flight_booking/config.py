"""
Configuration module for the Flight Booking service.

This module handles loading environment variables and provides
centralized configuration for the dataset location, the HTTP server and
logging.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    """
    Application configuration class.

    Attributes:
        FLIGHT_DATA_PATH: JSON route dataset loaded at startup.
        API_HOST: Interface the HTTP server binds to.
        API_PORT: Port the HTTP server listens on.
        CORS_ORIGINS: Origins allowed by the CORS middleware.
        LOG_LEVEL: Root logger level name.

    Raises:
        ValueError: If API_PORT is not an integer.
    """

    FLIGHT_DATA_PATH: str = os.getenv("FLIGHT_DATA_PATH", "data/flights.json")
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "3000"))
    CORS_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
