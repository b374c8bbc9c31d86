"""
Geocoding Module
--------------
Handles forward and reverse geocoding operations against OpenStreetMap's Nominatim API:
addresses to coordinates and coordinates to human-readable addresses.
"""
from src.geocoding.config import ClientConfig
from src.geocoding.errors import (
    GeocodingError,
    GeocodingConnectionError,
    InvalidResponseError,
    NoResultsError,
    InvalidStatusError,
)
from src.geocoding.nominatim import GeocodingClient, QueryMode
from src.geocoding.normalizer import normalize_address
from src.geocoding.response import GeocodingResponse

__all__ = [
    "ClientConfig",
    "GeocodingError",
    "GeocodingConnectionError",
    "InvalidResponseError",
    "NoResultsError",
    "InvalidStatusError",
    "GeocodingClient",
    "QueryMode",
    "normalize_address",
    "GeocodingResponse",
]
