"""
Nominatim Client
--------------
Forward and reverse geocoding against an OpenStreetMap Nominatim instance.

The public instance allows at most one request per second and requires a
User-Agent identifying the application. Throttling is left to the caller;
own instances are not subject to the usage policy.
"""
import requests
import logging
from enum import Enum
from typing import Optional, Dict, Any, Tuple, Union

from src.geocoding.config import ClientConfig
from src.geocoding.errors import (
    GeocodingError,
    GeocodingConnectionError,
    InvalidResponseError,
    NoResultsError,
    InvalidStatusError,
)
from src.geocoding.base import GeocodingService
from src.geocoding.normalizer import normalize_address
from src.geocoding.response import GeocodingResponse
from src.models.geo import Position, Rectangle, Address

# Get logger
logger = logging.getLogger(__name__)

Query = Union[str, Address, Position]


class QueryMode(Enum):
    FORWARD = "search"
    REVERSE = "reverse"

    @classmethod
    def for_options(cls, options: Dict[str, Any]) -> "QueryMode":
        """Reverse lookup when both lat and lon are set, forward search otherwise."""
        if _is_set(options.get("lat")) and _is_set(options.get("lon")):
            return cls.REVERSE
        return cls.FORWARD


def _is_set(value) -> bool:
    return value is not None and value != ""


class GeocodingClient(GeocodingService):
    """
    Client for the Nominatim geocoding API.

    Holds its own configuration and an optional viewport bias; the bias
    applies to every following query until cleared. Instances are not
    thread-safe.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self.bias: Optional[Tuple[Position, Position]] = None

    def configure(self, **changes) -> ClientConfig:
        """Update configuration fields; anything not passed keeps its current value."""
        self.config = ClientConfig(**{**self.config.model_dump(), **changes})
        return self.config

    def set_bias(self, corner1: Position, corner2: Position):
        """
        Prefer results inside the rectangle spanned by two opposite corners
        for all following queries.
        """
        self.bias = (corner1, corner2)

    def clear_bias(self):
        self.bias = None

    def resolve_position(self, query: Union[str, Address], options: Optional[Dict[str, Any]] = None, full_result: bool = False):
        """
        Get the position of an address.

        Args:
            query: Free-text address or Address
            options: Extra request parameters; a Rectangle under "bounds"
                restricts the search to that rectangle
            full_result: Return the whole GeocodingResponse instead of the Position

        Returns:
            Position (possibly None) or GeocodingResponse
        """
        if isinstance(query, Address):
            query = str(query)
        elif not isinstance(query, str):
            raise TypeError("Address should be an instance of Address or a string.")

        options = dict(options or {})

        bounds = options.get("bounds")
        if isinstance(bounds, Rectangle):
            left, bottom, right, top = bounds.bounds()
            options["viewboxlbrt"] = f"{left},{bottom},{right},{top}"
            options["bounded"] = 1
            del options["bounds"]

        if self.config.normalize_addresses:
            query = normalize_address(query)

        result = self.execute_query(query, options)
        return result if full_result else result.get_position()

    def resolve_address(self, query: Position, options: Optional[Dict[str, Any]] = None, full_result: bool = False):
        """
        Get the address at a position.
        A "bounds" option is rejected, it only applies to forward searches.

        Returns:
            Address (possibly None) or GeocodingResponse
        """
        if not isinstance(query, Position):
            raise TypeError("Position should be an instance of Position.")
        if options and "bounds" in options:
            raise ValueError("bounds only applies to forward queries.")

        result = self.execute_query(query, options)
        return result if full_result else result.get_address()

    def resolve_both(self, query: Query, options: Optional[Dict[str, Any]] = None) -> Tuple[Optional[Position], Optional[Address]]:
        """Get both position and address for a query; (None, None) when the query fails."""
        try:
            if isinstance(query, Position):
                response = self.resolve_address(query, options, full_result=True)
            else:
                response = self.resolve_position(query, options, full_result=True)
        except GeocodingError as e:
            logger.warning(f"No position and address for {query}: {e}")
            return None, None

        return response.get_position(), response.get_address()

    def execute_query(self, query: Query, options: Optional[Dict[str, Any]] = None) -> GeocodingResponse:
        options = dict(options or {})

        if isinstance(query, Position):
            options["lat"] = query.latitude
            options["lon"] = query.longitude  # not "lng"
        else:
            options["lat"] = None
            options["lon"] = None
            options["q"] = str(query)

        return self._query(options)

    def build_params(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """Add the bias viewport and the fixed protocol parameters to request options."""
        params = dict(options)

        if self.bias is not None:
            corner1, corner2 = self.bias
            params["viewbox"] = (
                f"{corner1.latitude},{corner1.longitude},"
                f"{corner2.latitude},{corner2.longitude}"
            )
            params["bounded"] = 1

        params["format"] = "json"
        params["addressdetails"] = 1
        params["email"] = self.config.email

        return params

    def _query(self, options: Dict[str, Any]) -> GeocodingResponse:
        mode = QueryMode.for_options(options)
        params = self.build_params(options)
        url = self.config.base_url + mode.value

        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        auth = (self.config.username, self.config.password) if self.config.username else None

        logger.debug(f"Nominatim {mode.value} request: {params}")

        try:
            response = requests.get(
                url,
                params=params,
                headers=headers,
                auth=auth,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Network error while querying {url}: {e}")
            raise GeocodingConnectionError("Unable to connect to geocoding API.") from e

        if not response.content:
            logger.warning(f"Empty response from {url} (status {response.status_code})")
            raise GeocodingConnectionError("Unable to connect to geocoding API.")

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Unparseable response from {url} (status {response.status_code})")
            raise InvalidResponseError("Unable to parse response from geocoding API.") from e

        if isinstance(payload, dict):
            # reverse lookups answer 200 {"error": "Unable to geocode"} when nothing is there
            if set(payload) == {"error"} and response.status_code == 200:
                payload = []
            else:
                payload = [payload] if payload else []
        elif not isinstance(payload, list) or not all(isinstance(place, dict) for place in payload):
            logger.warning(f"Unexpected JSON from {url}: {type(payload).__name__}")
            raise InvalidResponseError("Unable to parse response from geocoding API.")

        if not payload:
            logger.warning(f"Geocoding query returned no results: {params}")
            raise NoResultsError("Geocoding query failed (no results).")

        if response.status_code != 200:
            logger.warning(f"Geocoding HTTP error ({response.status_code}) for {url}")
            raise InvalidStatusError(
                f"Geocoding query failed (status: '{response.status_code}').",
                status_code=response.status_code,
            )

        logger.info(f"Nominatim {mode.value} returned {len(payload)} result(s)")
        return GeocodingResponse(payload, params)
