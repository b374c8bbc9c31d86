"""
Geocoding Errors
--------------
The failure kinds a geocoding query can end in. Each kind is a direct
subclass of GeocodingError so callers can handle them one by one or together.
"""


class GeocodingError(Exception):
    """Base class for geocoding failures."""


class GeocodingConnectionError(GeocodingError):
    """No response was obtained from the geocoding service."""


class InvalidResponseError(GeocodingError):
    """The response body could not be parsed as geocoding results."""


class NoResultsError(GeocodingError):
    """The query succeeded but nothing matched."""


class InvalidStatusError(GeocodingError):
    """The service answered with a non-200 status."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code
