from abc import ABC, abstractmethod


class GeocodingService(ABC):
    """Forward and reverse geocoding contract shared by geocoder implementations."""

    @abstractmethod
    def resolve_position(self, query, options=None, full_result=False):
        """Resolve an address (string or Address) to a Position."""

    @abstractmethod
    def resolve_address(self, query, options=None, full_result=False):
        """Resolve a Position to an Address."""

    @abstractmethod
    def resolve_both(self, query, options=None):
        """Resolve any query to a (Position, Address) pair, (None, None) if nothing was found."""
