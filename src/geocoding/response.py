from typing import Any, Dict, List, Optional

from src.models.geo import Address, Position

_UNSET = object()


class GeocodingResponse:
    """
    Successful result of a geocoding query.

    Keeps the parsed payload and the options the request was made with.
    Position and address are derived from the first result on first access;
    both may be None if the service left the corresponding fields out.
    """

    def __init__(self, payload: List[Dict[str, Any]], options: Dict[str, Any]):
        self._payload = list(payload)
        self._options = dict(options)
        self._position = _UNSET
        self._address = _UNSET

    @property
    def results(self) -> List[Dict[str, Any]]:
        return list(self._payload)

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def get_position(self) -> Optional[Position]:
        if self._position is _UNSET:
            self._position = Position.from_nominatim(self._payload[0])
        return self._position

    def get_address(self) -> Optional[Address]:
        if self._address is _UNSET:
            self._address = Address.from_nominatim(self._payload[0])
        return self._address

    def __repr__(self):
        return f"GeocodingResponse(results={len(self._payload)}, options={self._options!r})"
