from typing import Optional, Tuple, Dict, Any

from pydantic import BaseModel, ConfigDict, Field

# Settlement keys in increasing size; the largest one present is used as the city
CITY_KEYS = ("hamlet", "village", "town", "city")
DISTRICT_KEYS = ("suburb", "city_district", "borough")


class Position(BaseModel):
    """A latitude/longitude pair in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def __init__(self, latitude=None, longitude=None, **data):
        # Allow Position(lat, lon) next to the keyword form
        if latitude is not None:
            data["latitude"] = latitude
        if longitude is not None:
            data["longitude"] = longitude
        super().__init__(**data)

    @classmethod
    def from_nominatim(cls, place: Dict[str, Any]) -> Optional["Position"]:
        """Build a Position from a Nominatim place, None if it carries no usable coordinates."""
        try:
            return cls(float(place["lat"]), float(place["lon"]))
        except (KeyError, TypeError, ValueError):
            return None

    def __str__(self):
        return f"{self.latitude},{self.longitude}"


class Rectangle(BaseModel):
    """
    Bounding box spanned by two opposite corners.
    The corners may be given in any order.
    """
    model_config = ConfigDict(frozen=True)

    corner1: Position
    corner2: Position

    def __init__(self, corner1=None, corner2=None, **data):
        if corner1 is not None:
            data["corner1"] = corner1
        if corner2 is not None:
            data["corner2"] = corner2
        super().__init__(**data)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return (left, bottom, right, top) in degrees."""
        lats = (self.corner1.latitude, self.corner2.latitude)
        lons = (self.corner1.longitude, self.corner2.longitude)
        return min(lons), min(lats), max(lons), max(lats)


class Address(BaseModel):
    """Structured postal address"""
    model_config = ConfigDict(frozen=True)

    street: Optional[str] = None
    house_number: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    district: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    country_code: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_nominatim(cls, place: Dict[str, Any]) -> Optional["Address"]:
        """
        Build an Address from a Nominatim place returned with addressdetails=1.
        Returns None when the place has neither address details nor a display name.
        """
        details = place.get("address")
        display_name = place.get("display_name")
        if not isinstance(details, dict):
            details = {}
        if not details and not display_name:
            return None

        city = next((details[key] for key in reversed(CITY_KEYS) if details.get(key)), None)
        district = next((details[key] for key in DISTRICT_KEYS if details.get(key)), None)

        return cls(
            street=details.get("road") or details.get("pedestrian"),
            house_number=details.get("house_number"),
            postcode=details.get("postcode"),
            city=city,
            district=district,
            state=details.get("state"),
            country=details.get("country"),
            country_code=details.get("country_code"),
            display_name=display_name,
        )

    def __str__(self):
        street_line = " ".join(part for part in (self.street, self.house_number) if part)
        city_line = " ".join(part for part in (self.postcode, self.city) if part)
        parts = [part for part in (street_line, city_line, self.country) if part]
        if not parts:
            return self.display_name or ""
        return ", ".join(parts)
