import pytest
from pydantic import ValidationError
from src.models.geo import Position, Rectangle, Address


PLACE = {
    "lat": "50.0755381",
    "lon": "14.4378005",
    "display_name": "12, Vinohradská, Vinohrady, Praha, 120 00, Česko",
    "address": {
        "house_number": "12",
        "road": "Vinohradská",
        "suburb": "Vinohrady",
        "city": "Praha",
        "postcode": "120 00",
        "country": "Česko",
        "country_code": "cz",
    },
}


class TestPosition:
    """Test suite for Position model"""

    def test_positional_and_keyword_construction_are_equal(self):
        """Test that Position(lat, lon) equals the keyword form"""
        assert Position(50.1, 14.4) == Position(latitude=50.1, longitude=14.4)

    def test_position_is_immutable(self):
        """Test that a Position cannot be modified"""
        position = Position(50.1, 14.4)

        with pytest.raises(ValidationError):
            position.latitude = 0

    def test_out_of_range_coordinates_raise_validation_error(self):
        """Test that latitude and longitude ranges are enforced"""
        with pytest.raises(ValidationError):
            Position(91, 0)
        with pytest.raises(ValidationError):
            Position(0, -181)

    def test_from_nominatim_parses_string_coordinates(self):
        """Test that Nominatim's string coordinates become floats"""
        position = Position.from_nominatim(PLACE)

        assert position == Position(50.0755381, 14.4378005)

    def test_from_nominatim_without_coordinates_returns_none(self):
        """Test that a place without lat/lon yields None"""
        assert Position.from_nominatim({"display_name": "Somewhere"}) is None
        assert Position.from_nominatim({"lat": "abc", "lon": "1"}) is None


class TestRectangle:
    """Test suite for Rectangle model"""

    def test_bounds_are_left_bottom_right_top(self):
        """Test that bounds come out as (min lon, min lat, max lon, max lat)"""
        rectangle = Rectangle(Position(50.0, 14.0), Position(50.2, 14.6))

        assert rectangle.bounds() == (14.0, 50.0, 14.6, 50.2)

    def test_bounds_do_not_depend_on_corner_order(self):
        """Test that any two opposite corners give the same bounds"""
        a = Rectangle(Position(50.2, 14.0), Position(50.0, 14.6))
        b = Rectangle(Position(50.0, 14.6), Position(50.2, 14.0))

        assert a.bounds() == b.bounds() == (14.0, 50.0, 14.6, 50.2)


class TestAddress:
    """Test suite for Address model"""

    def test_from_nominatim_extracts_components(self):
        """Test that address details are mapped onto the model"""
        address = Address.from_nominatim(PLACE)

        assert address.street == "Vinohradská"
        assert address.house_number == "12"
        assert address.postcode == "120 00"
        assert address.city == "Praha"
        assert address.district == "Vinohrady"
        assert address.country_code == "cz"
        assert address.display_name == PLACE["display_name"]

    def test_town_is_used_when_city_is_missing(self):
        """Test that smaller settlements fill the city field"""
        address = Address.from_nominatim({"address": {"town": "Beroun", "village": "Zdejcina"}})

        assert address.city == "Beroun"

    def test_str_is_single_line(self):
        """Test that an address stringifies to one free-text line"""
        address = Address.from_nominatim(PLACE)

        assert str(address) == "Vinohradská 12, 120 00 Praha, Česko"

    def test_str_falls_back_to_display_name(self):
        """Test that an address without components uses the display name"""
        address = Address(display_name="Somewhere, Earth")

        assert str(address) == "Somewhere, Earth"

    def test_from_nominatim_without_address_returns_none(self):
        """Test that a place without details or display name yields None"""
        assert Address.from_nominatim({"lat": "1", "lon": "2"}) is None
