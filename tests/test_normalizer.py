import re

import pytest
from src.geocoding.normalizer import normalize_address


class TestNormalizeAddress:
    """Test suite for normalize_address function"""

    def test_zip_code_with_space_is_removed(self):
        """Test that a postal code written as '130 00' is stripped"""
        result = normalize_address("Street 12, 130 00 City")

        assert "130 00" not in result
        assert result == "Street 12 City"

    def test_zip_code_variants_are_removed(self):
        """Test that postal codes without or with other separators are stripped"""
        assert normalize_address("Street 12, 13000 City") == "Street 12 City"
        assert normalize_address("Street 12, 130-00 City") == "Street 12 City"

    def test_all_numbers_after_first_comma_are_removed(self):
        """Test that every numeric fragment behind the first comma is stripped, not just the first"""
        result = normalize_address("Street 1, District 3, floor 2")

        assert re.search(r"\d", result.partition("District")[2]) is None
        assert result == "Street 1 District floor"

    def test_house_number_before_comma_is_kept(self):
        """Test that numbers in front of the first comma survive"""
        assert normalize_address("Vinohradská 12, 120 00 Praha 2") == "Vinohradská 12 Praha"

    def test_city_district_number_is_removed(self):
        """Test that 'Praha 3' style district numbers are dropped and the city kept"""
        assert normalize_address("Náměstí Míru 1 Brno 2") == "Náměstí Míru 1 Brno"
        assert normalize_address("Korunní 810 praha 10") == "Korunní 810 praha"

    def test_city_district_does_not_insert_comma(self):
        """Test that removing a district number leaves no stray comma in front of the city"""
        result = normalize_address("Praha 3")

        assert result == "Praha"
        assert not result.startswith(",")

    def test_separators_are_collapsed(self):
        """Test that runs of commas and spaces become a single space"""
        assert normalize_address("Street 12,City") == "Street 12 City"
        assert normalize_address("Street 12 , ,  City") == "Street 12 City"

    def test_plain_address_is_unchanged(self):
        """Test that an address without targeted patterns passes through"""
        assert normalize_address("Main Street 5 Springfield") == "Main Street 5 Springfield"

    @pytest.mark.parametrize("address", [
        "Main Street 5 Springfield",
        "Street 12, 130 00 City",
        "Street 1, District 3, floor 2",
        "Vinohradská 12, 120 00 Praha 2",
        "Praha 3",
        "",
    ])
    def test_normalization_is_idempotent(self, address):
        """Test that normalizing twice gives the same result as normalizing once"""
        once = normalize_address(address)

        assert normalize_address(once) == once
