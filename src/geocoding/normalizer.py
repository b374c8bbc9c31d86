"""
Address Normalization
-------------------
Heuristic cleanup of free-text addresses before they are sent to Nominatim.
The Nominatim tokenizer matches poorly when postal codes or administrative
district numbers ("Praha 3") are part of the query, so these are stripped.
"""
import re

# Cities whose addresses carry a numbered administrative district
DISTRICT_CITIES = ("Praha", "Brno", "Olomouc", "Plzeň", "Plzen", "Ostrava", "Pardubice")

# Assumes no address contains a 5-digit house number
ZIP_CODE_PATTERN = re.compile(r"\d{3}\W*\d{2}")
NUMBER_AFTER_COMMA_PATTERN = re.compile(r",(\D*?)\d+")
DISTRICT_PATTERN = re.compile(
    r"(" + "|".join(re.escape(city) for city in DISTRICT_CITIES) + r") +\d+",
    re.IGNORECASE,
)
SEPARATOR_PATTERN = re.compile(r"[, ]+")


def normalize_address(address: str) -> str:
    address = ZIP_CODE_PATTERN.sub("", address)

    # every pass removes one number behind each comma
    matched = 1
    while matched:
        address, matched = NUMBER_AFTER_COMMA_PATTERN.subn(r",\1", address)

    address = DISTRICT_PATTERN.sub(r"\1", address)
    address = SEPARATOR_PATTERN.sub(" ", address)

    return address.strip()
