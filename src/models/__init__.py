"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the geographic value objects exchanged with the geocoding service:
positions, bounding rectangles and postal addresses.
"""
from src.models.geo import Position, Rectangle, Address

__all__ = ["Position", "Rectangle", "Address"]
