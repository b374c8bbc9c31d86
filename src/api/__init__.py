"""
API Module
---------
Provides RESTful API endpoints for geocoding using FastAPI.
Features include:
- Forward geocoding of free-text addresses, optionally restricted to a bounding box
- Reverse geocoding of coordinates
- Combined lookups that answer with nulls instead of errors
- Setting and clearing a viewport bias
"""
