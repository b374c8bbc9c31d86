from fastapi import FastAPI, HTTPException, Depends, Query
from pydantic import BaseModel
import logging
from typing import Optional

from src.geocoding.config import ClientConfig
from src.geocoding.errors import (
    GeocodingConnectionError,
    InvalidResponseError,
    InvalidStatusError,
    NoResultsError,
)
from src.geocoding.nominatim import GeocodingClient
from src.models.geo import Position, Rectangle

# Configure logging - Adjust format to remove INFO/WARNING prefixes
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(message)s",
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Nominatim Geocoding API",
    description="Simple API for forward and reverse geocoding through Nominatim",
    version="1.0.0"
)

# One client per process so the bias set through /bias applies to later queries
_client: Optional[GeocodingClient] = None


def get_client():
    global _client
    if _client is None:
        _client = GeocodingClient(ClientConfig.from_env())
    return _client


class BiasRequest(BaseModel):
    corner1: Position
    corner2: Position


def _as_dict(position, address):
    return {
        "position": position.model_dump() if position else None,
        "address": address.model_dump() if address else None,
        "formatted_address": str(address) if address else None,
    }


def _raise_for_geocoding_error(e):
    if isinstance(e, NoResultsError):
        raise HTTPException(status_code=404, detail=str(e))
    if isinstance(e, GeocodingConnectionError):
        raise HTTPException(status_code=503, detail=str(e))
    if isinstance(e, (InvalidResponseError, InvalidStatusError)):
        raise HTTPException(status_code=502, detail=str(e))
    logger.error(f"Unexpected error: {str(e)}")
    raise HTTPException(status_code=500, detail=str(e))


@app.get("/")
def read_root():
    return {"message": "Welcome to the Nominatim Geocoding API"}


@app.get("/search")
def search(
    q: str,
    left: Optional[float] = Query(None, ge=-180, le=180),
    bottom: Optional[float] = Query(None, ge=-90, le=90),
    right: Optional[float] = Query(None, ge=-180, le=180),
    top: Optional[float] = Query(None, ge=-90, le=90),
    client: GeocodingClient = Depends(get_client)
):
    """
    Forward geocoding of a free-text address.

    Args:
        q: Address to look up
        left, bottom, right, top: Optional rectangle the results must lie in
    """
    options = {}
    box = (left, bottom, right, top)
    if any(v is not None for v in box):
        if any(v is None for v in box):
            raise HTTPException(status_code=422, detail="left, bottom, right and top must be given together")
        options["bounds"] = Rectangle(Position(bottom, left), Position(top, right))

    try:
        response = client.resolve_position(q, options, full_result=True)
        return _as_dict(response.get_position(), response.get_address())
    except Exception as e:
        logger.error(f"Error geocoding '{q}': {str(e)}")
        _raise_for_geocoding_error(e)


@app.get("/reverse")
def reverse(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    client: GeocodingClient = Depends(get_client)
):
    """Reverse geocoding of a position"""
    try:
        response = client.resolve_address(Position(lat, lon), full_result=True)
        return _as_dict(response.get_position(), response.get_address())
    except Exception as e:
        logger.error(f"Error reverse geocoding ({lat}, {lon}): {str(e)}")
        _raise_for_geocoding_error(e)


@app.get("/lookup")
def lookup(
    q: Optional[str] = None,
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
    client: GeocodingClient = Depends(get_client)
):
    if lat is not None and lon is not None:
        query = Position(lat, lon)
    elif q:
        query = q
    else:
        raise HTTPException(status_code=422, detail="Provide either q or both lat and lon")

    position, address = client.resolve_both(query)
    return _as_dict(position, address)


@app.put("/bias")
def set_bias(bias: BiasRequest, client: GeocodingClient = Depends(get_client)):
    client.set_bias(bias.corner1, bias.corner2)
    logger.info(f"Viewport bias set to {bias.corner1} - {bias.corner2}")
    return {"status": "bias set"}


@app.delete("/bias")
def clear_bias(client: GeocodingClient = Depends(get_client)):
    client.clear_bias()
    logger.info("Viewport bias cleared")
    return {"status": "bias cleared"}
