"""
Main entrypoint for the Nominatim geocoding client.

Usage:
    python main.py "Vinohradská 12, 120 00 Praha 2"
    python main.py --reverse 50.0755 14.4378

The HTTP API can be started with `uvicorn src.api.app:app`.
Connection settings are read from NOMINATIM_* environment variables.
"""
import argparse
import logging
import sys

from src.geocoding.config import ClientConfig
from src.geocoding.errors import GeocodingError
from src.geocoding.nominatim import GeocodingClient
from src.models.geo import Position

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Geocode an address or reverse-geocode a position through Nominatim")
    parser.add_argument("query", nargs="+", help="address, or latitude and longitude with --reverse")
    parser.add_argument("--reverse", action="store_true", help="treat the query as 'latitude longitude'")
    parser.add_argument("--no-normalize", action="store_true", help="send the address exactly as given")
    parser.add_argument("--base-url", help="Nominatim instance to use")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Resolve one query and print the position and address found.
    """
    args = parse_args(argv)

    try:
        client = GeocodingClient(ClientConfig.from_env())
        if args.base_url:
            client.configure(base_url=args.base_url)
        if args.no_normalize:
            client.configure(normalize_addresses=False)

        if args.reverse:
            if len(args.query) != 2:
                logger.error("--reverse expects exactly two values: latitude longitude")
                return 1
            response = client.resolve_address(Position(float(args.query[0]), float(args.query[1])), full_result=True)
        else:
            response = client.resolve_position(" ".join(args.query), full_result=True)
    except GeocodingError as e:
        logger.error(f"Geocoding failed: {str(e)}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid argument or setting: {str(e)}")
        return 1

    position = response.get_position()
    address = response.get_address()
    print(f"Position: {position if position else 'unknown'}")
    print(f"Address:  {address if address else 'unknown'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
