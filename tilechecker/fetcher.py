import logging
from typing import List

import requests

from tilechecker.config import REQUEST_TIMEOUT
from tilechecker.errors import FetchError, ParseError
from tilechecker.tiles import TileDescriptor

logger = logging.getLogger(__name__)


def fetch_tile_list(api_url, session=None, timeout=REQUEST_TIMEOUT) -> List[TileDescriptor]:
    """
    GET the tile list endpoint and parse its JSON array.

    Raises FetchError on transport or HTTP status failure and ParseError when
    the body is not an array of {url, width, height} objects.
    """
    http = session or requests
    try:
        response = http.get(api_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to get tiles from API: {e}") from e

    try:
        payload = response.json()
    except ValueError as e:
        raise ParseError(f"Tile list is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ParseError(f"Tile list must be a JSON array, got {type(payload).__name__}")

    tiles = [TileDescriptor.from_json(item) for item in payload]
    logger.info("Tile list from %s: %d tiles", api_url, len(tiles))
    return tiles
