"""
Track serialization - Convert tile records and layouts to and from JSON.

Provides:
- Tile list records as JSON text
- Built layouts as JSON text
"""

import json
from typing import Any, List

from tracktiles.tile.specs import TileSpecifications
from tracktiles.track.tile_list import TileList


def dumps_tiles(tiles: TileList, indent: int | None = None) -> str:
    """Serialize the records of a tile list to JSON."""
    TileList.validate_instance(tiles)
    return json.dumps(tiles.export(), indent=indent)


def loads_tiles(specs: TileSpecifications, text: str) -> TileList:
    """Build a tile list from JSON records.

    Args:
        specs: Specifications of the tiles
        text: JSON array of tile records

    Returns:
        The tile list

    Raises:
        ValueError: If the text is not valid JSON
        TypeError: If the records are not valid tile records
    """
    records: List[Any] = json.loads(text)
    return TileList(specs, records)


def dumps_layout(layout: Any, indent: int | None = None) -> str:
    """Serialize a built track or list layout to JSON."""
    return json.dumps(layout.get_state(), indent=indent)
