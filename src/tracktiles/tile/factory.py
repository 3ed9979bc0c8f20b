"""
Tile factory - Build tile models from their type.
"""

from typing import Any, Dict, Mapping, Type

from tracktiles.tile.curved import CurvedTileModel
from tracktiles.tile.enlarged import CurvedTileEnlargedModel
from tracktiles.tile.model import TileModel
from tracktiles.tile.specs import TileSpecifications
from tracktiles.tile.straight import StraightTileModel
from tracktiles.tile.types import TileDirection, TileType, validate_type


TILE_MODELS: Dict[TileType, Type[TileModel]] = {
    TileType.STRAIGHT: StraightTileModel,
    TileType.CURVED: CurvedTileModel,
    TileType.CURVED_ENLARGED: CurvedTileEnlargedModel,
}


def create_tile(
    specs: TileSpecifications,
    type: TileType | str = TileType.STRAIGHT,
    direction: TileDirection | str = TileDirection.RIGHT,
    ratio: float = 1,
) -> TileModel:
    """Create a tile model.

    Args:
        specs: Shared tile specifications
        type: Type of tile
        direction: Turn direction
        ratio: Size ratio

    Returns:
        A tile of the class matching the type

    Raises:
        TypeError: If the type, direction or specs are not valid
    """
    tile_type = validate_type(type)
    if tile_type not in TILE_MODELS:
        raise TypeError("A valid type of tile is needed!")

    return TILE_MODELS[tile_type](specs, direction, ratio)


def import_tile(specs: TileSpecifications, record: Mapping[str, Any]) -> TileModel:
    """Create a tile model from an exported record.

    Args:
        specs: Shared tile specifications
        record: Mapping with "type", "direction" and "ratio" keys

    Returns:
        The tile described by the record
    """
    if not isinstance(record, Mapping):
        raise TypeError("A valid type of tile is needed!")

    return create_tile(
        specs,
        record.get("type"),
        record.get("direction", TileDirection.RIGHT),
        record.get("ratio", 1),
    )
