"""
Tile types - Identifiers for tile variants and directions.

Enum values are the strings used in exported tile records.
"""

from enum import Enum
from typing import Any


class TileType(Enum):
    """Types of tiles."""
    TILE = "tile"
    STRAIGHT = "straight-tile"
    CURVED = "curved-tile"
    CURVED_ENLARGED = "curved-tile-enlarged"


class TileDirection(Enum):
    """Directions a tile can turn to."""
    RIGHT = "right"
    LEFT = "left"


# Sort order of the types and directions
TYPE_RANKS = {
    TileType.TILE: 0,
    TileType.STRAIGHT: 1,
    TileType.CURVED_ENLARGED: 2,
    TileType.CURVED: 3,
}

DIRECTION_RANKS = {
    TileDirection.RIGHT: 0,
    TileDirection.LEFT: 1,
}


def validate_type(value: Any) -> TileType:
    """Resolve a tile type from an enum member or its string value.

    Raises:
        TypeError: If the value is not a known tile type
    """
    if isinstance(value, TileType):
        return value
    try:
        return TileType(value)
    except ValueError:
        raise TypeError("A valid type of tile is needed!") from None


def validate_direction(value: Any) -> TileDirection:
    """Resolve a direction from an enum member or its string value.

    Raises:
        TypeError: If the value is not a known direction
    """
    if isinstance(value, TileDirection):
        return value
    try:
        return TileDirection(value)
    except ValueError:
        raise TypeError("A valid direction is needed!") from None


def format_ratio(ratio: float) -> str:
    """Format a ratio the way it appears in model ids (1, 0.25, 1.5)."""
    ratio = float(ratio)
    if ratio.is_integer():
        return str(int(ratio))
    return repr(ratio)
