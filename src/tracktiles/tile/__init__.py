"""
Tile module - Tile specifications and tile geometry models.

This module contains:
- TileSpecifications: Dimensions derived from lane, barrier and ratio constraints
- TileModel: Shared geometry contract of the tiles
- StraightTileModel, CurvedTileModel, CurvedTileEnlargedModel: Tile variants
- create_tile: Factory building a tile from its type
"""

from tracktiles.tile.specs import (
    SpecsConfig,
    TileSpecifications,
    get_lane_width,
    get_tile_length,
    get_tile_width,
)
from tracktiles.tile.types import TileDirection, TileType
from tracktiles.tile.model import Pose, TileModel, TileRect
from tracktiles.tile.straight import StraightTileModel
from tracktiles.tile.curved import CurvedTileModel
from tracktiles.tile.enlarged import CurvedTileEnlargedModel
from tracktiles.tile.factory import create_tile, import_tile

__all__ = [
    "SpecsConfig",
    "TileSpecifications",
    "get_lane_width",
    "get_tile_length",
    "get_tile_width",
    "TileDirection",
    "TileType",
    "Pose",
    "TileModel",
    "TileRect",
    "StraightTileModel",
    "CurvedTileModel",
    "CurvedTileEnlargedModel",
    "create_tile",
    "import_tile",
]
