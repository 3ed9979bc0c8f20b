"""
Track Tiles - Geometry of modular race tracks built from tiles.

This package computes the exact placement of interchangeable track tiles:
- Tile specifications derived from lane and barrier constraints
- Straight, curved and enlarged curved tiles with their geometry
- Track building by chaining each tile to the output of the previous one
- Palette layout of unconnected tiles
- Tile list records and JSON serialization
"""

__version__ = "0.1.0"

from tracktiles.geometry.vector import Vector2D
from tracktiles.tile.specs import TileSpecifications
from tracktiles.tile.factory import create_tile
from tracktiles.track.tile_list import TileList
from tracktiles.track.builder import build_track
from tracktiles.track.list_builder import build_list

__all__ = [
    "Vector2D",
    "TileSpecifications",
    "create_tile",
    "TileList",
    "build_track",
    "build_list",
    "__version__",
]
