"""
Track module - Tile lists and the builders placing their tiles.

This module contains:
- TileList: Ordered list of tiles sharing one set of specifications
- TileModelCounter: Count of tiles per shape
- build_track / TrackBuilder: Chain tiles into a continuous track
- build_list / ListBuilder: Lay out unconnected tiles in a row or column
- JSON serialization of tile records and layouts
"""

from tracktiles.track.tile_list import TileList
from tracktiles.track.counter import TileModelCounter
from tracktiles.track.builder import (
    PositionedTile,
    TrackBuilder,
    TrackBuilderConfig,
    TrackLayout,
    build_track,
)
from tracktiles.track.list_builder import (
    ListBuilder,
    ListBuilderConfig,
    ListLayout,
    build_list,
)
from tracktiles.track.io import dumps_layout, dumps_tiles, loads_tiles

__all__ = [
    "TileList",
    "TileModelCounter",
    "PositionedTile",
    "TrackBuilder",
    "TrackBuilderConfig",
    "TrackLayout",
    "build_track",
    "ListBuilder",
    "ListBuilderConfig",
    "ListLayout",
    "build_list",
    "dumps_layout",
    "dumps_tiles",
    "loads_tiles",
]
