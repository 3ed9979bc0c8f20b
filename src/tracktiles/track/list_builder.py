"""
List builder - Lay out tiles side by side, as in a palette.

Unlike the track builder, tiles are not connected: each one gets its own
cell in a row or in a column.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Sequence

from tracktiles.geometry.angles import CIRCLE, RIGHT_ANGLE
from tracktiles.tile.model import TileModel, TileRect
from tracktiles.tile.types import TileDirection
from tracktiles.track.builder import PositionedTile
from tracktiles.track.tile_list import TileList

logger = logging.getLogger(__name__)


@dataclass
class ListBuilderConfig:
    """Options for laying out a list of tiles."""
    start_x: float = 0.0             # X-coordinate of the first cell
    start_y: float = 0.0             # Y-coordinate of the first cell
    tile_angle: float = 0.0          # Rotation of every tile, in degrees
    tile_width: float = 0.0          # Minimum width reserved for a tile
    tile_height: float = 0.0         # Minimum height reserved for a tile
    h_padding: float = 0.0           # Horizontal margin around each tile
    v_padding: float = 0.0           # Vertical margin around each tile
    centered: bool = False           # Center tiles in their cell
    aligned: bool = False            # Turn short curves to sit symmetrically
    vertical: bool = False           # Stack tiles in a column


@dataclass
class ListLayout:
    """Positioned tiles of a list, with the bounding box of their cells."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    tiles: List[PositionedTile] = field(default_factory=list)

    def get_state(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "tiles": [tile.get_state() for tile in self.tiles],
        }


def _validate_list(tiles: Any) -> Sequence[TileModel]:
    if isinstance(tiles, TileList):
        return tiles.tiles
    if isinstance(tiles, (list, tuple)):
        for tile in tiles:
            TileModel.validate_instance(tile)
        return tiles
    raise TypeError("A valid list of tiles is needed!")


def build_list(
    tiles: TileList | Sequence[TileModel],
    start_x: float = 0.0,
    start_y: float = 0.0,
    tile_angle: float = 0.0,
    tile_width: float = 0.0,
    tile_height: float = 0.0,
    h_padding: float = 0.0,
    v_padding: float = 0.0,
    centered: bool = False,
    aligned: bool = False,
    vertical: bool = False,
) -> ListLayout:
    """Compute the placement of tiles laid out in a row or a column.

    Args:
        tiles: A TileList, or a list of tile models
        start_x: X-coordinate of the first cell
        start_y: Y-coordinate of the first cell
        tile_angle: Rotation of every tile in degrees
        tile_width: Minimum width reserved for each tile
        tile_height: Minimum height reserved for each tile
        h_padding: Horizontal margin around each tile
        v_padding: Vertical margin around each tile
        centered: Center the tiles inside their cell, and the cells on
            the start point
        aligned: Turn curves shorter than a quarter turn by half their
            angle so that they sit symmetrically
        vertical: Stack the tiles in a column instead of a row

    Returns:
        The positioned tiles and the bounding box of their cells

    Raises:
        TypeError: If tiles is not a list of tiles
    """
    models = _validate_list(tiles)

    left = top = right = bottom = 0.0
    tile_x, tile_y = start_x, start_y
    positioned: List[PositionedTile] = []

    for model in models:
        curve_angle = model.curve_angle
        aligned_angle = curve_angle / 2
        if model.direction == TileDirection.LEFT:
            direction_angle = CIRCLE - aligned_angle
        else:
            direction_angle = aligned_angle
        angle = tile_angle - (direction_angle if aligned and curve_angle < RIGHT_ANGLE else 0)

        rect: TileRect = model.get_bounding_rect(0, 0, angle)
        width = max(tile_width, rect.width) + h_padding * 2
        height = max(tile_height, rect.height) + v_padding * 2
        dx = max(0.0, tile_width - rect.width) / 2 if centered else 0.0
        dy = max(0.0, tile_height - rect.height) / 2 if centered else 0.0
        top_x = tile_x - (width / 2 if centered and vertical else 0) - h_padding
        top_y = tile_y - (0 if not centered or vertical else height / 2) - v_padding

        left = min(left, top_x)
        top = min(top, top_y)
        right = max(right, top_x + width)
        bottom = max(bottom, top_y + height)

        positioned.append(PositionedTile(
            id=model.id,
            type=model.type.value,
            direction=model.direction.value,
            ratio=model.ratio,
            x=top_x - rect.x + h_padding + dx,
            y=top_y - rect.y + v_padding + dy,
            angle=angle,
            rect=rect,
            model=model,
        ))

        if vertical:
            tile_y += height
        else:
            tile_x += width

    logger.debug(f"Laid out {len(positioned)} tiles")

    return ListLayout(
        x=left,
        y=top,
        width=right - left,
        height=bottom - top,
        tiles=positioned,
    )


class ListBuilder:
    """Lay out lists of tiles with a fixed set of options.

    Usage:
        builder = ListBuilder(ListBuilderConfig(vertical=True, centered=True))
        layout = builder.build(counter.models())
    """

    def __init__(self, config: ListBuilderConfig | None = None):
        """Initialize builder.

        Args:
            config: Layout options. Uses defaults if None.
        """
        self.config = config or ListBuilderConfig()

    def build(self, tiles: TileList | Sequence[TileModel]) -> ListLayout:
        return build_list(tiles, **asdict(self.config))
