"""
Track builder - Chain tiles into a continuous track.

Each tile is placed at the output pose of the previous one, starting from
a given pose. The builder also computes the bounding box of the whole
track and counts the tiles by shape.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List
import numpy as np

from tracktiles.tile.model import TileModel, TileRect
from tracktiles.track.counter import TileModelCounter
from tracktiles.track.tile_list import TileList

logger = logging.getLogger(__name__)


@dataclass
class TrackBuilderConfig:
    """Options for building a track."""
    start_x: float = 0.0             # X-coordinate of the first tile input
    start_y: float = 0.0             # Y-coordinate of the first tile input
    start_angle: float = 0.0         # Heading of the first tile, in degrees
    h_padding: float = 0.0           # Horizontal margin around the track
    v_padding: float = 0.0           # Vertical margin around the track


@dataclass
class PositionedTile:
    """A tile with its computed placement."""
    id: str
    type: str
    direction: str
    ratio: float
    x: float
    y: float
    angle: float
    rect: TileRect
    model: TileModel

    def get_state(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "direction": self.direction,
            "ratio": self.ratio,
            "x": self.x,
            "y": self.y,
            "angle": self.angle,
            "rect": self.rect.get_state(),
        }


@dataclass
class TrackLayout:
    """Positioned tiles of a track, with its bounding box and statistics."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    tiles: List[PositionedTile] = field(default_factory=list)
    stats: TileModelCounter = field(default_factory=TileModelCounter)

    def get_state(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "tiles": [tile.get_state() for tile in self.tiles],
            "stats": self.stats.get_state(),
        }


def build_track(
    tiles: TileList,
    start_x: float = 0.0,
    start_y: float = 0.0,
    start_angle: float = 0.0,
    h_padding: float = 0.0,
    v_padding: float = 0.0,
) -> TrackLayout:
    """Compute the placement of every tile of a track.

    Args:
        tiles: Tiles in connection order
        start_x: X-coordinate of the first tile input
        start_y: Y-coordinate of the first tile input
        start_angle: Heading of the first tile in degrees
        h_padding: Horizontal margin added around the bounding box
        v_padding: Vertical margin added around the bounding box

    Returns:
        The positioned tiles, the bounding box enclosing them and the
        origin, and the count of tiles per model id

    Raises:
        TypeError: If tiles is not a TileList
    """
    TileList.validate_instance(tiles)

    top_left = np.zeros(2)
    bottom_right = np.zeros(2)
    input_x, input_y, input_angle = start_x, start_y, start_angle
    stats = TileModelCounter()
    positioned: List[PositionedTile] = []

    for model in tiles:
        rect = model.get_bounding_rect(input_x, input_y, input_angle)
        placement = rect.input

        top_left = np.minimum(top_left, [rect.x, rect.y])
        bottom_right = np.maximum(bottom_right, [rect.x + rect.width, rect.y + rect.height])
        stats.add(model)

        positioned.append(PositionedTile(
            id=model.id,
            type=model.type.value,
            direction=model.direction.value,
            ratio=model.ratio,
            x=placement.x,
            y=placement.y,
            angle=placement.angle,
            rect=rect,
            model=model,
        ))

        input_x, input_y, input_angle = rect.output.x, rect.output.y, rect.output.angle

    padding = np.array([h_padding, v_padding], dtype=float)
    origin = top_left - padding
    size = bottom_right - top_left + 2 * padding

    logger.debug(f"Built track of {len(positioned)} tiles, size {size[0]:.2f}x{size[1]:.2f}")

    return TrackLayout(
        x=float(origin[0]),
        y=float(origin[1]),
        width=float(size[0]),
        height=float(size[1]),
        tiles=positioned,
        stats=stats,
    )


class TrackBuilder:
    """Build tracks with a fixed set of options.

    Usage:
        builder = TrackBuilder(TrackBuilderConfig(start_angle=90))
        layout = builder.build(tiles)
    """

    def __init__(self, config: TrackBuilderConfig | None = None):
        """Initialize builder.

        Args:
            config: Build options. Uses defaults if None.
        """
        self.config = config or TrackBuilderConfig()

    def build(self, tiles: TileList) -> TrackLayout:
        return build_track(tiles, **asdict(self.config))
