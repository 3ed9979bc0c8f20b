"""
Straight tile - A straight section of track.
"""

from tracktiles.geometry.angles import STRAIGHT_ANGLE
from tracktiles.tile.model import TileModel
from tracktiles.tile.types import TileType


class StraightTileModel(TileModel):
    """Straight tile.

    The ratio scales the length only. Ratios above 1 need the
    ``unlock_ratio`` flag of the specifications.
    """

    TYPE = TileType.STRAIGHT

    @property
    def width(self) -> float:
        return self.specs.width

    @property
    def max_ratio(self) -> float:
        if self.specs.unlock_ratio:
            return self.specs.max_ratio
        return 1

    @property
    def curve_angle(self) -> float:
        # A straight line is a flat angle
        return STRAIGHT_ANGLE
