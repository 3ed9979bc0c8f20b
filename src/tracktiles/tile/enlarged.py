"""
Enlarged curved tile - A quarter turn on a footprint scaled by the ratio.

The lane always sweeps 90 degrees. Part of the outer side is straight,
and the outer corner is rounded with a smaller radius.
"""

from typing import List

from tracktiles.geometry.angles import RIGHT_ANGLE, degrees, quadrant_angles
from tracktiles.geometry.vector import Vector2D
from tracktiles.tile.model import TileModel
from tracktiles.tile.types import TileDirection, TileType


class CurvedTileEnlargedModel(TileModel):
    """Enlarged curved tile."""

    TYPE = TileType.CURVED_ENLARGED

    @property
    def min_ratio(self) -> float:
        return 1

    @property
    def max_ratio(self) -> float:
        if self.specs.unlock_ratio:
            return self.specs.max_ratio
        return 1

    @property
    def direction_angle(self) -> float:
        if self.direction == TileDirection.LEFT:
            return RIGHT_ANGLE
        return 0.0

    @property
    def curve_angle(self) -> float:
        return RIGHT_ANGLE

    @property
    def curve_side(self) -> float:
        return self.length / 2

    @property
    def side_barrier_chunks(self) -> float:
        return self.specs.barrier_chunks * self.ratio / 2

    @property
    def inner_barrier_chunks(self) -> float:
        if self.ratio <= 1:
            return self.specs.barrier_chunks / 2
        return self.specs.barrier_chunks * self.ratio

    @property
    def outer_barrier_chunks(self) -> float:
        return self.specs.barrier_chunks / 2 * self.ratio

    @property
    def center_radius(self) -> float:
        return self.inner_radius + self.specs.width / 2

    def get_center_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        start = Vector2D(x, y)
        return start.add_y(self.specs.length * (self.ratio - 0.5)).rotate_around(angle, start)

    def get_output_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        start = Vector2D(x, y)
        radius = self.center_radius

        if self.direction == TileDirection.LEFT:
            center = start.add_x(radius)
        else:
            center = start.sub_x(radius)

        return Vector2D.polar(radius, RIGHT_ANGLE, center).rotate_around(angle, start)

    def get_output_angle(self, angle: float = 0) -> float:
        if self.direction == TileDirection.LEFT:
            return degrees(angle - RIGHT_ANGLE)
        return degrees(angle + RIGHT_ANGLE)

    def get_edges_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> List[Vector2D]:
        """Get the outline points of the enlarged curve.

        Holds the inner arc ends, the ends of the straight outer sides and
        of the rounded corner joining them, plus the points where the
        rotated corner reaches an axis-aligned extreme.
        """
        start = Vector2D(x, y)
        side = self.curve_side
        inner_radius = self.inner_radius
        round_radius = self.outer_radius
        outer_radius = inner_radius + self.specs.width
        center_radius = inner_radius + self.specs.width / 2

        if self.direction == TileDirection.LEFT:
            center = start.add_x(center_radius)
            curve_center = center.add_coord(-side, side)
            start_angle = float(RIGHT_ANGLE)
        else:
            center = start.sub_x(center_radius)
            curve_center = center.add_coord(side, side)
            start_angle = 0.0
        end_angle = start_angle + RIGHT_ANGLE

        points = [
            Vector2D.polar(inner_radius, start_angle, center),
            Vector2D.polar(outer_radius, start_angle, center),
            Vector2D.polar(round_radius, start_angle, curve_center),
            Vector2D.polar(round_radius, end_angle, curve_center),
            Vector2D.polar(outer_radius, end_angle, center),
            Vector2D.polar(inner_radius, end_angle, center),
        ]
        p0, p1, p2, p3, p4, p5 = [point.rotate_around(angle, start) for point in points]

        rotated_center = curve_center.rotate_around(angle, start)
        extremes = [
            Vector2D.polar(round_radius, edge_angle, rotated_center)
            for edge_angle in quadrant_angles(start_angle + angle, end_angle + angle)
        ]

        return [p0, p1, p2] + extremes + [p3, p4, p5]
