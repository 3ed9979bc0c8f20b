"""
Curved tile - A curve whose arc shrinks as the ratio grows.

A ratio of 1 gives a quarter turn. Bigger ratios give wider but shorter
arcs (90/ratio degrees), smaller ones give shorter arcs (90*ratio degrees)
on the same footprint.
"""

from typing import List

from tracktiles.geometry.angles import RIGHT_ANGLE, STRAIGHT_ANGLE, degrees, quadrant_angles
from tracktiles.geometry.vector import Vector2D
from tracktiles.tile.model import TileModel
from tracktiles.tile.types import TileDirection, TileType

# Length of the tangent probes used to locate the center
PROBE_LENGTH = 10


class CurvedTileModel(TileModel):
    """Curved tile."""

    TYPE = TileType.CURVED

    @property
    def length(self) -> float:
        return self.specs.length

    @property
    def width(self) -> float:
        return self.specs.width

    @property
    def min_ratio(self) -> float:
        return 2 / self.specs.barrier_chunks

    @property
    def direction_angle(self) -> float:
        if self.direction == TileDirection.LEFT:
            return RIGHT_ANGLE + (RIGHT_ANGLE / self.ratio) * (max(1.0, self.ratio) - 1)
        return 0.0

    @property
    def curve_angle(self) -> float:
        if self.ratio < 1:
            return RIGHT_ANGLE * self.ratio
        return RIGHT_ANGLE / self.ratio

    @property
    def center_radius(self) -> float:
        """Radius of the middle of the lane."""
        return self.inner_radius + self.specs.width / 2

    def get_center_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        """Get the center of the tile.

        The center is where the tangents at the input and output points
        cross.

        Args:
            x: X-coordinate of the input point
            y: Y-coordinate of the input point
            angle: Heading at the input point in degrees

        Returns:
            The center point
        """
        start = Vector2D(x, y)
        radius = self.center_radius
        curve_angle = self.curve_angle
        curve_center = self.get_curve_center(x, y)

        p1 = Vector2D.polar(radius, 0, curve_center)
        p2 = p1.add_y(PROBE_LENGTH)
        p3 = Vector2D.polar(radius, curve_angle, curve_center)
        p4 = p3.add(Vector2D.polar(PROBE_LENGTH, curve_angle + RIGHT_ANGLE))
        center = Vector2D.intersect(p1, p2, p3, p4)

        return center.rotate_around(angle, start)

    def get_output_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        start = Vector2D(x, y)
        radius = self.center_radius

        if self.direction == TileDirection.LEFT:
            center = start.add_x(radius)
            curve_angle = STRAIGHT_ANGLE - self.curve_angle
        else:
            center = start.sub_x(radius)
            curve_angle = self.curve_angle

        return Vector2D.polar(radius, curve_angle, center).rotate_around(angle, start)

    def get_output_angle(self, angle: float = 0) -> float:
        if self.direction == TileDirection.LEFT:
            return degrees(angle - self.curve_angle)
        return degrees(angle + self.curve_angle)

    def get_edges_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> List[Vector2D]:
        """Get the outline points of the curve.

        Holds the ends of the inner and outer arcs, plus the points where
        the rotated outer arc reaches an axis-aligned extreme.
        """
        start = Vector2D(x, y)
        curve_angle = self.curve_angle
        inner_radius = self.inner_radius
        outer_radius = inner_radius + self.specs.width
        center_radius = inner_radius + self.specs.width / 2

        if self.direction == TileDirection.LEFT:
            center = start.add_x(center_radius)
            start_angle = STRAIGHT_ANGLE - curve_angle
        else:
            center = start.sub_x(center_radius)
            start_angle = 0.0
        end_angle = start_angle + curve_angle

        p0 = Vector2D.polar(inner_radius, start_angle, center).rotate_around(angle, start)
        p1 = Vector2D.polar(outer_radius, start_angle, center).rotate_around(angle, start)
        p2 = Vector2D.polar(outer_radius, end_angle, center).rotate_around(angle, start)
        p3 = Vector2D.polar(inner_radius, end_angle, center).rotate_around(angle, start)

        rotated_center = center.rotate_around(angle, start)
        extremes = [
            Vector2D.polar(outer_radius, edge_angle, rotated_center)
            for edge_angle in quadrant_angles(start_angle + angle, end_angle + angle)
        ]

        return [p0, p1] + extremes + [p2, p3]
