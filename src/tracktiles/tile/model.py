"""
Tile model - Shared geometry contract of the track tiles.

Defines:
- Pose and bounding rectangle records
- TileModel: base tile with ratio snapping, direction handling and a
  rectangular footprint that the variants refine
"""

from dataclasses import dataclass
from typing import Any, Dict, List
import numpy as np

from tracktiles.geometry.angles import degrees
from tracktiles.geometry.vector import Vector2D
from tracktiles.tile.specs import TileSpecifications, round_half_up
from tracktiles.tile.types import (
    DIRECTION_RANKS,
    TYPE_RANKS,
    TileDirection,
    TileType,
    format_ratio,
    validate_direction,
    validate_type,
)


@dataclass
class Pose:
    """Position and heading of a tile connection point."""
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0               # Degrees, 0 = heading along +Y

    def get_state(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "angle": self.angle}


@dataclass
class TileRect:
    """Axis-aligned bounding rectangle of a placed tile."""
    x: float
    y: float
    width: float
    height: float
    input: Pose
    output: Pose

    def get_state(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "input": self.input.get_state(),
            "output": self.output.get_state(),
        }


class TileModel:
    """Base track tile.

    A tile is identified by its type, its direction and its size ratio.
    The ratio is snapped and clamped on every change so that tiles always
    fit the barrier chunk grid. Tiles share a specifications object and
    recompute every dimension from it on each query.

    Pose queries take the input pose of the tile: the (x, y) point in the
    middle of its entry edge and the heading angle in degrees.

    Usage:
        tile = StraightTileModel(specs, "right", 1)
        rect = tile.get_bounding_rect(0, 0, 90)
        next_pose = rect.output
    """

    TYPE = TileType.TILE

    def __init__(
        self,
        specs: TileSpecifications,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ):
        """Initialize tile.

        Args:
            specs: Shared tile specifications
            direction: Turn direction, "left" or "right"
            ratio: Size ratio, snapped to the allowed values

        Raises:
            TypeError: If the specs or the direction are not valid
        """
        self.ratio = 1.0
        self.set_specs(specs)
        self.set_direction(direction)
        self.set_ratio(ratio)
        self.id = self.model_id

    @property
    def type(self) -> TileType:
        return self.TYPE

    @property
    def model_id(self) -> str:
        """Key identifying the tile shape, whatever its direction."""
        return f"{self.TYPE.value}-{format_ratio(self.ratio)}"

    @property
    def length(self) -> float:
        return self.specs.length * self.ratio

    @property
    def width(self) -> float:
        return self.specs.width * self.ratio

    @property
    def min_ratio(self) -> float:
        return 1 / self.specs.barrier_chunks

    @property
    def max_ratio(self) -> float:
        return self.specs.max_ratio

    @property
    def direction_angle(self) -> float:
        """Rotation orienting the footprint to the tile direction."""
        return 0.0

    @property
    def curve_angle(self) -> float:
        return 0.0

    @property
    def curve_side(self) -> float:
        """Length of the straight sides flanking the curve."""
        return 0.0

    @property
    def inner_radius(self) -> float:
        return self.specs.length * (max(1.0, self.ratio) - 1) + self.specs.padding

    @property
    def outer_radius(self) -> float:
        return self.specs.width + self.inner_radius - self.curve_side

    @property
    def side_barrier_chunks(self) -> float:
        return self.specs.barrier_chunks * self.ratio

    @property
    def inner_barrier_chunks(self) -> float:
        if self.ratio < 1:
            return 1
        if self.ratio < 2:
            return self.specs.barrier_chunks / 2
        return self.specs.barrier_chunks

    @property
    def outer_barrier_chunks(self) -> float:
        if self.ratio < 1:
            return self.specs.barrier_chunks / 2
        return self.specs.barrier_chunks

    def set_specs(self, specs: TileSpecifications) -> "TileModel":
        """Attach the tile to specifications and re-derive its ratio.

        Raises:
            TypeError: If specs is not a TileSpecifications
        """
        self.specs = TileSpecifications.validate_instance(specs)
        self.set_ratio(self.ratio)
        return self

    def set_direction(self, direction: TileDirection | str) -> "TileModel":
        """Set the turn direction.

        Raises:
            TypeError: If the direction is not "left" or "right"
        """
        self.direction = validate_direction(direction)
        return self

    def set_ratio(self, ratio: float) -> "TileModel":
        """Set the size ratio.

        Ratios below 1 snap to the nearest multiple of 1/barrier_chunks,
        larger ones to the nearest integer. The result is clamped to
        [min_ratio, max_ratio].

        Args:
            ratio: Requested ratio, its sign is ignored and 0 or NaN means 1

        Returns:
            The tile itself
        """
        size = float(min(abs(ratio), self.max_ratio))
        if np.isnan(size) or not size:
            size = 1.0
        if size < 1:
            chunks = self.specs.barrier_chunks
            size = round_half_up(size * chunks) / chunks
        else:
            size = round_half_up(size)

        # Already within max_ratio, which is a whole number
        self.ratio = float(max(size, self.min_ratio))
        return self

    def flip_direction(self) -> "TileModel":
        if self.direction == TileDirection.LEFT:
            self.direction = TileDirection.RIGHT
        else:
            self.direction = TileDirection.LEFT
        return self

    def get_curve_center(self, x: float = 0, y: float = 0) -> Vector2D:
        """Get the center of the curve for a tile placed at (x, y), turning right."""
        offset = self.specs.padding - self.inner_radius - self.specs.length / 2
        return Vector2D(x + offset, y)

    def get_input_coord(self, x: float = 0, y: float = 0) -> Vector2D:
        return Vector2D(x, y)

    def get_center_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        start = Vector2D(x, y)
        return start.add_y(self.length / 2).rotate_around(angle, start)

    def get_output_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> Vector2D:
        """Get the output point of the tile.

        Args:
            x: X-coordinate of the input point
            y: Y-coordinate of the input point
            angle: Heading at the input point in degrees

        Returns:
            The point where the next tile connects
        """
        start = Vector2D(x, y)
        return start.add_y(self.length).rotate_around(angle, start)

    def get_output_angle(self, angle: float = 0) -> float:
        """Get the heading at the output point, normalized to [0, 360)."""
        return degrees(angle)

    def get_edges_coord(self, x: float = 0, y: float = 0, angle: float = 0) -> List[Vector2D]:
        """Get the outline points of the tile footprint.

        Returns:
            Points whose bounding box is the bounding box of the footprint
        """
        start = Vector2D(x, y)
        half = self.width / 2
        corners = [
            start.add_coord(-half, 0),
            start.add_coord(half, 0),
            start.add_coord(half, self.length),
            start.add_coord(-half, self.length),
        ]
        return [corner.rotate_around(angle, start) for corner in corners]

    def get_bounding_rect(self, x: float = 0, y: float = 0, angle: float = 0) -> TileRect:
        """Get the bounding rectangle of the tile placed at a pose.

        Args:
            x: X-coordinate of the input point
            y: Y-coordinate of the input point
            angle: Heading at the input point in degrees

        Returns:
            Rectangle enclosing the footprint, with the resolved input and
            output poses of the tile
        """
        points = [Vector2D(x, y)] + self.get_edges_coord(x, y, angle)
        coords = np.array([point.to_tuple() for point in points])
        top_left = coords.min(axis=0)
        bottom_right = coords.max(axis=0)
        output = self.get_output_coord(x, y, angle)

        return TileRect(
            x=float(top_left[0]),
            y=float(top_left[1]),
            width=float(bottom_right[0] - top_left[0]),
            height=float(bottom_right[1] - top_left[1]),
            input=Pose(x, y, degrees(angle)),
            output=Pose(output.x, output.y, self.get_output_angle(angle)),
        )

    def get_state(self) -> Dict[str, Any]:
        return {
            "type": self.TYPE.value,
            "direction": self.direction.value,
            "ratio": self.ratio,
        }

    def export(self) -> Dict[str, Any]:
        """Export the tile to a plain record."""
        return self.get_state()

    def clone(self) -> "TileModel":
        """Get an independent copy sharing the same specifications."""
        return type(self)(self.specs, self.direction, self.ratio)

    def compare(self, other: Any) -> float:
        """Compare with another tile, by type, then ratio, then direction.

        Returns:
            Negative, zero or positive value. Anything that is not a tile
            sorts before tiles.
        """
        if not isinstance(other, TileModel):
            return 1

        difference = TYPE_RANKS[self.TYPE] - TYPE_RANKS[other.TYPE]
        if difference:
            return difference

        difference = self.ratio - other.ratio
        if difference:
            return difference

        return DIRECTION_RANKS[self.direction] - DIRECTION_RANKS[other.direction]

    def __lt__(self, other: "TileModel") -> bool:
        return self.compare(other) < 0

    @classmethod
    def validate_instance(cls, obj: Any) -> "TileModel":
        """Check that an object is an instance of this tile class.

        Raises:
            TypeError: If it is not
        """
        if not isinstance(obj, cls):
            raise TypeError(f"The object must be an instance of {cls.__name__}!")
        return obj

    @staticmethod
    def validate_type(value: Any) -> TileType:
        return validate_type(value)

    @staticmethod
    def validate_direction(value: Any) -> TileDirection:
        return validate_direction(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(direction={self.direction.value!r}, ratio={format_ratio(self.ratio)})"
