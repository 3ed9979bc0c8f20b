"""
Vector2D - Immutable 2D vector used by every tile geometry query.

Coordinates follow screen conventions (y grows downwards) and every angle
at the public surface is expressed in degrees.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple
import numpy as np

from tracktiles.geometry.angles import to_degrees, to_radians


@dataclass(frozen=True)
class Vector2D:
    """A 2D vector.

    Every operation returns a new vector, the instance is never mutated.

    Usage:
        v = Vector2D(3, 4)
        v.length()                         # 5.0
        v.rotate_around(90, Vector2D(1, 1))
        Vector2D.polar(10, 45)
    """
    x: float = 0.0
    y: float = 0.0

    # Vector-wise arithmetic

    def add(self, vector: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + vector.x, self.y + vector.y)

    def sub(self, vector: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - vector.x, self.y - vector.y)

    def mul(self, vector: "Vector2D") -> "Vector2D":
        return Vector2D(self.x * vector.x, self.y * vector.y)

    def div(self, vector: "Vector2D") -> "Vector2D":
        return Vector2D(self.x / vector.x, self.y / vector.y)

    def add_coord(self, x: float = 0.0, y: float = 0.0) -> "Vector2D":
        return Vector2D(self.x + x, self.y + y)

    def sub_coord(self, x: float = 0.0, y: float = 0.0) -> "Vector2D":
        return Vector2D(self.x - x, self.y - y)

    # Scalar arithmetic

    def add_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x + scalar, self.y + scalar)

    def sub_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x - scalar, self.y - scalar)

    def mul_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def div_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y / scalar)

    def add_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x + scalar, self.y)

    def add_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y + scalar)

    def sub_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x - scalar, self.y)

    def sub_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y - scalar)

    def mul_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y)

    def mul_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y * scalar)

    def div_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x / scalar, self.y)

    def div_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y / scalar)

    def __add__(self, other):
        if isinstance(other, Vector2D):
            return self.add(other)
        return self.add_scalar(other)

    def __sub__(self, other):
        if isinstance(other, Vector2D):
            return self.sub(other)
        return self.sub_scalar(other)

    def __mul__(self, other):
        if isinstance(other, Vector2D):
            return self.mul(other)
        return self.mul_scalar(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Vector2D):
            return self.div(other)
        return self.div_scalar(other)

    def __neg__(self):
        return self.negate()

    # Transformations

    def negate(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def ortho(self) -> "Vector2D":
        """Get the orthogonal vector, rotated a quarter turn."""
        return Vector2D(-self.y, self.x)

    def round(self, decimals: int = 0) -> "Vector2D":
        return Vector2D(float(np.round(self.x, decimals)), float(np.round(self.y, decimals)))

    def length(self) -> float:
        return float(np.hypot(self.x, self.y))

    def normalize(self) -> "Vector2D":
        """Get the unit vector pointing the same way.

        Returns:
            Unit vector, or (1, 0) for the zero vector
        """
        length = self.length()
        if length == 0:
            return Vector2D(1.0, 0.0)
        return self.div_scalar(length)

    def extend(self, length: float) -> "Vector2D":
        """Get a vector with the same direction and the given length."""
        return self.normalize().mul_scalar(length)

    def dot(self, vector: "Vector2D") -> float:
        return self.x * vector.x + self.y * vector.y

    def cross(self, vector: "Vector2D") -> float:
        return self.x * vector.y - self.y * vector.x

    def distance(self, vector: "Vector2D") -> float:
        return self.sub(vector).length()

    def angle(self) -> float:
        """Get the angle of the vector in degrees, from the X axis."""
        return to_degrees(np.arctan2(self.y, self.x))

    def angle_with(self, vector: "Vector2D") -> float:
        """Get the signed angle in degrees needed to rotate onto another vector."""
        return to_degrees(np.arctan2(self.cross(vector), self.dot(vector)))

    def project_on(self, vector: "Vector2D") -> "Vector2D":
        """Get the projection of this vector on another one."""
        norm = vector.dot(vector)
        if norm == 0:
            return Vector2D()
        return vector.mul_scalar(self.dot(vector) / norm)

    def rotate(self, angle: float) -> "Vector2D":
        """Rotate the vector around the origin.

        Args:
            angle: Rotation angle in degrees

        Returns:
            Rotated vector
        """
        rad = to_radians(angle)
        cos = float(np.cos(rad))
        sin = float(np.sin(rad))
        return Vector2D(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
        )

    def rotate_to(self, angle: float) -> "Vector2D":
        """Rotate the vector so that it points at an absolute angle in degrees."""
        return self.rotate(angle - self.angle())

    def rotate_around(self, angle: float, center: "Vector2D") -> "Vector2D":
        """Rotate the vector around a center point.

        Args:
            angle: Rotation angle in degrees
            center: Rotation center

        Returns:
            Rotated vector
        """
        return self.sub(center).rotate(angle).add(center)

    def rotate_around_to(self, angle: float, center: "Vector2D") -> "Vector2D":
        """Rotate the vector around a center so it sits at an absolute angle."""
        return self.sub(center).rotate_to(angle).add(center)

    # Comparison and conversion

    def equals(self, vector: "Vector2D", tolerance: float = 0.0) -> bool:
        return abs(self.x - vector.x) <= tolerance and abs(self.y - vector.y) <= tolerance

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def clone(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector2D":
        return cls(float(values[0]), float(values[1]))

    @classmethod
    def from_dict(cls, values: Dict[str, float]) -> "Vector2D":
        return cls(float(values.get("x", 0.0)), float(values.get("y", 0.0)))

    @classmethod
    def polar(cls, radius: float, angle: float, center: Optional["Vector2D"] = None) -> "Vector2D":
        """Build a vector from polar coordinates.

        Args:
            radius: Distance from the center
            angle: Angle in degrees
            center: Pole of the coordinates. Uses ORIGIN if None.

        Returns:
            The point at the given radius and angle
        """
        center = center or ORIGIN
        rad = to_radians(angle)
        return cls(
            center.x + radius * float(np.cos(rad)),
            center.y + radius * float(np.sin(rad)),
        )

    @staticmethod
    def intersect(
        a1: "Vector2D",
        b1: "Vector2D",
        a2: "Vector2D",
        b2: "Vector2D",
    ) -> Optional["Vector2D"]:
        """Get the point where two lines cross.

        Args:
            a1: First point of the first line
            b1: Second point of the first line
            a2: First point of the second line
            b2: Second point of the second line

        Returns:
            The intersection point, or None if the lines are parallel
        """
        i = b1.sub(a1)
        j = b2.sub(a2)
        n = i.cross(j)
        if n == 0:
            return None

        k = -(a1.x * j.y - a2.x * j.y - j.x * a1.y + j.x * a2.y) / n
        return a1.add(i.mul_scalar(k))


ORIGIN = Vector2D(0.0, 0.0)
