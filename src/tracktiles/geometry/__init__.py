"""
Geometry module - 2D vector algebra and angle helpers.

This module contains:
- Vector2D: Immutable 2D vector with rotation, polar construction and line intersection
- ORIGIN: The frozen origin vector
- Angle helpers: constants, conversion, normalization and quadrant lookups
"""

from tracktiles.geometry.vector import Vector2D, ORIGIN
from tracktiles.geometry.angles import (
    RIGHT_ANGLE,
    STRAIGHT_ANGLE,
    CIRCLE,
    adjust,
    degrees,
    quadrant,
    quadrant_angles,
    to_degrees,
    to_radians,
)

__all__ = [
    "Vector2D",
    "ORIGIN",
    "RIGHT_ANGLE",
    "STRAIGHT_ANGLE",
    "CIRCLE",
    "adjust",
    "degrees",
    "quadrant",
    "quadrant_angles",
    "to_degrees",
    "to_radians",
]
