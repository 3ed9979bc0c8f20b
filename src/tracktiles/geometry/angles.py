"""
Angle helpers - Degree based angle arithmetic shared by the tile geometry.

Provides:
- Angle constants
- Degree/radian conversion
- Normalization to [0, 360)
- Quadrant lookups used to find the extremal points of arcs
"""

from typing import List
import numpy as np


RIGHT_ANGLE = 90
STRAIGHT_ANGLE = 180
CIRCLE = 360

# Values closer than this to an integer are snapped to it
EPSILON = 1e-13


def to_radians(angle: float) -> float:
    """Convert an angle from degrees to radians."""
    return float(np.radians(angle))


def to_degrees(angle: float) -> float:
    """Convert an angle from radians to degrees."""
    return float(np.degrees(angle))


def adjust(value: float) -> float:
    """Snap a value to the nearest integer when it only differs by float noise.

    Args:
        value: Value to adjust

    Returns:
        The rounded value if within EPSILON of it, else the value itself
    """
    rounded = float(np.round(value))
    if abs(rounded - value) <= EPSILON:
        return rounded
    return value


def degrees(angle: float) -> float:
    """Normalize an angle in degrees to the range [0, 360).

    Args:
        angle: Angle in degrees, any sign or magnitude

    Returns:
        Equivalent angle in [0, 360)
    """
    return adjust(float(angle)) % CIRCLE


def quadrant(angle: float) -> int:
    """Get the quadrant index of an angle given in degrees.

    Quadrant 0 spans [0, 90), quadrant 1 spans [90, 180), and so on.
    """
    return int(np.floor(degrees(angle) / RIGHT_ANGLE))


def quadrant_angles(start: float, end: float) -> List[float]:
    """Get the multiples of 90 degrees lying strictly inside an arc.

    The arc runs counter-clockwise from ``start`` to ``end`` (degrees,
    ``start <= end``). Each returned angle is where the arc reaches an
    axis-aligned extreme, so the arc's bounding box only needs its two
    end points plus these.

    Args:
        start: Arc start angle in degrees
        end: Arc end angle in degrees

    Returns:
        List of quadrant boundary angles in (start, end)
    """
    start = adjust(start)
    end = adjust(end)
    first = int(np.floor(start / RIGHT_ANGLE)) + 1
    last = int(np.ceil(end / RIGHT_ANGLE)) - 1
    return [float(k * RIGHT_ANGLE) for k in range(first, last + 1)]
