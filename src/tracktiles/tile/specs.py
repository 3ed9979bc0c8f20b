"""
Tile specifications - Dimensional constraints shared by every tile.

Defines:
- Base constraints (lane width, barrier width, barrier chunks, max ratio)
- Derived tile dimensions (length, width, padding, barrier length)
- Legacy dimension helpers converting between lane and tile sizes
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping
import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(np.floor(value + 0.5))


def to_count(value: float) -> int:
    """Coerce a value to a positive whole count.

    Halves round up and the sign is dropped. Zero and non-finite values
    (NaN, infinity) give 1.
    """
    if isinstance(value, (int, np.integer)):
        return abs(int(value)) or 1
    value = float(value)
    if not np.isfinite(value):
        return 1
    return abs(round_half_up(value)) or 1


def get_tile_width(lane_width: float, barrier_width: float) -> float:
    """Get the width of a tile from its lane and barrier widths."""
    return lane_width + barrier_width * 2


def get_tile_length(lane_width: float, barrier_width: float) -> float:
    """Get the length of a tile from its lane and barrier widths."""
    return get_tile_width(lane_width, barrier_width) + lane_width / 4


def get_lane_width(tile_width: float, barrier_width: float) -> float:
    """Get the lane width from the width of a tile and its barriers."""
    return tile_width - barrier_width * 2


@dataclass
class SpecsConfig:
    """Base constraints used to build tile specifications."""
    lane_width: float = 20.0         # Width of the driving lane
    barrier_width: float = 1.0       # Width of each side barrier
    barrier_chunks: int = 4          # Barrier segments per standard tile
    max_ratio: int = 4               # Largest size multiplier
    unlock_ratio: bool = False       # Allow ratios above 1 where locked


class TileSpecifications:
    """Dimensional specifications of the tiles.

    Derived dimensions are properties computed from the base values on
    each access, so they follow every setter call.

    Usage:
        specs = TileSpecifications(80, 5, 4)
        specs.length          # 110.0
        specs.set_lane_width(60).set_barrier_chunks(2)
    """

    def __init__(
        self,
        lane_width: float = 20,
        barrier_width: float = 1,
        barrier_chunks: int = 4,
        max_ratio: int = 4,
        unlock_ratio: bool = False,
    ):
        """Initialize specifications.

        Args:
            lane_width: Width of the lane
            barrier_width: Width of a barrier
            barrier_chunks: Number of barrier chunks per standard tile
            max_ratio: Maximum size ratio of a tile
            unlock_ratio: Allow ratios beyond the locked range
        """
        self.set_lane_width(lane_width)
        self.set_barrier_width(barrier_width)
        self.set_barrier_chunks(barrier_chunks)
        self.set_max_ratio(max_ratio)
        self.set_unlock_ratio(unlock_ratio)

    @classmethod
    def from_config(cls, config: SpecsConfig) -> "TileSpecifications":
        return cls(
            config.lane_width,
            config.barrier_width,
            config.barrier_chunks,
            config.max_ratio,
            config.unlock_ratio,
        )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "TileSpecifications":
        """Build specifications from an options mapping.

        Both snake_case keys and the camelCase keys of exported records
        (``laneWidth``, ``barrierWidth``, ...) are accepted. Missing keys
        fall back to the defaults.

        Args:
            options: Mapping of option names to values

        Returns:
            New specifications
        """
        defaults = SpecsConfig()

        def pick(name: str, camel: str, default: Any) -> Any:
            if name in options:
                return options[name]
            return options.get(camel, default)

        return cls(
            pick("lane_width", "laneWidth", defaults.lane_width),
            pick("barrier_width", "barrierWidth", defaults.barrier_width),
            pick("barrier_chunks", "barrierChunks", defaults.barrier_chunks),
            pick("max_ratio", "maxRatio", defaults.max_ratio),
            pick("unlock_ratio", "unlockRatio", defaults.unlock_ratio),
        )

    @property
    def length(self) -> float:
        return self.lane_width * 1.25 + self.barrier_width * 2

    @property
    def width(self) -> float:
        return self.lane_width + self.barrier_width * 2

    @property
    def padding(self) -> float:
        """Distance between the tile edge and the start of a curve."""
        return self.lane_width / 8

    @property
    def barrier_length(self) -> float:
        return self.length / self.barrier_chunks

    def set_lane_width(self, value: float) -> "TileSpecifications":
        self.lane_width = abs(value)
        return self

    def set_barrier_width(self, value: float) -> "TileSpecifications":
        self.barrier_width = abs(value)
        return self

    def set_barrier_chunks(self, value: float) -> "TileSpecifications":
        self.barrier_chunks = to_count(value)
        return self

    def set_max_ratio(self, value: float) -> "TileSpecifications":
        self.max_ratio = to_count(value)
        return self

    def set_unlock_ratio(self, value: bool) -> "TileSpecifications":
        self.unlock_ratio = bool(value)
        return self

    def export(self) -> Dict[str, Any]:
        return {
            "laneWidth": self.lane_width,
            "barrierWidth": self.barrier_width,
            "barrierChunks": self.barrier_chunks,
            "maxRatio": self.max_ratio,
            "unlockRatio": self.unlock_ratio,
        }

    @staticmethod
    def validate_instance(obj: Any) -> "TileSpecifications":
        """Check that an object is a TileSpecifications instance.

        Raises:
            TypeError: If the object is not a TileSpecifications
        """
        if not isinstance(obj, TileSpecifications):
            raise TypeError("The specifications object must be an instance of TileSpecifications!")
        return obj

    def __repr__(self) -> str:
        return (
            f"TileSpecifications(lane_width={self.lane_width}, barrier_width={self.barrier_width}, "
            f"barrier_chunks={self.barrier_chunks}, max_ratio={self.max_ratio}, "
            f"unlock_ratio={self.unlock_ratio})"
        )
