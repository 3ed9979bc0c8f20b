"""
Track Tiles command line

Reads a JSON array of tile records and prints the computed layout as JSON.

Usage:
    python -m tracktiles track.json                    # Chain the tiles into a track
    python -m tracktiles track.json --mode list        # Lay the tiles out in a row
    cat track.json | python -m tracktiles -            # Read the records from stdin
    python -m tracktiles track.json --lane-width 80 --barrier-width 5
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from tracktiles.tile.specs import SpecsConfig, TileSpecifications
from tracktiles.track.builder import TrackBuilder, TrackBuilderConfig
from tracktiles.track.io import dumps_layout, loads_tiles
from tracktiles.track.list_builder import ListBuilder, ListBuilderConfig

logger = logging.getLogger(__name__)

MODES = ("track", "list")


@dataclass
class CliConfig:
    """Configuration of a command line run."""
    source: str = "-"                # Records file, "-" for stdin
    mode: str = "track"              # "track" or "list"
    specs: SpecsConfig = field(default_factory=SpecsConfig)
    start_x: float = 0.0
    start_y: float = 0.0
    start_angle: float = 0.0
    indent: Optional[int] = 2
    log_level: str = "WARNING"

    def __post_init__(self):
        self.mode = self.mode.lower()
        self.log_level = self.log_level.upper()
        if self.indent is not None and self.indent < 0:
            self.indent = None


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute the layout of a track made of tiles",
    )
    parser.add_argument("source", nargs="?", default="-", help="JSON file of tile records, - for stdin")
    parser.add_argument("--mode", choices=MODES, default="track", help="Chain the tiles or lay them out in a row")

    specs_group = parser.add_argument_group("Tile Specifications")
    specs_group.add_argument("--lane-width", type=float, default=SpecsConfig.lane_width)
    specs_group.add_argument("--barrier-width", type=float, default=SpecsConfig.barrier_width)
    specs_group.add_argument("--barrier-chunks", type=int, default=SpecsConfig.barrier_chunks)
    specs_group.add_argument("--max-ratio", type=int, default=SpecsConfig.max_ratio)
    specs_group.add_argument("--unlock-ratio", action="store_true", help="Allow ratios above 1 for every tile")

    start_group = parser.add_argument_group("Start Position")
    start_group.add_argument("--start-x", type=float, default=0.0)
    start_group.add_argument("--start-y", type=float, default=0.0)
    start_group.add_argument("--start-angle", type=float, default=0.0, help="Heading in degrees")

    parser.add_argument("--indent", type=int, default=2, help="JSON indentation, negative for compact output")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> CliConfig:
    return CliConfig(
        source=args.source,
        mode=args.mode,
        specs=SpecsConfig(
            lane_width=args.lane_width,
            barrier_width=args.barrier_width,
            barrier_chunks=args.barrier_chunks,
            max_ratio=args.max_ratio,
            unlock_ratio=args.unlock_ratio,
        ),
        start_x=args.start_x,
        start_y=args.start_y,
        start_angle=args.start_angle,
        indent=args.indent,
        log_level=args.log_level,
    )


def setup_logging(level: str) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def run(config: CliConfig, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Build the layout described by a configuration and print it.

    Returns:
        Process exit status
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        if config.source == "-":
            text = stdin.read()
        else:
            with open(config.source, encoding="utf-8") as handle:
                text = handle.read()

        specs = TileSpecifications.from_config(config.specs)
        tiles = loads_tiles(specs, text)

        if config.mode == "list":
            layout = ListBuilder(ListBuilderConfig(start_x=config.start_x, start_y=config.start_y)).build(tiles)
        else:
            layout = TrackBuilder(TrackBuilderConfig(
                start_x=config.start_x,
                start_y=config.start_y,
                start_angle=config.start_angle,
            )).build(tiles)
    except OSError as e:
        logger.error(f"Could not read {config.source}: {e}")
        return 1
    except (TypeError, ValueError, ArithmeticError) as e:
        logger.error(f"Invalid tile records: {e}")
        return 1

    logger.info(f"Built {config.mode} layout of {len(layout.tiles)} tiles")
    stdout.write(dumps_layout(layout, indent=config.indent))
    stdout.write("\n")
    return 0


def main(argv: List[str] | None = None) -> int:
    config = config_from_args(parse_args(argv))
    setup_logging(config.log_level)
    return run(config)
