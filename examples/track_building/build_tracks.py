#!/usr/bin/env python3
"""
Track Building Example

This example demonstrates how to:
1. Derive tile dimensions from lane and barrier sizes
2. Chain tiles into a closed loop
3. Count the tiles used by a track
4. Lay out the distinct tiles of a track as a palette
5. Export and reload a track

Run with: python build_tracks.py
"""

from tracktiles.tile import TileSpecifications
from tracktiles.track import (
    ListBuilder,
    ListBuilderConfig,
    TileList,
    TrackBuilder,
    TrackBuilderConfig,
    dumps_tiles,
    loads_tiles,
)


def show_specifications() -> TileSpecifications:
    """Derive tile dimensions."""
    print("=" * 60)
    print("1. Tile Specifications")
    print("=" * 60)

    specs = TileSpecifications(80, 5, 4)

    print(f"\nLane width: {specs.lane_width:.0f}")
    print(f"Tile length: {specs.length:.1f}")
    print(f"Tile width: {specs.width:.1f}")
    print(f"Padding: {specs.padding:.1f}")
    print(f"Barrier chunk length: {specs.barrier_length:.1f}")

    return specs


def build_loop(specs: TileSpecifications) -> TileList:
    """Build a closed loop of straights and right curves."""
    print("\n" + "=" * 60)
    print("2. Closed Loop")
    print("=" * 60)

    tiles = TileList(specs)
    for _ in range(4):
        tiles.append("straight-tile")
        tiles.append("curved-tile", "right", 1)

    layout = TrackBuilder(TrackBuilderConfig(h_padding=10, v_padding=10)).build(tiles)
    last = layout.tiles[-1].rect.output

    print(f"\nTiles: {len(layout.tiles)}")
    print(f"Bounds: ({layout.x:.1f}, {layout.y:.1f}) {layout.width:.1f} x {layout.height:.1f}")
    print(f"End of track: ({last.x:.1f}, {last.y:.1f}) heading {last.angle:.0f}°")

    print("\n3. Tiles used")
    print("-" * 60)
    for model_id, count in layout.stats.get_state().items():
        print(f"{model_id}: {count}")

    return tiles


def show_palette(specs: TileSpecifications):
    """Lay out a palette of tile shapes."""
    print("\n" + "=" * 60)
    print("4. Palette")
    print("=" * 60)

    palette = TileList(specs)
    palette.append("straight-tile", "right", 0.5)
    palette.append("straight-tile")
    palette.append("curved-tile", "right", 0.5)
    palette.append("curved-tile", "right", 2)
    palette.append("curved-tile-enlarged")

    config = ListBuilderConfig(tile_width=150, tile_height=150, centered=True, aligned=True, vertical=True)
    layout = ListBuilder(config).build(palette)

    for tile in layout.tiles:
        print(f"{tile.type} x{tile.ratio:g}: ({tile.x:.1f}, {tile.y:.1f}) angle {tile.angle:.1f}")
    print(f"Palette size: {layout.width:.1f} x {layout.height:.1f}")


def export_track(specs: TileSpecifications, tiles: TileList):
    """Export a track and load it back."""
    print("\n" + "=" * 60)
    print("5. Export and Import")
    print("=" * 60)

    text = dumps_tiles(tiles)
    reloaded = loads_tiles(specs, text)

    print(f"\nExported {len(tiles)} tiles, {len(text)} characters")
    print(f"Same layout: {reloaded.export() == tiles.export()}")


def main():
    specs = show_specifications()
    tiles = build_loop(specs)
    show_palette(specs)
    export_track(specs, tiles)

    print("\n" + "=" * 60)
    print("Track building examples complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
