"""Tests for the tracktiles tile models."""

import pytest
import numpy as np

from tracktiles.tile import (
    CurvedTileEnlargedModel,
    CurvedTileModel,
    StraightTileModel,
    TileDirection,
    TileModel,
    TileSpecifications,
    TileType,
    create_tile,
    import_tile,
)

HALF_SQRT2 = np.sqrt(2) / 2


@pytest.fixture
def specs():
    return TileSpecifications(80, 5, 4)


@pytest.fixture
def unlocked_specs():
    return TileSpecifications(80, 5, 4, 4, True)


def assert_point(point, x, y):
    assert point.x == pytest.approx(x, abs=1e-9)
    assert point.y == pytest.approx(y, abs=1e-9)


def assert_rect(rect, x, y, width, height):
    assert rect.x == pytest.approx(x, abs=1e-9)
    assert rect.y == pytest.approx(y, abs=1e-9)
    assert rect.width == pytest.approx(width, abs=1e-9)
    assert rect.height == pytest.approx(height, abs=1e-9)


class TestTileModel:
    """Test the shared tile behavior."""

    def test_base_tile(self, specs):
        """Test the base tile identity."""
        tile = TileModel(specs)

        assert tile.type == TileType.TILE
        assert tile.direction == TileDirection.RIGHT
        assert tile.ratio == 1
        assert tile.model_id == "tile-1"
        assert tile.id == tile.model_id

    def test_invalid_specs(self):
        """Test that specs are checked."""
        with pytest.raises(TypeError, match="must be an instance of TileSpecifications"):
            StraightTileModel({"laneWidth": 80})

    def test_invalid_direction(self, specs):
        """Test that directions are checked."""
        with pytest.raises(TypeError, match="A valid direction is needed!"):
            CurvedTileModel(specs, "up")

        tile = CurvedTileModel(specs)
        with pytest.raises(TypeError, match="A valid direction is needed!"):
            tile.set_direction(None)

    def test_direction_strings(self, specs):
        """Test that directions accept their string values."""
        tile = CurvedTileModel(specs, "left")

        assert tile.direction == TileDirection.LEFT

    def test_flip_direction(self, specs):
        """Test direction toggling."""
        tile = CurvedTileModel(specs, TileDirection.RIGHT)

        assert tile.flip_direction() is tile
        assert tile.direction == TileDirection.LEFT
        tile.flip_direction()
        assert tile.direction == TileDirection.RIGHT

    def test_export(self, specs):
        """Test export to a plain record."""
        tile = CurvedTileModel(specs, "left", 2)

        assert tile.export() == {"type": "curved-tile", "direction": "left", "ratio": 2}

    def test_clone(self, specs):
        """Test that clones are independent but share specs."""
        tile = StraightTileModel(specs, "left", 0.5)
        clone = tile.clone()

        assert clone is not tile
        assert isinstance(clone, StraightTileModel)
        assert clone.specs is specs
        assert clone.export() == tile.export()

        clone.set_ratio(0.25)
        assert tile.ratio == 0.5

    def test_set_specs_rederives_ratio(self, specs, unlocked_specs):
        """Test that changing specs clamps the ratio again."""
        tile = StraightTileModel(unlocked_specs, "right", 3)
        assert tile.ratio == 3

        tile.set_specs(specs)
        assert tile.specs is specs
        assert tile.ratio == 1

    def test_compare(self, specs):
        """Test ordering by type, ratio and direction."""
        straight = StraightTileModel(specs)
        enlarged = CurvedTileEnlargedModel(specs)
        curved = CurvedTileModel(specs)
        curved_left = CurvedTileModel(specs, "left")
        curved_large = CurvedTileModel(specs, "right", 2)

        assert straight.compare(curved) < 0
        assert curved.compare(enlarged) > 0
        assert curved.compare(curved_large) < 0
        assert curved.compare(curved_left) < 0
        assert curved.compare(curved.clone()) == 0
        assert curved.compare("curved-tile") == 1

        tiles = [curved_large, curved_left, curved, enlarged, straight]
        assert sorted(tiles) == [straight, enlarged, curved, curved_left, curved_large]

    def test_validate_instance(self, specs):
        """Test the tile type check."""
        tile = CurvedTileModel(specs)

        assert TileModel.validate_instance(tile) is tile
        with pytest.raises(TypeError, match="must be an instance of StraightTileModel"):
            StraightTileModel.validate_instance(tile)

    def test_input_coord(self, specs):
        """Test that the input point is the placement point."""
        assert_point(CurvedTileModel(specs).get_input_coord(12, 34), 12, 34)


class TestStraightTileModel:
    """Test straight tiles."""

    def test_dimensions(self, specs):
        """Test straight tile dimensions."""
        tile = StraightTileModel(specs)

        assert tile.type == TileType.STRAIGHT
        assert tile.model_id == "straight-tile-1"
        assert tile.length == pytest.approx(110)
        assert tile.width == pytest.approx(90)
        assert tile.curve_angle == 180
        assert tile.direction_angle == 0

    def test_ratio_scales_length_only(self, specs):
        """Test that the ratio scales the length."""
        tile = StraightTileModel(specs, "right", 0.5)

        assert tile.model_id == "straight-tile-0.5"
        assert tile.length == pytest.approx(55)
        assert tile.width == pytest.approx(90)

    @pytest.mark.parametrize("ratio,expected", [
        (0.15, 0.25),
        (0.33, 0.25),
        (0.5, 0.5),
        (0.7, 0.75),
        (1, 1),
        (2.5, 1),
        (0, 1),
        (-0.5, 0.5),
    ])
    def test_locked_ratio(self, specs, ratio, expected):
        """Test ratio snapping when ratios are locked."""
        assert StraightTileModel(specs, "right", ratio).ratio == pytest.approx(expected)

    @pytest.mark.parametrize("ratio,expected", [(0.5, 0.5), (2.5, 3), (2.4, 2), (5, 4)])
    def test_unlocked_ratio(self, unlocked_specs, ratio, expected):
        """Test ratio snapping when ratios are unlocked."""
        assert StraightTileModel(unlocked_specs, "right", ratio).ratio == pytest.approx(expected)

    @pytest.mark.parametrize("ratio,expected", [
        (float("nan"), 1),
        (float("inf"), 4),
        (float("-inf"), 4),
        (10 ** 400, 4),
    ])
    def test_non_finite_ratio(self, unlocked_specs, ratio, expected):
        """Test that NaN means 1 and huge ratios clamp to the maximum."""
        assert StraightTileModel(unlocked_specs, "right", ratio).ratio == expected

    def test_barrier_chunks(self, specs):
        """Test barrier chunk counts."""
        tile = StraightTileModel(specs)
        assert (tile.side_barrier_chunks, tile.inner_barrier_chunks, tile.outer_barrier_chunks) == (4, 2, 4)

        tile.set_ratio(0.5)
        assert (tile.side_barrier_chunks, tile.inner_barrier_chunks, tile.outer_barrier_chunks) == (2, 1, 2)

    def test_output(self, specs):
        """Test the output pose."""
        tile = StraightTileModel(specs)

        assert_point(tile.get_output_coord(0, 0, 0), 0, 110)
        assert_point(tile.get_output_coord(0, 0, 90), -110, 0)
        assert_point(tile.get_output_coord(10, 20, 180), 10, -90)
        assert tile.get_output_angle(0) == 0
        assert tile.get_output_angle(-90) == 270

    def test_direction_does_not_change_pose(self, specs):
        """Test that left and right straights are placed the same way."""
        right = StraightTileModel(specs, "right")
        left = StraightTileModel(specs, "left")

        assert left.get_output_coord(5, 5, 30).equals(right.get_output_coord(5, 5, 30), 1e-9)

    def test_center(self, specs):
        """Test the center point."""
        assert_point(StraightTileModel(specs).get_center_coord(), 0, 55)

    def test_bounding_rect(self, specs):
        """Test the bounding rectangle."""
        tile = StraightTileModel(specs)
        rect = tile.get_bounding_rect(0, 0, 0)

        assert_rect(rect, -45, 0, 90, 110)
        assert rect.input.angle == 0
        assert rect.output.x == pytest.approx(0, abs=1e-9)
        assert rect.output.y == pytest.approx(110)
        assert rect.output.angle == 0

    def test_rotated_bounding_rect(self, specs):
        """Test the bounding rectangle of a rotated tile."""
        rect = StraightTileModel(specs).get_bounding_rect(0, 0, 90)

        assert_rect(rect, -110, -45, 110, 90)
        assert rect.input.angle == 90
        assert rect.output.angle == 90


class TestCurvedTileModel:
    """Test curved tiles."""

    def test_dimensions(self, specs):
        """Test curved tile dimensions."""
        tile = CurvedTileModel(specs)

        assert tile.type == TileType.CURVED
        assert tile.model_id == "curved-tile-1"
        assert tile.length == pytest.approx(110)
        assert tile.width == pytest.approx(90)
        assert tile.curve_angle == 90
        assert tile.inner_radius == pytest.approx(10)
        assert tile.outer_radius == pytest.approx(100)

    def test_ratio_does_not_change_footprint(self, specs):
        """Test that the ratio changes the curve, not the tile size."""
        tile = CurvedTileModel(specs, "right", 2)

        assert tile.length == pytest.approx(110)
        assert tile.width == pytest.approx(90)
        assert tile.inner_radius == pytest.approx(120)
        assert tile.outer_radius == pytest.approx(210)

    @pytest.mark.parametrize("ratio,expected_angle", [(0.5, 45), (0.75, 67.5), (1, 90), (2, 45), (3, 30), (4, 22.5)])
    def test_curve_angle(self, specs, ratio, expected_angle):
        """Test the arc swept by curves."""
        assert CurvedTileModel(specs, "right", ratio).curve_angle == pytest.approx(expected_angle)

    @pytest.mark.parametrize("ratio,expected", [(0.25, 0.5), (0.33, 0.5), (0.75, 0.75), (2.5, 3), (5, 4)])
    def test_ratio(self, specs, ratio, expected):
        """Test ratio snapping."""
        assert CurvedTileModel(specs, "right", ratio).ratio == pytest.approx(expected)

    def test_non_finite_ratio(self, specs):
        """Test that non-finite ratios are coerced instead of raising."""
        assert create_tile(specs, "curved-tile", "right", float("inf")).ratio == 4
        assert create_tile(specs, "curved-tile", "left", float("nan")).ratio == 1
        assert create_tile(specs, "straight-tile", "right", float("inf")).ratio == 1

    def test_direction_angle(self, specs):
        """Test the rotation of left curves."""
        assert CurvedTileModel(specs, "right", 2).direction_angle == 0
        assert CurvedTileModel(specs, "left", 1).direction_angle == pytest.approx(90)
        assert CurvedTileModel(specs, "left", 2).direction_angle == pytest.approx(135)
        assert CurvedTileModel(specs, "left", 0.5).direction_angle == pytest.approx(90)

    def test_barrier_chunks(self, specs):
        """Test barrier chunk counts."""
        counts = {}
        for ratio in (0.5, 1, 2):
            tile = CurvedTileModel(specs, "right", ratio)
            counts[ratio] = (tile.side_barrier_chunks, tile.inner_barrier_chunks, tile.outer_barrier_chunks)

        assert counts == {0.5: (2, 1, 2), 1: (4, 2, 4), 2: (8, 4, 4)}

    def test_output_right(self, specs):
        """Test the output pose of a right curve."""
        tile = CurvedTileModel(specs, "right")

        assert_point(tile.get_output_coord(0, 0, 0), -55, 55)
        assert tile.get_output_angle(0) == pytest.approx(90)

    def test_output_left(self, specs):
        """Test the output pose of a left curve."""
        tile = CurvedTileModel(specs, "left")

        assert_point(tile.get_output_coord(0, 0, 0), 55, 55)
        assert tile.get_output_angle(0) == pytest.approx(270)

    def test_output_large_ratio(self, specs):
        """Test the output of a wide curve."""
        tile = CurvedTileModel(specs, "right", 2)

        assert_point(tile.get_output_coord(), -165 + 165 * HALF_SQRT2, 165 * HALF_SQRT2)
        assert tile.get_output_angle(10) == pytest.approx(55)

    def test_center(self, specs):
        """Test the center, where the input and output tangents cross."""
        assert_point(CurvedTileModel(specs, "right").get_center_coord(), 0, 55)
        assert_point(CurvedTileModel(specs, "left").get_center_coord(), 0, 55)

        center = CurvedTileModel(specs, "right", 2).get_center_coord()
        assert center.x == pytest.approx(0, abs=1e-9)
        assert center.y == pytest.approx(165 * np.tan(np.radians(22.5)))

        left = CurvedTileModel(specs, "left", 2).get_center_coord(10, 20, 30)
        right = CurvedTileModel(specs, "right", 2).get_center_coord(10, 20, 30)
        assert_point(left, right.x, right.y)

    def test_bounding_rect(self, specs):
        """Test the bounding rectangle."""
        rect = CurvedTileModel(specs, "right").get_bounding_rect(0, 0, 0)

        assert_rect(rect, -55, 0, 100, 100)
        assert rect.output.x == pytest.approx(-55)
        assert rect.output.y == pytest.approx(55)
        assert rect.output.angle == pytest.approx(90)

        rect = CurvedTileModel(specs, "left").get_bounding_rect(0, 0, 0)
        assert_rect(rect, -45, 0, 100, 100)

    def test_bounding_rect_includes_arc_extreme(self, specs):
        """Test that the outer arc bulge is inside the rectangle."""
        rect = CurvedTileModel(specs, "right").get_bounding_rect(0, 0, 45)

        # The outer arc peaks between its end points once rotated
        assert rect.y + rect.height == pytest.approx(100 - 55 * HALF_SQRT2)
        assert rect.y == pytest.approx(-45 * HALF_SQRT2)

    def test_four_curves_make_a_circle(self, specs):
        """Test that four unit curves turn all the way around."""
        tiles = [CurvedTileModel(specs, "right") for _ in range(4)]
        assert sum(tile.curve_angle for tile in tiles) == 360

        x, y, angle = 0.0, 0.0, 0.0
        for tile in tiles:
            rect = tile.get_bounding_rect(x, y, angle)
            x, y, angle = rect.output.x, rect.output.y, rect.output.angle

        assert x == pytest.approx(0, abs=1e-9)
        assert y == pytest.approx(0, abs=1e-9)
        assert angle == 0


class TestCurvedTileEnlargedModel:
    """Test enlarged curved tiles."""

    def test_dimensions(self, specs):
        """Test enlarged curve dimensions."""
        tile = CurvedTileEnlargedModel(specs)

        assert tile.type == TileType.CURVED_ENLARGED
        assert tile.model_id == "curved-tile-enlarged-1"
        assert tile.length == pytest.approx(110)
        assert tile.width == pytest.approx(90)
        assert tile.curve_angle == 90
        assert tile.curve_side == pytest.approx(55)
        assert tile.inner_radius == pytest.approx(10)
        assert tile.outer_radius == pytest.approx(45)

    def test_locked_ratio(self, specs):
        """Test that the ratio is locked to 1 by default."""
        assert CurvedTileEnlargedModel(specs, "right", 2).ratio == 1
        assert CurvedTileEnlargedModel(specs, "right", 0.5).ratio == 1

    @pytest.mark.parametrize("ratio,expected", [(0.5, 1), (2, 2), (2.5, 3), (6, 4)])
    def test_unlocked_ratio(self, unlocked_specs, ratio, expected):
        """Test ratio snapping when ratios are unlocked."""
        assert CurvedTileEnlargedModel(unlocked_specs, "right", ratio).ratio == expected

    def test_ratio_scales_footprint(self, unlocked_specs):
        """Test that the ratio scales the whole tile."""
        tile = CurvedTileEnlargedModel(unlocked_specs, "right", 2)

        assert tile.length == pytest.approx(220)
        assert tile.width == pytest.approx(180)
        assert tile.curve_angle == 90
        assert tile.curve_side == pytest.approx(110)
        assert tile.inner_radius == pytest.approx(120)
        assert tile.outer_radius == pytest.approx(100)

    def test_barrier_chunks(self, specs, unlocked_specs):
        """Test barrier chunk counts."""
        tile = CurvedTileEnlargedModel(specs)
        assert (tile.side_barrier_chunks, tile.inner_barrier_chunks, tile.outer_barrier_chunks) == (2, 2, 2)

        tile = CurvedTileEnlargedModel(unlocked_specs, "right", 2)
        assert (tile.side_barrier_chunks, tile.inner_barrier_chunks, tile.outer_barrier_chunks) == (4, 8, 4)

    def test_direction_angle(self, specs):
        """Test the rotation per direction."""
        assert CurvedTileEnlargedModel(specs, "right").direction_angle == 0
        assert CurvedTileEnlargedModel(specs, "left").direction_angle == 90

    def test_output(self, specs, unlocked_specs):
        """Test the output poses."""
        right = CurvedTileEnlargedModel(specs, "right")
        left = CurvedTileEnlargedModel(specs, "left")

        assert_point(right.get_output_coord(), -55, 55)
        assert right.get_output_angle() == 90
        assert_point(left.get_output_coord(), 55, 55)
        assert left.get_output_angle() == 270

        large = CurvedTileEnlargedModel(unlocked_specs, "right", 2)
        assert_point(large.get_output_coord(), -165, 165)

    def test_center(self, specs):
        """Test the center point."""
        assert_point(CurvedTileEnlargedModel(specs).get_center_coord(), 0, 55)
        assert_point(CurvedTileEnlargedModel(specs).get_center_coord(0, 0, 90), -55, 0)

    def test_bounding_rect(self, specs, unlocked_specs):
        """Test the bounding rectangles."""
        assert_rect(CurvedTileEnlargedModel(specs, "right").get_bounding_rect(), -55, 0, 100, 100)
        assert_rect(CurvedTileEnlargedModel(specs, "left").get_bounding_rect(), -45, 0, 100, 100)
        assert_rect(CurvedTileEnlargedModel(unlocked_specs, "right", 2).get_bounding_rect(), -165, 0, 210, 210)

    def test_bounding_rect_includes_corner_extreme(self, specs):
        """Test that the rounded corner bulge is inside the rectangle."""
        rect = CurvedTileEnlargedModel(specs, "right").get_bounding_rect(0, 0, 45)

        # Corner center (0, 55) rotated by 45 degrees, plus the corner radius
        assert rect.y + rect.height == pytest.approx(55 * HALF_SQRT2 + 45)


class TestTileFactory:
    """Test tile creation from types."""

    @pytest.mark.parametrize("tile_type,cls", [
        ("straight-tile", StraightTileModel),
        ("curved-tile", CurvedTileModel),
        ("curved-tile-enlarged", CurvedTileEnlargedModel),
        (TileType.CURVED, CurvedTileModel),
    ])
    def test_create_tile(self, specs, tile_type, cls):
        """Test that each type gives its class."""
        tile = create_tile(specs, tile_type, "left", 1)

        assert type(tile) is cls
        assert tile.direction == TileDirection.LEFT
        assert tile.specs is specs

    def test_default_tile(self, specs):
        """Test the default tile."""
        tile = create_tile(specs)

        assert isinstance(tile, StraightTileModel)
        assert tile.direction == TileDirection.RIGHT
        assert tile.ratio == 1

    @pytest.mark.parametrize("tile_type", ["bridge", None, "tile"])
    def test_invalid_type(self, specs, tile_type):
        """Test that unknown types are rejected."""
        with pytest.raises(TypeError, match="A valid type of tile is needed!"):
            create_tile(specs, tile_type)

    def test_invalid_direction(self, specs):
        """Test that unknown directions are rejected."""
        with pytest.raises(TypeError, match="A valid direction is needed!"):
            create_tile(specs, "curved-tile", "north")

    def test_import_tile(self, specs):
        """Test creation from an exported record."""
        tile = import_tile(specs, {"type": "curved-tile", "direction": "left", "ratio": 2})

        assert isinstance(tile, CurvedTileModel)
        assert tile.export() == {"type": "curved-tile", "direction": "left", "ratio": 2}
