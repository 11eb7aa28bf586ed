"""Tests for bounds, statistics and layer helpers."""
import math

import pytest
from gcodeview.analysis import (
    Bounds,
    Statistics,
    calculate_bounds,
    default_layer_range,
    filter_by_z,
    get_statistics,
    layer_heights,
    z_fraction,
)
from gcodeview.config import ViewerConfig
from gcodeview.gcode.interpreter import parse_gcode
from gcodeview.gcode.library import calibration_cube_gcode, relative_square_gcode

SQUARE_CORNER = "G1 X10 E1\nG1 Y10 E2\nG0 X0 Y0\n"


class TestBounds:
    def test_empty_paths_degenerate(self):
        bounds = calculate_bounds([])
        assert bounds == Bounds(min=(0.0, 0.0, 0.0), max=(0.0, 0.0, 0.0))
        assert all(math.isfinite(v) for v in bounds.min + bounds.max)

    def test_two_segments(self):
        result = parse_gcode(SQUARE_CORNER)
        bounds = calculate_bounds(result.paths)
        assert bounds.min == (0.0, 0.0, 0.0)
        assert bounds.max == (10.0, 10.0, 0.0)

    def test_travel_moves_excluded(self):
        result = parse_gcode("G0 X-50 Y-50 Z9\nG1 X1 Y1 Z1 E1")
        bounds = calculate_bounds(result.paths)
        assert bounds.min == (-50.0, -50.0, 1.0)
        assert bounds.max == (1.0, 1.0, 9.0)

    def test_center_and_size(self):
        bounds = Bounds(min=(0.0, -2.0, 0.0), max=(10.0, 2.0, 1.0))
        assert bounds.center == (5.0, 0.0, 0.5)
        assert bounds.size == (10.0, 4.0, 1.0)
        assert bounds.largest_extent == 10.0

    def test_relative_square(self):
        result = parse_gcode(relative_square_gcode(side_mm=10.0, layer_height=0.2, num_layers=3))
        bounds = calculate_bounds(result.paths)
        assert bounds.min == pytest.approx((50.0, 50.0, 0.2))
        assert bounds.max == pytest.approx((60.0, 60.0, 0.6))


class TestStatistics:
    def test_reference_toolpath(self):
        result = parse_gcode(SQUARE_CORNER)
        stats = get_statistics(result.paths, result.moves)
        assert stats.total_moves == 3
        assert stats.extrusion_moves == 2
        assert stats.travel_moves == 1
        assert stats.extrusion_distance == pytest.approx(20.0)
        assert stats.total_distance == pytest.approx(20.0 + math.sqrt(200.0))
        display = stats.to_display()
        assert display["extrusion_distance"] == "20.00"
        assert display["total_distance"] == "34.14"

    def test_empty(self):
        stats = get_statistics([], [])
        assert stats == Statistics()
        assert stats.to_display()["total_distance"] == "0.00"

    def test_single_flat_segment_one_layer(self):
        result = parse_gcode("G1 X5 E1")
        assert get_statistics(result.paths, result.moves).layer_count == 1

    def test_z_changing_segment_counts_both_heights(self):
        result = parse_gcode("G1 X1 Z0.2 E1")
        assert get_statistics(result.paths, result.moves).layer_count == 2

    def test_travel_heights_not_counted(self):
        result = parse_gcode("G0 Z5\nG0 Z0\nG1 X1 E1")
        assert get_statistics(result.paths, result.moves).layer_count == 1

    def test_calibration_cube(self):
        result = parse_gcode(calibration_cube_gcode(size_mm=20.0, num_layers=5))
        stats = get_statistics(result.paths, result.moves)
        assert stats.layer_count == 5
        assert stats.extrusion_moves == 20
        # Z hop, travel to corner and retraction per layer
        assert stats.travel_moves == 15
        assert stats.extrusion_distance == pytest.approx(20.0 * 4 * 5)
        assert stats.total_distance > stats.extrusion_distance

    def test_display_decimals_configurable(self):
        result = parse_gcode(SQUARE_CORNER)
        stats = get_statistics(result.paths, result.moves)
        assert stats.to_display(ViewerConfig(display_decimals=1))["total_distance"] == "34.1"


class TestLayers:
    def setup_method(self):
        self.result = parse_gcode(calibration_cube_gcode(num_layers=3, layer_height=0.2))
        self.bounds = calculate_bounds(self.result.paths)

    def test_layer_heights(self):
        assert layer_heights(self.result.paths) == pytest.approx([0.2, 0.4, 0.6])

    def test_default_layer_range(self):
        assert default_layer_range(self.bounds) == pytest.approx((0.2, 0.6))

    def test_filter_by_z(self):
        first = filter_by_z(self.result.paths, 0.1, 0.3)
        assert len(first) == 4
        assert all(m.start.z == pytest.approx(0.2) for m in first)
        assert len(filter_by_z(self.result.paths, *default_layer_range(self.bounds))) == 12

    def test_filter_by_z_inverted_range(self):
        with pytest.raises(ValueError):
            filter_by_z(self.result.paths, 1.0, 0.0)

    def test_z_fraction(self):
        lowest = self.result.paths[0]
        highest = self.result.paths[-1]
        assert z_fraction(lowest, self.bounds) == pytest.approx(0.0)
        assert z_fraction(highest, self.bounds) == pytest.approx(1.0)

    def test_z_fraction_flat_part(self):
        result = parse_gcode("G1 X1 E1\nG1 Y1 E2")
        bounds = calculate_bounds(result.paths)
        assert z_fraction(result.paths[1], bounds) == 0.0
