"""Tests for ring winding detection and normalization."""

import math

import pytest
from esrigeo.winding import (
    is_clockwise,
    is_counter_clockwise,
    orient_ring,
    polygon_rings,
    signed_area,
)

CCW_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
CW_SQUARE = [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0)]


class TestSignedArea:
    """Shoelace signed area."""

    def test_ccw_is_positive(self):
        assert signed_area(CCW_SQUARE) == pytest.approx(1.0)

    def test_cw_is_negative(self):
        assert signed_area(CW_SQUARE) == pytest.approx(-1.0)

    def test_open_ring_same_as_closed(self):
        """Closing edge is implied."""
        assert signed_area(CCW_SQUARE[:-1]) == signed_area(CCW_SQUARE)

    def test_ignores_z(self):
        ring = [(x, y, 42.0) for x, y in CCW_SQUARE]
        assert signed_area(ring) == pytest.approx(1.0)

    def test_degenerate_rings(self):
        """Fewer than 3 vertices or collinear vertices give zero."""
        assert signed_area([]) == 0.0
        assert signed_area([(0, 0), (1, 1)]) == 0.0
        assert signed_area([(0, 0), (1, 1), (2, 2), (0, 0)]) == 0.0

    def test_direction_helpers(self):
        assert is_clockwise(CW_SQUARE)
        assert not is_clockwise(CCW_SQUARE)
        assert is_counter_clockwise(CCW_SQUARE)
        assert not is_counter_clockwise(CW_SQUARE)


class TestOrientRing:
    """Conditional per-ring reversal."""

    def test_reverses_wrong_winding(self):
        assert orient_ring(CCW_SQUARE, clockwise=True) == CW_SQUARE
        assert orient_ring(CW_SQUARE, clockwise=False) == CCW_SQUARE

    def test_keeps_correct_winding(self):
        assert orient_ring(CW_SQUARE, clockwise=True) == CW_SQUARE
        assert orient_ring(CCW_SQUARE, clockwise=False) == CCW_SQUARE

    def test_idempotent(self):
        once = orient_ring(CCW_SQUARE, clockwise=True)
        assert orient_ring(once, clockwise=True) == once

    def test_returns_new_list(self):
        result = orient_ring(CW_SQUARE, clockwise=True)
        assert result == CW_SQUARE
        assert result is not CW_SQUARE

    def test_closure_preserved_on_reversal(self):
        """First and last stay equal, with the same vertex count."""
        ring = [(3.0, 1.0), (5.0, 1.0), (4.0, 4.0), (3.0, 1.0)]
        result = orient_ring(ring, clockwise=True)
        assert len(result) == len(ring)
        assert result[0] == result[-1] == (3.0, 1.0)

    def test_zero_area_unchanged(self):
        ring = [(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)]
        assert orient_ring(ring, clockwise=True) == ring
        assert orient_ring(ring, clockwise=False) == ring

    def test_nan_area_unchanged(self):
        ring = [(0.0, 0.0), (math.nan, 0.0), (1.0, 1.0), (0.0, 0.0)]
        assert math.isnan(signed_area(ring))
        for clockwise in (True, False):
            result = orient_ring(ring, clockwise=clockwise)
            assert result[1] is ring[1]
            assert result[2] == (1.0, 1.0)


class TestPolygonRings:
    """Exterior clockwise, holes counter-clockwise, order kept."""

    def test_exterior_and_holes(self):
        exterior = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]      # CCW
        hole_cw = [(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)]           # CW
        hole_ccw = [(6, 6), (8, 6), (8, 8), (6, 8), (6, 6)]          # CCW
        rings = polygon_rings(exterior, [hole_cw, hole_ccw])
        assert len(rings) == 3
        assert is_clockwise(rings[0])
        assert is_counter_clockwise(rings[1])
        assert is_counter_clockwise(rings[2])
        assert rings[1] == list(reversed(hole_cw))
        assert rings[2] == hole_ccw

    def test_no_holes(self):
        assert polygon_rings(CW_SQUARE) == [CW_SQUARE]
