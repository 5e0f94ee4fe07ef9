"""Tests for ear clipping triangulation."""

import math

import pytest

from city_sector.models.geometry import Point2D
from city_sector.utils.polygon_utils import polygon_area
from city_sector.utils.triangulation import (
    triangulate_polygon,
    triangulation_area,
    validate_triangulation,
)
from conftest import ring_of


class TestEarClipping:
    """Test triangle count, area and index coverage."""

    def test_square_scenario(self, cw_square):
        """A 5x5 square yields 2 triangles of total area 25."""
        triangles = triangulate_polygon(cw_square)
        assert len(triangles) == 2
        assert triangulation_area(cw_square, triangles) == pytest.approx(25.0)

    @pytest.mark.parametrize("reverse", [False, True])
    def test_l_shape_both_windings(self, l_shape, reverse):
        ring = list(reversed(l_shape)) if reverse else l_shape
        triangles = triangulate_polygon(ring)

        assert len(triangles) == len(ring) - 2
        assert triangulation_area(ring, triangles) == pytest.approx(
            polygon_area(ring), abs=1e-5
        )
        assert validate_triangulation(ring, triangles) == []

    def test_uses_exactly_input_vertices(self, l_shape):
        triangles = triangulate_polygon(l_shape)
        used = {i for tri in triangles for i in tri}
        assert used == set(range(len(l_shape)))

    def test_regular_polygon(self):
        ring = [
            Point2D(10.0 * math.cos(2 * math.pi * k / 12), 10.0 * math.sin(2 * math.pi * k / 12))
            for k in range(12)
        ]
        triangles = triangulate_polygon(ring)
        assert len(triangles) == 10
        assert triangulation_area(ring, triangles) == pytest.approx(polygon_area(ring))

    def test_triangles_keep_input_winding(self, ccw_square):
        """Every emitted triangle turns the same way as the ring."""
        for ring, sign in ((ccw_square, 1), (list(reversed(ccw_square)), -1)):
            for a, b, c in triangulate_polygon(ring):
                cross = (
                    (ring[b].x - ring[a].x) * (ring[c].y - ring[a].y)
                    - (ring[b].y - ring[a].y) * (ring[c].x - ring[a].x)
                )
                assert cross * sign > 0

    def test_triangle_input(self):
        ring = ring_of((0, 0), (4, 0), (0, 3))
        assert triangulate_polygon(ring) == [(0, 1, 2)]


class TestEarClippingFailures:
    """Test invalid input handling."""

    def test_too_few_vertices(self):
        assert triangulate_polygon(ring_of((0, 0), (1, 0))) is None
        assert triangulate_polygon([]) is None

    def test_collinear_ring_has_no_ear(self):
        ring = ring_of((0, 0), (1, 0), (2, 0), (3, 0))
        assert triangulate_polygon(ring) is None


class TestValidateTriangulation:
    """Test triangulation validation helper."""

    def test_reports_missing_triangles(self, ccw_square):
        assert validate_triangulation(ccw_square, []) == ["No triangles generated"]

    def test_reports_invalid_index(self, ccw_square):
        errors = validate_triangulation(ccw_square, [(0, 1, 7)])
        assert errors == ["Triangle 0 has invalid index"]

    def test_reports_area_mismatch(self, ccw_square):
        errors = validate_triangulation(ccw_square, [(0, 1, 2)])
        assert len(errors) == 1
        assert "differs from expected" in errors[0]
