"""Tests for polygon and vector utilities."""

import math

import pytest

from city_sector.models.geometry import Point2D
from city_sector.utils.math_utils import (
    line_intersection,
    segment_line_intersection,
    angle_between_vectors,
    cross_product_2d,
    perpendicular_vector,
    normalize_vector,
)
from city_sector.utils.polygon_utils import (
    point_in_polygon,
    polygon_signed_area,
    polygon_area,
    polygon_centroid,
    is_clockwise,
    ensure_ccw,
    is_convex,
    edge_outward_normal,
    snap_polygon_vertices,
    remove_consecutive_duplicates,
)
from conftest import ring_of


def _rotate(ring, angle_deg):
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return [Point2D(p.x * c - p.y * s, p.x * s + p.y * c) for p in ring]


class TestSignedArea:
    """Test shoelace area and winding helpers."""

    def test_ccw_positive(self, ccw_square):
        assert polygon_signed_area(ccw_square) == pytest.approx(100.0)
        assert not is_clockwise(ccw_square)

    def test_cw_negative(self, cw_square):
        assert polygon_signed_area(cw_square) == pytest.approx(-25.0)
        assert is_clockwise(cw_square)

    def test_invariant_under_rotation(self, l_shape):
        """Rotating a polygon does not change its signed area."""
        for angle in (15.0, 37.0, 90.0, 211.0):
            rotated = _rotate(l_shape, angle)
            assert polygon_signed_area(rotated) == pytest.approx(
                polygon_signed_area(l_shape), abs=1e-9
            )

    def test_reversal_negates(self, l_shape):
        reversed_ring = list(reversed(l_shape))
        assert polygon_signed_area(reversed_ring) == pytest.approx(
            -polygon_signed_area(l_shape)
        )
        assert polygon_area(reversed_ring) == pytest.approx(3.0)

    def test_degenerate_area_is_zero(self):
        assert polygon_signed_area(ring_of((0, 0), (1, 1))) == 0.0

    def test_ensure_ccw(self, cw_square, ccw_square):
        fixed = ensure_ccw(cw_square)
        assert polygon_signed_area(fixed) > 0
        assert ensure_ccw(ccw_square) is ccw_square


class TestPointInPolygon:
    """Test ray casting containment."""

    def test_inside_and_outside(self, l_shape):
        assert point_in_polygon(Point2D(0.5, 0.5), l_shape)
        assert point_in_polygon(Point2D(0.5, 1.5), l_shape)
        assert not point_in_polygon(Point2D(1.5, 1.5), l_shape)
        assert not point_in_polygon(Point2D(-1.0, 0.5), l_shape)

    def test_edge_is_inside(self, ccw_square):
        assert point_in_polygon(Point2D(5.0, 0.0), ccw_square)
        assert point_in_polygon(Point2D(10.0, 10.0), ccw_square)


class TestCentroidAndConvexity:
    """Test centroid and convexity helpers."""

    def test_vertex_average_centroid(self, ccw_square):
        c = polygon_centroid(ccw_square)
        assert c.x == pytest.approx(5.0)
        assert c.y == pytest.approx(5.0)

    def test_convexity(self, ccw_square, l_shape):
        assert is_convex(ccw_square)
        assert is_convex(list(reversed(ccw_square)))
        assert not is_convex(l_shape)


class TestOutwardNormals:
    """Test that edge normals point out of the polygon for both windings."""

    @pytest.mark.parametrize("reverse", [False, True])
    def test_normals_point_away_from_centroid(self, reverse):
        hexagon = [
            Point2D(4.0 * math.cos(math.radians(a)), 4.0 * math.sin(math.radians(a)))
            for a in range(0, 360, 60)
        ]
        ring = list(reversed(hexagon)) if reverse else hexagon
        area = polygon_signed_area(ring)
        centroid = polygon_centroid(ring)

        n = len(ring)
        for i in range(n):
            p1, p2 = ring[i], ring[(i + 1) % n]
            normal = edge_outward_normal(p1, p2, area)
            midpoint = Point2D((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
            assert normal.dot(midpoint - centroid) > 0
            assert normal.length() == pytest.approx(1.0)

    def test_zero_length_edge(self):
        normal = edge_outward_normal(Point2D(1, 1), Point2D(1, 1), 1.0)
        assert normal == Point2D(0.0, 0.0)


class TestSnapping:
    """Test grid snapping and duplicate removal."""

    def test_snap_to_grid(self):
        ring = ring_of((0.2, 0.1), (9.8, 0.3), (10.1, 9.7), (-0.3, 10.4))
        snapped = snap_polygon_vertices(ring, 1.0)
        assert snapped == ring_of((0, 0), (10, 0), (10, 10), (0, 10))

    def test_snap_disabled(self, ccw_square):
        assert snap_polygon_vertices(ccw_square, 0.0) is ccw_square

    def test_snap_collapses_vertices(self):
        ring = ring_of((0.1, 0.1), (0.2, 0.1), (0.2, 0.2))
        assert len(snap_polygon_vertices(ring, 1.0)) == 1

    def test_remove_closing_duplicate(self):
        ring = ring_of((0, 0), (1, 0), (1, 1), (0, 0))
        assert remove_consecutive_duplicates(ring) == ring_of((0, 0), (1, 0), (1, 1))


class TestLineHelpers:
    """Test line intersection and angle helpers."""

    def test_line_intersection(self):
        p = line_intersection(Point2D(0, 1), Point2D(1, 0), Point2D(2, -5), Point2D(0, 1))
        assert p.x == pytest.approx(2.0)
        assert p.y == pytest.approx(1.0)

    def test_parallel_lines(self):
        assert line_intersection(
            Point2D(0, 0), Point2D(1, 0), Point2D(0, 1), Point2D(2, 0)
        ) is None

    def test_segment_line_intersection(self):
        p = segment_line_intersection(
            Point2D(0, 0), Point2D(10, 0), Point2D(3, -2), Point2D(3, 2)
        )
        assert p.x == pytest.approx(3.0)
        assert p.y == pytest.approx(0.0)

    def test_segment_parallel_is_none(self):
        assert segment_line_intersection(
            Point2D(0, 0), Point2D(10, 0), Point2D(0, 1), Point2D(1000, 1)
        ) is None

    def test_angles(self):
        assert angle_between_vectors(Point2D(1, 0), Point2D(0, 1)) == pytest.approx(90.0)
        assert angle_between_vectors(Point2D(1, 0), Point2D(-1, 0)) == pytest.approx(180.0)
        assert angle_between_vectors(Point2D(0, 0), Point2D(1, 0)) == 0.0

    def test_vector_helpers(self):
        v = Point2D(3.0, 4.0)
        assert cross_product_2d(Point2D(1, 0), Point2D(0, 1)) == 1
        assert perpendicular_vector(v) == Point2D(-4.0, 3.0)
        assert perpendicular_vector(v).dot(v) == 0
        unit = normalize_vector(v)
        assert unit.x == pytest.approx(0.6)
        assert unit.y == pytest.approx(0.8)
        assert normalize_vector(Point2D(0, 0)) == Point2D(0.0, 0.0)
