"""Tests for mitered edge-loop offsetting and roof layer generation."""

import pytest

from city_sector.config import RoofConfig
from city_sector.models.geometry import Point2D, EdgeLoop
from city_sector.models.sector import SkipReason
from city_sector.generators.roof_offset import offset_edge_loop, strip_triangles
from city_sector.generators.roof_layers import generate_roof
from city_sector.utils.triangulation import triangulation_area
from conftest import ring_of, assert_points_close


class TestOffsetEdgeLoop:
    """Test the mitered offsetter."""

    def test_inset_cw_square(self, cw_square):
        """A clockwise 5x5 square inset by 1 and raised by 2."""
        loop = EdgeLoop.from_ring(cw_square, 0.0)
        inner = offset_edge_loop(loop, cw_square, 1.0, 2.0)

        assert_points_close(inner.ring(), ring_of((1, 1), (1, 4), (4, 4), (4, 1)))
        assert inner.elevations() == pytest.approx([2.0] * 4)

    def test_inset_ccw_square(self, ccw_square):
        loop = EdgeLoop.from_ring(ccw_square, 10.0)
        inner = offset_edge_loop(loop, ccw_square, 1.5, 0.5)

        assert_points_close(inner.ring(), ring_of((1.5, 1.5), (8.5, 1.5), (8.5, 8.5), (1.5, 8.5)))
        assert inner.elevations() == pytest.approx([10.5] * 4)

    def test_zero_distance_keeps_xy(self, l_shape):
        loop = EdgeLoop.from_ring(l_shape, 3.0)
        raised = offset_edge_loop(loop, l_shape, 0.0, 1.25)
        assert raised.ring() == l_shape
        assert raised.elevations() == pytest.approx([4.25] * len(l_shape))

    def test_negative_distance_expands(self, ccw_square):
        loop = EdgeLoop.from_ring(ccw_square, 0.0)
        outer = offset_edge_loop(loop, ccw_square, -1.0, 0.0)
        assert_points_close(outer.ring(), ring_of((-1, -1), (11, -1), (11, 11), (-1, 11)))

    def test_non_convex_inset(self, l_shape):
        big = [Point2D(p.x * 10, p.y * 10) for p in l_shape]
        inner = offset_edge_loop(EdgeLoop.from_ring(big, 0.0), big, 1.0, 0.0)
        assert_points_close(inner.ring(), ring_of(
            (1, 1), (19, 1), (19, 9), (9, 9), (9, 19), (1, 19)
        ))

    def test_straight_corner_uses_shared_normal(self):
        footprint = ring_of((0, 0), (5, 0), (10, 0), (10, 10), (0, 10))
        inner = offset_edge_loop(EdgeLoop.from_ring(footprint, 0.0), footprint, 1.0, 0.0)
        assert inner.ring()[1].x == pytest.approx(5.0)
        assert inner.ring()[1].y == pytest.approx(1.0)

    def test_chained_layers_measured_from_base(self, ccw_square):
        """A second offset is measured from the base, keeping the first loop's elevations."""
        first = offset_edge_loop(EdgeLoop.from_ring(ccw_square, 0.0), ccw_square, 1.0, 1.0)
        second = offset_edge_loop(first, ccw_square, 2.0, 1.0)

        assert_points_close(second.ring(), ring_of((2, 2), (8, 2), (8, 8), (2, 8)))
        assert second.elevations() == pytest.approx([2.0] * 4)

    def test_invalid_inputs(self, ccw_square, cw_square):
        loop = EdgeLoop.from_ring(ccw_square, 0.0)
        assert offset_edge_loop(loop, cw_square[:3], 1.0, 0.0) is None
        assert offset_edge_loop(EdgeLoop.from_ring(ccw_square[:2], 0.0), ccw_square[:2], 1.0, 0.0) is None

    def test_zero_length_base_edge(self):
        footprint = ring_of((0, 0), (0, 0), (10, 0), (10, 10), (0, 10))
        loop = EdgeLoop.from_ring(footprint, 0.0)
        assert offset_edge_loop(loop, footprint, 1.0, 0.0) is None


class TestStripTriangles:
    """Test strip indices between two loops."""

    def test_strip_indices(self):
        assert strip_triangles(3) == [
            (0, 1, 4), (0, 4, 3),
            (1, 2, 5), (1, 5, 4),
            (2, 0, 3), (2, 3, 5),
        ]

    def test_covers_both_loops(self):
        triangles = strip_triangles(6)
        assert len(triangles) == 12
        assert {i for tri in triangles for i in tri} == set(range(12))


class TestGenerateRoof:
    """Test the mansard -> attic -> flat cap sequence."""

    @pytest.fixture
    def footprint(self):
        return ring_of((0, 0), (20, 0), (20, 20), (0, 20))

    def test_default_layers(self, footprint):
        result = generate_roof(footprint, 30.0, RoofConfig())
        assert result.is_ok
        roof = result.value

        assert [layer.name for layer in roof.layers] == ["mansard", "attic"]
        mansard, attic = roof.layers
        assert mansard.outer.elevations() == pytest.approx([30.0] * 4)
        assert_points_close(mansard.inner.ring(), ring_of((1.5, 1.5), (18.5, 1.5), (18.5, 18.5), (1.5, 18.5)))
        assert mansard.inner.elevations() == pytest.approx([32.0] * 4)
        assert attic.outer is mansard.inner
        assert_points_close(attic.inner.ring(), ring_of((1, 1), (19, 1), (19, 19), (1, 19)))
        assert attic.inner.elevations() == pytest.approx([33.5] * 4)
        assert len(mansard.strip_triangles) == 8

        assert roof.cap is attic.inner
        assert len(roof.cap_triangles) == 2
        assert triangulation_area(roof.cap.ring(), roof.cap_triangles) == pytest.approx(18.0 * 18.0)

    def test_layers_disabled(self, footprint):
        config = RoofConfig(use_mansard=False, attic_distance=0.0)
        roof = generate_roof(footprint, 12.0, config).value
        assert roof.layers == []
        assert roof.cap.ring() == footprint
        assert roof.cap.elevations() == pytest.approx([12.0] * 4)

    def test_flat_cap_overhang(self, footprint):
        config = RoofConfig(use_mansard=False, use_attic=False, flat_roof_edge_offset=1.0)
        roof = generate_roof(footprint, 12.0, config).value
        assert_points_close(roof.cap.ring(), ring_of((-1, -1), (21, -1), (21, 21), (-1, 21)))
        assert roof.cap.elevations() == pytest.approx([12.0] * 4)

    def test_flat_cap_inset(self, footprint):
        config = RoofConfig(use_attic=False, flat_roof_edge_offset=-2.0)
        roof = generate_roof(footprint, 0.0, config).value
        assert_points_close(roof.cap.ring(), ring_of((2, 2), (18, 2), (18, 18), (2, 18)))
        assert roof.cap.elevations() == pytest.approx([2.0] * 4)

    def test_failed_layer(self):
        footprint = ring_of((0, 0), (0, 0), (10, 0), (10, 10), (0, 10))
        result = generate_roof(footprint, 10.0)
        assert not result.is_ok
        assert result.reason is SkipReason.ROOF_LAYER_FAILED

    def test_too_few_vertices(self):
        result = generate_roof(ring_of((0, 0), (1, 0)), 10.0)
        assert result.reason is SkipReason.INPUT_INVALID
