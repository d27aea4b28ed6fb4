"""Unit tests for hull geometry."""

import math

from tensegrity.layout import convex_hull, membrane_hull
from tensegrity.models import Network, Vec2


def as_tuples(points: list[Vec2]) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


class TestConvexHull:
    """Tests for convex_hull."""

    def test_square_with_interior_point(self) -> None:
        """Test that interior points are dropped, order counter-clockwise."""
        points = [Vec2(0, 0), Vec2(10, 0), Vec2(10, 10), Vec2(0, 10), Vec2(5, 5)]
        assert as_tuples(convex_hull(points)) == [(0, 0), (10, 0), (10, 10), (0, 10)]

    def test_collinear_points_dropped(self) -> None:
        """Test that points on a hull edge are not vertices."""
        points = [Vec2(0, 0), Vec2(5, 0), Vec2(10, 0), Vec2(5, 8)]
        assert as_tuples(convex_hull(points)) == [(0, 0), (10, 0), (5, 8)]

    def test_fewer_than_three(self) -> None:
        """Test that tiny inputs are returned as copies."""
        points = [Vec2(1, 2), Vec2(3, 4)]
        hull = convex_hull(points)
        assert as_tuples(hull) == [(1, 2), (3, 4)]
        assert hull[0] is not points[0]

    def test_input_untouched(self) -> None:
        """Test that the hull never aliases input points."""
        points = [Vec2(0, 0), Vec2(4, 0), Vec2(0, 4)]
        hull = convex_hull(points)
        hull[0].x = 99
        assert points[0].x == 0


class TestMembraneHull:
    """Tests for membrane_hull."""

    def test_vertices_pushed_outward(self, sample_network: Network) -> None:
        """Test that every vertex moves away from the centroid by the padding."""
        hull = convex_hull([node.position for node in sample_network.nodes])
        membrane = membrane_hull(sample_network.nodes, padding=50.0)
        assert len(membrane) == len(hull) == 3

        cx = sum(p.x for p in hull) / 3
        cy = sum(p.y for p in hull) / 3
        for inner, outer in zip(hull, membrane):
            grown = math.hypot(outer.x - cx, outer.y - cy) - math.hypot(inner.x - cx, inner.y - cy)
            assert math.isclose(grown, 50.0)

    def test_too_few_nodes(self, sample_network: Network) -> None:
        """Test that two nodes give their positions back."""
        membrane = membrane_hull(sample_network.nodes[:2])
        assert as_tuples(membrane) == [(-200, 0), (200, 0)]
