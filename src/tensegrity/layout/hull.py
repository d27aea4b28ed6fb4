"""Membrane outline around a stable network."""

import math

from tensegrity.models import Node, Vec2


def convex_hull(points: list[Vec2]) -> list[Vec2]:
    """
    Graham scan, counter-clockwise starting from the lowest point.

    Collinear points on an edge of the hull are dropped. Fewer than 3
    points are returned unchanged.
    """
    if len(points) < 3:
        return [p.copy() for p in points]

    start_index = 0
    for i, point in enumerate(points):
        lowest = points[start_index]
        if point.y < lowest.y or (point.y == lowest.y and point.x < lowest.x):
            start_index = i
    start = points[start_index]

    rest = [p for i, p in enumerate(points) if i != start_index]
    rest.sort(key=lambda p: (
        math.atan2(p.y - start.y, p.x - start.x),
        (p.x - start.x) ** 2 + (p.y - start.y) ** 2,
    ))

    hull = [start]
    for point in rest:
        while len(hull) > 1:
            p1, p2 = hull[-2], hull[-1]
            cross = (p2.x - p1.x) * (point.y - p1.y) - (p2.y - p1.y) * (point.x - p1.x)
            if cross <= 0:
                hull.pop()
            else:
                break
        hull.append(point)

    return [p.copy() for p in hull]


def membrane_hull(nodes: list[Node], padding: float = 50.0) -> list[Vec2]:
    """Convex hull of node positions, each vertex pushed outward from the centroid.

    Args:
        nodes: Nodes whose current positions are enclosed
        padding: Outward offset in world units

    Returns:
        Hull vertices; positions unchanged for fewer than 3 nodes
    """
    hull = convex_hull([node.position for node in nodes])
    if len(hull) < 3:
        return hull

    center_x = sum(p.x for p in hull) / len(hull)
    center_y = sum(p.y for p in hull) / len(hull)

    expanded: list[Vec2] = []
    for point in hull:
        dx = point.x - center_x
        dy = point.y - center_y
        dist = math.hypot(dx, dy)
        if dist > 0:
            expanded.append(Vec2(point.x + dx / dist * padding, point.y + dy / dist * padding))
        else:
            expanded.append(point)
    return expanded
