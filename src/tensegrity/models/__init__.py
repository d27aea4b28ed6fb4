"""Data models for Tensegrity."""

from tensegrity.models.network import ClusterName, Edge, Network, Node, Vec2, Vec3

__all__ = [
    "ClusterName",
    "Edge",
    "Network",
    "Node",
    "Vec2",
    "Vec3",
]
