"""Semantic vector assignment for network words.

Each word gets a bounded 3D vector:
- x: language cluster
- y: space cluster
- z: latent cluster

Primary cluster membership adds +1 on its axis, each conceptual group adds
its recipe offsets and counts 0.5 toward the normalizer. Words that match
nothing are spread deterministically by their index.
"""

import math

from tensegrity.graph.lexicon import (
    GROUP_RECIPES,
    GROUP_WEIGHT,
    SEMANTIC_CLUSTERS,
    conceptual_groups_of,
)
from tensegrity.models import ClusterName, Node, Vec2, Vec3

_AXIS_OF_CLUSTER = {
    ClusterName.LANGUAGE: 0,
    ClusterName.SPACE: 1,
    ClusterName.LATENT: 2,
}


def fallback_vector(index: int, total: int) -> Vec3:
    """Radial placement for unmatched words, unique per index and bounded."""
    ratio = index / max(total, 1)
    return Vec3(
        x=(ratio - 0.5) * 0.5,
        y=math.sin(ratio * math.pi * 2) * 0.3,
        z=math.cos(ratio * math.pi * 2) * 0.3,
    )


def dominant_clusters(vector: Vec3) -> set[ClusterName]:
    """Axes sharing the greatest absolute component (empty for a zero vector)."""
    components = {
        ClusterName.LANGUAGE: abs(vector.x),
        ClusterName.SPACE: abs(vector.y),
        ClusterName.LATENT: abs(vector.z),
    }
    peak = max(components.values())
    if peak == 0:
        return set()
    return {name for name, value in components.items() if value == peak}


def primary_cluster(vector: Vec3) -> ClusterName:
    """Axis of greatest magnitude; ties resolve in x, y, z order."""
    dominant = dominant_clusters(vector)
    for name in (ClusterName.LANGUAGE, ClusterName.SPACE, ClusterName.LATENT):
        if name in dominant:
            return name
    return ClusterName.MIXED


def edge_cluster(first: Vec3, second: Vec3) -> ClusterName:
    """Cluster both endpoints are dominated by, or MIXED."""
    shared = dominant_clusters(first) & dominant_clusters(second)
    for name in (ClusterName.LANGUAGE, ClusterName.SPACE, ClusterName.LATENT):
        if name in shared:
            return name
    return ClusterName.MIXED


class SemanticVectorAssigner:
    """Maps words to semantic vectors and anchor positions."""

    def __init__(self, scale: float = 800.0) -> None:
        self.scale = scale

    def vector_for(self, word: str, index: int, total: int) -> Vec3:
        """
        Compute the semantic vector of a word.

        Args:
            word: Normalized word
            index: Position of the word among all unique words
            total: Number of unique words (for the fallback spread)

        Returns:
            Normalized Vec3, never the zero vector for total > 0
        """
        components = [0.0, 0.0, 0.0]
        contributions = 0.0

        for cluster, members in SEMANTIC_CLUSTERS.items():
            if word in members:
                components[_AXIS_OF_CLUSTER[cluster]] += 1.0
                contributions += 1.0

        for group in conceptual_groups_of(word):
            dx, dy, dz = GROUP_RECIPES[group]
            components[0] += dx
            components[1] += dy
            components[2] += dz
            contributions += GROUP_WEIGHT

        if contributions > 0:
            return Vec3(
                x=components[0] / contributions,
                y=components[1] / contributions,
                z=components[2] / contributions,
            )
        return fallback_vector(index, total)

    def project(self, vector: Vec3) -> Vec2:
        """Anchor position: latent (z) leans both planar axes."""
        return Vec2(
            x=(vector.x + vector.z * 0.5) * self.scale,
            y=(vector.y + vector.z * 0.5) * self.scale,
        )

    def make_nodes(self, words: list[str], frequency: dict[str, int]) -> list[Node]:
        """Create dense-id nodes positioned at their anchors."""
        nodes: list[Node] = []
        total = len(words)
        for index, word in enumerate(words):
            vector = self.vector_for(word, index, total)
            anchor = self.project(vector)
            nodes.append(
                Node(
                    id=index,
                    word=word,
                    position=anchor.copy(),
                    base_position=anchor,
                    semantic_vector=vector,
                    frequency=frequency.get(word, 0),
                    cluster=primary_cluster(vector),
                )
            )
        return nodes
