"""Word network model - nodes, edges and the network rebuilt per text."""

import copy
import math
from dataclasses import dataclass, field
from enum import Enum


class ClusterName(str, Enum):
    """Primary semantic cluster of a node or edge."""

    LANGUAGE = "language"  # x axis
    SPACE = "space"  # y axis
    LATENT = "latent"  # z axis
    MIXED = "mixed"


@dataclass
class Vec2:
    """2D point or displacement in world coordinates."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def distance_to(self, other: "Vec2") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass
class Vec3:
    """Semantic vector along the language (x), space (y) and latent (z) axes."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z]


@dataclass
class Node:
    """
    A word placed in the semantic network.

    The id is dense (0..n-1) and stable only within one generation.
    """

    id: int
    word: str
    position: Vec2
    base_position: Vec2  # Anchor derived from the semantic vector projection
    semantic_vector: Vec3
    frequency: int = 0  # Literal occurrences in the source text
    cluster: ClusterName = ClusterName.MIXED
    velocity: Vec2 = field(default_factory=Vec2)

    @property
    def size(self) -> float:
        """Presentation size, strictly increasing with frequency."""
        return 10.0 + self.frequency * 5.0

    def to_dict(self) -> dict:
        """Convert to dictionary for renderers."""
        return {
            "id": self.id,
            "word": self.word,
            "position": {"x": self.position.x, "y": self.position.y},
            "base_position": {"x": self.base_position.x, "y": self.base_position.y},
            "velocity": {"x": self.velocity.x, "y": self.velocity.y},
            "semantic_vector": {
                "x": self.semantic_vector.x,
                "y": self.semantic_vector.y,
                "z": self.semantic_vector.z,
            },
            "frequency": self.frequency,
            "size": self.size,
            "cluster": self.cluster.value,
        }


@dataclass
class Edge:
    """Undirected weighted link between two nodes (source < target at build time)."""

    source: int
    target: int
    strength: float
    cluster: ClusterName = ClusterName.MIXED

    @property
    def key(self) -> tuple[int, int]:
        """Order-independent identity of the node pair."""
        return (min(self.source, self.target), max(self.source, self.target))

    def touches(self, node_id: int) -> bool:
        return self.source == node_id or self.target == node_id

    def other(self, node_id: int) -> int:
        """Return the endpoint opposite to node_id."""
        return self.target if self.source == node_id else self.source

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "target": self.target,
            "strength": self.strength,
            "cluster": self.cluster.value,
        }


@dataclass
class Network:
    """Nodes and edges built from one text. Replaced wholesale, never patched."""

    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    text: str = ""
    language: str = "en"

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def degree(self, node_id: int) -> int:
        return sum(1 for edge in self.edges if edge.touches(node_id))

    def degrees(self) -> dict[int, int]:
        """Degree of every node, including isolated ones."""
        result = {node.id: 0 for node in self.nodes}
        for edge in self.edges:
            result[edge.source] = result.get(edge.source, 0) + 1
            result[edge.target] = result.get(edge.target, 0) + 1
        return result

    def find_word(self, word: str) -> Node | None:
        """First node carrying the given word, if any."""
        for node in self.nodes:
            if node.word == word:
                return node
        return None

    def snapshot(self) -> list[Node]:
        """Detached copy of the nodes, used for read-only ghosts."""
        return copy.deepcopy(self.nodes)

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }
