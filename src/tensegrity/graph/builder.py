"""Word-similarity graph construction.

Algorithm:
1. Tokenize the text and assign semantic vectors to the unique words
2. Score every unordered pair:
   strength = cosine * 0.7 + proximity * 0.1 + conceptual bonus (0.3)
3. Walk candidates strongest-first, keeping edges above the threshold and
   any edge that gives an unconnected endpoint its first connection
4. Attach every remaining isolated node to its best candidate
5. With a degree cap, re-derive the selection under the cap; connectivity
   still wins over the cap

No randomness: the same text and profile always produce the same edges.
"""

import logging

import numpy as np

from tensegrity.config import Settings, settings
from tensegrity.graph.relations import are_conceptually_related
from tensegrity.graph.vectors import SemanticVectorAssigner, edge_cluster
from tensegrity.models import Edge, Network, Node, Vec3
from tensegrity.preprocessing.profiles import LanguageProfile
from tensegrity.preprocessing.tokenizer import tokenize

logger = logging.getLogger(__name__)


def cosine_similarity(first: Vec3, second: Vec3) -> float:
    """Cosine similarity of two semantic vectors, 0 if either is zero."""
    a = np.array(first.as_list())
    b = np.array(second.as_list())
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def first_occurrence(text: str, word: str, profile: LanguageProfile) -> int:
    """Character index of the first occurrence of word, or -1."""
    if profile.is_cjk:
        return text.find(word)
    return text.lower().find(word.lower())


def text_proximity(index_a: int, index_b: int, falloff: float = 50.0) -> float:
    """Closeness of two first occurrences in the text, 0 if either is absent."""
    if index_a < 0 or index_b < 0:
        return 0.0
    return 1.0 / (1.0 + abs(index_a - index_b) / falloff)


def select_edges(
    candidates: list[Edge],
    node_count: int,
    threshold: float,
    max_degree: int | None = None,
) -> list[Edge]:
    """
    Choose the final edge set from strength-sorted candidates.

    Args:
        candidates: All pair edges, sorted by strength descending
        node_count: Number of nodes (ids are 0..node_count-1)
        threshold: Strength an edge must exceed to be kept on its own merit
        max_degree: Optional soft cap on edges per node

    Returns:
        Selected edges in acceptance order
    """
    if max_degree is None:
        selected = _threshold_pass(candidates, threshold)
    else:
        selected = _capped_pass(candidates, node_count, threshold, max_degree)
    return _attach_isolated(selected, candidates, node_count)


def _threshold_pass(candidates: list[Edge], threshold: float) -> list[Edge]:
    connected: set[int] = set()
    selected: list[Edge] = []
    for edge in candidates:
        if (
            edge.strength > threshold
            or edge.source not in connected
            or edge.target not in connected
        ):
            selected.append(edge)
            connected.add(edge.source)
            connected.add(edge.target)
    return selected


def _capped_pass(
    candidates: list[Edge],
    node_count: int,
    threshold: float,
    max_degree: int,
) -> list[Edge]:
    degree = [0] * node_count
    selected: list[Edge] = []
    for edge in candidates:
        source_degree = degree[edge.source]
        target_degree = degree[edge.target]
        first_connection = source_degree == 0 or target_degree == 0
        under_cap = source_degree < max_degree and target_degree < max_degree
        if first_connection or (edge.strength > threshold and under_cap):
            selected.append(edge)
            degree[edge.source] += 1
            degree[edge.target] += 1
    return selected


def _attach_isolated(
    selected: list[Edge],
    candidates: list[Edge],
    node_count: int,
) -> list[Edge]:
    connected: set[int] = set()
    for edge in selected:
        connected.add(edge.source)
        connected.add(edge.target)

    for node_id in range(node_count):
        if node_id in connected:
            continue
        # Candidates are sorted, so the first touching edge is the strongest
        best = next((edge for edge in candidates if edge.touches(node_id)), None)
        if best is not None:
            selected.append(best)
            connected.add(best.source)
            connected.add(best.target)
            logger.debug(f"Attached isolated node {node_id} with strength {best.strength:.3f}")

    return selected


class GraphBuilder:
    """Builds a Network from raw text for one language profile."""

    def __init__(
        self,
        profile: LanguageProfile,
        assigner: SemanticVectorAssigner | None = None,
        config: Settings | None = None,
    ) -> None:
        self.profile = profile
        self.config = config or settings
        self.assigner = assigner or SemanticVectorAssigner(scale=self.config.layout_scale)

    def build(self, text: str) -> Network:
        """
        Build the network for a text.

        Args:
            text: Raw generated text

        Returns:
            Network with dense node ids; zero nodes for empty/all-stop-word text
        """
        tokens = tokenize(text, self.profile)
        nodes = self.assigner.make_nodes(tokens.unique_words, tokens.frequency)

        candidates = self.candidate_edges(nodes, text)
        edges = select_edges(
            candidates,
            node_count=len(nodes),
            threshold=self.profile.edge_threshold,
            max_degree=self.profile.max_degree,
        )

        logger.info(
            f"Built network ({self.profile.code}): {len(nodes)} nodes, "
            f"{len(edges)} edges from {len(candidates)} candidates"
        )
        return Network(nodes=nodes, edges=edges, text=text, language=self.profile.code)

    def strength(self, node_a: Node, node_b: Node, proximity: float) -> float:
        """Combined edge strength of a node pair."""
        bonus = (
            self.config.conceptual_bonus
            if are_conceptually_related(node_a.word, node_b.word)
            else 0.0
        )
        similarity = cosine_similarity(node_a.semantic_vector, node_b.semantic_vector)
        return (
            similarity * self.config.similarity_weight
            + proximity * self.config.proximity_weight
            + bonus
        )

    def candidate_edges(self, nodes: list[Node], text: str) -> list[Edge]:
        """Score every unordered pair and sort strongest first."""
        occurrences = [first_occurrence(text, node.word, self.profile) for node in nodes]
        candidates: list[Edge] = []

        for i in range(len(nodes)):
            for j in range(i + 1, len(nodes)):
                proximity = text_proximity(
                    occurrences[i], occurrences[j], self.config.proximity_falloff
                )
                candidates.append(
                    Edge(
                        source=i,
                        target=j,
                        strength=self.strength(nodes[i], nodes[j], proximity),
                        cluster=edge_cluster(
                            nodes[i].semantic_vector, nodes[j].semantic_vector
                        ),
                    )
                )

        # Stable sort keeps pair order for equal strengths
        candidates.sort(key=lambda edge: edge.strength, reverse=True)
        return candidates
