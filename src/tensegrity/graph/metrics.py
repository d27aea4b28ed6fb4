"""Graph quality metrics for monitoring and evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tensegrity.models import Network
from tensegrity.preprocessing.profiles import LanguageProfile

logger = logging.getLogger(__name__)


@dataclass
class StructuralMetrics:
    """Structural metrics for the graph."""

    total_nodes: int = 0
    total_edges: int = 0
    orphaned_nodes: int = 0  # Nodes with no edges
    avg_degree: float = 0.0
    max_degree: int = 0
    over_cap_nodes: int = 0  # Nodes above the profile's soft degree cap


@dataclass
class EdgeQualityMetrics:
    """Quality metrics for edges."""

    mean_strength: float = 0.0
    min_strength: float = 0.0
    max_strength: float = 0.0

    above_threshold: int = 0
    connectivity_edges: int = 0  # Accepted only through a connectivity/cap exception

    edges_by_cluster: dict[str, int] = field(default_factory=dict)
    # language, space, latent, mixed


@dataclass
class GraphQualityReport:
    """Complete graph quality report."""

    structural: StructuralMetrics
    edge_quality: EdgeQualityMetrics

    @property
    def is_connected(self) -> bool:
        """Every node has an edge (trivially true below 2 nodes)."""
        return self.structural.total_nodes < 2 or self.structural.orphaned_nodes == 0

    def to_dict(self) -> dict:
        return {
            "structural": {
                "total_nodes": self.structural.total_nodes,
                "total_edges": self.structural.total_edges,
                "orphaned_nodes": self.structural.orphaned_nodes,
                "avg_degree": self.structural.avg_degree,
                "max_degree": self.structural.max_degree,
                "over_cap_nodes": self.structural.over_cap_nodes,
            },
            "edge_quality": {
                "mean_strength": self.edge_quality.mean_strength,
                "min_strength": self.edge_quality.min_strength,
                "max_strength": self.edge_quality.max_strength,
                "above_threshold": self.edge_quality.above_threshold,
                "connectivity_edges": self.edge_quality.connectivity_edges,
                "edges_by_cluster": dict(self.edge_quality.edges_by_cluster),
            },
        }


def compute_metrics(network: Network, profile: LanguageProfile) -> GraphQualityReport:
    """Compute all quality metrics.

    Args:
        network: A built network
        profile: Profile the network was built with (threshold, degree cap)

    Returns:
        Complete GraphQualityReport
    """
    structural = _compute_structural_metrics(network, profile)
    edge_quality = _compute_edge_quality_metrics(network, profile)

    logger.debug(
        f"Metrics: {structural.total_nodes} nodes, {structural.total_edges} edges, "
        f"{structural.orphaned_nodes} orphaned, avg degree {structural.avg_degree:.2f}"
    )

    return GraphQualityReport(structural=structural, edge_quality=edge_quality)


def _compute_structural_metrics(
    network: Network,
    profile: LanguageProfile,
) -> StructuralMetrics:
    metrics = StructuralMetrics()
    metrics.total_nodes = len(network.nodes)
    metrics.total_edges = len(network.edges)

    degrees = network.degrees()
    if degrees:
        metrics.orphaned_nodes = sum(1 for d in degrees.values() if d == 0)
        metrics.avg_degree = sum(degrees.values()) / len(degrees)
        metrics.max_degree = max(degrees.values())
        if profile.max_degree is not None:
            metrics.over_cap_nodes = sum(
                1 for d in degrees.values() if d > profile.max_degree
            )

    return metrics


def _compute_edge_quality_metrics(
    network: Network,
    profile: LanguageProfile,
) -> EdgeQualityMetrics:
    metrics = EdgeQualityMetrics()
    if not network.edges:
        return metrics

    strengths = [edge.strength for edge in network.edges]
    metrics.mean_strength = sum(strengths) / len(strengths)
    metrics.min_strength = min(strengths)
    metrics.max_strength = max(strengths)

    for edge in network.edges:
        if edge.strength > profile.edge_threshold:
            metrics.above_threshold += 1
        else:
            metrics.connectivity_edges += 1
        cluster = edge.cluster.value
        metrics.edges_by_cluster[cluster] = metrics.edges_by_cluster.get(cluster, 0) + 1

    return metrics
