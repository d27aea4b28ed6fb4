"""Unit tests for graph quality metrics."""

import pytest

from tensegrity.config import Settings
from tensegrity.graph import GraphBuilder, compute_metrics
from tensegrity.models import Edge, Network
from tensegrity.preprocessing import LanguageProfile


class TestComputeMetrics:
    """Tests for compute_metrics."""

    def test_structural(self, sample_network: Network, english_profile: LanguageProfile) -> None:
        """Test node, edge and degree counts."""
        report = compute_metrics(sample_network, english_profile)
        assert report.structural.total_nodes == 3
        assert report.structural.total_edges == 2
        assert report.structural.orphaned_nodes == 0
        assert report.structural.avg_degree == pytest.approx(4 / 3)
        assert report.structural.max_degree == 2
        assert report.is_connected

    def test_edge_quality(self, sample_network: Network, english_profile: LanguageProfile) -> None:
        """Test strength statistics and threshold split."""
        report = compute_metrics(sample_network, english_profile)
        quality = report.edge_quality
        assert quality.mean_strength == pytest.approx(0.5)
        assert quality.min_strength == 0.4
        assert quality.max_strength == 0.6
        assert quality.above_threshold == 1
        assert quality.connectivity_edges == 1
        assert quality.edges_by_cluster == {"mixed": 2}

    def test_over_cap(self, sample_network: Network) -> None:
        """Test counting of nodes above the soft degree cap."""
        profile = LanguageProfile(code="ja", max_degree=1)
        report = compute_metrics(sample_network, profile)
        assert report.structural.over_cap_nodes == 1

    def test_orphans(self, sample_network: Network, english_profile: LanguageProfile) -> None:
        """Test that a missing edge shows up as an orphan."""
        sample_network.edges = [Edge(source=0, target=1, strength=0.9)]
        report = compute_metrics(sample_network, english_profile)
        assert report.structural.orphaned_nodes == 1
        assert not report.is_connected

    def test_empty_network(self, english_profile: LanguageProfile) -> None:
        """Test metrics of an empty network."""
        report = compute_metrics(Network(), english_profile)
        assert report.structural.total_nodes == 0
        assert report.edge_quality.mean_strength == 0.0
        assert report.is_connected

    def test_built_network_connected(
        self, english_profile: LanguageProfile, test_settings: Settings, sample_text: str
    ) -> None:
        """Test the report for a built network."""
        network = GraphBuilder(english_profile, config=test_settings).build(sample_text)
        report = compute_metrics(network, english_profile)
        assert report.is_connected
        data = report.to_dict()
        assert data["structural"]["total_nodes"] == len(network.nodes)
        assert sum(data["edge_quality"]["edges_by_cluster"].values()) == len(network.edges)
