"""Unit tests for semantic vectors and conceptual relations."""

import math

import pytest

from tensegrity.graph import (
    SemanticVectorAssigner,
    are_conceptually_related,
    edge_cluster,
    fallback_vector,
    primary_cluster,
)
from tensegrity.graph.lexicon import conceptual_groups_of, synonym_groups_of
from tensegrity.models import ClusterName, Vec3


@pytest.fixture
def assigner() -> SemanticVectorAssigner:
    """Assigner with the default layout scale."""
    return SemanticVectorAssigner(scale=800.0)


class TestSemanticVectorAssigner:
    """Tests for SemanticVectorAssigner."""

    def test_cluster_and_group_contributions(self, assigner: SemanticVectorAssigner) -> None:
        """Test normalization over cluster and group contributions."""
        # language: +1 x (cluster), computational_linguistics (0.4, 0.1, 0.3) at weight 0.5
        vector = assigner.vector_for("language", 0, 1)
        assert math.isclose(vector.x, 1.4 / 1.5)
        assert math.isclose(vector.y, 0.1 / 1.5)
        assert math.isclose(vector.z, 0.3 / 1.5)
        assert primary_cluster(vector) == ClusterName.LANGUAGE

    def test_word_in_several_clusters(self, assigner: SemanticVectorAssigner) -> None:
        """Test that every cluster membership counts."""
        # "computational" is in all three primary clusters and two groups
        vector = assigner.vector_for("computational", 0, 1)
        assert vector.magnitude > 0
        assert all(math.isfinite(c) for c in vector.as_list())

    def test_fallback_for_unknown_words(self, assigner: SemanticVectorAssigner) -> None:
        """Test index-derived placement for unmatched words."""
        vector = assigner.vector_for("zzzz", 0, 4)
        assert math.isclose(vector.x, -0.25)
        assert math.isclose(vector.y, 0.0, abs_tol=1e-12)
        assert math.isclose(vector.z, 0.3)

    def test_fallback_vectors_unique(self) -> None:
        """Test that unmatched words never collide."""
        vectors = [tuple(fallback_vector(i, 7).as_list()) for i in range(7)]
        assert len(set(vectors)) == 7
        assert all(Vec3(*v).magnitude < 1 for v in vectors)

    def test_projection(self, assigner: SemanticVectorAssigner) -> None:
        """Test anchor projection with the latent lean."""
        anchor = assigner.project(Vec3(0.5, 0.0, 0.2))
        assert math.isclose(anchor.x, (0.5 + 0.1) * 800)
        assert math.isclose(anchor.y, 0.1 * 800)

    def test_make_nodes(self, assigner: SemanticVectorAssigner) -> None:
        """Test dense ids, anchors and frequencies."""
        nodes = assigner.make_nodes(["space", "latent"], {"space": 3, "latent": 1})
        assert [n.id for n in nodes] == [0, 1]
        assert nodes[0].frequency == 3
        assert nodes[0].position == nodes[0].base_position
        assert nodes[0].position is not nodes[0].base_position
        assert nodes[0].cluster == ClusterName.SPACE
        assert nodes[1].cluster == ClusterName.LATENT


class TestClusters:
    """Tests for cluster labels."""

    def test_primary_cluster_ties_prefer_x(self) -> None:
        """Test deterministic tie resolution."""
        assert primary_cluster(Vec3(0.5, 0.5, 0.1)) == ClusterName.LANGUAGE

    def test_zero_vector_is_mixed(self) -> None:
        """Test label of the zero vector."""
        assert primary_cluster(Vec3()) == ClusterName.MIXED

    def test_edge_cluster(self) -> None:
        """Test shared dominant axis of an edge."""
        assert edge_cluster(Vec3(0, 1, 0), Vec3(0.1, 0.9, 0)) == ClusterName.SPACE
        assert edge_cluster(Vec3(1, 0, 0), Vec3(0, 1, 0)) == ClusterName.MIXED


class TestConceptualRelations:
    """Tests for are_conceptually_related."""

    def test_same_word(self) -> None:
        """Test direct word match."""
        assert are_conceptually_related("anything", "anything")

    def test_synonym_group(self) -> None:
        """Test shared synonym-group membership."""
        assert "latent" in synonym_groups_of("hidden")
        assert are_conceptually_related("hidden", "implicit")

    def test_shared_conceptual_group(self) -> None:
        """Test shared conceptual group."""
        assert "physics" in conceptual_groups_of("gravity")
        assert are_conceptually_related("gravity", "momentum")

    def test_abstraction_physics_cross_group(self) -> None:
        """Test the abstraction/physics reinforcement."""
        assert are_conceptually_related("notion", "velocity")

    def test_linguistics_probability_cross_group(self) -> None:
        """Test the computational_linguistics/probability reinforcement."""
        assert are_conceptually_related("parser", "bayesian")

    def test_symmetric(self) -> None:
        """Test that relatedness does not depend on argument order."""
        pairs = [("notion", "velocity"), ("parser", "bayesian"), ("banana", "gravity")]
        for a, b in pairs:
            assert are_conceptually_related(a, b) == are_conceptually_related(b, a)

    def test_unrelated(self) -> None:
        """Test words with nothing in common."""
        assert not are_conceptually_related("banana", "gravity")
