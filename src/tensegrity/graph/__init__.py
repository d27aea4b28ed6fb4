"""Word graph construction.

Provides:
- Fixed semantic lookup tables (clusters, conceptual groups, synonyms)
- Semantic vector assignment and anchor projection
- Edge scoring and connectivity-preserving edge selection
- Graph quality metrics
"""

from tensegrity.graph.builder import (
    GraphBuilder,
    cosine_similarity,
    first_occurrence,
    select_edges,
    text_proximity,
)
from tensegrity.graph.metrics import (
    EdgeQualityMetrics,
    GraphQualityReport,
    StructuralMetrics,
    compute_metrics,
)
from tensegrity.graph.relations import are_conceptually_related
from tensegrity.graph.vectors import (
    SemanticVectorAssigner,
    dominant_clusters,
    edge_cluster,
    fallback_vector,
    primary_cluster,
)

__all__ = [
    # Builder
    "GraphBuilder",
    "cosine_similarity",
    "first_occurrence",
    "select_edges",
    "text_proximity",
    # Relations
    "are_conceptually_related",
    # Vectors
    "SemanticVectorAssigner",
    "dominant_clusters",
    "edge_cluster",
    "fallback_vector",
    "primary_cluster",
    # Metrics
    "EdgeQualityMetrics",
    "GraphQualityReport",
    "StructuralMetrics",
    "compute_metrics",
]
