"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from tensegrity.animator import NetworkAnimatorState, create_state
from tensegrity.config import Settings, get_test_settings
from tensegrity.generation import TextSource
from tensegrity.models import ClusterName, Edge, Network, Node, Vec2, Vec3
from tensegrity.preprocessing import LanguageProfile, TokenizerRule, get_profile
from tensegrity.viewport import Viewport


SAMPLE_TEXT = (
    "Language unfolds in a latent space where every word is a vector. "
    "The network of meaning stretches across dimensions, and each node "
    "holds tension against its neighbours. Probability distributions shape "
    "the grammar of the corpus while syntax parsing reveals structure."
)


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with a fixed jitter seed."""
    return get_test_settings()


@pytest.fixture
def english_profile(test_settings: Settings) -> LanguageProfile:
    """English profile with the full stop-word table."""
    return get_profile("en", test_settings)


@pytest.fixture
def bare_profile() -> LanguageProfile:
    """Alphabetic profile with no stop words."""
    return LanguageProfile(code="en", rule=TokenizerRule.ALPHABETIC, stop_words=frozenset())


@pytest.fixture
def japanese_profile(test_settings: Settings) -> LanguageProfile:
    """CJK profile (node cap 40, degree cap 8)."""
    return get_profile("ja", test_settings)


@pytest.fixture
def viewport() -> Viewport:
    """Desktop-sized viewport."""
    return Viewport(width=1280, height=720)


@pytest.fixture
def sample_network() -> Network:
    """Three connected nodes around the origin."""
    nodes = [
        Node(
            id=i,
            word=word,
            position=Vec2(x, y),
            base_position=Vec2(x, y),
            semantic_vector=vector,
            frequency=freq,
            cluster=cluster,
        )
        for i, (word, x, y, vector, freq, cluster) in enumerate([
            ("language", -200.0, 0.0, Vec3(1, 0, 0), 1, ClusterName.LANGUAGE),
            ("space", 200.0, 0.0, Vec3(0, 1, 0), 3, ClusterName.SPACE),
            ("latent", 0.0, 300.0, Vec3(0, 0, 1), 2, ClusterName.LATENT),
        ])
    ]
    edges = [
        Edge(source=0, target=1, strength=0.6),
        Edge(source=1, target=2, strength=0.4),
    ]
    return Network(nodes=nodes, edges=edges, text="language space latent")


@pytest.fixture
def animator_state(test_settings: Settings) -> NetworkAnimatorState:
    """Fresh English animator state."""
    return create_state("en", test_settings)


@pytest.fixture
def mock_text_source() -> TextSource:
    """Text source that always returns the sample text."""
    source = MagicMock()
    source.generate = AsyncMock(return_value=SAMPLE_TEXT)
    return source


@pytest.fixture
def sample_text() -> str:
    """A paragraph of generated-style English text."""
    return SAMPLE_TEXT
