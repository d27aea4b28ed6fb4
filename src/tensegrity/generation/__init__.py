"""Text generation boundary."""

from tensegrity.generation.coordinator import GenerationCoordinator, TextSource

__all__ = [
    "GenerationCoordinator",
    "TextSource",
]
