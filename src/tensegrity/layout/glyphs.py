"""Approximate text footprint of a node's word in world units.

The core never measures real fonts: a word is treated as a box whose width
is font size * 0.6 per character and whose height is the font size.
"""

from tensegrity.config import Settings, settings
from tensegrity.models import Node


class GlyphMetrics:
    """Footprint geometry shared by collision, bounds, auto-fit and hover."""

    def __init__(self, config: Settings | None = None) -> None:
        self.config = config or settings

    def font_size(self, node: Node) -> float:
        return self.config.base_font_size + node.frequency * self.config.font_size_per_frequency

    def text_width(self, node: Node) -> float:
        return self.font_size(node) * self.config.glyph_width_ratio * len(node.word)

    def text_height(self, node: Node) -> float:
        return self.font_size(node)

    def half_extents(self, node: Node) -> tuple[float, float]:
        """Half width and half height of the word box."""
        return self.text_width(node) / 2, self.text_height(node) / 2

    def min_distance(self, first: Node, second: Node) -> float:
        """Center distance below which two words overlap (padding included)."""
        return (
            (self.text_width(first) + self.text_width(second)) / 2
            + self.config.collision_padding
        )
