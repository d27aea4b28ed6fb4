"""Physics layout and geometry for word networks."""

from .engine import (
    HARMONICS,
    Bounds,
    BoundsProvider,
    DragState,
    LayoutEngine,
    speed_multiplier,
)
from .glyphs import GlyphMetrics
from .hull import convex_hull, membrane_hull

__all__ = [
    # Engine
    "HARMONICS",
    "Bounds",
    "BoundsProvider",
    "DragState",
    "LayoutEngine",
    "speed_multiplier",
    # Geometry
    "GlyphMetrics",
    "convex_hull",
    "membrane_hull",
]
