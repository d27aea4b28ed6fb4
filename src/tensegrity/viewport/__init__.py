"""Camera and auto-fit framing."""

from .controller import (
    AutoFit,
    Camera,
    ChromeMetrics,
    FootprintBox,
    Viewport,
    ViewportController,
)

__all__ = [
    "AutoFit",
    "Camera",
    "ChromeMetrics",
    "FootprintBox",
    "Viewport",
    "ViewportController",
]
