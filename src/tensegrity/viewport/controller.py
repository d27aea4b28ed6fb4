"""Camera state and auto-fit framing of the network.

Screen/world convention:
    screen = viewport_size / 2 + offset + world * zoom

The drawing surface loses space to UI chrome: a ticker strip at the bottom
(alphabetic languages) or a vertical ticker on the right (CJK). Auto-fit
frames the network's footprint inside the remaining area and animates the
camera there with a cubic ease-out.
"""

import logging
from dataclasses import dataclass, field

from tensegrity.animation.easing import clamp01, ease_out_cubic
from tensegrity.config import Settings, settings
from tensegrity.layout.engine import Bounds
from tensegrity.layout.glyphs import GlyphMetrics
from tensegrity.models import Network, Node, Vec2
from tensegrity.preprocessing.profiles import LanguageProfile

logger = logging.getLogger(__name__)


@dataclass
class Viewport:
    """Drawing surface size in pixels."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must be positive, got {self.width}x{self.height}")


@dataclass
class ChromeMetrics:
    """Screen space reserved by UI chrome."""

    ticker_width: float = 0.0  # Vertical ticker on the right
    ticker_height: float = 0.0  # Horizontal ticker at the bottom

    @classmethod
    def for_viewport(
        cls,
        profile: LanguageProfile,
        width: float,
        touch: bool = False,
        config: Settings | None = None,
    ) -> "ChromeMetrics":
        """Ticker reservation for a language on a given screen."""
        config = config or settings
        compact = touch or width < config.touch_breakpoint
        size = config.ticker_size_touch if compact else config.ticker_size
        if profile.vertical_ticker:
            return cls(ticker_width=size)
        return cls(ticker_height=size)


@dataclass
class Camera:
    """Pan offset (screen pixels) and zoom."""

    offset: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0

    def world_to_screen(self, point: Vec2, viewport: Viewport) -> Vec2:
        return Vec2(
            viewport.width / 2 + self.offset.x + point.x * self.zoom,
            viewport.height / 2 + self.offset.y + point.y * self.zoom,
        )

    def screen_to_world(self, point: Vec2, viewport: Viewport) -> Vec2:
        return Vec2(
            (point.x - viewport.width / 2 - self.offset.x) / self.zoom,
            (point.y - viewport.height / 2 - self.offset.y) / self.zoom,
        )


@dataclass
class FootprintBox:
    """Axis-aligned box around all word footprints in world units."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Vec2:
        return Vec2((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass
class AutoFit:
    """An in-flight camera animation toward a fitted framing."""

    start_zoom: float
    start_offset: Vec2
    target_zoom: float
    target_offset: Vec2
    elapsed: int = 0


class ViewportController:
    """
    Owns the camera and frames networks inside the available drawing area.

    Example:
        >>> controller = ViewportController(Viewport(1280, 720))
        >>> controller.begin_auto_fit(network)
        >>> controller.update()  # once per frame
    """

    def __init__(
        self,
        viewport: Viewport,
        chrome: ChromeMetrics | None = None,
        config: Settings | None = None,
        glyphs: GlyphMetrics | None = None,
    ) -> None:
        self.config = config or settings
        self.viewport = viewport
        self.chrome = chrome or ChromeMetrics()
        self.glyphs = glyphs or GlyphMetrics(self.config)
        self.camera = Camera()
        self.auto_fit: AutoFit | None = None

        if self.config.auto_zoom_duration <= 0:
            raise ValueError(
                f"auto_zoom_duration must be positive, got {self.config.auto_zoom_duration}"
            )

    def resize(self, viewport: Viewport, chrome: ChromeMetrics | None = None) -> None:
        self.viewport = viewport
        if chrome is not None:
            self.chrome = chrome

    # Geometry

    def fit_area(self) -> tuple[float, float, float, float]:
        """Screen rectangle (left, top, width, height) networks are framed into."""
        left = self.config.side_padding
        top = self.config.top_padding
        width = (
            self.viewport.width - self.chrome.ticker_width - 2 * self.config.side_padding
        )
        height = (
            self.viewport.height
            - self.chrome.ticker_height
            - self.config.top_padding
            - self.config.bottom_padding
        )
        return left, top, width, height

    def footprint_box(self, nodes: list[Node]) -> FootprintBox | None:
        """Bounding box of all word boxes around their anchors."""
        if not nodes:
            return None
        min_x = min_y = float("inf")
        max_x = max_y = float("-inf")
        for node in nodes:
            half_w, half_h = self.glyphs.half_extents(node)
            min_x = min(min_x, node.base_position.x - half_w)
            max_x = max(max_x, node.base_position.x + half_w)
            min_y = min(min_y, node.base_position.y - half_h)
            max_y = max(max_y, node.base_position.y + half_h)
        return FootprintBox(min_x, max_x, min_y, max_y)

    def fit_camera(self, box: FootprintBox) -> Camera | None:
        """
        Camera that centers box in the fit area with a safety margin.

        Returns:
            Fitted camera, or None when the box or the area is degenerate
        """
        left, top, width, height = self.fit_area()
        if box.width <= 0 or box.height <= 0 or width <= 0 or height <= 0:
            return None

        zoom = min(width / box.width, height / box.height, 1.0) * self.config.fit_margin
        center = box.center
        offset = Vec2(
            left + width / 2 - self.viewport.width / 2 - center.x * zoom,
            top + height / 2 - self.viewport.height / 2 - center.y * zoom,
        )
        return Camera(offset=offset, zoom=zoom)

    def node_bounds(self, node: Node) -> Bounds:
        """World-space bounds keeping the node's whole word on screen above the chrome."""
        half_w, half_h = self.glyphs.half_extents(node)
        width = self.viewport.width
        height = self.viewport.height
        zoom = self.camera.zoom
        offset = self.camera.offset

        min_x = (0 - width / 2 - offset.x) / zoom + half_w
        max_x = (width - self.chrome.ticker_width - width / 2 - offset.x) / zoom - half_w
        min_y = (self.config.top_padding - height / 2 - offset.y) / zoom + half_h
        max_y = (height - self.chrome.ticker_height - height / 2 - offset.y) / zoom - half_h

        # Words wider than the area are pinned to its middle
        if min_x > max_x:
            min_x = max_x = (min_x + max_x) / 2
        if min_y > max_y:
            min_y = max_y = (min_y + max_y) / 2
        return Bounds(min_x, max_x, min_y, max_y)

    def world_center(self) -> Vec2:
        """World point under the viewport center."""
        return Vec2(-self.camera.offset.x / self.camera.zoom, -self.camera.offset.y / self.camera.zoom)

    def world_to_screen(self, point: Vec2) -> Vec2:
        return self.camera.world_to_screen(point, self.viewport)

    def screen_to_world(self, point: Vec2) -> Vec2:
        return self.camera.screen_to_world(point, self.viewport)

    # Auto-fit animation

    def begin_auto_fit(self, network: Network) -> bool:
        """
        Start animating the camera toward a framing of the network.

        Args:
            network: Network whose anchors are framed

        Returns:
            True if an animation started; False when skipped (fewer than
            2 nodes, degenerate box, or no drawing area left)
        """
        self.auto_fit = None
        if len(network.nodes) < 2:
            logger.debug("Auto-fit skipped: fewer than 2 nodes")
            return False

        box = self.footprint_box(network.nodes)
        target = self.fit_camera(box) if box is not None else None
        if target is None:
            logger.debug("Auto-fit skipped: degenerate footprint or viewport")
            return False

        self.auto_fit = AutoFit(
            start_zoom=self.camera.zoom,
            start_offset=self.camera.offset.copy(),
            target_zoom=target.zoom,
            target_offset=target.offset,
        )
        logger.debug(
            f"Auto-fit to zoom {target.zoom:.3f}, "
            f"offset ({target.offset.x:.1f}, {target.offset.y:.1f})"
        )
        return True

    @property
    def is_fitting(self) -> bool:
        return self.auto_fit is not None

    @property
    def reveal_progress(self) -> float:
        """0 during the first 20% of an auto-fit, rising to 1 at its end."""
        if self.auto_fit is None:
            return 1.0
        progress = self.auto_fit.elapsed / self.config.auto_zoom_duration
        return clamp01((progress - 0.2) / 0.8)

    def update(self) -> None:
        """Advance a running auto-fit by one frame."""
        fit = self.auto_fit
        if fit is None:
            return

        fit.elapsed += 1
        progress = clamp01(fit.elapsed / self.config.auto_zoom_duration)
        eased = ease_out_cubic(progress)

        self.camera.zoom = fit.start_zoom + (fit.target_zoom - fit.start_zoom) * eased
        self.camera.offset = Vec2(
            fit.start_offset.x + (fit.target_offset.x - fit.start_offset.x) * eased,
            fit.start_offset.y + (fit.target_offset.y - fit.start_offset.y) * eased,
        )

        if progress >= 1:
            self.camera.zoom = fit.target_zoom
            self.camera.offset = fit.target_offset.copy()
            self.auto_fit = None

    def cancel_auto_fit(self) -> None:
        if self.auto_fit is not None:
            logger.debug("Auto-fit cancelled by manual camera input")
        self.auto_fit = None

    # Manual camera input

    def pan(self, dx: float, dy: float) -> None:
        """Move the camera by a screen-space delta."""
        self.cancel_auto_fit()
        self.camera.offset = Vec2(self.camera.offset.x + dx, self.camera.offset.y + dy)

    def zoom_by(self, factor: float) -> None:
        """Multiply the zoom, clamped to the configured range."""
        self.cancel_auto_fit()
        zoom = self.camera.zoom * factor
        self.camera.zoom = max(self.config.min_zoom, min(self.config.max_zoom, zoom))

    def wheel(self, delta: float) -> None:
        self.zoom_by(1 + delta * self.config.wheel_zoom_rate)

    def pinch(self, current_distance: float, last_distance: float) -> None:
        if last_distance <= 0:
            return
        self.zoom_by(current_distance / last_distance)

    def reset_camera(self) -> None:
        self.auto_fit = None
        self.camera = Camera()
