"""Per-frame driver tying the network, physics, phases and camera together.

All mutable animation state lives in one NetworkAnimatorState owned by
tick(). A tick runs, in order:
1. language/profile change and chrome metrics
2. pointer velocity smoothing
3. loading watchdog
4. rebuild from pending text (once per distinct text, or whenever a hold
   is waiting for its next network)
5. word selection
6. drag, manual camera input and auto-fit
7. phase advance
8. layout physics (STABLE, or IDLE with a network)
9. hover/auto-highlight and membrane

Text enters through begin_loading()/offer_text(); a token issued by
begin_loading() must match for the text to be accepted, so results of
superseded requests are dropped.
"""

import logging
import math
from dataclasses import dataclass, field

from tensegrity.animation import AnimationStateMachine, AnimatorEvent, EventKind, Phase
from tensegrity.config import Settings, settings
from tensegrity.graph import GraphBuilder, compute_metrics
from tensegrity.layout import DragState, GlyphMetrics, LayoutEngine, membrane_hull
from tensegrity.models import Network, Node, Vec2
from tensegrity.preprocessing import LanguageProfile, get_profile
from tensegrity.viewport import ChromeMetrics, Viewport, ViewportController

logger = logging.getLogger(__name__)

# Phases during which new text waits until the hold completes
DEFERRING_PHASES = frozenset([Phase.COLLAPSING, Phase.MOVING_TO_CENTER])


@dataclass
class PointerState:
    """Pointer input for one frame, in screen pixels."""

    position: Vec2 | None = None
    drag_node_id: int | None = None  # Node the host wants held under the pointer
    pan_delta: Vec2 | None = None
    wheel_delta: float = 0.0
    pinch: tuple[float, float] | None = None  # (current distance, last distance)


@dataclass
class FrameInput:
    """Everything the host supplies for one frame."""

    frame: int
    now: float  # Monotonic wall-clock seconds, only used by the watchdog
    viewport: Viewport
    language: str | None = None
    touch: bool = False
    pointer: PointerState = field(default_factory=PointerState)
    selected_word: str | None = None


@dataclass
class NetworkAnimatorState:
    """The complete animation state; owned by tick()."""

    config: Settings
    language: str
    profile: LanguageProfile
    machine: AnimationStateMachine
    layout: LayoutEngine
    glyphs: GlyphMetrics
    viewport: ViewportController | None = None

    text: str = ""
    network: Network = field(default_factory=Network)
    ghosts: list[Node] = field(default_factory=list)  # Read-only snapshot of the previous network
    needs_rebuild: bool = False
    last_built_text: str | None = None

    loading: bool = False
    loading_started_at: float | None = None
    generation_token: int = 0

    frame: int = 0
    pointer_velocity: Vec2 = field(default_factory=Vec2)  # Smoothed, screen pixels/frame
    last_pointer: Vec2 | None = None
    drag: DragState | None = None

    highlighted_node_id: int | None = None
    auto_highlight_index: int = 0
    auto_highlight_time: int = 0
    membrane: list[Vec2] = field(default_factory=list)

    @property
    def phase(self) -> Phase:
        return self.machine.phase

    @property
    def phase_progress(self) -> float:
        return self.machine.progress

    @property
    def reveal_progress(self) -> float:
        """Speed-ramp input: birth progress while birthing, otherwise the auto-fit reveal."""
        if self.machine.phase == Phase.BIRTH:
            return self.machine.progress * 0.7
        if self.viewport is None:
            return 1.0
        return self.viewport.reveal_progress

    def to_dict(self) -> dict:
        """Renderer-facing snapshot."""
        camera = self.viewport.camera if self.viewport is not None else None
        return {
            "phase": self.machine.phase.value,
            "phase_progress": self.machine.progress,
            "reveal_progress": self.reveal_progress,
            "network": self.network.to_dict(),
            "ghosts": [node.to_dict() for node in self.ghosts],
            "camera": {
                "offset": {"x": camera.offset.x, "y": camera.offset.y},
                "zoom": camera.zoom,
            } if camera is not None else None,
            "highlighted_node_id": self.highlighted_node_id,
            "membrane": [{"x": p.x, "y": p.y} for p in self.membrane],
            "loading": self.loading,
        }


@dataclass
class TickResult:
    """Updated state and the events emitted during the tick."""

    state: NetworkAnimatorState
    events: list[AnimatorEvent] = field(default_factory=list)


def create_state(
    language: str | None = None,
    config: Settings | None = None,
) -> NetworkAnimatorState:
    """Fresh landing state for a language."""
    config = config or settings
    language = language or config.default_language
    glyphs = GlyphMetrics(config)
    return NetworkAnimatorState(
        config=config,
        language=language,
        profile=get_profile(language, config),
        machine=AnimationStateMachine(config),
        layout=LayoutEngine(config, glyphs),
        glyphs=glyphs,
    )


# Text intake


def begin_loading(state: NetworkAnimatorState, now: float) -> int:
    """
    Mark a text request as in flight.

    Args:
        state: Animator state
        now: Monotonic seconds when the request started

    Returns:
        Token that must accompany the resulting text
    """
    state.generation_token += 1
    state.loading = True
    state.loading_started_at = now
    logger.info(f"Loading text (token {state.generation_token})")
    return state.generation_token


def offer_text(state: NetworkAnimatorState, token: int, text: str) -> bool:
    """
    Deliver text for a request started with begin_loading().

    Returns:
        True if accepted; False if the token was superseded
    """
    if token != state.generation_token:
        logger.warning(
            f"Discarding stale text (token {token}, current {state.generation_token})"
        )
        return False

    state.text = text
    state.needs_rebuild = True
    state.loading = False
    state.loading_started_at = None
    return True


def reset(state: NetworkAnimatorState) -> NetworkAnimatorState:
    """Back to the landing state; any in-flight text is discarded."""
    state.generation_token += 1
    state.text = ""
    state.network = Network(language=state.language)
    state.ghosts = []
    state.needs_rebuild = False
    state.last_built_text = None
    state.loading = False
    state.loading_started_at = None
    state.drag = None
    state.highlighted_node_id = None
    state.auto_highlight_index = 0
    state.auto_highlight_time = 0
    state.membrane = []
    state.machine.reset()
    if state.viewport is not None:
        state.viewport.reset_camera()
    logger.info("Animator reset")
    return state


# Hit testing


def pick_node(state: NetworkAnimatorState, screen_point: Vec2) -> Node | None:
    """Closest node within the click radius of a screen point, if any."""
    if state.viewport is None or state.network.is_empty:
        return None

    world = state.viewport.screen_to_world(screen_point)
    closest: Node | None = None
    closest_dist = state.config.click_radius
    for node in state.network.nodes:
        dist = node.position.distance_to(world)
        if dist < closest_dist:
            closest = node
            closest_dist = dist
    return closest


def hovered_node(state: NetworkAnimatorState, screen_point: Vec2) -> Node | None:
    """Closest node whose hover radius (at least the word's half width) covers the point."""
    if state.viewport is None:
        return None

    world = state.viewport.screen_to_world(screen_point)
    closest: Node | None = None
    closest_dist = math.inf
    for node in state.network.nodes:
        dist = node.position.distance_to(world)
        radius = max(
            state.config.hover_radius,
            state.glyphs.text_width(node) / 2 + state.config.hover_text_margin,
        )
        if dist < radius and dist < closest_dist:
            closest = node
            closest_dist = dist
    return closest


# Tick


def tick(state: NetworkAnimatorState, frame_input: FrameInput) -> TickResult:
    """
    Advance the whole animation by one frame.

    Args:
        state: Animator state, updated in place
        frame_input: Host input for this frame

    Returns:
        TickResult with the same state and any emitted events
    """
    events: list[AnimatorEvent] = []
    state.frame = frame_input.frame

    _apply_language(state, frame_input)
    _smooth_pointer(state, frame_input.pointer)

    timeout = _check_watchdog(state, frame_input.now)
    if timeout is not None:
        events.append(timeout)

    if state.needs_rebuild and _can_rebuild(state):
        state.needs_rebuild = False
        if state.text != state.last_built_text or state.machine.awaiting_network:
            _rebuild(state)

    if frame_input.selected_word is not None:
        _select_word(state, frame_input.selected_word)

    _apply_drag(state, frame_input.pointer)
    _apply_camera_input(state, frame_input.pointer)
    state.viewport.update()

    phase_events = state.machine.advance(
        state.network, state.viewport.world_center(), state.frame
    )
    for event in phase_events:
        if event.kind == EventKind.NETWORK_READY and state.ghosts:
            state.ghosts = []
    events.extend(phase_events)

    if state.machine.phase == Phase.STABLE or (
        state.machine.phase == Phase.IDLE and not state.network.is_empty
    ):
        world_velocity = Vec2(
            state.pointer_velocity.x / state.viewport.camera.zoom,
            state.pointer_velocity.y / state.viewport.camera.zoom,
        )
        state.layout.step(
            state.network,
            frame=state.frame,
            reveal_progress=state.reveal_progress,
            pointer_velocity=world_velocity,
            dragged_id=state.drag.node_id if state.drag is not None else None,
            bounds_for=state.viewport.node_bounds,
        )

    _update_highlight(state, frame_input.pointer)
    if state.machine.phase == Phase.STABLE:
        state.membrane = membrane_hull(state.network.nodes, state.config.membrane_padding)
    else:
        state.membrane = []

    return TickResult(state=state, events=events)


def _apply_language(state: NetworkAnimatorState, frame_input: FrameInput) -> None:
    language = frame_input.language
    if language is not None and language != state.language:
        logger.info(f"Language {state.language} -> {language}")
        state.language = language
        state.profile = get_profile(language, state.config)
        if state.text:
            state.last_built_text = None
            state.needs_rebuild = True

    chrome = ChromeMetrics.for_viewport(
        state.profile, frame_input.viewport.width, frame_input.touch, state.config
    )
    if state.viewport is None:
        state.viewport = ViewportController(
            frame_input.viewport, chrome, state.config, state.glyphs
        )
    else:
        state.viewport.resize(frame_input.viewport, chrome)


def _smooth_pointer(state: NetworkAnimatorState, pointer: PointerState) -> None:
    position = pointer.position
    if position is None or state.network.is_empty:
        state.pointer_velocity = Vec2()
        state.last_pointer = position.copy() if position is not None else None
        return

    if state.last_pointer is not None:
        keep = state.config.pointer_smoothing
        state.pointer_velocity = Vec2(
            state.pointer_velocity.x * keep + (position.x - state.last_pointer.x) * (1 - keep),
            state.pointer_velocity.y * keep + (position.y - state.last_pointer.y) * (1 - keep),
        )
    state.last_pointer = position.copy()


def _check_watchdog(state: NetworkAnimatorState, now: float) -> AnimatorEvent | None:
    if not state.loading or state.loading_started_at is None:
        return None
    waited = now - state.loading_started_at
    if waited <= state.config.max_loading_seconds:
        return None

    logger.warning(f"Loading exceeded {state.config.max_loading_seconds}s, using placeholder")
    # Supersede the stuck request so a late result is ignored
    state.generation_token += 1
    state.loading = False
    state.loading_started_at = None
    state.text = state.config.loading_timeout_text
    state.needs_rebuild = True
    state.machine.reset()
    return AnimatorEvent(EventKind.LOADING_TIMEOUT, frame=state.frame)


def _can_rebuild(state: NetworkAnimatorState) -> bool:
    machine = state.machine
    if machine.phase in DEFERRING_PHASES:
        return False
    if machine.phase == Phase.HOLDING and not machine.awaiting_network:
        return False
    return True


def _rebuild(state: NetworkAnimatorState) -> None:
    if state.machine.in_transition and not state.network.is_empty:
        state.ghosts = state.network.snapshot()

    builder = GraphBuilder(state.profile, config=state.config)
    network = builder.build(state.text)
    compute_metrics(network, state.profile)

    state.network = network
    state.last_built_text = state.text
    state.drag = None
    state.highlighted_node_id = None
    state.auto_highlight_index = 0
    state.auto_highlight_time = 0

    state.machine.begin_birth(network)
    state.viewport.begin_auto_fit(network)
    if network.is_empty:
        # No birth will complete, so nothing else clears the ghosts
        state.ghosts = []


def _select_word(state: NetworkAnimatorState, word: str) -> None:
    node = state.network.find_word(word)
    if node is None:
        logger.debug(f"Selected word '{word}' is not in the network")
        return
    if state.machine.select(word, node.position):
        state.drag = None


def _apply_drag(state: NetworkAnimatorState, pointer: PointerState) -> None:
    nodes = {node.id: node for node in state.network.nodes}
    wants = pointer.drag_node_id
    can_drag = (
        state.machine.phase == Phase.STABLE
        and wants is not None
        and wants in nodes
        and pointer.position is not None
    )

    if state.drag is not None and (not can_drag or wants != state.drag.node_id):
        held = nodes.get(state.drag.node_id)
        if held is not None:
            state.layout.release(held, state.drag)
        state.drag = None

    if not can_drag:
        return

    world = state.viewport.screen_to_world(pointer.position)
    node = nodes[wants]
    if state.drag is None:
        state.drag = state.layout.begin_drag(node, world)
    state.layout.drag_to(node, state.drag, world)


def _apply_camera_input(state: NetworkAnimatorState, pointer: PointerState) -> None:
    viewport = state.viewport
    if pointer.pan_delta is not None and state.drag is None:
        viewport.pan(pointer.pan_delta.x, pointer.pan_delta.y)
    if pointer.wheel_delta:
        viewport.wheel(pointer.wheel_delta)
    if pointer.pinch is not None:
        viewport.pinch(*pointer.pinch)


def _update_highlight(state: NetworkAnimatorState, pointer: PointerState) -> None:
    nodes = state.network.nodes
    if not nodes:
        state.highlighted_node_id = None
        return

    hovered = None
    if pointer.position is not None and state.drag is None:
        hovered = hovered_node(state, pointer.position)

    if hovered is not None:
        # Manual hover pauses the cycle without resetting it
        state.highlighted_node_id = hovered.id
        return

    state.auto_highlight_time += 1
    if state.auto_highlight_time >= state.config.auto_highlight_frames:
        state.auto_highlight_time = 0
        state.auto_highlight_index = (state.auto_highlight_index + 1) % len(nodes)
    state.auto_highlight_index %= len(nodes)
    state.highlighted_node_id = nodes[state.auto_highlight_index].id
