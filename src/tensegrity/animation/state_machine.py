"""Frame-counted animation phases for a word network.

Phases:
- IDLE: no network (or an empty one)
- BIRTH: nodes fly out from the origin to their anchors
- STABLE: LayoutEngine physics owns positions
- COLLAPSING: nodes converge on a selected word
- MOVING_TO_CENTER: the collapsed cluster travels to the viewport center
- HOLDING: nodes swarm at the center until the next network arrives

While BIRTH, COLLAPSING, MOVING_TO_CENTER or HOLDING is active this module
assigns positions directly and physics is bypassed. Each phase lasts a fixed
number of advance() calls; completing a phase emits at most one event.
"""

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum

from tensegrity.animation.easing import (
    birth_ease,
    clamp01,
    ease_in_out_quad,
    elastic_collapse_ease,
)
from tensegrity.config import Settings, settings
from tensegrity.models import Network, Node, Vec2

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Animation phase of the current network."""

    IDLE = "idle"
    BIRTH = "birth"
    STABLE = "stable"
    COLLAPSING = "collapsing"
    MOVING_TO_CENTER = "moving_to_center"
    HOLDING = "holding"


class EventKind(str, Enum):
    """Discrete notifications for the host."""

    NETWORK_READY = "network_ready"  # Birth finished, network is interactive
    COLLAPSE_COMPLETE = "collapse_complete"
    HOLD_COMPLETE = "hold_complete"  # Sole request for new text
    LOADING_TIMEOUT = "loading_timeout"


@dataclass
class AnimatorEvent:
    """An event emitted during one tick."""

    kind: EventKind
    frame: int = 0
    word: str | None = None  # Selected word for HOLD_COMPLETE


# Phases in which positions are assigned directly
DRIVEN_PHASES = frozenset([
    Phase.BIRTH,
    Phase.COLLAPSING,
    Phase.MOVING_TO_CENTER,
    Phase.HOLDING,
])

# Phases started by a word selection and finished by the next network
TRANSITION_PHASES = frozenset([
    Phase.COLLAPSING,
    Phase.MOVING_TO_CENTER,
    Phase.HOLDING,
])


class AnimationStateMachine:
    """
    Owns the current phase, its frame timer and the per-phase motion.

    Example:
        >>> machine = AnimationStateMachine()
        >>> machine.begin_birth(network)
        >>> events = machine.advance(network, center=Vec2(), frame=1)
    """

    def __init__(
        self,
        config: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or settings
        self.rng = rng or random.Random(self.config.jitter_seed)

        self.durations: dict[Phase, int] = {
            Phase.BIRTH: self.config.birth_duration,
            Phase.COLLAPSING: self.config.collapse_duration,
            Phase.MOVING_TO_CENTER: self.config.center_move_duration,
            Phase.HOLDING: self.config.hold_duration,
        }
        for phase, duration in self.durations.items():
            if duration <= 0:
                raise ValueError(f"Duration of {phase.value} must be positive, got {duration}")

        self.phase = Phase.IDLE
        self.elapsed = 0
        self.selected_word: str | None = None
        self.collapse_target: Vec2 | None = None
        self.awaiting_network = False  # Holding extension after HOLD_COMPLETE
        self._center_start: dict[int, Vec2] = {}

    @property
    def progress(self) -> float:
        """Progress of the current phase in [0, 1]; 1.0 outside timed phases."""
        duration = self.durations.get(self.phase)
        if duration is None:
            return 1.0
        return clamp01(self.elapsed / duration)

    @property
    def drives_positions(self) -> bool:
        return self.phase in DRIVEN_PHASES

    @property
    def in_transition(self) -> bool:
        """A selection is playing out and no new network has been shown yet."""
        return self.phase in TRANSITION_PHASES

    def _enter(self, phase: Phase) -> None:
        logger.info(f"Phase {self.phase.value} -> {phase.value}")
        self.phase = phase
        self.elapsed = 0

    # Commands

    def begin_birth(self, network: Network) -> None:
        """Start the birth animation of a freshly built network."""
        self.selected_word = None
        self.collapse_target = None
        self.awaiting_network = False
        self._center_start = {}

        if network.is_empty:
            self._enter(Phase.IDLE)
            return

        for node in network.nodes:
            node.position = Vec2()
            node.velocity = Vec2()
        self._enter(Phase.BIRTH)

    def select(self, word: str, target: Vec2) -> bool:
        """
        Start collapsing toward a selected word.

        Args:
            word: Selected word (reported back with HOLD_COMPLETE)
            target: Current position of the selected node

        Returns:
            True if the selection was accepted (only from STABLE)
        """
        if self.phase != Phase.STABLE:
            logger.debug(f"Ignoring selection of '{word}' during {self.phase.value}")
            return False

        self.selected_word = word
        self.collapse_target = target.copy()
        self._enter(Phase.COLLAPSING)
        return True

    def reset(self) -> None:
        """Back to IDLE with no selection."""
        self.selected_word = None
        self.collapse_target = None
        self.awaiting_network = False
        self._center_start = {}
        if self.phase != Phase.IDLE:
            self._enter(Phase.IDLE)
        self.elapsed = 0

    # Frame advance

    def advance(self, network: Network, center: Vec2, frame: int) -> list[AnimatorEvent]:
        """
        Advance the active phase by one frame and move the nodes it drives.

        Args:
            network: Current network, positions updated in place
            center: Viewport center in world coordinates
            frame: Monotonic frame counter

        Returns:
            Events emitted by phase completion (empty most frames)
        """
        if not self.drives_positions:
            return []

        if self.phase == Phase.HOLDING and self.awaiting_network:
            self._swarm(network.nodes, center, frame)
            return []

        self.elapsed += 1
        progress = self.progress
        events: list[AnimatorEvent] = []

        if self.phase == Phase.BIRTH:
            self._birth(network.nodes, progress)
            if self.elapsed >= self.durations[Phase.BIRTH]:
                self._enter(Phase.STABLE)
                events.append(AnimatorEvent(EventKind.NETWORK_READY, frame=frame))

        elif self.phase == Phase.COLLAPSING:
            self._collapse(network.nodes, progress)
            if self.elapsed >= self.durations[Phase.COLLAPSING]:
                self._center_start = {node.id: node.position.copy() for node in network.nodes}
                self._enter(Phase.MOVING_TO_CENTER)
                events.append(AnimatorEvent(
                    EventKind.COLLAPSE_COMPLETE, frame=frame, word=self.selected_word
                ))

        elif self.phase == Phase.MOVING_TO_CENTER:
            self._move_to_center(network.nodes, center, progress)
            if self.elapsed >= self.durations[Phase.MOVING_TO_CENTER]:
                self._enter(Phase.HOLDING)

        elif self.phase == Phase.HOLDING:
            self._swarm(network.nodes, center, frame)
            if self.elapsed >= self.durations[Phase.HOLDING]:
                self.awaiting_network = True
                logger.info(f"Hold complete, requesting text for '{self.selected_word}'")
                events.append(AnimatorEvent(
                    EventKind.HOLD_COMPLETE, frame=frame, word=self.selected_word
                ))

        return events

    # Per-phase motion

    def _birth(self, nodes: list[Node], progress: float) -> None:
        """Spiral out from the origin with staggered waves (id mod 5)."""
        eased = birth_ease(progress)
        for node in nodes:
            dx = node.base_position.x
            dy = node.base_position.y

            delay = (node.id % 5) / 5 * 0.3
            node_progress = clamp01((eased - delay) / (1 - delay))

            angle = math.atan2(dy, dx)
            spiral = (1 - node_progress) * 0.4
            spiral_angle = angle + spiral * math.sin(node_progress * math.pi * 3 + node.id * 0.2)

            distance = math.hypot(dx, dy) * node_progress
            distance *= 1 + math.sin(node_progress * math.pi) * 0.1 * (1 - node_progress)

            node.position = Vec2(
                math.cos(spiral_angle) * distance,
                math.sin(spiral_angle) * distance,
            )
            node.velocity = Vec2()

    def _collapse(self, nodes: list[Node], progress: float) -> None:
        """Step every node toward the collapse target with elastic spiral motion."""
        target = self.collapse_target or Vec2()
        eased = elastic_collapse_ease(progress)

        for index, node in enumerate(nodes):
            dx = target.x - node.position.x
            dy = target.y - node.position.y
            dist = math.hypot(dx, dy)

            if dist > 0.1:
                variation = 0.7 + (index % 3) * 0.15
                angle = math.atan2(dy, dx)
                spiral = (1 - eased) * 0.3
                spiral_angle = angle + spiral * math.sin(progress * math.pi * 4 + index * 0.5)

                bounce = 1 + math.sin(progress * math.pi * 3) * 0.2 * (1 - eased)
                speed = (0.2 + (1 - eased) * 0.25) * variation * bounce
                perpendicular = dist * spiral * 0.5 * speed * 0.3

                node.position.x += math.cos(spiral_angle) * speed * dist
                node.position.y += math.sin(spiral_angle) * speed * dist
                node.position.x += math.cos(spiral_angle + math.pi / 2) * perpendicular
                node.position.y += math.sin(spiral_angle + math.pi / 2) * perpendicular
            else:
                jitter = (1 - progress) * 2
                node.position.x = target.x + (self.rng.random() - 0.5) * jitter
                node.position.y = target.y + (self.rng.random() - 0.5) * jitter

            node.velocity.x *= 0.7
            node.velocity.y *= 0.7

    def _move_to_center(self, nodes: list[Node], center: Vec2, progress: float) -> None:
        """Ease from the collapsed point to the center with a fading sideways wobble."""
        eased = ease_in_out_quad(progress)

        for index, node in enumerate(nodes):
            start = self._center_start.get(node.id, node.position)
            dx = center.x - start.x
            dy = center.y - start.y
            dist = math.hypot(dx, dy)

            x = start.x + dx * eased
            y = start.y + dy * eased

            if dist > 0:
                variation = 0.8 + (index % 4) * 0.1
                wobble = (
                    math.sin(progress * math.pi * 3 + index * 0.3)
                    * 0.2 * (1 - eased) * variation * dist
                )
                x += -dy / dist * wobble
                y += dx / dist * wobble

            node.position = Vec2(x, y)
            node.velocity.x *= 0.8
            node.velocity.y *= 0.8

    def _swarm(self, nodes: list[Node], center: Vec2, frame: int) -> None:
        """Small independent orbits around the center."""
        for index, node in enumerate(nodes):
            float_time = frame * 0.02 + index * 0.5
            radius = 8 + (index % 3) * 3
            speed = 0.5 + (index % 2) * 0.3

            float_x = math.cos(float_time * speed) * radius
            float_y = math.sin(float_time * speed * 1.2) * radius
            drift_x = math.sin(float_time * 0.7 + index) * 2
            drift_y = math.cos(float_time * 0.9 + index * 0.7) * 2

            node.position = Vec2(center.x + float_x + drift_x, center.y + float_y + drift_y)
            node.velocity = Vec2()
