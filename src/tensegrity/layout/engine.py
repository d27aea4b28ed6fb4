"""Force-directed layout for a live word network.

Per frame, each free node accumulates:
- floating oscillation (phase-offset harmonics)
- pointer drift (a fraction of the smoothed pointer velocity)
- collision repulsion against overlapping word boxes
- edge springs toward a strength-dependent rest length
- an anchor return force toward base_position
- boundary containment toward the visible drawing area

then integrates: velocity += force, velocity *= damping, position += velocity,
followed by a hard clamp to bounds. Oscillation, springs and anchor return
all scale with a speed multiplier that ramps 0.2 -> 1.0 with reveal progress.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from tensegrity.config import Settings, settings
from tensegrity.layout.glyphs import GlyphMetrics
from tensegrity.models import Edge, Network, Node, Vec2

logger = logging.getLogger(__name__)

# (frequency multiplier x, phase multiplier x, frequency multiplier y,
#  phase multiplier y, weight) per harmonic
HARMONICS: tuple[tuple[float, float, float, float, float], ...] = (
    (1.0, 1.0, 1.0, 1.0, 1.0),
    (1.5, 1.3, 1.3, 1.5, 0.6),
    (2.2, 0.8, 1.8, 0.9, 0.4),
    (3.1, 1.1, 2.7, 1.2, 0.3),
)


@dataclass
class Bounds:
    """World-space rectangle a node's center must stay inside."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def clamp(self, point: Vec2) -> None:
        point.x = max(self.min_x, min(self.max_x, point.x))
        point.y = max(self.min_y, min(self.max_y, point.y))


BoundsProvider = Callable[[Node], Bounds]


@dataclass
class DragState:
    """A node held by the pointer."""

    node_id: int
    grab_offset: Vec2  # node position - world pointer at grab time
    last_delta: Vec2 = field(default_factory=Vec2)


def speed_multiplier(reveal_progress: float) -> float:
    """Physics speed ramp: 20% at the start of a reveal, 100% when done."""
    reveal = max(0.0, min(1.0, reveal_progress))
    return 0.2 + reveal * 0.8


class LayoutEngine:
    """Integrates the multi-force physics of a Network one frame at a time."""

    def __init__(
        self,
        config: Settings | None = None,
        glyphs: GlyphMetrics | None = None,
    ) -> None:
        self.config = config or settings
        self.glyphs = glyphs or GlyphMetrics(self.config)

    def floating_force(self, node_id: int, time: float, amplitude: float) -> Vec2:
        """Sum of the oscillation harmonics for one node."""
        phase_x = node_id * 0.5
        phase_y = node_id * 0.7 + math.pi / 3
        fx = 0.0
        fy = 0.0
        for freq_x, mult_x, freq_y, mult_y, weight in HARMONICS:
            fx += math.sin(time * freq_x + phase_x * mult_x) * amplitude * weight
            fy += math.cos(time * freq_y + phase_y * mult_y) * amplitude * weight

        # Slow drift and circular wander on top of the harmonics
        drift_phase = node_id * 0.3
        fx += math.sin(time * 0.4 + drift_phase) * amplitude * 0.25
        fy += math.cos(time * 0.5 + drift_phase + math.pi / 4) * amplitude * 0.25
        circular_phase = node_id * 0.4
        fx += math.sin(time * 0.3 + circular_phase) * amplitude * 0.2
        fy += math.cos(time * 0.35 + circular_phase) * amplitude * 0.2
        return Vec2(fx, fy)

    def collision_force(self, node: Node, nodes: list[Node]) -> Vec2:
        """Repulsion from every other node whose word box overlaps this one."""
        fx = 0.0
        fy = 0.0
        for other in nodes:
            if other.id == node.id:
                continue
            dx = other.position.x - node.position.x
            dy = other.position.y - node.position.y
            dist = math.hypot(dx, dy)
            min_dist = self.glyphs.min_distance(node, other)
            if 0 < dist < min_dist:
                repulsion = self.config.collision_strength * (min_dist - dist) / dist
                fx -= dx / dist * repulsion
                fy -= dy / dist * repulsion
        return Vec2(fx, fy)

    def rest_length(self, node: Node, other: Node, edge: Edge) -> float:
        """Target separation of an edge's endpoints."""
        return max(
            self.glyphs.min_distance(node, other),
            self.config.edge_rest_length
            + edge.strength * self.config.edge_rest_length_per_strength,
        )

    def spring_force(
        self,
        node: Node,
        edges: list[Edge],
        by_id: dict[int, Node],
        spring: float,
        dragged_id: int | None = None,
    ) -> Vec2:
        """Edge springs pulling/pushing node toward each neighbour's rest length."""
        fx = 0.0
        fy = 0.0
        for edge in edges:
            other = by_id.get(edge.other(node.id))
            if other is None:
                continue
            dx = other.position.x - node.position.x
            dy = other.position.y - node.position.y
            dist = math.hypot(dx, dy)
            if dist <= 0:
                continue

            k = spring
            if dragged_id is not None and (other.id == dragged_id or node.id == dragged_id):
                k *= self.config.drag_spring_multiplier

            force = (dist - self.rest_length(node, other, edge)) * k * edge.strength
            fx += dx / dist * force
            fy += dy / dist * force
        return Vec2(fx, fy)

    def boundary_force(self, node: Node, bounds: Bounds) -> Vec2:
        """Push back toward bounds proportional to the overshoot."""
        strength = self.config.boundary_strength
        fx = 0.0
        fy = 0.0
        if node.position.x > bounds.max_x:
            fx -= (node.position.x - bounds.max_x) * strength
        elif node.position.x < bounds.min_x:
            fx += (bounds.min_x - node.position.x) * strength
        if node.position.y > bounds.max_y:
            fy -= (node.position.y - bounds.max_y) * strength
        elif node.position.y < bounds.min_y:
            fy += (bounds.min_y - node.position.y) * strength
        return Vec2(fx, fy)

    def step(
        self,
        network: Network,
        frame: int,
        reveal_progress: float = 1.0,
        pointer_velocity: Vec2 | None = None,
        dragged_id: int | None = None,
        bounds_for: BoundsProvider | None = None,
    ) -> None:
        """
        Advance every free node by one frame.

        Args:
            network: Network whose nodes are updated in place
            frame: Monotonic frame counter (drives oscillation)
            reveal_progress: 0-1 reveal progress feeding the speed ramp
            pointer_velocity: Smoothed pointer velocity in world units
            dragged_id: Node held by the pointer, excluded from forces
            bounds_for: Visible-area bounds per node; unbounded when None
        """
        if network.is_empty:
            return

        multiplier = speed_multiplier(reveal_progress)
        spring = self.config.spring_strength * multiplier
        damping = self.config.base_damping + (1 - multiplier) * self.config.damping_slack
        return_strength = self.config.return_strength * multiplier
        amplitude = self.config.float_amplitude * multiplier
        time = frame * self.config.float_speed * multiplier
        drift = pointer_velocity or Vec2()

        by_id = {node.id: node for node in network.nodes}
        incident: dict[int, list[Edge]] = {node.id: [] for node in network.nodes}
        for edge in network.edges:
            incident.setdefault(edge.source, []).append(edge)
            incident.setdefault(edge.target, []).append(edge)

        # Nodes update in order, later nodes see earlier nodes' new positions
        for node in network.nodes:
            if node.id == dragged_id:
                continue

            force = self.floating_force(node.id, time, amplitude)
            force.x += drift.x * self.config.pointer_influence
            force.y += drift.y * self.config.pointer_influence

            collision = self.collision_force(node, network.nodes)
            springs = self.spring_force(node, incident[node.id], by_id, spring, dragged_id)
            force.x += collision.x + springs.x
            force.y += collision.y + springs.y

            force.x += (node.base_position.x - node.position.x) * return_strength
            force.y += (node.base_position.y - node.position.y) * return_strength

            bounds = bounds_for(node) if bounds_for is not None else None
            if bounds is not None:
                push = self.boundary_force(node, bounds)
                force.x += push.x
                force.y += push.y

            node.velocity.x = (node.velocity.x + force.x) * damping
            node.velocity.y = (node.velocity.y + force.y) * damping
            node.position.x += node.velocity.x
            node.position.y += node.velocity.y

            if bounds is not None:
                bounds.clamp(node.position)

    # Drag lifecycle

    def begin_drag(self, node: Node, world_pointer: Vec2) -> DragState:
        """Grab a node, remembering where on it the pointer landed."""
        logger.debug(f"Drag start on node {node.id} ({node.word})")
        return DragState(
            node_id=node.id,
            grab_offset=Vec2(
                node.position.x - world_pointer.x,
                node.position.y - world_pointer.y,
            ),
        )

    def drag_to(self, node: Node, drag: DragState, world_pointer: Vec2) -> None:
        """Pin the dragged node under the pointer with zero velocity."""
        target = Vec2(
            world_pointer.x + drag.grab_offset.x,
            world_pointer.y + drag.grab_offset.y,
        )
        drag.last_delta = Vec2(target.x - node.position.x, target.y - node.position.y)
        node.position = target
        node.velocity = Vec2()

    def release(self, node: Node, drag: DragState) -> None:
        """Let go of the node with a fraction of its last movement as velocity."""
        factor = self.config.release_velocity_factor
        node.velocity = Vec2(drag.last_delta.x * factor, drag.last_delta.y * factor)
        logger.debug(f"Drag release on node {node.id}")
