"""Unit tests for the animation state machine."""

import math

import pytest

from tensegrity.animation import (
    AnimationStateMachine,
    EventKind,
    Phase,
    birth_ease,
    ease_in_out_quad,
    elastic_collapse_ease,
)
from tensegrity.config import Settings
from tensegrity.models import Network, Vec2

BIRTH = 5
COLLAPSE = 4
CENTER = 3
HOLD = 6


@pytest.fixture
def short_settings() -> Settings:
    """Settings with short phase durations."""
    return Settings(
        birth_duration=BIRTH,
        collapse_duration=COLLAPSE,
        center_move_duration=CENTER,
        hold_duration=HOLD,
        jitter_seed=1,
    )


@pytest.fixture
def machine(short_settings: Settings) -> AnimationStateMachine:
    """State machine with short durations."""
    return AnimationStateMachine(short_settings)


def run(machine: AnimationStateMachine, network: Network, frames: int, start: int = 0) -> list:
    events = []
    for frame in range(start, start + frames):
        events.extend(machine.advance(network, Vec2(), frame))
    return events


def born(machine: AnimationStateMachine, network: Network) -> None:
    machine.begin_birth(network)
    run(machine, network, BIRTH)
    assert machine.phase == Phase.STABLE


class TestEasing:
    """Tests for easing curves."""

    def test_endpoints(self) -> None:
        """Test that curves start at 0 and settle at 1."""
        assert ease_in_out_quad(0.0) == 0.0
        assert ease_in_out_quad(1.0) == 1.0
        assert birth_ease(0.0) == pytest.approx(0.0)
        assert birth_ease(1.0) == pytest.approx(1.0)
        assert elastic_collapse_ease(1.0) == pytest.approx(1.0)

    def test_birth_overshoot(self) -> None:
        """Test the small overshoot after 80%."""
        assert birth_ease(0.9) > 1.0


class TestConstruction:
    """Tests for duration validation."""

    @pytest.mark.parametrize("field", [
        "birth_duration", "collapse_duration", "center_move_duration", "hold_duration",
    ])
    def test_non_positive_duration_rejected(self, field: str) -> None:
        """Test that zero durations are a configuration error."""
        with pytest.raises(ValueError):
            AnimationStateMachine(Settings(**{field: 0}))

    def test_starts_idle(self, machine: AnimationStateMachine) -> None:
        """Test initial phase."""
        assert machine.phase == Phase.IDLE
        assert not machine.drives_positions
        assert machine.progress == 1.0


class TestBirth:
    """Tests for the birth phase."""

    def test_empty_network_goes_idle(self, machine: AnimationStateMachine) -> None:
        """Test that an empty network never births."""
        machine.begin_birth(Network())
        assert machine.phase == Phase.IDLE
        assert run(machine, Network(), 10) == []

    def test_birth_starts_at_origin(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that positions are reset to the origin."""
        machine.begin_birth(sample_network)
        assert machine.phase == Phase.BIRTH
        for node in sample_network.nodes:
            assert (node.position.x, node.position.y) == (0.0, 0.0)

    def test_birth_ends_at_anchor(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that every node lands on its base position."""
        machine.begin_birth(sample_network)
        events = run(machine, sample_network, BIRTH)
        assert [e.kind for e in events] == [EventKind.NETWORK_READY]
        assert machine.phase == Phase.STABLE
        for node in sample_network.nodes:
            assert node.position.x == pytest.approx(node.base_position.x, abs=1e-6)
            assert node.position.y == pytest.approx(node.base_position.y, abs=1e-6)

    def test_progress(self, machine: AnimationStateMachine, sample_network: Network) -> None:
        """Test progress fraction inside a phase."""
        machine.begin_birth(sample_network)
        run(machine, sample_network, 2)
        assert machine.progress == pytest.approx(2 / BIRTH)


class TestSelection:
    """Tests for select()."""

    def test_select_only_from_stable(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that selection is ignored outside STABLE."""
        assert not machine.select("space", Vec2())
        machine.begin_birth(sample_network)
        assert not machine.select("space", Vec2())
        run(machine, sample_network, BIRTH)
        assert machine.select("space", Vec2(200, 0))
        assert machine.phase == Phase.COLLAPSING
        assert not machine.select("latent", Vec2())
        assert machine.selected_word == "space"

    def test_target_is_copied(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that the collapse target does not follow the node."""
        born(machine, sample_network)
        target = sample_network.nodes[1].position
        machine.select("space", target)
        target.x += 1000
        assert machine.collapse_target.x != target.x


class TestTransition:
    """Tests for collapse, move-to-center and holding."""

    def test_phase_timeline(self, machine: AnimationStateMachine, sample_network: Network) -> None:
        """Test phase boundaries and the single HOLD_COMPLETE."""
        born(machine, sample_network)
        machine.select("space", sample_network.nodes[1].position)

        events = run(machine, sample_network, COLLAPSE - 1)
        assert machine.phase == Phase.COLLAPSING
        events += run(machine, sample_network, 1)
        assert machine.phase == Phase.MOVING_TO_CENTER
        assert [e.kind for e in events] == [EventKind.COLLAPSE_COMPLETE]

        run(machine, sample_network, CENTER)
        assert machine.phase == Phase.HOLDING

        events = run(machine, sample_network, HOLD - 1)
        assert events == []
        events = run(machine, sample_network, 1)
        assert len(events) == 1
        assert events[0].kind == EventKind.HOLD_COMPLETE
        assert events[0].word == "space"

        # Holding is extended until the next network, without more events
        assert run(machine, sample_network, 50) == []
        assert machine.phase == Phase.HOLDING
        assert machine.awaiting_network

    def test_move_to_center_ends_at_center(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that the cluster arrives exactly at the center."""
        born(machine, sample_network)
        machine.select("space", sample_network.nodes[1].position)
        center = Vec2(40.0, -30.0)
        for frame in range(COLLAPSE + CENTER):
            machine.advance(sample_network, center, frame)
        assert machine.phase == Phase.HOLDING
        for node in sample_network.nodes:
            assert node.position.x == pytest.approx(center.x)
            assert node.position.y == pytest.approx(center.y)

    def test_collapse_converges(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that nodes get closer to the selected word during collapse."""
        born(machine, sample_network)
        target = sample_network.nodes[1].position.copy()
        before = sum(n.position.distance_to(target) for n in sample_network.nodes)
        machine.select("space", target)
        run(machine, sample_network, COLLAPSE)
        after = sum(n.position.distance_to(target) for n in sample_network.nodes)
        assert after < before

    def test_swarm_stays_near_center(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that holding keeps nodes in a small orbit."""
        born(machine, sample_network)
        machine.select("space", Vec2())
        run(machine, sample_network, COLLAPSE + CENTER + HOLD + 20)
        for node in sample_network.nodes:
            assert math.hypot(node.position.x, node.position.y) < 25

    def test_begin_birth_ends_transition(
        self, machine: AnimationStateMachine, sample_network: Network
    ) -> None:
        """Test that a new network clears the selection."""
        born(machine, sample_network)
        machine.select("space", Vec2())
        run(machine, sample_network, COLLAPSE + CENTER + HOLD)
        machine.begin_birth(sample_network)
        assert machine.phase == Phase.BIRTH
        assert machine.selected_word is None
        assert not machine.awaiting_network

    def test_reset(self, machine: AnimationStateMachine, sample_network: Network) -> None:
        """Test reset back to IDLE."""
        born(machine, sample_network)
        machine.select("space", Vec2())
        machine.reset()
        assert machine.phase == Phase.IDLE
        assert machine.selected_word is None
        assert not machine.in_transition
