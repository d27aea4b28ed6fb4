"""Animation phases and easing curves."""

from .easing import (
    birth_ease,
    clamp01,
    ease_in_out_quad,
    ease_out_cubic,
    elastic_collapse_ease,
)
from .state_machine import (
    DRIVEN_PHASES,
    TRANSITION_PHASES,
    AnimationStateMachine,
    AnimatorEvent,
    EventKind,
    Phase,
)

__all__ = [
    # State machine
    "DRIVEN_PHASES",
    "TRANSITION_PHASES",
    "AnimationStateMachine",
    "AnimatorEvent",
    "EventKind",
    "Phase",
    # Easing
    "birth_ease",
    "clamp01",
    "ease_in_out_quad",
    "ease_out_cubic",
    "elastic_collapse_ease",
]
