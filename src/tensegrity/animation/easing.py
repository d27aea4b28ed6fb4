"""Easing curves for phase animations. All take progress in [0, 1]."""

import math


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def ease_out_cubic(progress: float) -> float:
    return 1 - (1 - progress) ** 3


def ease_in_out_quad(progress: float) -> float:
    if progress < 0.5:
        return 2 * progress * progress
    return 1 - (-2 * progress + 2) ** 2 / 2


def birth_ease(progress: float) -> float:
    """Cubic ease-out over the first 80%, then a small overshoot that settles at 1."""
    if progress < 0.8:
        return 1 - (1 - progress / 0.8) ** 3
    t = (progress - 0.8) / 0.2
    return 1 + 0.05 * math.sin(t * math.pi) * (1 - t)


def elastic_collapse_ease(progress: float) -> float:
    """Elastic ease-out over the first 60%, then a decaying wobble around 1."""
    if progress < 0.6:
        return 1 - 2 ** (-10 * progress) * math.sin((progress * 10 - 0.75) * (2 * math.pi) / 3)
    t = (progress - 0.6) / 0.4
    return 1 + 0.1 * math.sin(t * math.pi * 2) * (1 - t)
