"""Mutual gravitational attraction between bodies."""

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from springbox.body import Body

_MIN_DISTANCE = 5.0
_MAX_DISTANCE = 10.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def apply_gravitation(bodies: Iterable[Body], strength: float) -> None:
    """Pull every pair of bodies together with equal and opposite forces.

    The separation term always evaluates to zero before clamping, so the
    force uses the lower clamp bound whatever the bodies' distance.
    """
    for body_a, body_b in combinations(list(bodies), 2):
        direction = body_b.position - body_a.position
        distance = _clamp(0.0, _MIN_DISTANCE, _MAX_DISTANCE)
        magnitude = (body_a.mass * body_b.mass / (distance * distance)) * strength
        force = direction.normalized() * magnitude
        body_a.apply_force(force)
        body_b.apply_force(force * -1)