"""Damped springs between bodies, and spring pulls toward a fixed point."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from springbox.body import Body
from springbox.vecmath import EPSILON, WHITE, Vec2


@dataclass(eq=False)
class Spring:
    """A damped spring joining two bodies."""

    body_a: Body
    body_b: Body
    rest_length: float
    k: float
    damping: float = 0.5

    def apply_force(self, k_multiplier: float = 1.0) -> None:
        """Push or pull both bodies toward the rest length, with damping."""
        direction = self.body_a.position - self.body_b.position
        length_sqr = direction.length_sqr()
        if length_sqr <= EPSILON:
            return

        length = math.sqrt(length_sqr)
        displacement = length - self.rest_length
        magnitude = -(self.k * k_multiplier) * displacement

        unit = direction / length
        force = unit * magnitude

        relative_velocity = self.body_a.velocity - self.body_b.velocity
        damp_factor = relative_velocity.dot(unit) * self.damping
        force -= unit * damp_factor

        self.body_a.apply_force(force)
        self.body_b.apply_force(-force)

    def draw(self, scene: Any) -> None:
        scene.draw_line(self.body_a.position, self.body_b.position, 3, WHITE)


def _spring_force(position: Vec2, body: Body, rest_length: float, k: float) -> Vec2 | None:
    direction = position - body.position
    length_sqr = direction.length_sqr()
    if length_sqr <= EPSILON:
        return None
    length = math.sqrt(length_sqr)
    displacement = length - rest_length
    return (direction / length) * (-k * displacement)


def pull_toward(position: Vec2, body: Body, rest_length: float, k: float) -> None:
    """Pull a body toward a fixed point as if joined to it by a spring."""
    force = _spring_force(position, body, rest_length, k)
    if force is not None:
        body.apply_force(-force)


def pull_toward_damped(
    position: Vec2, body: Body, rest_length: float, k: float, damping: float
) -> None:
    """Apply the undamped spring force toward a fixed point without negating it.

    The damping value is accepted but does not change the applied force.
    """
    force = _spring_force(position, body, rest_length, k)
    if force is not None:
        body.apply_force(force)