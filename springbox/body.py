"""Rigid circular bodies and the integrators that move them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from springbox.aabb import AABB
from springbox.vecmath import WHITE, Color, Vec2


class BodyType(Enum):
    DYNAMIC = 0
    KINEMATIC = 1
    STATIC = 2


class ForceMode(Enum):
    FORCE = 0
    IMPULSE = 1
    VELOCITY = 2


@dataclass(eq=False)
class Body:
    """A circle with mass, moved by accumulated forces."""

    gravity: ClassVar[Vec2] = Vec2(0.0, -9.82)

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    size: float = 1.0
    color: Color = WHITE
    mass: float = 1.0
    body_type: BodyType = BodyType.DYNAMIC
    acceleration: Vec2 = field(default_factory=Vec2)
    force: Vec2 = field(default_factory=Vec2)
    gravity_scale: float = 1.0
    restitution: float = 1.0
    damping: float = 0.1
    inv_mass: float = field(init=False)

    def __post_init__(self) -> None:
        dynamic = self.body_type is BodyType.DYNAMIC
        self.inv_mass = 1 / self.mass if dynamic and self.mass != 0 else 0.0

    def step(self, dt: float) -> None:
        """Apply gravity to the force and integrate; only dynamic bodies move."""
        if self.body_type is not BodyType.DYNAMIC:
            return
        self.force += (Body.gravity * self.gravity_scale) * self.mass
        self.acceleration = self.force * self.inv_mass
        semi_implicit_integrator(self, dt)

    def draw(self, scene: Any) -> None:
        scene.draw_circle(self.position, self.size, self.color)

    def apply_force(self, force: Vec2, mode: ForceMode = ForceMode.FORCE) -> None:
        """Apply a force, impulse or velocity change.

        The raw vector is also added to the force accumulator in every mode.
        """
        if mode is ForceMode.FORCE:
            self.force += force
        elif mode is ForceMode.IMPULSE:
            self.velocity += force * self.inv_mass
        elif mode is ForceMode.VELOCITY:
            self.velocity += force
        self.force += force

    def clear_force(self) -> None:
        self.force = Vec2()

    def aabb(self) -> AABB:
        return AABB(self.position, Vec2(self.size * 2, self.size * 2))


def explicit_integrator(body: Body, timestep: float) -> None:
    """Move with the old velocity, then update and damp the velocity."""
    body.position += body.velocity * timestep
    body.velocity += body.acceleration * timestep
    body.velocity *= 1.0 / (1.0 + body.damping * timestep)


def semi_implicit_integrator(body: Body, timestep: float) -> None:
    """Update and damp the velocity, then move with the new velocity."""
    body.velocity += body.acceleration * timestep
    body.velocity *= 1.0 / (1.0 + body.damping * timestep)
    body.position += body.velocity * timestep