"""The simulation world: bodies, springs and the fixed-step update."""

from __future__ import annotations

from typing import Any

from springbox.body import Body, BodyType
from springbox.collision import Contact, create_contacts, resolve_contacts, separate_contacts
from springbox.grav import apply_gravitation
from springbox.spring import Spring
from springbox.vecmath import Color, Vec2


class World:
    """Owns the bodies and springs and advances them in time."""

    def __init__(self, gravity: Vec2 = Vec2(0.0, -9.81), pool_size: int = 30) -> None:
        self.gravity = gravity
        self.pool_size = pool_size
        self.gravitation = 0.0
        self.spring_stiffness_multiplier = 1.0
        self.simulate = True
        self.bodies: list[Body] = []
        self.springs: list[Spring] = []
        self.contacts: list[Contact] = []

    @property
    def gravity(self) -> Vec2:
        """The gravity shared by every body."""
        return Body.gravity

    @gravity.setter
    def gravity(self, value: Vec2) -> None:
        Body.gravity = value

    def add_particle(self, position: Vec2, size: float, color: Color) -> Body:
        """Add a dynamic body of unit mass."""
        body = Body(position=position, size=size, color=color)
        self.bodies.append(body)
        return body

    def create_body(
        self, body_type: BodyType, position: Vec2, mass: float, size: float, color: Color
    ) -> Body:
        body = Body(position=position, size=size, color=color, mass=mass, body_type=body_type)
        self.bodies.append(body)
        return body

    def create_spring(
        self, body_a: Body, body_b: Body, rest_length: float, k: float, damping: float = 0.5
    ) -> Spring:
        spring = Spring(body_a, body_b, rest_length, k, damping)
        self.springs.append(spring)
        return spring

    def step(self, timestep: float) -> None:
        """Apply forces, integrate and resolve collisions, unless paused."""
        if not self.simulate:
            return

        if self.gravitation > 0:
            apply_gravitation(self.bodies, self.gravitation)

        for spring in self.springs:
            spring.apply_force(self.spring_stiffness_multiplier)

        for body in self.bodies:
            body.step(timestep)
            body.clear_force()

        self.contacts = create_contacts(self.bodies)
        separate_contacts(self.contacts)
        resolve_contacts(self.contacts)

    def draw(self, scene: Any) -> None:
        for spring in self.springs:
            spring.draw(scene)
        for body in self.bodies:
            body.draw(scene)

    def destroy_all(self) -> None:
        """Remove every body, and the springs and contacts that refer to them."""
        self.bodies.clear()
        self.springs.clear()
        self.contacts.clear()