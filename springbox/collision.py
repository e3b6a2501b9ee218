"""Contact detection and response between circular bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable

from springbox.body import Body, BodyType, ForceMode
from springbox.vecmath import EPSILON, Vec2, randomf


@dataclass
class Contact:
    """A pair of overlapping bodies."""

    body_a: Body
    body_b: Body
    restitution: float = 0.0
    depth: float = 0.0
    normal: Vec2 = field(default_factory=Vec2)


def intersects(body_a: Body, body_b: Body) -> bool:
    return body_a.position.distance(body_b.position) <= body_a.size + body_b.size


def create_contacts(bodies: Iterable[Body]) -> list[Contact]:
    """Contacts for every overlapping pair in which at least one body is dynamic."""
    contacts = []
    for body_a, body_b in combinations(list(bodies), 2):
        if body_a.body_type is not BodyType.DYNAMIC and body_b.body_type is not BodyType.DYNAMIC:
            continue
        if not intersects(body_a, body_b):
            continue

        direction = body_b.position - body_a.position
        distance_sqr = direction.length_sqr()
        if distance_sqr <= EPSILON:
            direction = Vec2(randomf(-0.05, 0.05), randomf(-0.05, 0.05))
            distance_sqr = direction.length_sqr()

        distance = math.sqrt(distance_sqr)
        radius = body_a.size + body_b.size
        contacts.append(
            Contact(
                body_a=body_a,
                body_b=body_b,
                restitution=(body_a.restitution + body_b.restitution) * 0.5,
                depth=(radius + radius) - distance,
                normal=direction.normalized(),
            )
        )
    return contacts


def separate_contacts(contacts: Iterable[Contact]) -> None:
    """Move each pair apart in proportion to their inverse masses."""
    for contact in contacts:
        total_inverse_mass = contact.body_a.inv_mass + contact.body_b.inv_mass
        if total_inverse_mass == 0:
            continue
        separation = contact.normal * (contact.depth / total_inverse_mass)
        contact.body_a.position += separation * contact.body_a.inv_mass
        contact.body_b.position -= separation * contact.body_b.inv_mass


def resolve_contacts(contacts: Iterable[Contact]) -> None:
    """Exchange impulses between approaching bodies."""
    for contact in contacts:
        relative_velocity = contact.body_b.velocity - contact.body_a.velocity
        normal_velocity = relative_velocity.dot(contact.normal)
        if normal_velocity > 0:
            continue

        total_inverse_mass = contact.body_a.inv_mass + contact.body_b.inv_mass
        if total_inverse_mass == 0:
            continue
        magnitude = -(1 + contact.restitution) * normal_velocity / total_inverse_mass
        impulse = contact.normal * magnitude

        contact.body_a.apply_force(impulse, ForceMode.IMPULSE)
        contact.body_b.apply_force(-impulse, ForceMode.IMPULSE)