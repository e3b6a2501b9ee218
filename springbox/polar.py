"""Polar coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from springbox.vecmath import Vec2


@dataclass
class Polar:
    """A point given by an angle in radians and a radius."""

    angle: float = 0.0
    radius: float = 0.0

    @classmethod
    def from_vector(cls, v: Vec2) -> Polar:
        return cls(math.atan2(v.y, v.x), math.sqrt(v.x * v.x + v.y * v.y))

    def to_vector(self) -> Vec2:
        return Vec2(math.cos(self.angle) * self.radius, math.sin(self.angle) * self.radius)