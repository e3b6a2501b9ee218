"""Two-dimensional vector type, colours and small numeric helpers."""

from __future__ import annotations

import colorsys
import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional

PI = math.pi
EPSILON = 1e-6

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
RED: Color = (230, 41, 55, 255)
GREEN: Color = (0, 228, 48, 255)
BLUE: Color = (0, 121, 241, 255)
PURPLE: Color = (200, 122, 255, 255)
YELLOW: Color = (253, 249, 0, 255)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vec2) -> float:
        return (self - other).length()


def randomf(start: float = 1.0, stop: Optional[float] = None) -> float:
    """Random float in [0, start], or between start and stop in either order."""
    if stop is None:
        return random.random() * start
    low, high = sorted((start, stop))
    return low + random.random() * (high - low)


def deg_to_rad(degrees: float) -> float:
    return degrees * (PI / 180)


def rad_to_deg(radians: float) -> float:
    return radians * (180 / PI)


def random_on_unit_circle() -> Vec2:
    theta = randomf(0, PI * 2)
    return Vec2(math.cos(theta), math.sin(theta))


def color_from_hsv(hue: float, saturation: float, value: float) -> Color:
    """Opaque colour from hue in degrees, saturation and value in [0, 1]."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360, saturation, value)
    return (round(r * 255), round(g * 255), round(b * 255), 255)