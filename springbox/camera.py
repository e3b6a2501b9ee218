"""A 2D camera measured in world units, with a y axis that points up."""

from __future__ import annotations

import math

from springbox.aabb import AABB
from springbox.vecmath import Vec2


class SceneCamera:
    """Maps between world units, scaled drawing coordinates and window pixels."""

    def __init__(
        self,
        offset: Vec2,
        target: Vec2 = Vec2(),
        rotation: float = 0.0,
        size: float = 5.0,
        ppu: float = 100.0,
    ) -> None:
        self.offset = offset
        self.target = target
        self.rotation = rotation
        self.size = size  # half the number of vertical units shown
        self.ppu = ppu  # pixels per unit
        self.zoom = offset.y / (size * ppu)
        self._depth = 0

    @property
    def active(self) -> bool:
        """Whether the camera transform is in effect."""
        return self._depth > 0

    def begin_mode(self) -> None:
        """Recompute the zoom from the size and start using the transform."""
        self.zoom = self.offset.y / (self.size * self.ppu)
        self._depth += 1

    def end_mode(self) -> None:
        if self._depth == 0:
            raise RuntimeError("end_mode called without a matching begin_mode")
        self._depth -= 1

    def __enter__(self) -> SceneCamera:
        self.begin_mode()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.end_mode()

    def project(self, point: Vec2) -> Vec2:
        """Window pixel position of a drawing coordinate under the camera transform."""
        dx = point.x - self.target.x
        dy = point.y - self.target.y
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        rx = dx * cos_t - dy * sin_t
        ry = dx * sin_t + dy * cos_t
        return Vec2(self.offset.x + rx * self.zoom, self.offset.y - ry * self.zoom)

    def screen_to_world(self, screen: Vec2) -> Vec2:
        """World position under a window pixel; y is flipped."""
        screen_x = screen.x - self.offset.x
        screen_y = screen.y - self.offset.y
        scale = self.zoom * self.ppu
        return Vec2(screen_x / scale + self.target.x, -screen_y / scale + self.target.y)

    def world_to_screen(self, world: Vec2) -> Vec2:
        return Vec2(world.x * self.ppu, world.y * self.ppu)

    def screen_to_world_length(self, screen: float) -> float:
        return screen / self.ppu

    def world_to_screen_length(self, world: float) -> float:
        return world * self.ppu

    def aspect_ratio(self) -> float:
        return self.offset.x / self.offset.y

    def aabb(self) -> AABB:
        """The visible region in world units."""
        return AABB(self.target, Vec2(self.aspect_ratio() * self.size * 2, self.size * 2))