"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

from springbox.vecmath import Vec2


@dataclass(frozen=True)
class AABB:
    """A box given by its centre and full size."""

    center: Vec2
    size: Vec2

    def extents(self) -> Vec2:
        return self.size * 0.5

    def min(self) -> Vec2:
        return self.center - self.extents()

    def max(self) -> Vec2:
        return self.center + self.extents()