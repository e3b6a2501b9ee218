"""The physics settings panel and picking bodies under the mouse."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Iterable, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from springbox.body import Body, BodyType  # noqa: E402
from springbox.vecmath import Vec2  # noqa: E402
from springbox.world import World  # noqa: E402

Rect = tuple[float, float, float, float]

PANEL_WIDTH = 312
PANEL_HEIGHT = 464
PANEL_BACKGROUND = (245, 245, 245, 255)
BODY_TYPE_NAMES = ("Dynamic", "Kinematic", "Static")

_TEXT = (40, 40, 40, 255)
_BORDER = (130, 130, 130, 255)
_FILL = (151, 232, 255, 255)
_ACTIVE = (2, 117, 152, 255)
_TITLE_HEIGHT = 24
_SLIDER_WIDTH = 120
_SLIDER_HEIGHT = 16


@dataclass(frozen=True)
class _Slider:
    label: str
    anchor: str
    dx: float
    dy: float
    low: float
    high: float
    owner: str  # "gui", "world" or "gravity"
    attr: str = ""


_SLIDERS = (
    _Slider("Mass", "anchor02", 96, 16, 0, 10, "gui", "mass_value"),
    _Slider("Size", "anchor02", 96, 40, 0.1, 10.0, "gui", "size_value"),
    _Slider("Gravity Scale", "anchor02", 96, 64, 0, 10, "gui", "gravity_scale_value"),
    _Slider("Damping", "anchor02", 96, 88, 0, 5, "gui", "damping_value"),
    _Slider("Restitution", "anchor02", 96, 112, 0, 2, "gui", "restitution_value"),
    _Slider("Damping", "anchor03", 96, 24, 0, 10, "gui", "spring_damping_value"),
    _Slider("Stiffness", "anchor03", 96, 48, 0, 20, "gui", "stiffness_value"),
    _Slider("Gravitation", "anchor03", 96, 112, 0, 100, "world", "gravitation"),
    _Slider("Stiffnes X", "anchor03", 96, 160, 0, 100, "world", "spring_stiffness_multiplier"),
    _Slider("Gravity", "anchor04", 96, 40, -20, 20, "gravity"),
)


def _contains(rect: Rect, point: Vec2) -> bool:
    x, y, w, h = rect
    return x <= point.x < x + w and y <= point.y < y + h


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, size)


def get_body_intersect(position: Vec2, bodies: Iterable[Body]) -> Optional[Body]:
    """The first body whose circle holds the point, or None."""
    for body in bodies:
        if position.distance(body.position) <= body.size:
            return body
    return None


@dataclass
class GuiState:
    """Values edited through the physics panel, and its open and locked state."""

    mouse_over_gui: bool = False
    anchor01: Vec2 = Vec2(72, 48)
    anchor02: Vec2 = Vec2(96, 96)
    anchor03: Vec2 = Vec2(96, 288)
    anchor04: Vec2 = Vec2(96, 384)
    physics_window_box_active: bool = True
    mass_value: float = 1.0
    size_value: float = 0.5
    gravity_scale_value: float = 1.0
    damping_value: float = 0.2
    restitution_value: float = 0.5
    body_type_edit_mode: bool = False
    body_type_active: int = 0
    spring_damping_value: float = 0.5
    stiffness_value: float = 15.0
    gravitation_value: float = 0.0
    gravity_value: float = 0.0
    extra: dict = field(default_factory=dict, repr=False)

    @property
    def body_type(self) -> BodyType:
        """The body type chosen in the dropdown."""
        return BodyType(self.body_type_active)

    def panel_rect(self) -> Rect:
        return (self.anchor01.x, self.anchor01.y, PANEL_WIDTH, PANEL_HEIGHT)

    def update(self, mouse_position: Vec2, tab_pressed: bool) -> None:
        """Track whether the mouse is over the open panel; Tab shows or hides it."""
        self.mouse_over_gui = self.physics_window_box_active and _contains(
            self.panel_rect(), mouse_position
        )
        if tab_pressed:
            self.physics_window_box_active = not self.physics_window_box_active

    # Layout

    def _slider_rect(self, slider: _Slider) -> Rect:
        anchor: Vec2 = getattr(self, slider.anchor)
        return (anchor.x + slider.dx, anchor.y + slider.dy, _SLIDER_WIDTH, _SLIDER_HEIGHT)

    def _close_rect(self) -> Rect:
        x, y, w, _ = self.panel_rect()
        return (x + w - 21, y + 3, 18, 18)

    def _simulate_rect(self) -> Rect:
        return (self.anchor01.x + 96, self.anchor01.y + 424, 120, 24)

    def _dropdown_rect(self) -> Rect:
        return (self.anchor02.x + 96, self.anchor02.y + 136, 120, 24)

    def _option_rects(self) -> list[Rect]:
        x, y, w, h = self._dropdown_rect()
        return [(x, y + h * (i + 1), w, h) for i in range(len(BODY_TYPE_NAMES))]

    # Slider values

    def _read(self, slider: _Slider, world: World) -> float:
        if slider.owner == "gui":
            return getattr(self, slider.attr)
        if slider.owner == "world":
            return getattr(world, slider.attr)
        return world.gravity.y

    def _write(self, slider: _Slider, world: World, value: float) -> None:
        if slider.owner == "gui":
            setattr(self, slider.attr, value)
        elif slider.owner == "world":
            setattr(world, slider.attr, value)
        else:
            world.gravity = Vec2(world.gravity.x, value)

    # Interaction

    def handle_mouse(self, mouse_position: Vec2, clicked: bool, held: bool, world: World) -> None:
        """Apply a click or drag at the mouse position to the panel's controls."""
        if not self.physics_window_box_active:
            return

        if self.body_type_edit_mode:
            if clicked:
                for index, rect in enumerate(self._option_rects()):
                    if _contains(rect, mouse_position):
                        self.body_type_active = index
                        break
                self.body_type_edit_mode = False
            return

        if clicked:
            if _contains(self._close_rect(), mouse_position):
                self.physics_window_box_active = False
                return
            if _contains(self._simulate_rect(), mouse_position):
                world.simulate = not world.simulate
                return
            if _contains(self._dropdown_rect(), mouse_position):
                self.body_type_edit_mode = True
                return

        if clicked or held:
            for slider in _SLIDERS:
                rect = self._slider_rect(slider)
                if _contains(rect, mouse_position):
                    x, _, w, _ = rect
                    fraction = min(max((mouse_position.x - x) / w, 0.0), 1.0)
                    self._write(slider, world, slider.low + fraction * (slider.high - slider.low))
                    break

    # Drawing

    def draw(self, surface: pygame.Surface, world: World) -> None:
        """Render the panel, when it is open, onto the surface."""
        if not self.physics_window_box_active:
            return
        font = _font(16)

        def text(message: str, x: float, y: float) -> None:
            surface.blit(font.render(message, True, _TEXT), (x, y))

        x, y, w, h = self.panel_rect()
        pygame.draw.rect(surface, PANEL_BACKGROUND, pygame.Rect(x, y, w, h))
        pygame.draw.rect(surface, _BORDER, pygame.Rect(x, y, w, _TITLE_HEIGHT))
        pygame.draw.rect(surface, _BORDER, pygame.Rect(x, y, w, h), 1)
        text("Physics", x + 8, y + 6)
        cx, cy, cw, ch = self._close_rect()
        pygame.draw.line(surface, PANEL_BACKGROUND, (cx + 4, cy + 4), (cx + cw - 4, cy + ch - 4), 2)
        pygame.draw.line(surface, PANEL_BACKGROUND, (cx + cw - 4, cy + 4), (cx + 4, cy + ch - 4), 2)

        for label, anchor, dy, gw, gh in (
            ("Body", self.anchor02, 0, 256, 184),
            ("Spring", self.anchor03, 8, 256, 72),
            ("World", self.anchor04, 0, 256, 72),
        ):
            pygame.draw.rect(surface, _BORDER, pygame.Rect(anchor.x, anchor.y + dy, gw, gh), 1)
            text(label, anchor.x + 8, anchor.y + dy - 6)

        for slider in _SLIDERS:
            sx, sy, sw, sh = self._slider_rect(slider)
            value = self._read(slider, world)
            fraction = (value - slider.low) / (slider.high - slider.low)
            fraction = min(max(fraction, 0.0), 1.0)
            pygame.draw.rect(surface, _BORDER, pygame.Rect(sx, sy, sw, sh), 1)
            pygame.draw.rect(surface, _FILL, pygame.Rect(sx + 1, sy + 1, (sw - 2) * fraction, sh - 2))
            label = font.render(slider.label, True, _TEXT)
            surface.blit(label, (sx - label.get_width() - 4, sy + 2))
            text(f"{value:0.2f}", sx + sw + 4, sy + 2)

        text("Body Type", self.anchor02.x + 24, self.anchor02.y + 142)

        tx, ty, tw, th = self._simulate_rect()
        colour = _ACTIVE if world.simulate else _BORDER
        pygame.draw.rect(surface, colour, pygame.Rect(tx, ty, tw, th), 0 if world.simulate else 1)
        text("Simulate", tx + 30, ty + 6)

        dx, dy_, dw, dh = self._dropdown_rect()
        pygame.draw.rect(surface, _BORDER, pygame.Rect(dx, dy_, dw, dh), 1)
        text(BODY_TYPE_NAMES[self.body_type_active], dx + 6, dy_ + 6)
        if self.body_type_edit_mode:
            for index, (ox, oy, ow, oh) in enumerate(self._option_rects()):
                chosen = index == self.body_type_active
                pygame.draw.rect(surface, _FILL if chosen else PANEL_BACKGROUND, pygame.Rect(ox, oy, ow, oh))
                pygame.draw.rect(surface, _BORDER, pygame.Rect(ox, oy, ow, oh), 1)
                text(BODY_TYPE_NAMES[index], ox + 6, oy + 6)