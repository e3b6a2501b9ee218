"""The scene base: a drawing surface, a camera and an optional world."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from springbox.camera import SceneCamera  # noqa: E402
from springbox.vecmath import BLACK, BLUE, Color, Vec2  # noqa: E402
from springbox.world import World  # noqa: E402

if TYPE_CHECKING:
    from springbox.gui import GuiState

_FPS_COLOR: Color = (0, 158, 47, 255)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    pygame.font.init()
    return pygame.font.Font(None, size)


@dataclass(frozen=True)
class FrameInput:
    """Input gathered for one frame.

    Keys are names such as "space", "tab" or "left_ctrl"; mouse buttons are
    "left" and "right".
    """

    frame_time: float = 0.0
    mouse_position: Vec2 = Vec2()
    keys_pressed: frozenset = field(default_factory=frozenset)
    keys_down: frozenset = field(default_factory=frozenset)
    mouse_pressed: frozenset = field(default_factory=frozenset)
    mouse_down: frozenset = field(default_factory=frozenset)

    def key_pressed(self, key: str) -> bool:
        return key in self.keys_pressed

    def key_down(self, key: str) -> bool:
        return key in self.keys_down

    def button_pressed(self, button: str) -> bool:
        return button in self.mouse_pressed

    def button_down(self, button: str) -> bool:
        return button in self.mouse_down


class Scene:
    """A drawable scene; subclasses supply their own update and drawing."""

    FIXED_TIME_STEP = 1 / 60.0

    def __init__(self, title: str, width: int, height: int, background: Color = BLACK) -> None:
        self.title = title
        self.width = width
        self.height = height
        self.background = background
        self.surface = pygame.Surface((width, height))
        self.camera: Optional[SceneCamera] = None
        self.world: Optional[World] = None
        self.gui: Optional[Any] = None

    def _require_camera(self) -> SceneCamera:
        if self.camera is None:
            raise RuntimeError("scene has no camera; call initialize first")
        return self.camera

    def initialize(self) -> None:
        """Create a camera centred on the surface."""
        self.camera = SceneCamera(Vec2(self.width / 2, self.height / 2))

    def update(self, frame: FrameInput) -> None:
        """Bounce bodies off the top and bottom of the visible region."""
        if self.world is None or self.camera is None:
            return
        bounds = self.camera.aabb()
        for body in self.world.bodies:
            box = body.aabb()
            if box.min().y < bounds.min().y:
                overlap = bounds.min().y - box.min().y
            elif box.max().y > bounds.max().y:
                overlap = bounds.max().y - box.max().y
            else:
                continue
            body.position = Vec2(body.position.x, body.position.y + 2 * overlap)
            body.velocity = Vec2(body.velocity.x, body.velocity.y * -body.restitution)

    def fixed_update(self) -> None:
        """Advance the world by one fixed time step."""
        if self.world is not None:
            self.world.step(self.FIXED_TIME_STEP)

    def draw(self, time: float) -> None:
        """Draw the grid and the world under the camera."""
        camera = self._require_camera()
        with camera:
            self.draw_grid(10, 5, BLUE)
            if self.world is not None:
                self.world.draw(self)

    def draw_gui(self) -> None:
        """Draw the settings panel when the scene has one and a world to show."""
        gui: Optional[GuiState] = self.gui
        if gui is not None and self.world is not None:
            gui.draw(self.surface, self.world)

    def begin_draw(self, fps: Optional[float] = None) -> None:
        """Clear to the background and show the frame rate when given."""
        self.surface.fill(self.background)
        if fps is not None:
            label = _font(20).render(f"{round(fps)} FPS", True, _FPS_COLOR)
            self.surface.blit(label, (20, 20))

    def end_draw(self) -> None:
        """Present the frame when the surface is the display."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    # Coordinate helpers

    def _to_pixels(self, world: Vec2) -> tuple[float, float]:
        camera = self._require_camera()
        screen = camera.world_to_screen(world)
        if camera.active:
            screen = camera.project(screen)
        return (screen.x, screen.y)

    def _scale(self, length: float) -> float:
        camera = self._require_camera()
        return length * camera.zoom if camera.active else length

    def _width(self, thickness: float) -> int:
        return max(1, round(self._scale(thickness)))

    # Drawing in world units

    def draw_grid(self, slices: float, thickness: float, color: Color) -> None:
        count = math.floor(2 * slices) + 1
        width = self._width(thickness)
        for n in range(count):
            i = -slices + n
            pygame.draw.line(
                self.surface, color,
                self._to_pixels(Vec2(-slices, i)), self._to_pixels(Vec2(slices, i)), width,
            )
            pygame.draw.line(
                self.surface, color,
                self._to_pixels(Vec2(i, -slices)), self._to_pixels(Vec2(i, slices)), width,
            )

    def draw_text(self, text: str, world: Vec2, font_size: int, color: Color) -> None:
        """Draw upright text with its top-left corner at a world position."""
        label = _font(font_size).render(text, True, color)
        self.surface.blit(label, self._to_pixels(world))

    def draw_circle(self, world: Vec2, radius: float, color: Color) -> None:
        camera = self._require_camera()
        pixels = self._scale(camera.world_to_screen_length(radius))
        pygame.draw.circle(self.surface, color, self._to_pixels(world), pixels)

    def draw_circle_line(self, world: Vec2, radius: float, color: Color, pixels: int = 0) -> None:
        camera = self._require_camera()
        outline = self._scale(camera.world_to_screen_length(radius) + pixels)
        pygame.draw.circle(self.surface, color, self._to_pixels(world), outline, 1)

    def draw_line(self, v1: Vec2, v2: Vec2, thickness: float, color: Color) -> None:
        pygame.draw.line(
            self.surface, color, self._to_pixels(v1), self._to_pixels(v2), self._width(thickness)
        )