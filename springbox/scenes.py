"""Demonstration scenes: trigonometry, polar curves, particles and springs."""

from __future__ import annotations

import math
from typing import Callable, Optional

from springbox.body import Body, BodyType, ForceMode
from springbox.gui import GuiState, get_body_intersect
from springbox.polar import Polar
from springbox.scene import FrameInput, Scene
from springbox.spring import pull_toward
from springbox.vecmath import (
    BLACK,
    BLUE,
    GREEN,
    PI,
    PURPLE,
    RED,
    WHITE,
    YELLOW,
    Color,
    Vec2,
    color_from_hsv,
    deg_to_rad,
    random_on_unit_circle,
    randomf,
)
from springbox.world import World

_RATE = 0.2
_DOT_RADIUS = 0.25
_FLOOR_Y = -5.0
_LEFT_WALL_X = -9.0
_PARTICLES_PER_CLICK = 100
_LAUNCH_SPEED = 32.0
_DRAG_REST_LENGTH = 0.23
_DRAG_STIFFNESS = 15.0


def _curve(
    steps: int, start: float, sweep: float, radius: Callable[[float], float]
) -> list[Vec2]:
    thetas = (start + (i / steps) * sweep for i in range(steps))
    return [Polar(theta, radius(theta)).to_vector() for theta in thetas]


def archimedean_spiral(steps: int) -> list[Vec2]:
    """Points on r = a + b*theta, a spiral with evenly spaced turns."""
    a, b = 1.0, 0.5
    return _curve(steps, 0.0, 1.4 * PI, lambda theta: a + b * theta)


def cardioid(steps: int, time: float) -> list[Vec2]:
    """Points on r = a*(0.5 + cos(theta)), rotated by time."""
    a = 1.5
    return _curve(steps, time, 2 * PI, lambda theta: a * (0.5 + math.cos(theta)))


def limacon(steps: int, time: float) -> list[Vec2]:
    """Points on r = a + b*cos(theta), rotated by time."""
    a, b = 1.0, 5.0
    return _curve(steps, time, 3 * PI, lambda theta: a + b * math.cos(theta))


def rose_curve(steps: int, time: float) -> list[Vec2]:
    """Points on r = a*sin(b*theta), rotated by time."""
    a, b = 4.0, -2.0
    return _curve(steps, time, 3 * PI, lambda theta: a * math.sin(b * theta))


def fermat_spiral(steps: int) -> list[Vec2]:
    """Points on r = a*sqrt(theta)."""
    a = 1.0
    return _curve(steps, 0.0, 1.4 * PI, lambda theta: a * math.sqrt(theta))


class TrigScene(Scene):
    """A rotating ring of dots with sine and cosine waves beneath it."""

    RADIUS = 3.0
    STEPS = 30

    def initialize(self) -> None:
        super().initialize()

    def update(self, frame: FrameInput) -> None:
        """Nothing changes in response to input."""

    def fixed_update(self) -> None:
        """There is no simulation to advance."""

    def draw(self, time: float) -> None:
        camera = self._require_camera()
        t = time * _RATE
        radius = self.RADIUS
        with camera:
            self.draw_grid(10, 5, WHITE)
            for i in range(self.STEPS):
                theta = t + (i / self.STEPS) * (2 * PI)
                point = Vec2(math.cos(theta) * radius, math.sin(theta) * radius)
                self.draw_circle(point, _DOT_RADIUS, RED)

            x = -9.0
            while x < 9:
                theta = t + (x / 18) * (2 * PI)
                self.draw_circle(Vec2(x, math.cos(theta) * radius), _DOT_RADIUS, PURPLE)
                self.draw_circle(Vec2(x, math.sin(theta) * radius), _DOT_RADIUS, BLUE)
                x += 0.2

            marker = Vec2(math.cos(t) * radius, math.sin(t) * radius)
            self.draw_circle(marker, _DOT_RADIUS, YELLOW)

    def draw_gui(self) -> None:
        """Draw overlays as the base scene does; this scene sets no panel."""
        super().draw_gui()


class PolarScene(Scene):
    """A limaçon and a rose curve turning slowly."""

    STEPS = 100

    def initialize(self) -> None:
        super().initialize()

    def update(self, frame: FrameInput) -> None:
        """Nothing changes in response to input."""

    def fixed_update(self) -> None:
        """There is no simulation to advance."""

    def draw(self, time: float) -> None:
        camera = self._require_camera()
        t = time * _RATE
        with camera:
            self.draw_grid(10, 5, WHITE)
            for point in limacon(self.STEPS, t):
                self.draw_circle(point, _DOT_RADIUS, RED)
            for point in rose_curve(self.STEPS, t):
                self.draw_circle(point, _DOT_RADIUS, PURPLE)

    def draw_gui(self) -> None:
        """Draw overlays as the base scene does; this scene sets no panel."""
        super().draw_gui()


class _WorldScene(Scene):
    """A scene with a physics world and a settings panel."""

    def __init__(self, title: str, width: int, height: int, background: Color = BLACK) -> None:
        super().__init__(title, width, height, background)
        self.gui = GuiState()

    def _require_world(self) -> World:
        if self.world is None:
            raise RuntimeError("scene has no world; call initialize first")
        return self.world


class VectorScene(_WorldScene):
    """Clicking bursts a hundred particles that fall and bounce on the floor."""

    def initialize(self) -> None:
        super().initialize()
        self.world = World()

    def _spawn_burst(self, world: World, position: Vec2) -> None:
        for _ in range(_PARTICLES_PER_CLICK):
            body = world.add_particle(
                position, self.gui.size_value, color_from_hsv(randomf(360), 1, 1)
            )
            theta = randomf(0, 360)
            offset = randomf(360)
            angle = (theta + offset) * deg_to_rad(10)
            body.velocity = Vec2(math.cos(angle), math.sin(angle)) * randomf(1, 6)
            body.restitution = self.gui.restitution_value
            body.damping = self.gui.damping_value
            body.mass = self.gui.mass_value

    def update(self, frame: FrameInput) -> None:
        world = self._require_world()
        camera = self._require_camera()

        if frame.key_pressed("space"):
            world.simulate = not world.simulate

        if not self.gui.mouse_over_gui and frame.button_pressed("left"):
            self._spawn_burst(world, camera.screen_to_world(frame.mouse_position))

        for body in world.bodies:
            if body.position.y < _FLOOR_Y:
                body.position = Vec2(body.position.x, _FLOOR_Y)
                body.velocity = Vec2(
                    body.velocity.x, body.velocity.y * -self.gui.restitution_value
                )

        self.gui.handle_mouse(
            frame.mouse_position, frame.button_pressed("left"), frame.button_down("left"), world
        )

    def fixed_update(self) -> None:
        self._require_world().step(self.FIXED_TIME_STEP)

    def draw(self, time: float) -> None:
        camera = self._require_camera()
        world = self._require_world()
        with camera:
            self.draw_grid(10, 5, BLUE)
            world.draw(self)

    def draw_gui(self) -> None:
        self.gui.draw(self.surface, self._require_world())


class SpringScene(_WorldScene):
    """Place bodies with the left button and join them with springs using the right."""

    def __init__(self, title: str, width: int, height: int, background: Color = BLACK) -> None:
        super().__init__(title, width, height, background)
        self.selected_body: Optional[Body] = None
        self.connected_body: Optional[Body] = None
        self._mouse_world = Vec2()

    def initialize(self) -> None:
        super().initialize()
        self.world = World()

    def _place_body(self, world: World, position: Vec2) -> None:
        body = world.create_body(
            self.gui.body_type,
            position,
            self.gui.mass_value,
            self.gui.size_value,
            color_from_hsv(randomf(360), 1, 1),
        )
        body.restitution = self.gui.restitution_value
        body.gravity_scale = self.gui.gravity_scale_value
        body.damping = self.gui.damping_value
        body.apply_force(random_on_unit_circle() * _LAUNCH_SPEED, ForceMode.VELOCITY)

    def _handle_selection(self, frame: FrameInput, world: World, position: Vec2) -> None:
        if frame.button_pressed("right"):
            self.selected_body = get_body_intersect(position, world.bodies)

        selected = self.selected_body
        if selected is None:
            return

        if frame.button_down("right") and frame.key_down("left_ctrl"):
            if selected.body_type is BodyType.DYNAMIC:
                pull_toward(position, selected, _DRAG_REST_LENGTH, _DRAG_STIFFNESS)
        elif frame.button_down("right"):
            self.connected_body = get_body_intersect(position, world.bodies)
        else:
            connected = self.connected_body
            if connected is not None:
                distance = selected.position.distance(connected.position)
                world.create_spring(
                    selected, connected, distance, self.gui.stiffness_value, self.gui.damping_value
                )
            self.selected_body = None
            self.connected_body = None

    def update(self, frame: FrameInput) -> None:
        world = self._require_world()
        camera = self._require_camera()
        position = camera.screen_to_world(frame.mouse_position)
        self._mouse_world = position

        if frame.key_pressed("space"):
            world.simulate = not world.simulate

        if not self.gui.mouse_over_gui:
            if frame.button_pressed("left") or (
                frame.button_down("left") and frame.key_down("left_ctrl")
            ):
                self._place_body(world, position)
            self._handle_selection(frame, world, position)

        restitution = self.gui.restitution_value
        for body in world.bodies:
            if body.position.y < _FLOOR_Y:
                body.position = Vec2(body.position.x, _FLOOR_Y)
                body.velocity = Vec2(body.velocity.x, body.velocity.y * -restitution)
            if body.position.x < _LEFT_WALL_X:
                body.position = Vec2(_LEFT_WALL_X, body.position.y)
                body.velocity = Vec2(body.velocity.x * -restitution, body.velocity.y)

        self.gui.handle_mouse(
            frame.mouse_position, frame.button_pressed("left"), frame.button_down("left"), world
        )
        self.gui.update(frame.mouse_position, frame.key_pressed("tab"))

    def fixed_update(self) -> None:
        self._require_world().step(self.FIXED_TIME_STEP)

    def draw(self, time: float) -> None:
        camera = self._require_camera()
        world = self._require_world()
        with camera:
            self.draw_grid(10, 5, BLUE)
            world.draw(self)
            selected = self.selected_body
            if selected is not None:
                self.draw_circle_line(selected.position, selected.size, YELLOW, 5)
                connected = self.connected_body
                if connected is not None:
                    self.draw_circle_line(connected.position, connected.size, YELLOW, 5)
                    self.draw_line(selected.position, connected.position, 3, GREEN)
                else:
                    self.draw_line(selected.position, self._mouse_world, 3, RED)

    def draw_gui(self) -> None:
        self.gui.draw(self.surface, self._require_world())