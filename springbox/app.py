"""The interactive window: pick a scene and run it with a fixed physics step."""

from __future__ import annotations

import argparse
import os
import time
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from springbox.resource_dir import search_and_set_resource_dir  # noqa: E402
from springbox.scene import FrameInput, Scene  # noqa: E402
from springbox.scenes import PolarScene, SpringScene, TrigScene, VectorScene  # noqa: E402
from springbox.vecmath import Vec2  # noqa: E402

MAX_FRAME_TIME = 0.5
TARGET_FPS = 60
WIDTH = 1280
HEIGHT = 720

SCENES: dict[str, tuple[type[Scene], str]] = {
    "spring": (SpringScene, "Spring Scene"),
    "vector": (VectorScene, "Vector Scene"),
    "trig": (TrigScene, "Trig Scene"),
    "polar": (PolarScene, "Polar Scene"),
}

_KEYS = {pygame.K_SPACE: "space", pygame.K_TAB: "tab", pygame.K_LCTRL: "left_ctrl"}
_BUTTONS = {1: "left", 3: "right"}


def fixed_steps(accumulator: float, frame_time: float, step: float) -> tuple[int, float]:
    """Add a frame's time (capped at half a second) and count whole steps.

    Returns the number of fixed steps to run and the time left over.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    accumulator += min(frame_time, MAX_FRAME_TIME)
    steps = 0
    while accumulator >= step:
        steps += 1
        accumulator -= step
    return steps, accumulator


def _poll_input(frame_time: float) -> Optional[FrameInput]:
    """Gather this frame's input, or None when the window should close."""
    keys_pressed = set()
    mouse_pressed = set()
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return None
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return None
            if event.key in _KEYS:
                keys_pressed.add(_KEYS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in _BUTTONS:
            mouse_pressed.add(_BUTTONS[event.button])

    state = pygame.key.get_pressed()
    keys_down = {name for key, name in _KEYS.items() if state[key]}
    left, _, right = pygame.mouse.get_pressed()[:3]
    mouse_down = {name for name, held in (("left", left), ("right", right)) if held}

    return FrameInput(
        frame_time=frame_time,
        mouse_position=Vec2(*pygame.mouse.get_pos()),
        keys_pressed=frozenset(keys_pressed),
        keys_down=frozenset(keys_down),
        mouse_pressed=frozenset(mouse_pressed | (mouse_down & mouse_pressed)),
        mouse_down=frozenset(mouse_down | mouse_pressed),
    )


def _run(scene: Scene, max_frames: Optional[int]) -> None:
    clock = pygame.time.Clock()
    start = time.perf_counter()
    accumulator = 0.0
    frame_time = 0.0
    frames = 0
    while max_frames is None or frames < max_frames:
        frame = _poll_input(frame_time)
        if frame is None:
            break
        scene.update(frame)
        steps, accumulator = fixed_steps(accumulator, frame_time, Scene.FIXED_TIME_STEP)
        for _ in range(steps):
            scene.fixed_update()
        scene.begin_draw(clock.get_fps())
        scene.draw(time.perf_counter() - start)
        scene.draw_gui()
        scene.end_draw()
        frame_time = clock.tick(TARGET_FPS) / 1000
        frames += 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="springbox", description="2D physics playground")
    parser.add_argument("--scene", choices=sorted(SCENES), default="spring")
    parser.add_argument(
        "--frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        search_and_set_resource_dir("resources")
        scene_class, title = SCENES[args.scene]
        scene = scene_class(title, WIDTH, HEIGHT)
        scene.surface = pygame.display.set_mode((scene.width, scene.height))
        pygame.display.set_caption(scene.title)
        scene.initialize()
        _run(scene, args.frames)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())