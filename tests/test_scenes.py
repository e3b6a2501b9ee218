import math
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from springbox.body import BodyType
from springbox.gui import PANEL_BACKGROUND
from springbox.scene import FrameInput
from springbox.scenes import (
    PolarScene,
    SpringScene,
    TrigScene,
    VectorScene,
    archimedean_spiral,
    cardioid,
    fermat_spiral,
    limacon,
    rose_curve,
)
from springbox.vecmath import PURPLE, RED, WHITE, YELLOW, Vec2


def _frame(pos, pressed=(), down=(), keys_down=(), keys_pressed=()):
    return FrameInput(
        mouse_position=pos,
        mouse_pressed=frozenset(pressed),
        mouse_down=frozenset(down),
        keys_down=frozenset(keys_down),
        keys_pressed=frozenset(keys_pressed),
    )


def _pixel(scene, world_point):
    camera = scene.camera
    p = camera.project(camera.world_to_screen(world_point))
    return tuple(scene.surface.get_at((round(p.x), round(p.y))))


# Curves


def test_archimedean_spiral_starts_at_a_and_grows():
    points = archimedean_spiral(100)
    assert len(points) == 100
    assert tuple(points[0]) == pytest.approx((1.0, 0.0))
    lengths = [p.length() for p in points]
    assert all(b > a for a, b in zip(lengths, lengths[1:]))


def test_fermat_spiral_starts_at_origin_and_grows():
    points = fermat_spiral(50)
    assert tuple(points[0]) == pytest.approx((0.0, 0.0))
    lengths = [p.length() for p in points]
    assert all(b >= a for a, b in zip(lengths, lengths[1:]))


@pytest.mark.parametrize("curve", [cardioid, limacon, rose_curve])
def test_rotating_curves_are_periodic_in_time(curve):
    first = curve(12, 0.0)
    later = curve(12, 2 * math.pi)
    assert len(first) == 12
    for a, b in zip(first, later):
        assert tuple(a) == pytest.approx(tuple(b), abs=1e-9)


def test_rose_curve_stays_within_amplitude():
    points = rose_curve(100, 0.7)
    assert tuple(rose_curve(10, 0.0)[0]) == pytest.approx((0.0, 0.0))
    assert all(p.length() <= 4.0 + 1e-9 for p in points)


def test_zero_steps_gives_no_points():
    assert archimedean_spiral(0) == []
    assert limacon(0, 1.0) == []


# Trig and polar scenes


def test_trig_scene_draw_requires_initialize():
    scene = TrigScene("trig", 320, 240)
    with pytest.raises(RuntimeError):
        scene.draw(0.0)


def test_trig_scene_draws_marker_at_start_of_ring():
    scene = TrigScene("trig", 320, 240)
    scene.initialize()
    scene.draw(0.0)
    assert not scene.camera.active
    assert _pixel(scene, Vec2(3, 0)) == YELLOW


def test_polar_scene_draws_limacon_and_rose():
    scene = PolarScene("polar", 320, 240)
    scene.initialize()
    scene.draw(0.0)
    assert _pixel(scene, limacon(100, 0.0)[0]) == RED
    assert _pixel(scene, Vec2(0, 0)) == PURPLE


# Vector scene


def test_vector_scene_click_spawns_burst():
    scene = VectorScene("vector", 1280, 720)
    scene.initialize()
    center = Vec2(640, 360)
    scene.update(_frame(center, pressed={"left"}, down={"left"}))
    bodies = scene.world.bodies
    assert len(bodies) == 100
    target = scene.camera.screen_to_world(center)
    for body in bodies:
        assert tuple(body.position) == pytest.approx(tuple(target))
        assert 1 - 1e-9 <= body.velocity.length() <= 6 + 1e-9
        assert body.mass == scene.gui.mass_value
        assert body.restitution == scene.gui.restitution_value


def test_vector_scene_space_toggles_simulation():
    scene = VectorScene("vector", 1280, 720)
    scene.initialize()
    scene.update(_frame(Vec2(640, 360), keys_pressed={"space"}))
    assert scene.world.simulate is False
    scene.update(_frame(Vec2(640, 360), keys_pressed={"space"}))
    assert scene.world.simulate is True


def test_vector_scene_floor_bounces():
    scene = VectorScene("vector", 1280, 720)
    scene.initialize()
    body = scene.world.add_particle(Vec2(0, -7), 0.5, WHITE)
    body.velocity = Vec2(0, -2)
    scene.update(_frame(Vec2(640, 360)))
    assert body.position.y == -5
    assert body.velocity.y > 0


# Spring scene


def test_spring_scene_left_click_places_launched_body():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    click = Vec2(900, 360)
    scene.update(_frame(click, pressed={"left"}, down={"left"}))
    bodies = scene.world.bodies
    assert len(bodies) == 1
    body = bodies[0]
    assert body.body_type is scene.gui.body_type
    assert tuple(body.position) == pytest.approx(tuple(scene.camera.screen_to_world(click)))
    assert body.velocity.length() == pytest.approx(32.0)


def test_spring_scene_ignores_clicks_over_panel():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    inside = Vec2(100, 100)
    scene.update(_frame(inside))
    assert scene.gui.mouse_over_gui is True
    scene.update(_frame(inside, pressed={"left"}, down={"left"}))
    assert scene.world.bodies == []


def test_spring_scene_right_drag_creates_spring():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    camera = scene.camera
    pa, pb = Vec2(900, 360), Vec2(1100, 360)
    a = scene.world.create_body(BodyType.STATIC, camera.screen_to_world(pa), 1, 0.5, WHITE)
    b = scene.world.create_body(BodyType.STATIC, camera.screen_to_world(pb), 1, 0.5, WHITE)

    scene.update(_frame(pa, pressed={"right"}, down={"right"}))
    assert scene.selected_body is a
    scene.update(_frame(pb, down={"right"}))
    assert scene.connected_body is b
    scene.update(_frame(pb))

    assert len(scene.world.springs) == 1
    spring = scene.world.springs[0]
    assert spring.body_a is a and spring.body_b is b
    assert spring.rest_length == pytest.approx(a.position.distance(b.position))
    assert spring.k == scene.gui.stiffness_value
    assert scene.selected_body is None and scene.connected_body is None


def test_spring_scene_ctrl_drag_pulls_toward_mouse():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    camera = scene.camera
    pa, pc = Vec2(900, 360), Vec2(1100, 200)
    body = scene.world.create_body(BodyType.DYNAMIC, camera.screen_to_world(pa), 1, 0.5, WHITE)

    scene.update(_frame(pa, pressed={"right"}, down={"right"}))
    scene.update(_frame(pc, down={"right"}, keys_down={"left_ctrl"}))

    target = camera.screen_to_world(pc)
    assert body.force.dot(target - body.position) > 0
    assert scene.world.springs == []


def test_spring_scene_walls_clamp_position():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    body = scene.world.create_body(BodyType.DYNAMIC, Vec2(-10, -7), 1, 0.5, WHITE)
    body.velocity = Vec2(-1, -2)
    scene.update(_frame(Vec2(900, 360)))
    assert tuple(body.position) == (-9, -5)
    assert body.velocity.x > 0 and body.velocity.y > 0


def test_spring_scene_fixed_update_moves_bodies():
    scene = SpringScene("spring", 1280, 720)
    scene.initialize()
    body = scene.world.create_body(BodyType.DYNAMIC, Vec2(0, 2), 1, 0.5, WHITE)
    scene.fixed_update()
    assert body.position.y < 2


def test_spring_scene_draw_and_panel():
    scene = SpringScene("spring", 1280, 720)
    with pytest.raises(RuntimeError):
        scene.draw(0.0)
    scene.initialize()
    scene.update(_frame(Vec2(900, 360)))
    scene.draw(0.0)
    scene.draw_gui()
    assert not scene.camera.active
    assert tuple(scene.surface.get_at((75, 300)))[:3] == PANEL_BACKGROUND[:3]