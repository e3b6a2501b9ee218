import pytest

from springbox.aabb import AABB
from springbox.body import (
    Body,
    BodyType,
    ForceMode,
    explicit_integrator,
    semi_implicit_integrator,
)
from springbox.vecmath import RED, Vec2


class RecordingScene:
    def __init__(self):
        self.circles = []

    def draw_circle(self, world, radius, color):
        self.circles.append((world, radius, color))


def test_default_inverse_mass_is_one():
    assert Body().inv_mass == 1.0


def test_dynamic_inverse_mass():
    assert Body(mass=4.0).inv_mass == pytest.approx(0.25)


@pytest.mark.parametrize("body_type", [BodyType.STATIC, BodyType.KINEMATIC])
def test_non_dynamic_has_zero_inverse_mass(body_type):
    assert Body(mass=3.0, body_type=body_type).inv_mass == 0


def test_zero_mass_has_zero_inverse_mass():
    assert Body(mass=0.0).inv_mass == 0


def test_static_body_does_not_move():
    body = Body(position=Vec2(1.0, 1.0), velocity=Vec2(2.0, 0.0), body_type=BodyType.STATIC)
    body.step(0.5)
    assert body.position == Vec2(1.0, 1.0)
    assert body.velocity == Vec2(2.0, 0.0)


def test_gravity_pulls_dynamic_body_down():
    body = Body()
    body.step(1 / 60)
    assert body.velocity.y < 0
    assert body.position.y < 0
    assert body.velocity.x == 0


def test_zero_gravity_scale_keeps_body_at_rest():
    body = Body(gravity_scale=0.0)
    body.step(1 / 60)
    assert body.position == Vec2(0.0, 0.0)
    assert body.velocity == Vec2(0.0, 0.0)


def test_force_mode_accumulates_twice():
    body = Body()
    f = Vec2(1.0, -2.0)
    body.apply_force(f)
    assert body.force == f * 2
    assert body.velocity == Vec2(0.0, 0.0)


def test_impulse_mode_scales_by_inverse_mass():
    body = Body(mass=2.0)
    f = Vec2(4.0, 6.0)
    body.apply_force(f, ForceMode.IMPULSE)
    assert body.velocity == f * body.inv_mass
    assert body.force == f


def test_velocity_mode_adds_directly():
    body = Body(mass=5.0)
    f = Vec2(-1.0, 3.0)
    body.apply_force(f, ForceMode.VELOCITY)
    assert body.velocity == f
    assert body.force == f


def test_clear_force():
    body = Body()
    body.apply_force(Vec2(3.0, 3.0))
    body.clear_force()
    assert body.force == Vec2(0.0, 0.0)


def test_aabb_is_twice_size():
    body = Body(position=Vec2(2.0, -1.0), size=0.75)
    assert body.aabb() == AABB(Vec2(2.0, -1.0), Vec2(1.5, 1.5))


def test_draw_uses_scene_circle():
    scene = RecordingScene()
    body = Body(position=Vec2(1.0, 2.0), size=0.5, color=RED)
    body.draw(scene)
    assert scene.circles == [(Vec2(1.0, 2.0), 0.5, RED)]


def test_integrators_differ_in_order():
    a = Body(damping=0.0, acceleration=Vec2(1.0, 0.0))
    b = Body(damping=0.0, acceleration=Vec2(1.0, 0.0))
    explicit_integrator(a, 1.0)
    semi_implicit_integrator(b, 1.0)
    assert a.position == Vec2(0.0, 0.0)
    assert b.position == b.velocity
    assert a.velocity == b.velocity


def test_damping_slows_velocity():
    body = Body(velocity=Vec2(10.0, 0.0), damping=1.0)
    semi_implicit_integrator(body, 0.1)
    assert 0 < body.velocity.x < 10.0