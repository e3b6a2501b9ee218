import pytest

from springbox.aabb import AABB
from springbox.vecmath import Vec2


@pytest.fixture
def box():
    return AABB(Vec2(1.0, 2.0), Vec2(4.0, 6.0))


def test_extents_are_half_size(box):
    assert box.extents() * 2 == box.size


def test_max_minus_min_is_size(box):
    assert box.max() - box.min() == box.size


def test_center_is_midpoint(box):
    assert (box.min() + box.max()) * 0.5 == box.center


def test_worked_example(box):
    assert box.min() == Vec2(-1.0, -1.0)
    assert box.max() == Vec2(3.0, 5.0)


def test_zero_size_collapses_to_center():
    b = AABB(Vec2(5.0, -3.0), Vec2(0.0, 0.0))
    assert b.min() == b.center
    assert b.max() == b.center