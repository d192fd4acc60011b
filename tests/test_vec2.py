import pytest

from actorengine.vec2 import Vec2

A = Vec2(1.0, -1.0)
B = Vec2(-0.5, 0.5)


def test_sub_is_antisymmetric():
    forward = A - B
    backward = B - A
    assert forward.x == -backward.x
    assert forward.y == -backward.y


def test_sub_self_is_zero():
    assert A - A == Vec2()


def test_sub_zero_is_identity():
    assert A - Vec2() == A


def test_default_is_zero():
    assert Vec2() == Vec2(0.0, 0.0)


@pytest.mark.parametrize(
    "other, expected",
    [
        (Vec2(1.0, -1.0), True),
        (Vec2(-1.0, -1.0), False),
        (Vec2(1.0, 1.0), False),
        (Vec2(-1.0, 1.0), False),
    ],
)
def test_equality(other, expected):
    assert (Vec2(1.0, -1.0) == other) is expected


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (Vec2(1.0, -1.0), Vec2(1.0, -1.0), False),
        (Vec2(1.0, -1.0), Vec2(-1.0, -1.0), False),
        (Vec2(-1.0, -1.0), Vec2(1.0, -1.0), True),
        (Vec2(1.0, -1.0), Vec2(1.0, 1.0), True),
        (Vec2(1.0, 1.0), Vec2(1.0, -1.0), False),
        (Vec2(1.0, -1.0), Vec2(-1.0, 1.0), False),
        (Vec2(-1.0, 1.0), Vec2(1.0, -1.0), True),
    ],
)
def test_lower_than(left, right, expected):
    assert (left < right) is expected


def test_sorting_is_lexicographic():
    items = [Vec2(1.0, 1.0), Vec2(-1.0, 1.0), Vec2(1.0, -1.0), Vec2(-1.0, -1.0)]
    ordered = sorted(items)
    assert ordered == [Vec2(-1.0, -1.0), Vec2(-1.0, 1.0), Vec2(1.0, -1.0), Vec2(1.0, 1.0)]


def test_is_immutable():
    vec = Vec2(1.0, -1.0)
    with pytest.raises(AttributeError):
        vec.x = 3.0  # type: ignore[misc]
    assert vec.x == 1.0
    assert vec == Vec2(1.0, -1.0)