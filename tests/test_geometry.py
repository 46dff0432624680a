import pytest

from knightofashes.geometry import Rect, Vec2


def test_partial_overlap():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersection(b) == Rect(5, 5, 5, 5)


def test_intersection_is_symmetric():
    a = Rect(0, 0, 30, 12)
    b = Rect(7, -4, 9, 40)
    assert a.intersection(b) == b.intersection(a)


def test_contained_rect_is_the_intersection():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(20, 30, 10, 5)
    assert outer.intersection(inner) == inner
    assert outer.intersects(inner)


def test_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert a.intersection(b) is None
    assert a.intersects(b) is False


def test_far_apart():
    assert Rect(0, 0, 1, 1).intersects(Rect(50, 50, 1, 1)) is False


def test_negative_size_is_normalised():
    flipped = Rect(10, 0, -10, 10)
    inner = Rect(5, 0, 1, 10)
    assert flipped.intersection(inner) == inner


@pytest.mark.parametrize("rect", [Rect(3, 4, 5, 6), Rect(-2, -2, 1, 8)])
def test_right_and_bottom(rect):
    assert rect.right - rect.left == rect.width
    assert rect.bottom - rect.top == rect.height


def test_vec2_is_mutable():
    v = Vec2(1, 2)
    v.x += 8
    assert v == Vec2(9, 2)