import pytest

from knightofashes.geometry import Rect, Vec2
from knightofashes.sprite import AnimatedObject, Clock, create_obj, make_frames


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_clock_elapsed_and_restart():
    source = FakeTime()
    clock = Clock(source)
    source.now = 2.5
    assert clock.elapsed() == pytest.approx(2.5)
    assert clock.restart() == pytest.approx(2.5)
    assert clock.elapsed() == pytest.approx(0.0)
    source.now = 3.0
    assert clock.elapsed() == pytest.approx(0.5)


def test_make_frames_stacks_rows():
    frames = make_frames(120, 80, 3)
    assert frames == [Rect(0, 0, 120, 80), Rect(0, 80, 120, 80), Rect(0, 160, 120, 80)]


def test_make_frames_are_independent():
    frames = make_frames(32, 32, 2)
    frames[0].left = 64
    assert frames[1].left == 0


def test_advance_loops_on_looping_row():
    obj = AnimatedObject("sheet.png", Vec2(), frames=make_frames(100, 64, 3), loop=2)
    lefts = []
    for _ in range(4):
        obj.advance(100, 300)
        lefts.append(obj.frames[0].left)
    assert lefts == [100, 200, 0, 100]
    assert obj.i == 0


def test_advance_returns_to_first_row_after_one_shot():
    obj = AnimatedObject("sheet.png", Vec2(), frames=make_frames(100, 64, 3), loop=2, i=2)
    obj.advance(100, 300)
    obj.advance(100, 300)
    assert obj.i == 2
    obj.advance(100, 300)
    assert obj.i == 0
    assert obj.frames[2].left == 0


def test_tick_waits_for_period():
    source = FakeTime()
    obj = AnimatedObject("sheet.png", Vec2(), frames=make_frames(32, 32, 1), loop=1)
    obj.clock = Clock(source)
    source.now = 0.05
    assert obj.tick(0.1, 32, 128) is False
    assert obj.frames[0].left == 0
    source.now = 0.2
    assert obj.tick(0.1, 32, 128) is True
    assert obj.frames[0].left == 32
    assert obj.tick(0.1, 32, 128) is False


def test_current_frame_follows_row():
    obj = AnimatedObject("sheet.png", Vec2(), frames=make_frames(10, 10, 3), i=1)
    assert obj.current_frame() is obj.frames[1]


def test_create_obj_copies_inputs():
    pos = Vec2(10, 20)
    rect = Rect(0, 0, 16, 16)
    obj = create_obj("heart.png", pos, Vec2(3, 3), rect)
    pos.x = 99
    rect.left = 5
    assert obj.pos == Vec2(10, 20)
    assert obj.frames == [Rect(0, 0, 16, 16)]
    assert obj.scale == Vec2(3, 3)
    assert obj.display is False
    assert obj.i == 0