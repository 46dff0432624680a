"""Clocks and sprite-sheet animated objects."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from knightofashes.geometry import Rect, Vec2


class Clock:
    """Measures the seconds elapsed since creation or the last restart."""

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._start = source()

    def elapsed(self) -> float:
        """Seconds since the clock was started."""
        return self._source() - self._start

    def restart(self) -> float:
        """Start counting from zero again and return the time that had elapsed."""
        now = self._source()
        elapsed = now - self._start
        self._start = now
        return elapsed


@dataclass
class AnimatedObject:
    """A sprite drawn from one row of a sprite sheet.

    ``frames`` holds one texture rectangle per animation row and ``i`` selects
    the row in use. Rows below ``loop`` repeat forever; the others play once
    and then fall back to row 0.
    """

    path: str
    pos: Vec2
    scale: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    frames: list[Rect] = field(default_factory=list)
    i: int = 0
    loop: int = 0
    display: bool = False
    clock: Clock = field(default_factory=Clock)

    def current_frame(self) -> Rect:
        """The texture rectangle currently shown."""
        return self.frames[self.i]

    def advance(self, offset: float, max_value: float) -> None:
        """Step the current row to its next frame."""
        frame = self.frames[self.i]
        if frame.left + offset >= max_value:
            if self.i >= self.loop:
                self.i = 0
            frame.left = 0
        else:
            frame.left += offset

    def tick(self, period: float, offset: float, max_value: float) -> bool:
        """Advance once more than ``period`` seconds have passed; tell whether it did."""
        if self.clock.elapsed() > period:
            self.advance(offset, max_value)
            self.clock.restart()
            return True
        return False


def make_frames(width: float, height: float, count: int) -> list[Rect]:
    """One rectangle per row of a sheet whose rows are stacked vertically."""
    return [Rect(0, row * height, width, height) for row in range(count)]


def create_obj(path: str, pos: Vec2, scale: Vec2, rect: Rect) -> AnimatedObject:
    """A hidden object showing ``rect`` of the image at ``path``."""
    return AnimatedObject(
        path=path,
        pos=Vec2(pos.x, pos.y),
        scale=Vec2(scale.x, scale.y),
        frames=[replace(rect)],
    )