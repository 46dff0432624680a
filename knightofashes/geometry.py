"""Plane vectors and axis-aligned rectangles used for positions and hitboxes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vec2:
    """A mutable 2D vector or point."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _span(self) -> tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, y0, x1, y1

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersection(self, other: Rect) -> Rect | None:
        """Return the overlapping area, or None when the rectangles do not overlap.

        Negative sizes are normalised first; rectangles that only touch along
        an edge do not overlap.
        """
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        left, top = max(ax0, bx0), max(ay0, by0)
        right, bottom = min(ax1, bx1), min(ay1, by1)
        if left < right and top < bottom:
            return Rect(left, top, right - left, bottom - top)
        return None

    def intersects(self, other: Rect) -> bool:
        """Tell whether the two rectangles overlap."""
        return self.intersection(other) is not None