"""Level files: texture, follow-up levels, width and a six-row tile grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from knightofashes.geometry import Rect, Vec2
from knightofashes.libmy import getnbr

TILE = 80
ROWS = 6
_GROUND = "F"
_EDGE = "E"


class MapFormatError(ValueError):
    """Raised when a level file does not follow the expected layout."""


@dataclass
class Hitbox:
    """A solid block of ground and the height a body lands on."""

    rect: Rect
    y: float


@dataclass
class LevelMap:
    """A parsed level."""

    texture: str
    levels: list[str]
    size: int
    rows: list[str]
    hitboxes: list[Hitbox] = field(default_factory=list)
    spawn: Vec2 = field(default_factory=Vec2)

    def position_of(self, ch: str, x_offset: float = 0, y_offset: float = 0) -> Vec2:
        """World position of the first tile holding ``ch``, or the origin."""
        for i, row in enumerate(self.rows):
            j = row.find(ch)
            if j != -1:
                return Vec2(j * TILE + x_offset, (720 - (ROWS - i) * TILE) + 95 + y_offset)
        return Vec2(0, 0)


def split_fields(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty fields.

    As in the level tools, text that ends with the separator yields one
    trailing empty field.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    fields = [part for part in text.split(sep) if part]
    if text and text.endswith(sep):
        fields.append("")
    return fields


def read_buffer(path: str | PathLike[str]) -> str:
    """Return the whole content of a text file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def hitbox_rect(row: str, top: int, start: int) -> Hitbox:
    """Measure the ground run that begins at ``start`` in ``row``."""
    y = top * TILE + 15
    left = rect_top = width = height = 0.0
    grounds = 0
    for i, ch in enumerate(row[start:], start):
        if ch == _GROUND:
            grounds += 1
            height = TILE
            width += TILE
        if ch == _EDGE:
            width += 45
        if grounds == 1:
            rect_top = y
            left = i * TILE
        if ch not in (_GROUND, _EDGE) and grounds >= 1:
            break
    return Hitbox(Rect(left, rect_top, width, height), y)


def find_hitboxes(rows: list[str], size: int, count: int) -> list[Hitbox]:
    """Collect at most ``count`` ground hitboxes, row by row."""
    hitboxes: list[Hitbox] = []
    row_index = 0
    steps = 0
    x = 0
    while row_index < len(rows) and len(hitboxes) < count:
        x = rows[row_index].find(_GROUND, x)
        if steps >= size or x == -1:
            row_index += 1
            steps = 0
            x = 0
        else:
            hitbox = hitbox_rect(rows[row_index], row_index + 3, x)
            hitboxes.append(hitbox)
            x = int((hitbox.rect.left + hitbox.rect.width) / TILE)
        steps += 1
    return hitboxes


def _parse_levels(line: str) -> list[str]:
    if not line or line[0] not in "0123456789":
        raise MapFormatError(f"bad level count line: {line!r}")
    count = int(line[0])
    if count == 0:
        if len(line) != 1:
            raise MapFormatError(f"unexpected levels after a zero count: {line!r}")
        return []
    levels = line[2:].split(" ")
    if len(line) < 2 or len(levels) != count or not all(levels):
        raise MapFormatError(f"expected {count} levels in {line!r}")
    return levels


def parse_map(text: str, hitbox_count: int) -> LevelMap:
    """Parse the content of a level file."""
    lines = text.split("\n")
    if len(lines) < 3 + ROWS:
        raise MapFormatError("level file is truncated")
    texture = lines[0]
    levels = _parse_levels(lines[1])
    size = getnbr(lines[2][:2]) + 1
    rows = lines[3:3 + ROWS]
    level = LevelMap(
        texture=texture,
        levels=levels,
        size=size,
        rows=rows,
        hitboxes=find_hitboxes(rows, size, hitbox_count),
    )
    level.spawn = level.position_of("P")
    return level


def load_map(path: str | PathLike[str], hitbox_count: int) -> LevelMap:
    """Read and parse a level file."""
    return parse_map(read_buffer(path), hitbox_count)