"""The knight, enemies, the guide, pick-up items and bonfires."""

from __future__ import annotations

from dataclasses import dataclass, field

from knightofashes.geometry import Rect, Vec2
from knightofashes.mapfile import LevelMap
from knightofashes.sprite import AnimatedObject, create_obj, make_frames

KNIGHT_SHEET = "./asset/mob/knight.png"
NPC_SHEET = "./asset/mob/npc.png"
FIRE_SHEET = "./asset/obj/fire.png"
FIRE_FX = "./asset/fx/fire.png"

# animation row -> (can hit, seconds per frame, sheet width)
_KNIGHT_ROWS: dict[int, tuple[bool, float, int]] = {
    0: (True, 0.11, 1200),
    1: (True, 0.06, 1200),
    8: (False, 0.06, 1200),
    2: (False, 0.07, 360),
    3: (False, 0.07, 360),
    4: (False, 0.06, 1440),
    5: (False, 0.09, 720),
    6: (False, 0.07, 480),
    7: (False, 0.086, 600),
}

# animation row -> (can hit, sheet width)
_MOB_ROWS: dict[int, tuple[bool, int]] = {
    0: (True, 600),
    1: (True, 600),
    2: (True, 600),
    3: (False, 600),
    4: (False, 600),
    5: (False, 300),
    6: (False, 400),
}


@dataclass
class Player:
    """The knight controlled by the player."""

    obj: AnimatedObject
    hitbox: Rect = field(default_factory=Rect)
    attack_box: Rect = field(default_factory=Rect)
    hit: bool = True
    can_move: bool = True
    fall: int = 0
    souls: int = 0
    level: int = 0
    atk: float = 1
    defense: float = 0
    life: float = 5.0
    stamina: float = 5.0
    velocity: float = 9.0
    gravity: float = 0.9

    def animate(self) -> None:
        """Play the current animation row and place the body and attack boxes."""
        obj = self.obj
        row = _KNIGHT_ROWS.get(obj.i)
        if row is not None:
            self.hit, period, width = row
            obj.tick(period, 120, width)
        x, y = obj.pos.x, obj.pos.y
        if obj.scale.x < 0:
            self.hitbox = Rect(x - 10, y - 85.5, 47.25, 86)
            self.attack_box = Rect(x - 105, y - 85.5, 90, 86)
        else:
            self.hitbox = Rect(x - 36, y - 85.5, 47.25, 86)
            self.attack_box = Rect(x + 15, y - 85.5, 90, 86)


@dataclass
class Mob:
    """An enemy standing on a level."""

    obj: AnimatedObject
    hitbox: Rect
    kind: str
    hit: bool = True
    life: float = 2
    atk: float = 1


@dataclass
class Npc:
    """The guide waiting in the nexus."""

    obj: AnimatedObject
    hitbox: Rect


@dataclass
class Item:
    """Equipment lying on a level."""

    obj: AnimatedObject
    hitbox: Rect
    attack: float = 0
    defense: float = 0
    display: bool = True


@dataclass
class Fire:
    """A bonfire: lit with ``obj.i == 1``, it leads to the next level."""

    obj: AnimatedObject
    fx: AnimatedObject
    hitbox: Rect
    levels: list[str] = field(default_factory=list)


def _global_bounds(obj: AnimatedObject) -> Rect:
    """Bounds of a sprite whose origin sits at the middle of its bottom edge."""
    frame = obj.current_frame()
    width = frame.width * abs(obj.scale.x)
    height = frame.height * abs(obj.scale.y)
    return Rect(obj.pos.x - width / 2, obj.pos.y - height, width, height)


def create_player(spawn: Vec2) -> Player:
    """A fresh knight standing at ``spawn``."""
    obj = AnimatedObject(
        path=KNIGHT_SHEET,
        pos=Vec2(spawn.x, spawn.y),
        scale=Vec2(2.25, 2.25),
        frames=make_frames(120, 80, 9),
        loop=4,
    )
    return Player(obj=obj)


def _spawn_mob(
    level_map: LevelMap,
    asset: str,
    ch: str,
    scale: float,
    box: tuple[float, float, float, float],
    atk: float,
    life: float,
) -> Mob:
    obj = create_obj(asset, level_map.position_of(ch), Vec2(-scale, scale), Rect(0, 0, 100, 64))
    obj.frames = make_frames(100, 64, 7)
    obj.i = 0
    obj.loop = 2
    dx, dy, width, height = box
    hitbox = Rect(obj.pos.x - dx, obj.pos.y - dy, width, height)
    return Mob(obj=obj, hitbox=hitbox, kind=ch, hit=True, life=life, atk=atk)


def create_mob(level_map: LevelMap, asset: str, ch: str) -> Mob:
    """A common enemy placed on the tile marked ``ch``."""
    return _spawn_mob(level_map, asset, ch, 2.7, (30, 100, 60, 100), atk=1, life=2)


def create_boss(level_map: LevelMap, asset: str, ch: str) -> Mob:
    """A larger, tougher enemy placed on the tile marked ``ch``."""
    return _spawn_mob(level_map, asset, ch, 3.2, (50, 120, 110, 120), atk=2, life=5)


def animate_mobs(mobs: list[Mob]) -> None:
    """Play each enemy's current animation row."""
    for mob in mobs:
        row = _MOB_ROWS.get(mob.obj.i)
        if row is None:
            continue
        can_hit, width = row
        mob.obj.tick(0.1, 100, width)
        mob.hit = can_hit


def create_npc(level_map: LevelMap) -> Npc:
    """The guide; it always stands at the same spot of its level."""
    obj = create_obj(NPC_SHEET, Vec2(980, 580), Vec2(-0.85, 0.85), Rect(0, 0, 180, 180))
    obj.i = 0
    obj.loop = 2
    hitbox = Rect(obj.pos.x - 30, obj.pos.y - 110, 60, 110)
    return Npc(obj=obj, hitbox=hitbox)


def create_item(path: str, level_map: LevelMap, stat: float, kind: int) -> Item:
    """A sword (``kind`` 0, on tile 's') or a chestplate (on tile 'C')."""
    if kind == 0:
        obj = create_obj(path, level_map.position_of("s"), Vec2(0.7, 0.7), Rect(0, 0, 40, 80))
        hitbox = Rect(obj.pos.x - 14, obj.pos.y - 56, 28, 56)
        return Item(obj=obj, hitbox=hitbox, attack=stat)
    obj = create_obj(path, level_map.position_of("C"), Vec2(0.3, 0.3), Rect(0, 0, 174, 162))
    hitbox = Rect(obj.pos.x - 26.1, obj.pos.y - 24.3, 52.2, 48.6)
    return Item(obj=obj, hitbox=hitbox, defense=stat)


def create_fire(level_map: LevelMap) -> Fire:
    """The unlit bonfire of a level, on the tile marked 'f'."""
    obj = AnimatedObject(
        path=FIRE_SHEET,
        pos=level_map.position_of("f"),
        scale=Vec2(2, 2),
        frames=make_frames(32, 32, 3),
        loop=2,
    )
    fx = create_obj(FIRE_FX, obj.pos, Vec2(1, 1), Rect(0, 0, 96, 96))
    return Fire(obj=obj, fx=fx, hitbox=_global_bounds(obj), levels=list(level_map.levels))