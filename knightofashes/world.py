"""The game state: scenes, background, HUD, inventory and end credits."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain
from os import PathLike
from pathlib import Path

from knightofashes.entities import (
    Fire,
    Item,
    Mob,
    Npc,
    Player,
    create_boss,
    create_fire,
    create_item,
    create_mob,
    create_npc,
    create_player,
)
from knightofashes.geometry import Rect, Vec2
from knightofashes.mapfile import LevelMap, load_map, read_buffer, split_fields
from knightofashes.sprite import AnimatedObject, Clock, create_obj

MAIN_MUSIC = "./asset/music/main.ogg"
END_MUSIC = "./asset/music/end.ogg"
CREDITS_FONT = "./asset/font/font.ttf"
TUTORIAL_FONT = "./asset/font/Sabo.ttf"
INVENTORY_SHEET = "./asset/obj/inventory.png"

_SKY = "./asset/bg/sky.png"
_LAYERS = (_SKY, _SKY, "./asset/bg/tower.png", "./asset/bg/town.png", "./asset/bg/montain.png")
_SKY_WRAP = 8960
_SKY_SPEED = 0.2
_INVENTORY_POS = (80, 320)
_INVENTORY_SLOTS = ((-158, 445), (-98, 445))

_AXE = "./asset/mob/axe.png"
_CLAW = "./asset/mob/claw.png"
_SWORD = "./asset/obj/d_sword.png"
_CHESTPLATE = "./asset/obj/d_chestplate.png"


@dataclass
class _Label:
    """A line of text placed in the world."""

    text: str
    size: int
    pos: Vec2
    font: str


@dataclass
class Background:
    """Parallax layers: two drifting skies, three scrolling layers and the scene art."""

    textures: list[str]
    rects: list[Rect]
    positions: list[Vec2]

    def drift(self) -> None:
        """Move both skies a little, wrapping around at the far end."""
        for pos in self.positions[:2]:
            if pos.x >= _SKY_WRAP:
                pos.x = -_SKY_WRAP
            pos.x += _SKY_SPEED


def create_background(path: str) -> Background:
    """Background for a scene whose own art lives at ``path``."""
    return Background(
        textures=[*_LAYERS, path],
        rects=[Rect(0, 0, 10240, 720) for _ in _LAYERS],
        positions=[Vec2(0, 0), Vec2(-10240, 0), *(Vec2(-1280, 0) for _ in range(3)), Vec2(0, 0)],
    )


def _hud_x(slot: int, base: int) -> float:
    return (base + slot * 17) * 3


@dataclass
class Hud:
    """Hearts and stamina gauges following the camera."""

    hearts: list[AnimatedObject]
    stamina: list[AnimatedObject]

    def shift(self, dx: float) -> None:
        """Move every gauge horizontally."""
        for obj in chain(self.hearts, self.stamina):
            obj.pos.x += dx

    def reset(self) -> None:
        """Put the gauges back at the left edge of the level."""
        for slot, (heart, gauge) in enumerate(zip(self.hearts, self.stamina)):
            heart.pos = Vec2(_hud_x(slot, 0), 50)
            gauge.pos = Vec2(_hud_x(slot, 0), 100)


def create_hud() -> Hud:
    """Five hearts and five stamina gauges."""
    hearts = [
        create_obj("./asset/hud/heart.png", Vec2(_hud_x(slot, -175), 50), Vec2(3, 3), Rect(0, 0, 16, 16))
        for slot in range(5)
    ]
    stamina = [
        create_obj("./asset/hud/stamina.png", Vec2(_hud_x(slot, -175), 100), Vec2(2, 2), Rect(0, 0, 16, 22))
        for slot in range(5)
    ]
    return Hud(hearts=hearts, stamina=stamina)


@dataclass
class Inventory:
    """The equipment panel and the slots it shows."""

    items: list[AnimatedObject]
    pos: Vec2 = field(default_factory=lambda: Vec2(*_INVENTORY_POS))
    display: bool = False
    path: str = INVENTORY_SHEET
    scale: Vec2 = field(default_factory=lambda: Vec2(1.75, 1.75))
    origin: Vec2 = field(default_factory=lambda: Vec2(166, 81))

    def shift(self, dx: float) -> None:
        """Move the panel and its slots horizontally."""
        self.pos.x += dx
        for item in self.items:
            item.pos.x += dx

    def reset(self) -> None:
        """Put the panel back at the left edge of the level."""
        self.pos = Vec2(*_INVENTORY_POS)
        for item, slot in zip(self.items, _INVENTORY_SLOTS):
            item.pos = Vec2(*slot)

    def toggle(self) -> None:
        """Show or hide the panel."""
        self.display = not self.display


def create_inventory() -> Inventory:
    """An empty inventory: chestplate and sword slots, both hidden."""
    items = [
        create_obj(_CHESTPLATE, Vec2(*_INVENTORY_SLOTS[0]), Vec2(0.3, 0.3), Rect(0, 0, 174, 162)),
        create_obj(_SWORD, Vec2(*_INVENTORY_SLOTS[1]), Vec2(0.68, 0.68), Rect(0, 0, 40, 80)),
    ]
    return Inventory(items=items)


@dataclass
class Scene:
    """One level and everything standing in it."""

    level_map: LevelMap
    background: Background
    fire: Fire
    mobs: list[Mob] = field(default_factory=list)
    npc: Npc | None = None
    texts: list[_Label] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)


@dataclass
class Credits:
    """End credits scrolling upwards."""

    lines: list[_Label]
    clock: Clock = field(default_factory=Clock)

    def scroll(self) -> bool:
        """Move the lines up when due; tell whether the last one has left the screen."""
        if self.clock.elapsed() > 0.005:
            for label in self.lines:
                label.pos = Vec2(50, label.pos.y - 15)
            self.clock.restart()
        return bool(self.lines) and self.lines[-1].pos.y < -200


def load_credits(path: str | PathLike[str]) -> Credits:
    """Credits with one line per line of the file at ``path``."""
    lines = split_fields(read_buffer(path), "\n")
    labels = [
        _Label(text=line, size=20, pos=Vec2(50, 720 + index * 25), font=CREDITS_FONT)
        for index, line in enumerate(lines)
    ]
    return Credits(lines=labels)


def _scene(root: Path, name: str, hitboxes: int) -> Scene:
    level_map = load_map(root / "map" / name, hitboxes)
    return Scene(
        level_map=level_map,
        background=create_background(level_map.texture),
        fire=create_fire(level_map),
    )


def _tutorial(root: Path) -> Scene:
    scene = _scene(root, "tuto.txt", 7)
    captions = [
        ("Use LEFT RIGHT arrows to move", 20, 350, 420),
        ("Use SPACE to jump", 25, 1500, 420),
        ("use R to roll", 25, 2400, 420),
        ("use Z or E to attack", 25, 3100, 420),
        ("use A to interact with object", 25, 4350, 500),
        ("use t to open inventory", 25, 4650, 570),
        ("light the fire and use it to continue", 25, 6400, 320),
    ]
    scene.texts = [_Label(text, size, Vec2(x, y), TUTORIAL_FONT) for text, size, x, y in captions]
    scene.mobs = [create_mob(scene.level_map, _CLAW, "c")]
    scene.items = [create_item(_CHESTPLATE, scene.level_map, 10, 1)]
    return scene


def _nexus(root: Path) -> Scene:
    scene = _scene(root, "nexus.txt", 7)
    scene.npc = create_npc(scene.level_map)
    return scene


def _level_one(root: Path) -> Scene:
    scene = _scene(root, "lvl_one.txt", 8)
    level_map = scene.level_map
    scene.mobs = [
        create_mob(level_map, _AXE, "a"),
        create_mob(level_map, _CLAW, "c"),
        create_mob(level_map, _AXE, "a"),
    ]
    scene.items = [create_item(_SWORD, level_map, 10, 0)]
    return scene


def _level_two(root: Path) -> Scene:
    scene = _scene(root, "lvl_two.txt", 9)
    level_map = scene.level_map
    scene.mobs = [
        create_mob(level_map, _AXE, "a"),
        create_mob(level_map, _CLAW, "c"),
        create_mob(level_map, _CLAW, "c"),
        create_mob(level_map, _AXE, "a"),
        create_boss(level_map, "./asset/mob/mboss.png", "m"),
    ]
    scene.items = [create_item(_SWORD, level_map, 10, 0)]
    return scene


def _level_three(root: Path) -> Scene:
    scene = _scene(root, "lvl_three.txt", 9)
    level_map = scene.level_map
    scene.mobs = [
        create_mob(level_map, _CLAW, "c"),
        create_mob(level_map, _AXE, "a"),
        create_mob(level_map, _AXE, "a"),
        create_mob(level_map, _AXE, "a"),
    ]
    return scene


def _level_four(root: Path) -> Scene:
    scene = _scene(root, "lvl_four.txt", 9)
    level_map = scene.level_map
    scene.mobs = [
        create_mob(level_map, _AXE, "a"),
        create_mob(level_map, _CLAW, "c"),
        create_boss(level_map, "./asset/mob/boss.png", "B"),
    ]
    return scene


def create_scenes(root: str | PathLike[str]) -> list[Scene]:
    """Load the six scenes from the ``map`` directory under ``root``."""
    base = Path(root)
    builders = (_tutorial, _nexus, _level_one, _level_two, _level_three, _level_four)
    return [build(base) for build in builders]


@dataclass
class Game:
    """Everything the running game knows about."""

    root: Path = field(default_factory=lambda: Path("."))
    i: int = 0
    scenes: list[Scene] = field(default_factory=list)
    player: Player | None = None
    hud: Hud | None = None
    inventory: Inventory = field(default_factory=create_inventory)
    credits: Credits | None = None
    playing: bool = False
    is_end: bool = False
    eric: bool = False
    music: str = MAIN_MUSIC
    camera: Vec2 = field(default_factory=lambda: Vec2(640, 360))

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    def _started(self) -> tuple[Player, Hud]:
        if self.player is None or self.hud is None:
            raise RuntimeError("the game has not been started")
        return self.player, self.hud

    def start(self) -> None:
        """Leave the menu: load the scenes and place the knight in the tutorial."""
        self.playing = True
        self.i = 0
        self.scenes = create_scenes(self.root)
        self.player = create_player(self.scenes[0].level_map.spawn)
        self.camera = Vec2(self.player.obj.pos.x, 360)
        self.hud = create_hud()

    def reset_position(self) -> None:
        """Put the knight, HUD, inventory and camera at the start of the current scene."""
        player, hud = self._started()
        spawn = self.scenes[self.i].level_map.spawn
        player.obj.pos = Vec2(spawn.x, spawn.y)
        self.inventory.reset()
        hud.reset()
        self.camera = Vec2(player.obj.pos.x, 360)

    def finish(self) -> None:
        """Switch to the end credits."""
        self.credits = load_credits(self.root / "end.txt")
        self.music = END_MUSIC
        self.is_end = True