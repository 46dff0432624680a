import pytest

from knightofashes.geometry import Rect, Vec2
from knightofashes.mapfile import parse_map
from knightofashes.sprite import Clock
from knightofashes.entities import (
    animate_mobs,
    create_boss,
    create_fire,
    create_item,
    create_mob,
    create_npc,
    create_player,
)

MAP_TEXT = "\n".join(
    [
        "./asset/bg/tuto.png",
        "1 1",
        "20",
        "....................",
        "....................",
        "....................",
        ".P..c..s..C..a..m.B.",
        "...............f....",
        "FFFFFFFFFFFFFFFFFFFF",
        "",
    ]
)


class FakeTime:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def level():
    return parse_map(MAP_TEXT, 7)


def _expired_clock():
    source = FakeTime()
    clock = Clock(source)
    source.now = 10.0
    return clock


def test_create_player_defaults(level):
    player = create_player(level.spawn)
    assert player.obj.pos == level.spawn
    assert player.obj.pos is not level.spawn
    assert len(player.obj.frames) == 9
    assert player.obj.frames[8] == Rect(0, 640, 120, 80)
    assert player.obj.loop == 4
    assert player.velocity == 9
    assert player.gravity == pytest.approx(0.9)
    assert player.atk == 1
    assert player.defense == 0


def test_player_boxes_facing_right():
    player = create_player(Vec2(100, 500))
    player.animate()
    assert player.hitbox == Rect(100 - 36, 500 - 85.5, 47.25, 86)
    assert player.attack_box == Rect(100 + 15, 500 - 85.5, 90, 86)


def test_player_boxes_facing_left():
    player = create_player(Vec2(100, 500))
    player.obj.scale.x = -2.25
    player.animate()
    assert player.hitbox == Rect(100 - 10, 500 - 85.5, 47.25, 86)
    assert player.attack_box == Rect(100 - 105, 500 - 85.5, 90, 86)


@pytest.mark.parametrize("row, can_hit", [(0, True), (1, True), (8, False), (5, False), (2, False)])
def test_player_hit_flag_by_row(row, can_hit):
    player = create_player(Vec2(0, 0))
    player.hit = not can_hit
    player.obj.i = row
    player.animate()
    assert player.hit is can_hit


def test_player_animation_steps_frame():
    player = create_player(Vec2(0, 0))
    player.obj.clock = _expired_clock()
    player.animate()
    assert player.obj.frames[0].left == 120


def test_one_shot_row_returns_to_idle():
    player = create_player(Vec2(0, 0))
    player.obj.i = 6
    player.obj.frames[6].left = 360
    player.obj.clock = _expired_clock()
    player.animate()
    assert player.obj.i == 0
    assert player.obj.frames[6].left == 0


def test_create_mob(level):
    mob = create_mob(level, "./asset/mob/claw.png", "c")
    pos = level.position_of("c")
    assert mob.obj.pos == pos
    assert mob.kind == "c"
    assert mob.life == 2
    assert mob.atk == 1
    assert mob.obj.scale.x < 0
    assert mob.hitbox == Rect(pos.x - 30, pos.y - 100, 60, 100)
    assert len(mob.obj.frames) == 7


def test_create_boss(level):
    boss = create_boss(level, "./asset/mob/mboss.png", "m")
    pos = level.position_of("m")
    assert boss.life == 5
    assert boss.atk == 2
    assert boss.obj.scale == Vec2(-3.2, 3.2)
    assert boss.hitbox == Rect(pos.x - 50, pos.y - 120, 110, 120)


def test_animate_mobs_resets_after_attack(level):
    mob = create_mob(level, "./asset/mob/axe.png", "a")
    mob.obj.i = 2
    mob.obj.frames[2].left = 500
    mob.hit = False
    mob.obj.clock = _expired_clock()
    animate_mobs([mob])
    assert mob.obj.i == 0
    assert mob.obj.frames[2].left == 0
    assert mob.hit is True


def test_animate_mobs_hurt_row(level):
    mob = create_mob(level, "./asset/mob/axe.png", "a")
    mob.obj.i = 5
    mob.obj.frames[5].left = 200
    mob.obj.clock = _expired_clock()
    animate_mobs([mob])
    assert mob.obj.i == 0
    assert mob.hit is False


def test_animate_mobs_cannot_hit_while_dying(level):
    mob = create_mob(level, "./asset/mob/axe.png", "a")
    mob.obj.i = 3
    animate_mobs([mob])
    assert mob.hit is False


def test_create_npc(level):
    npc = create_npc(level)
    assert npc.obj.pos == Vec2(980, 580)
    assert npc.hitbox == Rect(npc.obj.pos.x - 30, npc.obj.pos.y - 110, 60, 110)
    assert npc.obj.frames == [Rect(0, 0, 180, 180)]


def test_create_sword(level):
    item = create_item("./asset/obj/d_sword.png", level, 10, 0)
    assert item.obj.pos == level.position_of("s")
    assert item.attack == 10
    assert item.defense == 0
    assert item.display is True
    assert item.hitbox == Rect(item.obj.pos.x - 14, item.obj.pos.y - 56, 28, 56)


def test_create_chestplate(level):
    item = create_item("./asset/obj/d_chestplate.png", level, 10, 1)
    assert item.obj.pos == level.position_of("C")
    assert item.defense == 10
    assert item.attack == 0


def test_create_fire(level):
    fire = create_fire(level)
    assert fire.obj.pos == level.position_of("f")
    assert fire.levels == level.levels
    assert fire.fx.pos == fire.obj.pos
    assert fire.fx.pos is not fire.obj.pos
    assert fire.obj.i == 0
    assert fire.hitbox.left < fire.obj.pos.x < fire.hitbox.right
    assert fire.hitbox.bottom == fire.obj.pos.y