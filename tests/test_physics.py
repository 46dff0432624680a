import pytest

from knightofashes.entities import create_fire, create_player
from knightofashes.geometry import Rect
from knightofashes.mapfile import parse_map
from knightofashes.physics import (
    LEFT,
    RIGHT,
    STEP,
    die,
    fall,
    jump,
    move,
    move_player,
    on_floor,
    player_can_move,
    scroll_background,
)
from knightofashes.world import Game, Scene, create_background, create_hud


def _map_text(spawn_col, levels="1 1"):
    rows = ["." * 20] * 4 + ["." * spawn_col + "Pf" + "." * (18 - spawn_col), "F" * 20]
    return "\n".join(["./asset/bg/tuto.png", levels, "19", *rows]) + "\n"


def _scene(spawn_col, levels="1 1"):
    level_map = parse_map(_map_text(spawn_col, levels), 7)
    return Scene(
        level_map=level_map,
        background=create_background(level_map.texture),
        fire=create_fire(level_map),
    )


def _game():
    scenes = [_scene(0), _scene(5), _scene(10)]
    player = create_player(scenes[0].level_map.spawn)
    player.animate()
    return Game(scenes=scenes, player=player, hud=create_hud(), playing=True)


def test_scroll_right_then_left_restores_layers():
    background = create_background("art.png")
    before = [rect.left for rect in background.rects]
    scroll_background(background, RIGHT)
    scroll_background(background, LEFT)
    assert [rect.left for rect in background.rects] == before


def test_scroll_right_moves_skies_fastest():
    background = create_background("art.png")
    scroll_background(background, RIGHT)
    assert background.rects[0].left == -8
    assert background.rects[0].left < background.rects[4].left < 0


def test_scroll_unknown_direction():
    with pytest.raises(ValueError):
        scroll_background(create_background("art.png"), 3)


def test_player_on_floor_can_move():
    game = _game()
    level_map = game.scenes[0].level_map
    assert player_can_move(game.player, level_map, RIGHT) is True
    assert player_can_move(game.player, level_map, LEFT) is True


def test_player_blocked_by_wall():
    game = _game()
    floor = game.scenes[0].level_map.hitboxes[0].rect
    game.player.hitbox = Rect(floor.left, floor.top - 20, 40, 86)
    assert player_can_move(game.player, game.scenes[0].level_map, RIGHT) is False
    assert player_can_move(game.player, game.scenes[0].level_map, 0) is True


def test_on_floor_and_in_air():
    game = _game()
    level_map = game.scenes[0].level_map
    assert on_floor(game.player, level_map) == level_map.hitboxes[0].y
    game.player.hitbox = Rect(0, 0, 10, 10)
    assert on_floor(game.player, level_map) == -1


def test_jump_rises_then_peaks():
    player = create_player(_game().scenes[0].level_map.spawn)
    player.obj.i = 2
    y0 = player.obj.pos.y
    jump(player)
    assert player.obj.pos.y < y0
    assert player.gravity > 0.9
    assert player.fall == 1
    assert player.obj.i == 2
    player.gravity = player.velocity + 1
    jump(player)
    assert player.obj.i == 3


def test_fall_lands_on_floor():
    game = _game()
    player = game.player
    y = game.scenes[0].level_map.hitboxes[0].y
    player.obj.pos.y = 600
    player.obj.i = 3
    player.fall = 1
    player.gravity = 20
    fall(game, y)
    assert player.obj.pos.y == y
    assert player.obj.i == 0
    assert player.fall == 0
    assert player.gravity == 0.9
    assert player.velocity == 9


def test_fall_in_air_accelerates():
    game = _game()
    player = game.player
    player.obj.pos.y = 300
    player.gravity = 12
    fall(game, -1)
    assert player.obj.pos.y > 300
    assert player.gravity > 12


def test_die_in_level_returns_to_nexus():
    game = _game()
    game.i = 2
    game.player.obj.pos.y = 1300
    assert die(game) is True
    spawn = game.scenes[1].level_map.spawn
    assert game.i == 1
    assert (game.player.obj.pos.x, game.player.obj.pos.y) == (spawn.x, spawn.y)
    assert game.camera.x == spawn.x
    assert game.player.gravity == 9


def test_die_in_tutorial_stays_there():
    game = _game()
    game.player.obj.pos.x = 999
    game.player.obj.pos.y = 1500
    assert die(game) is True
    assert game.i == 0
    assert game.player.obj.pos.x == game.scenes[0].level_map.spawn.x


def test_no_death_above_limit():
    game = _game()
    game.i = 2
    assert die(game) is False
    assert game.i == 2


def test_move_carries_hud_and_inventory():
    game = _game()
    x0 = game.player.obj.pos.x
    heart0 = game.hud.hearts[0].pos.x
    inv0 = game.inventory.pos.x
    move(game, RIGHT)
    assert game.player.obj.pos.x == x0 + STEP
    assert game.hud.hearts[0].pos.x == heart0 + STEP
    assert game.inventory.pos.x == inv0 + STEP
    assert game.camera.x == game.player.obj.pos.x
    move(game, LEFT)
    assert game.player.obj.pos.x == x0


def test_move_when_frozen():
    game = _game()
    game.player.can_move = False
    x0 = game.player.obj.pos.x
    move(game, RIGHT)
    assert game.player.obj.pos.x == x0
    assert game.camera.x == x0


def test_move_without_start_raises():
    game = Game(scenes=[_scene(0)])
    with pytest.raises(RuntimeError):
        move(game, RIGHT)


def test_move_player_right_and_left():
    game = _game()
    x0 = game.player.obj.pos.x
    y0 = game.player.obj.pos.y
    move_player(game, right=True)
    assert game.player.obj.pos.x == x0 + STEP
    assert game.player.obj.scale.x > 0
    assert game.player.obj.i == 1
    assert game.player.obj.pos.y == y0
    move_player(game, left=True)
    assert game.player.obj.pos.x == x0
    assert game.player.obj.scale.x < 0


def test_move_player_ignored_in_menu():
    game = _game()
    game.playing = False
    x0 = game.player.obj.pos.x
    move_player(game, right=True)
    assert game.player.obj.pos.x == x0


def test_move_player_starts_falling_in_air():
    game = _game()
    game.player.hitbox = Rect(0, 0, 10, 10)
    move_player(game)
    assert game.player.obj.i == 3
    assert game.player.fall == 1
    assert game.player.gravity > 9