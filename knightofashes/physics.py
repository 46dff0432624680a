"""Walking, scrolling, jumping, falling and dying."""

from __future__ import annotations

from knightofashes.entities import Player
from knightofashes.geometry import Vec2
from knightofashes.mapfile import LevelMap
from knightofashes.world import Background, Game, Hud

RIGHT = 1
LEFT = 2
STEP = 8
DEATH_Y = 1280
NEXUS = 1
CAMERA_Y = 360
_LAYER_SPEEDS = (8, 8, 6, 4, 2)
_SCALE = 2.25
_FALL_GRAVITY = 9.0
_REST_VELOCITY = 9.0
_REST_GRAVITY = 0.9


def _require(game: Game) -> tuple[Player, Hud]:
    if game.player is None or game.hud is None:
        raise RuntimeError("the game has not been started")
    return game.player, game.hud


def scroll_background(background: Background, direction: int) -> None:
    """Shift the parallax layers against the direction the knight walks."""
    if direction == RIGHT:
        sign = -1
    elif direction == LEFT:
        sign = 1
    else:
        raise ValueError(f"unknown direction: {direction!r}")
    for rect, speed in zip(background.rects, _LAYER_SPEEDS):
        rect.left += sign * speed


def player_can_move(player: Player, level_map: LevelMap, direction: int) -> bool:
    """False when the knight's body runs into a wall of ground."""
    if direction not in (RIGHT, LEFT):
        return True
    for hitbox in level_map.hitboxes:
        overlap = player.hitbox.intersection(hitbox.rect)
        if overlap is not None and overlap.height >= 10 and overlap.width >= 1:
            return False
    return True


def on_floor(player: Player, level_map: LevelMap) -> float:
    """Height of the ground the knight stands on, or -1 in the air."""
    for hitbox in level_map.hitboxes:
        if hitbox.rect.intersects(player.hitbox):
            return hitbox.y
    return -1


def jump(player: Player) -> None:
    """One step of a jump; switches to the falling row at its peak."""
    player.fall = 1
    player.obj.pos.y -= player.velocity - player.gravity
    if player.gravity <= player.velocity:
        player.gravity *= 1.1
    else:
        player.obj.i = 3


def die(game: Game) -> bool:
    """Send a knight who fell off the level back to a spawn; tell whether it happened."""
    player, _ = _require(game)
    if player.obj.pos.y < DEATH_Y:
        return False
    if game.i != 0:
        game.i = NEXUS
    spawn = game.scenes[game.i].level_map.spawn
    player.obj.pos = Vec2(spawn.x, spawn.y)
    game.camera = Vec2(spawn.x, CAMERA_Y)
    player.gravity = _FALL_GRAVITY
    return True


def fall(game: Game, y: float) -> None:
    """One step of a fall; lands when ``y`` is a floor height."""
    player, _ = _require(game)
    pos = player.obj.pos
    pos.y -= player.velocity - player.gravity
    player.gravity *= 1.07
    if pos.y <= y:
        pos.y = y
    if y != -1:
        player.obj.i = 0
        player.velocity = _REST_VELOCITY
        player.gravity = _REST_GRAVITY
        pos.y = y
        player.fall = 0
    die(game)


def move(game: Game, direction: int) -> None:
    """Walk one step and carry the background, HUD, inventory and camera along."""
    player, hud = _require(game)
    if player.can_move and direction in (RIGHT, LEFT):
        dx = STEP if direction == RIGHT else -STEP
        scroll_background(game.scenes[game.i].background, direction)
        player.obj.pos.x += dx
        game.inventory.shift(dx)
        hud.shift(dx)
    game.camera = Vec2(player.obj.pos.x, CAMERA_Y)


def move_player(game: Game, left: bool = False, right: bool = False) -> None:
    """Apply the held arrow keys, then gravity."""
    player, _ = _require(game)
    level_map = game.scenes[game.i].level_map
    y = on_floor(player, level_map)
    obj = player.obj
    for pressed, direction, scale_x in ((left, LEFT, -_SCALE), (right, RIGHT, _SCALE)):
        if pressed and obj.i < 5 and game.playing:
            if obj.i < 2:
                obj.i = 1
            if player_can_move(player, level_map, direction):
                obj.scale = Vec2(scale_x, _SCALE)
                move(game, direction)
    if obj.i == 3 or (y == -1 and obj.i != 2):
        if player.fall == 0:
            player.gravity = _FALL_GRAVITY
            player.fall = 1
            obj.i = 3
        fall(game, y)