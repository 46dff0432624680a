"""Attacks, bonfires and picking up equipment."""

from __future__ import annotations

from knightofashes.entities import Player
from knightofashes.libmy import getnbr
from knightofashes.world import Game

_STAGGER_ROW = 5


def _player(game: Game) -> Player:
    if game.player is None:
        raise RuntimeError("the game has not been started")
    return game.player


def _strike(game: Game, bonus: float) -> int:
    player = _player(game)
    struck = 0
    for mob in game.scenes[game.i].mobs:
        if mob.hitbox.intersects(player.attack_box):
            mob.life -= player.atk + bonus
            mob.obj.i = _STAGGER_ROW
            struck += 1
    return struck


def speed_attack(game: Game) -> int:
    """Hit every enemy in reach with the knight's attack; return how many were hit."""
    return _strike(game, 0)


def heavy_attack(game: Game) -> int:
    """Like speed_attack, one point stronger."""
    return _strike(game, 1)


def use_fire(game: Game) -> None:
    """Light the bonfire, or travel through a lit one to the level it leads to."""
    _player(game)
    scene = game.scenes[game.i]
    fire = scene.fire
    if fire.obj.i == 0:
        fire.obj.i = 1
        return
    if fire.obj.i != 1:
        return
    levels = scene.level_map.levels
    if not levels:
        raise ValueError("this bonfire leads nowhere")
    target = getnbr(levels[-1])
    if not 0 <= target < len(game.scenes):
        raise ValueError(f"no scene number {target}")
    game.i = target
    if target == 0:
        game.finish()
    game.reset_position()


def pick_item(game: Game, index: int) -> None:
    """Take the item at ``index`` of the current scene and wear it."""
    player = _player(game)
    slots = game.inventory.items
    if slots[index].display and index + 1 < len(slots):
        slots[index + 1].display = True
    slots[index].display = True
    item = game.scenes[game.i].items[index]
    item.display = False
    player.atk += item.attack
    player.defense += item.defense


def interact(game: Game) -> None:
    """Use the bonfire and take the items the knight stands on."""
    player = _player(game)
    if player.hitbox.intersects(game.scenes[game.i].fire.hitbox):
        use_fire(game)
    for index, item in enumerate(game.scenes[game.i].items):
        if player.hitbox.intersects(item.hitbox):
            pick_item(game, index)