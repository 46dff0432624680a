"""The game window, its event handling and its main loop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

import pygame

from knightofashes.combat import heavy_attack, interact, speed_attack
from knightofashes.entities import Player, animate_mobs
from knightofashes.geometry import Vec2
from knightofashes.menu import (
    MAIN_PAGE,
    SOUND_MOVE,
    SOUND_OK,
    SOUND_START,
    MenuAction,
    Menus,
)
from knightofashes.physics import jump, move_player
from knightofashes.render import NEXUS, VIEW_HEIGHT, VIEW_WIDTH, Assets, Renderer
from knightofashes.world import Game

TITLE = "DARK SOULS"
FRAMERATE = 60
WINDOW_SIZE = (1280, 720)
FULLSCREEN_SIZE = (1920, 1080)
ICON = "./asset/icon/icon.png"
CAMERA_Y = 360

_ACTION_ROWS = {
    pygame.K_SPACE: 2,
    pygame.K_r: 4,
    pygame.K_e: 5,
    pygame.K_z: 6,
    pygame.K_h: 7,
}
_ARROWS = (pygame.K_LEFT, pygame.K_RIGHT)


class App:
    """Ties the game state, the menus, the input and the renderer together."""

    def __init__(self, root: str | PathLike[str] = ".", window: pygame.Surface | None = None) -> None:
        self.root = Path(root)
        self.game = Game(root=self.root)
        self.menus = Menus()
        self.assets = Assets(self.root)
        self.canvas = pygame.Surface((VIEW_WIDTH, VIEW_HEIGHT))
        self.renderer = Renderer(self.canvas, self.assets)
        self.window = window
        self.running = True
        self._held: set[int] = set()
        self._music: str | None = None

    def _player(self) -> Player:
        if self.game.player is None:
            raise RuntimeError("the game has not been started")
        return self.game.player

    def _play(self, path: str) -> None:
        try:
            sound = self.assets.sound(path)
        except (FileNotFoundError, pygame.error):
            return
        if sound is not None:
            sound.play()

    @staticmethod
    def _mixer_ready() -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error:
            return False
        return True

    def _sync_music(self) -> None:
        if self.game.music == self._music:
            return
        self._music = self.game.music
        if not self._mixer_ready():
            return
        try:
            pygame.mixer.music.load(str(self.root / self.game.music))
            pygame.mixer.music.set_volume(1.0)
            pygame.mixer.music.play(-1)
        except pygame.error:
            return

    def _toggle_music(self) -> None:
        if not pygame.mixer.get_init():
            return
        if self.menus.music:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.pause()

    def _toggle_screen(self) -> None:
        if self.window is None:
            return
        size = FULLSCREEN_SIZE if self.menus.fullscreen else WINDOW_SIZE
        self.window = pygame.display.set_mode(size, pygame.RESIZABLE)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in _ARROWS:
            if event.type == pygame.KEYDOWN:
                self._held.add(event.key)
            else:
                self._held.discard(event.key)
        if self.game.playing:
            if event.type == pygame.KEYUP and self._player().obj.i < 2:
                self.handle_game_key(event.key)
        elif event.type == pygame.KEYDOWN:
            self.handle_menu_key(event.key)

    def handle_game_key(self, key: int) -> None:
        """Act on a key released while playing."""
        game = self.game
        player = self._player()
        if key == pygame.K_t:
            game.inventory.toggle()
        player.obj.i = _ACTION_ROWS.get(key, 0)
        if key == pygame.K_e:
            heavy_attack(game)
        elif key == pygame.K_z:
            speed_attack(game)
        if key == pygame.K_a:
            interact(game)
        if key == pygame.K_DOWN:
            game.i = (game.i + 1) % len(game.scenes)
            spawn = game.scenes[game.i].level_map.spawn
            player.obj.pos = Vec2(spawn.x, spawn.y)
            game.camera = Vec2(spawn.x, CAMERA_Y)
        if key == pygame.K_UP:
            pos = player.obj.pos
            print(f"pos.x: {pos.x:f}; pos.y: {pos.y:f}")

    def handle_menu_key(self, key: int) -> MenuAction | None:
        """Act on a key pressed in the menus; return the action carried out, if any."""
        if key in (pygame.K_UP, pygame.K_DOWN):
            self._play(SOUND_MOVE)
            self.menus.move_cursor(-1 if key == pygame.K_UP else 1)
            return None
        if key != pygame.K_RETURN:
            return None
        page = self.menus.page
        action = self.menus.activate()
        if page != MAIN_PAGE:
            self._play(SOUND_OK)
        if action is MenuAction.START:
            self._play(SOUND_START)
            self.game.start()
        elif action is MenuAction.OPEN_SETTINGS:
            self._play(SOUND_OK)
        elif action is MenuAction.TOGGLE_MODE:
            self.game.eric = self.menus.eric
        elif action is MenuAction.TOGGLE_SCREEN:
            self._toggle_screen()
        elif action is MenuAction.TOGGLE_MUSIC:
            self._toggle_music()
        elif action is MenuAction.QUIT:
            self.running = False
        return action

    def update(self) -> None:
        """Advance movement and animations by one frame."""
        game = self.game
        if not game.playing:
            return
        player = self._player()
        if player.obj.i == 2:
            jump(player)
        move_player(
            game,
            left=pygame.K_LEFT in self._held,
            right=pygame.K_RIGHT in self._held,
        )
        player.animate()
        scene = game.scenes[game.i]
        scene.background.drift()
        if scene.fire.obj.i > 0:
            scene.fire.obj.tick(0.1, 32, 128)
        if game.i == NEXUS and scene.npc is not None:
            scene.npc.obj.tick(0.5, 180, 360)
        animate_mobs(scene.mobs)

    def _present(self) -> None:
        if self.window is None:
            return
        size = self.window.get_size()
        frame = self.canvas if size == self.canvas.get_size() else pygame.transform.scale(self.canvas, size)
        self.window.blit(frame, (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            pygame.display.set_caption(TITLE)
            try:
                pygame.display.set_icon(self.assets.image(ICON))
            except FileNotFoundError:
                pass
            pygame.mouse.set_visible(False)
            clock = pygame.time.Clock()
            self._sync_music()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update()
                if self.renderer.draw(self.game, self.menus):
                    self.running = False
                self._present()
                self._sync_music()
                clock.tick(FRAMERATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="knightofashes", description="A side-scrolling knight adventure.")
    parser.add_argument("--root", default=".", help="directory holding the asset and map folders")
    args = parser.parse_args(argv)
    App(args.root).run()
    return 0