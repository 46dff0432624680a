"""Drawing the menus, the levels and the end credits with pygame."""

from __future__ import annotations

from itertools import chain, takewhile
from os import PathLike
from pathlib import Path

import pygame

from knightofashes.geometry import Rect, Vec2
from knightofashes.menu import (
    BUTTON_IMAGE,
    MAIN_PAGE,
    MENU_FONT,
    TITLE_IMAGE,
    Menus,
    cursor_position,
)
from knightofashes.sprite import AnimatedObject
from knightofashes.world import Game

VIEW_WIDTH = 1280
VIEW_HEIGHT = 720
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
NEXUS = 1

_OUTLINE = 2
_TITLE_POS = Vec2(640, 200)
_TITLE_RECT = Rect(0, 0, 1050, 120)
_BUTTON_RECT = Rect(0, 0, 150, 30)
_PLAYER_ORIGIN = (60, 80)


class Assets:
    """Loads images, fonts and sounds below a root directory, once each."""

    def __init__(self, root: str | PathLike[str] = ".") -> None:
        self.root = Path(root)
        self._images: dict[str, pygame.Surface] = {}
        self._fonts: dict[tuple[str | None, int], pygame.font.Font] = {}
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}

    def _locate(self, path: str) -> Path:
        full = self.root / path
        if not full.is_file():
            raise FileNotFoundError(f"missing asset: {full}")
        return full

    def image(self, path: str) -> pygame.Surface:
        """The image stored at ``path``."""
        if path not in self._images:
            self._images[path] = pygame.image.load(str(self._locate(path)))
        return self._images[path]

    def font(self, path: str | None, size: int) -> pygame.font.Font:
        """The font at ``path`` in ``size`` points; ``None`` picks pygame's default font."""
        key = (path, size)
        if key not in self._fonts:
            source = None if path is None else str(self._locate(path))
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.Font(source, size)
        return self._fonts[key]

    def sound(self, path: str) -> pygame.mixer.Sound | None:
        """The sound at ``path``, or None when no audio output is available."""
        if path not in self._sounds:
            full = self._locate(path)
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                sound = pygame.mixer.Sound(str(full))
                sound.set_volume(1.0)
            except pygame.error:
                sound = None
            self._sounds[path] = sound
        return self._sounds[path]


def _crop(image: pygame.Surface, frame: Rect | None) -> pygame.Surface | None:
    if frame is None:
        return image
    area = pygame.Rect(
        int(frame.left), int(frame.top), int(frame.width), int(frame.height)
    ).clip(image.get_rect())
    if area.width <= 0 or area.height <= 0:
        return None
    return image.subsurface(area)


class Renderer:
    """Draws the game on a surface through a camera centred on ``camera``."""

    def __init__(self, surface: pygame.Surface, assets: Assets) -> None:
        self.surface = surface
        self.assets = assets
        self.camera = Vec2(VIEW_WIDTH / 2, VIEW_HEIGHT / 2)

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        return (
            x - (self.camera.x - VIEW_WIDTH / 2),
            y - (self.camera.y - VIEW_HEIGHT / 2),
        )

    def _blit(
        self,
        image: pygame.Surface,
        frame: Rect | None,
        pos: Vec2,
        scale: Vec2,
        origin: tuple[float, float] | None = None,
    ) -> None:
        piece = _crop(image, frame)
        if piece is None:
            return
        width = frame.width if frame is not None else image.get_width()
        height = frame.height if frame is not None else image.get_height()
        ox, oy = origin if origin is not None else (width / 2, height)
        sx, sy = scale.x, scale.y
        size = (
            max(1, round(piece.get_width() * abs(sx))),
            max(1, round(piece.get_height() * abs(sy))),
        )
        if size != piece.get_size():
            piece = pygame.transform.scale(piece, size)
        if sx < 0 or sy < 0:
            piece = pygame.transform.flip(piece, sx < 0, sy < 0)
        left = pos.x + min(-ox * sx, (width - ox) * sx)
        top = pos.y + min(-oy * sy, (height - oy) * sy)
        x, y = self._to_screen(left, top)
        self.surface.blit(piece, (round(x), round(y)))

    def _draw_obj(self, obj: AnimatedObject, origin: tuple[float, float] | None = None) -> None:
        self._blit(self.assets.image(obj.path), obj.current_frame(), obj.pos, obj.scale, origin)

    def _draw_repeated(self, image: pygame.Surface, rect: Rect, pos: Vec2) -> None:
        sx, sy = self._to_screen(pos.x, pos.y)
        clip = pygame.Rect(round(sx), round(sy), int(rect.width), int(rect.height))
        clip = clip.clip(self.surface.get_rect())
        if clip.width <= 0 or clip.height <= 0:
            return
        tile_w, tile_h = image.get_size()
        start_x = sx - rect.left % tile_w
        start_y = sy - rect.top % tile_h
        first_x = start_x + ((clip.left - start_x) // tile_w) * tile_w
        first_y = start_y + ((clip.top - start_y) // tile_h) * tile_h
        previous = self.surface.get_clip()
        self.surface.set_clip(clip)
        y = first_y
        while y < clip.bottom:
            x = first_x
            while x < clip.right:
                self.surface.blit(image, (round(x), round(y)))
                x += tile_w
            y += tile_h
        self.surface.set_clip(previous)

    def _draw_text(self, font_path: str, text: str, size: int, pos: Vec2) -> None:
        font = self.assets.font(font_path, size)
        face = font.render(text, True, WHITE)
        shadow = font.render(text, True, BLACK)
        width, height = face.get_size()
        label = pygame.Surface((width + 2 * _OUTLINE, height + 2 * _OUTLINE), pygame.SRCALPHA)
        for dx in range(-_OUTLINE, _OUTLINE + 1):
            for dy in range(-_OUTLINE, _OUTLINE + 1):
                if dx or dy:
                    label.blit(shadow, (_OUTLINE + dx, _OUTLINE + dy))
        label.blit(face, (_OUTLINE, _OUTLINE))
        x, y = self._to_screen(pos.x, pos.y)
        self.surface.blit(label, (round(x - label.get_width() / 2), round(y - label.get_height() / 2)))

    def draw(self, game: Game, menus: Menus) -> bool:
        """Draw one frame; tell whether the credits are over and the window should close."""
        self.surface.fill(BLACK)
        if not game.playing:
            self.draw_menu(menus)
            return False
        if game.is_end:
            return self.draw_end(game)
        self.draw_scene(game)
        return False

    def draw_menu(self, menus: Menus) -> None:
        """Draw the current menu page and its selection frame."""
        self.camera = Vec2(VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
        button = self.assets.image(BUTTON_IMAGE)
        button_origin = (_BUTTON_RECT.width / 2, _BUTTON_RECT.height / 2)
        if menus.page == MAIN_PAGE:
            for label in menus.main_texts:
                self._draw_text(MENU_FONT, label.text, label.size, label.pos)
            title = self.assets.image(TITLE_IMAGE)
            title_origin = (_TITLE_RECT.width / 2, _TITLE_RECT.height / 2)
            self._blit(title, _TITLE_RECT, _TITLE_POS, Vec2(0.9, 0.9), title_origin)
            position = cursor_position(MAIN_PAGE, menus.main_cursor)
            self._blit(button, _BUTTON_RECT, position, Vec2(1.3, 1.1), button_origin)
            return
        for label in menus.settings_texts:
            self._draw_text(MENU_FONT, label.text, label.size, label.pos)
        position = cursor_position(menus.page, menus.settings_cursor)
        self._blit(button, _BUTTON_RECT, position, Vec2(1, 1), button_origin)

    def draw_scene(self, game: Game) -> None:
        """Draw the current level, its inhabitants, the HUD and the inventory."""
        player = game.player
        if player is None:
            raise RuntimeError("the game has not been started")
        scene = game.scenes[game.i]
        self.camera = game.camera
        background = scene.background
        layers = zip(background.textures[:-1], background.rects, background.positions)
        for path, rect, pos in layers:
            self._draw_repeated(self.assets.image(path), rect, pos)
        self._blit(
            self.assets.image(background.textures[-1]), None,
            background.positions[-1], Vec2(1, 1), (0, 0),
        )
        for mob in scene.mobs:
            self._draw_obj(mob.obj)
        for label in scene.texts:
            self._draw_text(label.font, label.text, label.size, label.pos)
        for item in takewhile(lambda it: it.display, scene.items):
            self._draw_obj(item.obj)
        if game.hud is not None:
            for gauge in chain(game.hud.hearts, game.hud.stamina):
                self._draw_obj(gauge)
        if game.i == NEXUS and scene.npc is not None:
            self._draw_obj(scene.npc.obj)
        self._draw_obj(scene.fire.obj)
        self._draw_obj(player.obj, _PLAYER_ORIGIN)
        inventory = game.inventory
        if inventory.display:
            origin = (inventory.origin.x, inventory.origin.y)
            self._blit(self.assets.image(inventory.path), None, inventory.pos, inventory.scale, origin)
            for slot in inventory.items:
                if slot.display:
                    self._draw_obj(slot)

    def draw_end(self, game: Game) -> bool:
        """Scroll and draw the credits; tell whether the last line has left the screen."""
        credits = game.credits
        if credits is None:
            raise RuntimeError("the credits have not been loaded")
        done = credits.scroll()
        self.camera = Vec2(VIEW_WIDTH / 2, VIEW_HEIGHT / 2)
        for label in credits.lines:
            self._draw_text(label.font, label.text, label.size, label.pos)
        return done

    def draw_hitbox(self, rect: Rect, color: tuple[int, int, int] = BLUE) -> None:
        """Outline ``rect`` with a one pixel line."""
        x, y = self._to_screen(rect.left, rect.top)
        box = pygame.Rect(round(x), round(y), round(rect.width), round(rect.height))
        pygame.draw.rect(self.surface, color, box, width=1)