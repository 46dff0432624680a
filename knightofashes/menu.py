"""The title menu and the settings page."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto

from knightofashes.geometry import Vec2

MAIN_PAGE = 0
SETTINGS_PAGE = 1

MENU_FONT = "./asset/font/font.ttf"
TITLE_IMAGE = "./asset/bg/title.png"
BUTTON_IMAGE = "./asset/btn/btn.png"
SOUND_OK = "./asset/sound/ok.ogg"
SOUND_MOVE = "./asset/sound/move.ogg"
SOUND_START = "./asset/sound/start.ogg"


class MainChoice(IntEnum):
    """Entries of the title menu."""

    PLAY = 0
    SETTINGS = 1
    QUIT = 2


class SettingsChoice(IntEnum):
    """Entries of the settings page."""

    MODE = 0
    SCREEN = 1
    MUSIC = 2
    BACK = 3
    QUIT = 4


class MenuAction(Enum):
    """What the application should do after an entry was activated."""

    START = auto()
    OPEN_SETTINGS = auto()
    TOGGLE_MODE = auto()
    TOGGLE_SCREEN = auto()
    TOGGLE_MUSIC = auto()
    BACK = auto()
    QUIT = auto()


_POSITIONS: dict[int, tuple[tuple[int, int], ...]] = {
    MAIN_PAGE: ((640, 409), (640, 459), (640, 509)),
    SETTINGS_PAGE: ((740, 309), (740, 359), (740, 409), (640, 609), (640, 659)),
}

_ERIC_LABEL = 2
_SCREEN_LABEL = 4
_MUSIC_LABEL = 6


@dataclass
class _MenuText:
    """A line of text on a menu page."""

    text: str
    size: int
    pos: Vec2


def _main_texts() -> list[_MenuText]:
    return [
        _MenuText("start", 30, Vec2(640, 400)),
        _MenuText("option", 30, Vec2(640, 450)),
        _MenuText("quit", 30, Vec2(640, 500)),
    ]


def _settings_texts() -> list[_MenuText]:
    return [
        _MenuText("OPTION", 55, Vec2(640, 50)),
        _MenuText("eric mode", 30, Vec2(540, 300)),
        _MenuText("no", 25, Vec2(740, 300)),
        _MenuText("fullscreen", 30, Vec2(540, 350)),
        _MenuText("no", 25, Vec2(740, 350)),
        _MenuText("music", 30, Vec2(566, 400)),
        _MenuText("yes", 25, Vec2(740, 400)),
        _MenuText("back", 32, Vec2(640, 600)),
        _MenuText("quit", 32, Vec2(640, 650)),
    ]


def cursor_position(page: int, index: int) -> Vec2:
    """Where the selection frame sits for entry ``index`` of ``page``."""
    positions = _POSITIONS.get(page)
    if positions is None or not 0 <= index < len(positions):
        raise ValueError(f"no entry {index} on menu page {page}")
    x, y = positions[index]
    return Vec2(x, y)


def _wrap(index: int, step: int, count: int) -> int:
    if index + step < 0:
        return count - 1
    return (index + step) % count


def _set_flag_label(texts: list[_MenuText], index: int, flag: bool) -> None:
    """Show ``flag`` as "yes" or "no" in the label at ``index``."""
    texts[index].text = "yes" if flag else "no"


@dataclass
class Menus:
    """State of both menu pages and of the settings they control."""

    page: int = MAIN_PAGE
    main_cursor: MainChoice = MainChoice.PLAY
    settings_cursor: SettingsChoice = SettingsChoice.MODE
    eric: bool = False
    fullscreen: bool = False
    music: bool = True
    main_texts: list[_MenuText] = field(default_factory=_main_texts)
    settings_texts: list[_MenuText] = field(default_factory=_settings_texts)

    def move_cursor(self, step: int) -> Vec2:
        """Move the selection on the current page; return the frame's new position."""
        if self.page == MAIN_PAGE:
            self.main_cursor = MainChoice(_wrap(self.main_cursor, step, len(MainChoice)))
            return cursor_position(MAIN_PAGE, self.main_cursor)
        self.settings_cursor = SettingsChoice(
            _wrap(self.settings_cursor, step, len(SettingsChoice))
        )
        return cursor_position(SETTINGS_PAGE, self.settings_cursor)

    def activate(self) -> MenuAction:
        """Carry out the selected entry."""
        if self.page == MAIN_PAGE:
            if self.main_cursor == MainChoice.QUIT:
                return MenuAction.QUIT
            if self.main_cursor == MainChoice.PLAY:
                return MenuAction.START
            self.page = SETTINGS_PAGE
            return MenuAction.OPEN_SETTINGS
        choice = self.settings_cursor
        if choice == SettingsChoice.MODE:
            self.eric = not self.eric
            _set_flag_label(self.settings_texts, _ERIC_LABEL, self.eric)
            return MenuAction.TOGGLE_MODE
        if choice == SettingsChoice.SCREEN:
            self.fullscreen = not self.fullscreen
            _set_flag_label(self.settings_texts, _SCREEN_LABEL, self.fullscreen)
            return MenuAction.TOGGLE_SCREEN
        if choice == SettingsChoice.MUSIC:
            self.music = not self.music
            _set_flag_label(self.settings_texts, _MUSIC_LABEL, self.music)
            return MenuAction.TOGGLE_MUSIC
        if choice == SettingsChoice.BACK:
            self.page = MAIN_PAGE
            return MenuAction.BACK
        return MenuAction.QUIT