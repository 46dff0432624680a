import pytest

from knightofashes.geometry import Vec2
from knightofashes.menu import (
    MAIN_PAGE,
    SETTINGS_PAGE,
    MainChoice,
    MenuAction,
    Menus,
    SettingsChoice,
    cursor_position,
)


def test_cursor_positions_from_source():
    assert cursor_position(MAIN_PAGE, MainChoice.PLAY) == Vec2(640, 409)
    assert cursor_position(SETTINGS_PAGE, SettingsChoice.QUIT) == Vec2(640, 659)


def test_cursor_position_invalid():
    with pytest.raises(ValueError):
        cursor_position(MAIN_PAGE, 3)
    with pytest.raises(ValueError):
        cursor_position(5, 0)
    with pytest.raises(ValueError):
        cursor_position(SETTINGS_PAGE, -1)


def test_main_cursor_wraps_both_ways():
    menus = Menus()
    pos = menus.move_cursor(-1)
    assert menus.main_cursor == MainChoice.QUIT
    assert pos == cursor_position(MAIN_PAGE, MainChoice.QUIT)
    menus.move_cursor(1)
    assert menus.main_cursor == MainChoice.PLAY


def test_main_cursor_full_cycle():
    menus = Menus()
    for _ in MainChoice:
        menus.move_cursor(1)
    assert menus.main_cursor == MainChoice.PLAY


def test_settings_cursor_wraps():
    menus = Menus(page=SETTINGS_PAGE)
    menus.move_cursor(-1)
    assert menus.settings_cursor == SettingsChoice.QUIT
    assert menus.main_cursor == MainChoice.PLAY
    menus.move_cursor(1)
    assert menus.settings_cursor == SettingsChoice.MODE


def test_main_page_actions():
    assert Menus().activate() is MenuAction.START
    assert Menus(main_cursor=MainChoice.QUIT).activate() is MenuAction.QUIT
    menus = Menus(main_cursor=MainChoice.SETTINGS)
    assert menus.activate() is MenuAction.OPEN_SETTINGS
    assert menus.page == SETTINGS_PAGE


def test_mode_toggle_round_trip():
    menus = Menus(page=SETTINGS_PAGE)
    assert menus.activate() is MenuAction.TOGGLE_MODE
    assert menus.eric is True
    assert menus.settings_texts[2].text == "yes"
    menus.activate()
    assert menus.eric is False
    assert menus.settings_texts[2].text == "no"


def test_screen_toggle():
    menus = Menus(page=SETTINGS_PAGE, settings_cursor=SettingsChoice.SCREEN)
    assert menus.activate() is MenuAction.TOGGLE_SCREEN
    assert menus.fullscreen is True
    assert menus.settings_texts[4].text == "yes"


def test_music_toggle():
    menus = Menus(page=SETTINGS_PAGE, settings_cursor=SettingsChoice.MUSIC)
    assert menus.music is True
    assert menus.activate() is MenuAction.TOGGLE_MUSIC
    assert menus.music is False
    assert menus.settings_texts[6].text == "no"


def test_back_and_quit_from_settings():
    menus = Menus(page=SETTINGS_PAGE, settings_cursor=SettingsChoice.BACK)
    assert menus.activate() is MenuAction.BACK
    assert menus.page == MAIN_PAGE
    quitting = Menus(page=SETTINGS_PAGE, settings_cursor=SettingsChoice.QUIT)
    assert quitting.activate() is MenuAction.QUIT
    assert quitting.page == SETTINGS_PAGE


def test_default_labels():
    menus = Menus()
    assert [label.text for label in menus.main_texts] == ["start", "option", "quit"]
    assert menus.settings_texts[0].text == "OPTION"