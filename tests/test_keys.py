import pytest

from infinity.debug_render import TOGGLE_KEY
from infinity.geometry import Vec2
from infinity.keys import Key, KeyManager


@pytest.fixture
def keys():
    manager = KeyManager()
    manager.init()
    return manager


def test_enter_matches_debug_toggle_key(keys):
    keys.tick({TOGGLE_KEY}, True)
    assert keys.button_down(Key.ENTER)
    assert not keys.button_down(Key.SPACE)


def test_all_keys_start_released(keys):
    for key in Key:
        assert not keys.button(key)
        assert not keys.button_down(key)
        assert not keys.button_up(key)


def test_tap_press_release_cycle(keys):
    keys.tick({Key.SPACE}, True)
    assert keys.button_down(Key.SPACE)
    assert not keys.button(Key.SPACE)

    keys.tick({Key.SPACE}, True)
    assert keys.button(Key.SPACE)
    assert not keys.button_down(Key.SPACE)

    keys.tick(set(), True)
    assert keys.button_up(Key.SPACE)
    assert not keys.button(Key.SPACE)

    keys.tick(set(), True)
    assert not keys.button_up(Key.SPACE)
    assert not keys.button_down(Key.SPACE)


def test_only_pressed_keys_change(keys):
    keys.tick({Key.LEFT}, True)
    assert keys.button_down(Key.LEFT)
    assert not keys.button_down(Key.RIGHT)


def test_integer_codes_are_accepted(keys):
    keys.tick([int(Key.ESC)], True)
    assert keys.button_down(int(Key.ESC))
    assert keys.button_down(Key.ESC)


def test_losing_focus_clears_held_keys(keys):
    keys.tick({Key.UP}, True)
    keys.tick({Key.UP}, True)
    assert keys.button(Key.UP)
    keys.tick({Key.UP}, False)
    assert not keys.button(Key.UP)
    assert not keys.button_up(Key.UP)
    assert not keys.button_down(Key.UP)


def test_mouse_position_follows_focus(keys):
    keys.tick(set(), True, Vec2(10, 20))
    assert keys.mouse_pos == Vec2(10, 20)
    keys.tick(set(), False, Vec2(99, 99))
    assert keys.mouse_pos == Vec2(10, 20)


def test_query_before_init_raises():
    with pytest.raises(IndexError):
        KeyManager().button(Key.SPACE)


def test_init_is_repeatable(keys):
    keys.tick({Key.CTRL}, True)
    keys.init()
    assert keys.button_down(Key.CTRL)