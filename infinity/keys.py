"""Keyboard and mouse state tracked frame by frame."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .geometry import Vec2

KEY_TYPE_COUNT = 256


class Key(IntEnum):
    """Virtual-key codes of the keys the engine reads."""

    LBUTTON = 0x01
    RBUTTON = 0x02
    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27
    CTRL = 0x11
    LSHIFT = 0xA0
    ENTER = 0x0D
    ESC = 0x1B
    SPACE = 0x20


class KeyState(IntEnum):
    NONE = 0
    TAP = 1
    PRESSED = 2
    RELEASED = 3
    COUNT = 4


_HELD = (KeyState.TAP, KeyState.PRESSED)


def _advance(state: KeyState, is_down: bool) -> KeyState:
    if is_down:
        return KeyState.PRESSED if state in _HELD else KeyState.TAP
    return KeyState.RELEASED if state in _HELD else KeyState.NONE


class KeyManager:
    """Turns raw key-down sets into tap, pressed and released states."""

    def __init__(self) -> None:
        self._states: list[KeyState] = []
        self.mouse_pos = Vec2()

    def init(self) -> None:
        """Track every one of the 256 key codes, all released."""
        missing = KEY_TYPE_COUNT - len(self._states)
        if missing > 0:
            self._states.extend([KeyState.NONE] * missing)

    def tick(
        self,
        pressed: Iterable[int],
        focused: bool,
        mouse_pos: Vec2 | None = None,
    ) -> None:
        """Update every key from the codes held down this frame.

        Without focus every key is let go at once and input is ignored.
        """
        if focused:
            down = {int(code) & 0xFF for code in pressed}
            self._states = [
                _advance(state, code in down) for code, state in enumerate(self._states)
            ]
            if mouse_pos is not None:
                self.mouse_pos = mouse_pos
        else:
            # Held keys pass through RELEASED and end up NONE in the same frame.
            self._states = [KeyState.NONE] * len(self._states)

    def _state(self, key: int) -> KeyState:
        return self._states[int(key) & 0xFF]

    def button(self, key: int) -> bool:
        """True while the key is held beyond its first frame."""
        return self._state(key) is KeyState.PRESSED

    def button_down(self, key: int) -> bool:
        """True in the frame the key goes down."""
        return self._state(key) is KeyState.TAP

    def button_up(self, key: int) -> bool:
        """True in the frame the key is let go."""
        return self._state(key) is KeyState.RELEASED