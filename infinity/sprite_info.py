"""Actions behind the sprite editor's slicing and sprite-info dialogs."""

from __future__ import annotations

import re
from typing import Any

from .geometry import Vec2

_UINT_MASK = 0xFFFFFFFF
_LEADING_NUMBER = re.compile(r"\s*([+-]?)(\d*)")


def _parse_unsigned(value: int | str | None) -> int | None:
    """Read a dialog field as an unsigned 32-bit number.

    None and the empty string mean the field was left blank. Text is read
    up to its first non-digit; text without leading digits reads as 0.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value & _UINT_MASK
    text = str(value)
    if not text:
        return None
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    number = int(digits) if digits else 0
    if sign == "-":
        number = -number
    return number & _UINT_MASK


def slice_by_cell_size(level: Any, size_x: int, size_y: int) -> None:
    """Cut the level's texture into cells of size_x by size_y pixels."""
    level.grid_by_cell_size(Vec2(size_x, size_y), Vec2(0.0, 0.0), Vec2(0.0, 0.0))


def apply_sprite_info(
    level: Any,
    name: str | None,
    left: int | str | None = None,
    right: int | str | None = None,
    top: int | str | None = None,
    bottom: int | str | None = None,
) -> None:
    """Rename the selected sprite, update its border and its file path.

    The name becomes both name and key. A blank border field keeps the
    current value. The relative path becomes Sprite\\<key>.sprite.
    """
    sprite = level.selected_sprite()

    if name is not None:
        sprite.name = name
        sprite.key = name

    border = sprite.border
    values = {
        "left": _parse_unsigned(left),
        "right": _parse_unsigned(right),
        "top": _parse_unsigned(top),
        "bottom": _parse_unsigned(bottom),
    }
    sprite.set_border(
        border.left if values["left"] is None else values["left"],
        border.right if values["right"] is None else values["right"],
        border.top if values["top"] is None else values["top"],
        border.bottom if values["bottom"] is None else values["bottom"],
    )

    sprite.relative_path = f"Sprite\\{sprite.key}.sprite"