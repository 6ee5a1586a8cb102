"""Pen and brush colours, text output and the checkered background."""

from __future__ import annotations

from typing import Iterator

from PIL import Image, ImageDraw

from .enums import BrushType, PenType
from .geometry import Vec2

Color = tuple[int, int, int]
Cell = tuple[int, int, int, int, BrushType]

TEXT_COLOR: Color = (0, 0, 0)
DEFAULT_SQUARE_SIZE = 20

_PEN_COLORS: dict[PenType, Color] = {
    PenType.RED: (255, 0, 0),
    PenType.GREEN: (0, 255, 0),
    PenType.BLUE: (0, 0, 255),
    PenType.GRAY: (120, 120, 120),
    PenType.YELLOW: (0, 255, 255),
}

_BRUSH_COLORS: dict[BrushType, Color | None] = {
    BrushType.RED: (255, 0, 0),
    BrushType.GREEN: (0, 255, 0),
    BrushType.BLUE: (0, 0, 255),
    BrushType.WHITE: (255, 255, 255),
    BrushType.GRAY: (200, 200, 200),
    BrushType.DARKGRAY: (49, 49, 49),
    BrushType.EMERALD: (0, 255, 255),
    BrushType.HOLLOW: None,
}


def pen_color(pen: PenType) -> Color:
    """The outline colour of a pen."""
    try:
        return _PEN_COLORS[PenType(pen)]
    except KeyError:
        raise ValueError(f"pen {pen!r} has no colour") from None


def brush_color(brush: BrushType) -> Color | None:
    """The fill colour of a brush; None for the hollow brush."""
    try:
        return _BRUSH_COLORS[BrushType(brush)]
    except KeyError:
        raise ValueError(f"brush {brush!r} has no colour") from None


def _ink(color: Color, mode: str) -> tuple[int, ...]:
    return (*color, 255) if mode == "RGBA" else color


def _alpha_blit(canvas: Image.Image, source: Image.Image, x: int, y: int) -> None:
    """Blend an image onto the canvas at (x, y), clipping at the edges."""
    left = max(0, -x)
    top = max(0, -y)
    right = min(source.width, canvas.width - x)
    bottom = min(source.height, canvas.height - y)
    if right <= left or bottom <= top:
        return
    part = source.crop((left, top, right, bottom))
    if part.mode != "RGBA":
        part = part.convert("RGBA")
    dest = (x + left, y + top)
    if canvas.mode == "RGBA":
        canvas.alpha_composite(part, dest=dest)
    else:
        canvas.paste(part, dest, part)


def draw_text(canvas: Image.Image, pos: Vec2, text: str) -> None:
    """Draw text with its top-left corner at pos."""
    draw = ImageDraw.Draw(canvas)
    draw.text((int(pos.x), int(pos.y)), text, fill=_ink(TEXT_COLOR, canvas.mode))


def _cdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _cmod(a: int, b: int) -> int:
    return a - b * _cdiv(a, b)


def _parity(value: int, square_size: int) -> int:
    return _cmod(_cdiv(value, square_size), 2)


def _pick(x: int, y: int, square_size: int) -> BrushType:
    same = _parity(x, square_size) == _parity(y, square_size)
    return BrushType.WHITE if same else BrushType.GRAY


def checkered_cells(
    width: int,
    height: int,
    resolution: Vec2,
    square_size: int = DEFAULT_SQUARE_SIZE,
) -> Iterator[Cell]:
    """Yield (left, top, right, bottom, brush) squares of a centred checkerboard.

    The area of width x height is centred in the resolution; right and
    bottom edges are exclusive.
    """
    if square_size <= 0:
        raise ValueError("square size must be positive")
    start_x = int((resolution.x - width) / 2)
    start_y = int((resolution.y - height) / 2)
    end_x = start_x + width
    end_y = start_y + height

    for y in range(start_y, end_y, square_size):
        for x in range(start_x, end_x, square_size):
            yield (
                x,
                y,
                min(x + square_size, end_x),
                min(y + square_size, end_y),
                _pick(x, y, square_size),
            )

    rest_w = _cmod(width, square_size)
    if rest_w != 0:
        x = start_x + (width - rest_w)
        for y in range(start_y, end_y, square_size):
            yield x, y, end_x, min(y + square_size, end_y), _pick(x, y, square_size)

    rest_h = _cmod(height, square_size)
    if rest_h != 0:
        y = start_y + (height - rest_h)
        for x in range(start_x, end_x, square_size):
            yield x, y, min(x + square_size, end_x), end_y, _pick(x, y, square_size)


def draw_checkered_pattern(
    canvas: Image.Image,
    width: int,
    height: int,
    resolution: Vec2,
    square_size: int = DEFAULT_SQUARE_SIZE,
) -> None:
    """Fill a centred width x height area with a white and gray checkerboard."""
    draw = ImageDraw.Draw(canvas)
    for left, top, right, bottom, brush in checkered_cells(
        width, height, resolution, square_size
    ):
        color = brush_color(brush)
        if color is None or right <= left or bottom <= top:
            continue
        draw.rectangle((left, top, right - 1, bottom - 1), fill=_ink(color, canvas.mode))