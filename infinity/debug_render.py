"""Short-lived debug shapes drawn on top of a frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from PIL import Image, ImageDraw

from .drawing import brush_color, pen_color
from .enums import BrushType, PenType
from .geometry import Vec2

# Virtual-key code of the Enter key, which toggles debug drawing.
TOGGLE_KEY = 0x0D


class DebugShape(IntEnum):
    RECTANGLE = 0
    CIRCLE = 1
    LINE = 2


@dataclass
class DebugShapeInfo:
    """A shape to draw; for lines pos is the start and scale the end."""

    shape: DebugShape
    pos: Vec2
    scale: Vec2
    pen: PenType
    brush: BrushType = BrushType.HOLLOW
    cur_time: float = 0.0
    duration: float = 0.0


def _ink(color: tuple[int, int, int] | None, mode: str) -> tuple[int, ...] | None:
    if color is None:
        return None
    return (*color, 255) if mode == "RGBA" else color


@dataclass
class DebugRenderer:
    """Draws queued debug shapes until their duration has passed."""

    shapes: list[DebugShapeInfo] = field(default_factory=list)
    show: bool = True

    def add(self, info: DebugShapeInfo) -> None:
        self.shapes.append(info)

    def render(self, canvas: Image.Image, keys: Any, dt: float) -> None:
        """Draw every shape, age it by dt and drop expired ones."""
        if keys is not None and keys.button_down(TOGGLE_KEY):
            self.show = not self.show
        kept = []
        for info in self.shapes:
            if self.show:
                self._draw(canvas, info)
            info.cur_time += dt
            if info.cur_time < info.duration:
                kept.append(info)
        self.shapes = kept

    @staticmethod
    def _draw(canvas: Image.Image, info: DebugShapeInfo) -> None:
        draw = ImageDraw.Draw(canvas)
        outline = _ink(pen_color(info.pen), canvas.mode)
        if info.shape is DebugShape.LINE:
            draw.line(
                [(int(info.pos.x), int(info.pos.y)), (int(info.scale.x), int(info.scale.y))],
                fill=outline,
            )
            return
        fill = _ink(brush_color(info.brush), canvas.mode)
        half = info.scale / 2.0 if not info.scale.is_zero() else Vec2()
        left = int(info.pos.x - half.x)
        top = int(info.pos.y - half.y)
        right = int(info.pos.x + half.x) - 1
        bottom = int(info.pos.y + half.y) - 1
        if right < left or bottom < top:
            return
        box = (left, top, right, bottom)
        if info.shape is DebugShape.RECTANGLE:
            draw.rectangle(box, outline=outline, fill=fill)
        else:
            draw.ellipse(box, outline=outline, fill=fill)


def draw_debug_rect(
    renderer: DebugRenderer,
    center: Vec2,
    scale: Vec2,
    pen: PenType,
    brush: BrushType = BrushType.HOLLOW,
    duration: float = 0.0,
) -> None:
    renderer.add(DebugShapeInfo(DebugShape.RECTANGLE, center, scale, pen, brush, 0.0, duration))


def draw_debug_rect_lt(
    renderer: DebugRenderer,
    left_top: Vec2,
    scale: Vec2,
    pen: PenType,
    brush: BrushType = BrushType.HOLLOW,
    duration: float = 0.0,
) -> None:
    center = left_top + (scale / 2.0)
    renderer.add(DebugShapeInfo(DebugShape.RECTANGLE, center, scale, pen, brush, 0.0, duration))


def draw_debug_circle(
    renderer: DebugRenderer,
    center: Vec2,
    scale: Vec2,
    pen: PenType,
    brush: BrushType = BrushType.HOLLOW,
    duration: float = 0.0,
) -> None:
    renderer.add(DebugShapeInfo(DebugShape.CIRCLE, center, scale, pen, brush, 0.0, duration))


def draw_debug_circle_lt(
    renderer: DebugRenderer,
    left_top: Vec2,
    scale: Vec2,
    pen: PenType,
    brush: BrushType = BrushType.HOLLOW,
    duration: float = 0.0,
) -> None:
    center = left_top + (scale / 2.0)
    renderer.add(DebugShapeInfo(DebugShape.CIRCLE, center, scale, pen, brush, 0.0, duration))


def draw_debug_line(
    renderer: DebugRenderer,
    start: Vec2,
    end: Vec2,
    pen: PenType,
    duration: float = 0.0,
) -> None:
    renderer.add(DebugShapeInfo(DebugShape.LINE, start, end, pen, BrushType.COUNT, 0.0, duration))