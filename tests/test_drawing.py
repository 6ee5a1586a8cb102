import pytest
from PIL import Image, ImageChops

from infinity.drawing import (
    brush_color,
    checkered_cells,
    draw_checkered_pattern,
    draw_text,
    pen_color,
)
from infinity.enums import BrushType, PenType
from infinity.geometry import Vec2


def test_pen_colors_fixed_by_engine():
    assert pen_color(PenType.RED) == (255, 0, 0)
    assert pen_color(PenType.YELLOW) == (0, 255, 255)
    assert pen_color(PenType.GRAY) == (120, 120, 120)


def test_brush_colors_fixed_by_engine():
    assert brush_color(BrushType.DARKGRAY) == (49, 49, 49)
    assert brush_color(BrushType.WHITE) == (255, 255, 255)
    assert brush_color(BrushType.HOLLOW) is None


def test_count_members_have_no_colour():
    with pytest.raises(ValueError):
        pen_color(PenType.COUNT)
    with pytest.raises(ValueError):
        brush_color(BrushType.COUNT)


def test_checkered_cells_alternate():
    cells = list(checkered_cells(40, 40, Vec2(40, 40), 20))
    brushes = {(c[0], c[1]): c[4] for c in cells}
    assert len(cells) == 4
    assert brushes[(0, 0)] == brushes[(20, 20)]
    assert brushes[(0, 0)] != brushes[(20, 0)]
    assert brushes[(20, 0)] == brushes[(0, 20)]


def test_checkered_cells_stay_inside_area():
    width, height = 50, 30
    resolution = Vec2(100, 80)
    start_x = int((resolution.x - width) / 2)
    start_y = int((resolution.y - height) / 2)
    cells = list(checkered_cells(width, height, resolution, 20))
    for left, top, right, bottom, brush in cells:
        assert start_x <= left <= right <= start_x + width
        assert start_y <= top <= bottom <= start_y + height
        assert brush in (BrushType.WHITE, BrushType.GRAY)


def test_checkered_cells_reject_bad_square_size():
    with pytest.raises(ValueError):
        list(checkered_cells(10, 10, Vec2(10, 10), 0))


def test_draw_checkered_pattern_covers_area_only():
    width, height = 50, 30
    resolution = Vec2(100, 80)
    canvas = Image.new("RGB", (100, 80), (0, 0, 0))
    draw_checkered_pattern(canvas, width, height, resolution, 20)
    start_x = int((resolution.x - width) / 2)
    start_y = int((resolution.y - height) / 2)
    allowed = {brush_color(BrushType.WHITE), brush_color(BrushType.GRAY)}
    for y in range(canvas.height):
        for x in range(canvas.width):
            pixel = canvas.getpixel((x, y))
            inside = start_x <= x < start_x + width and start_y <= y < start_y + height
            if inside:
                assert pixel in allowed
            else:
                assert pixel == (0, 0, 0)


def test_draw_checkered_pattern_on_rgba_is_opaque():
    canvas = Image.new("RGBA", (40, 40), (0, 0, 0, 0))
    draw_checkered_pattern(canvas, 40, 40, Vec2(40, 40), 20)
    assert canvas.getpixel((0, 0))[3] == 255
    assert canvas.getpixel((39, 39))[3] == 255


def test_draw_text_starts_at_position():
    canvas = Image.new("RGB", (120, 40), (255, 255, 255))
    original = canvas.copy()
    draw_text(canvas, Vec2(10, 5), "FPS")
    box = ImageChops.difference(canvas, original).getbbox()
    assert box is not None
    assert box[0] >= 10
    assert box[1] >= 5