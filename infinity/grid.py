"""A grid of square cells that tilemaps are laid out on."""

from __future__ import annotations

from typing import Any

from PIL import Image, ImageDraw

from .component import Component
from .enums import ComponentType
from .geometry import Vec2, Vec2Int
from .transform import Transform

OUTSIDE = Vec2Int(-1, -1)
_LINE_COLOR = (0, 0, 0)


class Grid(Component):
    """Rows and columns of square tiles anchored at the owner's position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.GRID)
        self.tilemaps: list[Any] = []
        self.tile_size = 0
        self.column = 0
        self.row = 0

    def add_tilemap(self, tilemap: Any) -> None:
        self.tilemaps.append(tilemap)

    def _origin(self) -> Vec2:
        if self.owner is None:
            raise ValueError("grid has no owner")
        return self.owner.get_component(Transform).position

    def world_to_cell(self, position: Vec2, camera: Any) -> Vec2Int:
        """The cell under a view position, or (-1, -1) past the last row or column."""
        world = camera.world_pos(position)
        diff = world - self._origin()
        cell = Vec2Int(int(diff.x), int(diff.y)) / self.tile_size
        if self.row <= cell.y or self.column <= cell.x:
            return OUTSIDE
        return cell

    def cell_to_world(self, cell: Vec2Int) -> Vec2:
        """The world position of a cell's top-left corner."""
        return self._origin() + Vec2(cell.x * self.tile_size, cell.y * self.tile_size)

    def render(self, canvas: Any, camera: Any) -> None:
        """Draw the grid lines at the owner's view position."""
        origin = self.owner.get_component(Transform).view_pos(camera)
        self._draw(canvas, origin)

    def render_world_scale(self, canvas: Image.Image) -> None:
        """Draw the grid lines at the owner's world position."""
        self._draw(canvas, self._origin())

    def _draw(self, canvas: Image.Image, origin: Vec2) -> None:
        draw = ImageDraw.Draw(canvas)
        ink = (*_LINE_COLOR, 255) if canvas.mode == "RGBA" else _LINE_COLOR
        x0, y0 = int(origin.x), int(origin.y)
        size = self.tile_size
        for r in range(self.row + 1):
            y = y0 + r * size
            draw.line([(x0, y), (x0 + size * self.column, y)], fill=ink)
        for c in range(self.column + 1):
            x = x0 + c * size
            draw.line([(x, y0), (x, y0 + size * self.row)], fill=ink)