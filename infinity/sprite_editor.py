"""A level for slicing a texture atlas into sprites."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from PIL import Image

from .camera import Camera
from .debug_render import draw_debug_rect_lt
from .drawing import draw_checkered_pattern
from .enums import LayerType, PenType
from .gameobject import GameObject
from .geometry import Vec2
from .keys import Key
from .level import Level
from .sprite import Sprite
from .texture import Texture

EDITOR_RESOLUTION = (1280, 720)
_TEXTURE_DIR = "Texture\\"


class SpriteEditorLevel(Level):
    """Shows a texture centred on screen and cuts it into a grid of sprites.

    The engine supplies resolution, assets, keys, debug_renderer and
    change_window_size.
    """

    def __init__(self, engine: Any) -> None:
        super().__init__(engine.resolution)
        self.engine = engine
        self.texture: Texture | None = None
        self.offset = Vec2()
        self.padding = Vec2()
        self.rows = 0
        self.columns = 0
        self.pixel_size = Vec2()
        self.sprites: list[Sprite] = []
        self.selected_index = -1
        self.view_camera: Camera | None = None
        self.on_select: Callable[[Sprite], None] | None = None

    def _origin(self) -> Vec2:
        resolution = self.engine.resolution
        return Vec2(
            (resolution.x - self.texture.width) / 2,
            (resolution.y - self.texture.height) / 2,
        )

    def begin_play(self) -> None:
        """Start the objects and add a camera that follows itself."""
        super().begin_play()
        camera_object = GameObject()
        self.view_camera = camera_object.add_component(Camera())
        self.view_camera.target = camera_object
        self.add_object(camera_object, LayerType.CAMERA)

    def tick(self, dt: float) -> None:
        """Outline every sprite and select the one clicked on."""
        keys = self.engine.keys
        mouse = keys.mouse_pos
        previous = self.selected_index
        for index, sprite in enumerate(self.sprites):
            if sprite is None:
                continue
            origin = self._origin()
            left_top = sprite.left_top
            size = sprite.size
            on_sprite = (
                origin.x + left_top.x <= mouse.x <= origin.x + left_top.x + size.x
                and origin.y + left_top.y <= mouse.y <= origin.y + left_top.y + size.y
            )
            if keys.button_down(Key.LBUTTON) and on_sprite:
                self.selected_index = index

            if self.selected_index == index:
                draw_debug_rect_lt(
                    self.engine.debug_renderer, origin + left_top, size, PenType.BLUE
                )
                if previous != self.selected_index and self.on_select is not None:
                    self.on_select(sprite)
            else:
                draw_debug_rect_lt(
                    self.engine.debug_renderer, origin + left_top, size, PenType.GREEN
                )

    def render(self, canvas: Image.Image) -> None:
        """Draw the texture over a checkerboard in the middle of the screen."""
        if self.texture is None:
            return
        if self.view_camera is None:
            raise ValueError("sprite editor has not begun play")
        left_top = self.view_camera.view_pos(self._origin())
        draw_checkered_pattern(
            canvas, self.texture.width, self.texture.height, self.engine.resolution
        )
        self.texture.render(canvas, left_top)

    def on_enter(self) -> None:
        self.engine.change_window_size(*EDITOR_RESOLUTION)
        self.begin_play()

    def load_file(self, path: str | Path) -> None:
        """Start over with the texture at path, which lies below a Texture folder."""
        self.revert()
        full = str(path).replace("/", "\\")
        start = full.find(_TEXTURE_DIR)
        if start < 0:
            raise ValueError(f"{path!s} is not inside a Texture folder")
        relative_path = full[start:]
        name = Path(full.replace("\\", "/")).stem
        texture = self.engine.assets.load_texture(name, relative_path)
        texture.name = name
        self.set_texture(texture)

    def set_texture(self, texture: Texture | None) -> None:
        self.texture = texture

    def grid_by_cell_size(self, size: Vec2, left_top: Vec2, padding: Vec2) -> None:
        """Cut the texture into cells of size, spaced by padding, from left_top."""
        if self.texture is None:
            raise ValueError("no texture to slice")
        name = self.texture.name
        self.rows = int(self.texture.height / (size.y + padding.y))
        self.columns = int(self.texture.width / (size.x + padding.x))
        for i in range(self.rows):
            for j in range(self.columns):
                key = f"{name}_{i * self.columns + j}"
                cell_left_top = Vec2(
                    j * (size.x + padding.x) + left_top.x,
                    i * (size.y + padding.y) + left_top.y,
                )
                sprite = self.engine.assets.create_sprite(
                    key, self.texture, cell_left_top, size, Vec2(0.0, 0.0)
                )
                sprite.relative_path = f"Sprite\\{key}.sprite"
                self.sprites.append(sprite)

    def selected_sprite(self) -> Sprite:
        if self.selected_index < 0:
            raise IndexError("no sprite is selected")
        return self.sprites[self.selected_index]

    def revert(self) -> None:
        """Forget the texture, its sprites and the slicing settings."""
        self.texture = None
        self.sprites.clear()
        self.selected_index = -1
        self.pixel_size = Vec2(0.0, 0.0)
        self.offset = Vec2(0.0, 0.0)
        self.padding = Vec2(0.0, 0.0)

    def apply(self) -> None:
        """Save every sprite to its relative path."""
        for sprite in self.sprites:
            sprite.save(sprite.relative_path, self.engine.assets)