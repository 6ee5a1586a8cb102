"""The engine: owns the managers and runs one frame at a time."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from PIL import Image, ImageDraw

from .assets import AssetManager
from .debug_render import DebugRenderer
from .drawing import brush_color
from .enums import BrushType, LevelType
from .geometry import Vec2
from .keys import KeyManager
from .level import TitleLevel
from .levels import LevelManager
from .player import GameLevel
from .sprite_editor import SpriteEditorLevel
from .tasks import TaskManager
from .timing import TimeManager

BACK_BUFFER_KEY = "BackBuffer"


class Engine:
    """Ties input, timing, levels, debug drawing and deferred tasks together.

    Each frame is drawn into a back buffer and copied into ``frame``.
    Levels that are not registered (such as the tilemap editor) leave no
    level current when chosen as ``start_level``.
    """

    def __init__(self) -> None:
        self.resolution = Vec2()
        self.assets = AssetManager()
        self.keys = KeyManager()
        self.time = TimeManager(on_fps=self._set_title)
        self.levels = LevelManager()
        self.tasks = TaskManager()
        self.debug_renderer = DebugRenderer()
        self.back_buffer = None
        self.frame: Image.Image | None = None
        self.title = ""
        self.start_level = LevelType.TILEMAP_EDITOR

    def _set_title(self, text: str) -> None:
        self.title = text

    def init(
        self,
        width: int,
        height: int,
        content_path: str | Path | None = None,
    ) -> None:
        """Size the window, make the back buffer and start every manager."""
        self.change_window_size(width, height)
        self.assets = AssetManager(content_path)
        self.back_buffer = self.assets.create_texture(BACK_BUFFER_KEY, width, height)
        self.keys.init()
        self.time.init()
        self.levels.init(
            {
                LevelType.TITLE: TitleLevel(self.resolution),
                LevelType.GAME: GameLevel(self.assets, self.resolution),
                LevelType.SPRITE_EDITOR: SpriteEditorLevel(self),
            },
            self.start_level,
        )

    def progress(
        self,
        pressed: Iterable[int] = (),
        focused: bool = True,
        mouse_pos: Vec2 | None = None,
    ) -> Image.Image:
        """Run one frame and return the finished picture."""
        if self.back_buffer is None or self.back_buffer.image is None:
            raise ValueError("engine is not initialised")

        self.keys.tick(pressed, focused, mouse_pos)
        dt = self.time.tick()
        self.levels.tick(dt)
        self.levels.final_tick(dt)

        canvas = self.back_buffer.image
        clear = (*brush_color(BrushType.DARKGRAY), 255)
        ImageDraw.Draw(canvas).rectangle(
            (0, 0, canvas.width - 1, canvas.height - 1), fill=clear
        )

        self.levels.render(canvas)
        self.debug_renderer.render(canvas, self.keys, dt)
        self.frame = canvas.copy()

        self.tasks.tick(self.levels)
        return self.frame

    def change_window_size(self, width: int, height: int) -> None:
        """Set the resolution and resize the back buffer to match."""
        self.resolution = Vec2(float(width), float(height))
        if self.back_buffer is not None:
            self.back_buffer.resize(width, height)