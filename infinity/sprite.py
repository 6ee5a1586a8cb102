"""Sprites: rectangular regions of an atlas texture."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from PIL import Image

from .base import Asset
from .binio import (
    read_asset_info,
    read_float,
    read_vec2,
    read_wstring,
    write_asset_info,
    write_float,
    write_vec2,
    write_wstring,
)
from .drawing import _alpha_blit
from .enums import AssetType
from .geometry import Vec2
from .texture import Texture

DEFAULT_DURATION = 0.1


class SpriteMode(IntEnum):
    SINGLE = 0
    MULTIPLE = 1


@dataclass
class Border:
    """Nine-slice border widths."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


class Sprite(Asset):
    """A region of an atlas with a draw offset and an animation duration."""

    def __init__(self) -> None:
        super().__init__(AssetType.SPRITE)
        self.mode = SpriteMode.SINGLE
        self.atlas: Texture | None = None
        self.left_top = Vec2()
        self.size = Vec2()
        self.offset = Vec2()
        self.duration = DEFAULT_DURATION
        self.border = Border()

    def create(
        self,
        atlas: Texture | None,
        left_top: Vec2,
        size: Vec2,
        offset: Vec2,
        duration: float = 0.0,
    ) -> None:
        """Set the atlas region, offset and duration."""
        self.atlas = atlas
        self.left_top = left_top
        self.size = size
        self.offset = offset
        self.duration = duration

    def set_border(self, left: int, right: int, top: int, bottom: int) -> None:
        self.border = Border(left, right, top, bottom)

    def render(self, canvas: Image.Image, origin: Vec2) -> None:
        """Blend the sprite's region at origin shifted by its offset."""
        if self.atlas is None or self.atlas.image is None:
            raise ValueError("sprite has no atlas image")
        x, y = int(self.left_top.x), int(self.left_top.y)
        w, h = int(self.size.x), int(self.size.y)
        region = self.atlas.image.crop((x, y, x + w, y + h))
        dest = origin + self.offset
        _alpha_blit(canvas, region, int(dest.x), int(dest.y))

    def save(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("wb") as stream:
            write_wstring(stream, self.name)
            write_wstring(stream, self.key)
            write_wstring(stream, self.relative_path)
            write_vec2(stream, self.left_top)
            write_vec2(stream, self.size)
            write_vec2(stream, self.offset)
            write_float(stream, self.duration)
            write_asset_info(stream, self.atlas)

    def load(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("rb") as stream:
            self.name = read_wstring(stream)
            self.key = read_wstring(stream)
            self.relative_path = read_wstring(stream)
            self.left_top = read_vec2(stream)
            self.size = read_vec2(stream)
            self.offset = read_vec2(stream)
            self.duration = read_float(stream)
            self.atlas = read_asset_info(stream, AssetType.TEXTURE, manager)