"""Bitmap textures loaded from PNG or BMP files."""

from __future__ import annotations

from typing import Any

from PIL import Image

from .base import Asset
from .drawing import _alpha_blit
from .enums import AssetType
from .geometry import Vec2

_PNG_SUFFIXES = (".png", ".PNG")
_BMP_SUFFIXES = (".bmp", ".BMP")


class Texture(Asset):
    """An RGBA image that can be blended onto a canvas."""

    def __init__(self) -> None:
        super().__init__(AssetType.TEXTURE)
        self.image: Image.Image | None = None

    @property
    def width(self) -> int:
        return self.image.width if self.image is not None else 0

    @property
    def height(self) -> int:
        return self.image.height if self.image is not None else 0

    def create(self, width: int, height: int) -> None:
        """Make a blank opaque black image of the given size."""
        self.image = Image.new("RGBA", (int(width), int(height)), (0, 0, 0, 255))

    def load(self, relative_path: str, manager: Any) -> None:
        """Load a .png or .bmp file below the manager's content path."""
        full_path = self._full_path(relative_path, manager)
        if full_path.suffix not in _PNG_SUFFIXES + _BMP_SUFFIXES:
            raise ValueError(f"unsupported texture format: {full_path.suffix!r}")
        with Image.open(full_path) as source:
            self.image = source.convert("RGBA")

    def resize(self, width: int, height: int) -> None:
        """Replace the image with a new blank one of the given size."""
        self.image = None
        self.create(width, height)

    def render(self, canvas: Image.Image, origin: Vec2) -> None:
        """Alpha-blend the whole texture with its top-left at origin."""
        if self.image is None:
            raise ValueError("texture has no image")
        _alpha_blit(canvas, self.image, int(origin.x), int(origin.y))