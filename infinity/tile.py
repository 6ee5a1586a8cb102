"""Tiles: assets that refer to a single sprite."""

from __future__ import annotations

from typing import Any

from .base import Asset
from .binio import read_asset_info, read_wstring, write_asset_info, write_wstring
from .enums import AssetType
from .sprite import Sprite


class Tile(Asset):
    """A map tile drawn with one sprite."""

    def __init__(self) -> None:
        super().__init__(AssetType.TILE)
        self.sprite: Sprite | None = None

    def save(self, relative_path: str, manager: Any) -> None:
        """Write the tile, recording relative_path as its own path."""
        self.relative_path = relative_path
        with self._full_path(relative_path, manager).open("wb") as stream:
            write_wstring(stream, self.name)
            write_wstring(stream, self.key)
            write_wstring(stream, self.relative_path)
            write_asset_info(stream, self.sprite)

    def load(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("rb") as stream:
            self.name = read_wstring(stream)
            self.key = read_wstring(stream)
            self.relative_path = read_wstring(stream)
            self.sprite = read_asset_info(stream, AssetType.SPRITE, manager)