"""Flipbooks: timed sequences of sprites."""

from __future__ import annotations

from typing import Any

from .base import Asset
from .binio import (
    read_asset_info,
    read_size,
    read_wstring,
    write_asset_info,
    write_size,
    write_wstring,
)
from .enums import AssetType
from .sprite import Sprite


class Flipbook(Asset):
    """An animation that steps through its sprites by their durations."""

    def __init__(self) -> None:
        super().__init__(AssetType.FLIPBOOK)
        self.player: Any = None
        self.sprites: list[Sprite | None] = []
        self.index = 0
        self.time = 0.0
        self.completed = False

    @property
    def max_count(self) -> int:
        return len(self.sprites)

    def current_sprite(self) -> Sprite | None:
        return self.sprites[self.index]

    def sprite_at(self, index: int) -> Sprite | None:
        return self.sprites[index]

    def add_sprite(self, sprite: Sprite | None) -> None:
        self.sprites.append(sprite)

    def reset(self) -> None:
        """Rewind to the first frame."""
        self.time = 0.0
        self.index = 0
        self.completed = False

    def final_tick(self, dt: float) -> None:
        """Advance time and move at most one frame forward."""
        if self.completed:
            return
        self.time += dt
        duration = self.sprites[self.index].duration
        if duration < self.time:
            self.time -= duration
            if self.index < len(self.sprites) - 1:
                self.index += 1
            else:
                self.completed = True

    def save(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("wb") as stream:
            write_wstring(stream, self.name)
            write_wstring(stream, self.key)
            write_wstring(stream, self.relative_path)
            write_size(stream, len(self.sprites))
            for sprite in self.sprites:
                write_asset_info(stream, sprite)

    def load(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("rb") as stream:
            self.name = read_wstring(stream)
            self.key = read_wstring(stream)
            self.relative_path = read_wstring(stream)
            count = read_size(stream)
            self.sprites.extend(
                read_asset_info(stream, AssetType.SPRITE, manager)
                for _ in range(count)
            )