"""Prefabs: saved game-object hierarchies."""

from __future__ import annotations

from typing import Any

from .base import Asset
from .binio import read_wstring, write_wstring
from .enums import AssetType
from .gameobject import GameObject


class Prefab(Asset):
    """An asset holding a root game object and its children."""

    def __init__(self) -> None:
        super().__init__(AssetType.PREFAB)
        self.game_object: GameObject | None = None

    def load(self, relative_path: str, manager: Any) -> None:
        with self._full_path(relative_path, manager).open("rb") as stream:
            self.name = read_wstring(stream)
            self.key = read_wstring(stream)
            self.relative_path = read_wstring(stream)
            root = GameObject()
            root.load(stream)
            self.game_object = root

    def save(self, relative_path: str, manager: Any) -> None:
        if self.game_object is None:
            raise ValueError("prefab has no game object")
        with self._full_path(relative_path, manager).open("wb") as stream:
            write_wstring(stream, self.name)
            write_wstring(stream, self.key)
            write_wstring(stream, self.relative_path)
            self.game_object.save(stream)