"""A keyed registry that creates and loads every kind of asset."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Callable, Iterable, TypeVar

from .base import Asset
from .flipbook import Flipbook
from .gameobject import GameObject
from .geometry import Vec2
from .prefab import Prefab
from .sprite import Sprite
from .texture import Texture
from .tile import Tile

_A = TypeVar("_A", bound=Asset)


class AssetLoadError(Exception):
    """An asset file could not be read."""


class AssetManager:
    """Holds textures, sprites, flipbooks, tiles and prefabs by key."""

    def __init__(self, content_path: str | Path | None = None) -> None:
        if content_path is None:
            content_path = Path.cwd().parent / "Resources"
        self.content_path = Path(content_path)
        self.textures: dict[str, Texture] = {}
        self.sprites: dict[str, Sprite] = {}
        self.flipbooks: dict[str, Flipbook] = {}
        self.tiles: dict[str, Tile] = {}
        self.prefabs: dict[str, Prefab] = {}

    def _load(
        self,
        store: dict[str, _A],
        factory: Callable[[], _A],
        key: str,
        relative_path: str,
        *,
        set_name: bool = True,
    ) -> _A:
        existing = store.get(key)
        if existing is not None:
            return existing
        asset = factory()
        try:
            asset.load(relative_path, self)
        except (OSError, ValueError, EOFError, struct.error) as error:
            raise AssetLoadError(
                f"failed to load {asset.asset_type.name.lower()} {key!r} "
                f"from {relative_path!r}"
            ) from error
        if set_name:
            asset.name = key
        asset.key = key
        asset.relative_path = relative_path
        store[key] = asset
        return asset

    def get_texture(self, key: str) -> Texture | None:
        return self.textures.get(key)

    def load_texture(self, key: str, relative_path: str) -> Texture:
        return self._load(self.textures, Texture, key, relative_path)

    def create_texture(self, key: str, width: int, height: int) -> Texture:
        existing = self.textures.get(key)
        if existing is not None:
            return existing
        texture = Texture()
        texture.create(width, height)
        self.textures[key] = texture
        return texture

    def get_sprite(self, key: str) -> Sprite | None:
        return self.sprites.get(key)

    def load_sprite(self, key: str, relative_path: str) -> Sprite:
        """Load a sprite; its name is kept as stored in the file."""
        return self._load(self.sprites, Sprite, key, relative_path, set_name=False)

    def create_sprite(
        self,
        key: str,
        texture: Texture | None,
        left_top: Vec2,
        size: Vec2,
        offset: Vec2,
        duration: float = 0.0,
    ) -> Sprite:
        existing = self.sprites.get(key)
        if existing is not None:
            return existing
        sprite = Sprite()
        sprite.create(texture, left_top, size, offset, duration)
        sprite.name = key
        sprite.key = key
        self.sprites[key] = sprite
        return sprite

    def get_flipbook(self, key: str) -> Flipbook | None:
        return self.flipbooks.get(key)

    def load_flipbook(self, key: str, relative_path: str) -> Flipbook:
        return self._load(self.flipbooks, Flipbook, key, relative_path)

    def create_flipbook(self, key: str, sprites: Iterable[Sprite | None]) -> Flipbook:
        existing = self.flipbooks.get(key)
        if existing is not None:
            return existing
        flipbook = Flipbook()
        for sprite in sprites:
            flipbook.add_sprite(sprite)
        flipbook.name = key
        flipbook.key = key
        self.flipbooks[key] = flipbook
        return flipbook

    def get_tile(self, key: str) -> Tile | None:
        return self.tiles.get(key)

    def load_tile(self, key: str, relative_path: str) -> Tile:
        return self._load(self.tiles, Tile, key, relative_path)

    def create_tile(self, key: str, sprite: Sprite | None) -> Tile:
        existing = self.tiles.get(key)
        if existing is not None:
            return existing
        tile = Tile()
        tile.sprite = sprite
        tile.name = key
        tile.key = key
        self.tiles[key] = tile
        return tile

    def get_prefab(self, key: str) -> Prefab | None:
        return self.prefabs.get(key)

    def load_prefab(self, key: str, relative_path: str) -> Prefab:
        return self._load(self.prefabs, Prefab, key, relative_path)

    def create_prefab(self, key: str, game_object: GameObject | None) -> Prefab:
        existing = self.prefabs.get(key)
        if existing is not None:
            return existing
        prefab = Prefab()
        prefab.name = key
        prefab.key = key
        prefab.game_object = game_object
        self.prefabs[key] = prefab
        return prefab