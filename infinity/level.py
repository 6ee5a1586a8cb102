"""Levels: layered collections of game objects with a camera."""

from __future__ import annotations

from typing import Any

from .base import Base
from .camera import Camera
from .enums import LayerType
from .gameobject import GameObject
from .geometry import Vec2


class Level(Base):
    """A scene whose objects are kept in layers and drawn through a camera."""

    def __init__(self, resolution: Vec2 = Vec2()) -> None:
        super().__init__()
        self._layers: list[list[GameObject]] = [[] for _ in range(LayerType.COUNT)]
        camera_object = GameObject()
        self.camera: Camera = camera_object.add_component(Camera(resolution))
        self.add_object(camera_object, LayerType.CAMERA)

    @staticmethod
    def _index(layer: int) -> int:
        index = int(layer)
        if not 0 <= index < LayerType.COUNT:
            raise IndexError(f"layer {layer!r} out of range")
        return index

    def _all_objects(self) -> list[GameObject]:
        return [obj for layer in self._layers for obj in layer]

    def begin_play(self) -> None:
        for obj in self._all_objects():
            obj.begin_play()

    def tick(self, dt: float) -> None:
        for obj in self._all_objects():
            obj.tick(dt)

    def final_tick(self, dt: float) -> None:
        for obj in self._all_objects():
            obj.final_tick(dt)

    def render(self, canvas: Any) -> None:
        """Drop dead objects and render the rest, layer by layer."""
        for layer in self._layers:
            layer[:] = [obj for obj in layer if not obj.dead]
            for obj in layer:
                obj.render(canvas, self.camera)

    def on_enter(self) -> None:
        """Called when the level becomes current; starts its objects."""
        self.begin_play()

    def on_exit(self) -> None:
        """Called when another level becomes current."""

    def objects(self, layer: LayerType) -> tuple[GameObject, ...]:
        return tuple(self._layers[self._index(layer)])

    def add_object(self, game_object: GameObject, layer: LayerType) -> None:
        self._layers[self._index(layer)].append(game_object)
        game_object.layer = LayerType(layer)

    def delete_object(self, game_object: GameObject, tasks: Any) -> None:
        """Queue deletion of an object that is in its layer of this level."""
        for obj in list(self._layers[self._index(game_object.layer)]):
            if obj is game_object:
                game_object.destroy(tasks)

    def remove_objects(self, layer: int) -> None:
        """Remove every object in one layer."""
        self._layers[self._index(layer)].clear()

    def destroy(self) -> None:
        """Remove every object in every layer."""
        for index in range(LayerType.COUNT):
            self.remove_objects(index)


class TitleLevel(Level):
    """The title screen; it runs no per-frame logic of its own."""

    def begin_play(self) -> None:
        """The title screen starts nothing."""

    def tick(self, dt: float) -> None:
        """The title screen does not tick its objects."""

    def on_enter(self) -> None:
        """Entering the title screen starts nothing."""

    def on_exit(self) -> None:
        """Leaving the title screen needs no clean-up."""