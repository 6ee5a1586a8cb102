"""Components attached to game objects: the base class, scripts and renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from .base import Base
from .enums import ComponentType, SortingLayer


class Component(Base):
    """A piece of behaviour owned by a game object."""

    def __init__(self, component_type: ComponentType) -> None:
        super().__init__()
        self.owner: Any = None
        self._component_type = ComponentType(component_type)

    @property
    def component_type(self) -> ComponentType:
        return self._component_type

    def begin_play(self) -> None:
        """Hook called when the owning level starts."""

    def tick(self, dt: float) -> None:
        """Hook called once per frame."""

    def final_tick(self, dt: float) -> None:
        """Hook called after every object has ticked."""

    def render(self, canvas: Any, camera: Any) -> None:
        """Hook that draws the component onto the canvas."""

    def save(self, stream: BinaryIO) -> None:
        """Write the component's state; components without state write nothing."""

    def load(self, stream: BinaryIO) -> None:
        """Read the component's state; components without state read nothing."""


class Script(Component):
    """A component that carries game logic."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SCRIPT)


class Renderer(Component, ABC):
    """A component that draws its owner, ordered by sorting layer."""

    def __init__(self, component_type: ComponentType) -> None:
        super().__init__(component_type)
        self.sorting_layer = SortingLayer.NONE
        self.order_in_layer = 0

    @abstractmethod
    def render(self, canvas: Any, camera: Any) -> None:
        """Draw the owner onto the canvas."""