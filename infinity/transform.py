"""Position, rotation and scale of a game object."""

from __future__ import annotations

from typing import Any

from .component import Component
from .enums import ComponentType
from .geometry import Vec2


class Transform(Component):
    """Placement of a game object in the world, with a parent hierarchy."""

    def __init__(self) -> None:
        super().__init__(ComponentType.TRANSFORM)
        self.parent: Transform | None = None
        self.children: list[Transform] = []
        self.position = Vec2(0.0, 0.0)
        self.rotation = Vec2(0.0, 0.0)
        self.scale = Vec2(1.0, 1.0)

    def translate(self, delta: Vec2) -> None:
        """Move the position by delta."""
        self.position = self.position + delta

    def set_parent(self, parent: Transform) -> None:
        """Attach to a parent and register with its children."""
        self.parent = parent
        parent.children.append(self)

    def add_child(self, child: Transform) -> None:
        """Attach a child transform to this one."""
        child.set_parent(self)

    def view_pos(self, camera: Any) -> Vec2:
        """The position as seen through the camera."""
        return camera.view_pos(self.position)