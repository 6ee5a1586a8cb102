"""A camera that maps world coordinates to the view."""

from __future__ import annotations

from typing import Any

from .component import Component
from .enums import ComponentType
from .geometry import Vec2
from .transform import Transform

DEFAULT_SPEED = 200.0


class Camera(Component):
    """Centres the view on a target object, or on its owner."""

    def __init__(self, resolution: Vec2 = Vec2()) -> None:
        super().__init__(ComponentType.CAMERA)
        self.resolution = resolution
        self.target: Any = None
        self.look_at = Vec2()
        self.look_at_offset = Vec2()
        self.diff = Vec2()
        self.speed = DEFAULT_SPEED

    def view_pos(self, world_pos: Vec2) -> Vec2:
        """Convert a world position to a view position."""
        return world_pos - self.diff

    def world_pos(self, view_pos: Vec2) -> Vec2:
        """Convert a view position to a world position."""
        return view_pos + self.diff

    def final_tick(self, dt: float) -> None:
        """Look at the target (or owner) and update the view offset."""
        followed = self.target if self.target is not None else self.owner
        if followed is None:
            raise ValueError("camera has neither a target nor an owner")
        self.look_at = followed.get_component(Transform).position
        self.diff = (self.look_at + self.look_at_offset) - (self.resolution / 2.0)