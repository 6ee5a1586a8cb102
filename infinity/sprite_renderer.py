"""A renderer that draws a single sprite centred on its owner."""

from __future__ import annotations

from typing import Any

from .component import Renderer
from .enums import ComponentType
from .sprite import Sprite
from .transform import Transform


class SpriteRenderer(Renderer):
    """Draws its sprite centred on the owner's world position."""

    def __init__(self) -> None:
        super().__init__(ComponentType.SPRITERENDERER)
        self.sprite: Sprite | None = None

    def render(self, canvas: Any, camera: Any) -> None:
        """Draw the sprite so that its centre lies on the owner's position."""
        if self.sprite is None:
            raise ValueError("sprite renderer has no sprite")
        if self.owner is None:
            raise ValueError("sprite renderer has no owner")
        transform = self.owner.get_component(Transform)
        self.sprite.render(canvas, transform.position - (self.sprite.size / 2))