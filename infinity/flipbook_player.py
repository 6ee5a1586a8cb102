"""A component that plays flipbooks through a sprite renderer."""

from __future__ import annotations

from .component import Component
from .enums import ComponentType
from .flipbook import Flipbook
from .sprite_renderer import SpriteRenderer


class FlipbookPlayer(Component):
    """Holds indexed flipbooks and feeds the current frame to a renderer."""

    def __init__(self) -> None:
        super().__init__(ComponentType.FLIPBOOKPLAYER)
        self.flipbooks: list[Flipbook | None] = []
        self.current: Flipbook | None = None
        self.loop = False
        self.sprite_renderer: SpriteRenderer | None = None

    def add_flipbook(self, index: int, flipbook: Flipbook | None) -> None:
        """Store a flipbook at index, growing the table as needed."""
        if index < 0:
            raise IndexError("flipbook index must not be negative")
        if len(self.flipbooks) < index + 1:
            self.flipbooks.extend([None] * (index + 1 - len(self.flipbooks)))
        self.flipbooks[index] = flipbook

    def play(self, index: int, loop: bool) -> None:
        """Make the flipbook at index the current one."""
        self.current = self.flipbooks[index]
        self.loop = loop

    def final_tick(self, dt: float) -> None:
        """Show the current frame, then advance the flipbook."""
        if self.current is None:
            return
        if self.sprite_renderer is None:
            raise ValueError("flipbook player has no sprite renderer")
        self.sprite_renderer.sprite = self.current.current_sprite()
        self.current.final_tick(dt)
        if self.current.completed and self.loop:
            self.current.reset()