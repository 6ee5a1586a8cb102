"""The player character and the game level that holds it."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .component import Script
from .enums import Dir, LayerType
from .flipbook_player import FlipbookPlayer
from .gameobject import GameObject
from .geometry import Vec2
from .level import Level
from .sprite_renderer import SpriteRenderer
from .transform import Transform

DEFAULT_SPEED = 5.0
START_FLIPBOOK_KEY = "Red_Move_Down"
START_FLIPBOOK_PATH = "Flipbook\\Red_Move_Down.flip"


class PlayerState(IntEnum):
    IDLE = 0
    MOVE = 1
    RUN = 2


class PlayerController(Script):
    """Places the player and sets up its animation on begin_play."""

    def __init__(self, assets: Any, resolution: Vec2 = Vec2()) -> None:
        super().__init__()
        self.assets = assets
        self.resolution = resolution
        self.flipbook_player: FlipbookPlayer | None = None
        self.sprite_renderer: SpriteRenderer | None = None
        self.state = PlayerState.IDLE
        self.dir = Dir.DOWN
        self.speed = DEFAULT_SPEED

    def begin_play(self) -> None:
        """Centre the owner and start the walking animation in a loop."""
        if self.owner is None:
            raise ValueError("player controller has no owner")
        self.owner.get_component(Transform).position = self.resolution / 2
        self.flipbook_player = self.owner.add_component(FlipbookPlayer())
        self.sprite_renderer = self.owner.add_component(SpriteRenderer())
        self.flipbook_player.sprite_renderer = self.sprite_renderer
        self.flipbook_player.add_flipbook(
            0, self.assets.load_flipbook(START_FLIPBOOK_KEY, START_FLIPBOOK_PATH)
        )
        self.flipbook_player.play(0, True)

    def _set_dir(self, direction: Dir) -> None:
        self.dir = Dir(direction)

    def _set_state(self, state: PlayerState) -> None:
        if self.state == state:
            return
        self.state = PlayerState(state)


class GameLevel(Level):
    """The playable level; it starts with a player object."""

    def __init__(self, assets: Any, resolution: Vec2 = Vec2()) -> None:
        super().__init__(resolution)
        player = GameObject("Player")
        player.add_component(PlayerController(assets, resolution))
        self.add_object(player, LayerType.PLAYER)