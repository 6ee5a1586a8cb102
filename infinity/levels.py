"""Switching between levels and driving the current one."""

from __future__ import annotations

from typing import Any, Mapping

from .enums import LevelType
from .level import Level


class LevelManager:
    """Owns the levels by type and forwards frame calls to the current one."""

    def __init__(self) -> None:
        self._levels: dict[LevelType, Level] = {}
        self._current: Level | None = None

    @property
    def current_level(self) -> Level | None:
        return self._current

    @property
    def levels(self) -> dict[LevelType, Level]:
        return dict(self._levels)

    def init(
        self,
        levels: Mapping[LevelType, Level],
        start: LevelType = LevelType.TILEMAP_EDITOR,
    ) -> None:
        """Register the levels and enter the starting one."""
        self._levels = {LevelType(kind): level for kind, level in levels.items()}
        self.load_level(start)

    def load_level(self, level_type: LevelType) -> None:
        """Leave the current level and enter the one of the given type.

        A type with no level leaves no level current.
        """
        following = self._levels.get(LevelType(level_type))
        if self._current is following:
            return
        if self._current is not None:
            self._current.on_exit()
        self._current = following
        if self._current is not None:
            self._current.on_enter()

    def tick(self, dt: float) -> None:
        if self._current is not None:
            self._current.tick(dt)

    def final_tick(self, dt: float) -> None:
        if self._current is not None:
            self._current.final_tick(dt)

    def render(self, canvas: Any) -> None:
        if self._current is not None:
            self._current.render(canvas)