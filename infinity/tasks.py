"""Deferred requests that are carried out at the end of a frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .enums import LayerType, LevelType, TaskType


@dataclass
class Task:
    """A deferred request.

    CREATE_OBJECT: param0 is the object, param1 its layer.
    DELETE_OBJECT: param0 is the object.
    CHANGE_LEVEL: param0 is the level type.
    """

    type: TaskType
    param0: Any = None
    param1: Any = None


@dataclass
class TaskManager:
    """Queues tasks and runs them once per frame."""

    tasks: list[Task] = field(default_factory=list)
    garbage: list[Any] = field(default_factory=list)

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def tick(self, level_manager: Any) -> None:
        """Drop last frame's garbage, then run every queued task."""
        self.garbage.clear()
        for task in self.tasks:
            match TaskType(task.type):
                case TaskType.CREATE_OBJECT:
                    obj = task.param0
                    level_manager.current_level.add_object(obj, LayerType(task.param1))
                    obj.begin_play()
                case TaskType.DELETE_OBJECT:
                    obj = task.param0
                    if not obj.dead:
                        obj.dead = True
                        self.garbage.append(obj)
                case TaskType.CHANGE_LEVEL:
                    level_manager.load_level(LevelType(task.param0))
        self.tasks.clear()