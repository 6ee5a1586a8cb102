"""Game objects: named holders of components arranged in a hierarchy."""

from __future__ import annotations

from typing import Any, BinaryIO, TypeVar, overload

from .base import Base
from .binio import read_int, read_size, read_wstring, write_int, write_size, write_wstring
from .component import Component
from .enums import ComponentType, LayerType, TaskType
from .transform import Transform

_C = TypeVar("_C", bound=Component)


class GameObject(Base):
    """An object in a level; it always owns a Transform."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.parent: GameObject | None = None
        self.children: list[GameObject] = []
        self.components: list[Component] = []
        self.layer = LayerType.NONE
        self.dead = False
        self.transform: Transform = self.add_component(Transform())

    def begin_play(self) -> None:
        for component in self.components:
            component.begin_play()

    def tick(self, dt: float) -> None:
        for component in self.components:
            component.tick(dt)

    def final_tick(self, dt: float) -> None:
        for component in self.components:
            component.final_tick(dt)

    def render(self, canvas: Any, camera: Any) -> None:
        """Render the components, then the children."""
        for component in self.components:
            component.render(canvas, camera)
        for child in self.children:
            child.render(canvas, camera)

    def set_parent(self, parent: GameObject) -> None:
        self.parent = parent
        parent.children.append(self)
        self.transform.set_parent(parent.transform)

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)
        child.parent = self
        self.transform.add_child(child.transform)

    def add_component(self, component: _C) -> _C:
        """Attach a component and return it."""
        self.components.append(component)
        component.owner = self
        return component

    @overload
    def get_component(self, kind: type[_C]) -> _C | None: ...

    @overload
    def get_component(self, kind: ComponentType) -> Component | None: ...

    def get_component(self, kind: Any) -> Any:
        """The first component of a class or of a ComponentType, or None."""
        if isinstance(kind, type):
            return next((c for c in self.components if isinstance(c, kind)), None)
        wanted = ComponentType(kind)
        return next((c for c in self.components if c.component_type is wanted), None)

    def destroy(self, tasks: Any) -> None:
        """Queue a request to delete this object."""
        from .tasks import Task

        tasks.add_task(Task(type=TaskType.DELETE_OBJECT, param0=self))

    def save(self, stream: BinaryIO) -> None:
        """Write layer, parent name, children and components."""
        write_int(stream, int(self.layer))
        write_wstring(stream, self.parent.name if self.parent is not None else "")
        write_size(stream, len(self.children))
        for child in self.children:
            child.save(stream)
        write_size(stream, len(self.components))
        for component in self.components:
            write_int(stream, int(component.component_type))
            component.save(stream)

    def load(self, stream: BinaryIO) -> None:
        """Read an object written by save.

        The stored parent name becomes this object's name. Only transform
        components are restored; other component types are skipped.
        """
        self.layer = LayerType(read_int(stream))
        self.name = read_wstring(stream)
        for _ in range(read_size(stream)):
            child = GameObject()
            child.load(stream)
            child.set_parent(self)
        for _ in range(read_size(stream)):
            kind = read_int(stream)
            if kind == ComponentType.TRANSFORM:
                self.transform.load(stream)