import io

import pytest

from infinity.component import Component, Renderer, Script
from infinity.enums import ComponentType, SortingLayer


def test_component_keeps_its_type():
    component = Component(ComponentType.GRID)
    assert component.component_type is ComponentType.GRID
    assert component.owner is None


def test_script_has_script_type():
    assert Script().component_type is ComponentType.SCRIPT


def test_components_get_distinct_ids():
    first, second = Script(), Script()
    assert first.id != second.id


def test_base_save_writes_nothing():
    stream = io.BytesIO()
    Script().save(stream)
    assert stream.getvalue() == b""


def test_base_load_reads_nothing():
    stream = io.BytesIO(b"abc")
    Script().load(stream)
    assert stream.tell() == 0


def test_renderer_is_abstract():
    with pytest.raises(TypeError):
        Renderer(ComponentType.SPRITERENDERER)


def test_renderer_subclass_defaults():
    class Dot(Renderer):
        def __init__(self):
            super().__init__(ComponentType.SPRITERENDERER)
            self.calls = []

        def render(self, canvas, camera):
            self.calls.append((canvas, camera))

    dot = Dot()
    assert dot.sorting_layer is SortingLayer.NONE
    assert dot.order_in_layer == 0
    assert dot.component_type is ComponentType.SPRITERENDERER
    stream = io.BytesIO()
    Renderer.save(dot, stream)
    assert stream.getvalue() == b""
    dot.render("canvas", "camera")
    assert dot.calls == [("canvas", "camera")]