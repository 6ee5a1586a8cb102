import pytest

from infinity.enums import LevelType, TaskType
from infinity.level import Level
from infinity.levels import LevelManager
from infinity.tasks import Task, TaskManager


class RecordingLevel(Level):
    def __init__(self, log, label):
        super().__init__()
        self.log = log
        self.label = label

    def on_enter(self):
        self.log.append(("enter", self.label))

    def on_exit(self):
        self.log.append(("exit", self.label))

    def tick(self, dt):
        self.log.append(("tick", self.label, dt))

    def final_tick(self, dt):
        self.log.append(("final", self.label, dt))

    def render(self, canvas):
        self.log.append(("render", self.label, canvas))


@pytest.fixture
def setup():
    log = []
    title = RecordingLevel(log, "title")
    game = RecordingLevel(log, "game")
    manager = LevelManager()
    manager.init({LevelType.TITLE: title, LevelType.GAME: game}, LevelType.TITLE)
    return manager, title, game, log


def test_init_enters_start_level(setup):
    manager, title, _, log = setup
    assert manager.current_level is title
    assert log == [("enter", "title")]


def test_loading_same_level_does_nothing(setup):
    manager, title, _, log = setup
    manager.load_level(LevelType.TITLE)
    assert manager.current_level is title
    assert log == [("enter", "title")]


def test_switch_exits_then_enters(setup):
    manager, _, game, log = setup
    manager.load_level(LevelType.GAME)
    assert manager.current_level is game
    assert log[1:] == [("exit", "title"), ("enter", "game")]


def test_missing_level_leaves_none_current(setup):
    manager, _, _, log = setup
    manager.load_level(LevelType.SPRITE_EDITOR)
    assert manager.current_level is None
    assert log[-1] == ("exit", "title")


def test_frame_calls_forwarded(setup):
    manager, _, _, log = setup
    manager.tick(0.5)
    manager.final_tick(0.25)
    manager.render("canvas")
    assert log[1:] == [
        ("tick", "title", 0.5),
        ("final", "title", 0.25),
        ("render", "title", "canvas"),
    ]


def test_no_current_level_is_harmless():
    manager = LevelManager()
    manager.tick(1.0)
    manager.final_tick(1.0)
    manager.render(None)
    assert manager.current_level is None
    assert manager.levels == {}


def test_change_level_task(setup):
    manager, _, game, _ = setup
    tasks = TaskManager()
    tasks.add_task(Task(TaskType.CHANGE_LEVEL, LevelType.GAME))
    tasks.tick(manager)
    assert manager.current_level is game
    assert tasks.tasks == []