"""Enumerations shared across the engine."""

from enum import IntEnum


class PenType(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    GRAY = 3
    YELLOW = 4
    COUNT = 5


class BrushType(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    WHITE = 3
    GRAY = 4
    DARKGRAY = 5
    EMERALD = 6
    HOLLOW = 7
    COUNT = 8


class LayerType(IntEnum):
    NONE = 0
    MAP = 1
    TILE = 2
    PLAYER = 3
    MONSTER = 4
    CAMERA = 5
    UI = 31
    COUNT = 32


class ComponentType(IntEnum):
    TRANSFORM = 0
    CAMERA = 1
    COLLIDER = 2
    FLIPBOOKPLAYER = 3
    RIGIDBODY = 4
    STATEMACHINE = 5
    SPRITERENDERER = 6
    TILEMAP = 7
    TILEMAPRENDERER = 8
    GRID = 9
    SCRIPT = 10


class AssetType(IntEnum):
    TEXTURE = 0
    SPRITE = 1
    FLIPBOOK = 2
    TILE = 3
    PREFAB = 4
    SOUND = 5


class TaskType(IntEnum):
    CREATE_OBJECT = 0
    DELETE_OBJECT = 1
    CHANGE_LEVEL = 2
    COUNT = 3


class PostProc(IntEnum):
    FADE_IN = 0
    FADE_OUT = 1
    HURT = 2
    NIGHT = 3
    NONE = 4


class LevelType(IntEnum):
    TITLE = 0
    GAME = 1
    SPRITE_EDITOR = 2
    FLIPBOOK_EDITOR = 3
    TILEMAP_EDITOR = 4
    COUNT = 5


class Dir(IntEnum):
    DOWN = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    COUNT = 4
    NONE = 5


class SortingLayer(IntEnum):
    NONE = 0
    GROUND = 1
    WALKINFRONT = 2
    COLLISION = 3
    PLAYER = 4
    WALKBEHIND = 5
    COUNT = 6


class PokemonType(IntEnum):
    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17
    COSMIC = 18
    UNKNOWN = 19