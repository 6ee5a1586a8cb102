"""A small 2D tile-based role-playing game engine with binary asset files, layered levels and a sprite-slicing editor level."""

__version__ = "0.1.0"