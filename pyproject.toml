[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infinity"
version = "0.1.0"
description = "A small 2D tile-based role-playing game engine with binary sprite, flipbook, tile and prefab assets and a sprite-slicing editor level."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "game-engine",
    "2d",
    "sprites",
    "flipbook",
    "animation",
    "assets",
    "role-playing",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["infinity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
