# infinity

A small 2D engine for tile-based role-playing games. Game objects live
in layered levels and go through a begin-play / tick / final-tick /
render cycle. Assets (textures, sprites, flipbooks, tiles and prefabs)
are stored as compact binary files below a content directory. Images
are handled with Pillow, and every frame is drawn into a Pillow image.

## Modules

- `infinity.geometry`: `Vec2` (floats) and `Vec2Int` (integers), frozen
  2D vectors with `+`, `-`, `*`, `/` against vectors or scalars,
  `length()`, plus `Vec2.distance()`, `Vec2.is_zero()` and
  `Vec2Int.length_squared()`. Division by a zero component raises
  `ZeroDivisionError`. `Vec2Int` division truncates toward zero.
- `infinity.enums`: shared enumerations (`LayerType`, `ComponentType`,
  `AssetType`, `TaskType`, `LevelType`, `PenType`, `BrushType`, `Dir`,
  `SortingLayer`, `PostProc`, `PokemonType`).
- `infinity.base`: `Base` (a unique `id` and a `name`) and the abstract
  `Asset` (adds `key`, `relative_path`, `load()` and `save()`).
- `infinity.binio`: little-endian readers and writers for the file
  format. Strings are a one-byte length followed by UTF-16LE code units,
  at most 255 units. Counts are 64-bit, and ints and floats are 32-bit.
  `write_asset_info` / `read_asset_info` store a reference to an asset
  as a presence flag, a key and a path.
- `infinity.assets`: `AssetManager`, a keyed cache for every asset kind.
  `get_*` looks an asset up and returns `None` if it is missing.
  `create_*` builds one in memory. `load_*` reads one from the content
  directory. An asset already cached under a key is returned unchanged.
  A file that cannot be read raises `AssetLoadError`. With no content
  path the manager uses `Resources` next to the current directory.
- `infinity.texture`, `infinity.sprite`, `infinity.flipbook`,
  `infinity.tile`, `infinity.prefab`: the asset types.
  - `Texture` loads `.png` or `.bmp` files as RGBA.
  - `Sprite` is a rectangle of an atlas texture, with an offset, a frame
    duration and a nine-slice `Border`.
  - `Flipbook` is a sequence of sprites.
  - `Tile` refers to one sprite.
  - `Prefab` holds a root `GameObject`.
- `infinity.component`, `infinity.transform`, `infinity.camera`,
  `infinity.gameobject`: components and the objects that own them.
  - Every `GameObject` gets a `Transform`.
  - `get_component` accepts a class or a `ComponentType`.
  - `Camera` centres the view on its target, or on its owner when it
    has no target.
- `infinity.sprite_renderer`, `infinity.flipbook_player`, `infinity.grid`:
  components for drawing.
  - `SpriteRenderer` draws a sprite centred on its owner.
  - `FlipbookPlayer` holds flipbooks by index and feeds the current
    frame to a `SpriteRenderer`.
  - `Grid` draws cell lines and maps positions to cells.
- `infinity.level`, `infinity.levels`, `infinity.tasks`: levels,
  switching between them, and deferred tasks.
  - `Level` keeps 32 layers of objects and a camera.
  - `TitleLevel` does nothing per frame.
  - `LevelManager` switches between levels.
  - `TaskManager` runs the deferred `Task`s: create an object, delete an
    object, change level.
- `infinity.player`: `PlayerController`, a script that centres its owner
  and loops the `Red_Move_Down` flipbook from
  `Flipbook\Red_Move_Down.flip`, and `GameLevel`, which starts with a
  `Player` object.
- `infinity.debug_render`: `DebugRenderer` and the helpers
  `draw_debug_rect`, `draw_debug_rect_lt`, `draw_debug_circle`,
  `draw_debug_circle_lt` and `draw_debug_line`. They queue shapes that
  stay on screen for their duration. Enter toggles whether they are
  drawn.
- `infinity.drawing`: pen and brush colours, `draw_text`, and the
  centred checkerboard (`checkered_cells`, `draw_checkered_pattern`).
- `infinity.keys`: `KeyManager` turns the set of key codes held down
  each frame into tap / pressed / released states. Losing focus releases
  every key.
- `infinity.timing`: `TimeManager` measures the time between frames.
  When more than a second has gathered, it reports `"FPS : <count>"`
  to a callback.
- `infinity.sprite_editor`, `infinity.sprite_info`: `SpriteEditorLevel`
  loads a texture, slices it into a grid of sprites, outlines them,
  selects the one clicked on and saves them.
  - `slice_by_cell_size` slices the texture into cells of a given size.
  - `apply_sprite_info` renames the selected sprite and updates its
    border and its `Sprite\<key>.sprite` path.
- `infinity.engine`: `Engine` owns the managers and runs one frame for
  each `progress()` call.

## Assets

Relative paths may use `\` or `/`. The folders under the content
directory must already exist.

```python
from pathlib import Path

from infinity.assets import AssetManager
from infinity.geometry import Vec2

assets = AssetManager(Path("Resources"))

atlas = assets.load_texture("atlas", "Texture/atlas.png")
left = assets.create_sprite("walk_0", atlas, Vec2(0, 0), Vec2(32, 32), Vec2(0, 0), 0.1)
right = assets.create_sprite("walk_1", atlas, Vec2(32, 0), Vec2(32, 32), Vec2(0, 0), 0.1)
left.relative_path = "Sprite/walk_0.sprite"
right.relative_path = "Sprite/walk_1.sprite"

walk = assets.create_flipbook("walk", [left, right])
assert assets.get_flipbook("walk") is walk

left.save(left.relative_path, assets)
right.save(right.relative_path, assets)
walk.save("Flipbook/walk.flip", assets)

again = AssetManager(Path("Resources")).load_flipbook("walk", "Flipbook/walk.flip")
```

A saved sprite or flipbook refers to other assets by key and relative
path. Loading it loads those assets through the same manager. Each
referenced asset therefore needs a path that can be loaded.

## Animation

A flipbook moves forward by the frame time it is given, at most one
frame per call. It stops on its last sprite (`completed` becomes true).
`reset()` starts it over.

```python
walk.final_tick(0.15)
print(walk.current_sprite().key)   # walk_1
walk.reset()
```

## Running frames

```python
from pathlib import Path

from infinity.engine import Engine
from infinity.enums import LevelType
from infinity.geometry import Vec2

engine = Engine()
engine.start_level = LevelType.SPRITE_EDITOR
engine.init(512, 384, Path("Resources"))

# one frame: the key codes held down, whether the window has focus, the mouse
frame = engine.progress(set(), True, Vec2(0, 0))   # a Pillow image
```

`Engine.init` registers the title, game and sprite-editor levels. The
default `start_level` is the tilemap editor, which is not registered,
so with the default no level is current and frames show only the
cleared background.

## What the package does not do

- It opens no window and reads no real keyboard or mouse. The caller
  passes input to `progress()` and shows or saves the returned image.
- There are no tilemaps, tilemap renderer or tilemap editor, no flipbook
  editor, and no map files. `Grid.add_tilemap` only keeps whatever is
  given to it.
- Loading a game object or prefab restores its layer, name and children.
  Of its components, only the transform is read back.
- There are no dialogs. The sprite editor's actions are called as
  functions instead.
- There is no command-line entry point.

## Tests

The tests use pytest, which comes with the `test` extra:

```
pip install -e .[test]
pytest
```