# bullsparade

A small side-scrolling platformer built on pygame. The player walks, jumps and
falls through a level read from a Tiled JSON map. Solid ground comes from the
map's `collisions` object layer, and the start position comes from its
`spawn points` layer. While the player walks, the level scrolls under them
until the edge of the map is reached.

## Installing

```
pip install .
```

With the test tools as well:

```
pip install ".[test]"
```

## Playing

Start the game from the directory that holds the game content:

```
bullsparade
```

By default the game looks for:

- `content/maps/map_1.json`: the level map, in Tiled's JSON map format
- `content/tilesets/`: the tileset images the map refers to (only the file
  name of each tileset image is used)
- `character.png`: the player's sprite sheet, made of 16×16 frames

Other locations can be given on the command line:

```
bullsparade --map path/to/map.json --sprite-sheet path/to/sheet.png --tileset-dir path/to/tilesets
```

If a file is missing or cannot be read, the command prints an error and exits
with status 1.

The window shows a 320×256 playfield at twice its size. The game logic steps
15 times a second.

Controls:

| Key         | Action                 |
|-------------|------------------------|
| Right arrow | walk right             |
| Left arrow  | walk left              |
| Up arrow    | move up                |
| Down arrow  | move down              |
| Space       | jump (while on ground) |

Only one direction is taken at a time, in the order right, left, up, down.

## Using the pieces

The building blocks can also be used on their own:

- `bullsparade.geometry`: `Vector2`, `Size` and `CollisionSide`
- `bullsparade.images`: `read_image_file`, which loads an image into a pygame
  surface
- `bullsparade.animator`: `Animator` and `FrameProperties`, which cut frames
  out of a sprite sheet either horizontally or vertically and step through them
- `bullsparade.game_object`: `GameObject`, an axis-aligned box with
  `collides_with`, `collision_side` and `set_offset`
- `bullsparade.collision`: `Collision`, a solid box of the level, with
  `debug_draw` to outline it in red
- `bullsparade.player`: `Player`, which takes the set of pressed `Key` values
  on each `update`
- `bullsparade.level`: `LevelData.from_dict`, `load_level` and `Level`, which
  read a Tiled map and keep its tiles and collision boxes
- `bullsparade.game`: `Game`, which ties a player and a level together and
  steps them at a fixed rate, and `main`, the command above

```python
from bullsparade.game_object import GameObject
from bullsparade.geometry import Size, Vector2

a = GameObject(position=Vector2(0, 0), size=Size(16, 16))
b = GameObject(position=Vector2(10, 0), size=Size(16, 16))
print(a.collides_with(b))   # True
print(a.collision_side(b))  # CollisionSide.RIGHT
```

## What it does not do

There is no sound, no enemies, no score and no end to a level. Only the first
frame of animated tiles is drawn, and the level scrolls horizontally only.

## Running the tests

```
pytest
```