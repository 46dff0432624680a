# knightofashes

A small side-scrolling action RPG drawn with pygame. A knight walks, jumps,
rolls and fights through a tutorial, a nexus with a guide and four levels,
lighting bonfires to travel on. Levels are plain text tile maps.

## Installing

```
pip install .
```

## Playing

The package ships no images, sounds, fonts or maps. Run the game from a
directory holding the `asset/` and `map/` folders and the `end.txt` credits
file, or point to one with `--root`:

```
knightofashes
knightofashes --root path/to/game-data
```

The scenes are read from `map/tuto.txt`, `map/nexus.txt`, `map/lvl_one.txt`,
`map/lvl_two.txt`, `map/lvl_three.txt` and `map/lvl_four.txt`. A missing image
or font stops the game with `FileNotFoundError`; missing sounds, a missing
icon or a machine without audio output are tolerated.

### Menu

- Up / Down: move the cursor (it wraps around)
- Enter: choose

The title page offers start, option and quit. The option page toggles
"eric mode", fullscreen (1920x1080 instead of 1280x720) and music, and has
back and quit entries.

### In game

Actions fire when a key is released, and only while the knight is idle or
walking.

- Left / Right (held): walk
- Space: jump
- R: roll
- Z: quick attack, E: heavy attack (one point stronger)
- H: play the remaining knight animation
- A: interact: light the bonfire, travel through a lit one, pick up an item
- T: open or close the inventory
- Down: skip to the next scene
- Up: print the knight's position

A lit bonfire takes you to the scene whose number ends the level line of the
map. Falling off a level sends you back to the nexus (in the tutorial, back to
its start). When a bonfire leads to scene 0, the end credits scroll and the
window closes once they are over.

## What the game does not do

- Enemies never attack: the knight has no health to lose, and the hearts and
  stamina gauges are drawn but never change.
- Attacks lower an enemy's `life` and stagger it, but enemies are never
  removed.
- "Eric mode" is only a setting stored on `Game.eric`; nothing reads it.
- There is no saving or loading of progress.

## Map files

A map file holds, one per line:

1. the path of the scene's foreground image, relative to the game root;
2. a single-digit count of level names, then the names separated by spaces;
3. the map width in tiles (the first two characters are read);
4. six rows of tiles.

In the tile rows, `F` is solid ground, `E` widens a ground run by 45 pixels,
`P` marks the knight's spawn, `f` the bonfire, `c`, `a`, `m`, `B` the enemies
and bosses, and `s`, `C` the sword and chestplate. Tiles are 80 pixels wide.

```python
from knightofashes.mapfile import load_map

level = load_map("map/tuto.txt", 7)   # keep at most 7 ground hitboxes
print(level.texture, level.levels, level.size, level.spawn)
print(level.position_of("f"))          # where the bonfire stands
```

`parse_map` does the same from text and raises `MapFormatError` on a
truncated file or a malformed level line.

## Modules

- `knightofashes.app`: the window, input handling and main loop (`App`, `main`).
- `knightofashes.world`: `Game`, scenes, background, HUD, inventory, credits.
- `knightofashes.entities`: the knight, enemies, guide, items and bonfires.
- `knightofashes.physics`: walking, scrolling, jumping, falling and dying.
- `knightofashes.combat`: attacks, bonfires and item pick-up.
- `knightofashes.menu`: the title and option pages (`Menus`).
- `knightofashes.render`: drawing with pygame (`Assets`, `Renderer`).
- `knightofashes.sprite`, `knightofashes.geometry`: animated sprite-sheet
  objects, clocks, vectors and rectangles.
- `knightofashes.mapfile`: the level file reader.
- `knightofashes.libmy`, `knightofashes.printf`: small integer and string
  helpers (such as `getnbr`) and a minimal printf (`format_printf`,
  `my_printf`) supporting `%c %s %d %i %u %x %X %b %o %p %S %%`.

## Running the tests

```
pip install .[test]
pytest
```