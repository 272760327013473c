# gaymwtf

A small 2D game engine core built on pygame. A world is made of chunks.
Each chunk is a 16×16 grid of tiles with free-moving objects on top.
Tiles, objects and biomes are registered as prototypes and cloned by type
tag. Worlds can be saved to JSON files and loaded back.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `gaymwtf.geometry`
  - `Vec2` is an immutable 2D vector. It supports `+`, `-`, unary `-`, `*` and `/` by a number or by another vector, `dot`, `floor` and `splat`.
  - `Vec2Save` is the saved form of a vector: a JSON object with `x` and `y`.
  - The constants are `TILE_SIZE` (16.0), `CHUNK_SIZE` (16), `CHUNK_PIXELS` (256.0) and `OBJECT_ACTIVATION_MARGIN` (100.0).
- `gaymwtf.tile`
  - `Tile` is an abstract ground tile. It has `pos` and `size`. By default, `tick` adds `dt` to `age`.
  - `TileRegistry` holds tile prototypes. `create_tile_by_id` returns a clone of the registered tile. `deserialize_tile` rebuilds a tile from its JSON and raises `ValueError` on bad data or an unknown tag.
  - `TileData` is the saved form of a tile.
- `gaymwtf.objects`
  - `GameObject` is an abstract object with `pos`, `size` and `velocity`.
    - `collision` stops movement along the axis of least overlap, measured with a 1-pixel inset.
    - `hurt` lowers `health` when the class sets `max_health`.
  - `ObjectRegistry` and `ObjectData` work the same way as their tile counterparts.
  - `Direction` has the members `UP`, `DOWN`, `LEFT` and `RIGHT`.
- `gaymwtf.biome`
  - `Biome` is abstract. It has a `ground_tile_type`, `is_suitable` and `spawnable_objects`.
  - `BiomeRegistry.find_biome` returns the first registered biome that is suitable for the given height, moisture and temperature, or `None`.
- `gaymwtf.chunk`
  - `Chunk` holds one chunk's tiles and objects.
    - `is_visible` checks the chunk against the camera.
    - `visible_tile_indices` and `active_object_indices` select what is on screen; objects count if they are within the activation margin.
    - `update`, `draw_tiles` and `draw_objects` act on that selection.
    - `serialize` and `deserialize` convert the chunk to and from JSON.
    - `objects_by_type` and `tiles_by_type` filter by type tag.
  - `ChunkData` is the saved form of a chunk.
- `gaymwtf.world`
  - `World` maps `(x, y)` chunk keys to chunks.
    - `add_chunk` keeps an existing chunk at the same key.
    - `update(camera_pos, screen_size, dt)` does three things for the 5×5 chunks around the camera: it moves objects into the chunk that now contains them, resolves collisions between approaching objects, and ticks the chunks.
    - `draw(camera_pos, screen_size, surface)` draws the visible tiles first and the active objects after them, with the camera at the centre of the screen.
    - `objects_by_type` and `tiles_by_type` search the visible chunks.
    - `save_world(dir)` writes `world.json` and `chunks/chunk_X_Y.json`.
    - `World.load_world(...)` reads a save directory back. It skips chunk files that cannot be read or parsed.
  - `chunk_coords(pos)` returns the key of the chunk that contains a world position.
- `gaymwtf.draw`
  - `DrawBatch` groups queued textures. Its `draw(surface, offset)` blits everything in the queue, scaling where a destination size is given, and then clears the queue.
- `gaymwtf.texture`
  - `load_file_sync` reads a file's bytes.
  - `load_texture_sync` decodes an image into an RGBA surface.
  - Both raise `TextureLoadError` on failure.
- `gaymwtf.logger`
  - `GameLogger` is a `logging.Handler` that prints coloured `[LEVEL][target] message` lines.
    - It filters per target (`world`, `chunk`, `render`, `entity`; INFO by default).
    - `GameLogger.init()` installs a single shared instance on the root logger.
- `gaymwtf.menu`
  - `Menu` is the abstract interface for menu screens: `update`, `draw` and `name`.
  - `MenuAction` has the variants `none()`, `change_state(state)` and `quit()`.
- `gaymwtf.demo`
  - `Air`, `Stone`, `Mob` and `Plains` are example tile, object and biome types.
  - `generate_chunk` fills a chunk with its biome's ground tiles and spawns objects on them.
  - `setup()` builds a 5×5 chunk world around the origin.
  - `main` runs it in a window.

## Example

```python
from gaymwtf.demo import setup
from gaymwtf.geometry import Vec2

world = setup()
print(len(world.chunks))  # 25
world.update(Vec2(400.0, 300.0), Vec2(800.0, 600.0), 1 / 60)
print(len(world.objects_by_type("mob")))
```

## Demo

The demo opens a window showing a stone world of 5×5 chunks with wandering mobs. Move the camera with the arrow keys:

```
gaymwtf-demo
```

To stop after a fixed number of frames, use `--frames`:

```
gaymwtf-demo --frames 120
```

## What it does not do

- There is no terrain generation beyond the demo's `generate_chunk`. It always uses the biome found for height, moisture and temperature 0, so the world is flat.
- Chunks are not created or unloaded as the camera moves.
- `Menu` is an interface only. No menu screens are provided.