import json

import pytest

from gaymwtf.chunk import Chunk, ChunkData
from gaymwtf.geometry import CHUNK_PIXELS, CHUNK_SIZE, TILE_SIZE, Vec2, Vec2Save
from gaymwtf.objects import GameObject, ObjectRegistry
from gaymwtf.tile import Tile, TileRegistry


class Grass(Tile):
    type_tag = "grass"

    def __init__(self, pos=None, size=None):
        super().__init__(pos, size)
        self.ticks = 0

    def tick(self, dt, world):
        self.ticks += 1

    def draw(self, batch, pos):
        batch.append((self.type_tag, pos))


class Sand(Grass):
    type_tag = "sand"


class Critter(GameObject):
    type_tag = "critter"

    def __init__(self, pos=None, size=None, velocity=None):
        super().__init__(pos, size, velocity)
        self.ticks = 0

    def tick(self, dt, world):
        self.ticks += 1

    def draw(self, batch):
        batch.append((self.type_tag, self.pos))


def filled_chunk(pos=Vec2()):
    chunk = Chunk(pos)
    low = chunk.bounds[0]
    for y in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            tile = Grass() if (x + y) % 2 == 0 else Sand()
            tile.pos = low + Vec2(x * TILE_SIZE, y * TILE_SIZE)
            chunk.tiles.append(tile)
    return chunk


def registries():
    tiles = TileRegistry()
    tiles.register(Grass())
    tiles.register(Sand())
    objects = ObjectRegistry()
    objects.register(Critter())
    return tiles, objects


WHOLE_CAMERA = Vec2.splat(CHUNK_PIXELS / 2)
WHOLE_SCREEN = Vec2.splat(CHUNK_PIXELS)


def test_bounds_follow_position():
    chunk = Chunk(Vec2(1.0, 2.0))
    assert chunk.bounds == (
        Vec2(CHUNK_PIXELS, 2 * CHUNK_PIXELS),
        Vec2(2 * CHUNK_PIXELS, 3 * CHUNK_PIXELS),
    )


def test_is_visible():
    chunk = Chunk(Vec2())
    assert chunk.is_visible(WHOLE_CAMERA, WHOLE_SCREEN)
    assert not chunk.is_visible(Vec2.splat(CHUNK_PIXELS * 10), WHOLE_SCREEN)


def test_visible_tiles_cover_whole_chunk():
    chunk = filled_chunk()
    assert chunk.visible_tile_indices(WHOLE_CAMERA, WHOLE_SCREEN) == list(range(CHUNK_SIZE**2))


def test_visible_tiles_single_corner_tile():
    chunk = filled_chunk()
    indices = chunk.visible_tile_indices(Vec2.splat(TILE_SIZE / 2), Vec2.splat(TILE_SIZE))
    assert indices == [0]


def test_visible_tiles_empty_chunk():
    assert Chunk(Vec2()).visible_tile_indices(WHOLE_CAMERA, WHOLE_SCREEN) == []


def test_visible_tiles_in_range_for_offset_chunk():
    chunk = filled_chunk(Vec2(-1.0, 3.0))
    camera = chunk.bounds[0] + Vec2(10.0, 50.0)
    indices = chunk.visible_tile_indices(camera, Vec2(40.0, 40.0))
    assert indices == sorted(indices)
    assert all(0 <= i < CHUNK_SIZE**2 for i in indices)
    assert len(indices) < CHUNK_SIZE**2


def test_active_object_indices():
    chunk = Chunk(Vec2())
    chunk.objects.append(Critter(Vec2()))
    chunk.objects.append(Critter(Vec2.splat(CHUNK_PIXELS * 20)))
    assert chunk.active_object_indices(WHOLE_CAMERA, WHOLE_SCREEN) == [0]


def test_update_ticks_visible_things():
    chunk = filled_chunk()
    near, far = Critter(Vec2()), Critter(Vec2.splat(CHUNK_PIXELS * 20))
    chunk.objects.extend([near, far])
    chunk.update(None, WHOLE_CAMERA, WHOLE_SCREEN, 0.1)
    assert all(tile.ticks == 1 for tile in chunk.tiles)
    assert near.ticks == 1
    assert far.ticks == 0


def test_update_skips_invisible_chunk():
    chunk = filled_chunk()
    critter = Critter(Vec2())
    chunk.objects.append(critter)
    chunk.update(None, Vec2.splat(CHUNK_PIXELS * 10), WHOLE_SCREEN, 0.1)
    assert critter.ticks == 0
    assert all(tile.ticks == 0 for tile in chunk.tiles)


def test_draw_tiles_draws_visible_tiles_at_their_positions():
    chunk = filled_chunk()
    drawn = []
    chunk.draw_tiles(WHOLE_CAMERA, WHOLE_SCREEN, drawn)
    assert [pos for _, pos in drawn] == [tile.pos for tile in chunk.tiles]


def test_draw_objects_uses_last_update():
    chunk = Chunk(Vec2())
    chunk.objects.append(Critter(Vec2(5.0, 5.0)))
    drawn = []
    chunk.draw_objects(drawn)
    assert drawn == []
    chunk.update(None, WHOLE_CAMERA, WHOLE_SCREEN, 0.0)
    chunk.draw_objects(drawn)
    assert drawn == [("critter", Vec2(5.0, 5.0))]


def test_serialize_round_trip():
    tiles, objects = registries()
    chunk = filled_chunk(Vec2(2.0, -1.0))
    chunk.objects.append(Critter(Vec2(3.5, 7.0)))
    restored = Chunk.deserialize(chunk.serialize(), tiles, objects)
    assert restored.pos == chunk.pos
    assert restored.bounds == chunk.bounds
    assert [t.type_tag for t in restored.tiles] == [t.type_tag for t in chunk.tiles]
    assert [t.pos for t in restored.tiles] == [t.pos for t in chunk.tiles]
    assert [o.pos for o in restored.objects] == [Vec2(3.5, 7.0)]


def test_serialize_layout():
    chunk = Chunk(Vec2(1.0, 2.0))
    raw = json.loads(chunk.serialize())
    assert raw == {"pos": {"x": 1.0, "y": 2.0}, "tiles": [], "objects": []}


def test_chunk_data_round_trip():
    data = ChunkData(Vec2Save(1.0, -2.0), ["a"], ["b", "c"])
    assert ChunkData.from_json(data.to_json()) == data


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '{"pos": {"x": 0, "y": 0}, "tiles": []}', '{"pos": {"x": 0, "y": 0}, "tiles": [1], "objects": []}'],
)
def test_chunk_data_rejects_bad_input(text):
    with pytest.raises(ValueError):
        ChunkData.from_json(text)


def test_deserialize_unknown_tile_raises():
    tiles, objects = registries()
    chunk = Chunk(Vec2())
    chunk.tiles.append(Grass())
    empty = TileRegistry()
    with pytest.raises(ValueError, match="Unknown tile type"):
        Chunk.deserialize(chunk.serialize(), empty, objects)


def test_deserialize_unknown_object_raises():
    tiles, _ = registries()
    chunk = Chunk(Vec2())
    chunk.objects.append(Critter())
    with pytest.raises(ValueError, match="Unknown object type"):
        Chunk.deserialize(chunk.serialize(), tiles, ObjectRegistry())


def test_by_type_queries():
    chunk = filled_chunk()
    chunk.objects.append(Critter())
    grass = chunk.tiles_by_type("grass")
    sand = chunk.tiles_by_type("sand")
    assert len(grass) + len(sand) == CHUNK_SIZE**2
    assert all(t.type_tag == "grass" for t in grass)
    assert chunk.objects_by_type("critter") == chunk.objects
    assert chunk.objects_by_type("missing") == []