"""The world: a map of chunks with registries, updates, drawing and saving."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .biome import BiomeRegistry
from .chunk import Chunk
from .draw import DrawBatch
from .geometry import CHUNK_PIXELS, Vec2
from .logger import WORLD
from .objects import GameObject, ObjectRegistry
from .tile import Tile, TileRegistry

_log = logging.getLogger(WORLD)

_RENDER_DISTANCE = 2

ChunkKey = tuple[int, int]


def chunk_coords(pos: Vec2) -> ChunkKey:
    """The key of the chunk that contains the world position ``pos``."""
    return math.floor(pos.x / CHUNK_PIXELS), math.floor(pos.y / CHUNK_PIXELS)


@dataclass
class WorldData:
    """The saved description of a world."""

    name: str

    def to_json(self) -> str:
        return json.dumps({"name": self.name}, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> WorldData:
        """Parse saved world JSON; raises ValueError on malformed data."""
        try:
            raw = json.loads(text)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object")
            name = raw["name"]
            if not isinstance(name, str):
                raise ValueError("field 'name' must be a string")
            return cls(name)
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"Failed to deserialize WorldData: {exc}") from exc


class World:
    """Chunks keyed by their integer coordinates, plus the registries they draw from."""

    def __init__(
        self,
        name: str,
        tile_registry: TileRegistry,
        object_registry: ObjectRegistry,
        biome_registry: BiomeRegistry,
    ) -> None:
        _log.info("Creating world '%s'", name)
        self.name = name
        self.chunks: dict[ChunkKey, Chunk] = {}
        self.tile_registry = tile_registry
        self.object_registry = object_registry
        self.biome_registry = biome_registry
        self._visible_chunks: list[ChunkKey] = []
        self._draw_batch = DrawBatch()

    @property
    def visible_chunks(self) -> list[ChunkKey]:
        """Keys of the chunks around the camera as of the last update."""
        return list(self._visible_chunks)

    def add_chunk(self, chunk: Chunk) -> None:
        """Add a chunk unless one already sits at its coordinates."""
        key = (int(chunk.pos.x), int(chunk.pos.y))
        self.chunks.setdefault(key, chunk)

    def save_world(self, save_dir: str | os.PathLike[str]) -> None:
        """Write world.json and one file per chunk under ``save_dir``."""
        root = Path(save_dir)
        chunks_dir = root / "chunks"
        chunks_dir.mkdir(parents=True, exist_ok=True)
        (root / "world.json").write_text(WorldData(self.name).to_json(), encoding="utf-8")
        for (x, y), chunk in self.chunks.items():
            (chunks_dir / f"chunk_{x}_{y}.json").write_text(chunk.serialize(), encoding="utf-8")

    @classmethod
    def load_world(
        cls,
        save_dir: str | os.PathLike[str],
        tile_registry: TileRegistry,
        object_registry: ObjectRegistry,
        biome_registry: BiomeRegistry,
    ) -> World:
        """Load a saved world; chunk files that cannot be read or parsed are skipped."""
        root = Path(save_dir)
        data = WorldData.from_json((root / "world.json").read_text(encoding="utf-8"))
        world = cls(data.name, tile_registry, object_registry, biome_registry)

        chunks_dir = root / "chunks"
        if chunks_dir.is_dir():
            for entry in sorted(chunks_dir.iterdir()):
                try:
                    text = entry.read_text(encoding="utf-8")
                    chunk = Chunk.deserialize(text, world.tile_registry, world.object_registry)
                except (OSError, ValueError):
                    continue
                world.add_chunk(chunk)
        return world

    def update(self, camera_pos: Vec2, screen_size: Vec2, dt: float) -> None:
        """Move objects between chunks, resolve collisions and tick visible chunks."""
        self._update_visible_chunks(chunk_coords(camera_pos))
        self._move_objects_between_chunks()
        self._check_obj_collisions()
        for key in self._visible_chunks:
            chunk = self.chunks.get(key)
            if chunk is not None:
                chunk.update(self, camera_pos, screen_size, dt)

    def _move_objects_between_chunks(self) -> None:
        movements: list[tuple[ChunkKey, list[tuple[int, ChunkKey]]]] = []
        for key in self._visible_chunks:
            chunk = self.chunks.get(key)
            if chunk is None:
                continue
            leaving = [
                (index, dest)
                for index, obj in enumerate(chunk.objects)
                if (dest := chunk_coords(obj.pos)) != key
            ]
            if leaving:
                movements.append((key, leaving))

        for key, leaving in movements:
            source = self.chunks[key]
            for index, dest in reversed(leaving):
                if index >= len(source.objects):
                    continue
                obj = source.objects.pop(index)
                target = self.chunks.get(dest)
                if target is not None:
                    target.objects.append(obj)

    def _check_obj_collisions(self) -> None:
        objects = [
            obj
            for key in self._visible_chunks
            if (chunk := self.chunks.get(key)) is not None
            for obj in chunk.objects
        ]
        for i, first in enumerate(objects):
            for second in objects[i + 1 :]:
                next1 = first.pos + first.velocity
                next2 = second.pos + second.velocity
                will_collide = (
                    next1.x < next2.x + second.size.x
                    and next1.x + first.size.x > next2.x
                    and next1.y < next2.y + second.size.y
                    and next1.y + first.size.y > next2.y
                )
                approaching = (first.velocity - second.velocity).dot(second.pos - first.pos) > 0.0
                if will_collide and approaching:
                    first.collision(second)
                    second.collision(first)

    def draw(self, camera_pos: Vec2, screen_size: Vec2, surface: Any) -> None:
        """Draw visible tiles, then active objects, centred on ``camera_pos``."""
        offset = camera_pos - screen_size / 2.0
        batch = self._draw_batch

        batch.clear()
        for key in self._visible_chunks:
            chunk = self.chunks.get(key)
            if chunk is not None:
                chunk.draw_tiles(camera_pos, screen_size, batch)
        batch.draw(surface, offset)

        batch.clear()
        for key in self._visible_chunks:
            chunk = self.chunks.get(key)
            if chunk is not None:
                chunk.draw_objects(batch)
        batch.draw(surface, offset)

    def _update_visible_chunks(self, camera_chunk: ChunkKey) -> None:
        cx, cy = camera_chunk
        span = range(-_RENDER_DISTANCE, _RENDER_DISTANCE + 1)
        self._visible_chunks = [(cx + x, cy + y) for y in span for x in span]

    def objects_by_type(self, type_tag: str) -> list[GameObject]:
        """Objects of the given type in the visible chunks."""
        return [
            obj
            for key in self._visible_chunks
            if (chunk := self.chunks.get(key)) is not None
            for obj in chunk.objects
            if obj.type_tag == type_tag
        ]

    def tiles_by_type(self, type_tag: str) -> list[Tile]:
        """Tiles of the given type in the visible chunks."""
        return [
            tile
            for key in self._visible_chunks
            if (chunk := self.chunks.get(key)) is not None
            for tile in chunk.tiles
            if tile.type_tag == type_tag
        ]