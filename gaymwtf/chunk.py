"""Chunks: square blocks of tiles together with the objects standing on them."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field
from typing import Any

from .geometry import (
    CHUNK_PIXELS,
    CHUNK_SIZE,
    OBJECT_ACTIVATION_MARGIN,
    TILE_SIZE,
    Vec2,
    Vec2Save,
)
from .logger import CHUNK
from .objects import GameObject, ObjectRegistry
from .tile import Tile, TileRegistry

_log = logging.getLogger(CHUNK)


@dataclass
class ChunkData:
    """The saved form of a chunk: its position and the JSON of its tiles and objects."""

    pos: Vec2Save
    tiles: list[str] = field(default_factory=list)
    objects: list[str] = field(default_factory=list)

    def to_json(self) -> str:
        return json.dumps(
            {"pos": self.pos.to_dict(), "tiles": self.tiles, "objects": self.objects},
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, text: str) -> ChunkData:
        """Parse saved chunk JSON; raises ValueError on malformed data."""
        try:
            raw = json.loads(text)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object")
            pos = Vec2Save.from_dict(raw["pos"])
            lists = []
            for name in ("tiles", "objects"):
                items = raw[name]
                if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                    raise ValueError(f"field {name!r} must be a list of strings")
                lists.append(list(items))
            return cls(pos, *lists)
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"Failed to deserialize ChunkData: {exc}") from exc


def _screen_rect(camera_pos: Vec2, screen_size: Vec2, margin: float = 0.0) -> tuple[Vec2, Vec2]:
    half = screen_size / 2.0
    pad = Vec2.splat(margin)
    return camera_pos - half - pad, camera_pos + half + pad


class Chunk:
    """A CHUNK_SIZE by CHUNK_SIZE block of tiles and the objects within it."""

    def __init__(self, pos: Vec2) -> None:
        _log.debug("Creating new chunk at %r", pos)
        self.pos = pos
        self.tiles: list[Tile] = []
        self.objects: list[GameObject] = []
        low = pos * CHUNK_PIXELS
        self._bounds = (low, low + Vec2.splat(CHUNK_PIXELS))
        self._visible_tiles: list[int] = []
        self._active_objects: list[int] = []

    @property
    def bounds(self) -> tuple[Vec2, Vec2]:
        """The chunk's corners in world pixels: (minimum, maximum)."""
        return self._bounds

    def update(self, world: Any, camera_pos: Vec2, screen_size: Vec2, dt: float) -> None:
        """Tick the objects near the screen and the tiles on it."""
        if not self.is_visible(camera_pos, screen_size):
            return
        self._active_objects = self.active_object_indices(camera_pos, screen_size)
        self._visible_tiles = self.visible_tile_indices(camera_pos, screen_size)

        for index in self._active_objects:
            if index < len(self.objects):
                self.objects[index].tick(dt, world)
        for index in self._visible_tiles:
            if index < len(self.tiles):
                self.tiles[index].tick(dt, world)

    def draw_tiles(self, camera_pos: Vec2, screen_size: Vec2, batch: Any) -> None:
        if not self.is_visible(camera_pos, screen_size):
            return
        self._visible_tiles = self.visible_tile_indices(camera_pos, screen_size)
        for index in self._visible_tiles:
            tile = self.tiles[index]
            tile.draw(batch, tile.pos)

    def draw_objects(self, batch: Any) -> None:
        """Draw the objects found active by the last update."""
        for index in self._active_objects:
            if index < len(self.objects):
                self.objects[index].draw(batch)

    def is_visible(self, camera_pos: Vec2, screen_size: Vec2) -> bool:
        screen_min, screen_max = _screen_rect(camera_pos, screen_size)
        low, high = self._bounds
        return not (
            high.x < screen_min.x
            or low.x > screen_max.x
            or high.y < screen_min.y
            or low.y > screen_max.y
        )

    def visible_tile_indices(self, camera_pos: Vec2, screen_size: Vec2) -> list[int]:
        """Indices of the tiles that fall within the screen, row by row."""
        screen_min, screen_max = _screen_rect(camera_pos, screen_size)
        low = self._bounds[0]

        def clamp(value: float, upper: int) -> int:
            return min(max(int(value), 0), upper)

        start_x = clamp(math.floor((screen_min.x - low.x) / TILE_SIZE), CHUNK_SIZE - 1)
        end_x = clamp(math.ceil((screen_max.x - low.x) / TILE_SIZE), CHUNK_SIZE)
        start_y = clamp(math.floor((screen_min.y - low.y) / TILE_SIZE), CHUNK_SIZE - 1)
        end_y = clamp(math.ceil((screen_max.y - low.y) / TILE_SIZE), CHUNK_SIZE)

        count = len(self.tiles)
        return [
            index
            for y in range(start_y, end_y)
            for x in range(start_x, end_x)
            if (index := y * CHUNK_SIZE + x) < count
        ]

    def active_object_indices(self, camera_pos: Vec2, screen_size: Vec2) -> list[int]:
        """Indices of the objects within the screen widened by the activation margin."""
        screen_min, screen_max = _screen_rect(camera_pos, screen_size, OBJECT_ACTIVATION_MARGIN)
        return [
            index
            for index, obj in enumerate(self.objects)
            if screen_min.x <= obj.pos.x <= screen_max.x
            and screen_min.y <= obj.pos.y <= screen_max.y
        ]

    def serialize(self) -> str:
        return ChunkData(
            Vec2Save.from_vec2(self.pos),
            [tile.serialize() for tile in self.tiles],
            [obj.serialize() for obj in self.objects],
        ).to_json()

    @classmethod
    def deserialize(
        cls,
        data: str,
        tile_registry: TileRegistry,
        object_registry: ObjectRegistry,
    ) -> Chunk:
        """Rebuild a chunk from its JSON; raises ValueError on bad data or unknown types."""
        saved = ChunkData.from_json(data)
        tiles = [tile_registry.deserialize_tile(item) for item in saved.tiles]
        objects = [object_registry.deserialize_object(item) for item in saved.objects]
        chunk = cls(saved.pos.to_vec2())
        chunk.tiles = tiles
        chunk.objects = objects
        return chunk

    def objects_by_type(self, type_tag: str) -> list[GameObject]:
        return [obj for obj in self.objects if obj.type_tag == type_tag]

    def tiles_by_type(self, type_tag: str) -> list[Tile]:
        return [tile for tile in self.tiles if tile.type_tag == type_tag]