"""Tiles, their saved form and the registry that creates them by tag."""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from .geometry import TILE_SIZE, Vec2, Vec2Save


class Tile(ABC):
    """A square of ground in a chunk."""

    type_tag: ClassVar[str] = ""
    reacts_to_objects: ClassVar[bool] = False

    def __init__(self, pos: Vec2 | None = None, size: Vec2 | None = None) -> None:
        self.pos = pos if pos is not None else Vec2()
        self.size = size if size is not None else Vec2.splat(TILE_SIZE)
        self.age = 0.0

    def tick(self, dt: float, world: Any) -> None:
        """Advance the tile by ``dt`` seconds, accumulating its age."""
        self.age += dt

    @abstractmethod
    def draw(self, batch: Any, pos: Vec2) -> None: ...

    def interact(self, other: Any) -> bool:
        """Handle an object touching this tile; True if it reacted."""
        return self.reacts_to_objects

    def clone(self) -> Tile:
        return copy.copy(self)

    def serialize(self) -> str:
        return TileData(
            self.type_tag, Vec2Save.from_vec2(self.pos), Vec2Save.from_vec2(self.size)
        ).to_json()


@dataclass
class TileData:
    """The saved form of a tile."""

    type_tag: str
    pos: Vec2Save
    size: Vec2Save

    def to_json(self) -> str:
        return json.dumps(
            {"type_tag": self.type_tag, "pos": self.pos.to_dict(), "size": self.size.to_dict()},
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, text: str) -> TileData:
        try:
            raw = json.loads(text)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object")
            type_tag = raw["type_tag"]
            if not isinstance(type_tag, str):
                raise ValueError("field 'type_tag' must be a string")
            return cls(type_tag, Vec2Save.from_dict(raw["pos"]), Vec2Save.from_dict(raw["size"]))
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"Failed to deserialize TileData: {exc}") from exc


class TileRegistry:
    """Tile prototypes keyed by type tag."""

    def __init__(self) -> None:
        self._prototypes: dict[str, Tile] = {}

    def register(self, tile: Tile) -> None:
        self._prototypes[tile.type_tag] = tile

    def create_tile_by_id(self, type_tag: str) -> Tile | None:
        prototype = self._prototypes.get(type_tag)
        return prototype.clone() if prototype is not None else None

    def deserialize_tile(self, data: str) -> Tile:
        """Rebuild a tile from its JSON; raises ValueError on bad data or an unknown tag."""
        saved = TileData.from_json(data)
        prototype = self._prototypes.get(saved.type_tag)
        if prototype is None:
            raise ValueError(f"Unknown tile type: {saved.type_tag}")
        tile = prototype.clone()
        tile.pos = saved.pos.to_vec2()
        tile.size = saved.size.to_vec2()
        return tile

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._prototypes