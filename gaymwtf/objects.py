"""Game objects, their saved form and the registry that creates them by tag."""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from .geometry import TILE_SIZE, Vec2, Vec2Save


class Direction(Enum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


_COLLISION_BUFFER = 1.0


class GameObject(ABC):
    """A movable thing living in a chunk."""

    type_tag: ClassVar[str] = ""
    interactive: ClassVar[bool] = False
    max_health: ClassVar[int | None] = None

    def __init__(
        self,
        pos: Vec2 | None = None,
        size: Vec2 | None = None,
        velocity: Vec2 | None = None,
    ) -> None:
        self.pos = pos if pos is not None else Vec2()
        self.size = size if size is not None else Vec2.splat(TILE_SIZE)
        self.velocity = velocity if velocity is not None else Vec2()
        self.health = self.max_health

    def tick(self, dt: float, world: Any) -> bool:
        """Advance the object by ``dt`` seconds.

        Returns whether the object changed; the base object is static and
        reports no change.
        """
        return False

    @abstractmethod
    def draw(self, batch: Any) -> None: ...

    def interact(self, other: GameObject) -> bool:
        """React to another object; returns whether the interaction was handled."""
        return self.interactive

    def hurt(self, damage: int, attack_dir: Direction) -> bool:
        """Take damage from a direction; returns whether any damage was taken.

        Objects without health (the default) cannot be hurt.
        """
        if self.health is None or damage <= 0:
            return False
        self.health = max(0, self.health - damage)
        return True

    def collision(self, other: GameObject) -> None:
        """Stop movement along the axis of least overlap with ``other``."""
        inset = Vec2.splat(_COLLISION_BUFFER)
        self_min, self_max = self.pos + inset, self.pos + self.size - inset
        other_min, other_max = other.pos + inset, other.pos + other.size - inset

        overlapping = (
            self_min.x < other_max.x
            and self_max.x > other_min.x
            and self_min.y < other_max.y
            and self_max.y > other_min.y
        )
        if not overlapping:
            return

        x_overlap = min(self_max.x - other_min.x, other_max.x - self_min.x)
        y_overlap = min(self_max.y - other_min.y, other_max.y - self_min.y)
        vx, vy = self.velocity
        if x_overlap < y_overlap:
            vx = 0.0
        elif x_overlap > y_overlap:
            vy = 0.0
        else:
            vx = vy = 0.0
        self.velocity = Vec2(vx, vy)

    def clone(self) -> GameObject:
        return copy.copy(self)

    def serialize(self) -> str:
        return ObjectData(
            self.type_tag, Vec2Save.from_vec2(self.pos), Vec2Save.from_vec2(self.size)
        ).to_json()


@dataclass
class ObjectData:
    """The saved form of an object."""

    type_tag: str
    pos: Vec2Save
    size: Vec2Save

    def to_json(self) -> str:
        return json.dumps(
            {"type_tag": self.type_tag, "pos": self.pos.to_dict(), "size": self.size.to_dict()},
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, text: str) -> ObjectData:
        try:
            raw = json.loads(text)
            if not isinstance(raw, dict):
                raise ValueError("expected a JSON object")
            type_tag = raw["type_tag"]
            if not isinstance(type_tag, str):
                raise ValueError("field 'type_tag' must be a string")
            return cls(type_tag, Vec2Save.from_dict(raw["pos"]), Vec2Save.from_dict(raw["size"]))
        except (ValueError, KeyError, TypeError) as exc:
            raise ValueError(f"Failed to deserialize ObjectData: {exc}") from exc


class ObjectRegistry:
    """Object prototypes keyed by type tag."""

    def __init__(self) -> None:
        self._prototypes: dict[str, GameObject] = {}

    def register(self, obj: GameObject) -> None:
        self._prototypes[obj.type_tag] = obj

    def create_object_by_id(self, type_tag: str) -> GameObject | None:
        prototype = self._prototypes.get(type_tag)
        return prototype.clone() if prototype is not None else None

    def deserialize_object(self, data: str) -> GameObject:
        """Rebuild an object from its JSON; raises ValueError on bad data or an unknown tag."""
        saved = ObjectData.from_json(data)
        prototype = self._prototypes.get(saved.type_tag)
        if prototype is None:
            raise ValueError(f"Unknown object type: {saved.type_tag}")
        obj = prototype.clone()
        obj.pos = saved.pos.to_vec2()
        obj.size = saved.size.to_vec2()
        return obj

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._prototypes