"""Engine-wide sizes and the 2D vector types used for positions and saves."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

TILE_SIZE: float = 16.0
CHUNK_SIZE: int = 16
CHUNK_PIXELS: float = TILE_SIZE * CHUNK_SIZE
OBJECT_ACTIVATION_MARGIN: float = 100.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec2:
        """A vector with both components set to ``value``."""
        return cls(value, value)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def floor(self) -> Vec2:
        return Vec2(float(math.floor(self.x)), float(math.floor(self.y)))

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Any) -> Vec2:
        if isinstance(scalar, Vec2):
            return Vec2(self.x * scalar.x, self.y * scalar.y)
        if isinstance(scalar, (int, float)) and not isinstance(scalar, bool):
            return Vec2(self.x * scalar, self.y * scalar)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: Any) -> Vec2:
        if isinstance(scalar, Vec2):
            return Vec2(self.x / scalar.x, self.y / scalar.y)
        if isinstance(scalar, (int, float)) and not isinstance(scalar, bool):
            return Vec2(self.x / scalar, self.y / scalar)
        return NotImplemented

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Vec2Save:
    """The saved form of a vector: a JSON object with ``x`` and ``y``."""

    x: float
    y: float

    @classmethod
    def from_vec2(cls, vec: Vec2) -> Vec2Save:
        return cls(float(vec.x), float(vec.y))

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": float(self.x), "y": float(self.y)}

    @classmethod
    def from_dict(cls, data: Any) -> Vec2Save:
        """Build from a mapping; raises ValueError when a field is missing or not a number."""
        if not isinstance(data, Mapping):
            raise ValueError("expected an object with fields 'x' and 'y'")
        values = []
        for name in ("x", "y"):
            if name not in data:
                raise ValueError(f"missing field {name!r}")
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"field {name!r} must be a number")
            values.append(float(value))
        return cls(*values)