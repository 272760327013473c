"""Biomes and the registry that picks one for given conditions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar


class Biome(ABC):
    """A kind of terrain: its ground tile and which objects may spawn in it."""

    type_tag: ClassVar[str] = ""
    ground_tile_type: ClassVar[str] = ""

    @abstractmethod
    def is_suitable(self, height: float, moisture: float, temperature: float) -> bool: ...

    @abstractmethod
    def spawnable_objects(self) -> list[tuple[str, float]]:
        """Pairs of object type tag and spawn chance."""


class BiomeRegistry:
    """Biomes in registration order."""

    def __init__(self) -> None:
        self._biomes: list[Biome] = []

    def register(self, biome: Biome) -> None:
        self._biomes.append(biome)

    def find_biome(self, height: float, moisture: float, temperature: float) -> Biome | None:
        """The first registered biome suitable for the conditions, or None."""
        return next(
            (b for b in self._biomes if b.is_suitable(height, moisture, temperature)),
            None,
        )

    def __len__(self) -> int:
        return len(self._biomes)

    def __iter__(self) -> Iterator[Biome]:
        return iter(self._biomes)