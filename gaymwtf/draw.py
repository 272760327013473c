"""Batched texture drawing grouped by texture."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .geometry import Vec2  # noqa: E402
from .logger import RENDER, TRACE  # noqa: E402

_log = logging.getLogger(RENDER)


@dataclass(frozen=True)
class _Instance:
    pos: Vec2
    size: float
    dest_size: Vec2 | None


class DrawBatch:
    """Collects draw calls and issues them grouped by texture."""

    def __init__(self) -> None:
        _log.log(TRACE, "Creating new DrawBatch")
        self._groups: dict[int, tuple[pygame.Surface, list[_Instance]]] = {}

    def add(
        self,
        texture: pygame.Surface,
        pos: Vec2,
        size: float,
        dest_size: Vec2 | None = None,
    ) -> None:
        instance = _Instance(pos, size, dest_size)
        group = self._groups.get(id(texture))
        if group is not None:
            group[1].append(instance)
            _log.log(TRACE, "Added to existing texture batch")
        else:
            self._groups[id(texture)] = (texture, [instance])
            _log.log(TRACE, "Created new texture batch")

    def draw(self, surface: pygame.Surface, offset: Vec2 | None = None) -> None:
        """Blit every queued instance onto ``surface`` shifted by ``-offset``, then clear."""
        shift = offset if offset is not None else Vec2()
        _log.debug("Drawing batch with %d texture groups", len(self._groups))
        for texture, instances in self._groups.values():
            _log.log(TRACE, "Drawing %d instances of texture", len(instances))
            for instance in instances:
                image = texture
                if instance.dest_size is not None:
                    width = max(0, round(instance.dest_size.x))
                    height = max(0, round(instance.dest_size.y))
                    image = pygame.transform.scale(texture, (width, height))
                target = instance.pos - shift
                surface.blit(image, (math.floor(target.x), math.floor(target.y)))
        self._groups.clear()
        _log.log(TRACE, "Batch cleared")

    def clear(self) -> None:
        self._groups.clear()

    def __len__(self) -> int:
        """Number of distinct textures queued."""
        return len(self._groups)