"""A small playable scene: stone ground, wandering mobs and a scrolling camera."""

from __future__ import annotations

import argparse
import math
import os
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .biome import Biome, BiomeRegistry  # noqa: E402
from .chunk import Chunk  # noqa: E402
from .draw import DrawBatch  # noqa: E402
from .geometry import CHUNK_PIXELS, CHUNK_SIZE, TILE_SIZE, Vec2  # noqa: E402
from .objects import GameObject, ObjectRegistry  # noqa: E402
from .tile import Tile, TileRegistry  # noqa: E402
from .world import World  # noqa: E402

SCREEN_SIZE = (800, 600)
CAMERA_SPEED = 10.0
SKYBLUE = (102, 191, 255)
WHITE = (255, 255, 255)


def _solid_texture(value: int) -> pygame.Surface:
    """A 16x16 RGBA texture with every channel set to ``value``."""
    texture = pygame.Surface((16, 16), pygame.SRCALPHA, 32)
    texture.fill((value, value, value, value))
    return texture


class _FixedSize:
    """Reports a size of one tile whatever size was stored."""

    @property
    def size(self) -> Vec2:
        return Vec2.splat(TILE_SIZE)

    @size.setter
    def size(self, value: Vec2) -> None:
        self._size = value


class Air(_FixedSize, Tile):
    """An empty tile that draws nothing."""

    type_tag = "air"

    def draw(self, batch: DrawBatch, pos: Vec2) -> None:
        pass


class Stone(_FixedSize, Tile):
    """A solid ground tile drawn with a texture."""

    type_tag = "stone"

    def __init__(self, texture: pygame.Surface, pos: Vec2 | None = None) -> None:
        super().__init__(pos)
        self.texture = texture

    def draw(self, batch: DrawBatch, pos: Vec2) -> None:
        batch.add(self.texture, pos, TILE_SIZE, None)


class Mob(_FixedSize, GameObject):
    """A creature that picks a new walking direction every second."""

    type_tag = "mob"

    def __init__(self, pos: Vec2, texture: pygame.Surface) -> None:
        super().__init__(pos)
        self.texture = texture
        self.move_timer = 0.0
        self.direction_change_timer = 0.0

    def draw(self, batch: DrawBatch) -> None:
        batch.add(self.texture, self.pos, TILE_SIZE, self._size)

    def tick(self, dt: float, world: object) -> None:
        self.move_timer += dt
        self.direction_change_timer += dt

        if self.direction_change_timer >= 1.0:
            self.direction_change_timer = 0.0
            x = int(self.pos.x)
            y = int(self.pos.y)
            axis = (x + y + int(self.move_timer * 1000.0)) % 2
            direction = 1.0 if (x + y) % 2 == 0 else -1.0
            self.velocity = Vec2(direction, 0.0) if axis == 0 else Vec2(0.0, direction)

        self.pos = self.pos + self.velocity


class Plains(Biome):
    """A biome suitable everywhere, covered in stone, with the odd mob."""

    type_tag = "plains"
    ground_tile_type = "stone"
    height_range = (-math.inf, math.inf)
    moisture_range = (-math.inf, math.inf)
    temperature_range = (-math.inf, math.inf)

    def is_suitable(self, height: float, moisture: float, temperature: float) -> bool:
        checks = (
            (height, self.height_range),
            (moisture, self.moisture_range),
            (temperature, self.temperature_range),
        )
        return all(not (value < low or value > high) for value, (low, high) in checks)

    def spawnable_objects(self) -> list[tuple[str, float]]:
        return [("mob", 0.05)]


def generate_chunk(
    pos: Vec2,
    tile_registry: TileRegistry,
    biome_registry: BiomeRegistry,
    object_registry: ObjectRegistry,
) -> Chunk:
    """Fill a chunk with its biome's ground tiles and spawn objects on them.

    Raises LookupError when no biome fits or the ground tile type is not registered.
    """
    chunk = Chunk(pos)
    biome = biome_registry.find_biome(0.0, 0.0, 0.0)
    if biome is None:
        raise LookupError("no suitable biome registered")

    origin = pos * CHUNK_PIXELS
    for y in range(CHUNK_SIZE):
        for x in range(CHUNK_SIZE):
            tile = tile_registry.create_tile_by_id(biome.ground_tile_type)
            if tile is None:
                raise LookupError(f"Unknown tile type: {biome.ground_tile_type}")
            tile_pos = origin + Vec2(x * TILE_SIZE, y * TILE_SIZE)
            tile.pos = tile_pos
            chunk.tiles.append(tile)

            for object_type, chance in biome.spawnable_objects():
                if ((x + y * CHUNK_SIZE) % 100) / 100.0 < chance:
                    obj = object_registry.create_object_by_id(object_type)
                    if obj is not None:
                        obj.pos = tile_pos
                        chunk.objects.append(obj)
    return chunk


def setup() -> World:
    """Build the registries and a world of 5x5 generated chunks around the origin."""
    tile_registry = TileRegistry()
    tile_registry.register(Air())
    tile_registry.register(Stone(_solid_texture(128)))

    object_registry = ObjectRegistry()
    object_registry.register(Mob(Vec2(), _solid_texture(255)))

    biome_registry = BiomeRegistry()
    biome_registry.register(Plains())

    world = World("test-world", tile_registry, object_registry, biome_registry)
    for y in range(-2, 3):
        for x in range(-2, 3):
            world.add_chunk(
                generate_chunk(
                    Vec2(float(x), float(y)),
                    world.tile_registry,
                    world.biome_registry,
                    world.object_registry,
                )
            )
    return world


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gaymwtf-demo", description="Run the demo scene.")
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="stop after this many frames (default: run until the window is closed)",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("gaymwtf-test")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()

        world = setup()
        camera = Vec2(SCREEN_SIZE[0] / 2.0, SCREEN_SIZE[1] / 2.0)
        frame = 0
        running = True
        while running and (args.frames is None or frame < args.frames):
            dt = clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            keys = pygame.key.get_pressed()
            dx = (CAMERA_SPEED if keys[pygame.K_RIGHT] else 0.0) - (
                CAMERA_SPEED if keys[pygame.K_LEFT] else 0.0
            )
            dy = (CAMERA_SPEED if keys[pygame.K_DOWN] else 0.0) - (
                CAMERA_SPEED if keys[pygame.K_UP] else 0.0
            )
            camera = camera + Vec2(dx, dy)

            width, height = screen.get_size()
            screen_size = Vec2(float(width), float(height))
            world.update(camera, screen_size, dt)

            screen.fill(SKYBLUE)
            world.draw(camera, screen_size, screen)
            screen.blit(font.render(f"FPS: {round(clock.get_fps())}", True, WHITE), (10, 10))
            screen.blit(font.render(f"Chunks: {len(world.chunks)}", True, WHITE), (10, 30))
            pygame.display.flip()
            frame += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())