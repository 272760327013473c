"""A modular 2D tile-and-chunk game engine core on pygame, with a demo scene."""

__version__ = "0.1.0"

__all__ = [
    "biome",
    "chunk",
    "demo",
    "draw",
    "geometry",
    "logger",
    "menu",
    "objects",
    "texture",
    "tile",
    "world",
]