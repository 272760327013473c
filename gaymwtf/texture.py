"""Reading files and decoding images into textures."""

from __future__ import annotations

import io
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402


class TextureLoadError(Exception):
    """A file could not be read or decoded."""


def load_file_sync(path: str | os.PathLike[str]) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise TextureLoadError(f"Failed to read file: {path}") from exc


def load_texture_sync(path: str | os.PathLike[str]) -> pygame.Surface:
    """Decode an image file into an RGBA surface."""
    data = load_file_sync(path)
    try:
        image = pygame.image.load(io.BytesIO(data), os.fspath(path))
    except pygame.error as exc:
        raise TextureLoadError(f"Failed to decode image from file: {path}") from exc
    texture = pygame.Surface(image.get_size(), pygame.SRCALPHA, 32)
    texture.blit(image, (0, 0))
    return texture