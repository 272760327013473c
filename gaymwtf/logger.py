"""Coloured, per-target log output for the engine's subsystems."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Mapping
from typing import ClassVar, TextIO

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

WORLD = "world"
CHUNK = "chunk"
RENDER = "render"
ENTITY = "entity"
TARGETS = (WORLD, CHUNK, RENDER, ENTITY)

_RESET = "\x1b[0m"


def _style(levelno: int) -> tuple[str, str]:
    if levelno >= logging.ERROR:
        return "\x1b[31m", "ERROR"
    if levelno >= logging.WARNING:
        return "\x1b[33m", "WARN"
    if levelno >= logging.INFO:
        return "\x1b[32m", "INFO"
    if levelno >= logging.DEBUG:
        return "\x1b[36m", "DEBUG"
    return "\x1b[90m", "TRACE"


class GameLogger(logging.Handler):
    """A handler that filters by target name and prints coloured lines."""

    _instance: ClassVar[GameLogger | None] = None
    _init_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        levels: Mapping[str, int] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__()
        self.levels: dict[str, int] = {target: logging.INFO for target in TARGETS}
        if levels:
            self.levels.update(levels)
        self.stream = stream

    @classmethod
    def init(cls) -> GameLogger:
        """Install one handler on the root logger; later calls return the same one."""
        with cls._init_lock:
            if cls._instance is None:
                handler = cls()
                root = logging.getLogger()
                root.addHandler(handler)
                root.setLevel(TRACE)
                cls._instance = handler
            return cls._instance

    def should_log(self, target: str, level: int) -> bool:
        return level >= self.levels.get(target, logging.INFO)

    def filter(self, record: logging.LogRecord):
        if not self.should_log(record.name, record.levelno):
            return False
        return super().filter(record)

    def format(self, record: logging.LogRecord) -> str:
        color, name = _style(record.levelno)
        return f"{color}[{name:5}][{record.name}] {record.getMessage()}{_RESET}"

    def emit(self, record: logging.LogRecord) -> None:
        try:
            stream = self.stream if self.stream is not None else sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)