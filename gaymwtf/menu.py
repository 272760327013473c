"""Menus and the actions they report."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MenuActionKind(Enum):
    NONE = "none"
    CHANGE_STATE = "change_state"
    QUIT = "quit"


@dataclass(frozen=True)
class MenuAction:
    """What a menu asks the game to do after an update."""

    kind: MenuActionKind
    state: str | None = None

    @classmethod
    def none(cls) -> MenuAction:
        return cls(MenuActionKind.NONE)

    @classmethod
    def change_state(cls, state: str) -> MenuAction:
        return cls(MenuActionKind.CHANGE_STATE, state)

    @classmethod
    def quit(cls) -> MenuAction:
        return cls(MenuActionKind.QUIT)


class Menu(ABC):
    """A screen that updates, draws and names itself."""

    @abstractmethod
    def update(self, dt: float) -> MenuAction: ...

    @abstractmethod
    def draw(self, batch: Any) -> None: ...

    @abstractmethod
    def name(self) -> str: ...