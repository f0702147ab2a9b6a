from __future__ import annotations

from enum import Enum
from typing import Protocol


class ConsoleColor(Enum):
    DEFAULT = "default"
    GREEN = "green"
    CYAN = "cyan"
    GRAY = "gray"


class Console(Protocol):
    @property
    def foreground_color(self) -> ConsoleColor: ...

    @foreground_color.setter
    def foreground_color(self, color: ConsoleColor) -> None: ...

    def write_line(self, text: str = "") -> None: ...

    def reset_color(self) -> None: ...
