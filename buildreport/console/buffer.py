from __future__ import annotations

from dataclasses import dataclass

from .types import ConsoleColor


@dataclass(frozen=True)
class ConsoleLine:
    color: ConsoleColor
    text: str


class BufferConsole:
    """In-memory console; keeps every written line with its color."""

    def __init__(self) -> None:
        self.lines: list[ConsoleLine] = []
        self.resets = 0
        self._color = ConsoleColor.DEFAULT

    @property
    def foreground_color(self) -> ConsoleColor:
        return self._color

    @foreground_color.setter
    def foreground_color(self, color: ConsoleColor) -> None:
        self._color = color

    def write_line(self, text: str = "") -> None:
        self.lines.append(ConsoleLine(self._color, text))

    def reset_color(self) -> None:
        self._color = ConsoleColor.DEFAULT
        self.resets += 1

    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)
