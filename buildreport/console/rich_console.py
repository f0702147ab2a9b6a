"""Console backed by a Rich terminal console."""

from __future__ import annotations

from rich.console import Console as RichTerminal

from .types import ConsoleColor

_STYLES: dict[ConsoleColor, str | None] = {
    ConsoleColor.DEFAULT: None,
    ConsoleColor.GREEN: "green",
    ConsoleColor.CYAN: "cyan",
    ConsoleColor.GRAY: "grey70",
}


class RichConsole:
    """Write plain lines to a Rich console in the current foreground color.

    Markup, highlighting and emoji codes are disabled so that text is
    printed exactly as given. Lines are never wrapped.
    """

    def __init__(self, terminal: RichTerminal | None = None, *, no_color: bool = False):
        """
        Args:
            terminal: Rich console to write to (a stdout console if not provided).
            no_color: If True, lines are written without any style.
        """
        self.terminal = terminal or RichTerminal(highlight=False)
        self.no_color = no_color
        self._color = ConsoleColor.DEFAULT

    @property
    def foreground_color(self) -> ConsoleColor:
        return self._color

    @foreground_color.setter
    def foreground_color(self, color: ConsoleColor) -> None:
        self._color = color

    def write_line(self, text: str = "") -> None:
        style = None if self.no_color else _STYLES[self._color]
        self.terminal.print(
            text,
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def reset_color(self) -> None:
        self._color = ConsoleColor.DEFAULT
