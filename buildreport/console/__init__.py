from .buffer import BufferConsole, ConsoleLine
from .rich_console import RichConsole
from .types import Console, ConsoleColor

__all__ = ["Console", "ConsoleColor", "RichConsole", "BufferConsole", "ConsoleLine"]
