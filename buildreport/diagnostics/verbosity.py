from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum


class Verbosity(IntEnum):
    QUIET = 0
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DIAGNOSTIC = 4

    @classmethod
    def parse(cls, text: str) -> Verbosity:
        value = text.strip().lower()
        for verbosity in cls:
            name = verbosity.name.lower()
            if value == name or value == name[0]:
                return verbosity

        names = ", ".join(v.name.lower() for v in cls)
        raise ValueError(f"Unknown verbosity: {text!r}\n Expected one of: {names}")

    @property
    def log_level(self) -> int:
        match self:
            case Verbosity.QUIET:
                return logging.ERROR
            case Verbosity.MINIMAL | Verbosity.NORMAL:
                return logging.WARNING
            case Verbosity.VERBOSE:
                return logging.INFO
            case _:
                return logging.DEBUG


@dataclass(frozen=True)
class ExecutionContext:
    verbosity: Verbosity = Verbosity.NORMAL
