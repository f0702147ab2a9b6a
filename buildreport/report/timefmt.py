"""Constant-pattern elapsed time text: ``H:MM:SS.fffffff``.

Hours never roll over into days and the fraction is always written with
seven digits (100 ns ticks).
"""

from __future__ import annotations

import re
from datetime import timedelta

_TICKS_PER_SECOND = 10_000_000
_TICKS_PER_MICROSECOND = 10

_ELAPSED_RE = re.compile(r"^(\d+):([0-5]\d):([0-5]\d)(?:\.(\d{1,7}))?$")


def format_elapsed(value: timedelta) -> str:
    if value < timedelta(0):
        raise ValueError(f"Elapsed time can't be negative: {value}")

    ticks = (value // timedelta(microseconds=1)) * _TICKS_PER_MICROSECOND
    seconds, fraction = divmod(ticks, _TICKS_PER_SECOND)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{fraction:07d}"


def parse_elapsed(text: str) -> timedelta:
    match = _ELAPSED_RE.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid elapsed time: {text!r}, expected H:MM:SS.fffffff")

    hours, minutes, seconds, fraction = match.groups()
    ticks = int((fraction or "").ljust(7, "0"))
    return timedelta(
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        microseconds=ticks // _TICKS_PER_MICROSECOND,
    )
