from .builder import ReportBuilder
from .timefmt import format_elapsed, parse_elapsed
from .types import (
    InvalidArgumentError,
    Report,
    ReportEntry,
    ReportEntryCategory,
    ReportError,
    TaskExecutionStatus,
)

__all__ = [
    "Report",
    "ReportEntry",
    "ReportEntryCategory",
    "TaskExecutionStatus",
    "ReportBuilder",
    "ReportError",
    "InvalidArgumentError",
    "format_elapsed",
    "parse_elapsed",
]
