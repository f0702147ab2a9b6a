from .console import ConsoleColor
from .diagnostics import ExecutionContext, Verbosity
from .printer import ReportLabels, ReportPrinter
from .report import (
    InvalidArgumentError,
    Report,
    ReportBuilder,
    ReportEntry,
    ReportEntryCategory,
    TaskExecutionStatus,
)

__all__ = [
    "Report",
    "ReportEntry",
    "ReportEntryCategory",
    "TaskExecutionStatus",
    "ReportBuilder",
    "InvalidArgumentError",
    "ReportPrinter",
    "ReportLabels",
    "ConsoleColor",
    "Verbosity",
    "ExecutionContext",
]
