from __future__ import annotations

import logging

from buildreport.console import BufferConsole, Console, ConsoleColor
from buildreport.diagnostics import ExecutionContext, Verbosity
from buildreport.report import (
    InvalidArgumentError,
    Report,
    ReportEntry,
    ReportEntryCategory,
    TaskExecutionStatus,
    format_elapsed,
)

from .labels import ReportLabels

logger = logging.getLogger(__name__)

MIN_NAME_WIDTH = 29
DURATION_WIDTH = 20


class ReportPrinter:
    def __init__(
        self,
        console: Console,
        context: ExecutionContext,
        labels: ReportLabels | None = None,
    ):
        self.console = console
        self.context = context
        self.labels = labels or ReportLabels()

    def write(self, report: Report | None) -> None:
        if report is None:
            raise InvalidArgumentError("report")

        logger.debug("Writing report with %d entries", len(report))
        try:
            name_width = self._name_width(report)
            rule = "-" * (name_width + DURATION_WIDTH)
            self.console.foreground_color = ConsoleColor.GREEN

            # Header
            self.console.write_line()
            self.console.write_line(
                _row(name_width, self.labels.task, self.labels.duration)
            )
            self.console.write_line(rule)

            hidden = 0
            for entry in report:
                if not self._should_write(entry):
                    hidden += 1
                    continue
                self.console.foreground_color = _entry_color(entry)
                self.console.write_line(
                    _row(name_width, entry.task_name, self._duration_text(entry))
                )

            if hidden:
                logger.debug("Omitted %d delegated task(s) from the report", hidden)

            # Footer
            self.console.foreground_color = ConsoleColor.GREEN
            self.console.write_line(rule)
            self.console.write_line(
                _row(
                    name_width,
                    self.labels.total,
                    format_elapsed(report.total_duration),
                )
            )
        finally:
            self.console.reset_color()

    def render(self, report: Report | None) -> str:
        buffer = BufferConsole()
        ReportPrinter(buffer, self.context, self.labels).write(report)
        return buffer.text()

    def _name_width(self, report: Report) -> int:
        width = MIN_NAME_WIDTH
        for entry in report:
            if len(entry.task_name) > width:
                width = len(entry.task_name)
        return width + 1

    def _should_write(self, entry: ReportEntry) -> bool:
        if entry.execution_status == TaskExecutionStatus.DELEGATED:
            return self.context.verbosity >= Verbosity.VERBOSE
        return True

    def _duration_text(self, entry: ReportEntry) -> str:
        if entry.execution_status == TaskExecutionStatus.SKIPPED:
            return self.labels.skipped
        return format_elapsed(entry.duration)


def _entry_color(entry: ReportEntry) -> ConsoleColor:
    if entry.category in (ReportEntryCategory.SETUP, ReportEntryCategory.TEARDOWN):
        return ConsoleColor.CYAN
    if entry.execution_status == TaskExecutionStatus.EXECUTED:
        return ConsoleColor.GREEN
    return ConsoleColor.GRAY


def _row(name_width: int, name: str, value: str) -> str:
    return f"{name:<{name_width}}{value:<{DURATION_WIDTH}}"
