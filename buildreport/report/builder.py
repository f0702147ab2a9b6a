from __future__ import annotations

from datetime import timedelta

from .types import Report, ReportEntry, ReportEntryCategory, TaskExecutionStatus


class ReportBuilder:
    """Collects entries while tasks run and freezes them into a `Report`."""

    def __init__(self) -> None:
        self._entries: list[ReportEntry] = []

    def __len__(self):
        return len(self._entries)

    def add(
        self,
        task_name: str,
        duration: timedelta,
        category: ReportEntryCategory = ReportEntryCategory.TASK,
    ) -> ReportBuilder:
        self._entries.append(
            ReportEntry(task_name, duration, TaskExecutionStatus.EXECUTED, category)
        )
        return self

    def add_skipped(
        self,
        task_name: str,
        category: ReportEntryCategory = ReportEntryCategory.TASK,
    ) -> ReportBuilder:
        self._entries.append(
            ReportEntry(task_name, timedelta(0), TaskExecutionStatus.SKIPPED, category)
        )
        return self

    def add_delegated(self, task_name: str, duration: timedelta) -> ReportBuilder:
        self._entries.append(
            ReportEntry(task_name, duration, TaskExecutionStatus.DELEGATED)
        )
        return self

    def build(self) -> Report:
        return Report(tuple(self._entries))
