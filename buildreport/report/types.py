from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum


class TaskExecutionStatus(Enum):
    EXECUTED = "executed"
    SKIPPED = "skipped"
    DELEGATED = "delegated"


class ReportEntryCategory(Enum):
    SETUP = "setup"
    TEARDOWN = "teardown"
    TASK = "task"


@dataclass(frozen=True)
class ReportEntry:
    task_name: str
    duration: timedelta = timedelta(0)
    execution_status: TaskExecutionStatus = TaskExecutionStatus.EXECUTED
    category: ReportEntryCategory = ReportEntryCategory.TASK

    def __post_init__(self) -> None:
        if not isinstance(self.task_name, str) or len(self.task_name.strip()) < 1:
            raise ValueError("Task name can't be empty")

        if self.duration < timedelta(0):
            raise ValueError(f"{self.task_name}: duration can't be negative")


@dataclass(frozen=True)
class Report:
    entries: tuple[ReportEntry, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    @property
    def total_duration(self) -> timedelta:
        # Every entry counts, whatever its status.
        return sum((entry.duration for entry in self.entries), timedelta(0))


class ReportError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class InvalidArgumentError(ReportError, ValueError):
    def __init__(self, argument: str):
        super().__init__(f"Invalid argument: {argument} must be provided")
        self.argument = argument
