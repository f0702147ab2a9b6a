from dataclasses import dataclass


@dataclass(frozen=True)
class ReportLabels:
    task: str = "Task"
    duration: str = "Duration"
    total: str = "Total:"
    skipped: str = "Skipped"
