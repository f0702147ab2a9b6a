from dataclasses import dataclass

from buildreport.printer import ReportLabels
from buildreport.report import Report


@dataclass(frozen=True)
class ReportDocument:
    report: Report
    labels: ReportLabels


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
