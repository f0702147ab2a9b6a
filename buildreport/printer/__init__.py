from .labels import ReportLabels
from .printer import DURATION_WIDTH, MIN_NAME_WIDTH, ReportPrinter

__all__ = ["ReportPrinter", "ReportLabels", "MIN_NAME_WIDTH", "DURATION_WIDTH"]
