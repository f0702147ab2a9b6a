from .loader import load_report
from .types import ConfigError, ReportDocument, UnsupportedConfigFormatError

__all__ = [
    "load_report",
    "ReportDocument",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
