import logging
import sys

from buildreport.diagnostics import Verbosity


def setup_logging(verbosity: Verbosity) -> None:
    """Send package log records to stderr at the level matching `verbosity`."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    package_logger = logging.getLogger("buildreport")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(verbosity.log_level)
    package_logger.propagate = False
