from __future__ import annotations

import argparse
import logging
import sys

from buildreport.config import ConfigError, load_report
from buildreport.console import RichConsole
from buildreport.diagnostics import ExecutionContext, Verbosity
from buildreport.printer import ReportPrinter

from .args import build_parser
from .logs import setup_logging

logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        verbosity = Verbosity.parse(args.verbosity)
        setup_logging(verbosity)

        match args.command:
            case "show":
                return cmd_show(args, verbosity)
            case "list":
                return cmd_list(args)
            case _:
                return 2

    except (ConfigError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_show(args: argparse.Namespace, verbosity: Verbosity) -> int:
    document = load_report(args.report)
    console = RichConsole(no_color=args.no_color)
    printer = ReportPrinter(console, ExecutionContext(verbosity), document.labels)
    printer.write(document.report)
    logger.info("Printed report %s", args.report)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    document = load_report(args.report)
    for entry in document.report:
        print(entry.task_name)
    return 0
