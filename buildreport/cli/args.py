from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="buildreport")

    parser.add_argument(
        "--verbosity",
        default="normal",
        help="quiet, minimal, normal, verbose or diagnostic (delegated tasks show from verbose)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the report without colors",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # show
    show = subparsers.add_parser("show", help="Print a task execution report")
    show.add_argument("report", help="Path to report file")

    # list
    list_ = subparsers.add_parser("list", help="List report task names")
    list_.add_argument("report", help="Path to report file")

    return parser
