"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging

from lightsgrid.tui import run_loop_based, run_turn_based

PROJECT_NAME = "lightsgrid"
PROJECT_VERSION = "0.0.1"

_log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME, description=f"{PROJECT_NAME} version {PROJECT_VERSION}"
    )
    parser.add_argument("-m", "--message", help="A message to print back out")
    parser.add_argument("--version", action="store_true", help="Show version information")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--turn_based", action="store_true")
    mode.add_argument("--loop_based", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        if args.version:
            print(PROJECT_VERSION)
            return 0
        if args.turn_based:
            run_turn_based()
        else:
            run_loop_based()
    except Exception as exc:  # noqa: BLE001 - last-resort report, as the program exits anyway
        _log.error("Unhandled exception in main: %s", exc)
    return 0