#! /usr/bin/env python

"""
Command-line interface for rankwindow: run one of the programs below by
name, passing it the rest of the arguments.
"""

import argparse
import importlib
import logging.config
import os
import sys
from pathlib import Path
from typing import Sequence

try:
    from rankwindow.utils.rankwindow_logging_override import LOGGING  # type: ignore[import]
except ImportError:
    from rankwindow.utils.rankwindow_logging_config import LOGGING

# Each module here has a main(argv) function that returns an exit code.
EXECUTABLES = [
    "rankwindow/utils/nth_highest.py",
    "rankwindow/utils/version.py",
]


def executable_name(path: str) -> str:
    file_name = Path(path).name
    name, extension = os.path.splitext(file_name)
    return name


def executable_module(path: str) -> str:
    noext, extension = os.path.splitext(path)
    pythized = noext.replace('/', '.')
    return pythized


EXECUTABLES_MAP = {executable_name(path): path for path in EXECUTABLES}


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run rankwindow program.", add_help=False)
    parser.add_argument("--version", action="store_true", help="Print version and exit.")
    parser.add_argument('--help', action='store_true', help='Show this help message and exit.')
    parser.add_argument("program", nargs='?',
                        help="Program name: " + ", ".join(EXECUTABLES_MAP) + ".")
    parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Program arguments.")
    return parser


def main(argv: Sequence[str]) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.version:
        return run_program('version', [])

    elif args.help:
        parser.print_help()
        return 0

    elif EXECUTABLES_MAP.get(args.program):
        return run_program(args.program, args.arguments)

    else:
        parser.print_help()
        return 1


def run_program(name: str, arguments: Sequence[str]) -> int:
    module = importlib.import_module(executable_module(EXECUTABLES_MAP[name]))
    return module.main(arguments)


def cli() -> int:
    logging.config.dictConfig(LOGGING)
    return main(sys.argv[1:])


if __name__ == '__main__':
    sys.exit(cli())
