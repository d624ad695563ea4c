#! /usr/bin/env python

"""
Report the n-th highest value in a stream of values.

Values are read one per line from a file or from standard input, and fed
through a RankedWindow, so memory use depends only on n, not on the length
of the stream. By default, only the final answer is printed. With
--running, a CSV row is written after every value.
"""

import argparse
import csv
import logging.config
import math
import sys
from pathlib import Path
from typing import (Callable, Dict, Iterable, Iterator, Optional, Sequence,
                    TextIO, Tuple, TypedDict, TypeVar)

from rankwindow.core.ranked_window import (InvalidArgumentError,
                                           RankedWindow)
from rankwindow.utils.user_error import UserError
try:
    from rankwindow.utils.rankwindow_logging_override import LOGGING  # type: ignore[import]
except ImportError:
    from rankwindow.utils.rankwindow_logging_config import LOGGING

logger = logging.getLogger(__name__)

T = TypeVar('T')
STDIN_NAME = '-'


class Row(TypedDict, total=True):
    count: int
    value: object
    nth_highest: object


FIELDNAMES = tuple(Row.__annotations__.keys())


def parse_float(text: str) -> float:
    value = float(text)
    if math.isnan(value):
        raise ValueError('NaN has no place in a ranking')
    return value


PARSERS: Dict[str, Callable[[str], object]] = {
    'int': int,
    'float': parse_float,
    'str': str,
}


def read_values(lines: Iterable[str],
                parse: Callable[[str], T]) -> Iterator[T]:
    """ Parse one value from each non-blank line.

    Blank lines are skipped, but still counted for error messages.
    """
    for line_number, line in enumerate(lines, 1):
        text = line.strip()
        if not text:
            continue
        try:
            yield parse(text)
        except ValueError:
            raise UserError("Invalid value %r on line %d.",
                            text,
                            line_number) from None


def build_window(capacity: int) -> RankedWindow:
    try:
        return RankedWindow(capacity)
    except InvalidArgumentError:
        raise UserError("Capacity must be a positive integer, not %r.",
                        capacity) from None


def nth_highest(values: Iterable[T], capacity: int) -> Optional[T]:
    """ Find the n-th highest of values, or None if there are fewer than n. """
    window: RankedWindow[T] = build_window(capacity)
    window.extend(values)
    return window.query()


def running_nth_highest(
        values: Iterable[T],
        capacity: int) -> Iterator[Tuple[int, T, Optional[T]]]:
    """ Yield (count, value, n-th highest so far) after each value.

    The capacity is checked as soon as this is called, not when the first
    value arrives.
    """
    window: RankedWindow[T] = build_window(capacity)
    return scan_window(values, window)


def scan_window(
        values: Iterable[T],
        window: RankedWindow[T]) -> Iterator[Tuple[int, T, Optional[T]]]:
    for count, value in enumerate(values, 1):
        window.update(value)
        yield count, value, window.query()


def write_running(values: Iterable[T],
                  window: RankedWindow[T],
                  output: TextIO) -> None:
    writer = csv.DictWriter(output, fieldnames=FIELDNAMES, lineterminator='\n')
    writer.writeheader()
    for count, value, result in scan_window(values, window):
        row: Row = {'count': count,
                    'value': value,
                    'nth_highest': '' if result is None else result}
        writer.writerow(row)


def write_final(values: Iterable[T],
                window: RankedWindow[T],
                output: TextIO) -> None:
    window.extend(values)
    result = window.query()
    if result is None:
        logger.warning("Only %d values found, need %d for the n-th highest.",
                       len(window),
                       window.capacity)
        return
    print(result, file=output)


def main_typed(input: Path,
               output: TextIO,
               capacity: int,
               value_type: str = 'float',
               is_running: bool = False) -> None:
    """
    Read values from input, and write the n-th highest to output.

    Parameters:
        input (Path): text file with one value per line, or '-' for stdin.
        output (TextIO): where to write the result.
        capacity (int): the n in n-th highest.
        value_type (str): one of the keys in PARSERS.
        is_running (bool): write a CSV row after every value, instead of
            just the final answer.
    """
    parse = PARSERS[value_type]
    write = write_running if is_running else write_final
    window: RankedWindow = build_window(capacity)

    try:
        if str(input) == STDIN_NAME:
            write(read_values(sys.stdin, parse), window, output)
        elif not input.is_file():
            raise UserError("Input file %r does not exist or is not a file.",
                            str(input))
        else:
            with input.open(encoding='utf-8') as input_file:
                write(read_values(input_file, parse), window, output)
    except UnicodeDecodeError as e:
        raise UserError("Input file %r is not valid text: %s.",
                        str(input),
                        e) from None
    logger.debug("Kept %d of the highest values.", len(window))


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report the n-th highest value in a stream of values.")

    parser.add_argument('input', type=Path, nargs='?', default=Path(STDIN_NAME),
                        help="Text file with one value per line, or - for "
                             "standard input.")
    parser.add_argument('-n', '--capacity', type=int, default=1,
                        help='Rank to report: 1 is the highest value.')
    parser.add_argument('--type', dest='value_type', choices=sorted(PARSERS),
                        default='float',
                        help='How to read each value.')
    parser.add_argument('--running', action='store_true',
                        help='Write a CSV row after every value.')

    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument('--verbose', action='store_true',
                                 help='Increase output verbosity.')
    verbosity_group.add_argument('--no-verbose', action='store_true',
                                 help='Normal output verbosity.', default=True)
    verbosity_group.add_argument('--debug', action='store_true',
                                 help='Maximum output verbosity.')
    verbosity_group.add_argument('--quiet', action='store_true',
                                 help='Minimize output verbosity.')

    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.ERROR
    elif args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logger.setLevel(level)
    logging.getLogger('rankwindow').setLevel(level)


def main(argv: Sequence[str]) -> int:
    args = parse_arguments(argv)
    configure_logging(args)

    try:
        main_typed(args.input,
                   sys.stdout,
                   args.capacity,
                   args.value_type,
                   args.running)
        logger.debug("Done.")
        return 0
    except BrokenPipeError:
        logger.debug("Broken pipe.")
        return 1
    except KeyboardInterrupt:
        logger.debug("Interrupted.")
        return 1
    except UserError as e:
        logger.fatal(e.fmt, *e.fmt_args)
        return e.code


def entry() -> None:
    logging.config.dictConfig(LOGGING)
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__": entry()  # noqa
