"""
Command-line entry points converting between JSON and LD text.

``json2ld`` reads newline-delimited JSON values and writes their LD
encoding; ``ld2json`` reads LD text and writes one line of compact JSON per
top-level object or array. Both exit 0 on success and 1 after printing a
single diagnostic line to standard error.
"""

import argparse
import logging
import os
import sys
from collections.abc import Iterator
from typing import IO
from typing import Any

import orjson

from . import INDENT_STEP
from . import WRAP_WIDTH
from . import LDDecodeError
from . import dump
from . import iter_load

logger = logging.getLogger(__name__)


def _configure_logging(debug: bool) -> None:
    level = (
        logging.DEBUG
        if debug or "LDJSON_DEBUG" in os.environ
        else logging.WARNING
    )
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(name)s  %(lineno)d  %(message)s",
    )


def _build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    """Builds a parser whose -h writes usage to stderr."""
    parser = argparse.ArgumentParser(
        prog=prog, description=description, add_help=False
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="show this help and exit"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="log parser activity"
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    return parser


def _open_input(name: str | None) -> IO[str]:
    if name is None:
        return sys.stdin
    return open(name, encoding="utf-8")


class MalformedJsonInput(ValueError):
    """JSON input rejected by orjson, located by its input line."""

    def __init__(self, msg: str, lineno: int) -> None:
        self.msg = msg
        self.lineno = lineno
        super().__init__(f"{msg} on line {lineno}")


class _ValueScanner:
    """
    Tracks bracket depth outside string literals across input lines.

    Lets the reader hand orjson a buffer only once it holds a complete
    value, so every input line is scanned once.
    """

    def __init__(self) -> None:
        self.depth = 0
        self.in_string = False
        self.escaped = False
        self.started = False

    def feed(self, line: str) -> bool:
        """Returns True when the lines fed so far end a value."""
        for char in line:
            if self.in_string:
                if self.escaped:
                    self.escaped = False
                elif char == "\\":
                    self.escaped = True
                elif char == '"':
                    self.in_string = False
            elif char == '"':
                self.in_string = self.started = True
            elif char in "[{":
                self.depth += 1
                self.started = True
            elif char in "]}":
                self.depth -= 1
                self.started = True
            elif not char.isspace():
                self.started = True

        return self.started and not self.in_string and self.depth <= 0


def _parse_json(text: str, first_lineno: int) -> Any:
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise MalformedJsonInput(e.msg, first_lineno + e.lineno - 1) from e


def iter_json_values(fp: IO[str]) -> Iterator[Any]:
    """
    Yields JSON values from a stream of lines.

    A value may span several lines. Lines are buffered until brackets
    outside strings balance, then the buffer is parsed once; a syntax error
    is raised as MalformedJsonInput with the absolute input line number.
    """
    pending: list[str] = []
    first_lineno = 0
    scanner = _ValueScanner()

    for lineno, line in enumerate(fp, 1):
        if not pending:
            if not line.strip():
                continue
            first_lineno = lineno
        pending.append(line)

        if scanner.feed(line):
            yield _parse_json("".join(pending), first_lineno)
            pending.clear()
            scanner = _ValueScanner()

    if pending:
        yield _parse_json("".join(pending), first_lineno)


def json2ld(argv: list[str] | None = None) -> int:
    """Converts JSON values to LD text."""
    parser = _build_parser("json2ld", "Convert JSON values to LD text.")
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=WRAP_WIDTH,
        help=f"maximum string line width (default: {WRAP_WIDTH})",
    )
    parser.add_argument(
        "-i",
        "--indent",
        type=int,
        default=INDENT_STEP,
        help=f"spaces per nesting level (default: {INDENT_STEP})",
    )
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stderr)
        return 0

    _configure_logging(args.debug)

    try:
        fp = _open_input(args.file)
    except OSError:
        print(f'Unable to open file "{args.file}"', file=sys.stderr)
        return 1

    try:
        for count, value in enumerate(iter_json_values(fp), 1):
            logger.debug("encoding value %d", count)
            dump(value, sys.stdout, width=args.width, indent=args.indent)
    except (TypeError, ValueError) as e:
        # MalformedJsonInput and LDEncodeError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: maximum nesting depth exceeded", file=sys.stderr)
        return 1
    except MemoryError:
        print("Memory allocation error", file=sys.stderr)
        return 1
    finally:
        if fp is not sys.stdin:
            fp.close()

    return 0


def ld2json(argv: list[str] | None = None) -> int:
    """Converts LD text to compact JSON, one line per top-level value."""
    parser = _build_parser("ld2json", "Convert LD text to JSON lines.")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="ignore data lines that belong to no value",
    )
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stderr)
        return 0

    _configure_logging(args.debug)

    try:
        fp = _open_input(args.file)
    except OSError:
        print(f'Unable to open file "{args.file}"', file=sys.stderr)
        return 1

    try:
        for count, value in enumerate(iter_load(fp, strict=not args.lenient), 1):
            logger.debug("decoded value %d", count)
            sys.stdout.write(orjson.dumps(value).decode("utf-8") + "\n")
    except LDDecodeError as e:
        print(e, file=sys.stderr)
        return 1
    except orjson.JSONEncodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except MemoryError:
        print("Memory allocation error", file=sys.stderr)
        return 1
    finally:
        if fp is not sys.stdin:
            fp.close()

    return 0
