#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
numlit command-line interface

Provides three commands:

1. **parse**    — Parse literals into values of a numeric type
2. **classify** — Show the notation, radix and body of literals
3. **types**    — List the registered numeric types

Usage
-----
::

    # Parse as Python int (unbounded)
    python -m numlit.cli parse 0xCAFE 0b1010 0723642

    # Parse as uint8, printing hexadecimal
    python -m numlit.cli parse 0xff 255 --type uint8 --format hex

    # Substitute a fallback for unparseable literals
    python -m numlit.cli parse "random text" --fallback 0xCAFE
"""

from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from numlit.exceptions import LiteralParseError, NumLitError
from numlit.literal import parse_literal, parse_literal_fallback
from numlit.types.floats import FloatType
from numlit.types.integers import BoundedIntegerType
from numlit.types.registry import NUMERIC_TYPES, resolve_numeric_type
from numlit.utils.parsing import identify_char_literal, identify_literal, is_char_literal

logger = logging.getLogger("numlit.cli")

# ---------------------------------------------------------------------------
# Output configuration
# ---------------------------------------------------------------------------

DECIMAL_CHUNK_DIGITS = 4000


def decimal_str(value: int) -> str:
    """Decimal text of *value*, including ints past the int/str digit limit."""
    chunk_base = 10 ** DECIMAL_CHUNK_DIGITS
    if -chunk_base < value < chunk_base:
        return str(value)
    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value:
        value, rem = divmod(value, chunk_base)
        chunks.append(rem)
    head, *rest = reversed(chunks)
    return sign + str(head) + "".join(f"{c:0{DECIMAL_CHUNK_DIGITS}d}" for c in rest)


OUTPUT_FORMATS = {
    "dec": decimal_str,
    "hex": lambda v: f"{'-' if v < 0 else ''}0x{abs(v):x}",
    "oct": lambda v: f"{'-' if v < 0 else ''}0{abs(v):o}",
    "bin": lambda v: f"{'-' if v < 0 else ''}0b{abs(v):b}",
}


def format_value(value, fmt: str) -> str:
    """Render *value* in the requested output format.

    Non-decimal formats apply to integral values only; floats are always
    printed in decimal.
    """
    if isinstance(value, (float, np.floating)):
        return str(value)
    if fmt == "dec" and not isinstance(value, int):
        return str(value)
    return OUTPUT_FORMATS[fmt](int(value))


def _describe_type(name: str) -> str:
    adapter = NUMERIC_TYPES[name]
    if isinstance(adapter, BoundedIntegerType):
        return f"[{adapter.min_value}, {adapter.max_value}]"
    if isinstance(adapter, FloatType):
        return f"|x| <= {adapter.max_value:.6e}"
    return "unbounded"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_parse(args):
    """Parse each literal and print one value per line."""
    adapter = resolve_numeric_type(args.type)

    fallback = None
    if args.fallback is not None:
        try:
            fallback = parse_literal(args.fallback, adapter)
        except LiteralParseError as exc:
            print(f"ERROR: invalid --fallback {args.fallback!r}: {exc}")
            return 2

    total_fail = 0
    for text in args.literals:
        if fallback is not None:
            value = parse_literal_fallback(text, fallback, adapter)
        else:
            try:
                value = parse_literal(text, adapter)
            except LiteralParseError as exc:
                print(f"{text}: FAIL: {exc}" if args.show_input else f"FAIL: {exc}")
                total_fail += 1
                if not args.continue_on_error:
                    return 1
                continue

        rendered = format_value(value, args.format)
        print(f"{text}: {rendered}" if args.show_input else rendered)

    return 0 if total_fail == 0 else 1


def cmd_classify(args):
    """Print notation, radix and body for each literal."""
    for text in args.literals:
        if is_char_literal(text):
            result = identify_char_literal(text)
        else:
            result = identify_literal(text)
        print(f"{text!r}: {result.notation.value}, radix {int(result.radix)}, body {result.body!r}")
    return 0


def cmd_types(args):
    """List registered numeric types."""
    width = max(len(name) for name in NUMERIC_TYPES)
    for name in NUMERIC_TYPES:
        print(f"  {name:<{width}s}  {_describe_type(name)}")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="numlit",
        description="Parse radix-prefixed numeric literals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    numlit parse 0xCAFE 0b1000_0001 0723642            # as Python int
    numlit parse 0x1ff --type uint8                    # overflow -> FAIL
    numlit parse 255 --type uint8 --format hex         # prints 0xff
    numlit parse "random text" --fallback 0xCAFE       # prints 51966
    numlit classify 0B101 0 017 "'A'"
    numlit types
""",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_parse = sub.add_parser("parse", help="Parse literals into values")
    p_parse.add_argument("literals", nargs="+", help="Literal texts to parse")
    p_parse.add_argument(
        "--type", "-t",
        default="int",
        choices=list(NUMERIC_TYPES),
        help="Target numeric type (default: int)",
    )
    p_parse.add_argument(
        "--fallback", "-f",
        default=None,
        help="Literal substituted for unparseable input (default: fail)",
    )
    p_parse.add_argument(
        "--format",
        default="dec",
        choices=list(OUTPUT_FORMATS),
        help="Output radix for integral values (default: dec)",
    )
    p_parse.add_argument(
        "--show-input",
        action="store_true",
        help="Prefix each output line with the input literal",
    )
    p_parse.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Keep parsing after a failure (exit status is still 1)",
    )

    p_classify = sub.add_parser("classify", help="Show notation and radix of literals")
    p_classify.add_argument("literals", nargs="+", help="Literal texts to classify")

    sub.add_parser("types", help="List registered numeric types")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "parse": cmd_parse,
        "classify": cmd_classify,
        "types": cmd_types,
    }

    try:
        return commands[args.command](args)
    except NumLitError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
