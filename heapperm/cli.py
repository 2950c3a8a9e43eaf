"""Command line entry point: ``heapperm [--auto-base] [-v] INT...``.

Prints every permutation of the given integers, one per line, in Heap's
algorithm order. Diagnostics go to stderr so stdout carries permutations only.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Iterable, Sequence, TextIO

from heapperm._config import get_log_level
from heapperm.heaps_core import generate

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?[0-9]+")
# same forms C's %i conversion accepts
_C_INTEGER = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
# a dash followed by a digit starts a value, not an option
_SIGNED_VALUE = re.compile(r"-[0-9]")


class InvalidArgument(ValueError):
    """A command line token that is not an integer."""


def parse_int(token: str, auto_base: bool = False) -> int:
    text = token.strip()
    if not auto_base:
        if _DECIMAL.fullmatch(text) is None:
            raise InvalidArgument(f"invalid integer: {token!r}")
        return int(text)

    match = _C_INTEGER.fullmatch(text)
    if match is None:
        raise InvalidArgument(f"invalid integer: {token!r}")
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def parse_ints(tokens: Iterable[str], auto_base: bool = False) -> list[int]:
    return [parse_int(token, auto_base) for token in tokens]


def format_permutation(seq: Iterable, sep: str = " ") -> str:
    return sep.join(str(x) for x in seq)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heapperm",
        description="Print every permutation of INT... using Heap's algorithm.",
    )
    parser.add_argument(
        "integers", nargs="*", metavar="INT",
        help="elements to permute; duplicates count as distinct positions",
    )
    parser.add_argument(
        "--auto-base", action="store_true",
        help="accept 0x (hexadecimal) and leading-0 (octal) prefixes",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress to stderr (repeat for debug output)",
    )
    return parser


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = getattr(logging, get_log_level())
    logging.basicConfig(
        stream=sys.stderr, format="%(name)s: %(levelname)s: %(message)s"
    )
    logging.getLogger("heapperm").setLevel(level)


def split_argv(argv: Iterable[str]) -> tuple[list[str], list[str]]:
    """Separate option flags from element tokens, keeping element order.

    argparse only recognises plain ``-123`` as a negative number and stops
    filling a ``*`` positional at the first option, so values such as
    ``-0x10`` or ``1 -v 2`` are sorted out here. Everything after ``--`` is
    an element.
    """
    options, tokens = [], []
    rest = iter(argv)
    for token in rest:
        if token == "--":
            tokens.extend(rest)
        elif (
            len(token) > 1 and token.startswith("-")
            and not _SIGNED_VALUE.match(token)
        ):
            options.append(token)
        else:
            tokens.append(token)
    return options, tokens


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = build_parser()
    options, tokens = split_argv(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(options)
    _configure_logging(args.verbose)

    try:
        values = parse_ints(tokens, auto_base=args.auto_base)
    except InvalidArgument as exc:
        logger.debug("rejecting arguments %r", tokens)
        parser.error(str(exc))

    if out is None:
        out = sys.stdout
    logger.info("permuting %d values", len(values))
    count = generate(values, lambda seq: out.write(format_permutation(seq) + "\n"))
    logger.info("wrote %d permutations", count)
    return 0


def run() -> None:
    sys.exit(main())
