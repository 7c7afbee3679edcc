"""
mathlang-scan: print the tokens of a MathLang program, one per line.

Handy when a parser chokes and you want to see what it was fed.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import Scanner, ScannerConfig, NumericMode, LexerError


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathlang-scan",
        description="Tokenize a MathLang program and print one token per line."
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Source file to scan. Reads standard input when omitted."
    )
    parser.add_argument(
        "--numbers",
        choices=[mode.value for mode in NumericMode],
        default=None,
        help="Number scanning mode (default: $MATHLANG_NUMERIC_MODE or single-digit)."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every scanned token to stderr."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ScannerConfig.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.numbers:
        config = ScannerConfig(numeric_mode=NumericMode(args.numbers))

    try:
        if args.file:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
            filename = args.file
        else:
            source = sys.stdin.read()
            filename = "<stdin>"
    except OSError as e:
        print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    scanner = Scanner(source, filename, config)
    try:
        for token in scanner:
            print(f"{token.location}\t{token}")
    except LexerError as e:
        print(str(e), end="", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
