"""
lox-scan - command-line driver for the Lox scanner

Usage:  lox-scan [--format text|json] [--quiet] [-v] FILE

Prints the token list of FILE (or stdin when FILE is '-'), followed by
any lexical errors on stderr.

Author: xwest
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .lexer import ErrorReporter, Token, scan_tokens, tokenize_file

logger = logging.getLogger(__name__)

# sysexits.h, as used by the reference interpreter
EXIT_OK = 0
EXIT_DATAERR = 65
EXIT_NOINPUT = 66


def _token_to_dict(token: Token) -> dict:
    return {
        "type": token.type.name,
        "lexeme": token.lexeme,
        "literal": token.literal,
        "line": token.line,
    }


def _print_tokens(tokens: List[Token], fmt: str):
    if fmt == "json":
        json.dump([_token_to_dict(t) for t in tokens], sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for token in tokens:
            print(token)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lox-scan",
        description="Tokenize a Lox source file and print its tokens.",
    )
    parser.add_argument("file", help="source file, or '-' for stdin")
    parser.add_argument(
        "--format", choices=("text", "json"), default="text",
        help="output format for the token list (default: text)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="do not print tokens, only report errors",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    filename = "<stdin>" if args.file == "-" else args.file
    reporter = ErrorReporter(filename)
    try:
        if args.file == "-":
            tokens = scan_tokens(sys.stdin.read(), reporter, filename)
        else:
            tokens = tokenize_file(args.file, reporter)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {filename}: {getattr(e, 'strerror', None) or e}", file=sys.stderr)
        return EXIT_NOINPUT

    if not args.quiet:
        _print_tokens(tokens, args.format)

    for diagnostic in reporter.diagnostics:
        print(diagnostic, file=sys.stderr)

    if reporter.had_error:
        logger.debug("%d lexical error(s) in %s", reporter.error_count, filename)
        return EXIT_DATAERR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
