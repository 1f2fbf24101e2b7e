#!/usr/bin/env python3
"""
Command line front end for the s-expression reader.

Parses each input and prints the rendered tree, one line per input.
Exit status is 0 on success, 1 if any input failed to parse and 2 if an
input could not be read.

Author: xwest
"""

import argparse
import sys
from typing import List, Optional, TextIO

from . import __version__
from .errors import ParseError
from .expressions import Expression
from .parser import parse_string

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_READ_ERROR = 2


def _read_source(name: str, stdin: TextIO) -> str:
    if name == "-":
        return stdin.read()
    with open(name, 'r', encoding='utf-8') as f:
        return f.read()


def _format_result(expr: Expression, use_repr: bool) -> str:
    return repr(expr) if use_repr else str(expr)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexpr",
        description="Parse s-expressions and print the resulting tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sexpr config.sexp                 # Print the normalized expression
    echo '(+ 1 2.5)' | sexpr          # Read from stdin
    sexpr --check a.sexp b.sexp       # Only report errors
    sexpr --repr config.sexp          # Show the Python constructor form
        """
    )

    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="Files to parse; '-' or nothing reads stdin")
    parser.add_argument('--check', action='store_true',
                        help='Validate only, print nothing on success')
    parser.add_argument('--repr', action='store_true', dest='use_repr',
                        help='Print the Python constructor form instead of the rendered text')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Main entry point for the sexpr tool"""
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    args = build_arg_parser().parse_args(argv)
    names = args.files or ["-"]
    status = EXIT_OK

    for name in names:
        label = "<stdin>" if name == "-" else name

        try:
            source = _read_source(name, stdin)
        except (OSError, UnicodeDecodeError) as e:
            print(f"{label}: cannot read input: {e}", file=stderr)
            status = max(status, EXIT_READ_ERROR)
            continue

        try:
            expr = parse_string(source)
        except ParseError as e:
            stderr.write(f"{label}: {e.diagnostic}")
            status = max(status, EXIT_PARSE_ERROR)
            continue

        if not args.check:
            print(_format_result(expr, args.use_repr), file=stdout)

    return status


if __name__ == "__main__":
    sys.exit(main())
