"""
sexpr - a minimal s-expression reader

Reads parenthesized lists of symbols, strings, integers and floats into an
immutable expression tree, and renders trees back to display text.

Layout:
    sexpr/
    ├── syntax.py        # Character classes and numeric limits
    ├── errors.py        # ParseError hierarchy and diagnostics
    ├── expressions.py   # Expression tree and renderer
    ├── parser.py        # Single-pass stack-based reader
    └── cli.py           # `sexpr` command line tool

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .expressions import (
    Expression, ExpressionKind, ListExpr, Symbol, StringLiteral,
    IntLiteral, FloatLiteral, render
)
from .parser import Parser, parse_string, parse_file
from .errors import (
    Diagnostic, ParseError, ParseErrorKind, UnclosedStringError,
    ExpectedClosingParenError, NoMatchingOpenParenError,
    NumberConversionError, ParseIntError, ParseFloatError
)

__all__ = [
    # Reader
    "Parser",
    "parse_string",
    "parse_file",

    # Expression tree
    "Expression", "ExpressionKind",
    "ListExpr", "Symbol", "StringLiteral", "IntLiteral", "FloatLiteral",
    "render",

    # Error handling
    "Diagnostic", "ParseError", "ParseErrorKind",
    "UnclosedStringError", "ExpectedClosingParenError", "NoMatchingOpenParenError",
    "NumberConversionError", "ParseIntError", "ParseFloatError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
