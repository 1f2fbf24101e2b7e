"""
S-expression reader.

Scanning and tree building happen in one left-to-right pass: there is no
token list. Each character is classified, the matching scanner consumes the
rest of the value, and the value is appended to the innermost open list.
Open lists live on an explicit stack of frames, so nesting depth is limited
by memory rather than by the interpreter's recursion limit.

Author: xwest
"""

from typing import Callable, Dict, List

from .syntax import (
    CharClass, DECIMAL_POINT, INT64_DIGITS, INT64_MAX, INT64_MIN, QUOTE,
    classify, is_digit, is_whitespace
)
from .expressions import (
    Expression, ListExpr, Symbol, StringLiteral, IntLiteral, FloatLiteral
)
from .errors import (
    INT_OVERFLOW_REASON, create_unclosed_string_error,
    create_expected_closing_paren_error, create_no_matching_open_paren_error,
    create_parse_int_error, create_parse_float_error
)


class Parser:
    """
    Single-pass s-expression reader.

    The stack always holds at least the implicit top-level frame. `(`
    pushes a frame, `)` folds the top frame into its parent, and every
    atom is appended to whichever frame is on top.
    """

    def __init__(self, source: str):
        """
        Initialize the parser with source text.

        Args:
            source: Complete input text
        """
        self.source = source
        self.pos = 0
        self.stack: List[List[Expression]] = [[]]

        self.scanners: Dict[CharClass, Callable[[], None]] = {
            CharClass.WHITESPACE: self._skip_whitespace,
            CharClass.OPEN_PAREN: self._open_list,
            CharClass.CLOSE_PAREN: self._close_list,
            CharClass.QUOTE: self._scan_string,
            CharClass.DIGIT: self._scan_number,
            CharClass.SYMBOL: self._scan_symbol,
        }

    def parse(self) -> Expression:
        """
        Parse the whole source.

        Returns:
            The single top-level expression, or a ListExpr of all top-level
            expressions when there are zero or several

        Raises:
            ParseError: On the first malformed construct
        """
        self.pos = 0
        self.stack = [[]]

        while self.pos < len(self.source):
            self.scanners[classify(self.source[self.pos])]()

        if len(self.stack) > 1:
            raise create_expected_closing_paren_error(len(self.stack) - 1)

        top_level = self.stack.pop()
        if len(top_level) == 1:
            return top_level[0]
        return ListExpr(tuple(top_level))

    def _emit(self, expr: Expression):
        self.stack[-1].append(expr)

    def _skip_whitespace(self):
        while self.pos < len(self.source) and is_whitespace(self.source[self.pos]):
            self.pos += 1

    def _open_list(self):
        self.pos += 1
        self.stack.append([])

    def _close_list(self):
        if len(self.stack) == 1:
            raise create_no_matching_open_paren_error()
        self.pos += 1
        items = self.stack.pop()
        self._emit(ListExpr(tuple(items)))

    def _scan_string(self):
        """Read a quoted string verbatim; there are no escape sequences."""
        start = self.pos + 1
        end = self.source.find(QUOTE, start)
        if end == -1:
            raise create_unclosed_string_error(self.source[start:])
        self.pos = end + 1
        self._emit(StringLiteral(self.source[start:end]))

    def _scan_digits(self):
        while self.pos < len(self.source) and is_digit(self.source[self.pos]):
            self.pos += 1

    def _scan_number(self):
        """
        Read a digit run, optionally followed by one '.' and more digits.

        Whatever follows the number (a letter, a second '.', a paren) is left
        for the next scan, so "12abc" reads as 12 followed by the symbol abc.
        """
        start = self.pos
        self._scan_digits()

        if self.pos < len(self.source) and self.source[self.pos] == DECIMAL_POINT:
            self.pos += 1
            self._scan_digits()
            self._emit(FloatLiteral(self._convert_float(self.source[start:self.pos])))
        else:
            self._emit(IntLiteral(self._convert_int(self.source[start:self.pos])))

    def _convert_int(self, text: str) -> int:
        if len(text.lstrip("0")) > INT64_DIGITS:
            # more significant digits than INT64_MAX has
            raise create_parse_int_error(text, INT_OVERFLOW_REASON)
        try:
            value = int(text)
        except ValueError as e:
            raise create_parse_int_error(text, str(e)) from e
        if not INT64_MIN <= value <= INT64_MAX:
            raise create_parse_int_error(text, INT_OVERFLOW_REASON)
        return value

    def _convert_float(self, text: str) -> float:
        try:
            return float(text)
        except ValueError as e:
            raise create_parse_float_error(text, str(e)) from e

    def _scan_symbol(self):
        """
        Read a symbol up to the next whitespace or end of input.

        Parens and quotes do not end a symbol: "a)" is a single symbol.
        """
        start = self.pos
        while self.pos < len(self.source) and not is_whitespace(self.source[self.pos]):
            self.pos += 1
        self._emit(Symbol(self.source[start:self.pos]))


def parse_string(source: str) -> Expression:
    """
    Convenience function to parse a source string.

    Args:
        source: Source text

    Returns:
        Parsed expression

    Raises:
        ParseError: If the text is malformed
    """
    return Parser(source).parse()


def parse_file(filepath: str) -> Expression:
    """
    Convenience function to parse a source file.

    Args:
        filepath: Path to a UTF-8 source file

    Returns:
        Parsed expression

    Raises:
        ParseError: If the file contents are malformed
        IOError: If file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return parse_string(source)
