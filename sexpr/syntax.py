"""
Character classes for the s-expression reader.

The reader has no separate token stream, so instead of token types this
module defines the character sets the scanner switches on:
- Whitespace separating expressions
- List delimiters and the string quote
- Digits and the decimal point that start numeric literals
- Limits of the signed 64-bit integer payload

Author: xwest
"""

from enum import Enum


class CharClass(Enum):
    """What a character starts when the scanner meets it between values."""
    WHITESPACE = "whitespace"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    QUOTE = "quote"
    DIGIT = "digit"
    SYMBOL = "symbol"          # anything not claimed above


# ASCII whitespace only; other Unicode spaces are ordinary symbol characters
WHITESPACE = frozenset(" \t\n\r\x0c")

DIGITS = frozenset("0123456789")

OPEN_PAREN = "("
CLOSE_PAREN = ")"
QUOTE = '"'
DECIMAL_POINT = "."

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
INT64_DIGITS = len(str(INT64_MAX))

_SPECIAL_CHARS = {
    OPEN_PAREN: CharClass.OPEN_PAREN,
    CLOSE_PAREN: CharClass.CLOSE_PAREN,
    QUOTE: CharClass.QUOTE,
}


def classify(char: str) -> CharClass:
    """Classify the first character of the next value."""
    if char in WHITESPACE:
        return CharClass.WHITESPACE
    if char in DIGITS:
        return CharClass.DIGIT
    return _SPECIAL_CHARS.get(char, CharClass.SYMBOL)


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_digit(char: str) -> bool:
    return char in DIGITS
