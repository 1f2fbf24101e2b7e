"""
Error handling for the s-expression reader.

Every failure is terminal for the current parse: the reader raises the first
problem it finds and never tries to continue. Errors fall into exactly five
kinds, each with its own exception class so callers can catch precisely or
just catch ParseError.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum


@dataclass
class Diagnostic:
    """Human-readable report attached to every parse error."""
    message: str
    severity: str
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            result = f"{severity_prefix}[{self.code}]: {self.message}\n"
            if self.code in ERROR_CODES:
                result += f"  category: {ERROR_CODES[self.code]}\n"
        else:
            result = f"{severity_prefix}: {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class ParseErrorKind(Enum):
    """The five ways a parse can fail."""
    UNCLOSED_STRING = "UnclosedString"
    EXPECTED_CLOSING_PAREN = "ExpectedClosingParan"
    NO_MATCHING_OPEN_PAREN = "NoMatchingOpenParan"
    PARSE_INT = "ParseIntError"
    PARSE_FLOAT = "ParseFloatError"


# Common error codes for categorization
ERROR_CODES = {
    "S001": "Unclosed string literal",
    "S002": "Unclosed list",
    "S003": "Unmatched closing parenthesis",
    "S004": "Invalid integer literal",
    "S005": "Invalid float literal",
}

INT_OVERFLOW_REASON = "number too large to fit in target type"


class ParseError(Exception):
    """
    Base exception for all reader failures.

    str() of the exception is the short message; the full report, with
    help text and suggestions, is available as `diagnostic`.
    """

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class UnclosedStringError(ParseError):
    """A string literal ran into the end of input."""
    kind = ParseErrorKind.UNCLOSED_STRING


class ExpectedClosingParenError(ParseError):
    """Input ended while one or more lists were still open."""
    kind = ParseErrorKind.EXPECTED_CLOSING_PAREN


class NoMatchingOpenParenError(ParseError):
    """A ')' appeared with no open list to close."""
    kind = ParseErrorKind.NO_MATCHING_OPEN_PAREN


class NumberConversionError(ParseError):
    """
    Numeric text that could not be converted.

    Keeps the offending text and the reason reported by the conversion.
    """

    def __init__(self, message: str, text: str, reason: str, **kwargs):
        super().__init__(message, **kwargs)
        self.text = text
        self.reason = reason


class ParseIntError(NumberConversionError):
    kind = ParseErrorKind.PARSE_INT


class ParseFloatError(NumberConversionError):
    kind = ParseErrorKind.PARSE_FLOAT


# Helper functions for creating common errors

def create_unclosed_string_error(contents: str) -> UnclosedStringError:
    """Create an error for a string that never saw its closing quote."""
    preview = contents if len(contents) <= 20 else contents[:20] + "..."
    return UnclosedStringError(
        message="unclosed string",
        code="S001",
        help_text=f'The string starting with "{preview}" is never closed.',
        suggestions=['Add a closing \'"\'', "String literals cannot contain a '\"' character"]
    )


def create_expected_closing_paren_error(open_lists: int) -> ExpectedClosingParenError:
    """Create an error for lists left open at end of input."""
    noun = "list is" if open_lists == 1 else "lists are"
    return ExpectedClosingParenError(
        message="expected closing ')'",
        code="S002",
        help_text=f"{open_lists} {noun} still open at the end of input.",
        suggestions=["Add the missing ')'",
                     "A ')' directly after a symbol is part of the symbol; separate it with a space"]
    )


def create_no_matching_open_paren_error() -> NoMatchingOpenParenError:
    """Create an error for a ')' with nothing to close."""
    return NoMatchingOpenParenError(
        message="')' has no matching '('",
        code="S003",
        help_text="Every ')' must close a list opened earlier with '('.",
        suggestions=["Remove the extra ')'", "Check for a missing '('"]
    )


def create_parse_int_error(text: str, reason: str) -> ParseIntError:
    """Create an error for digit text that is not a valid 64-bit integer."""
    return ParseIntError(
        message=f"error while parsing int, {reason}",
        text=text,
        reason=reason,
        code="S004",
        help_text=f"'{text}' cannot be stored as a signed 64-bit integer.",
        suggestions=["Write the value as a float by adding a decimal point"]
    )


def create_parse_float_error(text: str, reason: str) -> ParseFloatError:
    """Create an error for numeric text that is not a valid float."""
    return ParseFloatError(
        message=f"error while parsing float, {reason}",
        text=text,
        reason=reason,
        code="S005",
        help_text=f"'{text}' is not a valid floating-point literal."
    )
