"""
Value model for parsed s-expressions.

A parse produces a tree built from exactly five immutable node classes:
ListExpr, Symbol, StringLiteral, IntLiteral and FloatLiteral. The set is
closed; consumers dispatch on `kind` and can rely on seeing nothing else.

Rendering turns a tree back into display text. It is meant for diagnostics
and round-trips every tree that contains no strings; string literals are
shown with escapes the reader does not understand.

Author: xwest
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterator, List, Tuple
from dataclasses import dataclass, field
from enum import Enum

from .syntax import OPEN_PAREN, CLOSE_PAREN, QUOTE


class ExpressionKind(Enum):
    """Enumeration of all expression variants."""
    LIST = "List"
    SYMBOL = "Symbol"
    STRING = "String"
    INT = "Int"
    FLOAT = "Float"


class Expression(ABC):
    """Base class for all parsed values."""

    @property
    @abstractmethod
    def kind(self) -> ExpressionKind:
        pass

    @classmethod
    def from_string(cls, source: str) -> 'Expression':
        """Parse `source`; raises ParseError on malformed input."""
        from .parser import parse_string
        return parse_string(source)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, eq=True)
class ListExpr(Expression):
    """Parenthesized group. ListExpr() is the empty list."""
    items: Tuple[Expression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass(frozen=True, eq=True)
class Symbol(Expression):
    """Bare token: operators, identifiers, anything unquoted and non-numeric."""
    name: str

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.SYMBOL


@dataclass(frozen=True, eq=True)
class StringLiteral(Expression):
    value: str

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.STRING


@dataclass(frozen=True, eq=True)
class IntLiteral(Expression):
    value: int

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.INT


@dataclass(frozen=True, eq=True)
class FloatLiteral(Expression):
    value: float

    @property
    def kind(self) -> ExpressionKind:
        return ExpressionKind.FLOAT


# ============================================================================
# Rendering
# ============================================================================

_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\0': '\\0',
}


def _escape_string(value: str) -> str:
    """Quote a string and escape backslashes, quotes and control characters."""
    out = [QUOTE]
    for char in value:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif not char.isprintable() and char != ' ':
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    out.append(QUOTE)
    return "".join(out)


def _format_float(value: float) -> str:
    """
    Shortest round-trip text in positional notation.

    The reader has no exponent syntax, so exponent forms from repr are
    expanded and finite values always carry a decimal point.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" not in text:
        return text

    mantissa, _, exponent = text.partition("e")
    sign = ""
    if mantissa.startswith("-"):
        sign, mantissa = "-", mantissa[1:]
    whole, _, fraction = mantissa.partition(".")
    digits = whole + fraction
    point = len(whole) + int(exponent)

    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{sign}{digits}{'0' * (point - len(digits))}.0"
    return f"{sign}{digits[:point]}.{digits[point:]}"


_ATOM_RENDERERS: Dict[ExpressionKind, Callable[[Expression], str]] = {
    ExpressionKind.SYMBOL: lambda expr: expr.name,
    ExpressionKind.STRING: lambda expr: _escape_string(expr.value),
    ExpressionKind.INT: lambda expr: str(expr.value),
    ExpressionKind.FLOAT: lambda expr: _format_float(expr.value),
}


def render(expr: Expression) -> str:
    """
    Render an expression tree as display text.

    Lists are walked with an explicit stack so arbitrarily deep trees
    render without hitting the recursion limit.
    """
    out: List[str] = []
    # each frame is [iterator over children, first child not yet emitted]
    stack: List[list] = [[iter((expr,)), True]]

    while stack:
        frame = stack[-1]
        child = next(frame[0], None)
        if child is None:
            stack.pop()
            if stack:
                out.append(CLOSE_PAREN)
            continue

        if not frame[1]:
            out.append(" ")
        frame[1] = False

        if child.kind is ExpressionKind.LIST:
            out.append(OPEN_PAREN)
            stack.append([iter(child.items), True])
        else:
            out.append(_ATOM_RENDERERS[child.kind](child))

    return "".join(out)
