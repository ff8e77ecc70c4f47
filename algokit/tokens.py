"""Splitting arithmetic input into tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_DIGITS = frozenset("0123456789")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class Symbol(Enum):
    """Operators, brackets and function names."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    RESIDUAL = "%"
    OPENING_BRACKET = "("
    CLOSING_BRACKET = ")"
    SQR = "sqr"
    MAX = "max"
    MIN = "min"
    ABS = "abs"


@dataclass(frozen=True)
class NumberToken:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class UnknownToken:
    """A word that is neither a symbol nor a number."""

    value: str


Token = Symbol | NumberToken | UnknownToken

_SYMBOLS = {symbol.value: symbol for symbol in Symbol}


def _to_int(word: str) -> int:
    value = int(word)
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"number out of range: {word}")
    return value


def _classify(word: str) -> Token:
    symbol = _SYMBOLS.get(word)
    if symbol is not None:
        return symbol
    digits = sum(char in _DIGITS for char in word)
    others = len(word) - digits
    if digits and (others == 0 or (others == 1 and word[0] in "+-")):
        return NumberToken(_to_int(word))
    return UnknownToken(word)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` on spaces and classify each word."""
    return [_classify(word) for word in text.split(" ") if word]