"""Evaluating integer expressions written in prefix (Polish) notation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from algokit.expressions import (
    AbsoluteValue,
    Constant,
    Divide,
    Expression,
    Maximum,
    Minimum,
    Multiply,
    Residual,
    Square,
    Subtract,
    Sum,
)
from algokit.infix import UnknownSymbolError, WrongExpressionError
from algokit.tokens import NumberToken, Symbol, Token, UnknownToken, tokenize

_BINARY = {
    Symbol.PLUS: Sum,
    Symbol.MINUS: Subtract,
    Symbol.MULTIPLY: Multiply,
    Symbol.DIVIDE: Divide,
    Symbol.RESIDUAL: Residual,
    Symbol.MIN: Minimum,
    Symbol.MAX: Maximum,
}
_UNARY = {Symbol.ABS: AbsoluteValue, Symbol.SQR: Square}
_END = object()


def _build(tokens: Iterator[Token]) -> Expression:
    token = next(tokens, _END)
    if token is _END:
        raise WrongExpressionError("unexpected end of expression")
    if isinstance(token, UnknownToken):
        raise UnknownSymbolError(token.value)
    if isinstance(token, NumberToken):
        return Constant(token.value)
    binary = _BINARY.get(token)
    if binary is not None:
        first = _build(tokens)
        second = _build(tokens)
        return binary(first, second)
    unary = _UNARY.get(token)
    if unary is not None:
        return unary(_build(tokens))
    raise WrongExpressionError(f"unexpected token {token.value}")


def build_tree(tokens: Iterable[Token]) -> Expression:
    """Build the tree of a prefix expression that uses every token."""
    stream = iter(tokens)
    tree = _build(stream)
    if next(stream, _END) is not _END:
        raise WrongExpressionError("unexpected tokens after the expression")
    return tree


def calculate_polish_notation(text: str) -> int:
    """Evaluate a prefix expression of space-separated tokens."""
    return build_tree(tokenize(text)).calculate()