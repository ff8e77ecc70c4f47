"""Evaluating integer expressions written in ordinary infix notation."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.expressions import (
    Constant,
    Divide,
    Expression,
    Multiply,
    Residual,
    Subtract,
    Sum,
)
from algokit.tokens import NumberToken, Symbol, Token, UnknownToken, tokenize


class UnknownSymbolError(RuntimeError):
    """Raised when the input holds a word that is not a known token."""

    def __init__(self, symbol: str = "") -> None:
        super().__init__(f"UnknownSymbolError: {symbol}")
        self.symbol = symbol


class WrongExpressionError(RuntimeError):
    """Raised when the tokens do not form a valid expression."""

    def __init__(self, message: str = "") -> None:
        super().__init__(f"WrongExpressionError: {message}")


_ADDITIVE = {Symbol.PLUS: Sum, Symbol.MINUS: Subtract}
_MULTIPLICATIVE = {
    Symbol.MULTIPLY: Multiply,
    Symbol.DIVIDE: Divide,
    Symbol.RESIDUAL: Residual,
}


class _Parser:
    """Recursive descent over a token list: expression, addendum, multiplier."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def parse(self) -> Expression:
        tree = self._expression()
        if self._pos != len(self._tokens):
            raise WrongExpressionError("unexpected tokens after the expression")
        return tree

    def _expression(self) -> Expression:
        node = self._addendum()
        while (operation := _ADDITIVE.get(self._peek())) is not None:
            self._pos += 1
            node = operation(node, self._addendum())
        return node

    def _addendum(self) -> Expression:
        node = self._multiplier()
        while (operation := _MULTIPLICATIVE.get(self._peek())) is not None:
            self._pos += 1
            node = operation(node, self._multiplier())
        return node

    def _multiplier(self) -> Expression:
        token = self._peek()
        if token is None:
            raise WrongExpressionError("unexpected end of expression")
        if isinstance(token, NumberToken):
            self._pos += 1
            return Constant(token.value)
        if token is Symbol.OPENING_BRACKET:
            self._pos += 1
            inner = self._expression()
            if self._peek() is not Symbol.CLOSING_BRACKET:
                raise WrongExpressionError("expected a closing bracket")
            self._pos += 1
            return inner
        raise WrongExpressionError(f"unexpected token {token.value}")


def parse_expression(tokens: Iterable[Token]) -> Expression:
    """Build the tree of an infix expression that uses every token."""
    return _Parser(tokens).parse()


def calculate_expression(text: str) -> int:
    """Evaluate an infix expression of space-separated tokens."""
    tokens = tokenize(text)
    for token in tokens:
        if isinstance(token, UnknownToken):
            raise UnknownSymbolError(token.value)
    return parse_expression(tokens).calculate()