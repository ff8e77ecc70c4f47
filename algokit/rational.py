"""Exact fractions kept in lowest terms with a positive denominator."""

from __future__ import annotations

import functools
import math
import re

_RATIONAL_RE = re.compile(r"([+-]?[0-9]+)(?:/\s*([+-]?[0-9]+))?")


class RationalDivisionByZero(ZeroDivisionError):
    """Raised when a fraction would get a zero denominator."""

    def __init__(self) -> None:
        super().__init__("RationalDivisionByZero")


def _check_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


@functools.total_ordering
class Rational:
    """An immutable fraction numerator/denominator in lowest terms."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        numerator = _check_int(numerator, "numerator")
        denominator = _check_int(denominator, "denominator")
        if denominator == 0:
            raise RationalDivisionByZero()
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @property
    def numerator(self) -> int:
        """The numerator; it carries the sign."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """The denominator, always positive."""
        return self._denominator

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a fraction written as ``n`` or ``n/d``."""
        match = _RATIONAL_RE.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"invalid rational literal: {text!r}")
        numerator, denominator = match.groups()
        return cls(int(numerator), int(denominator) if denominator is not None else 1)

    @staticmethod
    def _coerce(other: object) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational(other)
        return None

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (
            self._numerator == rhs._numerator and self._denominator == rhs._denominator
        )

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numerator * rhs._denominator < rhs._numerator * self._denominator

    def __hash__(self) -> int:
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __add__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + rhs._numerator * self._denominator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: object) -> Rational:
        return self.__add__(other)

    def __sub__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator, self._denominator * rhs._denominator
        )

    def __rmul__(self, other: object) -> Rational:
        return self.__mul__(other)

    def __truediv__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._numerator == 0:
            raise RationalDivisionByZero()
        return Rational(
            self._numerator * rhs._denominator, self._denominator * rhs._numerator
        )

    def __rtruediv__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> Rational:
        return Rational(self._numerator, self._denominator)