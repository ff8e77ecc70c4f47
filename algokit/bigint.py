"""Arbitrary-precision signed integers stored as base 10**9 limbs."""

from __future__ import annotations

import functools
import re

_BASE_LEN = 9
_BASE = 10**_BASE_LEN
_MAX_PRODUCT_DIGITS = 30000
_NUMBER_RE = re.compile(r"([+-]?)([0-9]+)")


class BigIntegerOverflow(ArithmeticError):
    """Raised when a product may exceed the supported number of digits."""

    def __init__(self) -> None:
        super().__init__("BigIntegerOverflow")


def _trim(limbs: list[int]) -> list[int]:
    """Drop high zero limbs, keeping at least one limb."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    return limbs


def _compare_magnitude(lhs: list[int], rhs: list[int]) -> int:
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1
    for a, b in zip(reversed(lhs), reversed(rhs)):
        if a != b:
            return -1 if a < b else 1
    return 0


def _add_magnitude(lhs: list[int], rhs: list[int]) -> list[int]:
    if len(lhs) < len(rhs):
        lhs, rhs = rhs, lhs
    result = []
    carry = 0
    for position, digit in enumerate(lhs):
        total = digit + carry + (rhs[position] if position < len(rhs) else 0)
        carry, remainder = divmod(total, _BASE)
        result.append(remainder)
    if carry:
        result.append(carry)
    return result


def _sub_magnitude(larger: list[int], smaller: list[int]) -> list[int]:
    """Return larger - smaller; the first magnitude must not be the smaller one."""
    result = []
    borrow = 0
    for position, digit in enumerate(larger):
        value = digit - borrow - (smaller[position] if position < len(smaller) else 0)
        borrow = 1 if value < 0 else 0
        result.append(value + _BASE if value < 0 else value)
    return _trim(result)


def _mul_magnitude(lhs: list[int], rhs: list[int]) -> list[int]:
    result = [0] * (len(lhs) + len(rhs) + 1)
    for i, a in enumerate(lhs):
        if a == 0:
            continue
        carry = 0
        for j, b in enumerate(rhs):
            carry, result[i + j] = divmod(result[i + j] + a * b + carry, _BASE)
        position = i + len(rhs)
        while carry:
            carry, result[position] = divmod(result[position] + carry, _BASE)
            position += 1
    return _trim(result)


@functools.total_ordering
class BigInteger:
    """A signed integer of arbitrary length with +, -, * and ordering."""

    __slots__ = ("_negative", "_limbs")

    def __init__(self, value: int | str | BigInteger = 0) -> None:
        if isinstance(value, BigInteger):
            negative, limbs = value._negative, list(value._limbs)
        elif isinstance(value, bool):
            raise TypeError("BigInteger cannot be built from bool")
        elif isinstance(value, int):
            negative, limbs = value < 0, []
            magnitude = abs(value)
            while True:
                magnitude, remainder = divmod(magnitude, _BASE)
                limbs.append(remainder)
                if not magnitude:
                    break
        elif isinstance(value, str):
            match = _NUMBER_RE.fullmatch(value.strip())
            if match is None:
                raise ValueError(f"invalid integer literal: {value!r}")
            sign, digits = match.groups()
            digits = digits.lstrip("0") or "0"
            negative = sign == "-"
            limbs = [
                int(digits[max(0, end - _BASE_LEN):end])
                for end in range(len(digits), 0, -_BASE_LEN)
            ]
        else:
            raise TypeError(f"cannot build BigInteger from {type(value).__name__}")
        self._set(negative, limbs)

    def _set(self, negative: bool, limbs: list[int]) -> None:
        self._limbs = _trim(limbs)
        self._negative = negative and self._limbs != [0]

    @classmethod
    def _from_parts(cls, negative: bool, limbs: list[int]) -> BigInteger:
        result = cls.__new__(cls)
        result._set(negative, limbs)
        return result

    @staticmethod
    def _coerce(other: object) -> BigInteger | None:
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInteger(other)
        return None

    def is_negative(self) -> bool:
        """Whether the value is below zero."""
        return self._negative

    def __str__(self) -> str:
        head = str(self._limbs[-1])
        tail = "".join(f"{limb:0{_BASE_LEN}d}" for limb in reversed(self._limbs[:-1]))
        return ("-" if self._negative else "") + head + tail

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def __neg__(self) -> BigInteger:
        return self._from_parts(not self._negative, list(self._limbs))

    def __pos__(self) -> BigInteger:
        return self._from_parts(self._negative, list(self._limbs))

    def __add__(self, other: object) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._negative == rhs._negative:
            return self._from_parts(self._negative, _add_magnitude(self._limbs, rhs._limbs))
        order = _compare_magnitude(self._limbs, rhs._limbs)
        if order == 0:
            return BigInteger(0)
        if order > 0:
            return self._from_parts(self._negative, _sub_magnitude(self._limbs, rhs._limbs))
        return self._from_parts(rhs._negative, _sub_magnitude(rhs._limbs, self._limbs))

    def __radd__(self, other: object) -> BigInteger:
        return self.__add__(other)

    def __sub__(self, other: object) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: object) -> BigInteger:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if (len(self._limbs) + len(rhs._limbs) + 1) * _BASE_LEN > _MAX_PRODUCT_DIGITS:
            raise BigIntegerOverflow()
        return self._from_parts(
            self._negative != rhs._negative, _mul_magnitude(self._limbs, rhs._limbs)
        )

    def __rmul__(self, other: object) -> BigInteger:
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if self._negative != rhs._negative:
            return self._negative
        order = _compare_magnitude(self._limbs, rhs._limbs)
        return order > 0 if self._negative else order < 0

    def __hash__(self) -> int:
        magnitude = 0
        for limb in reversed(self._limbs):
            magnitude = magnitude * _BASE + limb
        return hash(-magnitude if self._negative else magnitude)