"""Integer expression trees."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero."""
    if rhs == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


class Expression(ABC):
    """A node that evaluates to an integer."""

    @abstractmethod
    def calculate(self) -> int:
        """The value of the expression."""


@dataclass(frozen=True)
class Constant(Expression):
    """A literal integer."""

    value: int

    def calculate(self) -> int:
        return self.value


@dataclass(frozen=True)
class UnaryOperation(Expression):
    """An operation applied to one operand."""

    operand: Expression

    @abstractmethod
    def operation(self, value: int) -> int:
        """Apply the operation to an evaluated operand."""

    def calculate(self) -> int:
        return self.operation(self.operand.calculate())


@dataclass(frozen=True)
class BinaryOperation(Expression):
    """An operation applied to two operands, the first evaluated first."""

    first: Expression
    second: Expression

    @abstractmethod
    def operation(self, lhs: int, rhs: int) -> int:
        """Apply the operation to evaluated operands."""

    def calculate(self) -> int:
        return self.operation(self.first.calculate(), self.second.calculate())


class Sum(BinaryOperation):
    def operation(self, lhs: int, rhs: int) -> int:
        return lhs + rhs


class Subtract(BinaryOperation):
    def operation(self, lhs: int, rhs: int) -> int:
        return lhs - rhs


class Multiply(BinaryOperation):
    def operation(self, lhs: int, rhs: int) -> int:
        return lhs * rhs


class Divide(BinaryOperation):
    """Division rounding toward zero."""

    def operation(self, lhs: int, rhs: int) -> int:
        return _trunc_div(lhs, rhs)


class Residual(BinaryOperation):
    """Remainder whose sign follows the dividend."""

    def operation(self, lhs: int, rhs: int) -> int:
        return lhs - rhs * _trunc_div(lhs, rhs)


class Minimum(BinaryOperation):
    def operation(self, lhs: int, rhs: int) -> int:
        return min(lhs, rhs)


class Maximum(BinaryOperation):
    def operation(self, lhs: int, rhs: int) -> int:
        return max(lhs, rhs)


class AbsoluteValue(UnaryOperation):
    def operation(self, value: int) -> int:
        return abs(value)


class Square(UnaryOperation):
    def operation(self, value: int) -> int:
        return value * value