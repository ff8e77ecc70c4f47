from fractions import Fraction
import math

import pytest

from algokit.rational import Rational, RationalDivisionByZero


def as_fraction(value):
    return Fraction(value.numerator, value.denominator)


PAIRS = [
    ((1, 2), (1, 3)),
    ((-3, 4), (5, 6)),
    ((7, -9), (-2, -5)),
    ((0, 5), (4, 1)),
    ((12, 18), (-9, 27)),
]


@pytest.mark.parametrize("numerator, denominator", [(6, -4), (-10, -25), (0, 7), (14, 21)])
def test_normalized_like_fraction(numerator, denominator):
    value = Rational(numerator, denominator)
    expected = Fraction(numerator, denominator)
    assert (value.numerator, value.denominator) == (expected.numerator, expected.denominator)
    assert value.denominator > 0
    assert math.gcd(value.numerator, value.denominator) == 1


def test_default_is_zero():
    assert Rational() == 0
    assert str(Rational()) == "0"


def test_zero_denominator_raises():
    with pytest.raises(RationalDivisionByZero):
        Rational(1, 0)


def test_error_is_zero_division():
    with pytest.raises(ZeroDivisionError):
        Rational(3, 0)


def test_str_forms():
    assert str(Rational(1, 2)) == "1/2"
    assert str(Rational(-3)) == "-3"
    assert str(Rational(4, 2)) == "2"


@pytest.mark.parametrize("value", [Rational(1, 2), Rational(-7, 3), Rational(5), Rational(0)])
def test_parse_round_trip(value):
    assert Rational.parse(str(value)) == value


def test_parse_integer_and_spaces():
    assert Rational.parse("7") == Rational(7)
    assert Rational.parse(" -6/8 ") == Rational(-6, 8)


def test_parse_zero_denominator():
    with pytest.raises(RationalDivisionByZero):
        Rational.parse("3/0")


def test_parse_garbage():
    with pytest.raises(ValueError):
        Rational.parse("abc")


@pytest.mark.parametrize("lhs, rhs", PAIRS)
def test_add_sub_mul_match_fraction(lhs, rhs):
    a, b = Rational(*lhs), Rational(*rhs)
    fa, fb = Fraction(*lhs), Fraction(*rhs)
    assert as_fraction(a + b) == fa + fb
    assert as_fraction(a - b) == fa - fb
    assert as_fraction(a * b) == fa * fb


@pytest.mark.parametrize("lhs, rhs", PAIRS)
def test_division_matches_fraction(lhs, rhs):
    a, b = Rational(*lhs), Rational(*rhs)
    assert as_fraction(a / b) == Fraction(*lhs) / Fraction(*rhs)


@pytest.mark.parametrize("lhs, rhs", PAIRS)
def test_ordering_matches_fraction(lhs, rhs):
    a, b = Rational(*lhs), Rational(*rhs)
    fa, fb = Fraction(*lhs), Fraction(*rhs)
    assert (a < b) == (fa < fb)
    assert (a <= b) == (fa <= fb)
    assert (a > b) == (fa > fb)
    assert (a == b) == (fa == fb)


def test_division_by_zero_rational():
    with pytest.raises(RationalDivisionByZero):
        Rational(1, 2) / Rational(0)
    with pytest.raises(RationalDivisionByZero):
        1 / Rational(0, 3)


def test_mixing_with_int():
    half = Rational(1, 2)
    assert as_fraction(half + 1) == Fraction(1, 2) + 1
    assert as_fraction(1 - half) == 1 - Fraction(1, 2)
    assert as_fraction(3 * half) == 3 * Fraction(1, 2)
    assert as_fraction(2 / half) == 2 / Fraction(1, 2)


def test_inverse_operations_round_trip():
    x, y = Rational(-5, 7), Rational(3, 11)
    assert (x + y) - y == x
    assert (x * y) / y == x
    assert x / x == 1


def test_neg_and_pos():
    x = Rational(3, -8)
    assert as_fraction(-x) == -Fraction(3, -8)
    assert +x == x
    assert -(-x) == x


def test_operands_unchanged():
    x, y = Rational(1, 3), Rational(1, 6)
    _ = x + y
    assert x == Rational(1, 3)
    assert y == Rational(1, 6)


def test_hash_consistent_with_equality():
    assert hash(Rational(6, 3)) == hash(Rational(2))
    assert hash(Rational(2)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(-3, -6)}) == 1


def test_sorting_matches_fraction():
    pairs = [(3, 4), (-1, 2), (5, 3), (0, 1), (2, 7)]
    values = sorted(Rational(*p) for p in pairs)
    assert [as_fraction(v) for v in values] == sorted(Fraction(*p) for p in pairs)


def test_bad_type_rejected():
    with pytest.raises(TypeError):
        Rational(1.5, 2)