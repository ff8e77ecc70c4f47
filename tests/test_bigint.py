import pytest

from algokit.bigint import BigInteger, BigIntegerOverflow

SAMPLES = [
    0,
    1,
    -1,
    999_999_999,
    1_000_000_000,
    -1_000_000_000,
    123_456_789_012_345_678_901_234_567_890,
    -98_765_432_109_876_543_210,
    10**27,
    10**27 - 1,
]


@pytest.mark.parametrize("value", SAMPLES)
def test_int_round_trip(value):
    assert str(BigInteger(value)) == str(value)


@pytest.mark.parametrize("value", SAMPLES)
def test_string_round_trip(value):
    assert str(BigInteger(str(value))) == str(value)


def test_plus_sign_and_leading_zeros():
    assert str(BigInteger("+123")) == "123"
    assert str(BigInteger("000000000000000042")) == "42"


def test_negative_zero_normalises():
    zero = BigInteger("-0")
    assert str(zero) == "0"
    assert not zero.is_negative()
    assert zero == 0


def test_inner_limbs_are_zero_padded():
    assert str(BigInteger("1000000000000000001")) == "1000000000000000001"


def test_repr_round_trip():
    assert repr(BigInteger(-15)) == "BigInteger('-15')"


@pytest.mark.parametrize("text", ["", "abc", "12a", "--1", "1.5"])
def test_invalid_text(text):
    with pytest.raises(ValueError):
        BigInteger(text)


def test_invalid_type():
    with pytest.raises(TypeError):
        BigInteger(1.5)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_add_sub_mul_agree_with_int(a, b):
    x, y = BigInteger(a), BigInteger(b)
    assert str(x + y) == str(a + b)
    assert str(x - y) == str(a - b)
    assert str(x * y) == str(a * b)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_ordering_agrees_with_int(a, b):
    x, y = BigInteger(a), BigInteger(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x > y) == (a > b)
    assert (x >= y) == (a >= b)
    assert (x == y) == (a == b)
    assert (x != y) == (a != b)


def test_mixed_with_int():
    x = BigInteger(10**20)
    assert 1 + x == BigInteger(10**20 + 1)
    assert 1 - x == BigInteger(1 - 10**20)
    assert 3 * x == BigInteger(3 * 10**20)
    assert x > 5


def test_negation_and_sign():
    x = BigInteger(7)
    assert (-x).is_negative()
    assert -(-x) == x
    assert +x == x
    assert x - x == 0
    assert not (x - x).is_negative()


def test_inplace_add_keeps_original():
    x = BigInteger(5)
    y = x
    x += 1
    assert x == 6
    assert y == 5


def test_hash_matches_int():
    assert hash(BigInteger(-10**30)) == hash(-10**30)
    assert len({BigInteger(3), BigInteger("3"), 3}) == 1


def test_multiplication_overflow():
    digits = "1" * 15000
    big = BigInteger(digits)
    with pytest.raises(BigIntegerOverflow):
        big * big
    assert str(big) == digits


def test_unsupported_operand():
    with pytest.raises(TypeError):
        BigInteger(1) + "1"