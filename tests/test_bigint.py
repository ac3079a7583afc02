import pytest

from compkit.bigint import FixedBigUInt

MAX = (1 << 64) - 1


def test_zero():
    z = FixedBigUInt.zero(3)
    assert z.digits == (0, 0, 0)
    assert int(z) == 0


def test_add_carries_into_next_digit():
    a = FixedBigUInt([MAX, 0])
    a += FixedBigUInt([1, 0])
    assert a == FixedBigUInt([0, 1])


def test_add_wraps_around():
    a = FixedBigUInt([MAX, MAX])
    a += FixedBigUInt([1, 0])
    assert a == FixedBigUInt.zero(2)


def test_sub_borrows_and_wraps():
    a = FixedBigUInt.zero(2)
    a -= FixedBigUInt([1, 0])
    assert a == FixedBigUInt([MAX, MAX])


@pytest.mark.parametrize(
    "x, y",
    [
        ([3, 0], [5, 0]),
        ([MAX, 7], [12345, 0]),
        ([MAX, MAX], [MAX, MAX]),
        ([2**40 + 3, 2**63], [17, 2**33]),
    ],
)
def test_add_sub_round_trip(x, y):
    a = FixedBigUInt(x)
    b = FixedBigUInt(y)
    a += b
    a -= b
    assert a == FixedBigUInt(x)


@pytest.mark.parametrize(
    "x, y",
    [
        ([3, 0], [5, 0]),
        ([MAX, 7], [12345, 0]),
        ([MAX, MAX], [MAX, MAX]),
        ([2**40 + 3, 2**63], [17, 2**33]),
    ],
)
def test_mul_is_product_modulo_width(x, y):
    a = FixedBigUInt(x)
    b = FixedBigUInt(y)
    product = a * b
    assert int(product) == (int(a) * int(b)) % (1 << 128)
    assert len(product.digits) == 2


def test_mul_is_commutative():
    a = FixedBigUInt([MAX, 99, 4])
    b = FixedBigUInt([2**50, 0, MAX])
    assert a * b == b * a


def test_int_combines_digits():
    assert int(FixedBigUInt([0, 1])) == 1 << 64


def test_width_mismatch_raises():
    a = FixedBigUInt([1, 2])
    with pytest.raises(ValueError):
        a += FixedBigUInt([1])
    with pytest.raises(ValueError):
        a * FixedBigUInt([1, 2, 3])


def test_digit_out_of_range_raises():
    with pytest.raises(ValueError):
        FixedBigUInt([1 << 64])
    with pytest.raises(ValueError):
        FixedBigUInt([-1])