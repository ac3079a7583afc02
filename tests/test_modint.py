import math

import pytest

from compkit.modint import ModInt, mint, primitive_root

M = 998244353


def test_inverse():
    x = mint(123, M)
    assert x * x.inv() == mint(1, M)


def test_construction_reduces_euclidean():
    assert int(mint(-1, 7)) == 6
    assert int(mint(15, 7)) == 1
    assert ModInt(M + 5, M) == mint(5, M)


def test_mint_accepts_modint_of_same_modulus():
    x = mint(3, 7)
    assert mint(x, 7) == x


def test_mint_rejects_other_modulus():
    with pytest.raises(ValueError):
        mint(mint(3, 7), 11)


def test_arithmetic_wraps():
    a = mint(5, 7)
    b = mint(4, 7)
    assert int(a + b) == 2
    assert int(b - a) == 6
    assert int(a * b) == 6
    assert int(-a) == 2
    assert int(-mint(0, 7)) == 0


def test_mixed_with_int():
    a = mint(5, 7)
    assert a + 3 == mint(1, 7)
    assert 3 - a == mint(5, 7)
    assert 2 * a == mint(3, 7)
    assert 1 / a == a.inv()


def test_division_inverts_multiplication():
    a = mint(123456, M)
    b = mint(789, M)
    assert (a / b) * b == a


def test_pow_fermat_and_negative():
    x = mint(3, 7)
    assert x ** 6 == mint(1, 7)
    assert x ** 0 == mint(1, 7)
    assert x ** -1 == x.inv()
    assert x ** -3 * x ** 3 == mint(1, 7)


def test_signed():
    assert mint(0, 7).signed() == 0
    assert mint(6, 7).signed() == -1
    assert mint(1, 7).signed() == -6


def test_zero_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        mint(0, M).inv()


def test_non_invertible_raises():
    with pytest.raises(ValueError):
        mint(2, 8).inv()


def test_mixing_moduli_raises():
    with pytest.raises(ValueError):
        mint(1, 7) + mint(1, 11)


def test_sum_and_product():
    values = [mint(v, 7) for v in (3, 4, 5)]
    assert sum(values) == mint(5, 7)
    assert math.prod(values) == mint(4, 7)


def test_ordering_and_str():
    assert mint(2, 7) < mint(3, 7)
    assert str(mint(10, 7)) == "3"


def test_primitive_root_of_ntt_prime():
    assert primitive_root(M) == mint(3, M)


def test_primitive_root_generates_group():
    g = primitive_root(13)
    assert {int(g ** k) for k in range(12)} == set(range(1, 13))


def test_primitive_root_missing_raises():
    with pytest.raises(ValueError):
        primitive_root(3)