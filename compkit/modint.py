"""Integers modulo a fixed modulus."""

import operator
from functools import lru_cache, total_ordering


@total_ordering
class ModInt:
    """An integer reduced modulo ``modulus``; immutable."""

    __slots__ = ("_value", "_modulus")

    def __init__(self, value, modulus):
        modulus = operator.index(modulus)
        if modulus < 1:
            raise ValueError(f"modulus must be positive: {modulus}")
        self._value = operator.index(value) % modulus
        self._modulus = modulus

    @property
    def value(self):
        return self._value

    @property
    def modulus(self):
        return self._modulus

    def _make(self, value):
        return ModInt(value, self._modulus)

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other._modulus != self._modulus:
                raise ValueError(
                    f"moduli differ: {self._modulus} and {other._modulus}"
                )
            return other._value
        if isinstance(other, int):
            return other % self._modulus
        return NotImplemented

    def signed(self):
        """Return the representative in (-modulus, 0], or 0 for zero."""
        return 0 if self._value == 0 else self._value - self._modulus

    def inv(self):
        """Return the multiplicative inverse."""
        if self._value == 0:
            raise ZeroDivisionError("zero has no inverse")
        try:
            return self._make(pow(self._value, -1, self._modulus))
        except ValueError:
            raise ValueError(
                f"{self._value} (mod {self._modulus}) does not have inverse"
            ) from None

    def __pow__(self, exp):
        exp = operator.index(exp)
        if exp < 0:
            return self.inv() ** -exp
        return self._make(pow(self._value, exp, self._modulus))

    def __add__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self._value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self._value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(v - self._value)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self._value * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self * self._make(v).inv()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self.inv() * v

    def __neg__(self):
        return self._make(-self._value)

    def __int__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, ModInt):
            return NotImplemented
        return self._modulus == other._modulus and self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, ModInt):
            return NotImplemented
        if other._modulus != self._modulus:
            raise ValueError(f"moduli differ: {self._modulus} and {other._modulus}")
        return self._value < other._value

    def __hash__(self):
        return hash((self._value, self._modulus))

    def __repr__(self):
        return f"ModInt({self._value}, {self._modulus})"

    def __str__(self):
        return str(self._value)


def mint(x, modulus):
    """Return ``x`` as an element of the integers modulo ``modulus``."""
    if isinstance(x, ModInt):
        if x.modulus != modulus:
            raise ValueError(f"moduli differ: {x.modulus} and {modulus}")
        return x
    return ModInt(x, modulus)


def _prime_divisors(m):
    divisors = []
    p = 2
    while p * p <= m:
        if m % p == 0:
            divisors.append(p)
            while m % p == 0:
                m //= p
        p += 1
    if m > 1:
        divisors.append(m)
    return divisors


@lru_cache(maxsize=None)
def primitive_root(modulus):
    """Return the smallest primitive root modulo a prime ``modulus``."""
    if modulus < 2:
        raise ValueError(f"modulus must be at least 2: {modulus}")
    order = modulus - 1
    cofactors = [order // p for p in _prime_divisors(order)]
    for r in range(2, modulus - 1):
        if all(pow(r, e, modulus) != 1 for e in cofactors):
            return ModInt(r, modulus)
    raise ValueError(f"no primitive root found modulo {modulus}")