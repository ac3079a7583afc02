"""Polynomials over the integers modulo a prime, multiplied by number-theoretic transform."""

import operator
from itertools import zip_longest

from .modint import ModInt, mint, primitive_root


def _ceil_pow2(n):
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def _ntt(coeffs, modulus, invert):
    """Return the (inverse) transform of ``coeffs``, padded to a power of two."""
    a = list(coeffs)
    if len(a) <= 1:
        return a
    n = _ceil_pow2(len(a))
    a.extend([0] * (n - len(a)))
    if (modulus - 1) % n:
        raise ValueError(f"transform length {n} does not divide {modulus} - 1")

    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            a[i], a[j] = a[j], a[i]

    root = int(primitive_root(modulus))
    length = 2
    while length <= n:
        exp = (modulus - 1) // length
        if invert:
            exp = modulus - 1 - exp
        w_len = pow(root, exp, modulus)
        half = length // 2
        twiddles = [1] * half
        for k in range(1, half):
            twiddles[k] = twiddles[k - 1] * w_len % modulus
        for start in range(0, n, length):
            for k, w in enumerate(twiddles, start):
                p = a[k]
                q = w * a[k + half] % modulus
                a[k] = (p + q) % modulus
                a[k + half] = (p - q) % modulus
        length <<= 1

    if invert:
        scale = pow(n, -1, modulus)
        a = [x * scale % modulus for x in a]
    return a


class Poly:
    """A polynomial with coefficients modulo a prime, lowest degree first."""

    __slots__ = ("_coeffs", "_modulus")
    __hash__ = None

    def __init__(self, coeffs, modulus):
        modulus = operator.index(modulus)
        if modulus < 2:
            raise ValueError(f"modulus must be at least 2: {modulus}")
        self._modulus = modulus
        self._coeffs = [int(mint(c, modulus)) for c in coeffs]

    @property
    def modulus(self):
        return self._modulus

    def _wrap(self, coeffs):
        poly = Poly.__new__(Poly)
        poly._coeffs = coeffs
        poly._modulus = self._modulus
        return poly

    def _other_coeffs(self, other):
        if not isinstance(other, Poly):
            return NotImplemented
        if other._modulus != self._modulus:
            raise ValueError(f"moduli differ: {self._modulus} and {other._modulus}")
        return other._coeffs

    def deg(self):
        """Return the degree, or -1 for the zero polynomial."""
        return next(
            (i for i in range(len(self._coeffs) - 1, -1, -1) if self._coeffs[i]), -1
        )

    def normalize(self):
        """Drop trailing zero coefficients."""
        while self._coeffs and self._coeffs[-1] == 0:
            self._coeffs.pop()

    def dft_mul(self, other):
        """Replace this polynomial by its product with ``other``."""
        theirs = self._other_coeffs(other)
        if theirs is NotImplemented:
            raise TypeError(f"cannot multiply Poly by {type(other).__name__}")
        if not self._coeffs or not theirs:
            self._coeffs = []
            return
        size = _ceil_pow2(len(self._coeffs) + len(theirs) - 1)
        m = self._modulus
        fa = _ntt(self._coeffs + [0] * (size - len(self._coeffs)), m, False)
        fb = _ntt(theirs + [0] * (size - len(theirs)), m, False)
        self._coeffs = _ntt([x * y % m for x, y in zip(fa, fb)], m, True)
        self.normalize()

    def dft(self):
        """Transform the coefficients in place, padding to a power of two."""
        self._coeffs = _ntt(self._coeffs, self._modulus, False)

    def idft(self):
        """Apply the inverse transform in place, padding to a power of two."""
        self._coeffs = _ntt(self._coeffs, self._modulus, True)

    def inv(self, mod_deg):
        """Return the inverse modulo ``x**mod_deg``."""
        if not self._coeffs:
            raise ValueError("cannot invert the empty polynomial")
        m = self._modulus
        inv = [int(ModInt(self._coeffs[0], m).inv())]
        while len(inv) < mod_deg:
            half = len(inv)
            size = 4 * half
            g = _ntt(inv + [0] * (size - half), m, False)
            f = self._coeffs[: 2 * half]
            f = _ntt(f + [0] * (size - len(f)), m, False)
            prod = _ntt([x * x % m * y % m for x, y in zip(g, f)], m, True)
            inv = prod[:half] + [(-x) % m for x in prod[half : 2 * half]]
        result = self._wrap(inv[:mod_deg])
        result.normalize()
        return result

    def __add__(self, other):
        theirs = self._other_coeffs(other)
        if theirs is NotImplemented:
            return theirs
        m = self._modulus
        return self._wrap(
            [(x + y) % m for x, y in zip_longest(self._coeffs, theirs, fillvalue=0)]
        )

    def __sub__(self, other):
        theirs = self._other_coeffs(other)
        if theirs is NotImplemented:
            return theirs
        m = self._modulus
        return self._wrap(
            [(x - y) % m for x, y in zip_longest(self._coeffs, theirs, fillvalue=0)]
        )

    def __mul__(self, other):
        if self._other_coeffs(other) is NotImplemented:
            return NotImplemented
        result = self._wrap(list(self._coeffs))
        result.dft_mul(other)
        return result

    def __neg__(self):
        m = self._modulus
        return self._wrap([(-x) % m for x in self._coeffs])

    def __len__(self):
        return len(self._coeffs)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._wrap(self._coeffs[index])
        return ModInt(self._coeffs[index], self._modulus)

    def __iter__(self):
        return (ModInt(c, self._modulus) for c in self._coeffs)

    def __eq__(self, other):
        if not isinstance(other, Poly):
            return NotImplemented
        return self._modulus == other._modulus and self._coeffs == other._coeffs

    def __repr__(self):
        return f"Poly({self._coeffs}, {self._modulus})"