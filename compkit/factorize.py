"""Integer factorisation by trial division, Miller-Rabin and Pollard's rho."""

from math import gcd

from .montgomery import Montgomery

_TRIAL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 23)
_SMALL_BASES = (2, 7, 61)
_LARGE_BASES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
_SMALL_BASES_LIMIT = 4759123141
_LIMIT = 1 << 64


def factorize(n):
    """Return the prime factors of ``n`` with multiplicity, in discovery order."""
    if n <= 0:
        raise ValueError("cannot factorize a non-positive number")
    if n >= _LIMIT:
        raise ValueError("number must be below 2**64")
    factors = []
    for p in _TRIAL_PRIMES:
        while n % p == 0:
            n //= p
            factors.append(p)
    if n != 1:
        _factorize_odd(n, factors)
    return factors


def _factorize_odd(n, factors):
    if is_prime(n):
        factors.append(n)
        return
    a = _rho(n)
    _factorize_odd(a, factors)
    _factorize_odd(n // a, factors)


def is_prime(n):
    """Deterministic primality test for integers below 2**64."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    bases = _SMALL_BASES if n < _SMALL_BASES_LIMIT else _LARGE_BASES
    return all(a >= n or _miller_rabin(a, n) for a in bases)


def _miller_rabin(a, n):
    d = n - 1
    s = (d & -d).bit_length() - 1
    d >>= s
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(1, s):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def _rho(n):
    mont = Montgomery(n)
    for i in range(1, n):

        def step(v, i=i):
            return mont.redc(v * v + i)

        for start in range(2, n):
            x = y = start
            while True:
                x = step(x)
                y = step(step(y))
                d = gcd(abs(x - y), n)
                if d == n:
                    break
                if d != 1:
                    return d
    raise ArithmeticError(f"no factor found for {n}")