"""Montgomery modular multiplication for odd moduli."""

_WIDTHS = (32, 64)


class Montgomery:
    """Montgomery form arithmetic modulo an odd ``n`` with radix 2**bits."""

    __slots__ = ("n", "ninv", "r", "r2", "bits", "_mask")

    def __init__(self, n, bits=64):
        if bits not in _WIDTHS:
            raise ValueError(f"unsupported width: {bits} bits")
        if n <= 0 or n % 2 == 0 or n >= 1 << bits:
            raise ValueError(f"modulus must be odd and below 2**{bits}: {n}")
        mask = (1 << bits) - 1
        ninv = 1
        for _ in range(bits.bit_length() - 1):
            ninv = ninv * (2 - n * ninv) & mask
        self.n = n
        self.ninv = ninv
        self.bits = bits
        self._mask = mask
        self.r = (1 << bits) % n
        self.r2 = self.r * self.r % n

    def modulo(self):
        """Return the modulus."""
        return self.n

    def redc(self, x):
        """Return ``x / R mod n`` for ``0 <= x < n * R``."""
        if not 0 <= x < self.n << self.bits:
            raise ValueError(f"value out of range for reduction: {x}")
        m = (x & self._mask) * self.ninv & self._mask
        t = (x - m * self.n) >> self.bits
        return t + self.n if t < 0 else t

    def mul_r(self, x):
        """Return ``x * R mod n``, the Montgomery form of ``x``."""
        return self.redc(x * self.r2)

    def mul(self, x, y):
        """Return ``x * y mod n``."""
        return self.redc(self.mul_r(x) * y)