"""Fixed-width unsigned big integers with wrapping arithmetic."""

import operator

DIGIT_BITS = 64
_DIGIT_MASK = (1 << DIGIT_BITS) - 1


class FixedBigUInt:
    """An unsigned integer of a fixed number of 64-bit digits, little-endian.

    Addition, subtraction and multiplication wrap around modulo
    ``2 ** (64 * number_of_digits)``.
    """

    __slots__ = ("_digits",)
    __hash__ = None

    def __init__(self, digits):
        values = [operator.index(d) for d in digits]
        for d in values:
            if not 0 <= d <= _DIGIT_MASK:
                raise ValueError(f"digit out of range: {d}")
        self._digits = values

    @classmethod
    def zero(cls, size):
        """Return zero with ``size`` digits."""
        if size < 0:
            raise ValueError(f"size must be non-negative: {size}")
        return cls([0] * size)

    @property
    def digits(self):
        return tuple(self._digits)

    def _modulus(self):
        return 1 << (DIGIT_BITS * len(self._digits))

    def _assign(self, value):
        value %= self._modulus()
        self._digits = [
            (value >> (DIGIT_BITS * k)) & _DIGIT_MASK for k in range(len(self._digits))
        ]

    def _check(self, other):
        if not isinstance(other, FixedBigUInt):
            return False
        if len(other._digits) != len(self._digits):
            raise ValueError(
                f"widths differ: {len(self._digits)} and {len(other._digits)} digits"
            )
        return True

    def __iadd__(self, other):
        if not self._check(other):
            return NotImplemented
        self._assign(int(self) + int(other))
        return self

    def __isub__(self, other):
        if not self._check(other):
            return NotImplemented
        self._assign(int(self) - int(other))
        return self

    def __mul__(self, other):
        if not self._check(other):
            return NotImplemented
        result = FixedBigUInt.zero(len(self._digits))
        result._assign(int(self) * int(other))
        return result

    def __int__(self):
        value = 0
        for d in reversed(self._digits):
            value = (value << DIGIT_BITS) | d
        return value

    def __eq__(self, other):
        if not isinstance(other, FixedBigUInt):
            return NotImplemented
        return self._digits == other._digits

    def __repr__(self):
        return f"FixedBigUInt({self._digits})"