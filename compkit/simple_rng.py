"""A small, fast, deterministic permuted congruential generator."""

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_MULTIPLIER = 0x5851F42D4C957F2D
_INCREMENT = 0xA02BDBF7BB3C0A7

_RANDOM_WIDTHS = (8, 16, 32, 64)
_RANGE_WIDTHS = (32, 64)


def _bounds(bits, signed):
    if signed:
        half = 1 << (bits - 1)
        return -half, half - 1
    return 0, (1 << bits) - 1


class Rng:
    """Deterministic pseudo-random generator with 64 bits of state."""

    __slots__ = ("_state",)

    def __init__(self, seed):
        self._state = (seed + _INCREMENT) & _MASK64
        self._step()

    def _step(self):
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK64

    def next_u32(self):
        """Return a uniformly distributed integer in [0, 2**32)."""
        x = self._state
        self._step()
        value = (((x >> 18) ^ x) >> 27) & _MASK32
        rot = x >> 59
        return ((value >> rot) | (value << (32 - rot))) & _MASK32

    def next_u64(self):
        """Return a uniformly distributed integer in [0, 2**64)."""
        low = self.next_u32()
        high = self.next_u32()
        return low | (high << 32)

    def next_f32(self):
        """Return a float in [0, 1) with 23 bits of precision."""
        return (self.next_u32() & ((1 << 23) - 1)) / (1 << 23)

    def next_f64(self):
        """Return a float in [0, 1) with 52 bits of precision."""
        return (self.next_u64() & ((1 << 52) - 1)) / (1 << 52)

    def random(self, bits=64, signed=False):
        """Return a random integer of the given width and signedness."""
        if bits not in _RANDOM_WIDTHS:
            raise ValueError(f"unsupported width: {bits} bits")
        raw = self.next_u64() if bits == 64 else self.next_u32()
        raw &= (1 << bits) - 1
        if signed and raw >> (bits - 1):
            raw -= 1 << bits
        return raw

    def range(self, start=None, stop=None, bits=64, signed=False):
        """Return a random integer in [start, stop).

        A missing bound stands for the limit of the integer type. An empty
        range yields ``start``.
        """
        if bits not in _RANGE_WIDTHS:
            raise ValueError(f"unsupported width: {bits} bits")
        lowest, highest = _bounds(bits, signed)
        low = lowest if start is None else start
        if not lowest <= low <= highest:
            raise ValueError(f"invalid range ({start}, {stop})")
        if stop is None or stop == highest + 1:
            if low == lowest:
                return self.random(bits, signed)
            width = highest + 1 - low
        else:
            if not lowest <= stop <= highest:
                raise ValueError(f"invalid range ({start}, {stop})")
            width = stop - low
            if width < 0 or width > highest:
                raise ValueError(f"invalid range ({start}, {stop})")
        draw = self.random(bits)
        return low + ((draw * width) >> bits)