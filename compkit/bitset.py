"""Bit sets stored as a sequence of fixed-width unsigned chunks."""

import operator

_WIDTHS = (8, 16, 32, 64, 128)


class BitSet:
    """A fixed-length set of bits; bit ``i`` lives in chunk ``i // chunk_bits``."""

    __slots__ = ("_chunks", "_bits")
    __hash__ = None

    def __init__(self, chunks, chunk_bits=64):
        if chunk_bits not in _WIDTHS:
            raise ValueError(f"unsupported chunk width: {chunk_bits} bits")
        limit = 1 << chunk_bits
        values = [operator.index(c) for c in chunks]
        for c in values:
            if not 0 <= c < limit:
                raise ValueError(f"chunk out of range for {chunk_bits} bits: {c}")
        self._chunks = values
        self._bits = chunk_bits

    @property
    def chunks(self):
        return tuple(self._chunks)

    @property
    def chunk_bits(self):
        return self._bits

    def _locate(self, i):
        if not 0 <= i < len(self):
            raise IndexError(f"bit index out of range (index={i}, len={len(self)})")
        return divmod(i, self._bits)

    def bit(self, i):
        """Return whether bit ``i`` is set."""
        q, r = self._locate(i)
        return bool(self._chunks[q] >> r & 1)

    def set_bit(self, i, f):
        """Set bit ``i`` to ``f``; return its previous value."""
        q, r = self._locate(i)
        orig = bool(self._chunks[q] >> r & 1)
        if f:
            self._chunks[q] |= 1 << r
        else:
            self._chunks[q] &= ~(1 << r)
        return orig

    def flip_bit(self, i):
        """Toggle bit ``i``; return its previous value."""
        q, r = self._locate(i)
        orig = bool(self._chunks[q] >> r & 1)
        self._chunks[q] ^= 1 << r
        return orig

    def __len__(self):
        return self._bits * len(self._chunks)

    def count_ones(self):
        """Return the number of set bits."""
        return sum(c.bit_count() for c in self._chunks)

    def invert(self):
        """Flip every bit in place."""
        mask = (1 << self._bits) - 1
        self._chunks = [c ^ mask for c in self._chunks]

    def _combine(self, other, fn):
        if not isinstance(other, BitSet):
            raise TypeError(f"expected BitSet, got {type(other).__name__}")
        if other._bits != self._bits or len(other._chunks) != len(self._chunks):
            raise ValueError("bit sets differ in shape")
        self._chunks = [fn(x, y) for x, y in zip(self._chunks, other._chunks)]

    def and_(self, other):
        """Keep only bits also set in ``other``."""
        self._combine(other, operator.and_)

    def or_(self, other):
        """Set every bit that is set in ``other``."""
        self._combine(other, operator.or_)

    def xor(self, other):
        """Toggle every bit that is set in ``other``."""
        self._combine(other, operator.xor)

    def difference(self, other):
        """Clear every bit that is set in ``other``."""
        self._combine(other, lambda x, y: x & ~y)

    def reverse_bits(self):
        """Reverse the order of all bits in place."""
        width = self._bits
        self._chunks = [
            int(format(c, f"0{width}b")[::-1], 2) for c in reversed(self._chunks)
        ]

    def display_bits(self):
        """Return the bits as a string of 0 and 1, bit 0 first."""
        width = self._bits
        return "".join(format(c, f"0{width}b")[::-1] for c in self._chunks)

    def one_positions(self):
        """Yield the indices of set bits in increasing order."""
        for q, c in enumerate(self._chunks):
            base = q * self._bits
            while c:
                low = c & -c
                yield base + low.bit_length() - 1
                c ^= low

    def __eq__(self, other):
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._bits == other._bits and self._chunks == other._chunks

    def __repr__(self):
        return f"BitSet({self._chunks}, chunk_bits={self._bits})"