"""Segment tree with lazily propagated range maps."""


def _ceil_pow2(n):
    return 1 << max(n - 1, 0).bit_length()


class LazySegTree:
    """Range-apply, range-product segment tree.

    ``op``/``identity`` form a monoid on values. ``mapping(f, x)`` applies a
    map to a value, ``composition(f, g)`` is the map that applies ``g`` then
    ``f``, and ``map_identity`` is the map that changes nothing.
    """

    __slots__ = (
        "_n",
        "_size",
        "_log",
        "_tree",
        "_lazy",
        "_op",
        "_e",
        "_mapping",
        "_composition",
        "_id",
    )

    def __init__(self, values, op, identity, mapping, composition, map_identity):
        values = list(values)
        n = len(values)
        size = _ceil_pow2(n)
        self._n = n
        self._size = size
        self._log = size.bit_length() - 1
        self._op = op
        self._e = identity
        self._mapping = mapping
        self._composition = composition
        self._id = map_identity
        self._tree = [identity] * size + values + [identity] * (size - n)
        self._lazy = [map_identity] * size
        for k in range(size - 1, 0, -1):
            self._update(k)

    @classmethod
    def with_size(cls, n, op, identity, mapping, composition, map_identity):
        """Return a tree of ``n`` identity elements."""
        if n < 0:
            raise ValueError(f"size must be non-negative: {n}")
        return cls([identity] * n, op, identity, mapping, composition, map_identity)

    def __len__(self):
        return self._n

    def _update(self, k):
        self._tree[k] = self._op(self._tree[2 * k], self._tree[2 * k + 1])

    def _all_apply(self, k, f):
        self._tree[k] = self._mapping(f, self._tree[k])
        if k < self._size:
            self._lazy[k] = self._composition(f, self._lazy[k])

    def _push(self, k):
        f = self._lazy[k]
        self._all_apply(2 * k, f)
        self._all_apply(2 * k + 1, f)
        self._lazy[k] = self._id

    def _bounds(self, start, stop):
        left = 0 if start is None else start
        right = self._n if stop is None else stop
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"invalid range ({left}, {right}) for len {self._n}")
        return left + self._size, right + self._size

    def _check(self, i):
        if not 0 <= i < self._n:
            raise IndexError(f"out of range (len = {self._n}, index = {i})")

    def _push_boundaries(self, left, right):
        for i in range(self._log, 0, -1):
            if (left >> i) << i != left:
                self._push(left >> i)
            if (right >> i) << i != right:
                self._push((right - 1) >> i)

    def prod(self, start=None, stop=None):
        """Return the product of the elements in ``[start, stop)``."""
        left, right = self._bounds(start, stop)
        if left == right:
            return self._e
        self._push_boundaries(left, right)
        op, tree = self._op, self._tree
        sml = smr = self._e
        while left < right:
            if left & 1:
                sml = op(sml, tree[left])
                left += 1
            if right & 1:
                right -= 1
                smr = op(tree[right], smr)
            left >>= 1
            right >>= 1
        return op(sml, smr)

    def apply(self, start, stop, f):
        """Apply the map ``f`` to every element in ``[start, stop)``."""
        left, right = self._bounds(start, stop)
        if left == right:
            return
        self._push_boundaries(left, right)
        lo, hi = left, right
        while lo < hi:
            if lo & 1:
                self._all_apply(lo, f)
                lo += 1
            if hi & 1:
                hi -= 1
                self._all_apply(hi, f)
            lo >>= 1
            hi >>= 1
        for i in range(1, self._log + 1):
            if (left >> i) << i != left:
                self._update(left >> i)
            if (right >> i) << i != right:
                self._update((right - 1) >> i)

    def get(self, i):
        """Return element ``i`` with every pending map applied."""
        self._check(i)
        k = self._size + i
        x = self._tree[k]
        k >>= 1
        while k:
            x = self._mapping(self._lazy[k], x)
            k >>= 1
        return x

    def set(self, i, value):
        """Replace element ``i`` with ``value``; return the previous element."""
        self._check(i)
        k = self._size + i
        for j in range(self._log, 0, -1):
            self._push(k >> j)
        orig = self._tree[k]
        self._tree[k] = value
        for j in range(1, self._log + 1):
            self._update(k >> j)
        return orig

    def __repr__(self):
        return f"LazySegTree({[self.get(i) for i in range(self._n)]})"