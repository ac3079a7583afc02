"""Segment tree over a monoid with range products and binary search."""


def _ceil_pow2(n):
    return 1 << max(n - 1, 0).bit_length()


class SegTree:
    """Point-update, range-product segment tree.

    ``op`` must be associative with ``identity`` as its neutral element; it
    need not be commutative.
    """

    __slots__ = ("_n", "_size", "_tree", "_op", "_e")

    def __init__(self, values, op, identity):
        values = list(values)
        n = len(values)
        size = _ceil_pow2(n)
        self._n = n
        self._size = size
        self._op = op
        self._e = identity
        self._tree = [identity] * size + values + [identity] * (size - n)
        for k in range(size - 1, 0, -1):
            self._update(k)

    @classmethod
    def with_size(cls, n, op, identity):
        """Return a tree of ``n`` identity elements."""
        if n < 0:
            raise ValueError(f"size must be non-negative: {n}")
        return cls([identity] * n, op, identity)

    def _update(self, k):
        self._tree[k] = self._op(self._tree[2 * k], self._tree[2 * k + 1])

    def __len__(self):
        return self._n

    def __getitem__(self, i):
        if i < 0:
            i += self._n
        if not 0 <= i < self._n:
            raise IndexError(f"out of range (len = {self._n}, index = {i})")
        return self._tree[self._size + i]

    def __iter__(self):
        return iter(self._tree[self._size : self._size + self._n])

    def set(self, i, x):
        """Replace element ``i`` with ``x``; return the previous element."""
        if not 0 <= i < self._n:
            raise IndexError(f"out of range (len = {self._n}, index = {i})")
        k = self._size + i
        orig = self._tree[k]
        self._tree[k] = x
        k >>= 1
        while k:
            self._update(k)
            k >>= 1
        return orig

    def prod(self, start=None, stop=None):
        """Return the product of the elements in ``[start, stop)``."""
        left = 0 if start is None else start
        right = self._n if stop is None else stop
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"invalid range ({left}, {right}) for len {self._n}")
        op, tree = self._op, self._tree
        sml = smr = self._e
        left += self._size
        right += self._size
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

    def max_right(self, left, pred):
        """Return ``(r, prod(left, r))`` for the largest ``r`` with ``pred`` true.

        ``pred`` must be monotone: once false it stays false as ``r`` grows.
        """
        if not 0 <= left <= self._n:
            raise IndexError(f"out of range (len = {self._n}, index = {left})")
        prod = self._e
        if left == self._n:
            return self._n, prod
        op, tree, size = self._op, self._tree, self._size
        k = left + size
        while True:
            while k % 2 == 0:
                k >>= 1
            candidate = op(prod, tree[k])
            if not pred(candidate):
                while k < size:
                    k *= 2
                    candidate = op(prod, tree[k])
                    if pred(candidate):
                        prod = candidate
                        k += 1
                return k - size, prod
            prod = candidate
            k += 1
            if k & -k == k:
                return self._n, prod

    def min_left(self, right, pred):
        """Return ``(l, prod(l, right))`` for the smallest ``l`` with ``pred`` true.

        ``pred`` must be monotone: once false it stays false as ``l`` shrinks.
        """
        if not 0 <= right <= self._n:
            raise IndexError(f"out of range (len = {self._n}, index = {right})")
        prod = self._e
        if right == 0:
            return 0, prod
        op, tree, size = self._op, self._tree, self._size
        k = right + size
        while True:
            k -= 1
            while k > 1 and k % 2:
                k >>= 1
            candidate = op(tree[k], prod)
            if not pred(candidate):
                while k < size:
                    k = 2 * k + 1
                    candidate = op(tree[k], prod)
                    if pred(candidate):
                        prod = candidate
                        k -= 1
                return k + 1 - size, prod
            prod = candidate
            if k & -k == k:
                return 0, prod

    def __repr__(self):
        return f"SegTree({list(self)})"