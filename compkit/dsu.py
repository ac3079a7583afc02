"""Disjoint-set union (union by size), optionally carrying a merged value per set."""

import copy
from dataclasses import dataclass


@dataclass(frozen=True)
class Comp:
    """A connected component: its representative and its number of elements."""

    root: int
    size: int


@dataclass(frozen=True)
class UniteResult:
    """Outcome of joining two elements.

    ``root`` is the representative of the joined set and ``united_root`` the
    representative that was attached below it. When the elements were already
    in one set, ``is_united`` is false and both roots are that set's root.
    """

    is_united: bool
    root: int
    united_root: int
    size: int


class Dsu:
    """Disjoint-set union over the elements ``0 .. n-1``."""

    __slots__ = ("_parent",)
    __hash__ = None

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"size must be non-negative: {n}")
        # A negative entry marks a root and holds minus the size of its set.
        self._parent = [-1] * n

    def __len__(self):
        return len(self._parent)

    def _check(self, i):
        if not 0 <= i < len(self._parent):
            raise IndexError(f"out of range (len={len(self._parent)}, index={i})")

    def comp(self, i):
        """Return the component that holds ``i``."""
        self._check(i)
        parent = self._parent
        while parent[i] >= 0:
            i = parent[i]
        return Comp(i, -parent[i])

    def is_root(self, i):
        """Return whether ``i`` is the representative of its set."""
        self._check(i)
        return self._parent[i] < 0

    def root(self, i):
        """Return the representative of the set holding ``i``."""
        return self.comp(i).root

    def size(self, i):
        """Return the size of the set holding ``i``."""
        return self.comp(i).size

    def unite(self, i, j):
        """Join the sets of ``i`` and ``j``; the larger set keeps its root."""
        ci = self.comp(i)
        cj = self.comp(j)
        if ci.root == cj.root:
            return UniteResult(False, ci.root, ci.root, ci.size)
        if ci.size >= cj.size:
            r, c = ci.root, cj.root
        else:
            r, c = cj.root, ci.root
        self._parent[r] += self._parent[c]
        self._parent[c] = r
        return UniteResult(True, r, c, -self._parent[r])

    def comps(self):
        """Yield every component in increasing order of its root."""
        for i, p in enumerate(self._parent):
            if p < 0:
                yield Comp(i, -p)

    def _duplicate(self):
        dup = Dsu(0)
        dup._parent = list(self._parent)
        return dup

    def __eq__(self, other):
        if not isinstance(other, Dsu):
            return NotImplemented
        return self._parent == other._parent

    def __repr__(self):
        return f"Dsu({self._parent})"


class DsuMerge:
    """Disjoint-set union that keeps one value per set.

    ``merge(root_value, child_value)`` returns the value of the joined set.
    """

    __slots__ = ("_dsu", "_values", "_merge")

    def __init__(self, n, init, merge):
        self._dsu = Dsu(n)
        self._values = [init(i) for i in range(n)]
        self._merge = merge

    @classmethod
    def filled(cls, n, value, merge):
        """Start every element with its own shallow copy of ``value``."""
        return cls(n, lambda _: copy.copy(value), merge)

    def __len__(self):
        return len(self._dsu)

    def comp(self, i):
        """Return the component holding ``i`` and the value of that set."""
        c = self._dsu.comp(i)
        return c, self._values[c.root]

    def is_root(self, i):
        """Return whether ``i`` is the representative of its set."""
        return self._dsu.is_root(i)

    def root(self, i):
        """Return the representative of the set holding ``i``."""
        return self._dsu.root(i)

    def size(self, i):
        """Return the size of the set holding ``i``."""
        return self._dsu.size(i)

    def value(self, i):
        """Return the value of the set holding ``i``."""
        return self.comp(i)[1]

    def set_value(self, i, value):
        """Replace the value of the set holding ``i``."""
        self._values[self._dsu.root(i)] = value

    def unite(self, i, j):
        """Join the sets of ``i`` and ``j``; return the result and the set's value."""
        res = self._dsu.unite(i, j)
        if res.is_united:
            child = self._values[res.united_root]
            self._values[res.united_root] = None
            self._values[res.root] = self._merge(self._values[res.root], child)
        return res, self._values[res.root]

    def comps(self):
        """Yield ``(component, value)`` for every set in order of its root."""
        for c in self._dsu.comps():
            yield c, self._values[c.root]

    def copy(self):
        """Return an independent copy; set values are deep-copied."""
        dup = DsuMerge.__new__(DsuMerge)
        dup._dsu = self._dsu._duplicate()
        dup._values = copy.deepcopy(self._values)
        dup._merge = self._merge
        return dup

    __copy__ = copy

    def __repr__(self):
        return f"DsuMerge({list(self.comps())})"