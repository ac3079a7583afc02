"""A byte trie whose nodes are numbered in order of creation."""

import operator


def _byte(c):
    c = operator.index(c)
    if not 0 <= c <= 255:
        raise ValueError(f"not a byte: {c}")
    return c


class Trie:
    """Trie over byte strings; node 0 is the root."""

    __slots__ = ("_nodes",)

    def __init__(self):
        self._nodes = [{}]

    def count_node(self):
        """Return the number of nodes, the root included."""
        return len(self._nodes)

    def _node(self, i):
        if not 0 <= i < len(self._nodes):
            raise IndexError(f"node out of range (len={len(self._nodes)}, index={i})")
        return self._nodes[i]

    def transition(self, i, c):
        """Return the child of node ``i`` along byte ``c``, or None."""
        return self._node(i).get(_byte(c))

    def links(self, i):
        """Return an iterator of ``(byte, child)`` pairs of node ``i`` by byte."""
        return iter(sorted(self._node(i).items()))

    def insert(self, s):
        """Insert the bytes ``s``.

        Return ``(inserted, node)``: whether any node was created, and the
        node reached at the end of ``s``.
        """
        i = 0
        inserted = False
        for c in s:
            node = self._nodes[i]
            c = _byte(c)
            child = node.get(c)
            if child is None:
                inserted = True
                child = len(self._nodes)
                node[c] = child
                self._nodes.append({})
            i = child
        return inserted, i

    def __repr__(self):
        return f"Trie(count_node={len(self._nodes)})"