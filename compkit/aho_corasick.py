"""Aho-Corasick automaton built on a byte trie."""

from collections import deque


class AhoCorasick:
    """Suffix links and depths over the nodes of a :class:`Trie`."""

    __slots__ = ("_trie", "_suf_link", "_depth")

    def __init__(self, trie):
        count = trie.count_node()
        suf_link = [0] * count
        depth = [0] * count
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for c, v in trie.links(u):
                if u != 0:
                    a = u
                    while True:
                        w = trie.transition(suf_link[a], c)
                        if w is not None:
                            suf_link[v] = w
                            break
                        if a == 0:
                            break
                        a = suf_link[a]
                depth[v] = depth[u] + 1
                queue.append(v)
        self._trie = trie
        self._suf_link = suf_link
        self._depth = depth

    @property
    def trie(self):
        return self._trie

    def transition(self, i, c):
        """Follow byte ``c`` from node ``i``, falling back along suffix links.

        Return None when not even the root has a child along ``c``.
        """
        while True:
            j = self._trie.transition(i, c)
            if j is not None:
                return j
            i = self.suffix(i)
            if i is None:
                return None

    def depth(self, i):
        """Return the length of the string that node ``i`` stands for."""
        return self._depth[i]

    def suffix(self, i):
        """Return the suffix link of node ``i``, or None for the root."""
        return None if i == 0 else self._suf_link[i]