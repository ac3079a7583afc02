"""Maximum flow by repeated shortest augmenting paths over a residual graph."""

from collections import deque


class MaxFlow:
    """Directed flow network on the vertices ``0 .. n-1``.

    Each edge is stored next to its reverse residual edge, so edge ``e`` and
    edge ``e ^ 1`` form a pair. Residual capacities persist between calls to
    :meth:`flow`, so a second call continues from the flow already sent.
    """

    __slots__ = ("_graph", "_to", "_cap")

    def __init__(self, n):
        if n < 0:
            raise ValueError(f"number of vertices must be non-negative: {n}")
        self._graph = [[] for _ in range(n)]
        self._to = []
        self._cap = []

    def num_verts(self):
        """Return the number of vertices."""
        return len(self._graph)

    def _check(self, v):
        if not 0 <= v < len(self._graph):
            raise IndexError(f"vertex out of range (len={len(self._graph)}, index={v})")

    def _arc(self, u, v, cap):
        self._graph[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(cap)

    def edge(self, u, v, cap):
        """Add an edge from ``u`` to ``v`` with capacity ``cap``."""
        self._check(u)
        self._check(v)
        self._arc(u, v, cap)
        self._arc(v, u, 0)

    def flow(self, s, t, limit=None):
        """Send as much flow as possible from ``s`` to ``t``, at most ``limit``.

        Return the amount of flow sent by this call.
        """
        self._check(s)
        self._check(t)
        total = 0
        cap = self._cap
        while limit is None or total < limit:
            dist = self._levels(s, t)
            if dist is None:
                break
            path = self._augmenting_path(s, t, dist)
            if not path:
                break
            add = min(cap[e] for e in path)
            if limit is not None:
                add = min(add, limit - total)
            total += add
            for e in path:
                cap[e] -= add
                cap[e ^ 1] += add
        return total

    def _levels(self, s, t):
        """Breadth-first distances from ``s``, or None when ``t`` is unreachable."""
        dist = [-1] * len(self._graph)
        dist[s] = 0
        queue = deque([s])
        to, cap = self._to, self._cap
        while queue:
            u = queue.popleft()
            for e in reversed(self._graph[u]):
                v = to[e]
                if cap[e] > 0 and dist[v] == -1:
                    dist[v] = dist[u] + 1
                    queue.append(v)
                    if v == t:
                        return dist
        return None

    def _augmenting_path(self, s, t, dist):
        """Return the edges of a shortest path with spare capacity, or []."""
        graph, to, cap = self._graph, self._to, self._cap
        cursor = [len(adj) - 1 for adj in graph]
        stack = [s]
        path = []
        while stack:
            u = stack[-1]
            adj = graph[u]
            while cursor[u] >= 0:
                e = adj[cursor[u]]
                v = to[e]
                if cap[e] > 0 and dist[u] + 1 == dist[v]:
                    path.append(e)
                    if v == t:
                        return path
                    stack.append(v)
                    break
                cursor[u] -= 1
            else:
                dist[u] = -1
                stack.pop()
                if path:
                    path.pop()
                    cursor[stack[-1]] -= 1
        return []

    def __repr__(self):
        return f"MaxFlow(num_verts={len(self._graph)}, num_edges={len(self._to) // 2})"