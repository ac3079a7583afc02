"""Compact adjacency lists built from edge lists, optionally with edge labels."""

from dataclasses import dataclass
from itertools import pairwise


@dataclass(frozen=True)
class Edge:
    """An outgoing edge: its head vertex and its label."""

    to: int
    label: object


class AdjListBuilder:
    """Collects directed edges on the vertices ``0 .. num_vert-1``."""

    __slots__ = ("_num_vert", "_src", "_dst")

    def __init__(self, num_vert):
        if num_vert < 0:
            raise ValueError(f"number of vertices must be non-negative: {num_vert}")
        self._num_vert = num_vert
        self._src = []
        self._dst = []

    def num_vert(self):
        """Return the number of vertices."""
        return self._num_vert

    def num_edge(self):
        """Return the number of edges added so far."""
        return len(self._src)

    def _check(self, name, v):
        if not 0 <= v < self._num_vert:
            raise IndexError(f"out of bound ({name}={v}, len={self._num_vert})")

    def edge(self, src, dst):
        """Add an edge from ``src`` to ``dst``; return the builder."""
        self._check("from", src)
        self._check("to", dst)
        self._src.append(src)
        self._dst.append(dst)
        return self

    def biedge(self, u, v):
        """Add edges in both directions between ``u`` and ``v``; return the builder."""
        return self.edge(u, v).edge(v, u)

    def _layout(self):
        """Return vertex offsets, edge heads and the edge order, grouped by source.

        Edges of one vertex keep the order in which they were added.
        """
        starts = [0] * (self._num_vert + 1)
        for u in self._src:
            starts[u + 1] += 1
        for v in range(self._num_vert):
            starts[v + 1] += starts[v]
        fill = starts[:-1]
        order = [0] * len(self._src)
        for e, u in enumerate(self._src):
            order[fill[u]] = e
            fill[u] += 1
        targets = [self._dst[e] for e in order]
        return starts, targets, order

    def build(self):
        """Return the adjacency list of the edges added so far."""
        starts, targets, _ = self._layout()
        return AdjList._from_layout(starts, targets)

    def __repr__(self):
        return f"AdjListBuilder(num_vert={self._num_vert}, num_edge={len(self._src)})"


class AdjList:
    """Immutable directed graph; each vertex's neighbours are in insertion order."""

    __slots__ = ("_starts", "_targets")

    def __init__(self):
        self._starts = [0]
        self._targets = []

    @classmethod
    def _from_layout(cls, starts, targets):
        graph = cls()
        graph._starts = starts
        graph._targets = targets
        return graph

    @classmethod
    def from_edges(cls, num_vert, edges):
        """Build a graph from ``(from, to)`` pairs."""
        builder = AdjListBuilder(num_vert)
        for src, dst in edges:
            builder.edge(src, dst)
        return builder.build()

    @classmethod
    def from_biedges(cls, num_vert, edges):
        """Build a graph with both directions of every ``(u, v)`` pair."""
        builder = AdjListBuilder(num_vert)
        for u, v in edges:
            builder.biedge(u, v)
        return builder.build()

    def num_vert(self):
        """Return the number of vertices."""
        return len(self._starts) - 1

    def num_edge(self):
        """Return the number of edges."""
        return len(self._targets)

    def _range(self, v):
        if not 0 <= v < self.num_vert():
            raise IndexError(f"vertex out of range (len={self.num_vert()}, index={v})")
        return self._starts[v], self._starts[v + 1]

    def adj(self, v):
        """Return the heads of the edges leaving ``v``."""
        start, stop = self._range(v)
        return tuple(self._targets[start:stop])

    def deg(self, v):
        """Return the out-degree of ``v``."""
        start, stop = self._range(v)
        return stop - start

    def edges(self):
        """Yield every edge as ``(from, to)``, grouped by source vertex."""
        for u, (start, stop) in enumerate(pairwise(self._starts)):
            for v in self._targets[start:stop]:
                yield u, v

    def __repr__(self):
        entries = ", ".join(
            f"{u}: {list(self._targets[a:b])}"
            for u, (a, b) in enumerate(pairwise(self._starts))
        )
        return f"AdjList({{{entries}}})"


class LabeledAdjListBuilder:
    """Collects directed edges that each carry a label."""

    __slots__ = ("_inner", "_labels")

    def __init__(self, num_vert):
        self._inner = AdjListBuilder(num_vert)
        self._labels = []

    def num_vert(self):
        """Return the number of vertices."""
        return self._inner.num_vert()

    def num_edge(self):
        """Return the number of edges added so far."""
        return self._inner.num_edge()

    def edge(self, src, dst, label):
        """Add an edge from ``src`` to ``dst`` with ``label``; return the builder."""
        self._inner.edge(src, dst)
        self._labels.append(label)
        return self

    def biedge(self, u, v, label):
        """Add labelled edges in both directions; return the builder."""
        return self.edge(u, v, label).edge(v, u, label)

    def build(self):
        """Return the labelled adjacency list of the edges added so far."""
        starts, targets, order = self._inner._layout()
        graph = AdjList._from_layout(starts, targets)
        return LabeledAdjList._from_parts(graph, [self._labels[e] for e in order])

    def __repr__(self):
        return (
            f"LabeledAdjListBuilder(num_vert={self.num_vert()}, "
            f"num_edge={self.num_edge()})"
        )


class LabeledAdjList:
    """Directed graph whose edges carry labels that can be replaced."""

    __slots__ = ("_graph", "_labels")

    def __init__(self):
        self._graph = AdjList()
        self._labels = []

    @classmethod
    def _from_parts(cls, graph, labels):
        result = cls()
        result._graph = graph
        result._labels = labels
        return result

    @classmethod
    def from_edges(cls, num_vert, edges):
        """Build a graph from ``(from, to, label)`` triples."""
        builder = LabeledAdjListBuilder(num_vert)
        for src, dst, label in edges:
            builder.edge(src, dst, label)
        return builder.build()

    @classmethod
    def from_biedges(cls, num_vert, edges):
        """Build a graph with both directions of every ``(u, v, label)`` triple."""
        builder = LabeledAdjListBuilder(num_vert)
        for u, v, label in edges:
            builder.biedge(u, v, label)
        return builder.build()

    def num_vert(self):
        """Return the number of vertices."""
        return self._graph.num_vert()

    def num_edge(self):
        """Return the number of edges."""
        return self._graph.num_edge()

    def adj(self, v):
        """Return the heads of the edges leaving ``v``."""
        return self._graph.adj(v)

    def outedges(self, v):
        """Return the edges leaving ``v`` with their labels."""
        start, stop = self._graph._range(v)
        return tuple(
            Edge(to, label)
            for to, label in zip(
                self._graph._targets[start:stop], self._labels[start:stop]
            )
        )

    def set_label(self, v, i, label):
        """Replace the label of the ``i``-th edge leaving ``v``."""
        start, stop = self._graph._range(v)
        if not 0 <= i < stop - start:
            raise IndexError(f"edge out of range (deg={stop - start}, index={i})")
        self._labels[start + i] = label

    def __repr__(self):
        entries = ", ".join(
            f"{v}: {[(e.to, e.label) for e in self.outedges(v)]}"
            for v in range(self.num_vert())
        )
        return f"LabeledAdjList({{{entries}}})"