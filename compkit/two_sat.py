"""Two-satisfiability by strongly connected components of the implication graph."""

from .adj_list import AdjListBuilder
from .scc import scc


class TwoSat:
    """A 2-SAT instance over the variables ``0 .. n-1``."""

    __slots__ = ("_graph",)

    def __init__(self, n):
        self._graph = AdjListBuilder(2 * n)

    def clause(self, i, f, j, g):
        """Require that variable ``i`` equals ``f`` or variable ``j`` equals ``g``."""
        u = 2 * i + int(bool(f))
        v = 2 * j + int(bool(g))
        if not 0 <= u < self._graph.num_vert() or not 0 <= v < self._graph.num_vert():
            raise IndexError(
                f"variable out of range (len={self._graph.num_vert() // 2}, "
                f"indices={i}, {j})"
            )
        self._graph.edge(u ^ 1, v)
        self._graph.edge(v ^ 1, u)

    def solve(self):
        """Return a satisfying assignment as a list of bools, or None."""
        g = self._graph.build()
        comp = scc(g.num_vert(), g.adj)
        result = []
        for false_lit, true_lit in zip(comp[::2], comp[1::2]):
            if false_lit == true_lit:
                return None
            result.append(false_lit > true_lit)
        return result

    def __repr__(self):
        return (
            f"TwoSat(n={self._graph.num_vert() // 2}, "
            f"clauses={self._graph.num_edge() // 2})"
        )