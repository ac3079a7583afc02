"""Strongly connected components."""


def scc(n, adj):
    """Return the component id of each vertex ``0 .. n-1``.

    ``adj(u)`` gives the heads of the edges leaving ``u``. Ids are numbered
    from 0 in reverse topological order: for an edge ``u -> v`` between
    different components, the id of ``u`` is greater than the id of ``v``.
    """
    order = [-1] * n
    low = [0] * n
    comp = [-1] * n
    stack = []
    counter = 0
    comp_id = 0

    def neighbours(u):
        for v in adj(u):
            if not 0 <= v < n:
                raise IndexError(f"vertex out of range (len={n}, index={v})")
            yield v

    for root in range(n - 1, -1, -1):
        if order[root] != -1:
            continue
        order[root] = low[root] = counter
        counter += 1
        stack.append(root)
        work = [(root, neighbours(root))]
        while work:
            u, it = work[-1]
            for v in it:
                if order[v] == -1:
                    order[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    work.append((v, neighbours(v)))
                    break
                if comp[v] == -1:
                    low[u] = min(low[u], order[v])
            else:
                work.pop()
                if low[u] == order[u]:
                    while True:
                        v = stack.pop()
                        comp[v] = comp_id
                        if v == u:
                            break
                    comp_id += 1
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[u])
    return comp