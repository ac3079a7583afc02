"""Suffix arrays by induced sorting, and longest-common-prefix arrays."""

_NAIVE_LIMIT = 20


def suffix_array(s):
    """Return the suffix array of the byte string ``s``."""
    if len(s) <= _NAIVE_LIMIT:
        return suffix_array_naive(s)
    return sa_is(s, 255)


def suffix_array_naive(s):
    """Return the suffix array of ``s`` by sorting its suffixes directly."""
    return sorted(range(len(s)), key=lambda i: s[i:])


def sa_is(s, max_value):
    """Return the suffix array of ``s``, whose items are ints in ``0..max_value``."""
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if min(s) < 0 or max(s) > max_value:
        raise ValueError(f"values must lie in 0..{max_value}")

    is_s = [False] * (n + 1)
    is_s[n] = True
    for i in range(n - 1, -1, -1):
        if i + 1 < n and s[i] == s[i + 1]:
            is_s[i] = is_s[i + 1]
        else:
            is_s[i] = i + 1 < n and s[i] < s[i + 1]

    def is_lms(i):
        return not is_s[i - 1] and is_s[i]

    to_lms = [-1] * n
    from_lms = []
    for i in range(1, n):
        if is_lms(i):
            to_lms[i] = len(from_lms)
            from_lms.append(i)

    end = [0] * (max_value + 1)
    for c in s:
        end[c] += 1
    for c in range(max_value):
        end[c + 1] += end[c]

    sa = [-1] * n
    lms_end = list(end)
    for i in range(1, n - 1):
        if is_lms(i):
            lms_end[s[i]] -= 1
            sa[lms_end[s[i]]] = i

    def induced_sort(bucket_end):
        start = [0] + bucket_end[:-1]
        b = s[n - 1]
        sa[start[b]] = n - 1
        start[b] += 1
        for i in range(n):
            if sa[i] > 0:
                j = sa[i] - 1
                b = s[j]
                sa[start[b]] = j
                start[b] += 1
        for i in range(n - 1, -1, -1):
            if sa[i] > 0:
                j = sa[i] - 1
                b = s[j]
                bucket_end[b] -= 1
                sa[bucket_end[b]] = j

    induced_sort(list(end))

    def lms_substring(k, start):
        stop = from_lms[k + 1] if k + 1 < len(from_lms) else n - 1
        return s[start : stop + 1]

    lms_s = [0] * len(from_lms)
    ch = 0
    j_prev = -1
    for pos in sa:
        if pos > 0 and is_lms(pos):
            j = to_lms[pos]
            if j_prev != -1 and lms_substring(j_prev, from_lms[j_prev]) != lms_substring(
                j, pos
            ):
                ch += 1
            lms_s[j] = ch
            j_prev = j

    sa_lms = sa_is(lms_s, ch)

    sa[:] = [-1] * n
    lms_end = list(end)
    for j in reversed(sa_lms):
        i = from_lms[j]
        lms_end[s[i]] -= 1
        sa[lms_end[s[i]]] = i
    induced_sort(end)

    return sa


def lcp_array(s, sa):
    """Return the longest common prefix of each pair of adjacent suffixes in ``sa``."""
    n = len(s)
    if len(sa) != n:
        raise ValueError(f"lengths differ: {n} and {len(sa)}")
    if n == 0:
        raise ValueError("cannot build an lcp array of an empty sequence")
    rank = [0] * n
    for r, i in enumerate(sa):
        rank[i] = r

    def at(k):
        return s[k] if k < n else None

    lcp = [0] * (n - 1)
    h = 0
    for i, rank_i in enumerate(rank):
        h = max(h - 1, 0)
        if rank_i == 0:
            continue
        j = sa[rank_i - 1]
        while at(i + h) == at(j + h):
            h += 1
        lcp[rank_i - 1] = h
    return lcp