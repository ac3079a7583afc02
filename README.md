# compkit

A collection of algorithms and data structures that come up again and again
in competitive programming. It is plain Python and needs nothing outside the
standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `compkit.simple_rng` | `Rng`, a small seedable permuted congruential generator |
| `compkit.montgomery` | `Montgomery` modular multiplication for odd moduli (32 or 64 bit radix) |
| `compkit.factorize` | `factorize`, `is_prime` (Miller–Rabin and Pollard's rho, for integers below 2**64) |
| `compkit.modint` | `ModInt`, `mint`, `primitive_root` |
| `compkit.poly` | `Poly`, polynomials modulo a prime with transform-based multiplication and inverse |
| `compkit.bigint` | `FixedBigUInt`, fixed-width unsigned integers of 64-bit digits with wrapping arithmetic |
| `compkit.bitset` | `BitSet` over chunks of 8, 16, 32, 64 or 128 bits |
| `compkit.dsu` | `Dsu`, `DsuMerge`, `Comp`, `UniteResult` |
| `compkit.segtree` | `SegTree` with `prod`, `set`, `max_right`, `min_left` |
| `compkit.lazy_segtree` | `LazySegTree` with range `apply` and range `prod` |
| `compkit.max_flow` | `MaxFlow`, maximum flow by shortest augmenting paths |
| `compkit.trie` | `Trie` over bytes |
| `compkit.aho_corasick` | `AhoCorasick` suffix links and transitions built from a `Trie` |
| `compkit.suffix_array` | `suffix_array`, `suffix_array_naive`, `sa_is`, `lcp_array` |
| `compkit.adj_list` | `AdjListBuilder`, `AdjList`, `LabeledAdjListBuilder`, `LabeledAdjList`, `Edge` |
| `compkit.scc` | `scc`, strongly connected components |
| `compkit.two_sat` | `TwoSat` solver |

Invalid indices raise `IndexError`; invalid arguments such as mismatched
moduli or widths raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Modular arithmetic:

```python
from compkit.modint import mint

x = mint(123, 998244353)
assert x * x.inv() == mint(1, 998244353)
```

Polynomial multiplication:

```python
from compkit.poly import Poly

M = 998244353
product = Poly([1, 2], M) * Poly([3, 4, 5], M)
assert [int(c) for c in product] == [3, 10, 13, 10]
```

Factorisation:

```python
from compkit.factorize import factorize

assert sorted(factorize(2 * 101 * 288209)) == [2, 101, 288209]
```

Bit sets:

```python
from compkit.bitset import BitSet

bits = BitSet([0b00010001, 0b00010011], chunk_bits=8)
assert bits.count_ones() == 5
assert list(bits.one_positions()) == [0, 4, 8, 9, 12]
assert bits.display_bits() == "1000100011001000"
```

Maximum flow:

```python
from compkit.max_flow import MaxFlow

mf = MaxFlow(4)
mf.edge(0, 1, 10)
mf.edge(0, 2, 5)
mf.edge(1, 2, 15)
mf.edge(1, 3, 5)
mf.edge(2, 3, 10)
assert mf.flow(0, 3) == 15
```

Segment tree over sums:

```python
from operator import add
from compkit.segtree import SegTree

st = SegTree([3, 1, 4, 1, 5], add, 0)
assert st.prod(1, 4) == 6
st.set(2, 10)
assert st.max_right(0, lambda s: s <= 14) == (3, 14)
```

Range add, range sum with a lazy segment tree (values are `(sum, length)`
pairs, maps are amounts to add):

```python
from compkit.lazy_segtree import LazySegTree

st = LazySegTree(
    [(1, 1), (2, 1), (3, 1)],
    op=lambda a, b: (a[0] + b[0], a[1] + b[1]),
    identity=(0, 0),
    mapping=lambda f, x: (x[0] + f * x[1], x[1]),
    composition=lambda f, g: f + g,
    map_identity=0,
)
st.apply(0, 2, 10)
assert st.prod(0, 3) == (26, 3)
assert st.get(1) == (12, 1)
```

Disjoint sets with merged values (`merge` returns the value of the joined set):

```python
from compkit.dsu import DsuMerge

dsu = DsuMerge(4, lambda i: [i], lambda a, b: a + b)
result, members = dsu.unite(0, 2)
assert result.is_united and sorted(members) == [0, 2]
```

Suffix array:

```python
from compkit.suffix_array import suffix_array, lcp_array

s = b"banana"
sa = suffix_array(s)
assert sa == [5, 3, 1, 0, 4, 2]
assert lcp_array(s, sa) == [1, 3, 0, 0, 2]
```

2-SAT:

```python
from compkit.two_sat import TwoSat

ts = TwoSat(1)
ts.clause(0, True, 0, True)
assert ts.solve() == [True]
```

## What it does not do

compkit is a library only: it has no command-line program and reads no input
files. Bring your own input parsing and call the modules directly.