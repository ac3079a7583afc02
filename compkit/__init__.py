"""Algorithms and data structures for competitive programming."""

__version__ = "0.1.0"

__all__ = [
    "adj_list",
    "aho_corasick",
    "bigint",
    "bitset",
    "dsu",
    "factorize",
    "lazy_segtree",
    "max_flow",
    "modint",
    "montgomery",
    "poly",
    "scc",
    "segtree",
    "simple_rng",
    "suffix_array",
    "trie",
    "two_sat",
]