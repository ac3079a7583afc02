import pytest

from compkit.trie import Trie


def test_insert_and_links():
    trie = Trie()
    assert trie.count_node() == 1

    assert trie.insert(b"abc") == (True, 3)
    assert trie.insert(b"axz") == (True, 5)
    assert trie.insert(b"aba") == (True, 6)
    assert trie.insert(b"aba") == (False, 6)

    links = trie.links(1)
    assert next(links) == (ord("b"), 2)
    assert next(links) == (ord("x"), 4)
    assert next(links, None) is None


def test_prefix_of_existing_word_is_not_inserted():
    trie = Trie()
    trie.insert(b"abc")
    assert trie.insert(b"ab") == (False, 2)
    assert trie.count_node() == 4


def test_empty_insert_returns_root():
    trie = Trie()
    assert trie.insert(b"") == (False, 0)


def test_transition():
    trie = Trie()
    trie.insert(b"ab")
    assert trie.transition(0, ord("a")) == 1
    assert trie.transition(1, ord("b")) == 2
    assert trie.transition(0, ord("b")) is None


def test_links_sorted_regardless_of_insertion_order():
    trie = Trie()
    trie.insert(b"z")
    trie.insert(b"a")
    trie.insert(b"m")
    assert list(trie.links(0)) == [(ord("a"), 2), (ord("m"), 3), (ord("z"), 1)]


def test_leaf_has_no_links():
    trie = Trie()
    trie.insert(b"q")
    assert list(trie.links(1)) == []


def test_accepts_iterable_of_ints():
    trie = Trie()
    assert trie.insert([0, 255]) == (True, 2)
    assert trie.transition(1, 255) == 2


def test_invalid_byte():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert([256])
    with pytest.raises(ValueError):
        trie.transition(0, -1)


def test_node_out_of_range():
    with pytest.raises(IndexError):
        Trie().links(1)