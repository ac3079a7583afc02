import pytest

from compkit.suffix_array import lcp_array, sa_is, suffix_array, suffix_array_naive

SAMPLES = [
    b"",
    b"a",
    b"aaaaa",
    b"abracadabra",
    b"mississippi",
    b"31415926535897932384626433",
]


def test_lcp_adjacent_suffixes():
    s = b"abracadabra"
    sa = suffix_array_naive(s)
    lcp = lcp_array(s, sa)
    assert len(sa) == len(lcp) + 1
    for k in range(len(s) - 1):
        a, b, h = sa[k], sa[k + 1], lcp[k]
        assert s[a : a + h] == s[b : b + h]
        assert s[a + h : a + h + 1] != s[b + h : b + h + 1]


@pytest.mark.parametrize("s", SAMPLES)
def test_sa_is_matches_naive(s):
    assert sa_is(s, 255) == suffix_array_naive(s)


def test_known_suffix_arrays():
    assert suffix_array_naive(b"abracadabra") == [10, 7, 0, 3, 5, 8, 1, 4, 6, 9, 2]
    assert sa_is(b"mississippi", 255) == [10, 7, 4, 1, 0, 9, 8, 6, 3, 5, 2]


def test_known_lcp():
    s = b"abracadabra"
    assert lcp_array(s, suffix_array_naive(s)) == [1, 4, 1, 1, 0, 3, 0, 0, 0, 2]


def test_suffix_array_long_input_uses_sorting_consistent_with_naive():
    s = b"31415926535897932384626433"
    assert suffix_array(s) == suffix_array_naive(s)


def test_suffix_array_short_input():
    assert suffix_array(b"banana") == [5, 3, 1, 0, 4, 2]


def test_sa_is_on_small_alphabet():
    s = [2, 1, 0, 1, 2, 1, 0]
    assert sa_is(s, 2) == suffix_array_naive(s)


def test_sa_is_value_above_max():
    with pytest.raises(ValueError):
        sa_is([0, 3, 1], 2)


def test_lcp_length_mismatch():
    with pytest.raises(ValueError):
        lcp_array(b"abc", [0, 1])


def test_lcp_single_element():
    assert lcp_array(b"x", [0]) == []