import itertools
import random

import pytest

from compkit.two_sat import TwoSat


def test_single_forced_true():
    ts = TwoSat(1)
    ts.clause(0, True, 0, True)
    assert ts.solve() == [True]


def test_single_forced_false():
    ts = TwoSat(1)
    ts.clause(0, False, 0, False)
    assert ts.solve() == [False]


def test_contradiction():
    ts = TwoSat(1)
    ts.clause(0, True, 0, True)
    ts.clause(0, False, 0, False)
    assert ts.solve() is None


def test_implication_chain():
    ts = TwoSat(2)
    ts.clause(0, True, 0, True)
    ts.clause(0, False, 1, True)
    assert ts.solve() == [True, True]


def test_no_variables():
    assert TwoSat(0).solve() == []


def test_out_of_range_variable():
    ts = TwoSat(2)
    with pytest.raises(IndexError):
        ts.clause(0, True, 2, False)


def _satisfies(assignment, clauses):
    return all(assignment[i] == f or assignment[j] == g for i, f, j, g in clauses)


@pytest.mark.parametrize("seed", range(20))
def test_random_against_brute_force(seed):
    rnd = random.Random(seed)
    n = 4
    clauses = [
        (rnd.randrange(n), rnd.random() < 0.5, rnd.randrange(n), rnd.random() < 0.5)
        for _ in range(rnd.randrange(1, 10))
    ]
    ts = TwoSat(n)
    for clause in clauses:
        ts.clause(*clause)
    result = ts.solve()
    satisfiable = any(
        _satisfies(list(bits), clauses)
        for bits in itertools.product([False, True], repeat=n)
    )
    if satisfiable:
        assert result is not None and _satisfies(result, clauses)
    else:
        assert result is None