import pytest

from compkit.max_flow import MaxFlow


def _diamond():
    mf = MaxFlow(4)
    mf.edge(0, 1, 10)
    mf.edge(0, 2, 5)
    mf.edge(1, 2, 15)
    mf.edge(1, 3, 5)
    mf.edge(2, 3, 10)
    return mf


def test_diamond_network():
    assert _diamond().flow(0, 3) == 15


def test_six_vertex_network():
    mf = MaxFlow(6)
    mf.edge(0, 1, 10)
    mf.edge(0, 2, 10)
    mf.edge(1, 2, 2)
    mf.edge(1, 3, 4)
    mf.edge(1, 4, 8)
    mf.edge(2, 4, 9)
    mf.edge(4, 3, 6)
    mf.edge(3, 5, 10)
    mf.edge(4, 5, 10)
    assert mf.flow(0, 5) == 19


def test_limit_caps_flow_and_residual_persists():
    mf = _diamond()
    assert mf.flow(0, 3, limit=7) == 7
    assert mf.flow(0, 3) == 8
    assert mf.flow(0, 3) == 0


def test_limit_larger_than_max_flow():
    assert _diamond().flow(0, 3, limit=100) == 15


def test_unreachable_sink():
    mf = MaxFlow(3)
    mf.edge(0, 1, 5)
    assert mf.flow(0, 2) == 0


def test_reverse_direction_carries_nothing():
    mf = MaxFlow(2)
    mf.edge(0, 1, 5)
    assert mf.flow(1, 0) == 0


def test_source_equals_sink():
    mf = _diamond()
    assert mf.flow(0, 0) == 0


def test_num_verts():
    assert MaxFlow(7).num_verts() == 7


def test_vertex_out_of_range():
    mf = MaxFlow(2)
    with pytest.raises(IndexError):
        mf.edge(0, 2, 1)
    with pytest.raises(IndexError):
        mf.flow(0, 5)


def test_negative_size():
    with pytest.raises(ValueError):
        MaxFlow(-1)