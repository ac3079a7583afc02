import pytest

from compkit.bitset import BitSet


def test_source_example():
    a = BitSet([0b00010001, 0b00010011], 8)
    assert a.count_ones() == 5
    assert list(a.one_positions()) == [0, 4, 8, 9, 12]
    assert a.display_bits() == "1000100011001000"
    assert a.set_bit(0, True) is True
    assert a.set_bit(1, True) is False
    assert a.set_bit(10, True) is False
    assert a.set_bit(0, False) is True
    assert a.flip_bit(2) is False
    assert a.display_bits() == "0110100011101000"


def test_bit_reads():
    a = BitSet([0b00010001, 0b00010011], 8)
    assert a.bit(0) is True
    assert a.bit(1) is False
    assert a.bit(12) is True


def test_len():
    assert len(BitSet([0, 0], 8)) == 16
    assert len(BitSet([0], 64)) == 64
    assert len(BitSet([0, 0, 0], 128)) == 384


def test_and_or_xor_difference():
    a = BitSet([0b1100], 8)
    a.and_(BitSet([0b1010], 8))
    assert list(a.one_positions()) == [3]

    b = BitSet([0b1100], 8)
    b.or_(BitSet([0b1010], 8))
    assert list(b.one_positions()) == [1, 2, 3]

    c = BitSet([0b1100], 8)
    c.xor(BitSet([0b1010], 8))
    assert list(c.one_positions()) == [1, 2]

    d = BitSet([0b1100], 8)
    d.difference(BitSet([0b1010], 8))
    assert list(d.one_positions()) == [2]


def test_invert():
    a = BitSet([0b1, 0xFF], 8)
    a.invert()
    assert a.count_ones() == 7
    assert a.chunks == (0b11111110, 0)
    a.invert()
    assert a == BitSet([0b1, 0xFF], 8)


def test_reverse_bits():
    a = BitSet([0b00010001, 0b00010011], 8)
    before = a.display_bits()
    a.reverse_bits()
    assert a.display_bits() == before[::-1]
    a.reverse_bits()
    assert a == BitSet([0b00010001, 0b00010011], 8)


def test_one_positions_wide_chunks():
    a = BitSet([1 << 127, 1], 128)
    assert list(a.one_positions()) == [127, 128]


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        BitSet([0, 0], 8).and_(BitSet([0], 8))
    with pytest.raises(ValueError):
        BitSet([0], 8).or_(BitSet([0], 16))


def test_index_out_of_range():
    a = BitSet([0], 8)
    with pytest.raises(IndexError):
        a.bit(8)
    with pytest.raises(IndexError):
        a.set_bit(-1, True)
    with pytest.raises(IndexError):
        a.flip_bit(100)


def test_invalid_construction():
    with pytest.raises(ValueError):
        BitSet([256], 8)
    with pytest.raises(ValueError):
        BitSet([0], 12)