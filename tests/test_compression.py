import pytest

from algokit.compression import Compressor


def test_compress_gives_ranks():
    assert Compressor().compress([10, -5, 10, 3]) == [2, 0, 2, 1]


def test_round_trip():
    data = [100, 7, 7, 42, -3, 100, 0]
    comp = Compressor()
    ranks = comp.compress(data)
    assert [comp.to_original(r) for r in ranks] == data


def test_ranks_preserve_order_and_are_dense():
    data = [9, 1, 5, 1, 9, 20]
    ranks = Compressor().compress(data)
    assert set(ranks) == set(range(len(set(data))))
    for a, ra in zip(data, ranks):
        for b, rb in zip(data, ranks):
            assert (a < b) == (ra < rb)


def test_values_sorted_distinct():
    comp = Compressor()
    comp.compress([3, 1, 3, 2])
    assert comp.values == sorted({3, 1, 2})


def test_to_original_out_of_range():
    comp = Compressor()
    comp.compress([1, 2])
    with pytest.raises(IndexError):
        comp.to_original(2)
    with pytest.raises(IndexError):
        comp.to_original(-1)