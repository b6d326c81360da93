import pytest

from algokit.dsu import DisjointSet


def test_initially_separate():
    ds = DisjointSet(4)
    assert ds.roots() == set(range(5))
    assert all(ds.find(i) == i for i in range(5))
    assert all(ds.size(i) == 1 for i in range(5))


def test_union_joins_sets():
    ds = DisjointSet(5)
    assert ds.union(1, 2) is True
    assert ds.union(2, 3) is True
    assert ds.find(1) == ds.find(3)
    assert ds.size(3) == 3


def test_union_same_set_returns_false():
    ds = DisjointSet(3)
    ds.union(0, 1)
    assert ds.union(1, 0) is False
    assert ds.size(0) == 2


def test_roots_track_representatives():
    ds = DisjointSet(3)
    ds.union(1, 2)
    roots = ds.roots()
    assert len(roots) == 3
    assert ds.find(2) in roots
    assert ds.find(1) == ds.find(2)


def test_sizes_sum_to_total():
    ds = DisjointSet(9)
    for a, b in [(0, 1), (2, 3), (1, 3), (5, 6), (7, 8), (8, 5)]:
        ds.union(a, b)
    assert sum(ds.size(r) for r in ds.roots()) == 10


def test_out_of_range():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(3)
    with pytest.raises(ValueError):
        DisjointSet(-1)