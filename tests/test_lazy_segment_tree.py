import random

import pytest

from algokit.lazy_segment_tree import LazySumSegmentTree


def test_range_add_range_sum():
    rng = random.Random(1)
    values = [rng.randint(-20, 20) for _ in range(19)]
    tree = LazySumSegmentTree(values)
    for _ in range(40):
        l = rng.randrange(len(values))
        r = rng.randrange(l, len(values))
        delta = rng.randint(-7, 7)
        tree.update(l, r, delta)
        for i in range(l, r + 1):
            values[i] += delta
        ql = rng.randrange(len(values))
        qr = rng.randrange(ql, len(values))
        assert tree.query(ql, qr) == sum(values[ql : qr + 1])
    assert tree.query(0, len(values) - 1) == sum(values)


def test_empty_query_is_zero():
    tree = LazySumSegmentTree([4, 5, 6])
    assert tree.query(2, 1) == 0


def test_find_positive_after_updates():
    rng = random.Random(2)
    values = [0] * 25
    tree = LazySumSegmentTree(values)
    for _ in range(6):
        l = rng.randrange(25)
        r = rng.randrange(l, min(25, l + 3))
        delta = rng.randint(1, 5)
        tree.update(l, r, delta)
        for i in range(l, r + 1):
            values[i] += delta
    positive = lambda total, v: total > v  # noqa: E731
    for l in range(0, 25, 2):
        for r in range(l, 25, 3):
            hits = [i for i in range(l, r + 1) if values[i] > 0]
            assert tree.find_first(l, r, 0, positive) == (hits[0] if hits else None)
            assert tree.find_last(l, r, 0, positive) == (hits[-1] if hits else None)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        LazySumSegmentTree([])