import random

import pytest

from algokit.mo import RangeQuery, mo_key, range_mex


def brute_mex(values, left, right):
    window = set(values[left - 1 : right])
    m = 1
    while m in window:
        m += 1
    return m


def test_small_example():
    values = [1, 2, 4, 1, 3]
    assert range_mex(values, [RangeQuery(1, 3, 0)]) == [3]


def test_answers_follow_query_index():
    values = [2, 1, 3, 1, 2]
    queries = [RangeQuery(2, 4, 1), RangeQuery(1, 1, 0)]
    result = range_mex(values, queries)
    assert result[0] == brute_mex(values, 1, 1)
    assert result[1] == brute_mex(values, 2, 4)


def test_duplicates_and_removals():
    values = [1, 1, 2, 2, 3, 1]
    queries = [RangeQuery(l, r, 0) for l, r in [(1, 6)]]
    queries += [RangeQuery(3, 6, 1), RangeQuery(2, 2, 2), RangeQuery(3, 4, 3)]
    result = range_mex(values, queries, block=2)
    assert result == [brute_mex(values, q.left, q.right) for q in queries]


@pytest.mark.parametrize("block", [1, 3, 287])
def test_random_against_brute(block):
    rng = random.Random(block)
    values = [rng.randint(0, 8) for _ in range(60)]
    queries = []
    for i in range(80):
        l = rng.randint(1, 60)
        r = rng.randint(l, 60)
        queries.append(RangeQuery(l, r, i))
    assert range_mex(values, queries, block) == [
        brute_mex(values, q.left, q.right) for q in queries
    ]


def test_mo_key_orders_by_block_then_right():
    assert mo_key(RangeQuery(3, 7, 0), 10) == (0, 7)
    queries = [RangeQuery(12, 20, 0), RangeQuery(2, 9, 1), RangeQuery(1, 4, 2)]
    ordered = sorted(queries, key=lambda q: mo_key(q, 10))
    assert [q.index for q in ordered] == [2, 1, 0]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        range_mex([1, 2], [RangeQuery(0, 1, 0)])
    with pytest.raises(ValueError):
        range_mex([1, 2], [RangeQuery(1, 3, 0)])
    with pytest.raises(ValueError):
        range_mex([1, 2], [RangeQuery(1, 2, 0)], block=0)