import random

import pytest

from algokit.segment_tree_2d import SegmentTree2D


def test_matches_brute_force():
    rng = random.Random(1)
    mat = [[rng.randint(-100, 100) for _ in range(6)] for _ in range(5)]
    tree = SegmentTree2D(mat)
    for x1 in range(5):
        for x2 in range(x1, 5):
            for y1 in range(6):
                for y2 in range(y1, 6):
                    expected = max(max(row[y1 : y2 + 1]) for row in mat[x1 : x2 + 1])
                    assert tree.query(x1, y1, x2, y2) == expected


def test_single_cells():
    mat = [[3, -7, 9], [12, 0, -1]]
    tree = SegmentTree2D(mat)
    for i, row in enumerate(mat):
        for j, v in enumerate(row):
            assert tree.query(i, j, i, j) == v


def test_single_row_and_column():
    row_tree = SegmentTree2D([[4, 8, 1, 6]])
    assert row_tree.query(0, 2, 0, 3) == max([1, 6])
    col_tree = SegmentTree2D([[4], [8], [1]])
    assert col_tree.query(1, 0, 2, 0) == max([8, 1])


def test_errors():
    with pytest.raises(ValueError):
        SegmentTree2D([])
    with pytest.raises(ValueError):
        SegmentTree2D([[1, 2], [3]])
    tree = SegmentTree2D([[1, 2], [3, 4]])
    with pytest.raises(IndexError):
        tree.query(0, 0, 2, 1)
    with pytest.raises(IndexError):
        tree.query(0, 1, 1, 0)