import pytest

from algokit.randgen import VOWELS, RandomGenerator


def _depths(edges, root):
    children = {}
    for parent, child in edges:
        children.setdefault(parent, []).append(child)
    depth = {root: 0}
    stack = [root]
    while stack:
        v = stack.pop()
        for c in children.get(v, []):
            depth[c] = depth[v] + 1
            stack.append(c)
    return depth


def test_same_seed_same_output():
    a, b = RandomGenerator(42), RandomGenerator(42)
    assert [a.rand() for _ in range(5)] == [b.rand() for _ in range(5)]
    assert a.string(20) == b.string(20)


def test_rand_ranges():
    gen = RandomGenerator(1)
    for _ in range(200):
        assert 0 <= gen.rand() < 2**32
        assert 0 <= gen.rand(7) < 7
    with pytest.raises(ValueError):
        gen.rand(0)


def test_random32_and_64_bounds():
    gen = RandomGenerator(2)
    values = [gen.random32(1, 15) for _ in range(300)]
    assert min(values) >= 1 and max(values) <= 15
    big = [gen.random64(1, 10**18) for _ in range(50)]
    assert all(1 <= v <= 10**18 for v in big)
    assert gen.random32(5, 5) == 5


def test_random_bounds_invalid():
    gen = RandomGenerator(3)
    with pytest.raises(ValueError):
        gen.random32(2, 1)
    with pytest.raises(ValueError):
        gen.random64(10, -10)


def test_huge_number_has_no_leading_zero():
    gen = RandomGenerator(4)
    for _ in range(50):
        s = gen.huge_number(30)
        assert len(s) == 30 and s.isdigit() and s[0] != "0"
    assert gen.huge_number(0) == ""


def test_string_is_lowercase():
    s = RandomGenerator(5).string(1000)
    assert len(s) == 1000
    assert set(s) <= set("abcdefghijklmnopqrstuvwxyz")


def test_binary_string():
    gen = RandomGenerator(6)
    s = gen.binary_string(500)
    assert len(s) == 500 and set(s) <= {"0", "1"}
    with pytest.raises(ValueError):
        gen.binary_string(-1)


def test_pick_and_pick_and_remove():
    gen = RandomGenerator(7)
    items = [4, 5, 6, 1]
    assert gen.pick(items) in items
    picked = gen.pick_and_remove(items)
    assert picked in (4, 5, 6, 1)
    assert len(items) == 3 and picked not in items
    with pytest.raises(ValueError):
        gen.pick([])
    with pytest.raises(ValueError):
        gen.pick_and_remove([])


def test_permutation():
    gen = RandomGenerator(8)
    perm = gen.permutation(1000)
    assert sorted(perm) == list(range(1, 1001))
    assert gen.permutation(0) == []
    with pytest.raises(ValueError):
        gen.permutation(-2)


def test_flag_and_vowel():
    gen = RandomGenerator(9)
    flags = {gen.flag() for _ in range(100)}
    assert flags == {True, False}
    assert all(gen.vowel() in VOWELS for _ in range(50))
    assert all(gen.vowel(True) in "AEIOU" for _ in range(50))


def test_matrix_shape_and_range():
    m = RandomGenerator(10).matrix(3, 4, 100, 200)
    assert len(m) == 3 and all(len(row) == 4 for row in m)
    assert all(100 <= v <= 200 for row in m for v in row)


def test_matrix_invalid():
    gen = RandomGenerator(11)
    with pytest.raises(ValueError):
        gen.matrix(3, 3, 5, 1)
    with pytest.raises(ValueError):
        gen.matrix(0, 3, 1, 5)


@pytest.mark.parametrize("seed", range(10))
def test_tree_with_root_and_height(seed):
    edges = RandomGenerator(seed).tree(13, 1, 3)
    assert len(edges) == 12
    children = [c for _, c in edges]
    assert sorted(children) == list(range(2, 14))
    depth = _depths(edges, 1)
    assert len(depth) == 13
    assert max(depth.values()) == 3


def test_tree_clamps_height_and_picks_root():
    edges = RandomGenerator(12).tree(6, 99, 50)
    assert len(edges) == 5
    children = {c for _, c in edges}
    roots = set(range(1, 7)) - children
    assert len(roots) == 1
    depth = _depths(edges, roots.pop())
    assert len(depth) == 6
    assert max(depth.values()) == 5


def test_tree_trivial_sizes():
    gen = RandomGenerator(13)
    assert gen.tree(1) == []
    assert gen.tree(0) == []