import pytest

from algokit.matrix import Matrix, matrix_power

MOD = 1_000_000_007


def build(rows, mod=MOD):
    m = Matrix(len(rows), len(rows[0]), mod)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            m[i, j] = value
    return m


def fib(n, mod):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, (a + b) % mod
    return a


@pytest.mark.parametrize("n", [0, 1, 2, 10, 90, 500])
def test_fibonacci_by_power(n):
    q = build([[1, 1], [1, 0]])
    assert matrix_power(q, n)[0, 1] == fib(n, MOD)


def test_identity_is_neutral():
    m = build([[1, 2, 3], [4, 5, 6]])
    assert Matrix.identity(2) @ m == m
    assert m @ Matrix.identity(3) == m


def test_power_zero_is_identity():
    m = build([[5, 7], [2, 9]])
    assert matrix_power(m, 0) == Matrix.identity(2)


def test_associativity_and_shape():
    a = build([[1, 2, 3], [4, 5, 6]])
    b = build([[7, 8], [9, 10], [11, 12]])
    c = build([[2, 0], [1, 3]])
    ab = a @ b
    assert (ab.rows, ab.cols) == (2, 2)
    assert (a @ b) @ c == a @ (b @ c)


def test_products_are_reduced():
    m = build([[MOD - 1]])
    assert (m @ m)[0, 0] == ((MOD - 1) ** 2) % MOD


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        build([[1, 2]]) @ build([[1, 2]])


def test_power_requires_square():
    with pytest.raises(ValueError):
        matrix_power(build([[1, 2]]), 3)