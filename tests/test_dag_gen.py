import pytest

from algokit.dag_gen import format_graph, generate_dag, main
from algokit.randgen import RandomGenerator


@pytest.mark.parametrize("seed", range(20))
def test_generated_edges_are_valid(seed):
    edges = generate_dag(RandomGenerator(seed), 10, 4)
    assert len(edges) == 4
    assert all(1 <= x <= 10 and 1 <= y <= 10 for x, y in edges)
    assert all(x != y for x, y in edges)
    assert [x for x, _ in edges] == sorted(x for x, _ in edges)


def test_generation_is_deterministic():
    a = generate_dag(RandomGenerator(5), 8, 6)
    b = generate_dag(RandomGenerator(5), 8, 6)
    assert a == b


def test_zero_edges():
    assert generate_dag(RandomGenerator(1), 5, 0) == []


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generate_dag(RandomGenerator(1), 10, -1)
    with pytest.raises(ValueError):
        generate_dag(RandomGenerator(1), 1, 2)


def test_format_graph():
    assert format_graph(3, [(1, 2), (2, 3)]) == "3 2\n1 2\n2 3\n"
    assert format_graph(4, []) == "4 0\n"


def test_main_prints_graph(capsys):
    assert main(["--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "10 4"
    assert len(lines) == 5
    for line in lines[1:]:
        x, y = map(int, line.split())
        assert 1 <= x <= 10 and 1 <= y <= 10 and x != y