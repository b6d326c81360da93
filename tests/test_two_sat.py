import io

import pytest

from algokit.two_sat import TwoSat, main


def _satisfies(assignment, clauses):
    def lit(var, neg):
        return assignment[var] != neg

    return all(lit(a, na) or lit(b, nb) for a, na, b, nb in clauses)


def test_satisfiable_instance():
    clauses = [
        (0, False, 1, False),
        (0, True, 2, False),
        (1, True, 2, True),
        (2, False, 3, True),
    ]
    sat = TwoSat(4)
    for clause in clauses:
        sat.add_disjunction(*clause)
    result = sat.solve()
    assert result is not None
    assert len(result) == 4
    assert _satisfies(result, clauses)


def test_forced_value():
    sat = TwoSat(2)
    sat.add_disjunction(0, True, 0, True)
    sat.add_disjunction(0, False, 1, False)
    result = sat.solve()
    assert result is not None
    assert result[0] is False
    assert result[1] is True


def test_unsatisfiable():
    sat = TwoSat(1)
    sat.add_disjunction(0, False, 0, False)
    sat.add_disjunction(0, True, 0, True)
    assert sat.solve() is None


def test_bad_variable():
    sat = TwoSat(1)
    with pytest.raises(IndexError):
        sat.add_disjunction(0, False, 3, False)


def test_main_unsat(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n1 1\n-1 -1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "-1"


def test_main_sat(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 2\n1 2\n-1 -1\n"))
    main([])
    values = [int(x) for x in capsys.readouterr().out.split()]
    assert values == [0, 1]