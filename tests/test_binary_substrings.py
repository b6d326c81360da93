import io
from itertools import product

import pytest

from algokit.binary_substrings import (
    count_k_one_substrings,
    count_k_one_substrings_positive,
    main,
)


def test_counts_over_k_cover_every_substring():
    for length in range(1, 7):
        for bits in product("01", repeat=length):
            text = "".join(bits)
            total = sum(count_k_one_substrings(k, text) for k in range(length + 1))
            assert total == length * (length + 1) // 2


def test_positive_variant_agrees_for_k_at_least_one():
    for text in ["1", "0110", "1010010", "000", "111011"]:
        for k in range(1, 6):
            assert count_k_one_substrings_positive(k, text) == count_k_one_substrings(k, text)


def test_positive_variant_gives_zero_for_k_zero():
    assert count_k_one_substrings_positive(0, "000") == 0


def test_all_zero_string_k_zero():
    text = "0000"
    assert count_k_one_substrings(0, text) == len(text) * (len(text) + 1) // 2


def test_more_ones_than_present():
    assert count_k_one_substrings(5, "1010") == 0


def test_small_example():
    assert count_k_one_substrings(1, "1010") == 6


def test_invalid_input():
    with pytest.raises(ValueError):
        count_k_one_substrings(1, "10a")
    with pytest.raises(ValueError):
        count_k_one_substrings(-1, "10")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n000\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == str(count_k_one_substrings(0, "000"))