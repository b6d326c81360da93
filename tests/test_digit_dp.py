import pytest

from algokit.digit_dp import count_few_nonzero, to_digits


def test_to_digits():
    assert to_digits(907) == [9, 0, 7]
    assert to_digits(0) == []


@pytest.mark.parametrize("n", [0, 5, 99, 500, 999])
def test_all_small_numbers_counted(n):
    assert count_few_nonzero(n) == n + 1


def test_four_digit_block():
    assert count_few_nonzero(10**4 - 1) == 10**4 - 9**4


def test_increments_follow_membership():
    previous = count_few_nonzero(999)
    for n in range(1000, 1300):
        current = count_few_nonzero(n)
        step = current - previous
        assert step in (0, 1)
        assert step == (sum(d != 0 for d in to_digits(n)) <= 3)
        previous = current


def test_negative_rejected():
    with pytest.raises(ValueError):
        count_few_nonzero(-1)