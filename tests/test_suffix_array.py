import pytest

from algokit.suffix_array import SuffixArray


def test_banana():
    assert SuffixArray("banana").order() == [5, 3, 1, 0, 4, 2]


@pytest.mark.parametrize("text", ["", "a", "aaaa", "mississippi", "abracadabra", "!a$b#", "zyxwv"])
def test_order_is_sorted_permutation(text):
    order = SuffixArray(text).order()
    assert sorted(order) == list(range(len(text)))
    for a, b in zip(order, order[1:]):
        assert text[a:] < text[b:]


def test_contains_every_substring():
    text = "mississippi"
    sa = SuffixArray(text)
    for left in range(len(text)):
        for right in range(left + 1, len(text) + 1):
            assert sa.contains(text[left:right])


@pytest.mark.parametrize("pattern", ["ssx", "ippix", "mississippii", "z", "pm"])
def test_contains_rejects_absent(pattern):
    assert not SuffixArray("mississippi").contains(pattern)


def test_contains_empty_pattern_and_text():
    assert SuffixArray("abc").contains("")
    assert SuffixArray("").contains("")
    assert not SuffixArray("").contains("a")


def test_order_returns_copy():
    sa = SuffixArray("abc")
    first = sa.order()
    first.clear()
    assert sa.order() == [0, 1, 2]