import pytest

from algokit.strings import KMP, is_palindrome, kmp_match, prefix_function, z_function

SAMPLES = ["", "a", "aaaaa", "abacaba", "aabxaab", "mississippi", "abcabcabcx"]


def test_is_palindrome():
    assert is_palindrome("abba")
    assert is_palindrome("racecar")
    assert is_palindrome("")
    assert not is_palindrome("abc")
    assert not is_palindrome("ab")


def test_z_function_pinned():
    assert z_function("aaaaa") == [0, 4, 3, 2, 1]
    assert z_function("") == []


@pytest.mark.parametrize("text", SAMPLES)
def test_z_function_invariant(text):
    z = z_function(text)
    assert len(z) == len(text)
    for i, length in enumerate(z[1:], 1):
        assert text[:length] == text[i : i + length]
        assert i + length == len(text) or text[length] != text[i + length]


def test_prefix_function_pinned():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("pattern", SAMPLES)
def test_prefix_function_invariant(pattern):
    f = prefix_function(pattern)
    assert len(f) == len(pattern)
    for i, length in enumerate(f):
        assert length <= i
        assert pattern[:length] == pattern[i - length + 1 : i + 1]
        longer = length + 1
        if longer <= i:
            assert pattern[:longer] != pattern[i - longer + 1 : i + 1] or f[i] >= longer


def test_kmp_match_overlapping():
    assert kmp_match("aba", "ababa") == [0, 2]


@pytest.mark.parametrize("pattern", ["a", "ss", "issi", "ppi", "zz"])
def test_kmp_match_positions_are_occurrences(pattern):
    text = "mississippi"
    found = kmp_match(pattern, text)
    assert found == sorted(found)
    assert all(text.startswith(pattern, i) for i in found)
    assert len(found) >= text.count(pattern)


def test_kmp_match_empty_pattern():
    with pytest.raises(ValueError):
        kmp_match("", "abc")


def test_kmp_object_full_match():
    assert KMP("needle").match("haystack with a needle inside") == len("needle")


def test_kmp_object_partial_suffix():
    assert KMP("abc").match("xxab") == 2
    assert KMP("abc").match("xyz") == 0


def test_kmp_object_empty_pattern():
    assert KMP("").match("anything") == 0