# tests/test_rabin_karp.py
import pytest

from stringmatch.comparator import CaseInsensitiveComparator, CountingComparator, EqualityComparator
from stringmatch.hashing import RollingHash
from stringmatch.search import rabin_karp


def test_two_matches():
    assert rabin_karp("abc", "xxabcxxabc", EqualityComparator()) == [2, 7]


def test_bunny():
    assert rabin_karp("unny", "bunny", EqualityComparator()) == [1]
    assert rabin_karp("bunn", "bunny", EqualityComparator()) == [0]


def test_overlapping_matches():
    assert rabin_karp("aa", "aaaa", EqualityComparator()) == [0, 1, 2]


def test_pattern_longer_than_text():
    assert rabin_karp("abcd", "abc", EqualityComparator()) == []


def test_pattern_equal_to_text():
    assert rabin_karp("abc", "abc", EqualityComparator()) == [0]


def test_no_comparisons_without_hash_match():
    counter = CountingComparator()
    assert rabin_karp("zz", "abcdef", counter) == []
    assert counter.getComparisonCount() == 0


def test_collision_is_not_a_match():
    # b*113 + b == a*113 + (b + 113)
    window = "a" + chr(ord("b") + 113)
    rh = RollingHash(2)
    assert rh.hash_sequence("bb") == rh.hash_sequence(window)

    counter = CountingComparator()
    assert rabin_karp("bb", window, counter) == []
    # the equal hash forced a direct comparison, which failed on the first character
    assert counter.getComparisonCount() == 1


def test_long_pattern_wraps_and_still_matches():
    pattern = "wraparound hashing is fine"
    text = "x" * 50 + pattern + "y" * 10 + pattern
    assert rabin_karp(pattern, text, EqualityComparator()) == [50, 50 + len(pattern) + 10]


def test_case_insensitive_hashes_keys():
    assert rabin_karp("ABC", "xxabcxxAbC", CaseInsensitiveComparator()) == [2, 7]


def test_invalid_arguments_rejected():
    with pytest.raises(ValueError):
        rabin_karp("", "abc", EqualityComparator())
    with pytest.raises(ValueError):
        rabin_karp(None, "abc", EqualityComparator())
    with pytest.raises(ValueError):
        rabin_karp("abc", None, EqualityComparator())
    with pytest.raises(ValueError):
        rabin_karp("abc", "abc", None)
