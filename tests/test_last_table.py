# tests/test_last_table.py
import numpy as np
import pytest

from stringmatch.comparator import CaseInsensitiveComparator
from stringmatch.tables import build_byte_last_table, build_last_table


def test_octocat():
    table = build_last_table("octocat")
    assert table == {"o": 3, "c": 4, "t": 6, "a": 5}
    assert "z" not in table


def test_empty_pattern_gives_empty_map():
    assert build_last_table("") == {}


def test_key_is_applied_before_storing():
    table = build_last_table("AbBa", key=CaseInsensitiveComparator().key)
    assert table == {ord("a"): 3, ord("b"): 2}


def test_none_pattern_rejected():
    with pytest.raises(ValueError):
        build_last_table(None)
    with pytest.raises(ValueError):
        build_byte_last_table(None)


def test_byte_table():
    table = build_byte_last_table(b"octocat")
    assert table.shape == (256,)
    assert table[ord("o")] == 3
    assert table[ord("c")] == 4
    assert table[ord("t")] == 6
    assert table[ord("a")] == 5
    # everything else is absent
    assert np.count_nonzero(table == -1) == 256 - 4


def test_byte_table_with_key():
    table = build_byte_last_table(b"AbB", key=CaseInsensitiveComparator().key)
    assert table[ord("a")] == 0
    assert table[ord("b")] == 2
    assert table[ord("A")] == -1
