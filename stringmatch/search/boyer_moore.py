from typing import List, Sequence

from ..comparator.comparator import Comparator, comparator_key
from ..tables.last_table import build_byte_last_table, build_last_table
from ..validation import check_search_args

_BYTE_TYPES = (bytes, bytearray)


def boyer_moore(pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
    """
    Boyer-Moore search using the last occurrence (bad character) table.
    Works better with large alphabets.

    Each alignment is compared right to left. On a mismatch at pattern
    index j the alignment moves so the mismatched text character lines up
    with its last occurrence in the pattern, or by one when that
    occurrence is already to the right of j.

    Args:
    pattern: non-empty pattern to search for
    text: body of text to search in
    comparator: character equality, 0 meaning equal

    Returns:
    Ascending list of the start index of every match

    Raises:
    ValueError: if pattern is None or empty, or text or comparator is None
    """
    check_search_args(pattern, text, comparator)

    m = len(pattern)
    n = len(text)
    matches: List[int] = []

    if m > n:
        return matches

    key = comparator_key(comparator)
    if isinstance(pattern, _BYTE_TYPES) and isinstance(text, _BYTE_TYPES):
        dense = build_byte_last_table(pattern, key=key)

        def last_index(c) -> int:
            return int(dense[key(c) if key is not None else c])
    else:
        last = build_last_table(pattern, key=key)

        def last_index(c) -> int:
            return last.get(key(c) if key is not None else c, -1)

    i = 0
    while i <= n - m:
        j = m - 1
        while j >= 0 and comparator(text[i + j], pattern[j]) == 0:
            j -= 1

        if j == -1:
            matches.append(i)
            i += 1
        else:
            shift = last_index(text[i + j])
            if shift < j:
                i += j - shift
            else:
                i += 1

    return matches
