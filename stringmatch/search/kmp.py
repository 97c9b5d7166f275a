from typing import List, Sequence

from ..comparator.comparator import Comparator
from ..tables.failure_table import build_failure_table
from ..validation import check_search_args


def kmp(pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
    """
    Knuth-Morris-Pratt search. Works better with small alphabets.

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

    table = build_failure_table(pattern, comparator)

    j = 0  # pattern index
    k = 0  # text index
    while k < n:
        # not enough text left to finish a match
        if m - j > n - k:
            return matches

        if comparator(pattern[j], text[k]) == 0:
            if j == m - 1:
                matches.append(k - j)
                j = table[j]
            else:
                j += 1
            k += 1
        elif j == 0:
            k += 1
        else:
            j = table[j - 1]

    return matches
