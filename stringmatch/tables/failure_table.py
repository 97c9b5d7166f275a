from typing import List, Sequence

from ..comparator.comparator import Comparator
from ..validation import check_comparator, check_pattern


def build_failure_table(pattern: Sequence, comparator: Comparator) -> List[int]:
    """
    Builds the KMP failure table (prefix function) of a pattern.

    table[i] is the length of the longest proper prefix of pattern[0..i]
    that is also a suffix of pattern[1..i], so table[0] is always 0.

    Ex. pattern = ababac -> [0, 0, 1, 2, 3, 0]

    Args:
    pattern: pattern to build the table for (an empty pattern gives [])
    comparator: character equality, 0 meaning equal

    Returns:
    List of len(pattern) prefix lengths

    Raises:
    ValueError: if pattern or comparator is None
    """
    check_pattern(pattern, allow_empty=True)
    check_comparator(comparator)

    m = len(pattern)
    table = [0] * m
    i = 0  # length of the prefix matched so far
    j = 1  # position being filled

    while j < m:
        if comparator(pattern[i], pattern[j]) == 0:
            table[j] = i + 1
            i += 1
            j += 1
        elif i == 0:
            table[j] = 0
            j += 1
        else:
            i = table[i - 1]

    return table
