from typing import List, Sequence

from ..comparator.comparator import Comparator, comparator_key
from ..constants.constants import BASE
from ..hashing.hash import RollingHash
from ..validation import check_search_args


def rabin_karp(pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
    """
    Rabin-Karp search with a base-113 rolling hash.

    The pattern hash is compared against the hash of every text window of
    the same length. Equal hashes are confirmed by a left to right
    character comparison, so wraparound collisions never produce a match.

    Ex. "bunn" hashes to 142910419; sliding to "unny" gives
    (142910419 - b * 113^3) * 113 + y = 170236090

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

    hasher = RollingHash(m, base=BASE, key=comparator_key(comparator))
    patternHash = hasher.hash_sequence(pattern)
    windowHash = hasher.hash_sequence(text)

    for i in range(n - m + 1):
        if patternHash == windowHash:
            y = 0
            while y < m and comparator(pattern[y], text[i + y]) == 0:
                y += 1
            if y == m:
                matches.append(i)

        # slide only while another window exists
        if i + 1 <= n - m:
            windowHash = hasher.update(windowHash, text[i], text[i + m])

    return matches
