from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from ..constants.constants import BYTE_ALPHABET_SIZE
from ..validation import check_pattern


def build_last_table(pattern: Sequence, key: Optional[Callable[[Any], Any]] = None) -> Dict[Any, int]:
    """
    Builds the Boyer-Moore last occurrence table.

    Maps each character of the pattern to the index of its rightmost
    occurrence. Characters not in the pattern have no entry and are read
    as -1 by the search.

    Ex. pattern = octocat -> {o: 3, c: 4, t: 6, a: 5}

    Args:
    pattern: pattern to build the table for (an empty pattern gives {})
    key: optional canonical form applied to each character before storing

    Raises:
    ValueError: if pattern is None
    """
    check_pattern(pattern, allow_empty=True)

    last = {}
    for i in range(len(pattern)):
        c = pattern[i]
        last[key(c) if key is not None else c] = i
    return last


def build_byte_last_table(pattern: Sequence[int], key: Optional[Callable[[int], int]] = None) -> np.ndarray:
    """
    Dense last occurrence table for byte patterns, indexed by byte value.

    Absent bytes hold -1. key, if given, must map byte values to byte values.
    """
    check_pattern(pattern, allow_empty=True)

    last = np.full(BYTE_ALPHABET_SIZE, -1, dtype=np.int64)
    for i in range(len(pattern)):
        c = pattern[i]
        last[key(c) if key is not None else c] = i
    return last
