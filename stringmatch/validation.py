from typing import Sequence

from .comparator.comparator import Comparator


def check_pattern(pattern: Sequence, allow_empty: bool = False):
    if pattern is None:
        raise ValueError("The pattern entered was None")
    if not allow_empty and len(pattern) == 0:
        raise ValueError("The pattern entered has length 0")


def check_comparator(comparator: Comparator):
    if comparator is None:
        raise ValueError("The comparator entered was None")
    if not callable(comparator):
        raise ValueError(f"The comparator entered is not callable: {comparator!r}")


def check_search_args(pattern: Sequence, text: Sequence, comparator: Comparator):
    """Shared argument checks for the three searches. Runs before any work is done."""
    check_pattern(pattern)
    if text is None:
        raise ValueError("The text entered was None")
    check_comparator(comparator)
