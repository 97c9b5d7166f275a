from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def char_code(c) -> int:
    """
    Integer value of a single character.

    Length-1 strings map to their code point, byte values and numpy
    integers are already codes.
    """
    if isinstance(c, str):
        return ord(c)
    return int(c)


def comparator_key(comparator: Comparator) -> Optional[Callable[[Any], Any]]:
    """Returns the comparator's canonical-character function, if it has one."""
    return getattr(comparator, "key", None)


class CharacterComparator(ABC):
    """
    Equality predicate between two characters.

    compare(a, b) returns 0 iff the characters match, any other value
    otherwise. Instances are callable so they can be passed anywhere a plain
    comparator function is accepted.

    Subclasses may define key(c) returning the integer code of a canonical
    character, such that compare(a, b) == 0 exactly when key(a) == key(b).
    The last-occurrence table and the rolling hash are built over keys when
    it is present.
    """

    @abstractmethod
    def compare(self, a, b) -> int:
        pass

    def __call__(self, a, b) -> int:
        return self.compare(a, b)


class EqualityComparator(CharacterComparator):
    def compare(self, a, b) -> int:
        return char_code(a) - char_code(b)

    def key(self, c) -> int:
        return char_code(c)


class CaseInsensitiveComparator(CharacterComparator):
    """Matches characters regardless of case. Byte values fold ASCII A-Z only."""

    def compare(self, a, b) -> int:
        return self.key(a) - self.key(b)

    def key(self, c) -> int:
        if isinstance(c, str):
            lowered = c.lower()
            # some characters lower-case to more than one code point
            return ord(lowered) if len(lowered) == 1 else ord(c)
        c = int(c)
        if 65 <= c <= 90:
            return c + 32
        return c


class CountingComparator(CharacterComparator):
    """
    Wraps another comparator and counts how many times it was consulted.

    Args:
    delegate: comparator deciding equality (defaults to EqualityComparator)
    """

    def __init__(self, delegate: Comparator = None):
        self.delegate = delegate if delegate is not None else EqualityComparator()
        self.comparisonCount = 0

        delegateKey = comparator_key(self.delegate)
        if delegateKey is not None:
            self.key = delegateKey

    def compare(self, a, b) -> int:
        self.comparisonCount += 1
        return self.delegate(a, b)

    def getComparisonCount(self) -> int:
        return self.comparisonCount

    def resetCount(self):
        self.comparisonCount = 0
