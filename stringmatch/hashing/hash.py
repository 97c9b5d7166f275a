from typing import Any, Callable, Optional, Sequence

from ..comparator.comparator import char_code
from ..constants.constants import BASE, MASK, SIGN_BIT


def wrap(value: int) -> int:
    """Reduces value to a signed HASH_WIDTH-bit integer (two's complement wraparound)."""
    value &= MASK
    if value & SIGN_BIT:
        return value - (MASK + 1)
    return value


def power(base: int, exponent: int) -> int:
    """
    base ** exponent by repeated multiplication, wrapping like a fixed-width int.

    Raises:
    ValueError: if base or exponent is negative
    """
    if base < 0 or exponent < 0:
        raise ValueError("The base or exponent entered has to be non-negative")
    if exponent == 0 or base == 1:
        return 1
    if base == 0:
        return 0

    result = base
    for _ in range(1, exponent):
        result = wrap(result * base)
    return wrap(result)


class RollingHash:
    """
    Polynomial rolling hash over a window of fixed length.

    hash(c[0..m-1]) = sum of c[k] * base^(m-1-k), leftmost character weighted
    highest. Arithmetic wraps to HASH_WIDTH bits; callers must confirm equal
    hashes by direct comparison.
    """

    def __init__(self, length: int, base: int = BASE, key: Optional[Callable[[Any], Any]] = None):
        self.length = length
        self.base = base
        self.key = key
        # weight of the character leaving the window, computed once
        self.power = power(base, length - 1) if length > 0 else 0

    def value(self, c) -> int:
        if self.key is not None:
            c = self.key(c)
        return char_code(c)

    def hash_sequence(self, s: Sequence, start: int = 0) -> int:
        """
        Hash of the window s[start:start + length].

        Args:
        s: pattern or text
        start: index of the window's first character

        Returns:
        Window hash
        """
        h = 0
        for i in range(start, start + self.length):
            h = wrap(h * self.base + self.value(s[i]))
        return h

    def update(self, prev_hash: int, out_char, in_char) -> int:
        """
        Rolling hash update - removes leftmost character and adds rightmost character

        Args:
            prev_hash: The previous hash value
            out_char: Character leaving the window (leftmost)
            in_char: Character entering the window (rightmost)

        Returns:
            Updated hash value
        """
        # Remove contribution of outgoing character
        h = wrap(prev_hash - self.value(out_char) * self.power)

        # Shift left and add incoming character
        return wrap(h * self.base + self.value(in_char))
