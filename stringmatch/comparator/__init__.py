from .comparator import (
    CharacterComparator,
    EqualityComparator,
    CaseInsensitiveComparator,
    CountingComparator,
    char_code,
    comparator_key,
)
