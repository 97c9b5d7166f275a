from .comparator import (
    CharacterComparator,
    EqualityComparator,
    CaseInsensitiveComparator,
    CountingComparator,
    char_code,
)
from .hashing import RollingHash, power
from .tables import build_failure_table, build_last_table, build_byte_last_table
from .search import kmp, boyer_moore, rabin_karp
from .models import SearchInput, SearchOutput
from .matcher import (
    APatternMatcher,
    KmpMatcher,
    BoyerMooreMatcher,
    RabinKarpMatcher,
    MATCHERS,
    getMatcher,
    run,
    find_all,
)

__version__ = "0.1.0"
