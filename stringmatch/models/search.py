from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence

from ..comparator.comparator import EqualityComparator
from ..constants.constants import DEFAULT_ALGORITHM


@dataclass
class SearchInput:
    # required fields
    pattern: Sequence
    text: Sequence

    # optional fields
    comparator: Callable[[Any, Any], int] = field(default_factory=EqualityComparator)
    algorithm: str = DEFAULT_ALGORITHM
    countComparisons: bool = False


@dataclass
class SearchOutput:
    algorithm: str
    matches: List[int] = field(default_factory=list)
    comparisonCount: int = -1       # -1 unless countComparisons was requested
