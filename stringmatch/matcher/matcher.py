import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Type

from ..comparator.comparator import Comparator, CountingComparator, EqualityComparator
from ..constants.constants import DEFAULT_ALGORITHM
from ..models.search import SearchInput, SearchOutput
from ..search.boyer_moore import boyer_moore
from ..search.kmp import kmp
from ..search.rabin_karp import rabin_karp

logger = logging.getLogger(__name__)


class APatternMatcher(ABC):
    name: str = ""

    @abstractmethod
    def search(self, pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
        pass

    def run(self, inputData: SearchInput) -> SearchOutput:
        """
        Runs one search described by inputData. inputData.algorithm must name
        this matcher.

        When countComparisons is set the comparator is wrapped so the number
        of character comparisons is reported alongside the matches.
        """
        if inputData.algorithm != self.name:
            raise ValueError(f"{self.name} matcher cannot run a search for algorithm {inputData.algorithm!r}")

        comparator = inputData.comparator
        counter = None
        if inputData.countComparisons and comparator is not None:
            counter = CountingComparator(comparator)
            comparator = counter

        matches = self.search(inputData.pattern, inputData.text, comparator)

        output = SearchOutput(
            algorithm=self.name,
            matches=matches,
            comparisonCount=counter.getComparisonCount() if counter else -1,
        )
        logger.debug(
            "%s: %d matches in text of length %d (comparisons=%d)",
            self.name, len(matches), len(inputData.text), output.comparisonCount,
        )
        return output


class KmpMatcher(APatternMatcher):
    name = "kmp"

    def search(self, pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
        return kmp(pattern, text, comparator)


class BoyerMooreMatcher(APatternMatcher):
    name = "boyer_moore"

    def search(self, pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
        return boyer_moore(pattern, text, comparator)


class RabinKarpMatcher(APatternMatcher):
    name = "rabin_karp"

    def search(self, pattern: Sequence, text: Sequence, comparator: Comparator) -> List[int]:
        return rabin_karp(pattern, text, comparator)


MATCHERS: Dict[str, Type[APatternMatcher]] = {
    matcherClass.name: matcherClass
    for matcherClass in (KmpMatcher, BoyerMooreMatcher, RabinKarpMatcher)
}


def getMatcher(name: str) -> APatternMatcher:
    if name not in MATCHERS:
        raise ValueError(f"Unknown algorithm {name!r}, expected one of {sorted(MATCHERS)}")
    return MATCHERS[name]()


def run(inputData: SearchInput) -> SearchOutput:
    """Runs the search with the algorithm named in inputData."""
    return getMatcher(inputData.algorithm).run(inputData)


def find_all(pattern: Sequence, text: Sequence, comparator: Comparator = None,
             algorithm: str = DEFAULT_ALGORITHM) -> List[int]:
    """Start index of every occurrence of pattern in text, exact equality unless a comparator is given."""
    if comparator is None:
        comparator = EqualityComparator()
    return getMatcher(algorithm).search(pattern, text, comparator)
