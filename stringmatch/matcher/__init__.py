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
