from .kmp import kmp
from .boyer_moore import boyer_moore
from .rabin_karp import rabin_karp
