# prime base for the Rabin-Karp polynomial hash
BASE = 113

# rolling hash arithmetic wraps like a native 32-bit signed int
HASH_WIDTH = 32
MASK = (1 << HASH_WIDTH) - 1
SIGN_BIT = 1 << (HASH_WIDTH - 1)

# dense last-occurrence table size for byte patterns
BYTE_ALPHABET_SIZE = 256

DEFAULT_ALGORITHM = "kmp"
