from .hash import RollingHash, power, wrap
