from .failure_table import build_failure_table
from .last_table import build_last_table, build_byte_last_table
