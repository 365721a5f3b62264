"""Key-value tables backing the reconciliation store."""

from .base import KeyValueTable
from .memory import InMemoryTable
from .redis_table import RedisTable

__all__ = [
    "InMemoryTable",
    "KeyValueTable",
    "RedisTable",
]
