from .base import KeyValueStore
from .memory import MemoryStore, ReadWriteLock

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "ReadWriteLock",
]
