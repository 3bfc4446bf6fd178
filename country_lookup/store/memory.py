import threading
from contextlib import contextmanager
from typing import Any, Dict, Tuple
from .base import KeyValueStore

class ReadWriteLock:
    """
    Many readers or one writer.
    A waiting writer blocks new readers, so a steady stream of
    lookups can't keep a cache write waiting forever.
    """
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class MemoryStore(KeyValueStore):
    """
    Process-local key/value store shared by all requests.
    Keys are used exactly as given (no case folding or trimming).
    Entries live until the process exits: no eviction, no expiry.
    """
    def __init__(self):
        self._data: Dict[str, Any] = {}
        self._lock = ReadWriteLock()

    def get(self, key: str) -> Tuple[Any, bool]:
        with self._lock.read():
            if key in self._data:
                return self._data[key], True
        return None, False

    def set(self, key: str, value: Any) -> None:
        # lock is held for this single assignment only
        with self._lock.write():
            self._data[key] = value
