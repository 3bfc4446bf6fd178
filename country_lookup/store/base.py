# country_lookup/store/base.py
from typing import Any, Protocol, Tuple

class KeyValueStore(Protocol):
    def get(self, key: str) -> Tuple[Any, bool]:
        """Return (value, True) if `key` was set, else (None, False)."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite the value for `key`."""
        ...
