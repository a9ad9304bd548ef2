"""
In-memory property store.
"""

import threading
from typing import Any, Dict, List, Optional


class MemoryStorage:
    """
    Dict-backed PropertyStore.

    Storing None removes the key. Single store/load calls are atomic; hold
    `lock` to serialise a load-modify-store sequence.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self.lock = threading.RLock()

    def store(self, key: str, value: Optional[Any]) -> None:
        with self.lock:
            if value is None:
                self._values.pop(key, None)
            else:
                self._values[key] = value

    def load(self, key: str) -> Optional[Any]:
        with self.lock:
            return self._values.get(key)

    def keys(self) -> List[str]:
        with self.lock:
            return list(self._values.keys())

    def clear(self) -> None:
        with self.lock:
            self._values.clear()

    def __len__(self) -> int:
        with self.lock:
            return len(self._values)

    def __contains__(self, key: str) -> bool:
        with self.lock:
            return key in self._values
