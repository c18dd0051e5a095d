# State store adapter for bookings and pending booking intents
# In-memory until the hosted datastore client is wired in

import threading
from typing import Any, Dict, List


class StateStore:
    """In-memory key/value store, safe to share across request threads."""

    def __init__(self):
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str):
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Any):
        with self._lock:
            self._store[key] = value

    def delete(self, key: str):
        with self._lock:
            self._store.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        with self._lock:
            snapshot = list(self._store)
        return [key for key in snapshot if key.startswith(prefix)]
