"""In-process implementation of StoreProtocol. Nothing survives a restart."""

import threading
from typing import Optional


class MemoryStore:
    """Dict-backed namespaced byte store. Scan order is insertion order."""

    def __init__(self):
        self._data: dict[str, dict[str, bytes]] = {}
        self._lock = threading.Lock()

    def _acquire(self, timeout: Optional[float]) -> None:
        if not self._lock.acquire(timeout=-1 if timeout is None else timeout):
            raise TimeoutError(f"could not acquire store lock within {timeout}s")

    def write(self, namespace: str, key: str, data: bytes, *, timeout: Optional[float] = None) -> None:
        self._acquire(timeout)
        try:
            self._data.setdefault(namespace, {})[key] = bytes(data)
        finally:
            self._lock.release()

    def read(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> Optional[bytes]:
        self._acquire(timeout)
        try:
            return self._data.get(namespace, {}).get(key)
        finally:
            self._lock.release()

    def read_all(self, namespace: str, *, timeout: Optional[float] = None) -> list[bytes]:
        self._acquire(timeout)
        try:
            return list(self._data.get(namespace, {}).values())
        finally:
            self._lock.release()

    def delete(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> None:
        self._acquire(timeout)
        try:
            self._data.get(namespace, {}).pop(key, None)
        finally:
            self._lock.release()
