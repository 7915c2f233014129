"""
File-based implementation of StoreProtocol.
One directory per namespace under a configurable data directory, one file per key:
  data/
    schema/   {quoted key}.json
"""

import errno
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)


class FileStore:
    """Durable namespaced byte store. Writes are atomic (tmp file + rename)."""

    suffix = ".json"

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    @contextmanager
    def _locked(self, timeout: Optional[float]) -> Iterator[None]:
        if not self._lock.acquire(timeout=-1 if timeout is None else timeout):
            raise TimeoutError(f"could not acquire store lock within {timeout}s")
        try:
            yield
        finally:
            self._lock.release()

    def _namespace_dir(self, namespace: str) -> Path:
        if not namespace:
            raise ValueError("namespace must not be empty")
        return self.data_dir / quote(namespace, safe="")

    def _path(self, namespace: str, key: str) -> Path:
        if not key:
            raise ValueError("key must not be empty")
        # quote() leaves "." alone, so "." and ".." need escaping by hand
        name = quote(key, safe="").replace(".", "%2E")
        return self._namespace_dir(namespace) / f"{name}{self.suffix}"

    def write(self, namespace: str, key: str, data: bytes, *, timeout: Optional[float] = None) -> None:
        path = self._path(namespace, key)
        with self._locked(timeout):
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            with open(tmp, "wb") as f:
                f.write(data)
            tmp.replace(path)

    def read(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> Optional[bytes]:
        # nothing can be written under an empty key
        if not key:
            return None
        path = self._path(namespace, key)
        with self._locked(timeout):
            try:
                return path.read_bytes()
            except FileNotFoundError:
                return None
            except OSError as e:
                # a key too long to be a filename was never written either
                if e.errno == errno.ENAMETOOLONG:
                    return None
                raise

    def read_all(self, namespace: str, *, timeout: Optional[float] = None) -> list[bytes]:
        ns_dir = self._namespace_dir(namespace)
        with self._locked(timeout):
            if not ns_dir.exists():
                return []
            return [p.read_bytes() for p in sorted(ns_dir.glob(f"*{self.suffix}"))]

    def delete(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> None:
        if not key:
            return
        path = self._path(namespace, key)
        with self._locked(timeout):
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                if e.errno != errno.ENAMETOOLONG:
                    raise
                return
        logger.debug("Deleted %s/%s", namespace, key)
