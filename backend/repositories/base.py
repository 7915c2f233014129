"""Key-value backend contract consumed by the schema storage facade."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class StoreProtocol(Protocol):
    """Namespaced byte storage.

    `timeout` is how long, in seconds, the backend may wait on its own
    resources before raising TimeoutError. None means wait indefinitely.
    `read` returns None when the key is absent.
    """

    def write(self, namespace: str, key: str, data: bytes, *, timeout: Optional[float] = None) -> None: ...

    def read(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> Optional[bytes]: ...

    def read_all(self, namespace: str, *, timeout: Optional[float] = None) -> list[bytes]: ...

    def delete(self, namespace: str, key: str, *, timeout: Optional[float] = None) -> None: ...
