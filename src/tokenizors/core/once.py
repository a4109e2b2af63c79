from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class OnceCell(Generic[T]):
    """Holds a value produced by ``factory`` on first access.

    ``get`` is safe to call from several threads at once: the factory runs
    exactly once and every caller observes the same object. Async callers go
    through ``asyncio.to_thread(cell.get)`` so the event loop is never blocked
    while the factory runs. If the factory raises, the cell stays empty.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: T | None = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def get(self) -> T:
        if self._initialized:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True
        return self._value  # type: ignore[return-value]
