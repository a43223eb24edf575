"""A thread-safe pool of reusable objects."""

from __future__ import annotations

import threading
from collections import deque
from types import SimpleNamespace
from typing import Callable, Deque, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class ObjectPool(Generic[T]):
    """Hands out objects, creating new ones only when none are free."""

    def __init__(
        self, initial_size: int = 0, creator: Optional[Callable[[], T]] = None
    ) -> None:
        self._creator: Callable[[], T] = creator if creator is not None else SimpleNamespace
        self._free: Deque[T] = deque(self._creator() for _ in range(initial_size))
        self._active: Dict[int, T] = {}
        self._lock = threading.Lock()

    def acquire(self) -> T:
        """Take a free object, or create one if the pool is empty."""
        with self._lock:
            obj = self._free.popleft() if self._free else self._creator()
            self._active[id(obj)] = obj
            return obj

    def release(self, obj: Optional[T]) -> None:
        """Return a borrowed object; objects this pool did not hand out are dropped."""
        if obj is None:
            return
        with self._lock:
            if self._active.pop(id(obj), None) is not None:
                self._free.append(obj)

    def available(self) -> int:
        with self._lock:
            return len(self._free)

    def borrowed(self) -> int:
        with self._lock:
            return len(self._active)

    def clear(self) -> None:
        """Forget every object, free or borrowed."""
        with self._lock:
            self._free.clear()
            self._active.clear()

    def release_all(self) -> None:
        """Take back every borrowed object."""
        with self._lock:
            self._free.extend(self._active.values())
            self._active.clear()