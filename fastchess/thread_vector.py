"""A list guarded by a lock."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from types import TracebackType
from typing import Generic, TypeVar

T = TypeVar("T")


class ThreadVector(Generic[T]):
    """A list whose mutations are serialised by a lock.

    Iteration is not guarded on its own; hold the lock (``with vector:`` or
    :meth:`lock`/:meth:`unlock`) while iterating from several threads.
    """

    def __init__(self, items: list[T] | None = None) -> None:
        self._lock = threading.RLock()
        self._items: list[T] = list(items) if items is not None else []

    def push(self, element: T) -> None:
        """Append an element."""
        with self._lock:
            self._items.append(element)

    def remove(self, element: T) -> None:
        """Remove every element equal to ``element``."""
        with self._lock:
            self._items = [item for item in self._items if item != element]

    def remove_if(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element for which ``predicate`` holds; return how many."""
        with self._lock:
            kept = [item for item in self._items if not predicate(item)]
            removed = len(self._items) - len(kept)
            self._items = kept
            return removed

    def lock(self) -> None:
        self._lock.acquire()

    def unlock(self) -> None:
        self._lock.release()

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __enter__(self) -> ThreadVector[T]:
        self.lock()
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.unlock()