"""A thread-safe pool of reusable objects keyed by an identifier."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from fastchess.scope_guard import ScopeEntry

T = TypeVar("T")


class CachedEntry(ScopeEntry, Generic[T]):
    """A pooled object; it is in use until released (see ScopeGuard)."""

    def __init__(
        self,
        identifier: Hashable,
        factory: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(False)
        self.id = identifier
        self._value = factory(*args, **kwargs)

    def get(self) -> T:
        """Return the pooled object."""
        return self._value


class CachePool(Generic[T]):
    """Lends out objects by identifier, creating them only when none is free."""

    def __init__(self) -> None:
        self._entries: list[CachedEntry[T]] = []
        self._lock = threading.Lock()

    def get_entry(
        self,
        identifier: Hashable,
        factory: Callable[..., T],
        *args: Any,
        **kwargs: Any,
    ) -> CachedEntry[T]:
        """Reserve a free entry with ``identifier``, or build a new one.

        ``factory(*args, **kwargs)`` is called only when no free entry exists.
        """
        with self._lock:
            for entry in self._entries:
                if entry.available and entry.id == identifier:
                    entry.available = False
                    return entry

            entry = CachedEntry(identifier, factory, *args, **kwargs)
            self._entries.append(entry)
            return entry

    def delete_from_cache(self, entry: CachedEntry[T]) -> None:
        """Drop a reserved entry from the pool."""
        if entry.available:
            raise ValueError("cannot delete an entry that is not reserved")
        with self._lock:
            for position, candidate in enumerate(self._entries):
                if candidate is entry:
                    del self._entries[position]
                    return
        raise ValueError("entry is not in this cache")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)