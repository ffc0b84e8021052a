"""Entries that are marked available again when their guard is left."""

from __future__ import annotations

from types import TracebackType
from typing import Generic, TypeVar


class ScopeEntry:
    """Base for objects lent out under a :class:`ScopeGuard`."""

    def __init__(self, available: bool) -> None:
        self.available = available

    def release(self) -> None:
        """Mark the entry as free for the next user."""
        self.available = True


E = TypeVar("E", bound=ScopeEntry)


class ScopeGuard(Generic[E]):
    """Context manager that releases its entry on exit."""

    def __init__(self, entry: E | None) -> None:
        if entry is not None and not isinstance(entry, ScopeEntry):
            raise TypeError("ScopeGuard needs an entry derived from ScopeEntry")
        self._entry = entry

    def get(self) -> E:
        """Return the guarded entry."""
        if self._entry is None:
            raise ValueError("ScopeGuard holds no entry")
        return self._entry

    def __enter__(self) -> E:
        return self.get()

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        if self._entry is not None:
            self._entry.release()