"""Thread-safe append-only file writer with an optional running CRC-32."""

from __future__ import annotations

import os
import threading
from types import TracebackType
from typing import TYPE_CHECKING

from fastchess.crc32 import (
    calculate_crc32,
    finalize_crc32,
    incremental_crc32,
    initial_crc32,
)

if TYPE_CHECKING:
    from fastchess.logger import Logger

_MASK = 0xFFFFFFFF


class FileWriter:
    """Appends text to a file from many threads, optionally tracking its CRC-32.

    When the checksum is tracked and the file already holds data, the running
    checksum continues from that data, so it always covers the whole file.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        crc: bool = False,
        *,
        logger: Logger | None = None,
    ) -> None:
        self.filename = os.fspath(filename)
        self._calculate_crc = crc
        self._logger = logger
        self._lock = threading.Lock()
        self._crc = self._starting_crc() if crc else initial_crc32()
        self._file = open(self.filename, "ab")

    def _starting_crc(self) -> int:
        try:
            empty = os.path.getsize(self.filename) == 0
        except OSError:
            empty = True
        if empty:
            return initial_crc32()

        existing = calculate_crc32(self.filename)
        if existing is None:
            return initial_crc32()
        # Undo the final inversion to resume the running register.
        return (~existing) & _MASK

    def write(self, data: str) -> None:
        """Append ``data`` and flush it to disk."""
        with self._lock:
            self._file.write(data.encode("utf-8"))
            self._file.flush()

            if self._calculate_crc:
                self._crc = incremental_crc32(self._crc, data)
                self._report(finalize_crc32(self._crc))

    def _report(self, checksum: int) -> None:
        if self._logger is not None:
            self._logger.print("File {} has CRC32: {:#x}", self.filename, checksum)
        else:
            print(f"File {self.filename} has CRC32: {checksum:#x}", flush=True)

    def crc32(self) -> int | None:
        """Return the checksum of the whole file, or None if not tracked."""
        if not self._calculate_crc:
            return None
        return finalize_crc32(self._crc)

    def close(self) -> None:
        """Close the underlying file."""
        with self._lock:
            self._file.close()

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.close()