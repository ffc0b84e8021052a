"""Thread-safe log file writer for tournament and engine traffic."""

from __future__ import annotations

import datetime as _dt
import enum
import gzip
import sys
import threading
from typing import Any, TextIO

from fastchess.timeutil import datetime_precise


class Level(enum.IntEnum):
    """Severity levels, in increasing order."""

    ALL = 0
    TRACE = 1
    WARN = 2
    INFO = 3
    ERR = 4
    FATAL = 5


_LABELS = {
    Level.TRACE: "TRACE",
    Level.WARN: "WARN",
    Level.INFO: "INFO",
    Level.ERR: "ERR",
    Level.FATAL: "FATAL",
}

_ID_WIDTH = 3 if sys.platform == "win32" else 20


class Logger:
    """Writes formatted log lines to a plain or gzip-compressed file."""

    def __init__(
        self,
        level: Level = Level.WARN,
        compress: bool = False,
        engine_coms: bool = False,
    ) -> None:
        self.level = level
        self.compress = compress
        self.engine_coms = engine_coms
        self.should_log = False
        self._file: TextIO | None = None
        self._lock = threading.Lock()

    def set_level(self, level: Level) -> None:
        self.level = Level(level)

    def set_compress(self, compress: bool) -> None:
        self.compress = compress

    def set_engine_coms(self, engine_coms: bool) -> None:
        self.engine_coms = engine_coms

    def open_file(self, file: str) -> None:
        """Open the log destination; an empty name leaves logging off."""
        if not file:
            return

        self.close()
        try:
            if self.compress:
                stamp = _dt.datetime.now().strftime("%Y-%m-%dT.%H.%M.%S")
                handle: TextIO = gzip.open(f"{file}{stamp}.gz", "wt", encoding="utf-8")
            else:
                handle = open(file, "a", encoding="utf-8")
        except OSError:
            print("Failed to open log file.", file=sys.stderr)
            self.should_log = False
            return

        with self._lock:
            self._file = handle
        self.should_log = True

    def close(self) -> None:
        """Close the log file and stop logging."""
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
        self.should_log = False

    def trace(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.TRACE, message.format(*args), thread)

    def warn(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.WARN, message.format(*args), thread)

    def info(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.INFO, message.format(*args), thread)

    def err(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.ERR, message.format(*args), thread)

    def fatal(self, message: str, *args: Any, thread: bool = False) -> None:
        self._log(Level.FATAL, message.format(*args), thread)

    def print(
        self,
        message: str,
        *args: Any,
        level: Level = Level.INFO,
        thread: bool = False,
    ) -> None:
        """Print a message to stdout and, when logging, to the log file."""
        text = message.format(*args) + "\n"
        sys.stdout.write(text)
        sys.stdout.flush()

        if not self.should_log:
            return
        self._log(level, text, thread)

    def write_to_engine(self, msg: str, time: str, name: str) -> None:
        """Log a line sent to an engine."""
        if not self.should_log or not self.engine_coms:
            return

        timestamp = time or datetime_precise()
        ident = threading.get_ident()
        line = f"[{'Engine':<6}] [{timestamp:>15}] <{ident!s:>{_ID_WIDTH}}> {name} <--- {msg}\n"
        self._emit(line)

    def read_from_engine(
        self,
        msg: str,
        time: str,
        name: str,
        err: bool = False,
        thread_id: int | None = None,
    ) -> None:
        """Log a line received from an engine."""
        if not self.should_log or not self.engine_coms:
            return

        ident = threading.get_ident() if thread_id is None else thread_id
        prefix = "<stderr> " if err else ""
        line = (
            f"[{'Engine':<6}] [{time:>15}] <{ident!s:>{_ID_WIDTH}}> "
            f"{prefix}{name} ---> {msg}\n"
        )
        self._emit(line)

    def _log(self, level: Level, message: str, thread: bool) -> None:
        if level < self.level:
            return
        if not self.should_log:
            return

        label = _LABELS.get(level, "")
        thread_id = str(threading.get_ident()) if thread else ""
        line = (
            f"[{label:<6}] [{datetime_precise():>15}] <{thread_id:>{_ID_WIDTH}}> "
            f"fastchess --- {message}\n"
        )
        self._emit(line)

    def _emit(self, line: str) -> None:
        with self._lock:
            if self._file is None:
                return
            self._file.write(line)
            self._file.flush()