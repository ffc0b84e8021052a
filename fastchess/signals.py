"""Process-wide stop flags and clean-up of spawned engine processes.

On Ctrl+C the stop flags are raised; a null byte written to each engine's
pipe wakes any blocking read so the flags get checked promptly.
"""

from __future__ import annotations

import logging
import os
import signal
import threading
from dataclasses import dataclass
from types import FrameType

from fastchess.thread_vector import ThreadVector

_log = logging.getLogger(__name__)

stop = threading.Event()
"""Set when the tournament should stop."""

abnormal_termination = threading.Event()
"""Set when the stop was caused by an interrupt rather than normal completion."""


@dataclass(frozen=True)
class ProcessInformation:
    """A spawned engine process and the descriptor it reads its input from."""

    identifier: int
    fd_write: int


process_list: ThreadVector[ProcessInformation] = ThreadVector()


def write_to_open_pipes() -> None:
    """Write a null byte to every engine's input pipe so blocking reads return."""
    with process_list:
        for process in process_list:
            _log.debug("Writing to process with pid/handle: %s", process.identifier)
            written = os.write(process.fd_write, b"\0")
            assert written == 1


def stop_processes() -> None:
    """Interrupt and then kill every registered engine process."""
    kill_signal = getattr(signal, "SIGKILL", signal.SIGTERM)
    with process_list:
        for process in process_list:
            _log.debug("Cleaning up process with pid/handle: %s", process.identifier)
            for sig in (signal.SIGINT, kill_signal):
                try:
                    os.kill(process.identifier, sig)
                except OSError:
                    pass


def _on_interrupt(signum: int, frame: FrameType | None) -> None:
    stop.set()
    abnormal_termination.set()


def set_ctrl_c_handler() -> None:
    """Make SIGINT raise the stop flags instead of interrupting the program."""
    try:
        signal.signal(signal.SIGINT, _on_interrupt)
    except (ValueError, OSError) as exc:
        _log.error("Error setting up signal handler: %s", exc)