"""File-descriptor budget for running engines concurrently."""

from __future__ import annotations

import sys

_BASE_FDS = 26
_FDS_PER_GAME = 12


def max_system_file_descriptor_count() -> int:
    """Return the soft limit on open file descriptors, or -1 on failure."""
    try:
        import resource
    except ImportError as exc:
        raise OSError("file descriptor limits are not available on this platform") from exc

    try:
        soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    except (OSError, ValueError) as exc:
        print(f"getrlimit: {exc}", file=sys.stderr)
        return -1

    if soft == resource.RLIM_INFINITY or soft < 0:
        return -1
    return soft


def min_file_descriptor_required(concurrency: int) -> int:
    """Return the descriptors needed to run ``concurrency`` games at once."""
    return _BASE_FDS + (concurrency - 1) * _FDS_PER_GAME


def max_concurrency(available_fds: int) -> int:
    """Return the most games that fit in ``available_fds`` descriptors."""
    spare = available_fds - _BASE_FDS
    quotient = abs(spare) // _FDS_PER_GAME
    if spare < 0:
        quotient = -quotient
    return quotient + 1