"""Date, time and duration formatting."""

from __future__ import annotations

import datetime as _dt
import time as _time
from typing import Union

_Seconds = Union[int, float, _dt.timedelta]


def datetime(fmt: str) -> str | None:
    """Return the current local time formatted with ``fmt``, or None on failure."""
    try:
        return _time.strftime(fmt, _time.localtime())
    except (ValueError, OSError, OverflowError):
        return None


def datetime_iso() -> str:
    """Return local time as ``YYYY-MM-DDTHH:MM:SS +HHMM``."""
    now = _dt.datetime.now().astimezone()
    stamp = now.strftime("%Y-%m-%dT%H:%M:%S")

    offset = now.utcoffset() or _dt.timedelta(0)
    diff = int(offset.total_seconds()) // 60 if offset >= _dt.timedelta(0) else -(
        int(-offset.total_seconds()) // 60
    )
    hour_diff = abs(diff) // 60 * (1 if diff >= 0 else -1)
    min_diff = abs(diff) % 60
    sign = "+" if hour_diff >= 0 else "-"

    return f"{stamp} {sign}{abs(hour_diff):02d}{min_diff:02d}"


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // divisor
    if value < 0:
        quotient = -quotient
    return quotient, value - quotient * divisor


def duration(seconds: _Seconds) -> str:
    """Format a number of seconds (or a timedelta) as ``HH:MM:SS``."""
    if isinstance(seconds, _dt.timedelta):
        total = int(seconds.total_seconds())
    else:
        total = int(seconds)

    hours, rest = _trunc_divmod(total, 3600)
    minutes, secs = _trunc_divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def datetime_precise() -> str:
    """Return local wall-clock time as ``HH:MM:SS.ffffff``."""
    now = _dt.datetime.now()
    return f"{now.strftime('%H:%M:%S')}.{now.microsecond:06d}"