"""Small string helpers used when parsing command lines and engine output."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def starts_with(haystack: str, needle: str) -> bool:
    """Return True if ``haystack`` begins with a non-empty ``needle``."""
    if not needle:
        return False
    return haystack.startswith(needle)


def ends_with(value: str, ending: str) -> bool:
    """Return True if ``value`` ends with ``ending``."""
    return value.endswith(ending)


def contains(haystack: str | Sequence[str], needle: str) -> bool:
    """Return True if the string or sequence of strings holds ``needle``."""
    return needle in haystack


def split_string(string: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``, dropping empty segments."""
    return [segment for segment in string.split(delimiter) if segment]


def find_element(
    haystack: Sequence[str], needle: str, kind: Callable[[str], T] = str
) -> T | Any | None:
    """Return the element following ``needle`` converted by ``kind``.

    Returns None when ``needle`` is absent; raises IndexError when it is the
    last element and ValueError when the conversion fails.
    """
    try:
        index = list(haystack).index(needle)
    except ValueError:
        return None
    return kind(haystack[index + 1])


def join(strings: Sequence[str], delimiter: str) -> str:
    """Concatenate strings, each followed by ``delimiter`` (including the last)."""
    return "".join(string + delimiter for string in strings)