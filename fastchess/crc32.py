"""CRC-32 checksums (IEEE 802.3 polynomial) for files and incremental data."""

from __future__ import annotations

import os
import zlib

_MASK = 0xFFFFFFFF
_CHUNK_SIZE = 4096


def _as_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def initial_crc32() -> int:
    """Return the starting register value for an incremental CRC-32."""
    return _MASK


def incremental_crc32(crc: int, data: str | bytes) -> int:
    """Feed ``data`` into a running CRC-32 register and return the new register.

    The register is neither pre- nor post-inverted here; start from
    :func:`initial_crc32` and finish with :func:`finalize_crc32`.
    """
    return zlib.crc32(_as_bytes(data), (crc ^ _MASK) & _MASK) ^ _MASK


def finalize_crc32(crc: int) -> int:
    """Turn a running CRC-32 register into the final checksum."""
    return (~crc) & _MASK


def calculate_crc32(filename: str | os.PathLike[str]) -> int | None:
    """Return the CRC-32 of a file's contents, or None if it cannot be opened."""
    try:
        handle = open(filename, "rb")
    except OSError:
        return None

    crc = initial_crc32()
    with handle:
        while chunk := handle.read(_CHUNK_SIZE):
            crc = incremental_crc32(crc, chunk)
    return finalize_crc32(crc)