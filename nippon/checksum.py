"""CRC-32 checksums of byte strings, computed in chunks."""

from __future__ import annotations

import zlib

DEFAULT_CHUNK_SIZE = 4 * 1024


def crc32(data: bytes | str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Return the CRC-32 of ``data``, feeding it ``chunk_size`` bytes at a time."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    raw = data.encode("utf-8") if isinstance(data, str) else memoryview(bytes(data))
    crc = 0
    for start in range(0, len(raw), chunk_size):
        crc = zlib.crc32(raw[start:start + chunk_size], crc)
    return crc