"""Sequential little-endian reader over an in-memory byte string."""

from __future__ import annotations

import functools
import struct
from typing import Any

_BYTE_ORDER_PREFIXES = "@=<>!"


@functools.lru_cache(maxsize=None)
def _compile(fmt: str) -> struct.Struct:
    """Compile a struct format, defaulting to little-endian without padding."""
    if not fmt or fmt[0] not in _BYTE_ORDER_PREFIXES:
        fmt = "<" + fmt
    return struct.Struct(fmt)


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment {alignment!r} is not a positive power of two")


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of the power-of-two ``alignment``."""
    _check_alignment(alignment)
    return (value + alignment - 1) & ~(alignment - 1)


def align_down(value: int, alignment: int) -> int:
    """Round ``value`` down to a multiple of the power-of-two ``alignment``."""
    _check_alignment(alignment)
    return value & ~(alignment - 1)


class BinaryReader:
    """Reads typed values from a byte string while tracking a cursor.

    A read that would run past the end yields a zero value (or an empty
    result) but still moves the cursor by the requested amount.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.position = 0

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def seek_relative(self, offset: int) -> None:
        self.position += offset

    def seek_absolute(self, position: int) -> None:
        self.position = position

    def _take(self, size: int) -> bytes | None:
        """Return the next ``size`` bytes, or None if they are not all there; always advance."""
        start = self.position
        self.position += size
        if start < 0 or start + size > len(self._data):
            return None
        return self._data[start:start + size]

    def read(self, fmt: str) -> Any:
        """Read one struct-formatted record; a single field is returned bare."""
        layout = _compile(fmt)
        chunk = self._take(layout.size)
        values = layout.unpack(chunk if chunk is not None else bytes(layout.size))
        return values[0] if len(values) == 1 else values

    def read_array(self, fmt: str, count: int) -> list[Any]:
        """Read ``count`` consecutive records; empty if they do not all fit."""
        layout = _compile(fmt)
        chunk = self._take(layout.size * count)
        if chunk is None:
            return []
        records = layout.iter_unpack(chunk)
        return [values[0] if len(values) == 1 else values for values in records]

    def bytes(self, size: int) -> bytes:
        """Read ``size`` raw bytes; empty if they do not all fit."""
        chunk = self._take(size)
        return chunk if chunk is not None else b""

    def string(self, size: int) -> str:
        """Read ``size`` bytes as a byte-per-character string; empty if they do not all fit."""
        chunk = self._take(size)
        return chunk.decode("latin-1") if chunk is not None else ""