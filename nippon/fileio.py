"""File, directory and JSON helpers."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

PathLike = str | os.PathLike


def read_binary(path: PathLike, size: int = 0) -> bytes:
    """Read a file's bytes; a non-zero ``size`` limits how many are read."""
    data = Path(path).read_bytes()
    return data[:size] if size else data


def read_text(path: PathLike, size: int = 0) -> str:
    """Read a UTF-8 text file; a non-zero ``size`` limits how many characters are read."""
    with open(path, encoding="utf-8") as stream:
        return stream.read(size) if size else stream.read()


def write_binary(path: PathLike, data: bytes, size: int = 0) -> None:
    """Write ``data``; a ``size`` larger than the data pads the file with zero bytes."""
    data = bytes(data)
    Path(path).write_bytes(data + bytes(max(0, size - len(data))))


def write_text(path: PathLike, text: str, size: int = 0) -> None:
    """Write ``text``; a ``size`` larger than the text pads it with NUL characters."""
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text + "\0" * max(0, size - len(text)))


def create_if_not_exists(path: PathLike) -> None:
    """Create a single directory unless something already exists at ``path``."""
    target = Path(path)
    if not target.exists():
        target.mkdir()


def to_string_set(values: Iterable[str]) -> set[str]:
    """Collect a JSON array of strings into a set."""
    result = set()
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        result.add(value)
    return result


def files_with_extension(directory: PathLike, extension: str) -> list[Path]:
    """Entries directly inside ``directory`` whose extension equals ``extension``, sorted."""
    root = Path(directory)
    if not root.is_dir():
        return []
    return sorted(entry for entry in root.iterdir() if entry.suffix == extension)