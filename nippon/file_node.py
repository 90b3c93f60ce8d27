"""Tree of files and directories below a path."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


class FileNode:
    """A path and, for a directory, a node for each entry in it, ordered by path."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)
        self.children: dict[Path, FileNode] = {}
        if self.path.is_dir():
            for entry in sorted(self.path.iterdir()):
                self.children[entry] = FileNode(entry)

    @property
    def is_directory(self) -> bool:
        return self.path.is_dir()

    @property
    def is_file(self) -> bool:
        return self.path.is_file()

    @property
    def parent(self) -> Path:
        return self.path.parent

    @property
    def name(self) -> str:
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def size(self) -> int:
        """Size of the file in bytes."""
        if self.path.is_dir():
            raise IsADirectoryError(str(self.path))
        return self.path.stat().st_size

    def __iter__(self) -> Iterator[FileNode]:
        return iter(self.children.values())

    def __len__(self) -> int:
        return len(self.children)