"""Nested game archives: a table of typed, named entries that may themselves be archives."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from nippon.binary_reader import BinaryReader
from nippon.checksum import crc32
from nippon.fileio import write_binary
from nippon.text import remove_nulls

KNOWN_TYPES = frozenset({
    "A00", "A01", "ACT", "AK", "AKT", "ANS",
    "B00", "B01", "BIN", "BMH",
    "C00", "CAM", "CCH", "CMP",
    "D00", "DAT", "DDP", "DDS",
    "EAR", "ECT", "EFF", "EFP", "EMD", "EST",
    "FI2", "FIS",
    "ICO", "IDD", "IDP", "ISL", "ITS",
    "JMP",
    "LI3",
    "MEH", "MOT", "MRT", "MSA", "MSD", "MSS",
    "RHT", "RNI", "ROF",
    "S00", "S01", "S02", "S03", "S04", "S05", "SCA", "SCI", "SCL", "SCM", "SCP", "SCR",
    "SEH", "SEQ", "SSD", "SSL",
    "TAT", "TBL", "TRE", "TS", "TSC",
    "V00", "V01", "V02", "V03",
})

_MAX_ENTRIES = 4096
_NAME_SIZE = 20
_ENTRY_GAP = 24
_MASK = 0xFFFFFFFF


@dataclass
class ArchiveEntry:
    """One row of an archive's table of contents."""

    offset: int = 0
    size: int = 0
    type: str = ""
    name: str = ""


class ArchiveNode:
    """A blob of bytes that is either a plain file or an archive of child nodes.

    Children are ordered by type, keeping table order among equal types.
    """

    def __init__(self, data: bytes) -> None:
        self._reader = BinaryReader(data)
        self.crc32 = crc32(self._reader.data)
        self.offset = 0
        self.size = 0
        self.type = ""
        self.name = ""
        self.toc: list[ArchiveEntry] = []
        self.children: list[ArchiveNode] = []
        self.is_archive = self._contains_archive()

        if self.is_archive:
            self.toc = self._fetch_header()
            for entry in self.toc:
                self._reader.seek_absolute(entry.offset)
                child = ArchiveNode(self._reader.bytes(entry.size))
                child.offset = entry.offset
                child.size = entry.size
                child.type = entry.type
                child.name = entry.name
                self.children.append(child)
            self.children.sort(key=lambda node: node.type)

    @property
    def is_file(self) -> bool:
        return not self.is_archive

    @property
    def data(self) -> bytes:
        return self._reader.data

    def __iter__(self) -> Iterator[ArchiveNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def extract_recursive(self, directory: str | os.PathLike) -> None:
        """Write every file below this node into ``directory`` as ``<name>.<type>``.

        Unnamed files are named after their CRC-32. An existing file is only
        replaced by a larger one; empty entries are skipped.
        """
        directory = Path(directory)
        if self.is_archive:
            for child in self.children:
                child.extract_recursive(directory)
            return

        stem = self.name if self.name else str(self.crc32)
        target = Path(f"{directory / stem}.{self.type}")
        if not self.size:
            return
        if target.exists() and self.size <= target.stat().st_size:
            return
        write_binary(target, self.data)

    def _fetch_header(self) -> list[ArchiveEntry]:
        reader = self._reader
        reader.seek_absolute(0)
        count = reader.read("I")
        offsets = [reader.read("I") for _ in range(count)]
        types = [remove_nulls(reader.string(4)) for _ in range(count)]

        names = []
        for offset in offsets:
            reader.seek_absolute(offset)
            reader.seek_relative(-_NAME_SIZE)
            names.append(remove_nulls(reader.string(_NAME_SIZE)))

        sizes = [
            (following - current - _ENTRY_GAP) & _MASK
            for current, following in zip(offsets, offsets[1:])
        ]
        last = ((reader.size - 1) - offsets[-1]) & _MASK
        sizes.append(last - _ENTRY_GAP if last >= _ENTRY_GAP else 0)

        return [
            ArchiveEntry(offset=offset, size=size, type=kind, name=name)
            for offset, size, kind, name in zip(offsets, sizes, types, names)
        ]

    def _contains_archive(self) -> bool:
        reader = self._reader
        reader.seek_absolute(0)
        count = reader.read("I")
        if not 0 < count < _MAX_ENTRIES:
            return False
        for _ in range(count):
            if reader.read("I") >= reader.size:
                return False
        return all(remove_nulls(reader.string(4)) in KNOWN_TYPES for _ in range(count))