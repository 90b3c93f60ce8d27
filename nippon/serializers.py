"""Readers for level model (SCR) and object placement (TSC/TRE/TAT) files."""

from __future__ import annotations

import math
import os
from pathlib import Path

from nippon.assets import DefaultVertex, GameObject, ModelDivision, ModelEntry, ModelGroup
from nippon.binary_reader import BinaryReader, align_up
from nippon.fileio import read_binary

SCR_MAGIC = 0x00726373
MDB_MAGIC = 0x0062646D

_SCR_HEADER = "4I"
_SCR_TRANSFORM = "2hI3H3H2H5H3H3h3h"
_MDB_HEADER = "2I2H20x"
_MD_HEADER = "5I2H"
_SCR_VERTEX = "3hH"
_U16_PAIR = "2H"
_OBJ_ENTRY = "4B3B3B3H2I4B"

_STRIP_RESTART = 0x8000
_ALIGNMENT = 16
_TEXTURE_MAP_SCALE = 1000.0


class FormatError(ValueError):
    """Raised when a model or object file does not have the expected layout."""


def _floats(values) -> tuple[float, ...]:
    return tuple(float(value) for value in values)


def _texture_ratio(value: int) -> float:
    return _TEXTURE_MAP_SCALE / value if value else math.inf


def _read_optional(reader: BinaryReader, start: int, offset: int, fmt: str, count: int) -> list:
    if not offset:
        return []
    reader.seek_absolute(start + offset)
    return reader.read_array(fmt, count)


def _parse_division(reader: BinaryReader) -> ModelDivision:
    md_start = reader.position
    (vertex_offset, _unknown, map_offset, weight_offset, uv_offset,
     count, _texture_index) = reader.read(_MD_HEADER)

    vertices = _read_optional(reader, md_start, vertex_offset, _SCR_VERTEX, count)
    texture_maps = _read_optional(reader, md_start, map_offset, _U16_PAIR, count)
    texture_uvs = _read_optional(reader, md_start, uv_offset, _U16_PAIR, count)
    color_weights = _read_optional(reader, md_start, weight_offset, "I", count)

    elements: list[int] = []
    if count >= 3:
        if len(vertices) != count:
            raise FormatError("division has no vertex data for its triangle strip")
        for index in range(2, count):
            if vertices[index][3] == _STRIP_RESTART:
                continue
            elements.extend((index - 2, index - 1, index))

    has_positions = len(vertices) == count
    has_maps = len(texture_maps) == count
    has_uvs = len(texture_uvs) == count
    has_weights = len(color_weights) == count

    division = ModelDivision()
    for index in range(count):
        division.add_vertex(DefaultVertex(
            position=_floats(vertices[index][:3]) if has_positions else (0.0, 0.0, 0.0),
            texture_map=(
                (_texture_ratio(texture_maps[index][0]), _texture_ratio(texture_maps[index][1]))
                if has_maps else (0.0, 0.0)
            ),
            texture_uv=_floats(texture_uvs[index]) if has_uvs else (0.0, 0.0),
            color_weight=color_weights[index] if has_weights else 0,
        ))
    for element in elements:
        division.add_element(element)
    return division


def _parse_model(reader: BinaryReader) -> ModelEntry:
    mdb_start = reader.position
    magic, mesh_type, mesh_id, division_count = reader.read(_MDB_HEADER)
    if magic != MDB_MAGIC:
        raise FormatError(f"bad mesh magic 0x{magic:08X} at offset {mdb_start}")

    offsets = reader.read_array("I", division_count)
    if len(offsets) != division_count:
        raise FormatError("mesh division table runs past the end of the data")

    entry = ModelEntry(mesh_id, mesh_type)
    for offset in offsets:
        reader.seek_absolute(mdb_start + offset)
        entry.add_division(_parse_division(reader))
    return entry


def parse_model_group(data: bytes, name: str) -> ModelGroup:
    """Parse an SCR model file into a group named ``name``."""
    reader = BinaryReader(data)
    scr_start = reader.position
    magic, _file_type, submesh_count, _padding = reader.read(_SCR_HEADER)
    if magic != SCR_MAGIC:
        raise FormatError(f"bad model magic 0x{magic:08X}")

    transform_offsets = reader.read_array("I", submesh_count)
    if len(transform_offsets) != submesh_count:
        raise FormatError("transform table runs past the end of the data")

    reader.seek_absolute(align_up(reader.position, _ALIGNMENT))

    group = ModelGroup(name)
    for _ in range(submesh_count):
        group.add_entry(_parse_model(reader))
        reader.seek_absolute(align_up(reader.position, _ALIGNMENT))

    for entry, offset in zip(group, transform_offsets):
        reader.seek_absolute(scr_start + offset)
        values = reader.read(_SCR_TRANSFORM)
        entry.scale = _floats(values[16:19])
        entry.rotation = _floats(values[19:22])
        entry.position = _floats(values[22:25])
    return group


def read_model_group(path: str | os.PathLike) -> ModelGroup:
    """Read an SCR file; the group is named after the file's stem."""
    return parse_model_group(read_binary(path), Path(path).stem)


def parse_objects(data: bytes) -> list[GameObject]:
    """Parse an object placement table; entries past the end of the data read as zeros."""
    reader = BinaryReader(data)
    count = reader.read("I")
    objects = []
    for _ in range(count):
        values = reader.read(_OBJ_ENTRY)
        objects.append(GameObject(
            id=values[0],
            category=values[1],
            scale=_floats(values[4:7]),
            rotation=_floats(values[7:10]),
            position=_floats(values[10:13]),
        ))
    return objects


def read_objects(path: str | os.PathLike) -> list[GameObject]:
    """Read an object placement file."""
    return parse_objects(read_binary(path))