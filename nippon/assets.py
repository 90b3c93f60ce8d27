"""In-memory assets of a level: static models and placed objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_ELEMENT_MASK = 0xFFFF


@dataclass(frozen=True)
class DefaultVertex:
    """A model vertex: position, texture mapping, texture coordinates and colour weight."""

    position: Vec3 = (0.0, 0.0, 0.0)
    texture_map: Vec2 = (0.0, 0.0)
    texture_uv: Vec2 = (0.0, 0.0)
    color_weight: int = 0


@dataclass
class ModelDivision:
    """One drawable part of a model: vertices and the triangle indices into them."""

    vertices: list[DefaultVertex] = field(default_factory=list)
    elements: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def element_count(self) -> int:
        return len(self.elements)

    def add_vertex(self, vertex: DefaultVertex) -> None:
        self.vertices.append(vertex)

    def add_element(self, element: int) -> None:
        """Append a triangle index; indices are 16-bit and wrap accordingly."""
        self.elements.append(element & _ELEMENT_MASK)


@dataclass
class ModelEntry:
    """A sub-mesh with its placement and divisions."""

    id: int
    type: int
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (0.0, 0.0, 0.0)
    divisions: list[ModelDivision] = field(default_factory=list)

    def add_division(self, division: ModelDivision) -> None:
        self.divisions.append(division)

    def __iter__(self) -> Iterator[ModelDivision]:
        return iter(self.divisions)

    def __getitem__(self, index: int) -> ModelDivision:
        return self.divisions[index]

    def __len__(self) -> int:
        return len(self.divisions)


@dataclass
class ModelGroup:
    """All sub-meshes read from one model file."""

    name: str
    entries: list[ModelEntry] = field(default_factory=list)

    def add_entry(self, entry: ModelEntry) -> None:
        self.entries.append(entry)

    def __iter__(self) -> Iterator[ModelEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> ModelEntry:
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class GameObject:
    """An object placed in a level."""

    id: int = 0
    category: int = 0
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (0.0, 0.0, 0.0)