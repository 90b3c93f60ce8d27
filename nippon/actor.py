"""Named scene objects that own components and children."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from nippon.component import Component
from nippon.transform import Transform

C = TypeVar("C", bound=Component)


class Actor:
    """A node of the scene tree with at most one component of each type."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[Actor] = []
        self.parent: Actor | None = None
        self.elapsed: float = 0.0
        self._components: dict[type, Component] = {}
        self.transform: Transform = self.attach_component(Transform)

    def __iter__(self) -> Iterator[Actor]:
        return iter(self.children)

    @property
    def is_child(self) -> bool:
        """True when the actor has no children of its own (a leaf)."""
        return not self.children

    @property
    def has_no_parent(self) -> bool:
        return self.parent is None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def components(self) -> Mapping[type, Component]:
        return MappingProxyType(self._components)

    def update(self, time_delta: float) -> None:
        """Advance the actor by ``time_delta`` seconds, accumulating its elapsed time."""
        self.elapsed += time_delta

    def add_child(self, child: Actor) -> None:
        self.children.append(child)

    def remove_child(self, child: Actor) -> None:
        """Remove ``child``; raises ValueError if it is not a child."""
        self.children.remove(child)

    def attach_component(self, component_type: type[C], *args: Any) -> C:
        """Attach a new component of this type, or return the one already attached."""
        existing = self._components.get(component_type)
        if existing is not None:
            return existing  # type: ignore[return-value]
        component = component_type(self, *args)
        self._components[component_type] = component
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        return self._components.get(component_type)  # type: ignore[return-value]