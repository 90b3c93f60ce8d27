"""A loaded level: its objects, models and the actors built from them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from nippon.actor import Actor
from nippon.assets import GameObject, ModelDivision, ModelGroup
from nippon.camera import Camera
from nippon.component import Component
from nippon.events import InputState
from nippon.player import Player
from nippon.serializers import read_model_group, read_objects
from nippon.transform import Transform

A = TypeVar("A", bound=Actor)

OBJECT_EXTENSIONS = frozenset({".TSC", ".TRE", ".TAT"})
MODEL_EXTENSION = ".SCR"

_AXIS_EXTENT = 10000.0
_RED = (1.0, 0.0, 0.0, 1.0)
_GREEN = (0.0, 1.0, 0.0, 1.0)
_BLUE = (0.0, 0.0, 1.0, 1.0)
_WHITE = (1.0, 1.0, 1.0, 1.0)

Vec3 = tuple[float, float, float]
Color = tuple[float, float, float, float]


def _point(values) -> Vec3:
    return tuple(float(value) for value in values)  # type: ignore[return-value]


@dataclass(frozen=True)
class DebugLine:
    """A coloured line segment to draw over the scene for one frame."""

    start: Vec3
    end: Vec3
    color: Color


@dataclass(frozen=True)
class RenderTask:
    """A model division to draw with the given transform."""

    transform: Transform
    division: ModelDivision


class _Renderable(Component):
    """Links an actor to the model division it draws."""

    def __init__(self, actor: Any, division: ModelDivision | None = None) -> None:
        super().__init__(actor)
        self.division = division if division is not None else ModelDivision()


class Scene:
    """One level of one region, read from the unpack directory."""

    def __init__(
        self,
        unpack_dir: str | os.PathLike,
        region_id: str,
        level_id: str,
        input_state: InputState | None = None,
    ) -> None:
        self.unpack_dir = Path(unpack_dir)
        self.region_id = region_id
        self.level_id = level_id
        self.input = input_state if input_state is not None else InputState()

        self.actors: list[Actor] = []
        self.main_actor: Actor | None = None
        self.objects: list[GameObject] = []
        self.model_groups: list[ModelGroup] = []
        self.debug_lines: list[DebugLine] = []
        self.render_tasks: list[RenderTask] = []

        self._deserialize()

        self.main_actor = self.create_actor(Player, "Player", None, self.input)

        for group in self.model_groups:
            group_actor = self.create_actor(Actor, group.name, None)
            for entry in group:
                entry_actor = self.create_actor(Actor, str(entry.id), group_actor)
                transform = entry_actor.transform
                transform.set_world_position(entry.position)
                transform.set_world_rotation(entry.rotation)
                transform.set_world_scale(entry.scale)
                for division in entry:
                    division_actor = self.create_actor(Actor, "Division", entry_actor)
                    division_actor.attach_component(_Renderable, division)

    @property
    def level_dir(self) -> Path:
        return self.unpack_dir / "levels" / self.region_id / self.level_id

    def add_object(self, obj: GameObject) -> None:
        self.objects.append(obj)

    def add_model_group(self, group: ModelGroup) -> None:
        self.model_groups.append(group)

    def create_actor(self, actor_type: type[A], name: str, parent: Actor | None, *args: Any) -> A:
        """Create an actor, register it with the scene and hang it below ``parent``."""
        actor = actor_type(name, *args)
        self.actors.append(actor)
        if parent is not None:
            actor.parent = parent
            parent.add_child(actor)
        return actor

    def destroy_actor(self, actor: Actor) -> None:
        """Forget ``actor``; an actor that is not in the scene is ignored."""
        if actor in self.actors:
            self.actors.remove(actor)
            if actor is self.main_actor:
                self.main_actor = None

    def main_camera(self) -> Camera | None:
        if self.main_actor is None:
            return None
        return self.main_actor.get_component(Camera)

    def update(self, time_delta: float) -> None:
        """Update every actor and collect this frame's render tasks and debug lines."""
        self.debug_lines = [
            DebugLine((-_AXIS_EXTENT, 0.0, 0.0), (_AXIS_EXTENT, 0.0, 0.0), _RED),
            DebugLine((0.0, -_AXIS_EXTENT, 0.0), (0.0, _AXIS_EXTENT, 0.0), _GREEN),
            DebugLine((0.0, 0.0, -_AXIS_EXTENT), (0.0, 0.0, _AXIS_EXTENT), _BLUE),
        ]
        self.render_tasks = []

        for actor in list(self.actors):
            actor.update(time_delta)

            transform = actor.transform
            renderable = actor.get_component(_Renderable)
            if transform is not None and renderable is not None:
                self.render_tasks.append(RenderTask(transform, renderable.division))

            if actor is self.main_actor:
                continue

            origin = transform.world_position()
            axes = (
                (transform.world_right, _RED),
                (transform.world_up, _GREEN),
                (transform.world_front, _BLUE),
                (transform.local_right, _RED),
                (transform.local_up, _GREEN),
                (transform.local_front, _BLUE),
            )
            for axis, color in axes:
                self.debug_lines.append(DebugLine(_point(origin), _point(origin + axis), color))

            if actor.parent is not None:
                self.debug_lines.append(DebugLine(_point(origin), _point(origin), _WHITE))

    def _deserialize(self) -> None:
        for file in sorted(self.level_dir.iterdir()):
            if file.suffix in OBJECT_EXTENSIONS:
                for obj in read_objects(file):
                    self.add_object(obj)
            if file.suffix == MODEL_EXTENSION:
                self.add_model_group(read_model_group(file))