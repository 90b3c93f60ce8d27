"""Position, rotation and scale of an actor, with its local axes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from nippon.component import Component

WORLD_RIGHT = np.array([1.0, 0.0, 0.0])
WORLD_UP = np.array([0.0, 1.0, 0.0])
WORLD_FRONT = np.array([0.0, 0.0, 1.0])


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got shape {array.shape}")
    return array


def quaternion_from_euler(angles: Sequence[float]) -> np.ndarray:
    """Quaternion (w, x, y, z) from pitch, yaw and roll in radians."""
    half = np.asarray(angles, dtype=float) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array([
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    ])


def rotate_vector(quaternion: Sequence[float], vector: Sequence[float]) -> np.ndarray:
    """Rotate ``vector`` by the unit quaternion (w, x, y, z)."""
    w, *axis = quaternion
    u = np.array(axis, dtype=float)
    v = np.asarray(vector, dtype=float)
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def _axis_rotation(angle: float, axis: np.ndarray) -> np.ndarray:
    axis = axis / np.linalg.norm(axis)
    c, s = np.cos(angle), np.sin(angle)
    x, y, z = axis
    skew = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    matrix = np.eye(4)
    matrix[:3, :3] = c * np.eye(3) + s * skew + (1.0 - c) * np.outer(axis, axis)
    return matrix


class Transform(Component):
    """Placement of an actor; rotations are given in degrees and kept in radians."""

    def __init__(self, actor: Any) -> None:
        super().__init__(actor)
        self.local_right = WORLD_RIGHT.copy()
        self.local_up = WORLD_UP.copy()
        self.local_front = WORLD_FRONT.copy()
        self.position = np.zeros(3)
        self._rotation = np.zeros(3)
        self.scale = np.ones(3)

    @property
    def world_right(self) -> np.ndarray:
        return WORLD_RIGHT.copy()

    @property
    def world_up(self) -> np.ndarray:
        return WORLD_UP.copy()

    @property
    def world_front(self) -> np.ndarray:
        return WORLD_FRONT.copy()

    @property
    def rotation(self) -> np.ndarray:
        """Own rotation in degrees."""
        return np.degrees(self._rotation)

    @property
    def quaternion(self) -> np.ndarray:
        return quaternion_from_euler(self._rotation)

    def model_matrix(self) -> np.ndarray:
        """4x4 matrix: translate, rotate about x, y and z in turn, then scale."""
        translation = np.eye(4)
        translation[:3, 3] = self.position
        scaling = np.diag([*self.scale, 1.0])
        return (
            translation
            @ _axis_rotation(self._rotation[0], WORLD_RIGHT)
            @ _axis_rotation(self._rotation[1], WORLD_UP)
            @ _axis_rotation(self._rotation[2], WORLD_FRONT)
            @ scaling
        )

    def world_position(self) -> np.ndarray:
        """Own position added to every ancestor's position."""
        parent = getattr(self.actor, "parent", None)
        if parent is not None:
            return parent.transform.world_position() + self.position
        return self.position.copy()

    def world_rotation(self) -> np.ndarray:
        return np.degrees(self._rotation)

    def world_quaternion(self) -> np.ndarray:
        return quaternion_from_euler(self._rotation)

    def world_scale(self) -> np.ndarray:
        return self.scale.copy()

    def set_world_position(self, position: Sequence[float]) -> None:
        self.position = _vec3(position)

    def set_world_rotation(self, rotation: Sequence[float]) -> None:
        self._rotation = np.radians(_vec3(rotation))

    def set_world_scale(self, scale: Sequence[float]) -> None:
        self.scale = _vec3(scale)

    def set_local_position(self, position: Sequence[float]) -> None:
        self.position = _vec3(position)

    def set_local_rotation(self, rotation: Sequence[float]) -> None:
        """Set the rotation, turn the local axes with it and pass it on to the children."""
        self._rotation = np.radians(_vec3(rotation))
        self._refresh_local_axes()
        self._propagate_rotation()

    def set_local_scale(self, scale: Sequence[float]) -> None:
        """Set the scale and pass it on to the children."""
        self.scale = _vec3(scale)
        self._propagate_scale()

    def add_world_position(self, position: Sequence[float]) -> None:
        self.position = self.position + _vec3(position)

    def add_world_rotation(self, rotation: Sequence[float]) -> None:
        self._rotation = self._rotation + np.radians(_vec3(rotation))

    def add_world_scale(self, scale: Sequence[float]) -> None:
        self.scale = self.scale + _vec3(scale)

    def add_local_position(self, position: Sequence[float]) -> None:
        self.position = self.position + _vec3(position)

    def add_local_rotation(self, rotation: Sequence[float]) -> None:
        self._rotation = self._rotation + np.radians(_vec3(rotation))
        self._refresh_local_axes()
        self._propagate_rotation()

    def add_local_scale(self, scale: Sequence[float]) -> None:
        self.scale = self.scale + _vec3(scale)
        self._propagate_scale()

    def _refresh_local_axes(self) -> None:
        q = quaternion_from_euler(self._rotation)
        self.local_right = rotate_vector(q, WORLD_RIGHT)
        self.local_up = rotate_vector(q, WORLD_UP)
        self.local_front = rotate_vector(q, WORLD_FRONT)

    def _propagate_rotation(self) -> None:
        for child in self.actor:
            child.transform.set_local_rotation(self.rotation)

    def _propagate_scale(self) -> None:
        for child in self.actor:
            child.transform.set_local_scale(self.scale)