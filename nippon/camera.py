"""Perspective camera that looks along its actor's local front axis."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from nippon.component import Component
from nippon.window import Window


def _normalize(vector: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return vector / length


class Camera(Component):
    """Field of view in degrees and near and far clipping distances."""

    def __init__(self, actor: Any) -> None:
        super().__init__(actor)
        self.fov = 45.0
        self.near = 0.001
        self.far = 1000000.0

    def projection_matrix(self, window: Window | None = None) -> np.ndarray:
        """Right-handed perspective matrix with clip depth in [-1, 1]."""
        aspect = (window if window is not None else Window()).aspect_ratio()
        if aspect == 0:
            raise ValueError("aspect ratio must not be zero")
        tan_half = math.tan(math.radians(self.fov) / 2.0)
        matrix = np.zeros((4, 4))
        matrix[0, 0] = 1.0 / (aspect * tan_half)
        matrix[1, 1] = 1.0 / tan_half
        matrix[2, 2] = -(self.far + self.near) / (self.far - self.near)
        matrix[3, 2] = -1.0
        matrix[2, 3] = -(2.0 * self.far * self.near) / (self.far - self.near)
        return matrix

    def view_matrix(self) -> np.ndarray:
        """Right-handed look-at matrix from the actor's position along its local front."""
        transform = self.actor.transform
        eye = transform.world_position()
        forward = _normalize(np.asarray(transform.local_front, dtype=float))
        side = _normalize(np.cross(forward, transform.local_up))
        up = np.cross(side, forward)
        matrix = np.eye(4)
        matrix[0, :3] = side
        matrix[1, :3] = up
        matrix[2, :3] = -forward
        matrix[0, 3] = -side @ eye
        matrix[1, 3] = -up @ eye
        matrix[2, 3] = forward @ eye
        return matrix