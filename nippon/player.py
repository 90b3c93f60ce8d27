"""The editor's free-flying viewpoint actor, steered with keyboard and mouse."""

from __future__ import annotations

import numpy as np

from nippon.actor import Actor
from nippon.camera import Camera
from nippon.events import InputState, KeyCode, MouseCode

_PITCH_LIMIT = 90.0


class Player(Actor):
    """An actor carrying the main camera.

    WASD move along the local axes and E and Q along the world up axis;
    holding shift moves faster. Dragging with the right button turns the
    view, and dragging with both buttons pans it.
    """

    def __init__(self, name: str, input_state: InputState | None = None) -> None:
        super().__init__(name)
        self.input = input_state if input_state is not None else InputState()
        self.camera: Camera = self.attach_component(Camera)

        self.keyboard_speed_normal = 0.05
        self.keyboard_speed_fast = 2.0
        self.mouse_speed_normal = 0.005
        self.mouse_speed_fast = 0.2
        self.mouse_rotation_speed = 0.045
        self.mouse_drag_damping = 0.2

        self._mouse_start = np.zeros(2)
        self._mouse_delta = np.zeros(2)

    def update(self, time_delta: float) -> None:
        """Apply this frame's input to the player's transform."""
        state = self.input
        transform = self.transform
        fast = state.key_held(KeyCode.LEFT_SHIFT)

        keyboard_speed = self.keyboard_speed_fast if fast else self.keyboard_speed_normal
        moves = (
            (KeyCode.D, -transform.local_right),
            (KeyCode.A, transform.local_right),
            (KeyCode.E, transform.world_up),
            (KeyCode.Q, -transform.world_up),
            (KeyCode.W, transform.local_front),
            (KeyCode.S, -transform.local_front),
        )
        for key, direction in moves:
            if state.key_held(key):
                transform.add_world_position(direction * keyboard_speed)

        mouse = np.array(state.mouse_position, dtype=float)

        if state.mouse_down(MouseCode.RIGHT):
            self._mouse_start = mouse.copy()

        if state.mouse_held(MouseCode.RIGHT) and state.mouse_held(MouseCode.LEFT):
            self._mouse_delta = self._mouse_start - mouse
            mouse_speed = self.mouse_speed_fast if fast else self.mouse_speed_normal
            position = transform.world_position()
            position = position + transform.local_right * self._mouse_delta[0] * mouse_speed
            position = position + transform.world_up * self._mouse_delta[1] * mouse_speed
            transform.set_world_position(position)
        elif state.mouse_held(MouseCode.RIGHT):
            self._mouse_delta = self._mouse_start - mouse
            rotation = transform.world_rotation()
            rotation[0] -= self._mouse_delta[1] * self.mouse_rotation_speed
            rotation[1] += self._mouse_delta[0] * self.mouse_rotation_speed
            rotation[0] = min(max(rotation[0], -_PITCH_LIMIT), _PITCH_LIMIT)
            transform.set_local_rotation(rotation)

        self._mouse_start = self._mouse_start - self._mouse_delta * self.mouse_drag_damping