"""Keyboard and mouse state tracked from frame to frame."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass

KEY_FIRST = 32
KEY_COUNT = 348
MOUSE_BUTTON_COUNT = 7


class KeyCode(enum.IntEnum):
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_SHIFT = 340
    LEFT_CTRL = 241
    RIGHT_SHIFT = 344
    RIGHT_CTRL = 245


class MouseCode(enum.IntEnum):
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Action(enum.IntEnum):
    """What the windowing layer reports for a key or button this frame."""

    RELEASE = 0
    PRESS = 1


class EventState(enum.Enum):
    NONE = enum.auto()
    DOWN = enum.auto()
    HELD = enum.auto()
    UP = enum.auto()


@dataclass
class _Record:
    current: EventState = EventState.NONE
    previous: EventState = EventState.NONE

    def advance(self, action: Action) -> None:
        self.previous = self.current
        if action is Action.PRESS:
            if self.current is not EventState.DOWN and self.previous is not EventState.HELD:
                self.current = EventState.DOWN
            else:
                self.current = EventState.HELD
        elif action is Action.RELEASE:
            if self.current is not EventState.UP and self.previous is EventState.HELD:
                self.current = EventState.UP
            else:
                self.current = EventState.NONE


def _lookup(records: list[_Record], code: int, what: str) -> _Record:
    if not 0 <= code < len(records):
        raise IndexError(f"{what} {code} is out of range")
    return records[code]


def _check_codes(actions: Mapping[int, Action], valid: range, what: str) -> None:
    for code in actions:
        if code not in valid:
            raise ValueError(f"{what} {code} is not tracked")


class InputState:
    """Per-frame state of every key and mouse button, plus the cursor position.

    A press turns into DOWN for one frame, then HELD; releasing a held key
    gives UP for one frame, then NONE.
    """

    def __init__(self) -> None:
        self._keys = [_Record() for _ in range(KEY_COUNT)]
        self._buttons = [_Record() for _ in range(MOUSE_BUTTON_COUNT)]
        self.mouse_x = 0.0
        self.mouse_y = 0.0

    @property
    def mouse_position(self) -> tuple[float, float]:
        return (self.mouse_x, self.mouse_y)

    def poll(
        self,
        key_actions: Mapping[int, Action] | None = None,
        mouse_actions: Mapping[int, Action] | None = None,
    ) -> None:
        """Advance one frame; keys and buttons not mentioned count as released."""
        key_actions = key_actions or {}
        mouse_actions = mouse_actions or {}
        key_range = range(KEY_FIRST, KEY_COUNT)
        button_range = range(MOUSE_BUTTON_COUNT)
        _check_codes(key_actions, key_range, "key")
        _check_codes(mouse_actions, button_range, "mouse button")

        for code in key_range:
            self._keys[code].advance(Action(key_actions.get(code, Action.RELEASE)))
        for code in button_range:
            self._buttons[code].advance(Action(mouse_actions.get(code, Action.RELEASE)))

    def key_down(self, key: int) -> bool:
        return _lookup(self._keys, key, "key").current is EventState.DOWN

    def key_held(self, key: int) -> bool:
        return _lookup(self._keys, key, "key").current is EventState.HELD

    def key_up(self, key: int) -> bool:
        return _lookup(self._keys, key, "key").current is EventState.UP

    def mouse_down(self, button: int) -> bool:
        return _lookup(self._buttons, button, "mouse button").current is EventState.DOWN

    def mouse_held(self, button: int) -> bool:
        return _lookup(self._buttons, button, "mouse button").current is EventState.HELD

    def mouse_up(self, button: int) -> bool:
        return _lookup(self._buttons, button, "mouse button").current is EventState.UP

    def set_mouse_position(self, x: float, y: float) -> None:
        self.mouse_x = float(x)
        self.mouse_y = float(y)