"""Base class of everything that can be attached to an actor."""

from __future__ import annotations

from typing import Any


class Component:
    """A piece of behaviour or data owned by one actor."""

    def __init__(self, actor: Any) -> None:
        self.actor = actor