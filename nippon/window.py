"""Size of the editor's main window."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WIDTH = 1920.0
DEFAULT_HEIGHT = 1080.0


@dataclass
class Window:
    """Width and height of the drawing surface, in pixels."""

    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def aspect_ratio(self) -> float:
        """Width divided by height."""
        if self.height == 0:
            raise ValueError("window height is zero; the aspect ratio is undefined")
        return self.width / self.height