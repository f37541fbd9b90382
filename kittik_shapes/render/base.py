"""Drawing target interface consumed by shape variants."""

from abc import ABC, abstractmethod
from typing import Any

from ..shapes.layout import Viewport


class DrawingTarget(ABC):
    """
    Abstract cursor-style drawing backend.

    Coordinates are 1-based terminal cells. Movement and write calls return
    the target so they can be chained, e.g. ``target.move_to(1, 1).write("hi")``.
    Color values are opaque tokens taken straight from the shape.
    """

    @property
    @abstractmethod
    def viewport(self) -> Viewport:
        """Get the size the target draws into."""
        pass

    @abstractmethod
    def move_to(self, x: float, y: float) -> "DrawingTarget":
        """Move the cursor to an absolute cell."""
        pass

    @abstractmethod
    def write(self, text: str) -> "DrawingTarget":
        """Write text at the cursor and advance it."""
        pass

    @abstractmethod
    def background(self, color: Any) -> "DrawingTarget":
        """Set the background color for subsequent writes."""
        pass

    @abstractmethod
    def foreground(self, color: Any) -> "DrawingTarget":
        """Set the foreground color for subsequent writes."""
        pass

    def reset(self) -> "DrawingTarget":
        """Clear the current colors."""
        return self.background(None).foreground(None)

    @abstractmethod
    def flush(self) -> Any:
        """Emit everything drawn so far."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.viewport.columns}x{self.viewport.rows})"
