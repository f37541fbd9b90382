"""In-memory drawing target backed by numpy grids."""

import logging
import math
from typing import Any, List, Optional, Tuple

import numpy as np

from ..shapes.layout import Viewport
from .base import DrawingTarget

logger = logging.getLogger(__name__)

BLANK = " "


class TextCanvas(DrawingTarget):
    """
    Character grid the size of a viewport.

    Fractional coordinates are floored to whole cells and anything written
    outside the grid is clipped. Each cell keeps the foreground and
    background tokens that were active when it was written.
    """

    def __init__(self, columns: int = 80, rows: int = 24):
        """
        Initialize the canvas.

        Args:
            columns: Width of the grid in cells
            rows: Height of the grid in cells
        """
        if columns < 0 or rows < 0:
            raise ValueError(f"Canvas size must be non-negative: {columns}x{rows}")
        self._viewport = Viewport(columns, rows)
        self.chars = np.full((rows, columns), BLANK, dtype="<U1")
        self.fg = np.full((rows, columns), None, dtype=object)
        self.bg = np.full((rows, columns), None, dtype=object)
        self.cursor: Tuple[int, int] = (1, 1)
        self._foreground: Any = None
        self._background: Any = None

    @classmethod
    def for_viewport(cls, viewport: Viewport) -> "TextCanvas":
        return cls(viewport.columns, viewport.rows)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def move_to(self, x: float, y: float) -> "TextCanvas":
        self.cursor = (math.floor(x), math.floor(y))
        return self

    def write(self, text: str) -> "TextCanvas":
        x, y = self.cursor
        row = y - 1
        if 0 <= row < self._viewport.rows:
            for offset, char in enumerate(text):
                col = x - 1 + offset
                if 0 <= col < self._viewport.columns:
                    self.chars[row, col] = char
                    self.fg[row, col] = self._foreground
                    self.bg[row, col] = self._background
        self.cursor = (x + len(text), y)
        return self

    def background(self, color: Any) -> "TextCanvas":
        self._background = color
        return self

    def foreground(self, color: Any) -> "TextCanvas":
        self._foreground = color
        return self

    def cell(self, x: int, y: int) -> Tuple[str, Optional[Any], Optional[Any]]:
        """Get ``(char, foreground, background)`` of a 1-based cell."""
        return self.chars[y - 1, x - 1], self.fg[y - 1, x - 1], self.bg[y - 1, x - 1]

    def lines(self) -> List[str]:
        """Get the grid as one string per row."""
        return ["".join(row) for row in self.chars]

    def clear(self) -> "TextCanvas":
        self.chars.fill(BLANK)
        self.fg.fill(None)
        self.bg.fill(None)
        self.cursor = (1, 1)
        return self.reset()

    def flush(self) -> str:
        """Return the grid as text, trailing blanks stripped per row."""
        logger.debug("Flushing %r", self)
        return "\n".join(line.rstrip() for line in self.lines())
