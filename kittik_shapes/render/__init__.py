"""Drawing targets for shape variants."""

from .base import DrawingTarget
from .canvas import TextCanvas

__all__ = ["DrawingTarget", "TextCanvas"]
