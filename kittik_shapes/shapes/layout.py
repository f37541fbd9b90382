"""
Resolution of symbolic geometry into absolute terminal cells.

Width and height are resolved first; ``x`` and ``y`` may depend on them
("center", "right", ...) but never the other way round. Nothing here reads
the terminal: the viewport is always passed in, and nothing here writes to a
shape. Results are not rounded, flooring to whole cells is left to the
drawing target.
"""

import re
import shutil
from dataclasses import dataclass
from typing import Any, Optional, Union, TYPE_CHECKING

from ..config import ORIGIN
from .errors import LayoutError

if TYPE_CHECKING:
    from .shape import Shape

Number = Union[int, float]

PERCENTAGE_PATTERN = re.compile(r"(\d+)%")


@dataclass(frozen=True)
class Viewport:
    """Terminal size in columns and rows."""
    columns: int
    rows: int

    @classmethod
    def from_terminal(cls, fallback: tuple = (80, 24)) -> "Viewport":
        """Read the size of the controlling terminal."""
        size = shutil.get_terminal_size(fallback)
        return cls(size.columns, size.lines)


@dataclass(frozen=True)
class Geometry:
    """Absolute geometry of a shape for one viewport."""
    width: Number
    height: Number
    x: Number
    y: Number


def parse_percentage(value: Any) -> Optional[int]:
    """Return the digits of a ``"<digits>%"`` token, or None."""
    if not isinstance(value, str):
        return None
    match = PERCENTAGE_PATTERN.fullmatch(value)
    if match is None:
        return None
    return int(match.group(1))


def is_symbolic(value: Any) -> bool:
    """Check if resolving ``value`` requires a viewport."""
    return isinstance(value, str)


def _size(size: Any) -> Any:
    return size() if callable(size) else size


def _require(viewport: Optional[Viewport], attribute: str, value: Any) -> Viewport:
    if viewport is None:
        raise LayoutError(f"Cannot resolve {attribute}={value!r} without a viewport")
    return viewport


def resolve_dimension(value: Any, extent: int) -> Any:
    """Resolve a dimension against one viewport extent."""
    percent = parse_percentage(value)
    if percent is not None:
        return percent * extent / 100
    return value


def resolve_width(value: Any, viewport: Optional[Viewport]) -> Any:
    """Resolve a width; percentages are taken of the columns."""
    if parse_percentage(value) is None:
        return value
    return resolve_dimension(value, _require(viewport, "width", value).columns)


def resolve_height(value: Any, viewport: Optional[Viewport]) -> Any:
    """Resolve a height; percentages are taken of the rows."""
    if parse_percentage(value) is None:
        return value
    return resolve_dimension(value, _require(viewport, "height", value).rows)


def resolve_x(value: Any, width: Any, viewport: Optional[Viewport]) -> Any:
    """
    Resolve an x coordinate.

    Args:
        value: Stored x value (number, percentage or keyword)
        width: The shape's resolved width, or a callable returning it;
            only called for "center" and "right"
        viewport: Current terminal size

    Returns:
        The absolute column, or ``value`` unchanged when it is not symbolic
    """
    if value == "left":
        return ORIGIN
    if not is_symbolic(value):
        return value

    if value == "center":
        columns = _require(viewport, "x", value).columns
        return columns / 2 - _size(width) / 2
    if value == "right":
        columns = _require(viewport, "x", value).columns
        return columns - _size(width)

    percent = parse_percentage(value)
    if percent is not None:
        return percent * _require(viewport, "x", value).columns / 100

    return value


def resolve_y(value: Any, height: Any, viewport: Optional[Viewport]) -> Any:
    """Resolve a y coordinate; mirrors :func:`resolve_x` over rows."""
    if value == "top":
        return ORIGIN
    if not is_symbolic(value):
        return value

    if value == "middle":
        rows = _require(viewport, "y", value).rows
        return rows / 2 - _size(height) / 2
    if value == "bottom":
        rows = _require(viewport, "y", value).rows
        return rows - _size(height)

    percent = parse_percentage(value)
    if percent is not None:
        return percent * _require(viewport, "y", value).rows / 100

    return value


def resolve_geometry(shape: "Shape", viewport: Optional[Viewport]) -> Geometry:
    """Resolve all four geometry attributes of ``shape``."""
    width = resolve_width(shape.get("width"), viewport)
    height = resolve_height(shape.get("height"), viewport)
    x = resolve_x(shape.get("x"), width, viewport)
    y = resolve_y(shape.get("y"), height, viewport)
    return Geometry(width=width, height=height, x=x, y=y)
