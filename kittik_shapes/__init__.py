"""kittik_shapes - base shape model for terminal rendering."""

from kittik_shapes.shapes import (
    Shape,
    Rectangle,
    Text,
    Viewport,
    Geometry,
    ShapeError,
    ValidationError,
    FormatError,
    TypeMismatchError,
    ParseError,
    LayoutError,
    OptionPathError,
    load_shape,
)
from kittik_shapes.render import DrawingTarget, TextCanvas

__version__ = "1.0.0"
