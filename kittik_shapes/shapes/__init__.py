"""Shape model, layout resolution and serialization."""

from .errors import (
    ShapeError,
    ValidationError,
    FormatError,
    TypeMismatchError,
    ParseError,
    LayoutError,
    OptionPathError,
)
from .store import OptionStore
from .layout import Viewport, Geometry, resolve_geometry
from .shape import Shape
from .encoder import ShapeEncoder
from .parser import ShapeParser
from .validator import ShapeValidator
from .variants import Rectangle, Text, SHAPE_VARIANTS, register_variant, load_shape

__all__ = [
    "ShapeError",
    "ValidationError",
    "FormatError",
    "TypeMismatchError",
    "ParseError",
    "LayoutError",
    "OptionPathError",
    "OptionStore",
    "Viewport",
    "Geometry",
    "resolve_geometry",
    "Shape",
    "ShapeEncoder",
    "ShapeParser",
    "ShapeValidator",
    "Rectangle",
    "Text",
    "SHAPE_VARIANTS",
    "register_variant",
    "load_shape",
]
