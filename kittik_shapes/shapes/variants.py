"""Reference shape variants and the variant registry."""

import logging
import math
from typing import Any, Dict, Type, TypeVar, Union, Mapping

from .errors import FormatError
from .parser import ShapeParser
from .shape import Shape

logger = logging.getLogger(__name__)

SHAPE_VARIANTS: Dict[str, Type[Shape]] = {}

T = TypeVar("T", bound=Type[Shape])


def register_variant(shape_cls: T) -> T:
    """Register a shape class so :func:`load_shape` can rebuild it by name."""
    SHAPE_VARIANTS[shape_cls.__name__] = shape_cls
    return shape_cls


def load_shape(data: Union[str, Mapping[str, Any]]) -> Shape:
    """
    Rebuild a shape of whichever registered variant ``data`` names.

    Args:
        data: Object representation or its JSON text

    Raises:
        ParseError: If ``data`` is malformed JSON text
        FormatError: If ``data`` is not a shape representation or names
            an unregistered variant
    """
    obj = ShapeParser.decode(data) if isinstance(data, str) else data
    tag, _ = ShapeParser.check_object(obj)
    shape_cls = SHAPE_VARIANTS.get(tag)
    if shape_cls is None:
        known = ", ".join(sorted(SHAPE_VARIANTS))
        raise FormatError(f"{tag} is not a registered shape variant (known: {known})")
    return shape_cls.from_object(obj)


register_variant(Shape)


def _apply_colors(shape: Shape, target) -> None:
    target.reset()
    if shape.get_background() is not None:
        target.background(shape.get_background())
    if shape.get_foreground() is not None:
        target.foreground(shape.get_foreground())


@register_variant
class Rectangle(Shape):
    """Filled rectangle with its text centered inside."""

    def render(self, target) -> "Rectangle":
        geometry = self.get_geometry(target.viewport)
        text = self.get_text()
        filler = " " * max(math.floor(geometry.width), 0)

        logger.debug("Rendering %s at %s", type(self).__name__, geometry)
        _apply_colors(self, target)

        for row in range(max(math.floor(geometry.height), 0)):
            target.move_to(geometry.x, geometry.y + row).write(filler)

        target.move_to(
            geometry.x + (geometry.width / 2 - len(text) / 2),
            geometry.y + geometry.height / 2,
        ).write(text)

        return self


@register_variant
class Text(Shape):
    """Plain text written at the shape's position."""

    def render(self, target) -> "Text":
        viewport = target.viewport
        _apply_colors(self, target)
        target.move_to(self.get_x(viewport), self.get_y(viewport)).write(self.get_text())
        return self
