"""Base shape: option storage, typed accessors and the render contract."""

import copy
import logging
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from ..config import (
    ALIGN_X_VALUES,
    ALIGN_Y_VALUES,
    DEFAULT_ALIGN,
    DEFAULT_HEIGHT,
    DEFAULT_TEXT,
    DEFAULT_WIDTH,
    DEFAULT_X,
    DEFAULT_Y,
    OPTION_NAMES,
)
from .encoder import ShapeEncoder
from .errors import ValidationError
from .layout import (
    Geometry,
    Viewport,
    resolve_geometry,
    resolve_height,
    resolve_width,
    resolve_x,
    resolve_y,
)
from .parser import ShapeParser
from .store import OptionStore

if TYPE_CHECKING:
    from ..render.base import DrawingTarget

logger = logging.getLogger(__name__)


class Shape:
    """
    Base class for drawable shapes.

    Every concrete shape subclasses it and implements :meth:`render`::

        class Rectangle(Shape):
            def render(self, target):
                ...
                return self

    Options are kept in an :class:`OptionStore`; getters read through it on
    every call and setters write through it and return the shape so calls can
    be chained. Geometry getters take the viewport explicitly.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None):
        """
        Initialize the shape.

        Args:
            options: Mapping with any of ``text``, ``width``, ``height``,
                ``x``, ``y``, ``alignX``, ``alignY``, ``background``,
                ``foreground`` and ``animation``. Missing keys get defaults.
        """
        options = dict(options or {})
        self._store = OptionStore()

        unknown = set(options) - set(OPTION_NAMES)
        if unknown:
            logger.debug("%s ignoring unknown options: %s",
                         type(self).__name__, ", ".join(sorted(unknown)))

        self.set_text(options.get("text"))
        self.set_width(options.get("width"))
        self.set_height(options.get("height"))
        self.set_x(options.get("x"))
        self.set_y(options.get("y"))
        self.set_align_x(options.get("alignX"))
        self.set_align_y(options.get("alignY"))
        self.set_background(options.get("background"))
        self.set_foreground(options.get("foreground"))
        self.set_animation(options.get("animation"))

    # ------------------------------------------------------------------
    # Option store
    # ------------------------------------------------------------------

    def get(self, path: str) -> Any:
        """Get an option value by dot-separated path."""
        return self._store.get(path)

    def set(self, path: str, value: Any) -> "Shape":
        """Set an option value by dot-separated path."""
        self._store.set(path, value)
        return self

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def get_text(self) -> str:
        return self.get("text")

    def set_text(self, text: Optional[str] = None) -> "Shape":
        return self.set("text", DEFAULT_TEXT if text is None else text)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def get_width(self, viewport: Optional[Viewport] = None):
        """Width in cells; percentages are resolved against the columns."""
        return resolve_width(self.get("width"), viewport)

    def set_width(self, width=None) -> "Shape":
        return self.set("width", DEFAULT_WIDTH if width is None else width)

    def get_height(self, viewport: Optional[Viewport] = None):
        """Height in cells; percentages are resolved against the rows."""
        return resolve_height(self.get("height"), viewport)

    def set_height(self, height=None) -> "Shape":
        return self.set("height", DEFAULT_HEIGHT if height is None else height)

    def get_x(self, viewport: Optional[Viewport] = None):
        """
        Absolute column of the shape.

        ``"left"`` is 1, ``"center"`` and ``"right"`` depend on the resolved
        width, percentages are taken of the columns.
        """
        return resolve_x(self.get("x"), lambda: self.get_width(viewport), viewport)

    def set_x(self, x=None) -> "Shape":
        return self.set("x", DEFAULT_X if x is None else x)

    def get_y(self, viewport: Optional[Viewport] = None):
        """Absolute row of the shape; see :meth:`get_x`."""
        return resolve_y(self.get("y"), lambda: self.get_height(viewport), viewport)

    def set_y(self, y=None) -> "Shape":
        return self.set("y", DEFAULT_Y if y is None else y)

    def get_geometry(self, viewport: Optional[Viewport] = None) -> Geometry:
        """Resolve width, height, x and y in one pass."""
        return resolve_geometry(self, viewport)

    # ------------------------------------------------------------------
    # Alignment
    # ------------------------------------------------------------------

    def get_align_x(self) -> str:
        return self.get("alignX")

    def set_align_x(self, align: Optional[str] = None) -> "Shape":
        """Set horizontal alignment, one of none/left/center/right."""
        align = DEFAULT_ALIGN if align is None else align
        if align not in ALIGN_X_VALUES:
            raise ValidationError(align)
        return self.set("alignX", align)

    def get_align_y(self) -> str:
        return self.get("alignY")

    def set_align_y(self, align: Optional[str] = None) -> "Shape":
        """Set vertical alignment, one of none/top/middle/bottom."""
        align = DEFAULT_ALIGN if align is None else align
        if align not in ALIGN_Y_VALUES:
            raise ValidationError(align)
        return self.set("alignY", align)

    def is_aligned(self) -> bool:
        return self.get_align_x() != DEFAULT_ALIGN or self.get_align_y() != DEFAULT_ALIGN

    # ------------------------------------------------------------------
    # Colors (opaque tokens)
    # ------------------------------------------------------------------

    def get_background(self) -> Any:
        return self.get("background")

    def set_background(self, background: Any = None) -> "Shape":
        return self.set("background", background)

    def get_foreground(self) -> Any:
        return self.get("foreground")

    def set_foreground(self, foreground: Any = None) -> "Shape":
        return self.set("foreground", foreground)

    # ------------------------------------------------------------------
    # Animation intent
    # ------------------------------------------------------------------

    def get_animation(self) -> Optional[Dict[str, Any]]:
        return self.get("animation")

    def set_animation(self, animation: Optional[Dict[str, Any]] = None) -> "Shape":
        """Set animation intent: ``{"name": ..., "options": {...}}``."""
        return self.set("animation", copy.deepcopy(animation))

    def get_animation_name(self) -> Optional[str]:
        return self.get("animation.name")

    def set_animation_name(self, name: Optional[str]) -> "Shape":
        return self.set("animation.name", name)

    def get_animation_options(self) -> Optional[Dict[str, Any]]:
        return self.get("animation.options")

    def set_animation_options(self, options: Optional[Dict[str, Any]]) -> "Shape":
        return self.set("animation.options", copy.deepcopy(options))

    def is_animated(self) -> bool:
        return bool(self.get_animation_name())

    # ------------------------------------------------------------------
    # Render contract
    # ------------------------------------------------------------------

    def render(self, target: "DrawingTarget") -> "Shape":
        """
        Draw the shape on ``target``.

        Must be overridden by every concrete shape; implementations return
        the shape itself.

        Raises:
            NotImplementedError: Always, on the base class
        """
        raise NotImplementedError("render() method must be implemented")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_object(self) -> Dict[str, Any]:
        """Plain dict representation tagged with the variant name."""
        return ShapeEncoder.to_object(self)

    def to_json(self) -> str:
        """JSON representation; None-valued options are left out."""
        return ShapeEncoder.to_json(self)

    @classmethod
    def create(cls, *args, **kwargs) -> "Shape":
        """Alternate constructor, usable on any subclass."""
        return cls(*args, **kwargs)

    @classmethod
    def from_object(cls, obj: Mapping[str, Any]) -> "Shape":
        """Build a shape of this variant from :meth:`to_object` output."""
        return ShapeParser.from_object(cls, obj)

    @classmethod
    def from_json(cls, text: str) -> "Shape":
        """Build a shape of this variant from :meth:`to_json` output."""
        return ShapeParser.from_json(cls, text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return False
        return type(self) is type(other) and self._store == other._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store.to_dict()!r})"
