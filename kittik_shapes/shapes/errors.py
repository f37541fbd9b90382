"""Exceptions raised by the shape model."""

from typing import Any


class ShapeError(Exception):
    """Base class for every error raised by kittik_shapes."""


class ValidationError(ShapeError, ValueError):
    """A validated setter received a value outside its enumeration."""

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        super().__init__(message or f"Unknown align type: {value}")


class FormatError(ShapeError, ValueError):
    """Input is not an object representation of a shape."""


class TypeMismatchError(FormatError):
    """Object representation belongs to a different shape variant."""

    def __init__(self, actual: Any, expected: str, message: str = ""):
        self.actual = actual
        self.expected = expected
        super().__init__(message or f"{actual} is not an Object representation of the {expected}")


class ParseError(FormatError):
    """JSON text could not be decoded."""


class LayoutError(ShapeError, ValueError):
    """A symbolic geometry value was read without a viewport."""


class OptionPathError(ShapeError, TypeError):
    """A dot path runs through a stored value that is not a mapping."""
