"""Shape deserialization from object and JSON representations."""

import json
import logging
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar

from ..config import OPTIONS_FIELD, TAG_FIELD
from .errors import FormatError, ParseError, ShapeError, TypeMismatchError

logger = logging.getLogger(__name__)

S = TypeVar("S")


class ShapeParser:
    """Parser for shape object and JSON representations."""

    @staticmethod
    def check_object(obj: Any) -> Tuple[str, Mapping[str, Any]]:
        """
        Check the envelope of an object representation.

        Returns:
            The variant tag and the options mapping

        Raises:
            FormatError: If the tag or the options are missing
        """
        if (
            not isinstance(obj, Mapping)
            or not obj.get(TAG_FIELD)
            or not isinstance(obj.get(OPTIONS_FIELD), Mapping)
        ):
            raise FormatError("It looks like it is not an Object representation of the shape")
        return obj[TAG_FIELD], obj[OPTIONS_FIELD]

    @staticmethod
    def from_object(shape_cls: Type[S], obj: Any) -> S:
        """
        Create a shape of ``shape_cls`` from its object representation.

        Args:
            shape_cls: The variant expected in ``obj``
            obj: Output of ``Shape.to_object()``

        Returns:
            A new ``shape_cls`` instance built from ``obj["options"]``

        Raises:
            FormatError: If ``obj`` is not a shape representation
            TypeMismatchError: If ``obj`` was produced by another variant
        """
        tag, options = ShapeParser.check_object(obj)
        if tag != shape_cls.__name__:
            raise TypeMismatchError(tag, shape_cls.__name__)
        return shape_cls(options)

    @staticmethod
    def decode(text: str) -> Any:
        """Decode JSON text, raising ParseError when it is malformed."""
        try:
            return json.loads(text)
        except (TypeError, ValueError) as e:
            logger.debug("Rejected shape JSON: %s", e)
            raise ParseError(f"Malformed shape JSON: {e}") from e

    @staticmethod
    def from_json(shape_cls: Type[S], text: str) -> S:
        """Create a shape of ``shape_cls`` from its JSON representation."""
        return ShapeParser.from_object(shape_cls, ShapeParser.decode(text))

    @staticmethod
    def validate(text: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a JSON representation against the variant it names.

        Returns:
            A tuple of (is_valid, error_message)
        """
        from .variants import load_shape

        try:
            load_shape(text)
            return True, None
        except ShapeError as e:
            return False, str(e)

    @staticmethod
    def normalize(text: str) -> str:
        """
        Normalize a JSON representation (parse and re-encode).

        Missing options are filled in with their defaults.
        """
        from .variants import load_shape

        return load_shape(text).to_json()
