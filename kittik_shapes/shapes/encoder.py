"""Shape serialization: object snapshots and JSON text."""

import copy
import json
from typing import Any, Dict, TYPE_CHECKING

from ..config import OPTION_NAMES, OPTIONS_FIELD, TAG_FIELD

if TYPE_CHECKING:
    from .shape import Shape


class ShapeEncoder:
    """Encoder for shape object and JSON representations."""

    @staticmethod
    def to_object(shape: "Shape") -> Dict[str, Any]:
        """
        Encode a shape into its object representation.

        Stored values are used rather than resolved ones, so percentages and
        keywords survive and the snapshot stays valid for any viewport.

        Args:
            shape: The shape to encode

        Returns:
            ``{"name": <variant>, "options": {...}}`` with every recognized
            option, including those that are None
        """
        options = {name: copy.deepcopy(shape.get(name)) for name in OPTION_NAMES}
        return {TAG_FIELD: type(shape).__name__, OPTIONS_FIELD: options}

    @staticmethod
    def to_json(shape: "Shape") -> str:
        """Encode a shape as compact JSON, omitting None-valued options."""
        return json.dumps(ShapeEncoder._drop_none(ShapeEncoder.to_object(shape)),
                          separators=(",", ":"))

    @staticmethod
    def _drop_none(value: Any) -> Any:
        if isinstance(value, dict):
            return {
                key: ShapeEncoder._drop_none(item)
                for key, item in value.items()
                if item is not None
            }
        if isinstance(value, list):
            return [ShapeEncoder._drop_none(item) for item in value]
        return value

    @staticmethod
    def format_for_display(shape: "Shape", multiline: bool = False) -> str:
        """
        Format a shape for human-readable display.

        Args:
            shape: The shape to format
            multiline: If True, show each option on a separate line

        Returns:
            Formatted string representation
        """
        obj = ShapeEncoder.to_object(shape)
        options = {k: v for k, v in obj[OPTIONS_FIELD].items() if v is not None}

        if not multiline:
            body = ", ".join(f"{key}={value!r}" for key, value in options.items())
            return f"{obj[TAG_FIELD]}({body})"

        lines = [f"{obj[TAG_FIELD]}:"]
        width = max(len(key) for key in options) if options else 0
        for key, value in options.items():
            lines.append(f"  {key:<{width}} : {value!r}")
        return "\n".join(lines)
