"""Advisory checks over a shape's stored options."""

from typing import Any, List, Tuple

from ..config import X_KEYWORDS, Y_KEYWORDS
from .layout import parse_percentage
from .shape import Shape


class ShapeValidator:
    """
    Validator for values the accessors accept without checking.

    Only alignment is enforced at set time; everything else is stored as
    given. This reports what the layout resolver or a drawing target would
    trip over, without raising.
    """

    KEYWORDS = {
        "width": (),
        "height": (),
        "x": X_KEYWORDS,
        "y": Y_KEYWORDS,
    }

    @classmethod
    def check_geometry(cls, attribute: str, value: Any) -> List[str]:
        """Check one geometry value; returns a list of issues."""
        if isinstance(value, bool):
            return [f"{attribute}: expected a number or token, got {value!r}"]

        if isinstance(value, (int, float)):
            if attribute in ("width", "height") and value < 0:
                return [f"{attribute}: negative dimension {value}"]
            return []

        percent = parse_percentage(value)
        if percent is not None:
            if percent > 100:
                return [f"{attribute}: percentage above 100 ({value})"]
            return []

        if isinstance(value, str) and value in cls.KEYWORDS[attribute]:
            return []

        return [f"{attribute}: unrecognized value {value!r}"]

    @classmethod
    def validate_shape(cls, shape: Shape) -> Tuple[bool, List[str]]:
        """
        Validate a shape's stored options.

        Returns:
            A tuple of (is_valid, list_of_issues)
        """
        issues = []

        if not isinstance(shape.get_text(), str):
            issues.append(f"text: expected a string, got {shape.get_text()!r}")

        for attribute in cls.KEYWORDS:
            issues.extend(cls.check_geometry(attribute, shape.get(attribute)))

        animation = shape.get_animation()
        if animation is not None:
            if not isinstance(animation, dict):
                issues.append(f"animation: expected a mapping, got {animation!r}")
            elif not shape.get_animation_name():
                issues.append("animation: missing name")

        return len(issues) == 0, issues

    @classmethod
    def is_valid(cls, shape: Shape) -> bool:
        """Quick check if a shape is valid."""
        valid, _ = cls.validate_shape(shape)
        return valid
