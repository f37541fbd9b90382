"""
Shape defaults and the enumerations accepted by the accessors.

Geometry keywords are kept separate from alignment values: ``x``/``y`` accept
positional keywords that resolve against the viewport, while ``alignX`` and
``alignY`` only record intent and are validated when set.
"""

from typing import Dict, Tuple, Any

# ---------------------------------------------------------------------------
# Serialized representation
# ---------------------------------------------------------------------------

TAG_FIELD = "name"
OPTIONS_FIELD = "options"

# Order matters: it is the key order of to_object() / to_json().
OPTION_NAMES: Tuple[str, ...] = (
    "text",
    "width",
    "height",
    "x",
    "y",
    "alignX",
    "alignY",
    "background",
    "foreground",
    "animation",
)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_TEXT = ""
DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 5
DEFAULT_X = 10
DEFAULT_Y = 10
DEFAULT_ALIGN = "none"

DEFAULTS: Dict[str, Any] = {
    "text": DEFAULT_TEXT,
    "width": DEFAULT_WIDTH,
    "height": DEFAULT_HEIGHT,
    "x": DEFAULT_X,
    "y": DEFAULT_Y,
    "alignX": DEFAULT_ALIGN,
    "alignY": DEFAULT_ALIGN,
    "background": None,
    "foreground": None,
    "animation": None,
}

# ---------------------------------------------------------------------------
# Keywords and alignment
# ---------------------------------------------------------------------------

X_KEYWORDS = ("left", "center", "right")
Y_KEYWORDS = ("top", "middle", "bottom")

ALIGN_X_VALUES = ("none",) + X_KEYWORDS
ALIGN_Y_VALUES = ("none",) + Y_KEYWORDS

# Cell index used for "left" / "top"; terminal coordinates are 1-based.
ORIGIN = 1
