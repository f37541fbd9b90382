"""Nested option storage addressed by dot-separated paths."""

import copy
from typing import Any, Dict, Optional

from .errors import OptionPathError


class OptionStore:
    """
    Nested key-value container.

    Paths are dot-separated (``"animation.name"``); there is no escaping, so a
    dot is always a separator. Reads never raise, writes create any missing
    intermediate level.
    """

    SEPARATOR = "."

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = data if data is not None else {}

    def get(self, path: str) -> Any:
        """Return the value at ``path`` or None if any segment is missing."""
        node: Any = self._data
        for key in path.split(self.SEPARATOR):
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node

    def set(self, path: str, value: Any) -> "OptionStore":
        """Write ``value`` at ``path``, creating intermediate dicts as needed."""
        keys = path.split(self.SEPARATOR)
        node = self._data
        for depth, key in enumerate(keys[:-1]):
            if node.get(key) is None:
                node[key] = {}
            elif not isinstance(node[key], dict):
                prefix = self.SEPARATOR.join(keys[:depth + 1])
                raise OptionPathError(
                    f"Cannot set {path!r}: {prefix!r} holds {node[key]!r}, not a mapping"
                )
            node = node[key]
        node[keys[-1]] = value
        return self

    def has(self, path: str) -> bool:
        """Check whether ``path`` holds a value other than None."""
        return self.get(path) is not None

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of the stored tree."""
        return copy.deepcopy(self._data)

    def __contains__(self, path: str) -> bool:
        return self.has(path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionStore):
            return False
        return self._data == other._data

    def __repr__(self) -> str:
        return f"OptionStore({self._data!r})"
