"""Common utility functions."""

from typing import Any


def first_value(obj: Any, *keys: str) -> Any:
    """Return the first truthy value among `keys`, read from a dict or object attributes."""
    for key in keys:
        if isinstance(obj, dict):
            value = obj.get(key)
        else:
            value = getattr(obj, key, None)
        if value:
            return value
    return None
