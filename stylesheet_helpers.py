"""
Style-sheet map helpers

Nested maps are how style-sheets keep design tokens (colors, spacing,
breakpoints). These helpers read and combine such maps without raising
when a key is missing.
"""

from collections.abc import Mapping
from copy import deepcopy

# Absence marker for callers that must tell a missing key from a stored None
MISSING = object()


def deep_get(data, *keys, default=None):
    """
    Safely retrieve nested map values

    Args:
        data: Mapping to search
        *keys: Sequence of keys to traverse
        default: Value returned if the key path is not found

    Returns:
        Value at key path or default

    Example:
        deep_get(theme, 'colors', 'primary', 'base', default='#000')
    """
    current = data
    for key in keys:
        if not isinstance(current, Mapping):
            return default
        try:
            if key not in current:
                return default
        except TypeError:
            return default
        current = current[key]
    return current


def has_path(data, *keys):
    """True if every key in the path exists at its nesting level"""
    return deep_get(data, *keys, default=MISSING) is not MISSING


def dotted_get(data, path, default=None, sep='.'):
    """
    Retrieve a nested value using a delimited path string

    Example:
        dotted_get(theme, 'breakpoints.md')
    """
    if not path:
        return data
    return deep_get(data, *path.split(sep), default=default)


def deep_merge(base, override):
    """
    Merge two maps recursively, values from override winning

    Nested maps present on both sides are merged; anything else is
    replaced. The result shares no nested objects with either input,
    and neither input is modified.

    Raises:
        TypeError: If either argument is not a mapping
    """
    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise TypeError(
            f"deep_merge expects mappings, got {type(base).__name__} "
            f"and {type(override).__name__}"
        )

    merged = deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged
