"""Deep merge utilities for chart values trees.

A values tree is the nested mapping a chart's ``values.yaml`` decodes to:
string keys mapping to strings, numbers, booleans, null, sequences, or
nested trees. This module provides the primitives the ValueOverrideEngine
builds on:

1. ``deep_merge`` / ``merge_all`` to layer ``values`` documents
2. ``set_path`` to write an override at a dotted path
3. ``clone_tree`` to copy a tree before redacting it

Example:
    >>> from tfhelm_core.values.merger import deep_merge
    >>> base = {"image": {"repository": "nginx", "tag": "1.25"}}
    >>> override = {"image": {"tag": "1.27"}}
    >>> deep_merge(base, override)
    {'image': {'repository': 'nginx', 'tag': '1.27'}}
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Union

from tfhelm_core.values.errors import ValueTypeConflictError

# Recursive values tree: str | int | float | bool | None | list | mapping
SettingsValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
SettingsTree = dict[str, SettingsValue]


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge two trees.

    Mappings present on both sides are merged key by key; any other value
    in ``override`` (scalar, sequence, or a type mismatch) replaces the base
    value wholesale.

    Args:
        base: Base tree (lower priority)
        override: Override tree (higher priority)

    Returns:
        New tree with merged values (does not modify inputs)

    Examples:
        >>> deep_merge({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}

        >>> deep_merge({"items": [1, 2]}, {"items": [3]})
        {'items': [3]}
    """
    result = deepcopy(base)

    for key, override_value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(current, override_value)
        else:
            result[key] = deepcopy(override_value)

    return result


def merge_all(*trees: dict[str, Any]) -> dict[str, Any]:
    """Merge multiple trees in order; later trees win.

    Example:
        >>> merge_all({"a": 1, "b": 2}, {"b": 3, "c": 4}, {"c": 5})
        {'a': 1, 'b': 3, 'c': 5}
    """
    result: dict[str, Any] = {}
    for tree in trees:
        result = deep_merge(result, tree)
    return result


def clone_tree(tree: dict[str, Any]) -> dict[str, Any]:
    """Return a deep copy of a tree that shares no mutable state with it."""
    return deepcopy(tree)


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments.

    There is no escape syntax: a key that itself contains a literal ``.``
    cannot be addressed.

    Example:
        >>> split_path("ingress.annotations.class")
        ['ingress', 'annotations', 'class']
    """
    return path.split(".")


def set_path(tree: dict[str, Any], segments: list[str], value: Any, *, path: str = "") -> None:
    """Write ``value`` at ``segments``, creating intermediate mappings.

    Args:
        tree: Tree to modify in place
        segments: Path segments, outermost first
        value: Value to store at the leaf
        path: Dotted path used in error messages (defaults to the joined segments)

    Raises:
        ValueTypeConflictError: If an intermediate segment holds a non-mapping value.
    """
    current = tree
    for segment in segments[:-1]:
        child = current.get(segment)
        if child is None:
            child = {}
            current[segment] = child
        elif not isinstance(child, dict):
            raise ValueTypeConflictError(path or ".".join(segments), segment)
        current = child
    current[segments[-1]] = value


def normalize_keys(value: Any) -> Any:
    """Recursively convert mapping keys to strings.

    YAML documents may decode keys such as ``1`` or ``true`` to non-string
    types; chart values are always string-keyed.
    """
    if isinstance(value, dict):
        return {_key_to_str(k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    return value


def _key_to_str(key: Any) -> str:
    # YAML spellings, not Python reprs: true/false/null
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


__all__: list[str] = [
    "SettingsTree",
    "SettingsValue",
    "clone_tree",
    "deep_merge",
    "merge_all",
    "normalize_keys",
    "set_path",
    "split_path",
]
