"""YAML loading for chart values and rendered manifests.

``ValuesLoader`` is a ``SafeLoader`` without the implicit timestamp
resolver, so ``2024-01-01`` stays the string Helm sees instead of a
``datetime.date``.

Example:
    >>> from tfhelm_core.values.loader import load_yaml
    >>> load_yaml("buildDate: 2024-01-01")
    {'buildDate': '2024-01-01'}
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import yaml

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class ValuesLoader(yaml.SafeLoader):
    """SafeLoader that resolves timestamps as plain strings."""


ValuesLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml(document: str) -> Any:
    """Load a single YAML document with ``ValuesLoader``."""
    return yaml.load(document, Loader=ValuesLoader)  # noqa: S506


def load_all_yaml(stream: str) -> Iterator[Any]:
    """Load every document of a YAML stream with ``ValuesLoader``."""
    return yaml.load_all(stream, Loader=ValuesLoader)  # noqa: S506


__all__: list[str] = ["ValuesLoader", "load_all_yaml", "load_yaml"]
