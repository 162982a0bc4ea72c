"""tfhelm-core: Helm release values merging and redaction.

Builds the values tree of a Helm release from layered ``values``
documents and ``set`` / ``set_list`` / ``set_sensitive`` / ``set_wo``
overrides, and renders redacted copies of it (and of rendered manifests)
for logs and plan output.

Example:
    >>> from tfhelm_core import ValueOverrideEngine, ScalarOverride
    >>> ValueOverrideEngine().merge([], [ScalarOverride(path="count", value="42", kind="string")])
    {'count': '42'}
"""

from __future__ import annotations

from tfhelm_core.values import (
    ListOverride,
    RedactionConfig,
    ScalarOverride,
    ValueKind,
    ValueOverrideEngine,
    ValuesConfig,
    ValuesError,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "ListOverride",
    "RedactionConfig",
    "ScalarOverride",
    "ValueKind",
    "ValueOverrideEngine",
    "ValuesConfig",
    "ValuesError",
    "__version__",
]
