"""Chart value merging and redaction.

This package turns the value-related attributes of a Helm release
(``values``, ``set``, ``set_list``, ``set_sensitive``, ``set_wo``) into the
single values tree handed to chart installation, and renders redacted
copies of it for logs and plan output.

Modules:
    schemas: Pydantic models for overrides and redaction settings
    strvals: Helm ``--set`` style key=value parser
    merger: Deep merge and path utilities for values trees
    redaction: Tree and text redaction
    engine: ValueOverrideEngine combining all of the above
    manifest: Rendered manifest to redacted JSON conversion

Example:
    >>> from tfhelm_core.values import ValueOverrideEngine, ValuesConfig
    >>> config = ValuesConfig(values=["replicaCount: 1"], set=[{"path": "replicaCount", "value": "3"}])
    >>> ValueOverrideEngine().merge_config(config)
    {'replicaCount': 3}
"""

from __future__ import annotations

from tfhelm_core.values.engine import ValueOverrideEngine
from tfhelm_core.values.errors import (
    ManifestError,
    OverrideParseError,
    UnknownValueKindError,
    ValuesDocumentError,
    ValuesError,
    ValueTypeConflictError,
)
from tfhelm_core.values.manifest import convert_manifest_to_json, redact_manifest
from tfhelm_core.values.merger import deep_merge, merge_all
from tfhelm_core.values.redaction import hash_sensitive_value, redact_text, redact_tree
from tfhelm_core.values.schemas import (
    SENSITIVE_CONTENT_VALUE,
    ListOverride,
    RedactionConfig,
    ScalarOverride,
    ValueKind,
    ValuesConfig,
)

__all__: list[str] = [
    # Engine
    "ValueOverrideEngine",
    # Schemas
    "SENSITIVE_CONTENT_VALUE",
    "ListOverride",
    "RedactionConfig",
    "ScalarOverride",
    "ValueKind",
    "ValuesConfig",
    # Errors
    "ManifestError",
    "OverrideParseError",
    "UnknownValueKindError",
    "ValueTypeConflictError",
    "ValuesDocumentError",
    "ValuesError",
    # Utilities
    "convert_manifest_to_json",
    "deep_merge",
    "hash_sensitive_value",
    "merge_all",
    "redact_manifest",
    "redact_text",
    "redact_tree",
]
