"""Conversion of rendered chart manifests into a redacted JSON document.

A rendered manifest is a multi-document YAML stream. For plan output each
resource is keyed by its identity so that diffs line up per resource:

    [<namespace>/]<kind>[.<group>]/<apiVersion>/<name>

Secret payloads are replaced with digest tokens before the document leaves
this module, and ``redact_manifest`` additionally masks every literal
sensitive override value.

Example:
    >>> from tfhelm_core.values.manifest import convert_manifest_to_json
    >>> convert_manifest_to_json(
    ...     "apiVersion: v1\\nkind: ConfigMap\\nmetadata:\\n  name: app\\n"
    ... )
    '{"configmap/v1/app": {"apiVersion": "v1", "kind": "ConfigMap", "metadata": {"name": "app"}}}'
"""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Iterable
from typing import Any

import structlog
import yaml

from tfhelm_core.values.errors import ManifestError
from tfhelm_core.values.loader import load_all_yaml
from tfhelm_core.values.redaction import hash_sensitive_value, replace_tokens

logger = structlog.get_logger(__name__)


def convert_manifest_to_json(manifest: str, *, digest_size: int = 8) -> str:
    """Convert a rendered manifest to a JSON object keyed by resource identity.

    Args:
        manifest: Multi-document YAML rendered by a chart.
        digest_size: Digest bytes used for masked Secret data.

    Returns:
        JSON object string.

    Raises:
        ManifestError: If a document is not valid YAML, is not a mapping, or
            has a non-mapping ``metadata`` (or Secret ``data``/``stringData``).
    """
    try:
        documents = list(load_all_yaml(manifest))
    except yaml.YAMLError as e:
        raise ManifestError(f"could not convert manifest to JSON: {e}") from e

    resources: dict[str, Any] = {}
    for document in documents:
        if document is None:
            continue
        if not isinstance(document, dict):
            raise ManifestError(
                f"could not convert manifest to JSON: expected a mapping, "
                f"got {type(document).__name__}"
            )

        if document.get("kind") == "Secret":
            document = _mask_secret(document, digest_size)

        resources[resource_key(document)] = document

    logger.debug("manifest_converted", resources=len(resources))
    return json.dumps(resources, default=str, ensure_ascii=False)


def resource_key(resource: dict[str, Any]) -> str:
    """Return the identity key of a manifest resource.

    Raises:
        ManifestError: If ``metadata`` is present but not a mapping.

    Example:
        >>> resource_key({
        ...     "apiVersion": "apps/v1",
        ...     "kind": "Deployment",
        ...     "metadata": {"name": "web", "namespace": "prod"},
        ... })
        'prod/deployment.apps/apps/v1/web'
    """
    api_version = str(resource.get("apiVersion") or "")
    kind = str(resource.get("kind") or "")
    metadata = _mapping_field(resource, "metadata")

    group = api_version.rpartition("/")[0]
    group_kind = f"{kind}.{group}" if group else kind
    key = f"{group_kind.lower()}/{api_version}/{metadata.get('name', '')}"

    namespace = metadata.get("namespace")
    if namespace:
        key = f"{namespace}/{key}"
    return key


def _mapping_field(resource: dict[str, Any], field: str) -> dict[str, Any]:
    value = resource.get(field) or {}
    if not isinstance(value, dict):
        raise ManifestError(
            f"could not convert manifest to JSON: {resource.get('kind') or 'resource'} "
            f"field {field!r} must be a mapping, got {type(value).__name__}"
        )
    return value


def _mask_secret(secret: dict[str, Any], digest_size: int) -> dict[str, Any]:
    masked = dict(secret)
    data = _mapping_field(secret, "data")
    if data:
        masked["data"] = {
            key: hash_sensitive_value(_decode_secret_value(value), digest_size)
            for key, value in data.items()
        }
    string_data = _mapping_field(secret, "stringData")
    if string_data:
        masked["stringData"] = {
            key: hash_sensitive_value(str(value), digest_size)
            for key, value in string_data.items()
        }
    return masked


def _decode_secret_value(value: Any) -> str:
    # Tokens track the decoded payload, not its base64 form
    text = "" if value is None else str(value)
    try:
        return base64.b64decode(text, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return text


def redact_manifest(
    manifest: str,
    sensitive_values: Iterable[str],
    *,
    digest_size: int = 8,
) -> str:
    """Convert a manifest to JSON and mask literal sensitive values in it.

    Each value is matched both as written and in its JSON string-escaped
    form (``a"b`` appears as ``a\\"b`` in the converted text); both map to
    the token of the raw value.
    """
    converted = convert_manifest_to_json(manifest, digest_size=digest_size)

    values = [value for value in sensitive_values if value]
    tokens = {value: hash_sensitive_value(value, digest_size) for value in values}
    for value in values:
        tokens.setdefault(json.dumps(value, ensure_ascii=False)[1:-1], tokens[value])
    return replace_tokens(converted, tokens)


__all__: list[str] = [
    "convert_manifest_to_json",
    "redact_manifest",
    "resource_key",
]
