"""ValueOverrideEngine: layered chart value merging with redacted rendering.

The engine combines, in order:
1. Raw ``values`` YAML documents (deep-merged, later documents win)
2. Scalar overrides from ``set``, ``set_sensitive`` and ``set_wo``
3. List overrides from ``set_list``

and produces the tree handed to chart installation. Display and logging
always go through ``redact`` / ``render``, which work on a clone.

Example:
    >>> from tfhelm_core.values.engine import ValueOverrideEngine
    >>> from tfhelm_core.values.schemas import ScalarOverride
    >>> engine = ValueOverrideEngine()
    >>> engine.merge(
    ...     ["foo: bar\\nbaz: corge", "first: present\\nbaz: grault"],
    ...     [ScalarOverride(path="foo", value="qux")],
    ... )
    {'foo': 'qux', 'baz': 'grault', 'first': 'present'}
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any

import structlog
import yaml

from tfhelm_core.values.errors import (
    OverrideParseError,
    UnknownValueKindError,
    ValuesDocumentError,
)
from tfhelm_core.values.loader import load_yaml
from tfhelm_core.values.merger import deep_merge, normalize_keys, set_path, split_path
from tfhelm_core.values.redaction import redact_text, redact_tree
from tfhelm_core.values.schemas import (
    ListOverride,
    RedactionConfig,
    ScalarOverride,
    ValueKind,
    ValuesConfig,
)
from tfhelm_core.values.strvals import parse_into, parse_into_string

logger = structlog.get_logger(__name__)


class ValueOverrideEngine:
    """Merge layered value overrides and render them safely.

    The engine holds no state besides its configuration; every call works
    only on its own inputs and may run concurrently with others.

    Attributes:
        config: Redaction marker, digest size and logging switch.

    Example:
        >>> engine = ValueOverrideEngine(RedactionConfig(log_values=False))
        >>> tree = engine.merge(["db:\\n  password: hunter2"])
        >>> engine.redact(tree, ["db.password"])
        {'db': {'password': '(sensitive value)'}}
    """

    def __init__(self, config: RedactionConfig | None = None) -> None:
        """Initialize the engine.

        Args:
            config: Redaction configuration. If None, uses defaults.
        """
        self.config = config or RedactionConfig()

    def merge(
        self,
        value_documents: Sequence[str | None],
        scalar_overrides: Sequence[ScalarOverride] = (),
        list_overrides: Sequence[ListOverride] = (),
    ) -> dict[str, Any]:
        """Build the values tree from all layers.

        Overrides mutate the accumulating tree in place and any failure
        aborts the merge; callers must discard partial results.

        Args:
            value_documents: Raw YAML documents; blank entries are skipped.
            scalar_overrides: Applied in order after all documents.
            list_overrides: Applied in order after all scalar overrides.

        Returns:
            The merged values tree.

        Raises:
            ValuesDocumentError: A document is not a valid YAML mapping.
            OverrideParseError: An override is malformed.
            ValueTypeConflictError: An override path crosses a non-mapping value.
            UnknownValueKindError: A scalar override has an unsupported kind.
        """
        base: dict[str, Any] = {}

        for index, document in enumerate(value_documents):
            if document is None or not document.strip():
                logger.debug("values_document_skipped", index=index)
                continue
            base = deep_merge(base, self._load_document(index, document))

        for index, override in enumerate(scalar_overrides):
            self._apply_scalar(base, override)
            logger.debug(
                "scalar_override_applied",
                index=index,
                path=override.path,
                kind=override.kind or ValueKind.AUTO.value,
            )

        for index, list_override in enumerate(list_overrides):
            self._apply_list(base, list_override)
            logger.debug("list_override_applied", index=index, path=list_override.path)

        return base

    def merge_config(self, values_config: ValuesConfig) -> dict[str, Any]:
        """Merge every value source of a release.

        Logs the redacted ``values.yaml`` at debug level when enabled.

        Args:
            values_config: The release's value attributes.

        Returns:
            The merged, unredacted values tree.
        """
        tree = self.merge(
            values_config.values,
            values_config.scalar_overrides(),
            values_config.set_list,
        )
        if self.config.log_values:
            self.log_values(tree, values_config.sensitive_paths())
        return tree

    def redact(self, tree: dict[str, Any], sensitive_paths: Iterable[str]) -> dict[str, Any]:
        """Return a clone of ``tree`` with sensitive leaves masked."""
        return redact_tree(tree, sensitive_paths, marker=self.config.marker)

    def redact_text(self, text: str, sensitive_values: Iterable[str]) -> str:
        """Mask literal sensitive values in rendered text."""
        return redact_text(text, sensitive_values, digest_size=self.config.digest_size)

    def render(self, tree: dict[str, Any], sensitive_paths: Iterable[str]) -> str:
        """Render the redacted tree as a ``values.yaml`` document."""
        return yaml.safe_dump(
            self.redact(tree, sensitive_paths),
            default_flow_style=False,
            sort_keys=True,
        )

    def log_values(self, tree: dict[str, Any], sensitive_paths: Iterable[str]) -> None:
        """Log the redacted ``values.yaml`` rendering at debug level."""
        logger.debug("values_rendered", values_yaml=self.render(tree, sensitive_paths))

    def _load_document(self, index: int, document: str) -> dict[str, Any]:
        try:
            loaded = load_yaml(document)
        except yaml.YAMLError as e:
            raise ValuesDocumentError(index, str(e)) from e

        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            raise ValuesDocumentError(
                index, f"expected a mapping, got {type(loaded).__name__}"
            )
        return normalize_keys(loaded)

    def _apply_scalar(self, base: dict[str, Any], override: ScalarOverride) -> None:
        try:
            kind = ValueKind(override.kind or ValueKind.AUTO.value)
        except ValueError:
            raise UnknownValueKindError(override.path, override.kind) from None

        if kind is ValueKind.LITERAL:
            segments = split_path(override.path)
            if "" in segments:
                raise OverrideParseError(
                    override.path,
                    override.value,
                    f'key "{override.path}" has an empty segment',
                )
            set_path(base, segments, self._parse_literal(override), path=override.path)
            return

        expression = f"{override.path}={override.value}"
        try:
            if kind is ValueKind.STRING:
                parse_into_string(expression, base)
            else:
                parse_into(expression, base)
        except OverrideParseError as e:
            raise OverrideParseError(override.path, override.value, e.reason) from e

    def _parse_literal(self, override: ScalarOverride) -> Any:
        leaf = split_path(override.path)[-1]
        # Quote the key so the document always has exactly one known key
        document = f"{json.dumps(leaf)}: {override.value}"
        try:
            literal = load_yaml(document)
        except yaml.YAMLError as e:
            raise OverrideParseError(
                override.path, override.value, f"invalid literal: {e}"
            ) from e

        if isinstance(literal, dict) and leaf in literal:
            return normalize_keys(literal[leaf])
        return normalize_keys(literal)

    def _apply_list(self, base: dict[str, Any], override: ListOverride) -> None:
        joined = ",".join(item for item in override.values if item is not None)
        try:
            parse_into(f"{override.path}={{{joined}}}", base)
        except OverrideParseError as e:
            raise OverrideParseError(override.path, joined, e.reason) from e


__all__: list[str] = ["ValueOverrideEngine"]
