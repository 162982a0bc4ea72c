"""Redaction of sensitive chart values for display and logging.

Two renderings are supported:

- Structured: ``redact_tree`` clones a values tree and overwrites the leaves
  named by ``set_sensitive`` / ``set_wo`` paths with a fixed marker.
- Text: ``redact_text`` replaces literal sensitive strings inside rendered
  text (manifests, diffs) with a deterministic digest token, so unchanged
  secrets render identically across plan/apply cycles.

Neither function mutates its input; the unredacted tree is the only one
handed to chart installation.

Example:
    >>> from tfhelm_core.values.redaction import redact_tree
    >>> redact_tree({"db": {"password": "hunter2", "user": "app"}}, ["db.password"])
    {'db': {'password': '(sensitive value)', 'user': 'app'}}
"""

from __future__ import annotations

import hashlib
import re
from collections.abc import Iterable, Mapping
from typing import Any

from tfhelm_core.values.merger import clone_tree, split_path
from tfhelm_core.values.schemas import SENSITIVE_CONTENT_VALUE


def redact_tree(
    tree: dict[str, Any],
    sensitive_paths: Iterable[str],
    *,
    marker: str = SENSITIVE_CONTENT_VALUE,
) -> dict[str, Any]:
    """Return a clone of ``tree`` with every sensitive leaf masked.

    Paths whose parent does not resolve to a mapping are skipped silently.

    Args:
        tree: Merged values tree (not modified).
        sensitive_paths: Dotted paths of sensitive leaves.
        marker: Replacement value for masked leaves.

    Returns:
        Redacted copy of ``tree``.
    """
    redacted = clone_tree(tree)
    for path in sensitive_paths:
        _cloak_value(redacted, path, marker)
    return redacted


def _cloak_value(values: dict[str, Any], path: str, marker: str) -> None:
    *parents, leaf = split_path(path)
    current = values
    for key in parents:
        child = current.get(key)
        if not isinstance(child, dict):
            return
        current = child
    current[leaf] = marker


def hash_sensitive_value(value: str, digest_size: int = 8) -> str:
    """Return the masked token for a sensitive value.

    The token embeds a SHAKE-256 digest of ``digest_size`` bytes.

    Example:
        >>> token = hash_sensitive_value("hunter2")
        >>> token.startswith("(sensitive value ") and len(token) == 34
        True
    """
    digest = hashlib.shake_256(value.encode("utf-8")).hexdigest(digest_size)
    return f"(sensitive value {digest})"


def redact_text(text: str, sensitive_values: Iterable[str], *, digest_size: int = 8) -> str:
    """Replace every occurrence of each sensitive value with its masked token.

    Replacement happens in a single pass that prefers the longest matching
    value, so a token is never itself re-masked and a value that contains
    another is masked whole. Empty values are ignored.

    Args:
        text: Rendered text (e.g. a manifest converted to JSON).
        sensitive_values: Literal sensitive strings.
        digest_size: Digest bytes in each token.

    Returns:
        Masked text.
    """
    tokens = {value: hash_sensitive_value(value, digest_size) for value in sensitive_values if value}
    return replace_tokens(text, tokens)


def replace_tokens(text: str, tokens: Mapping[str, str]) -> str:
    """Replace each key of ``tokens`` found in ``text`` with its token.

    Longest keys win; replacement text is never rescanned.
    """
    if not tokens:
        return text

    alternatives = sorted(tokens, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(value) for value in alternatives))
    return pattern.sub(lambda match: tokens[match.group(0)], text)


__all__: list[str] = [
    "hash_sensitive_value",
    "redact_text",
    "redact_tree",
    "replace_tokens",
]
