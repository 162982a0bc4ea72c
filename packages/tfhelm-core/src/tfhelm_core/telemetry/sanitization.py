"""Sanitize error messages before they are recorded on spans.

Value errors quote the offending override, which may come from
``set_sensitive``; span status messages must not carry such values.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

_SENSITIVE_KEY_PATTERN = re.compile(
    r"(password|secret|token|api_key|apikey|authorization|credential|private_key)"
    r"\s*[=:]\s*\S+",
    re.IGNORECASE,
)
_URL_CREDENTIAL_PATTERN = re.compile(r"://[^@/\s]+:[^@/\s]+@")
_QUOTED_VALUE_PATTERN = re.compile(r'(with (?:literal )?value) .*?(: |$)')
_REDACTED = "<REDACTED>"


def sanitize_error_message(
    msg: str,
    max_length: int = 500,
    *,
    values: Iterable[str] = (),
) -> str:
    """Sanitize an error message by redacting credentials and truncating.

    Strips every literal in ``values`` first (an override error's own
    value, which may contain ``": "``), then URL credentials
    (``://user:pass@host``), ``key=value`` pairs for known sensitive keys,
    and any remaining value quoted by override errors
    (``... with value <v>: reason``).

    Args:
        msg: Raw error message to sanitize.
        max_length: Maximum length of returned message.
        values: Literal strings known to be sensitive.

    Returns:
        Sanitized and truncated error message.

    Example:
        >>> sanitize_error_message('Failed parsing key "db.password" with value s3cr3t: bad')
        'Failed parsing key "db.password" with value <REDACTED>: bad'
    """
    sanitized = msg
    for value in sorted((v for v in values if v), key=len, reverse=True):
        sanitized = sanitized.replace(value, _REDACTED)
    sanitized = _URL_CREDENTIAL_PATTERN.sub(f"://{_REDACTED}@", sanitized)
    sanitized = _QUOTED_VALUE_PATTERN.sub(rf"\1 {_REDACTED}\2", sanitized)
    sanitized = _SENSITIVE_KEY_PATTERN.sub(
        lambda m: m.group(1) + f"={_REDACTED}",
        sanitized,
    )
    return sanitized[:max_length]


__all__ = ["sanitize_error_message"]
