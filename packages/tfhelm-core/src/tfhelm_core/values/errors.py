"""Exception hierarchy for chart value merging and redaction.

All failures raised while building a values tree are validation failures:
they describe malformed caller input and are never retried.

Exception Hierarchy:
    ValuesError (base)
    ├── ValuesDocumentError     # YAML document could not be parsed
    ├── OverrideParseError      # key=value or literal override is malformed
    ├── ValueTypeConflictError  # override path descends through a non-mapping
    └── UnknownValueKindError   # override kind is not auto/string/literal

    ManifestError               # rendered manifest could not be converted

Example:
    >>> from tfhelm_core.values.errors import UnknownValueKindError
    >>> raise UnknownValueKindError("image.tag", "json")
    Traceback (most recent call last):
        ...
    UnknownValueKindError: Unexpected type 'json' for key "image.tag" (expected one of: auto, string, literal)
"""

from __future__ import annotations


class ValuesError(Exception):
    """Base exception for all values-tree errors.

    Example:
        >>> try:
        ...     engine.merge(documents, overrides)
        ... except ValuesError as e:
        ...     print(f"Release values are invalid: {e}")
    """

    pass


class ValuesDocumentError(ValuesError):
    """Raised when a raw ``values`` document is not a valid YAML mapping.

    Attributes:
        index: Position of the document in the ``values`` list.
        reason: Underlying parser message.
    """

    def __init__(self, index: int, reason: str) -> None:
        """Initialize ValuesDocumentError.

        Args:
            index: Position of the document in the ``values`` list.
            reason: Underlying parser message.
        """
        self.index = index
        self.reason = reason
        super().__init__(f"Error unmarshaling values document {index}: {reason}")


class OverrideParseError(ValuesError):
    """Raised when a ``set`` style override cannot be parsed.

    Attributes:
        path: Dotted path of the override.
        value: Raw value of the override.
        reason: Underlying parser message.
    """

    def __init__(self, path: str, value: str, reason: str) -> None:
        """Initialize OverrideParseError.

        Args:
            path: Dotted path of the override.
            value: Raw value of the override.
            reason: Underlying parser message.
        """
        self.path = path
        self.value = value
        self.reason = reason
        super().__init__(f'Failed parsing key "{path}" with value {value}: {reason}')


class ValueTypeConflictError(ValuesError):
    """Raised when an override path descends through a non-mapping value.

    Attributes:
        path: Dotted path of the override.
        segment: The path segment that holds a non-mapping value.
    """

    def __init__(self, path: str, segment: str) -> None:
        """Initialize ValueTypeConflictError.

        Args:
            path: Dotted path of the override.
            segment: The path segment that holds a non-mapping value.
        """
        self.path = path
        self.segment = segment
        super().__init__(
            f'Cannot set key "{path}": segment "{segment}" is not a mapping'
        )


class UnknownValueKindError(ValuesError):
    """Raised when a scalar override names an unsupported kind.

    Attributes:
        path: Dotted path of the override.
        kind: The unsupported kind.
    """

    def __init__(self, path: str, kind: str) -> None:
        """Initialize UnknownValueKindError.

        Args:
            path: Dotted path of the override.
            kind: The unsupported kind.
        """
        self.path = path
        self.kind = kind
        super().__init__(
            f"Unexpected type '{kind}' for key \"{path}\" "
            "(expected one of: auto, string, literal)"
        )


class ManifestError(Exception):
    """Raised when a rendered chart manifest cannot be converted to JSON."""

    pass


__all__: list[str] = [
    "ManifestError",
    "OverrideParseError",
    "UnknownValueKindError",
    "ValueTypeConflictError",
    "ValuesDocumentError",
    "ValuesError",
]
