"""Pydantic schemas for chart value overrides.

This module defines the models describing the value-related attributes of
a Helm release or template: raw ``values`` documents, ``set`` /
``set_sensitive`` / ``set_wo`` scalar overrides, ``set_list`` overrides, and
the explicit redaction configuration used by the ValueOverrideEngine.

Models:
    ValueKind: How a scalar override value is interpreted
    ScalarOverride: A single ``set`` style override
    ListOverride: A single ``set_list`` override
    ValuesConfig: All value sources of one release, in precedence order
    RedactionConfig: Marker and digest settings for redaction

Example:
    >>> from tfhelm_core.values.schemas import ScalarOverride, ValuesConfig
    >>> config = ValuesConfig(
    ...     values=["replicaCount: 1"],
    ...     set=[ScalarOverride(path="image.tag", value="1.2.3", kind="string")],
    ... )
    >>> [o.path for o in config.scalar_overrides()]
    ['image.tag']
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

SENSITIVE_CONTENT_VALUE = "(sensitive value)"
"""Marker written over sensitive leaves in display renderings."""


class ValueKind(str, Enum):
    """Interpretation of a scalar override value.

    Attributes:
        AUTO: Type inference (ints, floats, booleans, null, ``{a,b}`` lists)
        STRING: Always a string, regardless of apparent type
        LITERAL: Parsed as YAML, enabling structured values
    """

    AUTO = "auto"
    STRING = "string"
    LITERAL = "literal"


class ScalarOverride(BaseModel):
    """A single ``set``, ``set_sensitive`` or ``set_wo`` entry.

    ``kind`` is a plain string: unsupported kinds are reported
    by the engine with the offending path rather than by model validation.

    Attributes:
        path: Dotted path of the value (e.g. ``image.tag``)
        value: Raw value
        kind: One of ``auto`` (or empty), ``string``, ``literal``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., min_length=1, description="Dotted value path")
    value: str = Field(default="", description="Raw override value")
    kind: str = Field(default="auto", description="auto, string or literal")


class ListOverride(BaseModel):
    """A single ``set_list`` entry.

    Attributes:
        path: Dotted path of the list value
        values: List elements; null elements are skipped
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = Field(..., min_length=1, description="Dotted value path")
    values: list[str | None] = Field(..., description="List elements")


class ValuesConfig(BaseModel):
    """All value sources of a release, in the order they are applied.

    Attributes:
        values: Raw YAML documents; later documents win
        set_values: ``set`` overrides (alias ``set``)
        set_list: ``set_list`` overrides
        set_sensitive: Overrides whose values are masked when displayed
        set_wo: Write-only overrides, masked like ``set_sensitive``
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    values: list[str | None] = Field(default_factory=list)
    set_values: list[ScalarOverride] = Field(default_factory=list, alias="set")
    set_list: list[ListOverride] = Field(default_factory=list)
    set_sensitive: list[ScalarOverride] = Field(default_factory=list)
    set_wo: list[ScalarOverride] = Field(default_factory=list)

    def scalar_overrides(self) -> list[ScalarOverride]:
        """Return scalar overrides in application order."""
        return [*self.set_values, *self.set_sensitive, *self.set_wo]

    def sensitive_paths(self) -> list[str]:
        """Return the paths that must be masked in display renderings."""
        return [o.path for o in (*self.set_sensitive, *self.set_wo)]

    def sensitive_values(self) -> list[str]:
        """Return the raw sensitive values to mask in rendered text."""
        return [o.value for o in (*self.set_sensitive, *self.set_wo) if o.value]

    def to_attributes(self) -> dict[str, Any]:
        """Return the attribute form with sensitive values masked.

        Suitable for debug output of the configuration itself.
        """
        data = self.model_dump(by_alias=True)
        for key in ("set_sensitive", "set_wo"):
            for entry in data[key]:
                entry["value"] = SENSITIVE_CONTENT_VALUE
        return data


class RedactionConfig(BaseModel):
    """Explicit redaction settings for a ValueOverrideEngine.

    Attributes:
        marker: Value written over sensitive leaves in redacted trees
        digest_size: Digest bytes rendered (as hex) in masked text tokens
        log_values: Whether merge_config logs the redacted values.yaml
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    marker: str = Field(default=SENSITIVE_CONTENT_VALUE, min_length=1)
    digest_size: int = Field(default=8, ge=1, le=64)
    log_values: bool = Field(default=True)


__all__: list[str] = [
    "SENSITIVE_CONTENT_VALUE",
    "ListOverride",
    "RedactionConfig",
    "ScalarOverride",
    "ValueKind",
    "ValuesConfig",
]
