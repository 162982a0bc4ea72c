"""Parser for Helm ``--set`` style ``key=value`` expressions.

Provides ``parse_into`` and ``parse_value`` used by the ValueOverrideEngine
for ``auto`` and ``string`` kind overrides and for ``set_list`` entries.

Syntax:
    - ``a.b.c=value`` writes a nested value, creating intermediate mappings
    - ``a=1,b=2`` applies several assignments
    - ``a={1,2,3}`` writes a sequence
    - ``\\`` escapes the next character (``a\\.b=1`` sets key ``a.b``)

Example:
    >>> from tfhelm_core.values.strvals import parse_into
    >>> base = {}
    >>> parse_into("image.tag=1.2.3,replicaCount=3", base)
    >>> base
    {'image': {'tag': '1.2.3'}, 'replicaCount': 3}
"""

from __future__ import annotations

import re
from typing import Any

from tfhelm_core.values.errors import OverrideParseError
from tfhelm_core.values.merger import set_path

_INT_PATTERN = re.compile(r"^-?[1-9][0-9]*$")
_FLOAT_PATTERN = re.compile(r"^-?(0|[1-9][0-9]*)\.[0-9]+$")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_value(value: str, *, force_string: bool = False) -> str | int | float | bool | None:
    """Parse a string value into the appropriate Python type.

    Follows Helm ``--set`` semantics: booleans, null, integers (no leading
    zero, 64-bit range), decimal floats, then falls back to string.

    Args:
        value: Right-hand side of an assignment.
        force_string: If True, return ``value`` unchanged.

    Returns:
        Parsed value as bool, None, int, float, or the original string.

    Example:
        >>> parse_value("42"), parse_value("0755"), parse_value("TRUE")
        (42, '0755', True)
    """
    if force_string:
        return value

    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None

    if value == "0":
        return 0
    if _INT_PATTERN.match(value):
        number = int(value)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
        return value

    if _FLOAT_PATTERN.match(value):
        return float(value)

    return value


def parse_into(expression: str, base: dict[str, Any], *, force_string: bool = False) -> None:
    """Parse ``key=value`` assignments into ``base`` in place.

    Args:
        expression: One or more comma-separated assignments.
        base: Tree to write into.
        force_string: If True, every right-hand side is kept as a string.

    Raises:
        OverrideParseError: If the expression is malformed.
        ValueTypeConflictError: If a key descends through a non-mapping value.
    """
    _Parser(expression, base, force_string=force_string).parse()


def parse_into_string(expression: str, base: dict[str, Any]) -> None:
    """Parse assignments into ``base`` keeping every value a string."""
    parse_into(expression, base, force_string=True)


class _Parser:
    """Single-pass scanner over one expression."""

    def __init__(self, text: str, data: dict[str, Any], *, force_string: bool) -> None:
        self._text = text
        self._data = data
        self._force_string = force_string
        self._pos = 0

    def parse(self) -> None:
        while self._pos < len(self._text):
            segments, stop = self._read_key()
            key = ".".join(segments)
            if stop != "=":
                reason = f'key "{key}" has no value'
                if stop == ",":
                    reason += " (cannot end with ,)"
                raise OverrideParseError(key, self._text, reason)
            if any(segment == "" for segment in segments):
                raise OverrideParseError(key, self._text, f'key "{key}" has an empty segment')

            value = self._read_value(key)
            set_path(self._data, segments, value, path=key)

    def _read_key(self) -> tuple[list[str], str | None]:
        segments: list[str] = []
        current: list[str] = []
        while self._pos < len(self._text):
            char = self._text[self._pos]
            self._pos += 1
            if char == "\\":
                current.append(self._escaped())
            elif char == ".":
                segments.append("".join(current))
                current = []
            elif char in "=,":
                segments.append("".join(current))
                return segments, char
            else:
                current.append(char)
        segments.append("".join(current))
        return segments, None

    def _read_value(self, key: str) -> Any:
        if self._text.startswith("{", self._pos):
            self._pos += 1
            return self._read_list(key)

        raw, _ = self._read_until(",")
        return parse_value(raw, force_string=self._force_string)

    def _read_list(self, key: str) -> list[Any]:
        items: list[Any] = []
        if self._text.startswith("}", self._pos):
            self._pos += 1
        else:
            while True:
                raw, stop = self._read_until(",}")
                if stop is None:
                    raise OverrideParseError(
                        key, self._text, f'list for key "{key}" is missing closing "}}"'
                    )
                items.append(parse_value(raw, force_string=self._force_string))
                if stop == "}":
                    break

        if self._pos < len(self._text):
            if self._text[self._pos] != ",":
                raise OverrideParseError(
                    key,
                    self._text,
                    f'unexpected "{self._text[self._pos]}" after list for key "{key}"',
                )
            self._pos += 1
        return items

    def _read_until(self, stops: str) -> tuple[str, str | None]:
        chars: list[str] = []
        while self._pos < len(self._text):
            char = self._text[self._pos]
            self._pos += 1
            if char == "\\":
                chars.append(self._escaped())
            elif char in stops:
                return "".join(chars), char
            else:
                chars.append(char)
        return "".join(chars), None

    def _escaped(self) -> str:
        # A trailing backslash is kept literally
        if self._pos >= len(self._text):
            return "\\"
        char = self._text[self._pos]
        self._pos += 1
        return char


__all__: list[str] = [
    "parse_into",
    "parse_into_string",
    "parse_value",
]
