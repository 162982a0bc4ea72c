"""Unit tests for the key=value override parser."""

from __future__ import annotations

import pytest

from tfhelm_core.values.errors import OverrideParseError, ValueTypeConflictError
from tfhelm_core.values.strvals import parse_into, parse_into_string, parse_value


class TestParseValue:
    """Tests for parse_value type inference."""

    def test_parse_booleans(self) -> None:
        """Test case-insensitive booleans."""
        assert parse_value("true") is True
        assert parse_value("TRUE") is True
        assert parse_value("false") is False
        assert parse_value("False") is False

    def test_parse_null(self) -> None:
        """Test 'null' becomes None."""
        assert parse_value("null") is None
        assert parse_value("NULL") is None

    def test_parse_integers(self) -> None:
        """Test integer inference."""
        assert parse_value("42") == 42
        assert parse_value("0") == 0
        assert parse_value("-10") == -10

    def test_leading_zero_stays_string(self) -> None:
        """Test numbers with a leading zero are not integers."""
        assert parse_value("0755") == "0755"
        assert parse_value("007") == "007"

    def test_out_of_int64_range_stays_string(self) -> None:
        """Test integers beyond 64 bits are kept as strings."""
        assert parse_value("99999999999999999999") == "99999999999999999999"

    def test_parse_floats(self) -> None:
        """Test decimal float inference."""
        assert parse_value("3.14") == pytest.approx(3.14)
        assert parse_value("0.5") == pytest.approx(0.5)
        assert parse_value("-1.5") == pytest.approx(-1.5)

    def test_parse_strings(self) -> None:
        """Test everything else is a string."""
        assert parse_value("hello") == "hello"
        assert parse_value("1.2.3") == "1.2.3"
        assert parse_value("123abc") == "123abc"
        assert parse_value("") == ""

    def test_force_string(self) -> None:
        """Test force_string disables inference."""
        assert parse_value("42", force_string=True) == "42"
        assert parse_value("true", force_string=True) == "true"
        assert parse_value("null", force_string=True) == "null"


class TestParseInto:
    """Tests for parse_into."""

    def test_nested_key(self) -> None:
        """Test dotted keys create intermediate mappings."""
        base: dict = {}
        parse_into("a.b.c=value", base)
        assert base == {"a": {"b": {"c": "value"}}}

    def test_multiple_assignments(self) -> None:
        """Test comma-separated assignments."""
        base: dict = {}
        parse_into("replicas=3,enabled=true", base)
        assert base == {"replicas": 3, "enabled": True}

    def test_existing_siblings_preserved(self) -> None:
        """Test writing a leaf keeps sibling keys."""
        base: dict = {"image": {"repository": "nginx", "tag": "1.25"}}
        parse_into("image.tag=1.27", base)
        assert base == {"image": {"repository": "nginx", "tag": 1.27}}

    def test_list_value(self) -> None:
        """Test brace lists keep order and infer element types."""
        base: dict = {}
        parse_into("items={3,1,2}", base)
        assert base == {"items": [3, 1, 2]}

    def test_empty_list(self) -> None:
        """Test '{}' yields an empty list."""
        base: dict = {}
        parse_into("items={}", base)
        assert base == {"items": []}

    def test_list_followed_by_assignment(self) -> None:
        """Test an assignment after a list."""
        base: dict = {}
        parse_into("hosts={a,b},port=80", base)
        assert base == {"hosts": ["a", "b"], "port": 80}

    def test_escaped_comma_in_value(self) -> None:
        """Test backslash escapes a comma."""
        base: dict = {}
        parse_into(r"nodeSelector=a\,b", base)
        assert base == {"nodeSelector": "a,b"}

    def test_escaped_dot_in_key(self) -> None:
        """Test backslash escapes a dot in a key."""
        base: dict = {}
        parse_into(r"annotations.kubernetes\.io/ingress=nginx", base)
        assert base == {"annotations": {"kubernetes.io/ingress": "nginx"}}

    def test_empty_value(self) -> None:
        """Test an empty right-hand side is an empty string."""
        base: dict = {}
        parse_into("name=", base)
        assert base == {"name": ""}

    def test_string_variant(self) -> None:
        """Test parse_into_string keeps every value a string."""
        base: dict = {}
        parse_into_string("count=42,flags={1,true}", base)
        assert base == {"count": "42", "flags": ["1", "true"]}

    def test_missing_equals(self) -> None:
        """Test a key without a value is rejected."""
        with pytest.raises(OverrideParseError, match='key "name" has no value'):
            parse_into("name", {})

    def test_trailing_bare_key(self) -> None:
        """Test an unescaped comma in a value starts a new (invalid) key."""
        with pytest.raises(OverrideParseError, match='key "b" has no value'):
            parse_into("x=a,b", {})

    def test_empty_segment(self) -> None:
        """Test 'a..b' is rejected."""
        with pytest.raises(OverrideParseError, match="empty segment"):
            parse_into("a..b=1", {})

    def test_unterminated_list(self) -> None:
        """Test a list without a closing brace is rejected."""
        with pytest.raises(OverrideParseError, match="missing closing"):
            parse_into("items={1,2", {})

    def test_type_conflict(self) -> None:
        """Test descending through a scalar raises a conflict."""
        base: dict = {"image": "nginx"}
        with pytest.raises(ValueTypeConflictError) as exc_info:
            parse_into("image.tag=1.0", base)
        assert exc_info.value.path == "image.tag"
        assert exc_info.value.segment == "image"
