"""Unit tests for tree and text redaction."""

from __future__ import annotations

import copy

from tfhelm_core.values.redaction import hash_sensitive_value, redact_text, redact_tree


class TestRedactTree:
    """Tests for redact_tree."""

    def test_masks_only_listed_leaves(self) -> None:
        """Test a listed leaf is masked and its sibling kept."""
        tree = {"a": {"b": "secret", "c": "plain"}}
        redacted = redact_tree(tree, ["a.b"])
        assert redacted == {"a": {"b": "(sensitive value)", "c": "plain"}}

    def test_input_not_mutated(self) -> None:
        """Test the input tree is left structurally identical."""
        tree = {"db": {"password": "hunter2", "hosts": ["a", "b"]}, "top": "x"}
        before = copy.deepcopy(tree)
        redact_tree(tree, ["db.password", "top"])
        assert tree == before

    def test_missing_parent_skipped(self) -> None:
        """Test a path through a missing or non-mapping parent is skipped."""
        tree = {"a": "scalar"}
        assert redact_tree(tree, ["a.b", "x.y.z"]) == {"a": "scalar"}

    def test_top_level_leaf(self) -> None:
        """Test masking a top-level key."""
        assert redact_tree({"token": "abc"}, ["token"]) == {"token": "(sensitive value)"}

    def test_custom_marker(self) -> None:
        """Test a caller-provided marker."""
        assert redact_tree({"k": "v"}, ["k"], marker="***") == {"k": "***"}


class TestRedactText:
    """Tests for hash_sensitive_value and redact_text."""

    def test_deterministic(self) -> None:
        """Test identical inputs produce identical output."""
        text = '{"env": "secretValue", "other": "secretValue"}'
        first = redact_text(text, ["secretValue"])
        second = redact_text(text, ["secretValue"])
        assert first == second
        assert "secretValue" not in first
        assert first.count(hash_sensitive_value("secretValue")) == 2

    def test_token_format(self) -> None:
        """Test the token wraps a fixed-length hex digest."""
        token = hash_sensitive_value("secretValue")
        assert token.startswith("(sensitive value ")
        assert token.endswith(")")
        digest = token[len("(sensitive value ") : -1]
        assert len(digest) == 16
        int(digest, 16)

    def test_digest_size(self) -> None:
        """Test the digest length follows digest_size."""
        token = hash_sensitive_value("secretValue", digest_size=4)
        assert len(token) == len("(sensitive value )") + 8

    def test_distinct_values_distinct_tokens(self) -> None:
        """Test different values produce different tokens."""
        assert hash_sensitive_value("one") != hash_sensitive_value("two")

    def test_longest_value_wins(self) -> None:
        """Test a value containing another is masked whole."""
        masked = redact_text("pass=abc123", ["abc", "abc123"])
        assert masked == f"pass={hash_sensitive_value('abc123')}"

    def test_tokens_not_remasked(self) -> None:
        """Test a value that occurs inside a token does not corrupt it."""
        masked = redact_text("x=secret y=value", ["secret", "value"])
        assert masked == f"x={hash_sensitive_value('secret')} y={hash_sensitive_value('value')}"

    def test_empty_values_ignored(self) -> None:
        """Test empty strings and no values leave text unchanged."""
        assert redact_text("unchanged", [""]) == "unchanged"
        assert redact_text("unchanged", []) == "unchanged"
