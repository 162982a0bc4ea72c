"""Unit tests for telemetry logging and sanitization."""

from __future__ import annotations

import pytest
import structlog
from opentelemetry.sdk.trace import TracerProvider

from tfhelm_core.telemetry.logging import add_trace_context, configure_logging
from tfhelm_core.telemetry.sanitization import sanitize_error_message


class TestAddTraceContext:
    """Tests for the add_trace_context processor."""

    def test_no_active_span(self) -> None:
        """Test events outside a span are unchanged."""
        event = add_trace_context(None, "info", {"event": "x"})
        assert event == {"event": "x"}

    def test_active_span(self) -> None:
        """Test trace and span ids are injected inside a span."""
        tracer = TracerProvider().get_tracer("test")
        with tracer.start_as_current_span("op") as span:
            event = add_trace_context(None, "info", {"event": "x"})
            ctx = span.get_span_context()
        assert event["trace_id"] == format(ctx.trace_id, "032x")
        assert event["span_id"] == format(ctx.span_id, "016x")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_unknown_level(self) -> None:
        """Test an unknown level name is rejected."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(log_level="LOUD")

    def test_filters_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test events below the configured level are dropped."""
        configure_logging(log_level="WARNING", json_output=True)
        log = structlog.get_logger("test")
        log.info("hidden_event")
        log.warning("shown_event", release="web")
        err = capsys.readouterr().err
        assert "hidden_event" not in err
        assert '"event": "shown_event"' in err
        assert '"release": "web"' in err


class TestSanitizeErrorMessage:
    """Tests for sanitize_error_message."""

    def test_override_value_redacted(self) -> None:
        """Test the quoted override value is removed."""
        msg = 'Failed parsing key "db.password" with value s3cr3t: key "x" has no value'
        assert sanitize_error_message(msg) == (
            'Failed parsing key "db.password" with value <REDACTED>: key "x" has no value'
        )

    def test_known_value_containing_separator_redacted(self) -> None:
        """Test a value containing ": " is removed whole when passed explicitly."""
        msg = 'Failed parsing key "pw" with value open: sesame,x: key "x" has no value'
        assert sanitize_error_message(msg, values=["open: sesame,x"]) == (
            'Failed parsing key "pw" with value <REDACTED>: key "x" has no value'
        )

    def test_url_credentials_redacted(self) -> None:
        """Test URL credentials are removed."""
        assert sanitize_error_message("pull https://user:pw@charts.example.com failed") == (
            "pull https://<REDACTED>@charts.example.com failed"
        )

    def test_truncated(self) -> None:
        """Test long messages are truncated."""
        assert len(sanitize_error_message("x" * 1000, max_length=50)) == 50
