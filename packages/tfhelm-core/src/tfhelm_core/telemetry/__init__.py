"""Logging and tracing for tfhelm.

Modules:
    logging: structlog configuration with trace correlation
    tracing: Tracer cache and ``create_span``
    sanitization: Error message scrubbing for span status
"""

from __future__ import annotations

from tfhelm_core.telemetry.logging import add_trace_context, configure_logging
from tfhelm_core.telemetry.sanitization import sanitize_error_message
from tfhelm_core.telemetry.tracing import create_span, get_tracer, reset_tracer, set_tracer

__all__: list[str] = [
    "add_trace_context",
    "configure_logging",
    "create_span",
    "get_tracer",
    "reset_tracer",
    "sanitize_error_message",
    "set_tracer",
]
