"""OpenTelemetry tracing utilities for tfhelm.

Provides a lock-protected tracer cache with a NoOp fallback and the
``create_span`` context manager used around release operations.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from tfhelm_core.telemetry.sanitization import sanitize_error_message

if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span, Tracer

_TRACER_NAME = "tfhelm_core"

# Module-level state for thread-safe tracer management
_tracers: dict[str, Tracer] = {}
_tracer_init_failed: bool = False
_lock = threading.Lock()


def get_tracer(name: str = _TRACER_NAME) -> Tracer:
    """Get or create a cached tracer instance.

    Uses double-checked locking for lazy initialization and returns a
    NoOpTracer if OpenTelemetry initialization fails.

    Args:
        name: The tracer name (instrumenting module name).

    Returns:
        OpenTelemetry Tracer instance for the given name.
    """
    global _tracer_init_failed

    if name in _tracers:
        return _tracers[name]

    if _tracer_init_failed:
        return trace.NoOpTracer()

    with _lock:
        if name in _tracers:
            return _tracers[name]

        if _tracer_init_failed:
            return trace.NoOpTracer()

        try:
            tracer = trace.get_tracer(name)
            _tracers[name] = tracer
            return tracer
        except Exception:
            _tracer_init_failed = True
            return trace.NoOpTracer()


def set_tracer(tracer: Tracer | None, name: str = _TRACER_NAME) -> None:
    """Set or clear the tracer for ``name`` (for testing).

    Args:
        tracer: Tracer instance to use, or None to clear.
        name: The tracer name.
    """
    with _lock:
        if tracer is None:
            _tracers.pop(name, None)
        else:
            _tracers[name] = tracer


def reset_tracer() -> None:
    """Clear cached tracers and the initialization failure flag."""
    global _tracer_init_failed
    with _lock:
        _tracers.clear()
        _tracer_init_failed = False


@contextmanager
def create_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[Span, None, None]:
    """Create a span as a context manager.

    Exceptions raised inside the block mark the span as failed with a
    sanitized message and are re-raised.

    Args:
        name: The name for the span.
        attributes: Optional attributes to set on the span.

    Yields:
        The created span for additional attribute setting.

    Examples:
        >>> with create_span("helm.release.plan", attributes={"helm.release": "web"}):
        ...     pass
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(
        name,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)
        try:
            yield span
        except Exception as e:
            # Override errors carry their raw value on `.value`
            quoted = getattr(e, "value", None)
            sanitized = sanitize_error_message(
                str(e), values=[quoted] if isinstance(quoted, str) else ()
            )
            span.set_status(Status(StatusCode.ERROR, sanitized))
            span.set_attribute("exception.type", type(e).__name__)
            span.set_attribute("exception.message", sanitized)
            raise


__all__ = ["create_span", "get_tracer", "reset_tracer", "set_tracer"]
