"""Shared pytest fixtures for tfhelm-core tests.

NOTE: Do NOT add __init__.py to test directories - pytest uses importlib mode
which can cause namespace collisions with __init__.py files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from tfhelm_core.telemetry.tracing import reset_tracer

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def reset_telemetry() -> Generator[None, None, None]:
    """Reset structlog configuration and cached tracers around each test."""
    structlog.reset_defaults()
    reset_tracer()
    yield
    structlog.reset_defaults()
    reset_tracer()


@pytest.fixture
def rendered_manifest() -> str:
    """A rendered chart manifest with a Deployment, a Secret and an empty document."""
    return """\
---
# Source: web/templates/secret.yaml
apiVersion: v1
kind: Secret
metadata:
  name: web-credentials
  namespace: prod
type: Opaque
data:
  password: aHVudGVyMg==
---
# Source: web/templates/deployment.yaml
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  namespace: prod
spec:
  replicas: 2
  template:
    spec:
      containers:
        - name: web
          image: nginx:1.27
          env:
            - name: API_TOKEN
              value: tok-abc123
---
"""
