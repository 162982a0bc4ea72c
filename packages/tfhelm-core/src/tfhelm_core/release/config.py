"""Provider-level connection settings.

Settings are resolved once by the caller and passed explicitly to a
ClusterConfigProvider; nothing below reads global state after construction.

Example:
    >>> from tfhelm_core.release.config import ClusterSettings
    >>> settings = ClusterSettings.from_env({"HELM_NAMESPACE": "apps"})
    >>> settings.namespace
    'apps'
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

_TRUE_VALUES = frozenset({"1", "t", "true", "yes", "on"})


class ClusterSettings(BaseModel):
    """Kubernetes and Helm connection settings.

    Attributes:
        config_path: kubeconfig file path
        config_context: kubeconfig context to use
        host: API server URL (overrides kubeconfig)
        token: Bearer token
        insecure: Skip TLS verification
        namespace: Default release namespace
        driver: Helm storage driver
        debug: Enable Helm debug output
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_path: str = Field(default="")
    config_context: str = Field(default="")
    host: str = Field(default="")
    token: SecretStr | None = Field(default=None)
    insecure: bool = Field(default=False)
    namespace: str = Field(default="default", min_length=1)
    driver: str = Field(default="secret")
    debug: bool = Field(default=False)

    @field_validator("driver")
    @classmethod
    def validate_driver(cls, v: str) -> str:
        """Validate the Helm storage driver name."""
        valid = {"secret", "configmap", "memory", "sql"}
        if v not in valid:
            msg = f"Invalid Helm driver '{v}'. Must be one of: {', '.join(sorted(valid))}"
            raise ValueError(msg)
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClusterSettings:
        """Build settings from environment variables.

        Reads KUBE_CONFIG_PATH, KUBE_CTX, KUBE_HOST, KUBE_TOKEN, KUBE_INSECURE,
        HELM_NAMESPACE, HELM_DRIVER and HELM_DEBUG.

        Args:
            environ: Environment mapping. If None, uses ``os.environ``.
        """
        env = os.environ if environ is None else environ
        token = env.get("KUBE_TOKEN")
        return cls(
            config_path=env.get("KUBE_CONFIG_PATH", ""),
            config_context=env.get("KUBE_CTX", ""),
            host=env.get("KUBE_HOST", ""),
            token=SecretStr(token) if token else None,
            insecure=env.get("KUBE_INSECURE", "").lower() in _TRUE_VALUES,
            namespace=env.get("HELM_NAMESPACE") or "default",
            driver=env.get("HELM_DRIVER") or "secret",
            debug=env.get("HELM_DEBUG", "").lower() in _TRUE_VALUES,
        )


__all__: list[str] = ["ClusterSettings"]
