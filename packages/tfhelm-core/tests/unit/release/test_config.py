"""Unit tests for ClusterSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tfhelm_core.release.config import ClusterSettings


class TestClusterSettings:
    """Tests for ClusterSettings."""

    def test_defaults(self) -> None:
        """Test defaults when no environment is set."""
        settings = ClusterSettings.from_env({})
        assert settings.namespace == "default"
        assert settings.driver == "secret"
        assert settings.token is None
        assert settings.insecure is False

    def test_from_env(self) -> None:
        """Test every supported variable is read."""
        settings = ClusterSettings.from_env(
            {
                "KUBE_CONFIG_PATH": "/home/me/.kube/config",
                "KUBE_CTX": "staging",
                "KUBE_HOST": "https://k8s.example.com",
                "KUBE_TOKEN": "bearer-token",
                "KUBE_INSECURE": "true",
                "HELM_NAMESPACE": "apps",
                "HELM_DRIVER": "configmap",
                "HELM_DEBUG": "1",
            }
        )
        assert settings.config_path == "/home/me/.kube/config"
        assert settings.config_context == "staging"
        assert settings.host == "https://k8s.example.com"
        assert settings.token is not None
        assert settings.token.get_secret_value() == "bearer-token"
        assert settings.insecure is True
        assert settings.namespace == "apps"
        assert settings.driver == "configmap"
        assert settings.debug is True

    def test_token_not_in_repr(self) -> None:
        """Test the token is hidden in repr."""
        settings = ClusterSettings.from_env({"KUBE_TOKEN": "bearer-token"})
        assert "bearer-token" not in repr(settings)

    def test_empty_namespace_falls_back(self) -> None:
        """Test an empty HELM_NAMESPACE uses 'default'."""
        assert ClusterSettings.from_env({"HELM_NAMESPACE": ""}).namespace == "default"

    def test_invalid_driver(self) -> None:
        """Test unknown Helm drivers are rejected."""
        with pytest.raises(ValidationError, match="Invalid Helm driver"):
            ClusterSettings(driver="etcd")
