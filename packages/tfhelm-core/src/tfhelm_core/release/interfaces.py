"""Interfaces of the collaborators around the values engine.

Chart loading, release execution and Kubernetes client construction are
provided by external tooling (the Helm SDK and a Kubernetes client). This
module only declares the contracts tfhelm consumes; implementations live
with whatever binds those tools.

Example:
    >>> from tfhelm_core.release.interfaces import ChartSource, LoadedChart
    >>> class LocalCharts(ChartSource):
    ...     def load(self, reference):
    ...         return LoadedChart(name=reference.name, version="1.0.0")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tfhelm_core.release.config import ClusterSettings


@dataclass(frozen=True)
class ChartReference:
    """Where a chart comes from.

    Attributes:
        name: Chart name, local path, or ``oci://`` URL
        repository: Repository URL (empty for local paths and OCI URLs)
        version: Requested version constraint (empty for latest)
    """

    name: str
    repository: str = ""
    version: str = ""


@dataclass(frozen=True)
class LoadedChart:
    """A chart resolved by a ChartSource.

    Attributes:
        name: Chart name from Chart.yaml
        version: Resolved chart version
        dependencies: Names of chart dependencies
        payload: Implementation-specific chart object
    """

    name: str
    version: str
    dependencies: tuple[str, ...] = ()
    payload: Any = None


@dataclass(frozen=True)
class ReleaseRequest:
    """Identity of a release and the chart it instantiates."""

    name: str
    namespace: str
    chart: ChartReference
    timeout_seconds: int = 300


@dataclass(frozen=True)
class ReleaseResult:
    """Outcome of an install, upgrade or dry-run.

    Attributes:
        name: Release name
        namespace: Release namespace
        revision: Release revision number
        status: Release status (e.g. ``deployed``, ``pending-install``)
        manifest: Rendered multi-document manifest
        notes: Rendered NOTES.txt
    """

    name: str
    namespace: str
    revision: int
    status: str
    manifest: str = ""
    notes: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)


class ChartSource(ABC):
    """Loads charts and their dependency lists."""

    @abstractmethod
    def load(self, reference: ChartReference) -> LoadedChart:
        """Resolve ``reference`` into a loaded chart.

        Args:
            reference: Chart location and version.

        Returns:
            The loaded chart.
        """
        ...


class ReleaseRunner(ABC):
    """Executes release actions with a fully merged values tree."""

    @abstractmethod
    def install(
        self, request: ReleaseRequest, chart: LoadedChart, values: dict[str, Any]
    ) -> ReleaseResult:
        """Install a new release."""
        ...

    @abstractmethod
    def upgrade(
        self, request: ReleaseRequest, chart: LoadedChart, values: dict[str, Any]
    ) -> ReleaseResult:
        """Upgrade an existing release."""
        ...

    @abstractmethod
    def uninstall(self, request: ReleaseRequest) -> None:
        """Uninstall a release."""
        ...

    @abstractmethod
    def dry_run(
        self, request: ReleaseRequest, chart: LoadedChart, values: dict[str, Any]
    ) -> ReleaseResult:
        """Render the release without applying it."""
        ...


class ClusterConfigProvider(ABC):
    """Builds a Kubernetes REST client configuration."""

    @abstractmethod
    def rest_config(self, settings: ClusterSettings) -> Any:
        """Return a client configuration for ``settings``."""
        ...


__all__: list[str] = [
    "ChartReference",
    "ChartSource",
    "ClusterConfigProvider",
    "LoadedChart",
    "ReleaseRequest",
    "ReleaseResult",
    "ReleaseRunner",
]
