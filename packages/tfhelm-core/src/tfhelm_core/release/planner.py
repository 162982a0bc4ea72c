"""Release orchestration on top of the ValueOverrideEngine.

ReleasePlanner is the single call site shared by release resources and
template data sources: it loads the chart, merges the release's values,
hands the unredacted tree to the ReleaseRunner, and converts whatever the
runner renders into the redacted JSON manifest recorded in state.

A values error aborts the operation before the runner is invoked, so a
release is never installed with a partial values tree.

Example:
    >>> planner = ReleasePlanner(SerializedChartSource(charts), runner)
    >>> planned = planner.plan(request, ValuesConfig(values=["replicaCount: 2"]))
    >>> planned.values
    {'replicaCount': 2}
"""

from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from tfhelm_core.release.interfaces import (
    ChartReference,
    ChartSource,
    LoadedChart,
    ReleaseRequest,
    ReleaseResult,
    ReleaseRunner,
)
from tfhelm_core.telemetry.tracing import create_span
from tfhelm_core.values.engine import ValueOverrideEngine
from tfhelm_core.values.manifest import redact_manifest

if TYPE_CHECKING:
    from tfhelm_core.values.schemas import ValuesConfig

logger = structlog.get_logger(__name__)


class SerializedChartSource(ChartSource):
    """ChartSource wrapper that serializes ``load`` calls.

    Chart loading and dependency resolution are not safe for concurrent
    use; the lock is owned by this wrapper, so independent wrappers do not
    contend with each other.
    """

    def __init__(self, source: ChartSource) -> None:
        self._source = source
        self._lock = threading.Lock()

    def load(self, reference: ChartReference) -> LoadedChart:
        with self._lock:
            return self._source.load(reference)


@dataclass(frozen=True)
class PlannedRelease:
    """Result of planning a release.

    Attributes:
        request: The planned release
        chart: The loaded chart
        values: Unredacted values tree (only for the runner)
        redacted_values: Redacted ``values.yaml`` rendering for display
        manifest: Rendered manifest as redacted JSON
        status: Status reported by the dry-run
    """

    request: ReleaseRequest
    chart: LoadedChart
    values: dict[str, Any]
    redacted_values: str
    manifest: str
    status: str


class ReleasePlanner:
    """Plans and applies releases with merged, redacted values.

    Attributes:
        engine: ValueOverrideEngine used for all value handling.
    """

    def __init__(
        self,
        chart_source: ChartSource,
        runner: ReleaseRunner,
        *,
        engine: ValueOverrideEngine | None = None,
    ) -> None:
        """Initialize the planner.

        Args:
            chart_source: Loads charts; wrap in SerializedChartSource when
                the underlying loader is not thread-safe.
            runner: Executes release actions.
            engine: Values engine. If None, uses default redaction settings.
        """
        self._chart_source = chart_source
        self._runner = runner
        self.engine = engine or ValueOverrideEngine()

    def plan(self, request: ReleaseRequest, values_config: ValuesConfig) -> PlannedRelease:
        """Render a release without applying it.

        Raises:
            ValuesError: If the release's values are invalid.
            ManifestError: If the rendered manifest cannot be converted.
        """
        with create_span("tfhelm.release.plan", attributes=_span_attributes(request)):
            chart = self._chart_source.load(request.chart)
            values = self.engine.merge_config(values_config)
            result = self._runner.dry_run(request, chart, values)

            planned = PlannedRelease(
                request=request,
                chart=chart,
                values=values,
                redacted_values=self.engine.render(values, values_config.sensitive_paths()),
                manifest=self._redacted_manifest(result, values_config),
                status=result.status,
            )
            logger.info(
                "release_planned",
                release=request.name,
                namespace=request.namespace,
                chart=chart.name,
                chart_version=chart.version,
            )
            return planned

    def install(self, request: ReleaseRequest, values_config: ValuesConfig) -> ReleaseResult:
        """Install a release.

        The returned result carries the redacted JSON manifest, as recorded
        in state.
        """
        with create_span("tfhelm.release.install", attributes=_span_attributes(request)):
            chart = self._chart_source.load(request.chart)
            values = self.engine.merge_config(values_config)
            result = self._runner.install(request, chart, values)
            logger.info(
                "release_installed",
                release=request.name,
                namespace=request.namespace,
                revision=result.revision,
                status=result.status,
            )
            return dataclasses.replace(
                result, manifest=self._redacted_manifest(result, values_config)
            )

    def upgrade(self, request: ReleaseRequest, values_config: ValuesConfig) -> ReleaseResult:
        """Upgrade a release; see ``install`` for the returned manifest."""
        with create_span("tfhelm.release.upgrade", attributes=_span_attributes(request)):
            chart = self._chart_source.load(request.chart)
            values = self.engine.merge_config(values_config)
            result = self._runner.upgrade(request, chart, values)
            logger.info(
                "release_upgraded",
                release=request.name,
                namespace=request.namespace,
                revision=result.revision,
                status=result.status,
            )
            return dataclasses.replace(
                result, manifest=self._redacted_manifest(result, values_config)
            )

    def uninstall(self, request: ReleaseRequest) -> None:
        """Uninstall a release."""
        with create_span("tfhelm.release.uninstall", attributes=_span_attributes(request)):
            self._runner.uninstall(request)
            logger.info("release_uninstalled", release=request.name, namespace=request.namespace)

    def _redacted_manifest(self, result: ReleaseResult, values_config: ValuesConfig) -> str:
        if not result.manifest:
            return ""
        return redact_manifest(
            result.manifest,
            values_config.sensitive_values(),
            digest_size=self.engine.config.digest_size,
        )


def _span_attributes(request: ReleaseRequest) -> dict[str, Any]:
    return {
        "helm.release.name": request.name,
        "helm.release.namespace": request.namespace,
        "helm.chart.name": request.chart.name,
    }


__all__: list[str] = [
    "PlannedRelease",
    "ReleasePlanner",
    "SerializedChartSource",
]
