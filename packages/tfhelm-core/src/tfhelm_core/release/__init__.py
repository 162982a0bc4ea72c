"""Release orchestration and collaborator interfaces.

Modules:
    interfaces: ChartSource, ReleaseRunner and ClusterConfigProvider contracts
    config: ClusterSettings resolved from provider configuration
    planner: ReleasePlanner and SerializedChartSource
"""

from __future__ import annotations

from tfhelm_core.release.config import ClusterSettings
from tfhelm_core.release.interfaces import (
    ChartReference,
    ChartSource,
    ClusterConfigProvider,
    LoadedChart,
    ReleaseRequest,
    ReleaseResult,
    ReleaseRunner,
)
from tfhelm_core.release.planner import PlannedRelease, ReleasePlanner, SerializedChartSource

__all__: list[str] = [
    "ChartReference",
    "ChartSource",
    "ClusterConfigProvider",
    "ClusterSettings",
    "LoadedChart",
    "PlannedRelease",
    "ReleasePlanner",
    "ReleaseRequest",
    "ReleaseResult",
    "ReleaseRunner",
    "SerializedChartSource",
]
