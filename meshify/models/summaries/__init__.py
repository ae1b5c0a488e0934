"""Per-view summary models derived from poll cycles."""

from meshify.models.summaries.dashboard import (
    ClusterEntry,
    DashboardSummary,
    HeaderSummary,
    WorkloadCounts,
)
from meshify.models.summaries.mesh import (
    AdapterPod,
    AddonAdapter,
    CiliumSummary,
    IstioSummary,
    LinkerdSummary,
    MeshAdapter,
    MeshComponent,
)
from meshify.models.summaries.monitoring import (
    MonitoringServiceInfo,
    MonitoringStats,
    MonitoringSummary,
)
from meshify.models.summaries.performance import (
    PerformancePoint,
    PerformanceSummary,
)

__all__ = [
    "AdapterPod",
    "AddonAdapter",
    "CiliumSummary",
    "ClusterEntry",
    "DashboardSummary",
    "HeaderSummary",
    "IstioSummary",
    "LinkerdSummary",
    "MeshAdapter",
    "MeshComponent",
    "MonitoringServiceInfo",
    "MonitoringStats",
    "MonitoringSummary",
    "PerformancePoint",
    "PerformanceSummary",
    "WorkloadCounts",
]
