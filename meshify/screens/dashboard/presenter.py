"""Dashboard presenter - KPI values and table rows from a DashboardSummary."""

from __future__ import annotations

from meshify.constants.enums import ViewName
from meshify.constants.limits import MAX_SERVICE_NAMES_DISPLAY
from meshify.models.summaries import DashboardSummary
from meshify.screens.dashboard.config import (
    KPI_CLUSTERS,
    KPI_DEPLOYMENTS,
    KPI_HEALTH,
    KPI_NODES,
    KPI_PODS,
    KPI_SERVICES,
)
from meshify.screens.mixins import PollingPresenter
from meshify.utils.formatting import format_percent, kpi_status


class DashboardPresenter(PollingPresenter):
    """Presenter for DashboardScreen."""

    view = ViewName.DASHBOARD

    @staticmethod
    def kpi_values(summary: DashboardSummary) -> dict[str, tuple[str, str]]:
        """Return ``kpi id -> (value, status)``."""
        workloads = summary.workloads
        return {
            KPI_CLUSTERS: (str(summary.cluster_count), "info"),
            KPI_NODES: (str(workloads.nodes), "info"),
            KPI_PODS: (str(workloads.pods), "info"),
            KPI_SERVICES: (str(workloads.services), "info"),
            KPI_DEPLOYMENTS: (str(workloads.deployments), "info"),
            KPI_HEALTH: (format_percent(summary.cluster_health), kpi_status(summary.cluster_health)),
        }

    @staticmethod
    def workload_rows(summary: DashboardSummary) -> list[list[str]]:
        workloads = summary.workloads
        return [
            ["Daemon Sets", str(workloads.daemon_sets)],
            ["Deployments", str(workloads.deployments)],
            ["Nodes", str(workloads.nodes)],
            ["Pod Templates", str(workloads.pod_templates)],
            ["Replication Controllers", str(workloads.replication_controllers)],
            ["Pods", str(workloads.pods)],
            ["Services", str(workloads.services)],
        ]

    @staticmethod
    def cluster_rows(summary: DashboardSummary) -> list[list[str]]:
        return [
            [cluster.name, "[green]active[/green]" if cluster.active else "[red]inactive[/red]"]
            for cluster in summary.clusters
        ]

    @staticmethod
    def service_rows(summary: DashboardSummary) -> list[list[str]]:
        names = summary.service_names[:MAX_SERVICE_NAMES_DISPLAY]
        rows = [[name] for name in names]
        hidden = len(summary.service_names) - len(names)
        if hidden > 0:
            rows.append([f"[dim]... {hidden} more[/dim]"])
        return rows
