"""Monitoring presenter - Prometheus/Grafana health and alert statistics."""

from __future__ import annotations

from meshify.constants.enums import ViewName
from meshify.models.summaries import MonitoringSummary
from meshify.screens.mixins import PollingPresenter
from meshify.utils.formatting import format_percent, kpi_status, status_markup

SERVICE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Service", 14),
    ("Status", 12),
    ("Address", 22),
    ("Namespace", 14),
    ("Health", 12),
    ("Version", 12),
]

KPI_PROMETHEUS = "kpi-prometheus"
KPI_GRAFANA = "kpi-grafana"
KPI_METRICS = "kpi-metrics"
KPI_ALERTS = "kpi-alerts"
KPI_TARGETS = "kpi-targets"
KPI_DASHBOARDS = "kpi-dashboards"

KPI_TILES: list[tuple[str, str]] = [
    (KPI_PROMETHEUS, "Prometheus"),
    (KPI_GRAFANA, "Grafana"),
    (KPI_METRICS, "Active Metrics"),
    (KPI_ALERTS, "Alerts (warn/crit)"),
    (KPI_TARGETS, "Target Health"),
    (KPI_DASHBOARDS, "Dashboards"),
]


def _service_kpi(status: str) -> tuple[str, str]:
    return status, "success" if status == "active" else "error"


class MonitoringPresenter(PollingPresenter):
    """Presenter for MonitoringScreen."""

    view = ViewName.MONITORING

    @staticmethod
    def kpi_values(summary: MonitoringSummary) -> dict[str, tuple[str, str]]:
        stats = summary.stats
        alert_status = "error" if stats.critical_alerts else (
            "warning" if stats.warning_alerts else "success"
        )
        targets = (
            f"{summary.healthy_target_count}/{summary.target_count} "
            f"({format_percent(summary.target_health)})"
        )
        return {
            KPI_PROMETHEUS: _service_kpi(summary.prometheus_status),
            KPI_GRAFANA: _service_kpi(summary.grafana_status),
            KPI_METRICS: (str(stats.active_metrics), "info"),
            KPI_ALERTS: (f"{stats.warning_alerts}/{stats.critical_alerts}", alert_status),
            KPI_TARGETS: (
                targets,
                kpi_status(summary.target_health) if summary.target_count else "info",
            ),
            KPI_DASHBOARDS: (str(stats.custom_dashboards), "info"),
        }

    @staticmethod
    def service_rows(summary: MonitoringSummary) -> list[list[str]]:
        rows = []
        for service in summary.services:
            address = f"{service.address}:{service.port}" if service.port else service.address
            rows.append(
                [
                    service.name,
                    status_markup(service.status),
                    address or "[dim]-[/dim]",
                    service.namespace,
                    status_markup(service.health),
                    service.version,
                ]
            )
        return rows

    @staticmethod
    def retention_text(summary: MonitoringSummary) -> str:
        stats = summary.stats
        retention = stats.data_retention or "unknown"
        return (
            f"Data retention: {retention}  "
            f"Scrape targets: {stats.healthy_targets}/{stats.scrape_targets} healthy"
        )
