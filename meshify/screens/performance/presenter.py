"""Performance presenter - chart series and sample rows."""

from __future__ import annotations

from meshify.constants.enums import ViewName
from meshify.models.summaries import PerformanceSummary
from meshify.screens.mixins import PollingPresenter
from meshify.utils.formatting import health_markup

SAMPLE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Time", 8),
    ("Cluster Health", 16),
    ("Utilization", 12),
    ("Services", 10),
    ("Nodes", 8),
    ("Adapters", 10),
    ("Source", 8),
]

CHART_SERIES: list[tuple[str, str]] = [
    ("cluster_health", "Cluster Health %"),
    ("resource_utilization", "Resource Utilization %"),
    ("service_count", "Services"),
]


class PerformancePresenter(PollingPresenter):
    """Presenter for PerformanceScreen."""

    view = ViewName.PERFORMANCE

    @staticmethod
    def series(summary: PerformanceSummary) -> dict[str, list[float]]:
        return {field: [float(v) for v in summary.series(field)] for field, _ in CHART_SERIES}

    @staticmethod
    def sample_rows(summary: PerformanceSummary) -> list[list[str]]:
        """Newest sample first."""
        return [
            [
                point.time_label,
                f"{point.cluster_health}% {health_markup(point.cluster_health)}",
                f"{point.resource_utilization}%",
                str(point.service_count),
                str(point.node_count),
                str(point.adapter_count),
                "live" if point.live else "[yellow]demo[/yellow]",
            ]
            for point in reversed(summary.points)
        ]

    @staticmethod
    def latest_caption(summary: PerformanceSummary) -> str:
        latest = summary.latest
        if latest is None:
            return "No samples yet"
        return (
            f"{len(summary.points)}/{summary.window_size} samples, "
            f"latest {latest.time_label}: health {latest.cluster_health}%, "
            f"utilization {latest.resource_utilization}%"
        )
