"""Tests for the per-screen presenter formatting helpers."""

from __future__ import annotations

from datetime import datetime, timezone

from meshify.constants.limits import MAX_SERVICE_NAMES_DISPLAY
from meshify.models.summaries import (
    AddonAdapter,
    CiliumSummary,
    ClusterEntry,
    DashboardSummary,
    IstioSummary,
    LinkerdSummary,
    MeshAdapter,
    MeshComponent,
    MonitoringServiceInfo,
    MonitoringStats,
    MonitoringSummary,
    PerformancePoint,
    PerformanceSummary,
    WorkloadCounts,
)
from meshify.screens.dashboard.config import KPI_CLUSTERS, KPI_HEALTH, KPI_PODS
from meshify.screens.dashboard.presenter import DashboardPresenter
from meshify.screens.mesh.presenter import (
    CiliumPresenter,
    IstioPresenter,
    LinkerdPresenter,
    component_rows,
)
from meshify.screens.monitoring.presenter import (
    KPI_ALERTS,
    KPI_PROMETHEUS,
    KPI_TARGETS,
    MonitoringPresenter,
)
from meshify.screens.performance.presenter import PerformancePresenter

# =============================================================================
# Dashboard
# =============================================================================


class TestDashboardPresenter:
    """Tests for DashboardPresenter helpers."""

    def test_kpi_values(self) -> None:
        """Test KPI tiles and the health status class."""
        summary = DashboardSummary(
            workloads=WorkloadCounts(pods=12),
            cluster_count=2,
            cluster_health=62.5,
        )

        values = DashboardPresenter.kpi_values(summary)

        assert values[KPI_CLUSTERS] == ("2", "info")
        assert values[KPI_PODS] == ("12", "info")
        assert values[KPI_HEALTH] == ("62.5%", "warning")

    def test_cluster_rows(self) -> None:
        """Test active and inactive clusters are colored."""
        summary = DashboardSummary(
            clusters=(ClusterEntry(name="a", active=True), ClusterEntry(name="b"))
        )

        rows = DashboardPresenter.cluster_rows(summary)

        assert rows == [["a", "[green]active[/green]"], ["b", "[red]inactive[/red]"]]

    def test_service_rows_are_capped(self) -> None:
        """Test long service lists end with a summary row."""
        names = tuple(f"svc-{index}" for index in range(MAX_SERVICE_NAMES_DISPLAY + 5))

        rows = DashboardPresenter.service_rows(DashboardSummary(service_names=names))

        assert len(rows) == MAX_SERVICE_NAMES_DISPLAY + 1
        assert rows[-1] == ["[dim]... 5 more[/dim]"]

    def test_workload_rows(self) -> None:
        """Test one row per workload counter."""
        rows = DashboardPresenter.workload_rows(DashboardSummary())

        assert len(rows) == 7
        assert rows[0] == ["Daemon Sets", "0"]


# =============================================================================
# Service mesh
# =============================================================================


class TestMeshPresenters:
    """Tests for the Istio, Linkerd and Cilium presenters."""

    def test_component_rows(self) -> None:
        """Test component status is colored."""
        rows = component_rows(
            (MeshComponent(name="istiod", namespace="istio-system", status="Running", ready="1/1"),)
        )

        assert rows == [["istiod", "istio-system", "[green]Running[/green]", "1/1"]]

    def test_istio_overview_not_installed(self) -> None:
        """Test the overview for a cluster without Istio."""
        assert "not installed" in IstioPresenter.overview(IstioSummary())

    def test_istio_overview_installed(self) -> None:
        """Test the overview lists component health."""
        summary = IstioSummary(
            installed=True,
            version="1.19.0",
            components=(MeshComponent(name="istiod", status="Running"),),
            running_components=1,
            component_health=100.0,
            namespaces=("istio-system",),
        )

        overview = IstioPresenter.overview(summary)

        assert "Istio 1.19.0" in overview
        assert "1/1 running" in overview
        assert "HEALTHY" in overview

    def test_istio_adapter_rows_include_addons(self) -> None:
        """Test adapters are followed by add-ons."""
        summary = IstioSummary(
            adapters=(MeshAdapter(key="istio", name="Istio", version="1.19.0", status="available"),),
            addons=(AddonAdapter(name="kiali", status="running"),),
        )

        rows = IstioPresenter.adapter_rows(summary)

        assert [row[0] for row in rows] == ["Istio", "kiali"]

    def test_linkerd_overview_not_installed_with_message(self) -> None:
        """Test the backend message is shown when Linkerd is missing."""
        overview = LinkerdPresenter.overview(LinkerdSummary(message="namespace missing"))

        assert overview == "[red]Linkerd is not installed: namespace missing[/red]"

    def test_linkerd_overview_installed(self) -> None:
        """Test proxy coverage in the Linkerd overview."""
        summary = LinkerdSummary(
            installed=True,
            version="stable-2.14.1",
            control_plane_status="Running",
            proxies_total=8,
            proxies_healthy=6,
            coverage=75.0,
        )

        overview = LinkerdPresenter.overview(summary)

        assert "proxies 6/8" in overview
        assert "coverage 75%" in overview

    def test_cilium_overview(self) -> None:
        """Test the Cilium overview with and without an adapter."""
        active = CiliumSummary(
            status="active",
            adapter=MeshAdapter(key="cilium", version="1.14.0", status="available"),
            available_adapters=("cilium", "istio"),
        )

        assert "adapter 1.14.0 (available)" in CiliumPresenter.overview(active)
        assert "available: cilium, istio" in CiliumPresenter.overview(active)
        assert "adapter not listed" in CiliumPresenter.overview(CiliumSummary())


# =============================================================================
# Monitoring
# =============================================================================


class TestMonitoringPresenter:
    """Tests for MonitoringPresenter helpers."""

    def test_kpi_values(self) -> None:
        """Test service KPIs and alert severity."""
        summary = MonitoringSummary(
            prometheus_status="active",
            stats=MonitoringStats(warning_alerts=2, critical_alerts=1),
            target_count=4,
            healthy_target_count=4,
            target_health=100.0,
        )

        values = MonitoringPresenter.kpi_values(summary)

        assert values[KPI_PROMETHEUS] == ("active", "success")
        assert values[KPI_ALERTS] == ("2/1", "error")
        assert values[KPI_TARGETS] == ("4/4 (100%)", "success")

    def test_targets_without_data_are_info(self) -> None:
        """Test no scrape targets keeps the neutral status."""
        values = MonitoringPresenter.kpi_values(MonitoringSummary())

        assert values[KPI_TARGETS][1] == "info"
        assert values[KPI_ALERTS] == ("0/0", "success")

    def test_service_rows(self) -> None:
        """Test address and port are joined."""
        summary = MonitoringSummary(
            services=(
                MonitoringServiceInfo(name="Prometheus", address="10.0.0.10", port=9090),
                MonitoringServiceInfo(name="Grafana"),
            )
        )

        rows = MonitoringPresenter.service_rows(summary)

        assert rows[0][2] == "10.0.0.10:9090"
        assert rows[1][2] == "[dim]-[/dim]"

    def test_retention_text(self) -> None:
        """Test the retention line."""
        summary = MonitoringSummary(
            stats=MonitoringStats(data_retention="15d", scrape_targets=10, healthy_targets=9)
        )

        assert MonitoringPresenter.retention_text(summary) == (
            "Data retention: 15d  Scrape targets: 9/10 healthy"
        )


# =============================================================================
# Performance
# =============================================================================


def _point(minute: int, health: int, live: bool = True) -> PerformancePoint:
    return PerformancePoint(
        timestamp=datetime(2024, 5, 1, 10, minute, tzinfo=timezone.utc),
        time_label=f"10:{minute:02d}",
        cluster_health=health,
        resource_utilization=50,
        service_count=5,
        live=live,
    )


class TestPerformancePresenter:
    """Tests for PerformancePresenter helpers."""

    def test_series(self) -> None:
        """Test one float series per chart."""
        summary = PerformanceSummary(points=(_point(0, 90), _point(1, 80)), window_size=24)

        series = PerformancePresenter.series(summary)

        assert series["cluster_health"] == [90.0, 80.0]
        assert series["service_count"] == [5.0, 5.0]

    def test_sample_rows_newest_first(self) -> None:
        """Test the sample table lists the newest point first."""
        summary = PerformanceSummary(points=(_point(0, 90), _point(1, 40, live=False)))

        rows = PerformancePresenter.sample_rows(summary)

        assert [row[0] for row in rows] == ["10:01", "10:00"]
        assert rows[0][-1] == "[yellow]demo[/yellow]"
        assert "UNHEALTHY" in rows[0][1]

    def test_latest_caption(self) -> None:
        """Test the caption with and without samples."""
        assert PerformancePresenter.latest_caption(PerformanceSummary()) == "No samples yet"

        caption = PerformancePresenter.latest_caption(
            PerformanceSummary(points=(_point(5, 88),), window_size=12)
        )

        assert caption.startswith("1/12 samples, latest 10:05")
