"""Dashboard screen: cluster KPIs, workload counts, clusters and services."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.widgets import DataTable

from meshify.constants.enums import ViewName
from meshify.models.polling import AggregateSnapshot
from meshify.models.summaries import DashboardSummary
from meshify.screens.base_screen import BaseScreen, fill_table
from meshify.screens.dashboard.config import (
    CLUSTER_TABLE_COLUMNS,
    KPI_TILES,
    SERVICE_TABLE_COLUMNS,
    WORKLOAD_TABLE_COLUMNS,
)
from meshify.screens.dashboard.presenter import DashboardPresenter
from meshify.screens.mixins import PollingPresenter
from meshify.widgets import CustomKPI


class DashboardScreen(BaseScreen):
    """Landing screen."""

    ROUTE = "dashboard"
    VIEWS = (ViewName.DASHBOARD,)

    DEFAULT_CSS = """
    DashboardScreen #dashboard-kpis {
        height: auto;
    }
    DashboardScreen #dashboard-tables {
        height: 1fr;
    }
    DashboardScreen DataTable {
        width: 1fr;
        height: 1fr;
    }
    """

    def create_presenter(self, view: ViewName) -> PollingPresenter:
        return DashboardPresenter(self, self.controller)

    def compose_content(self) -> ComposeResult:
        with Horizontal(id="dashboard-kpis"):
            for kpi_id, title in KPI_TILES:
                yield CustomKPI(title, id=kpi_id)
        with Horizontal(id="dashboard-tables"):
            with Vertical():
                yield DataTable(id="workloads-table", zebra_stripes=True)
                yield DataTable(id="clusters-table", zebra_stripes=True)
            yield DataTable(id="services-table", zebra_stripes=True)

    def on_mount(self) -> None:
        for kpi in self.query(CustomKPI):
            kpi.start_loading()

    def render_summary(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        summary = snapshot.summary
        if not isinstance(summary, DashboardSummary):
            return
        with suppress(NoMatches):
            for kpi_id, (value, status) in DashboardPresenter.kpi_values(summary).items():
                self.query_one(f"#{kpi_id}", CustomKPI).set_value(value, status)
            fill_table(
                self.query_one("#workloads-table", DataTable),
                WORKLOAD_TABLE_COLUMNS,
                DashboardPresenter.workload_rows(summary),
            )
            fill_table(
                self.query_one("#clusters-table", DataTable),
                CLUSTER_TABLE_COLUMNS,
                DashboardPresenter.cluster_rows(summary),
            )
            fill_table(
                self.query_one("#services-table", DataTable),
                SERVICE_TABLE_COLUMNS,
                DashboardPresenter.service_rows(summary),
            )
