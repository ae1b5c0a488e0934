"""Monitoring screen: Prometheus and Grafana health, alerts and targets."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import DataTable, Static

from meshify.constants.enums import ViewName
from meshify.models.polling import AggregateSnapshot
from meshify.models.summaries import MonitoringSummary
from meshify.screens.base_screen import BaseScreen, fill_table
from meshify.screens.mixins import PollingPresenter
from meshify.screens.monitoring.presenter import (
    KPI_TILES,
    SERVICE_TABLE_COLUMNS,
    MonitoringPresenter,
)
from meshify.widgets import CustomKPI


class MonitoringScreen(BaseScreen):
    """Observability overview."""

    ROUTE = "observability"
    VIEWS = (ViewName.MONITORING,)

    DEFAULT_CSS = """
    MonitoringScreen #monitoring-kpis {
        height: auto;
    }
    MonitoringScreen #monitoring-retention {
        height: 1;
        padding: 0 1;
    }
    MonitoringScreen #monitoring-services {
        height: 1fr;
    }
    """

    def create_presenter(self, view: ViewName) -> PollingPresenter:
        return MonitoringPresenter(self, self.controller)

    def compose_content(self) -> ComposeResult:
        with Horizontal(id="monitoring-kpis"):
            for kpi_id, title in KPI_TILES:
                yield CustomKPI(title, id=kpi_id)
        yield Static("", id="monitoring-retention")
        yield DataTable(id="monitoring-services", zebra_stripes=True)

    def on_mount(self) -> None:
        for kpi in self.query(CustomKPI):
            kpi.start_loading()

    def render_summary(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        summary = snapshot.summary
        if not isinstance(summary, MonitoringSummary):
            return
        with suppress(NoMatches):
            for kpi_id, (value, status) in MonitoringPresenter.kpi_values(summary).items():
                self.query_one(f"#{kpi_id}", CustomKPI).set_value(value, status)
            self.query_one("#monitoring-retention", Static).update(
                MonitoringPresenter.retention_text(summary)
            )
            fill_table(
                self.query_one("#monitoring-services", DataTable),
                SERVICE_TABLE_COLUMNS,
                MonitoringPresenter.service_rows(summary),
            )
