"""Performance screen: rolling health and utilization charts."""

from __future__ import annotations

from contextlib import suppress

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import DataTable, Label, Sparkline, Static

from meshify.constants.enums import ViewName
from meshify.models.polling import AggregateSnapshot
from meshify.models.summaries import PerformanceSummary
from meshify.screens.base_screen import BaseScreen, fill_table
from meshify.screens.mixins import PollingPresenter
from meshify.screens.performance.presenter import (
    CHART_SERIES,
    SAMPLE_TABLE_COLUMNS,
    PerformancePresenter,
)


class PerformanceScreen(BaseScreen):
    """Charts one sample per poll cycle over a fixed window."""

    ROUTE = "performance"
    VIEWS = (ViewName.PERFORMANCE,)

    DEFAULT_CSS = """
    PerformanceScreen #performance-charts {
        height: auto;
        padding: 0 1;
    }
    PerformanceScreen Sparkline {
        height: 3;
        margin-bottom: 1;
    }
    PerformanceScreen #samples-table {
        height: 1fr;
    }
    """

    def create_presenter(self, view: ViewName) -> PollingPresenter:
        return PerformancePresenter(self, self.controller)

    def compose_content(self) -> ComposeResult:
        with Vertical(id="performance-charts"):
            yield Static("No samples yet", id="performance-caption")
            for field, title in CHART_SERIES:
                yield Label(title)
                yield Sparkline([], summary_function=max, id=f"chart-{field}")
        yield DataTable(id="samples-table", zebra_stripes=True)

    def render_summary(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        summary = snapshot.summary
        if not isinstance(summary, PerformanceSummary):
            return
        with suppress(NoMatches):
            self.query_one("#performance-caption", Static).update(
                PerformancePresenter.latest_caption(summary)
            )
            for field, values in PerformancePresenter.series(summary).items():
                self.query_one(f"#chart-{field}", Sparkline).data = values
            fill_table(
                self.query_one("#samples-table", DataTable),
                SAMPLE_TABLE_COLUMNS,
                PerformancePresenter.sample_rows(summary),
            )
