"""Base screen class for Meshify.

Every screen polls one or more views while it is mounted:

1. POLLING:
   - List the views in ``VIEWS``; one presenter per view is created
   - Sessions start in on_mount and stop in on_unmount
   - A header presenter keeps the title and cluster badge current

2. RENDERING:
   - Implement ``render_summary(view, snapshot)``
   - ``LiveStatus`` shows live vs demo data and the last error

3. REFRESH:
   - ``action_refresh`` starts an extra cycle for every view
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from contextlib import suppress
from typing import TYPE_CHECKING, ClassVar

from rich.markup import escape
from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from meshify.constants.enums import ViewName
from meshify.constants.values import APP_TITLE, DEFAULT_VIEW_TITLE, VIEW_TITLES
from meshify.models.summaries import HeaderSummary
from meshify.screens.mixins import PollingPresenter, SnapshotFailed, SnapshotUpdated
from meshify.utils.formatting import status_markup
from meshify.widgets import LiveStatus

if TYPE_CHECKING:
    from meshify.controllers.mesh import MeshifyController
    from meshify.models.polling import AggregateSnapshot

logger = logging.getLogger(__name__)


def header_text(summary: HeaderSummary) -> str:
    """Render the header badge line."""
    clusters = "cluster" if summary.cluster_count == 1 else "clusters"
    return (
        f"[b]{escape(summary.title)}[/b]  "
        f"{summary.cluster_count} {clusters}  "
        f"{status_markup(summary.connection_status)}"
    )


def fill_table(
    table: DataTable,
    columns: list[tuple[str, int]],
    rows: list[list[str]],
) -> None:
    """Replace a table's columns and rows."""
    table.clear(columns=True)
    for name, width in columns:
        table.add_column(name, width=width)
    for row in rows:
        table.add_row(*row)


class BaseScreen(Screen):
    """Abstract base class for polling screens.

    Subclasses must implement:
    - ``VIEWS``: views polled while the screen is mounted
    - ``compose_content``: the screen body
    - ``render_summary``: update widgets from a snapshot
    """

    ROUTE: ClassVar[str] = "dashboard"
    VIEWS: ClassVar[tuple[ViewName, ...]] = ()

    DEFAULT_CSS = """
    BaseScreen #view-header {
        height: 1;
        padding: 0 1;
        background: $boost;
    }
    """

    def __init__(self, controller: MeshifyController) -> None:
        super().__init__()
        self._controller = controller
        self._header_presenter = PollingPresenter(
            self, controller, view=ViewName.HEADER, route=self.ROUTE
        )
        self._presenters: dict[ViewName, PollingPresenter] = {
            view: self.create_presenter(view) for view in self.VIEWS
        }

    @property
    def controller(self) -> MeshifyController:
        return self._controller

    @property
    def presenters(self) -> dict[ViewName, PollingPresenter]:
        return self._presenters

    @property
    def header_presenter(self) -> PollingPresenter:
        return self._header_presenter

    def create_presenter(self, view: ViewName) -> PollingPresenter:
        """Build the presenter for ``view``; override for view-specific presenters."""
        return PollingPresenter(self, self._controller, view=view)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(f"[b]{APP_TITLE}[/b]", id="view-header")
        yield from self.compose_content()
        yield LiveStatus(id="live-status")
        yield Footer()

    @abstractmethod
    def compose_content(self) -> ComposeResult:
        """Yield the widgets of the screen body."""
        ...

    @abstractmethod
    def render_summary(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        """Update the screen body from a new snapshot."""
        ...

    def on_mount(self) -> None:
        self.sub_title = VIEW_TITLES.get(self.ROUTE, DEFAULT_VIEW_TITLE)
        self._header_presenter.start()
        for presenter in self._presenters.values():
            presenter.start()

    def on_unmount(self) -> None:
        self._header_presenter.stop()
        for presenter in self._presenters.values():
            presenter.stop()

    def action_refresh(self) -> None:
        with suppress(NoMatches):
            self.query_one("#live-status", LiveStatus).show_loading()
        self._header_presenter.refresh()
        for presenter in self._presenters.values():
            presenter.refresh()

    def on_snapshot_updated(self, message: SnapshotUpdated) -> None:
        message.stop()
        if message.view is ViewName.HEADER:
            if isinstance(message.snapshot.summary, HeaderSummary):
                with suppress(NoMatches):
                    self.query_one("#view-header", Static).update(
                        header_text(message.snapshot.summary)
                    )
            return

        presenter = self._presenters.get(message.view)
        with suppress(NoMatches):
            self.query_one("#live-status", LiveStatus).show_snapshot(
                message.snapshot, presenter.last_error if presenter else None
            )
        self.render_summary(message.view, message.snapshot)

    def on_snapshot_failed(self, message: SnapshotFailed) -> None:
        message.stop()
        with suppress(NoMatches):
            self.query_one("#live-status", LiveStatus).show_error(message.error)
        self.notify(message.error, title="Summary failed", severity="error")


__all__ = ["BaseScreen", "fill_table", "header_text"]
