"""LiveStatus widget: data source indicator shown on every screen."""

from __future__ import annotations

from datetime import datetime

from rich.markup import escape
from textual.widgets import Static

from meshify.constants.values import DEMO_DATA_TEXT, LIVE_DATA_TEXT, LOADING_TEXT
from meshify.models.polling import AggregateSnapshot


def data_source_markup(
    *,
    using_fallback_data: bool,
    timestamp: datetime | None = None,
    error: str | None = None,
) -> str:
    """Build the status line markup for the latest snapshot."""
    if using_fallback_data:
        text = f"[yellow]● {DEMO_DATA_TEXT}[/yellow]"
    else:
        text = f"[green]● {LIVE_DATA_TEXT}[/green]"
    if timestamp is not None:
        text += f"  [dim]updated {timestamp.astimezone().strftime('%H:%M:%S')}[/dim]"
    if error:
        text += f"  [red]{escape(error)}[/red]"
    return text


class LiveStatus(Static):
    """Single-line indicator: live vs demo data, last update and last error."""

    DEFAULT_CSS = """
    LiveStatus {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(f"[dim]{LOADING_TEXT}[/dim]", id=id, classes=classes)
        self._snapshot: AggregateSnapshot | None = None

    @property
    def snapshot(self) -> AggregateSnapshot | None:
        return self._snapshot

    def show_snapshot(self, snapshot: AggregateSnapshot, error: str | None = None) -> None:
        self._snapshot = snapshot
        self.update(
            data_source_markup(
                using_fallback_data=snapshot.using_fallback_data,
                timestamp=snapshot.timestamp,
                error=error,
            )
        )

    def show_error(self, message: str) -> None:
        """Keep the data-source text of the last snapshot and append the error."""
        snapshot = self._snapshot
        self.update(
            data_source_markup(
                using_fallback_data=snapshot.using_fallback_data if snapshot else False,
                timestamp=snapshot.timestamp if snapshot else None,
                error=message,
            )
        )

    def show_loading(self) -> None:
        self.update(f"[dim]{LOADING_TEXT}[/dim]")
