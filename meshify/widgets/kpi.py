"""CustomKPI widget for displaying key performance indicators.

CSS Classes: widget-custom-kpi
"""

from __future__ import annotations

import contextlib

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Static

from meshify.widgets._base import StatefulWidget

# Spinner frames for the inline loading animation
_SPINNER_FRAMES = ("   ", ".  ", ".. ", "...")
_SPINNER_INTERVAL = 0.3

KPI_STATUSES = ("success", "warning", "error", "info")


class CustomKPI(StatefulWidget):
    """Titled value tile with a status color and a loading spinner."""

    DEFAULT_CSS = """
    CustomKPI {
        height: auto;
        width: 1fr;
        padding: 0 1;
        border: solid $surface-lighten-1;
        background: $surface;
        content-align: center middle;
    }
    CustomKPI > .kpi-title {
        text-style: bold;
        color: $secondary;
        text-align: center;
        width: 100%;
    }
    CustomKPI > .kpi-value {
        text-style: bold;
        color: $text;
        text-align: center;
        width: 100%;
    }
    CustomKPI.success > .kpi-value { color: $success; }
    CustomKPI.warning > .kpi-value { color: $warning; }
    CustomKPI.error > .kpi-value { color: $error; }
    CustomKPI.info > .kpi-value { color: $text; }
    CustomKPI > .kpi-spinner {
        text-style: bold;
        text-align: center;
        width: 100%;
        display: none;
    }
    """
    _default_classes = "widget-custom-kpi"

    value = reactive("", init=False)

    def __init__(
        self,
        title: str,
        value: str = "-",
        status: str = "info",
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the KPI tile.

        Args:
            title: The KPI title.
            value: The value to display.
            status: Status indicator (success, warning, error, info).
            id: Optional widget ID.
            classes: Optional CSS classes.
        """
        super().__init__(id=id, classes=classes)
        self._title = title
        self._value = value
        self._status = status
        self._spinner_timer = None
        self._spinner_frame = 0

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="kpi-title")
        yield Static(self._value, classes="kpi-value")
        yield Static("...", classes="kpi-spinner")

    def on_mount(self) -> None:
        if self._status:
            self.add_class(self._status)

    def on_unmount(self) -> None:
        if self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    def watch_is_loading(self, loading: bool) -> None:
        try:
            value_widget = self.query_one(".kpi-value", Static)
            spinner_widget = self.query_one(".kpi-spinner", Static)
        except NoMatches:
            return
        value_widget.display = not loading
        spinner_widget.display = loading
        if loading and self._spinner_timer is None:
            self._spinner_frame = 0
            self._spinner_timer = self.set_interval(_SPINNER_INTERVAL, self._advance_spinner)
        elif not loading and self._spinner_timer is not None:
            self._spinner_timer.stop()
            self._spinner_timer = None

    def _advance_spinner(self) -> None:
        with contextlib.suppress(NoMatches):
            self._spinner_frame = (self._spinner_frame + 1) % len(_SPINNER_FRAMES)
            self.query_one(".kpi-spinner", Static).update(_SPINNER_FRAMES[self._spinner_frame])

    def watch_value(self, value: str) -> None:
        with contextlib.suppress(NoMatches):
            self.query_one(".kpi-value", Static).update(value)

    def set_value(self, value: str, status: str | None = None) -> None:
        """Set the KPI value (and optionally status) and stop the spinner."""
        self._value = value
        self.is_loading = False
        self.value = value
        if status is not None:
            self.set_status(status)

    def set_status(self, status: str) -> None:
        """Set the KPI status (success, warning, error, info)."""
        if status not in KPI_STATUSES:
            raise ValueError(f"Unknown KPI status: {status!r}")
        if self._status == status:
            return
        if self._status:
            self.remove_class(self._status)
        self._status = status
        self.add_class(status)

    def start_loading(self) -> None:
        """Show the inline loading spinner until the next value arrives."""
        self.is_loading = True

    @property
    def title(self) -> str:
        return self._title

    @property
    def status(self) -> str:
        return self._status
