"""App-level keyboard bindings.

Textual Binding objects that work from any screen.
"""

from textual.binding import Binding

APP_BINDINGS: list[Binding] = [
    Binding("d", "nav_dashboard", "Dashboard"),
    Binding("p", "nav_performance", "Performance"),
    Binding("m", "nav_mesh", "Service Mesh"),
    Binding("o", "nav_monitoring", "Observability"),
    Binding("r", "refresh", "Refresh"),
    Binding("?", "show_help", "Help"),
    Binding("q", "quit", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
