"""Dashboard screen package."""

from meshify.screens.dashboard.dashboard_screen import DashboardScreen
from meshify.screens.dashboard.presenter import DashboardPresenter

__all__ = ["DashboardPresenter", "DashboardScreen"]
