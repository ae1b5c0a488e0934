"""Monitoring screen package."""

from meshify.screens.monitoring.monitoring_screen import MonitoringScreen
from meshify.screens.monitoring.presenter import MonitoringPresenter

__all__ = ["MonitoringPresenter", "MonitoringScreen"]
