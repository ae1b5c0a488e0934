"""Screens for Meshify."""

from meshify.screens.base_screen import BaseScreen
from meshify.screens.dashboard import DashboardScreen
from meshify.screens.mesh import MeshScreen
from meshify.screens.monitoring import MonitoringScreen
from meshify.screens.performance import PerformanceScreen

__all__ = [
    "BaseScreen",
    "DashboardScreen",
    "MeshScreen",
    "MonitoringScreen",
    "PerformanceScreen",
]
