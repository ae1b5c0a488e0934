"""Performance screen package."""

from meshify.screens.performance.performance_screen import PerformanceScreen
from meshify.screens.performance.presenter import PerformancePresenter

__all__ = ["PerformancePresenter", "PerformanceScreen"]
