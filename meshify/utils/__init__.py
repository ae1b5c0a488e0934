"""Utility functions for Meshify."""

from meshify.utils.formatting import (
    classify_health,
    format_percent,
    health_markup,
    kpi_status,
    status_markup,
)
from meshify.utils.logging_setup import configure_logging

__all__ = [
    "classify_health",
    "configure_logging",
    "format_percent",
    "health_markup",
    "kpi_status",
    "status_markup",
]
