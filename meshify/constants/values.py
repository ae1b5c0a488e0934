"""Scalar constants for Meshify.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "Meshify"
APP_NAME: Final = "meshify"

# ============================================================================
# Data source status text
# ============================================================================

LIVE_DATA_TEXT: Final = "Live cluster data"
DEMO_DATA_TEXT: Final = "Using demo data - API unavailable"
LOADING_TEXT: Final = "Loading cluster metrics..."

# ============================================================================
# Health status (markup for rich text display)
# ============================================================================

HEALTHY: Final = "[green]HEALTHY[/green]"
DEGRADED: Final = "[yellow]DEGRADED[/yellow]"
UNHEALTHY: Final = "[red]UNHEALTHY[/red]"

# ============================================================================
# View titles (header)
# ============================================================================

DEFAULT_VIEW_TITLE: Final = "Welcome"
VIEW_TITLES: Final[dict[str, str]] = {
    "provider": "Welcome",
    "dashboard": "Dashboard",
    "performance": "Performance",
    "trafficmanagement": "Traffic Management",
    "service-mesh-health": "Service Mesh Health",
    "mesh": "Service Mesh",
    "security": "Security",
    "observability": "Observability",
    "monitoring": "Observability",
    "settings": "Settings",
}

# ============================================================================
# Backend status vocabulary
# ============================================================================

CONNECTED_STATUS: Final = "connected"
UNKNOWN_STATUS: Final = "unknown"
ACTIVE_STATUS: Final = "active"
INACTIVE_STATUS: Final = "inactive"
RUNNING_STATUS: Final = "Running"

__all__ = [
    "ACTIVE_STATUS",
    "APP_NAME",
    "APP_TITLE",
    "CONNECTED_STATUS",
    "DEFAULT_VIEW_TITLE",
    "DEGRADED",
    "DEMO_DATA_TEXT",
    "HEALTHY",
    "INACTIVE_STATUS",
    "LIVE_DATA_TEXT",
    "LOADING_TEXT",
    "RUNNING_STATUS",
    "UNHEALTHY",
    "UNKNOWN_STATUS",
    "VIEW_TITLES",
]
