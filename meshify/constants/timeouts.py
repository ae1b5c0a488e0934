"""Timeout constants for Meshify.

All timeout and interval values for backend requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# Backend request timeouts (float, in seconds)
# ============================================================================

BACKEND_REQUEST_TIMEOUT: Final = 10.0
BACKEND_CONNECT_TIMEOUT: Final = 2.0
BACKEND_ACTION_TIMEOUT: Final = 120.0

# ============================================================================
# Polling intervals (float, in seconds)
# ============================================================================

DASHBOARD_POLL_INTERVAL: Final = 60.0
HEADER_POLL_INTERVAL: Final = 60.0
PERFORMANCE_POLL_INTERVAL: Final = 60.0
MESH_POLL_INTERVAL: Final = 30.0
MONITORING_POLL_INTERVAL: Final = 30.0

__all__ = [
    "BACKEND_ACTION_TIMEOUT",
    "BACKEND_CONNECT_TIMEOUT",
    "BACKEND_REQUEST_TIMEOUT",
    "DASHBOARD_POLL_INTERVAL",
    "HEADER_POLL_INTERVAL",
    "MESH_POLL_INTERVAL",
    "MONITORING_POLL_INTERVAL",
    "PERFORMANCE_POLL_INTERVAL",
]
