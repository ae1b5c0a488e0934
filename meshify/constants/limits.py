"""Limit and threshold constants for Meshify.

All limit values, clamps, and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 5
REQUEST_TIMEOUT_MIN: Final = 0.5
REQUEST_TIMEOUT_MAX: Final = 120.0
PERFORMANCE_WINDOW_MIN: Final = 1
PERFORMANCE_WINDOW_MAX: Final = 288

# ============================================================================
# Derived metric clamps
# ============================================================================

PERCENT_MIN: Final = 0
PERCENT_MAX: Final = 100
UTILIZATION_FLOOR: Final = 20
UTILIZATION_CEILING: Final = 90

# ============================================================================
# Display limits
# ============================================================================

MAX_SERVICE_NAMES_DISPLAY: Final = 50
MAX_COMPONENT_ROWS_DISPLAY: Final = 100

__all__ = [
    "MAX_COMPONENT_ROWS_DISPLAY",
    "MAX_SERVICE_NAMES_DISPLAY",
    "PERCENT_MAX",
    "PERCENT_MIN",
    "PERFORMANCE_WINDOW_MAX",
    "PERFORMANCE_WINDOW_MIN",
    "REFRESH_INTERVAL_MIN",
    "REQUEST_TIMEOUT_MAX",
    "REQUEST_TIMEOUT_MIN",
    "UTILIZATION_CEILING",
    "UTILIZATION_FLOOR",
]
