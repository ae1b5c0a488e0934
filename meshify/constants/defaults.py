"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Backend defaults
# ============================================================================

BACKEND_URL_DEFAULT: Final = "http://localhost:8080"
REQUEST_TIMEOUT_DEFAULT: Final = 10.0

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
REFRESH_INTERVAL_DEFAULT: Final = 60
PERFORMANCE_WINDOW_DEFAULT: Final = 24

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "INFO"
LOG_FILE_DEFAULT: Final = ""

__all__ = [
    "BACKEND_URL_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PERFORMANCE_WINDOW_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REQUEST_TIMEOUT_DEFAULT",
    "THEME_DEFAULT",
]
