"""Constants module for Meshify.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout and polling interval values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
- endpoints.py: Backend paths and endpoint labels
"""

from meshify.constants.defaults import (
    BACKEND_URL_DEFAULT,
    PERFORMANCE_WINDOW_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REQUEST_TIMEOUT_DEFAULT,
    THEME_DEFAULT,
)
from meshify.constants.enums import (
    ComponentHealth,
    DataMode,
    FetchState,
    MeshProvider,
    ViewName,
)
from meshify.constants.limits import (
    PERCENT_MAX,
    PERCENT_MIN,
    REFRESH_INTERVAL_MIN,
)
from meshify.constants.timeouts import (
    BACKEND_REQUEST_TIMEOUT,
)
from meshify.constants.values import (
    APP_TITLE,
    DEMO_DATA_TEXT,
    LIVE_DATA_TEXT,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "BACKEND_URL_DEFAULT",
    # Timeouts
    "BACKEND_REQUEST_TIMEOUT",
    "DEMO_DATA_TEXT",
    "LIVE_DATA_TEXT",
    # Limits
    "PERCENT_MAX",
    "PERCENT_MIN",
    "PERFORMANCE_WINDOW_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "REQUEST_TIMEOUT_DEFAULT",
    "THEME_DEFAULT",
    # Enums
    "ComponentHealth",
    "DataMode",
    "FetchState",
    "MeshProvider",
    "ViewName",
]
