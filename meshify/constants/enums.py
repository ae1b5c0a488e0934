"""All enum definitions for Meshify.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class DataMode(Enum):
    """Whether a snapshot carries backend data or synthetic placeholders."""

    LIVE = "live"
    FALLBACK = "fallback"


# =============================================================================
# Domain Enums
# =============================================================================

class MeshProvider(Enum):
    """Service mesh adapters supported by the backend."""

    ISTIO = "istio"
    LINKERD = "linkerd"
    CILIUM = "cilium"


class ViewName(Enum):
    """Polling views, each with its own endpoint set and derivation."""

    DASHBOARD = "dashboard"
    HEADER = "header"
    PERFORMANCE = "performance"
    LINKERD = "linkerd"
    ISTIO = "istio"
    CILIUM = "cilium"
    MONITORING = "monitoring"


class ComponentHealth(Enum):
    """Health classification for mesh and monitoring components."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"


__all__ = [
    "ComponentHealth",
    "DataMode",
    "FetchState",
    "MeshProvider",
    "ViewName",
]
