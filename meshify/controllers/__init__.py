"""Controllers module for Meshify.

This module provides the polling aggregator, the per-view summary
derivations and the backend controller used by the screens.
"""

from __future__ import annotations

# Base classes
from meshify.controllers.base import (
    AsyncControllerMixin,
    BaseController,
)

# Backend controller
from meshify.controllers.mesh import ActionResult, MeshifyController

# Polling
from meshify.controllers.polling import (
    AggregatorError,
    DerivationError,
    EndpointFetcher,
    PollingAggregator,
    PollSession,
)

__all__ = [
    "ActionResult",
    "AggregatorError",
    # Base
    "AsyncControllerMixin",
    "BaseController",
    "DerivationError",
    "EndpointFetcher",
    "MeshifyController",
    "PollSession",
    # Polling
    "PollingAggregator",
]
