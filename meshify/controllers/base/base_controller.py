"""Base controller with async worker-friendly patterns for Meshify.

Controllers run on Textual's event loop; every network call is awaited so
the UI stays responsive while the backend answers.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class AsyncControllerMixin:
    """Mixin providing load-duration tracking for async controllers."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _mark_load_start(self) -> None:
        self._load_start_time = time.monotonic()

    def _load_duration_ms(self) -> float:
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000.0


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
