"""Presenter base wiring a poll session to a Textual screen.

The presenter starts one ``PollSession`` for its view and turns the
aggregator callbacks into Textual messages posted to the owning screen.
Ordering and staleness are handled by the aggregator; every snapshot
delivered here is already the newest one.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from textual.message import Message

from meshify.constants.enums import FetchState, ViewName
from meshify.controllers.polling import PollSession
from meshify.models.polling import AggregateSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Messages
# =============================================================================


class SnapshotUpdated(Message):
    """A poll cycle for ``view`` produced a new snapshot."""

    def __init__(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        super().__init__()
        self.view = view
        self.snapshot = snapshot


class SnapshotFailed(Message):
    """Deriving the summary for ``view`` failed; polling continues."""

    def __init__(self, view: ViewName, error: str) -> None:
        super().__init__()
        self.view = view
        self.error = error


class MessageTarget(Protocol):
    def post_message(self, message: Message) -> bool: ...


class PollingPresenter:
    """Owns the poll session of one view on behalf of a screen."""

    view: ViewName = ViewName.DASHBOARD

    def __init__(
        self,
        target: MessageTarget,
        controller: Any,
        *,
        view: ViewName | None = None,
        route: str | None = None,
    ) -> None:
        self._target = target
        self._controller = controller
        if view is not None:
            self.view = view
        self._aggregator = controller.aggregator_for(self.view, route=route)
        self._session: PollSession | None = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def session(self) -> PollSession | None:
        return self._session

    @property
    def is_polling(self) -> bool:
        return self._session is not None and self._session.is_polling

    @property
    def is_loading(self) -> bool:
        return self._session is not None and self._session.is_loading

    @property
    def last_snapshot(self) -> AggregateSnapshot | None:
        return self._session.last_snapshot if self._session else None

    @property
    def last_error(self) -> str | None:
        return self._session.last_error if self._session else None

    @property
    def using_fallback_data(self) -> bool:
        snapshot = self.last_snapshot
        return snapshot.using_fallback_data if snapshot else False

    @property
    def fetch_state(self) -> FetchState:
        if self.last_snapshot is None or self.is_loading:
            return FetchState.LOADING
        if self.using_fallback_data or self.last_error:
            return FetchState.ERROR
        return FetchState.SUCCESS

    # =========================================================================
    # Session lifecycle
    # =========================================================================

    def start(self) -> PollSession:
        """Start polling; a running session is returned unchanged."""
        if self._session is not None and self._session.is_polling:
            return self._session
        self._session = self._aggregator.start(
            self._controller.endpoints_for(self.view),
            self._controller.interval_for(self.view),
            self._on_update,
            self._on_error,
        )
        return self._session

    def stop(self) -> None:
        self._aggregator.stop(self._session)

    def refresh(self) -> None:
        if self._session is not None:
            self._session.refresh()

    def _on_update(self, snapshot: AggregateSnapshot) -> None:
        self._target.post_message(SnapshotUpdated(self.view, snapshot))

    def _on_error(self, message: str) -> None:
        logger.warning("%s summary failed: %s", self.view.value, message)
        self._target.post_message(SnapshotFailed(self.view, message))


__all__ = [
    "PollingPresenter",
    "SnapshotFailed",
    "SnapshotUpdated",
]
