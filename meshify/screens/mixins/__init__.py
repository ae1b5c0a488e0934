"""Screen mixins package for Meshify."""

from meshify.screens.mixins.polling_presenter import (
    PollingPresenter,
    SnapshotFailed,
    SnapshotUpdated,
)

__all__ = [
    "PollingPresenter",
    "SnapshotFailed",
    "SnapshotUpdated",
]
