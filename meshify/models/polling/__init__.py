"""Polling data models: endpoints, fetch outcomes and snapshots."""

from meshify.models.polling.endpoint import EndpointDescriptor
from meshify.models.polling.outcome import (
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
)
from meshify.models.polling.snapshot import AggregateSnapshot

__all__ = [
    "AggregateSnapshot",
    "EndpointDescriptor",
    "FetchFailure",
    "FetchOutcome",
    "FetchSuccess",
]
