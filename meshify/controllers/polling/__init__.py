"""Polling aggregator and endpoint fetching."""

from meshify.controllers.polling.aggregator import (
    AggregatorError,
    DerivationError,
    PollingAggregator,
    PollSession,
)
from meshify.controllers.polling.fetchers import EndpointFetcher

__all__ = [
    "AggregatorError",
    "DerivationError",
    "EndpointFetcher",
    "PollSession",
    "PollingAggregator",
]
