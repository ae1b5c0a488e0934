"""HTTP fetchers used by the polling aggregator."""

from meshify.controllers.polling.fetchers.endpoint_fetcher import EndpointFetcher

__all__ = ["EndpointFetcher"]
