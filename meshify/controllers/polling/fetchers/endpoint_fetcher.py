"""Endpoint fetcher - turns one backend HTTP call into a FetchOutcome."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from meshify.constants.timeouts import BACKEND_CONNECT_TIMEOUT, BACKEND_REQUEST_TIMEOUT
from meshify.models.polling import (
    EndpointDescriptor,
    FetchFailure,
    FetchOutcome,
    FetchSuccess,
)

logger = logging.getLogger(__name__)


class EndpointFetcher:
    """Fetches JSON documents from the Meshify backend.

    Every transport, status and decoding problem is converted into a
    ``FetchFailure``; ``fetch`` never raises for a single endpoint outage.
    """

    _MAX_REASON_LENGTH = 160

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = BACKEND_REQUEST_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with the backend base URL.

        Args:
            base_url: Backend root, e.g. ``http://localhost:8080``.
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured client (tests pass a MockTransport).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout, connect=min(timeout, BACKEND_CONNECT_TIMEOUT)),
            headers={"Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _resolve(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}/{url.lstrip('/')}"

    @classmethod
    def _short(cls, text: str) -> str:
        text = " ".join(text.split())
        if len(text) > cls._MAX_REASON_LENGTH:
            return text[: cls._MAX_REASON_LENGTH - 3] + "..."
        return text

    @staticmethod
    def _backend_error_detail(response: httpx.Response) -> str:
        """Extract the ``error``/``message`` field the backend puts in error bodies."""
        try:
            body = response.json()
        except ValueError:
            return ""
        if isinstance(body, dict):
            for key in ("error", "message"):
                value = body.get(key)
                if isinstance(value, str) and value:
                    return value
        return ""

    async def fetch(self, endpoint: EndpointDescriptor) -> FetchOutcome:
        """Request one endpoint and classify the result."""
        url = self._resolve(endpoint.url)
        try:
            response = await self._client.request(endpoint.method, url)
        except httpx.TimeoutException:
            logger.warning("Request to %s timed out after %ss", endpoint.label, self._timeout)
            return FetchFailure(f"timed out after {self._timeout:g}s")
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", endpoint.label, exc)
            return FetchFailure(self._short(f"{type(exc).__name__}: {exc}"))

        if not response.is_success:
            detail = self._backend_error_detail(response)
            reason = f"HTTP {response.status_code}"
            if detail:
                reason = f"{reason}: {detail}"
            logger.info("Endpoint %s answered %s", endpoint.label, reason)
            return FetchFailure(self._short(reason))

        try:
            payload: Any = response.json()
        except ValueError as exc:
            logger.warning("Endpoint %s returned invalid JSON", endpoint.label)
            return FetchFailure(self._short(f"invalid JSON: {exc}"))
        return FetchSuccess(payload)

    async def post(self, path: str, json: Any | None = None) -> httpx.Response:
        """POST to a backend action endpoint; transport errors propagate."""
        return await self._client.post(self._resolve(path), json=json)

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()
