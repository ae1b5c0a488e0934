"""Polling data aggregator.

Issues a fixed set of independent backend requests on an interval, waits
for all of them to settle, derives one summary per cycle and hands frozen
snapshots to the caller. Individual endpoint failures never stop polling.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from meshify.constants.timeouts import BACKEND_REQUEST_TIMEOUT
from meshify.controllers.derivations.base import DerivationContext, SummaryDerivation
from meshify.models.polling import (
    AggregateSnapshot,
    EndpointDescriptor,
    FetchFailure,
    FetchOutcome,
)

logger = logging.getLogger(__name__)

FetchCallable = Callable[[EndpointDescriptor], Awaitable[FetchOutcome]]
UpdateCallback = Callable[[AggregateSnapshot], Any]
ErrorCallback = Callable[[str], Any]


class AggregatorError(Exception):
    """Base exception for polling errors."""


class DerivationError(AggregatorError):
    """A summary derivation raised while processing a settled cycle."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _invoke(callback: Callable[..., Any], *args: Any) -> None:
    """Call a sync or async callback; its failures are logged, never raised."""
    try:
        result = callback(*args)
        if inspect.isawaitable(result):
            await result
    except Exception:
        logger.exception("Polling callback %r failed", callback)


class PollSession:
    """One running poll loop.

    The session owns its timer task exclusively. Cycles launched by the timer
    or by ``refresh`` run to completion even when a newer cycle starts; the
    sequence check in ``_deliver`` drops results that arrive out of order.
    """

    def __init__(
        self,
        aggregator: PollingAggregator,
        endpoints: Sequence[EndpointDescriptor],
        interval_seconds: float,
        on_update: UpdateCallback,
        on_error: ErrorCallback,
    ) -> None:
        self._aggregator = aggregator
        self._endpoints = tuple(endpoints)
        self._interval = interval_seconds
        self._on_update = on_update
        self._on_error = on_error

        self._timer: asyncio.Task[None] | None = None
        self._cycles: set[asyncio.Task[None]] = set()
        self._sequence = 0
        self._last_delivered = 0

        self.is_polling = False
        self.last_error: str | None = None
        self.last_snapshot: AggregateSnapshot | None = None

    @property
    def endpoints(self) -> tuple[EndpointDescriptor, ...]:
        return self._endpoints

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def cycle_count(self) -> int:
        """Number of cycles launched so far."""
        return self._sequence

    @property
    def last_delivered_sequence(self) -> int:
        return self._last_delivered

    @property
    def is_loading(self) -> bool:
        """True while at least one cycle is still waiting on the backend."""
        return any(not task.done() for task in self._cycles)

    def _begin(self) -> None:
        self.is_polling = True
        self._launch_cycle()
        self._timer = asyncio.create_task(self._tick(), name="meshify-poll-timer")

    async def _tick(self) -> None:
        while self.is_polling:
            await asyncio.sleep(self._interval)
            if not self.is_polling:
                break
            self._launch_cycle()

    def _launch_cycle(self) -> asyncio.Task[None]:
        self._sequence += 1
        task = asyncio.create_task(
            self._run_cycle(self._sequence),
            name=f"meshify-poll-cycle-{self._sequence}",
        )
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)
        return task

    def refresh(self) -> asyncio.Task[None] | None:
        """Start an extra cycle now without touching the timer."""
        if not self.is_polling:
            return None
        return self._launch_cycle()

    async def _run_cycle(self, sequence: int) -> None:
        outcomes = await self._aggregator.gather(self._endpoints)
        await self._deliver(sequence, outcomes)

    async def _deliver(self, sequence: int, outcomes: dict[str, FetchOutcome]) -> None:
        if not self.is_polling:
            logger.debug("Dropping cycle %d of a stopped session", sequence)
            return
        if sequence < self._last_delivered:
            logger.debug(
                "Discarding stale cycle %d (already delivered %d)",
                sequence,
                self._last_delivered,
            )
            return

        previous = self.last_snapshot.summary if self.last_snapshot else None
        try:
            snapshot = self._aggregator.build_snapshot(sequence, outcomes, previous)
        except DerivationError as exc:
            message = str(exc)
            self.last_error = message
            await _invoke(self._on_error, message)
            return

        self._last_delivered = sequence
        self.last_snapshot = snapshot
        self.last_error = _fallback_error(snapshot)
        await _invoke(self._on_update, snapshot)

    def stop(self) -> None:
        """Stop the timer. Safe to call more than once."""
        self.is_polling = False
        timer, self._timer = self._timer, None
        if timer is not None and not timer.done():
            timer.cancel()

    async def wait_idle(self) -> None:
        """Wait until every launched cycle has finished."""
        while self._cycles:
            await asyncio.gather(*list(self._cycles), return_exceptions=True)


def _fallback_error(snapshot: AggregateSnapshot) -> str | None:
    if not snapshot.using_fallback_data:
        return None
    reasons = "; ".join(f"{label}: {reason}" for label, reason in snapshot.errors.items())
    return f"All endpoints failed ({reasons})" if reasons else "All endpoints failed"


class PollingAggregator:
    """Builds poll sessions for one view (fetch callable + derivation)."""

    def __init__(
        self,
        fetch: FetchCallable,
        derivation: SummaryDerivation,
        *,
        request_timeout: float = BACKEND_REQUEST_TIMEOUT,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the aggregator.

        Args:
            fetch: Coroutine function turning an endpoint into a FetchOutcome.
            derivation: Strategy deriving the view summary.
            request_timeout: Upper bound in seconds for every single request.
            clock: Source of snapshot timestamps.
        """
        if request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        self._fetch = fetch
        self._derivation = derivation
        self._request_timeout = request_timeout
        self._clock = clock
        self._one_shot_sequence = 0

    @property
    def derivation(self) -> SummaryDerivation:
        return self._derivation

    @property
    def request_timeout(self) -> float:
        return self._request_timeout

    def start(
        self,
        endpoints: Iterable[EndpointDescriptor],
        interval_seconds: float,
        on_update: UpdateCallback,
        on_error: ErrorCallback,
    ) -> PollSession:
        """Run a cycle now and then every ``interval_seconds``.

        Must be called from a running event loop.

        Raises:
            ValueError: ``interval_seconds`` is not positive or no endpoints given.
        """
        endpoint_list = list(endpoints)
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds!r}")
        if not endpoint_list:
            raise ValueError("at least one endpoint is required")

        session = PollSession(self, endpoint_list, interval_seconds, on_update, on_error)
        session._begin()
        logger.info(
            "Started %s polling: %d endpoints every %gs",
            self._derivation.name or type(self._derivation).__name__,
            len(endpoint_list),
            interval_seconds,
        )
        return session

    @staticmethod
    def stop(session: PollSession | None) -> None:
        """Stop a session; ``None`` and already stopped sessions are ignored."""
        if session is not None:
            session.stop()

    async def _fetch_one(self, endpoint: EndpointDescriptor) -> FetchOutcome:
        try:
            return await asyncio.wait_for(self._fetch(endpoint), timeout=self._request_timeout)
        except asyncio.TimeoutError:
            logger.warning("Endpoint %s timed out", endpoint.label)
            return FetchFailure(f"timed out after {self._request_timeout:g}s")
        except Exception as exc:
            logger.warning("Endpoint %s failed: %s", endpoint.label, exc)
            return FetchFailure(f"{type(exc).__name__}: {exc}")

    async def gather(self, endpoints: Sequence[EndpointDescriptor]) -> dict[str, FetchOutcome]:
        """Request every endpoint concurrently and wait for all to settle."""
        results = await asyncio.gather(*(self._fetch_one(endpoint) for endpoint in endpoints))
        return {endpoint.label: outcome for endpoint, outcome in zip(endpoints, results)}

    def build_snapshot(
        self,
        sequence: int,
        outcomes: dict[str, FetchOutcome],
        previous: Any = None,
    ) -> AggregateSnapshot:
        """Derive the summary of a settled cycle.

        Raises:
            DerivationError: The derivation strategy raised.
        """
        timestamp = self._clock()
        context = DerivationContext(sequence=sequence, timestamp=timestamp, previous=previous)
        try:
            derived = self._derivation.derive(outcomes, context)
        except Exception as exc:
            logger.exception("Derivation %s failed for cycle %d", self._derivation.name, sequence)
            raise DerivationError(f"{type(exc).__name__}: {exc}") from exc
        return AggregateSnapshot(
            sequence=sequence,
            outcomes=outcomes,
            summary=derived.summary,
            timestamp=timestamp,
            using_fallback_data=derived.using_fallback_data,
        )

    async def run_cycle(self, endpoints: Iterable[EndpointDescriptor]) -> AggregateSnapshot:
        """Run a single cycle outside any session.

        Raises:
            ValueError: No endpoints given.
            DerivationError: The derivation strategy raised.
        """
        endpoint_list = list(endpoints)
        if not endpoint_list:
            raise ValueError("at least one endpoint is required")
        self._one_shot_sequence += 1
        outcomes = await self.gather(endpoint_list)
        return self.build_snapshot(self._one_shot_sequence, outcomes)
