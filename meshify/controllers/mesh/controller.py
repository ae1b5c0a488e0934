"""Meshify controller: backend fetcher, per-view aggregators and actions."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from meshify.constants.endpoints import (
    ADAPTERS_PATH,
    ISTIO_ADAPTERS_PATH,
    ISTIO_DEPLOY_BOOKINFO_PATH,
    ISTIO_STATUS_PATH,
    KUBE_CLUSTER_PATH,
    KUBE_WORKLOADS_PATH,
    LABEL_ADAPTERS,
    LABEL_CLUSTER_INFO,
    LABEL_ISTIO_ADAPTERS,
    LABEL_ISTIO_STATUS,
    LABEL_LINKERD_ADAPTERS,
    LABEL_LINKERD_STATUS,
    LABEL_MONITORING_HEALTH,
    LABEL_MONITORING_STATS,
    LABEL_PROMETHEUS_TARGETS,
    LABEL_WORKLOADS,
    LINKERD_ADAPTERS_PATH,
    LINKERD_EMOJIVOTO_DEPLOY_PATH,
    LINKERD_INSTALL_PATH,
    LINKERD_STATUS_PATH,
    MONITORING_HEALTH_PATH,
    MONITORING_STATS_PATH,
    PROMETHEUS_TARGETS_PATH,
)
from meshify.constants.enums import ViewName
from meshify.constants.timeouts import (
    BACKEND_ACTION_TIMEOUT,
    DASHBOARD_POLL_INTERVAL,
    HEADER_POLL_INTERVAL,
    MESH_POLL_INTERVAL,
    MONITORING_POLL_INTERVAL,
    PERFORMANCE_POLL_INTERVAL,
)
from meshify.controllers.base import BaseController
from meshify.controllers.derivations import (
    CiliumDerivation,
    DashboardDerivation,
    HeaderDerivation,
    IstioDerivation,
    LinkerdDerivation,
    MonitoringDerivation,
    PerformanceDerivation,
    SummaryDerivation,
)
from meshify.controllers.polling import EndpointFetcher, PollingAggregator
from meshify.models.polling import AggregateSnapshot, EndpointDescriptor, FetchSuccess
from meshify.models.state import AppSettings

logger = logging.getLogger(__name__)

_WORKLOADS = EndpointDescriptor(KUBE_WORKLOADS_PATH, LABEL_WORKLOADS)
_CLUSTER_INFO = EndpointDescriptor(KUBE_CLUSTER_PATH, LABEL_CLUSTER_INFO)
_ADAPTERS = EndpointDescriptor(ADAPTERS_PATH, LABEL_ADAPTERS)

VIEW_ENDPOINTS: dict[ViewName, tuple[EndpointDescriptor, ...]] = {
    ViewName.DASHBOARD: (_WORKLOADS, _CLUSTER_INFO),
    ViewName.HEADER: (_CLUSTER_INFO,),
    ViewName.PERFORMANCE: (_WORKLOADS, _CLUSTER_INFO, _ADAPTERS),
    ViewName.LINKERD: (
        EndpointDescriptor(LINKERD_STATUS_PATH, LABEL_LINKERD_STATUS),
        EndpointDescriptor(LINKERD_ADAPTERS_PATH, LABEL_LINKERD_ADAPTERS),
    ),
    ViewName.ISTIO: (
        EndpointDescriptor(ISTIO_STATUS_PATH, LABEL_ISTIO_STATUS),
        _ADAPTERS,
        EndpointDescriptor(ISTIO_ADAPTERS_PATH, LABEL_ISTIO_ADAPTERS),
    ),
    ViewName.CILIUM: (_WORKLOADS, _ADAPTERS),
    ViewName.MONITORING: (
        EndpointDescriptor(MONITORING_HEALTH_PATH, LABEL_MONITORING_HEALTH),
        EndpointDescriptor(MONITORING_STATS_PATH, LABEL_MONITORING_STATS),
        EndpointDescriptor(PROMETHEUS_TARGETS_PATH, LABEL_PROMETHEUS_TARGETS),
    ),
}

VIEW_POLL_INTERVALS: dict[ViewName, float] = {
    ViewName.DASHBOARD: DASHBOARD_POLL_INTERVAL,
    ViewName.HEADER: HEADER_POLL_INTERVAL,
    ViewName.PERFORMANCE: PERFORMANCE_POLL_INTERVAL,
    ViewName.LINKERD: MESH_POLL_INTERVAL,
    ViewName.ISTIO: MESH_POLL_INTERVAL,
    ViewName.CILIUM: MESH_POLL_INTERVAL,
    ViewName.MONITORING: MONITORING_POLL_INTERVAL,
}


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a backend lifecycle action (install, deploy)."""

    success: bool
    message: str = ""
    title: str = ""
    ingress_ip: str = ""
    error: str = ""


class MeshifyController(BaseController):
    """Entry point for everything that talks to the Meshify backend.

    Screens ask the controller for a ``PollingAggregator`` per view and start
    their own sessions; lifecycle actions are plain coroutines.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        fetcher: EndpointFetcher | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        self._fetcher = fetcher or EndpointFetcher(
            self._settings.backend_url,
            timeout=self._settings.request_timeout,
        )

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def fetcher(self) -> EndpointFetcher:
        return self._fetcher

    @staticmethod
    def endpoints_for(view: ViewName) -> tuple[EndpointDescriptor, ...]:
        return VIEW_ENDPOINTS[view]

    def interval_for(self, view: ViewName) -> float:
        """Poll interval in seconds: the view default, capped by the user setting."""
        return float(min(VIEW_POLL_INTERVALS[view], self._settings.refresh_interval))

    def derivation_for(self, view: ViewName, *, route: str | None = None) -> SummaryDerivation:
        if view is ViewName.DASHBOARD:
            return DashboardDerivation()
        if view is ViewName.HEADER:
            return HeaderDerivation(route or ViewName.DASHBOARD.value)
        if view is ViewName.PERFORMANCE:
            return PerformanceDerivation(self._settings.performance_window)
        if view is ViewName.LINKERD:
            return LinkerdDerivation()
        if view is ViewName.ISTIO:
            return IstioDerivation()
        if view is ViewName.CILIUM:
            return CiliumDerivation()
        return MonitoringDerivation()

    def aggregator_for(self, view: ViewName, *, route: str | None = None) -> PollingAggregator:
        """Build an aggregator wired to the backend fetcher for one view."""
        return PollingAggregator(
            self._fetcher.fetch,
            self.derivation_for(view, route=route),
            request_timeout=self._settings.request_timeout,
        )

    async def snapshot(self, view: ViewName) -> AggregateSnapshot:
        """Run one cycle for ``view`` and return its snapshot."""
        return await self.aggregator_for(view).run_cycle(self.endpoints_for(view))

    async def check_connection(self) -> bool:
        outcome = await self._fetcher.fetch(_CLUSTER_INFO)
        if not isinstance(outcome, FetchSuccess):
            logger.info("Backend %s not reachable: %s", self._fetcher.base_url, outcome.reason)
            return False
        return True

    async def fetch_all(self) -> dict[str, Any]:
        """Run one cycle for every view concurrently.

        Returns:
            Mapping of view name to its snapshot.
        """
        self._mark_load_start()
        views = list(VIEW_ENDPOINTS)
        snapshots = await asyncio.gather(*(self.snapshot(view) for view in views))
        logger.debug("Fetched %d views in %.0fms", len(views), self._load_duration_ms())
        return {view.value: snapshot for view, snapshot in zip(views, snapshots)}

    # ------------------------------------------------------------------
    # Lifecycle actions
    # ------------------------------------------------------------------

    async def _post_action(self, path: str, title: str) -> ActionResult:
        try:
            response = await asyncio.wait_for(
                self._fetcher.post(path), timeout=BACKEND_ACTION_TIMEOUT
            )
        except asyncio.TimeoutError:
            logger.warning("%s timed out after %ss", title, BACKEND_ACTION_TIMEOUT)
            return ActionResult(
                success=False,
                title=title,
                error=f"timed out after {BACKEND_ACTION_TIMEOUT:g}s",
            )
        except httpx.HTTPError as exc:
            logger.warning("%s failed: %s", title, exc)
            return ActionResult(success=False, title=title, error=f"{type(exc).__name__}: {exc}")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        message = str(body.get("message") or "")
        if not response.is_success:
            error = str(body.get("error") or message or f"HTTP {response.status_code}")
            logger.warning("%s rejected by backend: %s", title, error)
            return ActionResult(success=False, message=message, title=title, error=error)

        logger.info("%s succeeded", title)
        return ActionResult(
            success=True,
            message=message or f"{title} completed",
            title=title,
            ingress_ip=str(body.get("ingressIP") or body.get("ingress_ip") or ""),
        )

    async def deploy_bookinfo(self) -> ActionResult:
        """Deploy the Istio bookinfo sample application."""
        return await self._post_action(ISTIO_DEPLOY_BOOKINFO_PATH, "Deploy Bookinfo")

    async def deploy_emojivoto(self, namespace: str = "default") -> ActionResult:
        """Deploy the Linkerd emojivoto sample into ``namespace``."""
        path = LINKERD_EMOJIVOTO_DEPLOY_PATH.format(namespace=namespace)
        return await self._post_action(path, "Deploy Emojivoto")

    async def install_linkerd(self) -> ActionResult:
        return await self._post_action(LINKERD_INSTALL_PATH, "Install Linkerd")

    async def aclose(self) -> None:
        await self._fetcher.aclose()
