"""Tests for MeshifyController."""

from __future__ import annotations

import httpx
import pytest

from meshify.constants.endpoints import (
    ISTIO_DEPLOY_BOOKINFO_PATH,
    KUBE_CLUSTER_PATH,
    KUBE_WORKLOADS_PATH,
    LABEL_WORKLOADS,
    LINKERD_INSTALL_PATH,
)
from meshify.constants.enums import ViewName
from meshify.controllers.derivations import (
    CiliumDerivation,
    DashboardDerivation,
    HeaderDerivation,
    IstioDerivation,
    LinkerdDerivation,
    MonitoringDerivation,
    PerformanceDerivation,
)
from meshify.controllers.mesh import ActionResult, MeshifyController
from meshify.controllers.mesh.controller import VIEW_ENDPOINTS
from meshify.models.state import AppSettings
from meshify.models.summaries import DashboardSummary

# =============================================================================
# View wiring
# =============================================================================


class TestViewWiring:
    """Tests for endpoints, intervals and derivations per view."""

    def test_every_view_has_endpoints(self) -> None:
        """Test each view polls at least one endpoint with unique labels."""
        for view in ViewName:
            endpoints = MeshifyController.endpoints_for(view)
            labels = [endpoint.label for endpoint in endpoints]
            assert endpoints, view
            assert len(labels) == len(set(labels)), view

    def test_dashboard_endpoints(self) -> None:
        """Test the dashboard polls workloads and cluster info."""
        paths = [endpoint.url for endpoint in VIEW_ENDPOINTS[ViewName.DASHBOARD]]

        assert paths == [KUBE_WORKLOADS_PATH, KUBE_CLUSTER_PATH]

    @pytest.mark.parametrize(
        ("view", "derivation_type"),
        [
            (ViewName.DASHBOARD, DashboardDerivation),
            (ViewName.HEADER, HeaderDerivation),
            (ViewName.PERFORMANCE, PerformanceDerivation),
            (ViewName.LINKERD, LinkerdDerivation),
            (ViewName.ISTIO, IstioDerivation),
            (ViewName.CILIUM, CiliumDerivation),
            (ViewName.MONITORING, MonitoringDerivation),
        ],
    )
    def test_derivation_for(self, controller: MeshifyController, view, derivation_type) -> None:
        """Test each view gets its derivation strategy."""
        assert isinstance(controller.derivation_for(view), derivation_type)

    def test_header_title_follows_route(self, controller: MeshifyController) -> None:
        """Test the header derivation is titled after the route."""
        derivation = controller.derivation_for(ViewName.HEADER, route="observability")

        assert derivation.title == "Observability"

    def test_performance_window_from_settings(self, fetcher) -> None:
        """Test the performance window size comes from settings."""
        controller = MeshifyController(AppSettings(performance_window=12), fetcher=fetcher)

        assert controller.derivation_for(ViewName.PERFORMANCE).window_size == 12

    def test_interval_capped_by_refresh_setting(self, fetcher) -> None:
        """Test the user refresh interval caps every view interval."""
        fast = MeshifyController(AppSettings(refresh_interval=10), fetcher=fetcher)
        slow = MeshifyController(AppSettings(refresh_interval=600), fetcher=fetcher)

        assert fast.interval_for(ViewName.DASHBOARD) == 10.0
        assert fast.interval_for(ViewName.MONITORING) == 10.0
        assert slow.interval_for(ViewName.DASHBOARD) == 60.0
        assert slow.interval_for(ViewName.ISTIO) == 30.0

    def test_aggregator_uses_request_timeout(self, controller: MeshifyController) -> None:
        """Test aggregators inherit the configured request timeout."""
        aggregator = controller.aggregator_for(ViewName.CILIUM)

        assert aggregator.request_timeout == controller.settings.request_timeout
        assert isinstance(aggregator.derivation, CiliumDerivation)


# =============================================================================
# One-shot fetches
# =============================================================================


class TestSnapshots:
    """Tests for snapshot, check_connection and fetch_all."""

    @pytest.mark.asyncio
    async def test_snapshot_live(self, controller: MeshifyController) -> None:
        """Test a dashboard snapshot from the fake backend."""
        snapshot = await controller.snapshot(ViewName.DASHBOARD)

        assert snapshot.using_fallback_data is False
        assert isinstance(snapshot.summary, DashboardSummary)
        assert snapshot.summary.workloads.pods == 31
        assert snapshot.summary.cluster_count == 1

    @pytest.mark.asyncio
    async def test_snapshot_partial(self, backend, controller: MeshifyController) -> None:
        """Test a failing endpoint is reported but the snapshot stays live."""
        backend.routes[KUBE_WORKLOADS_PATH] = httpx.Response(500, json={"error": "boom"})

        snapshot = await controller.snapshot(ViewName.DASHBOARD)

        assert snapshot.using_fallback_data is False
        assert snapshot.errors[LABEL_WORKLOADS] == "HTTP 500: boom"
        assert snapshot.summary.workloads.pods == 0

    @pytest.mark.asyncio
    async def test_snapshot_overflowing_count(self, backend, controller: MeshifyController) -> None:
        """Test a count that decodes to infinity is defaulted, not a derivation fault."""
        backend.routes[KUBE_WORKLOADS_PATH] = httpx.Response(
            200,
            content=b'{"numPods": 1e400, "numNodes": 3}',
            headers={"content-type": "application/json"},
        )

        snapshot = await controller.snapshot(ViewName.DASHBOARD)

        assert snapshot.using_fallback_data is False
        assert snapshot.summary.workloads.pods == 0
        assert snapshot.summary.workloads.nodes == 3

    @pytest.mark.asyncio
    async def test_snapshot_backend_down(self, backend, controller: MeshifyController) -> None:
        """Test an unreachable backend yields a demo snapshot."""
        backend.routes = {}

        snapshot = await controller.snapshot(ViewName.MONITORING)

        assert snapshot.using_fallback_data is True
        assert snapshot.to_dict()["data_mode"] == "fallback"

    @pytest.mark.asyncio
    async def test_check_connection(self, backend, controller: MeshifyController) -> None:
        """Test check_connection follows the cluster endpoint."""
        assert await controller.check_connection() is True

        backend.routes[KUBE_CLUSTER_PATH] = httpx.ConnectError

        assert await controller.check_connection() is False

    @pytest.mark.asyncio
    async def test_fetch_all(self, controller: MeshifyController) -> None:
        """Test fetch_all returns one snapshot per view."""
        snapshots = await controller.fetch_all()

        assert set(snapshots) == {view.value for view in ViewName}
        assert snapshots["istio"].summary.installed is True
        assert snapshots["linkerd"].summary.installed is False


# =============================================================================
# Lifecycle actions
# =============================================================================


class TestActions:
    """Tests for deploy/install actions."""

    @pytest.mark.asyncio
    async def test_deploy_bookinfo_success(self, backend, controller: MeshifyController) -> None:
        """Test a successful deploy reports the ingress IP."""
        backend.routes[ISTIO_DEPLOY_BOOKINFO_PATH] = httpx.Response(
            200, json={"message": "Bookinfo deployed", "ingressIP": "172.18.0.5"}
        )

        result = await controller.deploy_bookinfo()

        assert result == ActionResult(
            success=True,
            message="Bookinfo deployed",
            title="Deploy Bookinfo",
            ingress_ip="172.18.0.5",
        )
        assert backend.requests[-1].method == "POST"

    @pytest.mark.asyncio
    async def test_deploy_emojivoto_namespace(self, backend, controller: MeshifyController) -> None:
        """Test the namespace is part of the emojivoto deploy path."""
        path = "/api/linkerd/applications/demo/emojivoto/deploy"
        backend.routes[path] = httpx.Response(200, json={})

        result = await controller.deploy_emojivoto("demo")

        assert result.success is True
        assert result.message == "Deploy Emojivoto completed"
        assert backend.paths()[-1] == path

    @pytest.mark.asyncio
    async def test_action_rejected(self, backend, controller: MeshifyController) -> None:
        """Test a non-2xx answer carries the backend error."""
        backend.routes[LINKERD_INSTALL_PATH] = httpx.Response(
            409, json={"error": "Linkerd already installed"}
        )

        result = await controller.install_linkerd()

        assert result.success is False
        assert result.error == "Linkerd already installed"
        assert result.title == "Install Linkerd"

    @pytest.mark.asyncio
    async def test_action_rejected_without_body(self, backend, controller: MeshifyController) -> None:
        """Test the status code is used when the error body is empty."""
        backend.routes[LINKERD_INSTALL_PATH] = httpx.Response(502, text="bad gateway")

        result = await controller.install_linkerd()

        assert result.success is False
        assert result.error == "HTTP 502"

    @pytest.mark.asyncio
    async def test_action_transport_error(self, backend, controller: MeshifyController) -> None:
        """Test transport errors become a failed result."""
        backend.routes[ISTIO_DEPLOY_BOOKINFO_PATH] = httpx.ConnectError

        result = await controller.deploy_bookinfo()

        assert result.success is False
        assert result.error == "ConnectError: connection refused"
