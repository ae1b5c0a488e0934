"""Shared fixtures: an in-memory Meshify backend behind httpx.MockTransport."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from meshify.app import MeshifyApp
from meshify.constants.endpoints import (
    ADAPTERS_PATH,
    ISTIO_ADAPTERS_PATH,
    ISTIO_STATUS_PATH,
    KUBE_CLUSTER_PATH,
    KUBE_WORKLOADS_PATH,
    LINKERD_ADAPTERS_PATH,
    LINKERD_STATUS_PATH,
    MONITORING_HEALTH_PATH,
    MONITORING_STATS_PATH,
    PROMETHEUS_TARGETS_PATH,
)
from meshify.controllers.mesh import MeshifyController
from meshify.controllers.polling import EndpointFetcher
from meshify.models.state import AppSettings

BACKEND_URL = "http://meshify.test"

DEFAULT_ROUTES: dict[str, Any] = {
    KUBE_WORKLOADS_PATH: {
        "numDaemonSets": 3,
        "numDeployments": 9,
        "numNodes": 3,
        "numPodTemplates": 0,
        "numReplicationControllers": 0,
        "numPods": 31,
        "numServices": 4,
        "serviceNames": ["productpage", "reviews", "ratings", "details"],
    },
    KUBE_CLUSTER_PATH: {
        "status": "connected",
        "numClusters": 1,
        "clusters": [{"name": "kind-meshify", "isactive": True}],
    },
    ADAPTERS_PATH: {
        "istio": {"name": "Istio", "version": "1.19.0", "status": "installed"},
        "linkerd": {"name": "Linkerd", "version": "2.14.0", "status": "available"},
    },
    ISTIO_STATUS_PATH: {
        "is_installed": True,
        "version": "1.19.0",
        "components": [
            {"name": "istiod", "namespace": "istio-system", "status": "Running", "ready": "1/1"},
        ],
        "namespaces": ["istio-system"],
    },
    ISTIO_ADAPTERS_PATH: {"adapters": [{"name": "kiali", "status": "running"}]},
    LINKERD_STATUS_PATH: {"is_installed": False, "message": "Linkerd is not installed"},
    LINKERD_ADAPTERS_PATH: {},
    MONITORING_HEALTH_PATH: [
        {"Name": "Prometheus", "Status": "running", "Address": "10.96.0.20", "Port": 9090},
    ],
    MONITORING_STATS_PATH: {"active_metrics": 840, "data_retention": "15d"},
    PROMETHEUS_TARGETS_PATH: {"targets": [{"health": "up"}, {"health": "down"}], "count": 2},
}


class FakeBackend:
    """Answers requests by path.

    A route value is either a JSON payload (200), an ``httpx.Response``, or an
    ``httpx.HTTPError`` subclass that is raised for the request.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(DEFAULT_ROUTES if routes is None else routes)
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": f"no route for {request.url.path}"})
        if isinstance(route, type) and issubclass(route, httpx.HTTPError):
            raise route("connection refused", request=request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(backend_url=BACKEND_URL, refresh_interval=60, request_timeout=2.0)


@pytest.fixture
def fetcher(backend: FakeBackend, settings: AppSettings) -> EndpointFetcher:
    return EndpointFetcher(
        settings.backend_url, timeout=settings.request_timeout, client=backend.client()
    )


@pytest.fixture
def controller(settings: AppSettings, fetcher: EndpointFetcher) -> MeshifyController:
    return MeshifyController(settings, fetcher=fetcher)


@pytest.fixture
def app(settings: AppSettings, controller: MeshifyController) -> MeshifyApp:
    return MeshifyApp(settings, controller=controller)
