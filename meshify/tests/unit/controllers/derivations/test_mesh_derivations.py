"""Tests for the Linkerd, Istio and Cilium derivations."""

from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from meshify.constants.endpoints import (
    LABEL_ADAPTERS,
    LABEL_ISTIO_ADAPTERS,
    LABEL_ISTIO_STATUS,
    LABEL_LINKERD_ADAPTERS,
    LABEL_LINKERD_STATUS,
    LABEL_WORKLOADS,
)
from meshify.controllers.derivations import (
    CiliumDerivation,
    IstioDerivation,
    LinkerdDerivation,
)
from meshify.controllers.derivations.base import DerivationContext
from meshify.controllers.derivations.mesh import (
    parse_components,
    parse_coverage,
    parse_mesh_adapters,
)
from meshify.models.polling import FetchFailure, FetchSuccess

CTX = DerivationContext(sequence=4, timestamp=datetime(2024, 5, 1, tzinfo=timezone.utc))

ADAPTERS_PAYLOAD = {
    "linkerd": {"name": "Linkerd", "version": "2.14.0", "status": "available"},
    "cilium": {"name": "Cilium", "version": "1.14.0", "status": "available"},
    "istio": {"name": "Istio", "version": "1.19.0", "status": "installed"},
}

LINKERD_STATUS_PAYLOAD = {
    "is_installed": True,
    "version": "stable-2.14.1",
    "control_plane": {"status": "Running", "healthy": True},
    "data_plane": {"proxies_total": 8, "proxies_healthy": 6, "coverage": "75.0%"},
    "components": [
        {"name": "linkerd-destination", "namespace": "linkerd", "status": "Running", "ready": "1/1"},
        {"name": "linkerd-identity", "namespace": "linkerd", "status": "Pending", "ready": "0/1"},
    ],
    "traffic_splits": [{"name": "split-a"}],
    "service_profiles": [{"name": "p1"}, {"name": "p2"}],
}

ISTIO_STATUS_PAYLOAD = {
    "is_installed": True,
    "version": "1.20.1",
    "components": [
        {"name": "istiod", "namespace": "istio-system", "status": "Running", "ready": "1/1"},
        {"name": "istio-ingressgateway", "namespace": "istio-system", "status": "Running"},
        {"name": "istio-egressgateway", "namespace": "istio-system", "status": "CrashLoopBackOff"},
        {"name": "", "status": "Running"},
    ],
    "namespaces": ["istio-system", "bookinfo"],
    "virtual_services": [{}, {}, {}],
    "gateways": [{}],
}


class TestMeshParsers:
    """Tests for the shared mesh payload parsers."""

    def test_parse_components_defaults(self) -> None:
        """Test missing fields get defaults and nameless rows are skipped."""
        components = parse_components([{"name": "istiod"}, {"status": "Running"}, "junk"])

        assert len(components) == 1
        assert components[0].status == "Unknown"
        assert components[0].ready == "0/0"
        assert components[0].is_running is False

    def test_parse_mesh_adapters_sorted_by_key(self) -> None:
        """Test adapters come back sorted by their key."""
        adapters = parse_mesh_adapters(ADAPTERS_PAYLOAD)

        assert [adapter.key for adapter in adapters] == ["cilium", "istio", "linkerd"]
        assert adapters[1].status == "installed"

    def test_parse_mesh_adapters_name_defaults_to_key(self) -> None:
        """Test an adapter without a name uses its key."""
        adapters = parse_mesh_adapters({"kuma": {}})

        assert adapters[0].name == "kuma"
        assert adapters[0].status == "unknown"

    @pytest.mark.parametrize(
        ("data_plane", "expected"),
        [
            ({"coverage": "85.0%"}, 85.0),
            ({"coverage": "n/a"}, 50.0),
            ({}, 50.0),
            ({"coverage": "nan%"}, 50.0),
            ({"coverage": "inf%"}, 50.0),
            ({"coverage": "140%"}, 100.0),
            ({"coverage": "-5%"}, 0.0),
        ],
    )
    def test_parse_coverage(self, data_plane: dict, expected: float) -> None:
        """Test reported coverage wins over the computed ratio."""
        assert parse_coverage(data_plane, 10, 5) == expected


class TestLinkerdDerivation:
    """Tests for LinkerdDerivation."""

    def test_live_summary(self) -> None:
        """Test status and adapter pods are combined."""
        outcomes = {
            LABEL_LINKERD_STATUS: FetchSuccess(LINKERD_STATUS_PAYLOAD),
            LABEL_LINKERD_ADAPTERS: FetchSuccess(
                {
                    "linkerd-adapter-7d9": {
                        "ip": "10.1.0.4",
                        "status": "Running",
                        "ready": "1/1",
                        "restarts": "2",
                        "node": "worker-1",
                    }
                }
            ),
        }

        derived = LinkerdDerivation().derive(outcomes, CTX)
        summary = derived.summary

        assert derived.using_fallback_data is False
        assert summary.installed is True
        assert summary.version == "stable-2.14.1"
        assert summary.control_plane_healthy is True
        assert summary.proxies_total == 8
        assert summary.coverage == 75.0
        assert len(summary.components) == 2
        assert summary.traffic_splits == 1
        assert summary.service_profiles == 2
        assert summary.adapter_pods[0].restarts == 2
        assert summary.adapter_pods[0].node == "worker-1"

    def test_non_finite_coverage_falls_back_to_ratio(self) -> None:
        """Test a NaN coverage report is replaced by healthy/total proxies."""
        outcomes = {
            LABEL_LINKERD_STATUS: FetchSuccess(
                {
                    "is_installed": True,
                    "data_plane": {
                        "proxies_total": 4,
                        "proxies_healthy": 3,
                        "coverage": "nan%",
                    },
                }
            ),
        }

        summary = LinkerdDerivation().derive(outcomes, CTX).summary

        assert math.isfinite(summary.coverage)
        assert summary.coverage == 75.0

    def test_not_installed_message(self) -> None:
        """Test the backend error text is kept when Linkerd is missing."""
        outcomes = {
            LABEL_LINKERD_STATUS: FetchSuccess(
                {"is_installed": False, "error": "linkerd namespace not found"}
            ),
            LABEL_LINKERD_ADAPTERS: FetchFailure("HTTP 404"),
        }

        summary = LinkerdDerivation().derive(outcomes, CTX).summary

        assert summary.installed is False
        assert summary.message == "linkerd namespace not found"
        assert summary.adapter_pods == ()
        assert summary.control_plane_status == "Unknown"

    def test_demo(self) -> None:
        """Test demo data when both endpoints failed."""
        outcomes = {
            LABEL_LINKERD_STATUS: FetchFailure("refused"),
            LABEL_LINKERD_ADAPTERS: FetchFailure("refused"),
        }

        derived = LinkerdDerivation().derive(outcomes, CTX)
        summary = derived.summary

        assert derived.using_fallback_data is True
        assert summary.installed is True
        assert 3 <= len(summary.components) <= 6
        assert 10 <= summary.proxies_total <= 30
        assert summary.proxies_healthy <= summary.proxies_total
        assert all(component.is_running for component in summary.components)


class TestIstioDerivation:
    """Tests for IstioDerivation."""

    def test_live_summary(self) -> None:
        """Test component health, adapters and add-ons."""
        outcomes = {
            LABEL_ISTIO_STATUS: FetchSuccess(ISTIO_STATUS_PAYLOAD),
            LABEL_ADAPTERS: FetchSuccess(ADAPTERS_PAYLOAD),
            LABEL_ISTIO_ADAPTERS: FetchSuccess(
                {"adapters": [{"name": "kiali", "status": "running"}, {"status": "x"}]}
            ),
        }

        summary = IstioDerivation().derive(outcomes, CTX).summary

        assert summary.installed is True
        assert len(summary.components) == 3
        assert summary.running_components == 2
        assert summary.component_health == 66.7
        assert summary.namespaces == ("istio-system", "bookinfo")
        assert summary.virtual_services == 3
        assert summary.gateways == 1
        assert len(summary.adapters) == 3
        assert [addon.name for addon in summary.addons] == ["kiali"]

    def test_only_adapters_answered(self) -> None:
        """Test a failed status endpoint still shows adapters."""
        outcomes = {
            LABEL_ISTIO_STATUS: FetchFailure("HTTP 500"),
            LABEL_ADAPTERS: FetchSuccess(ADAPTERS_PAYLOAD),
            LABEL_ISTIO_ADAPTERS: FetchFailure("HTTP 500"),
        }

        derived = IstioDerivation().derive(outcomes, CTX)

        assert derived.using_fallback_data is False
        assert derived.summary.installed is False
        assert derived.summary.component_health == 0.0
        assert len(derived.summary.adapters) == 3

    def test_demo(self) -> None:
        """Test demo data includes the standard add-ons."""
        summary = IstioDerivation().build_demo(CTX)

        assert summary.running_components == 3
        assert summary.component_health == 100.0
        assert {addon.name for addon in summary.addons} == {
            "prometheus",
            "grafana",
            "jaeger",
            "kiali",
        }


class TestCiliumDerivation:
    """Tests for CiliumDerivation."""

    def test_active_when_workloads_answered(self) -> None:
        """Test Cilium is active when the workloads endpoint is reachable."""
        outcomes = {
            LABEL_WORKLOADS: FetchSuccess({"serviceNames": ["hubble-ui", "hubble-relay"]}),
            LABEL_ADAPTERS: FetchSuccess(ADAPTERS_PAYLOAD),
        }

        summary = CiliumDerivation().derive(outcomes, CTX).summary

        assert summary.status == "active"
        assert summary.adapter is not None
        assert summary.adapter.version == "1.14.0"
        assert summary.service_names == ("hubble-ui", "hubble-relay")
        assert summary.available_adapters == ("cilium", "istio", "linkerd")

    def test_inactive_without_workloads(self) -> None:
        """Test Cilium is inactive when only adapters answered."""
        outcomes = {
            LABEL_WORKLOADS: FetchFailure("refused"),
            LABEL_ADAPTERS: FetchSuccess({"istio": {}}),
        }

        summary = CiliumDerivation().derive(outcomes, CTX).summary

        assert summary.status == "inactive"
        assert summary.adapter is None
        assert summary.service_names == ()

    def test_demo(self) -> None:
        """Test demo data for Cilium."""
        derived = CiliumDerivation().derive(
            {LABEL_WORKLOADS: FetchFailure("x"), LABEL_ADAPTERS: FetchFailure("x")}, CTX
        )

        assert derived.using_fallback_data is True
        assert derived.summary.adapter.key == "cilium"
        assert 3 <= len(derived.summary.service_names) <= 8
