"""Service mesh derivations for the Linkerd, Istio and Cilium views."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from meshify.constants.endpoints import (
    LABEL_ADAPTERS,
    LABEL_ISTIO_ADAPTERS,
    LABEL_ISTIO_STATUS,
    LABEL_LINKERD_ADAPTERS,
    LABEL_LINKERD_STATUS,
    LABEL_WORKLOADS,
)
from meshify.constants.enums import MeshProvider
from meshify.constants.limits import PERCENT_MAX, PERCENT_MIN
from meshify.constants.values import ACTIVE_STATUS, INACTIVE_STATUS, RUNNING_STATUS
from meshify.controllers.derivations.base import (
    DerivationContext,
    SummaryDerivation,
    as_bool,
    as_dict,
    as_int,
    as_list,
    as_str,
    clamp,
    percentage,
)
from meshify.controllers.derivations.dashboard import parse_service_names
from meshify.models.summaries import (
    AdapterPod,
    AddonAdapter,
    CiliumSummary,
    IstioSummary,
    LinkerdSummary,
    MeshAdapter,
    MeshComponent,
)

_DEMO_ADAPTERS: tuple[MeshAdapter, ...] = (
    MeshAdapter(key="istio", name="Istio", version="1.19.0", status="available"),
    MeshAdapter(key="linkerd", name="Linkerd", version="2.14.0", status="available"),
    MeshAdapter(key="cilium", name="Cilium", version="1.14.0", status="available"),
)


def parse_components(payload: Any) -> tuple[MeshComponent, ...]:
    components = []
    for item in as_list(payload):
        item = as_dict(item)
        name = as_str(item.get("name"))
        if not name:
            continue
        components.append(
            MeshComponent(
                name=name,
                namespace=as_str(item.get("namespace")),
                status=as_str(item.get("status"), "Unknown") or "Unknown",
                ready=as_str(item.get("ready"), "0/0") or "0/0",
                image=as_str(item.get("image")),
            )
        )
    return tuple(components)


def parse_mesh_adapters(payload: Any) -> tuple[MeshAdapter, ...]:
    """Parse the ``{key: {name, version, status, ...}}`` adapters document."""
    adapters = []
    for key, info in sorted(as_dict(payload).items()):
        info = as_dict(info)
        adapters.append(
            MeshAdapter(
                key=as_str(key),
                name=as_str(info.get("name"), as_str(key)) or as_str(key),
                version=as_str(info.get("version")),
                status=as_str(info.get("status"), "unknown") or "unknown",
                description=as_str(info.get("description")),
            )
        )
    return tuple(adapters)


def parse_coverage(data_plane: Mapping[str, Any], total: int, healthy: int) -> float:
    """Use the reported ``"85.0%"`` coverage, else healthy/total."""
    raw = as_str(data_plane.get("coverage")).strip().rstrip("%")
    try:
        coverage = float(raw)
    except ValueError:
        return percentage(healthy, total)
    if not math.isfinite(coverage):
        return percentage(healthy, total)
    return round(clamp(coverage, PERCENT_MIN, PERCENT_MAX), 1)


class LinkerdDerivation(SummaryDerivation):
    """Builds the Linkerd summary from status and adapter pods."""

    name = "linkerd"

    @staticmethod
    def _parse_adapter_pods(payload: Any) -> tuple[AdapterPod, ...]:
        pods = []
        for pod_name, info in sorted(as_dict(payload).items()):
            info = as_dict(info)
            pods.append(
                AdapterPod(
                    name=as_str(pod_name),
                    ip=as_str(info.get("ip")),
                    status=as_str(info.get("status"), "Unknown") or "Unknown",
                    ready=as_str(info.get("ready"), "0/0") or "0/0",
                    restarts=as_int(info.get("restarts")),
                    node=as_str(info.get("node")),
                )
            )
        return tuple(pods)

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> LinkerdSummary:
        status = as_dict(payloads.get(LABEL_LINKERD_STATUS))
        control_plane = as_dict(status.get("control_plane"))
        data_plane = as_dict(status.get("data_plane"))
        proxies_total = as_int(data_plane.get("proxies_total"))
        proxies_healthy = as_int(data_plane.get("proxies_healthy"))
        return LinkerdSummary(
            installed=as_bool(status.get("is_installed")),
            version=as_str(status.get("version")),
            message=as_str(status.get("message") or status.get("error")),
            control_plane_status=as_str(control_plane.get("status"), "Unknown") or "Unknown",
            control_plane_healthy=as_bool(control_plane.get("healthy")),
            proxies_total=proxies_total,
            proxies_healthy=proxies_healthy,
            coverage=parse_coverage(data_plane, proxies_total, proxies_healthy),
            components=parse_components(status.get("components")),
            adapter_pods=self._parse_adapter_pods(payloads.get(LABEL_LINKERD_ADAPTERS)),
            traffic_splits=len(as_list(status.get("traffic_splits"))),
            service_profiles=len(as_list(status.get("service_profiles"))),
        )

    def build_demo(self, context: DerivationContext) -> LinkerdSummary:
        rng = self.demo_random(context)
        names = ("linkerd-destination", "linkerd-identity", "linkerd-proxy-injector",
                 "linkerd-heartbeat", "linkerd-viz", "linkerd-tap")
        count = rng.randint(3, len(names))
        proxies_total = rng.randint(10, 30)
        proxies_healthy = rng.randint(proxies_total // 2, proxies_total)
        return LinkerdSummary(
            installed=True,
            version="stable-demo",
            message="Backend unavailable, showing demo data",
            control_plane_status=RUNNING_STATUS,
            control_plane_healthy=True,
            proxies_total=proxies_total,
            proxies_healthy=proxies_healthy,
            coverage=percentage(proxies_healthy, proxies_total),
            components=tuple(
                MeshComponent(name=name, namespace="linkerd", status=RUNNING_STATUS, ready="1/1")
                for name in names[:count]
            ),
        )


class IstioDerivation(SummaryDerivation):
    """Builds the Istio summary from status, mesh adapters and add-ons."""

    name = "istio"

    @staticmethod
    def _parse_addons(payload: Any) -> tuple[AddonAdapter, ...]:
        addons = []
        for item in as_list(as_dict(payload).get("adapters")):
            item = as_dict(item)
            name = as_str(item.get("name"))
            if name:
                addons.append(
                    AddonAdapter(
                        name=name,
                        status=as_str(item.get("status"), "unknown") or "unknown",
                        description=as_str(item.get("description")),
                    )
                )
        return tuple(addons)

    @staticmethod
    def _summarize_components(
        components: tuple[MeshComponent, ...],
    ) -> tuple[int, float]:
        running = sum(1 for component in components if component.is_running)
        return running, percentage(running, len(components))

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> IstioSummary:
        status = as_dict(payloads.get(LABEL_ISTIO_STATUS))
        components = parse_components(status.get("components"))
        running, health = self._summarize_components(components)
        return IstioSummary(
            installed=as_bool(status.get("is_installed")),
            version=as_str(status.get("version")),
            components=components,
            running_components=running,
            component_health=health,
            namespaces=tuple(as_str(ns) for ns in as_list(status.get("namespaces")) if ns),
            virtual_services=len(as_list(status.get("virtual_services"))),
            gateways=len(as_list(status.get("gateways"))),
            adapters=parse_mesh_adapters(payloads.get(LABEL_ADAPTERS)),
            addons=self._parse_addons(payloads.get(LABEL_ISTIO_ADAPTERS)),
        )

    def build_demo(self, context: DerivationContext) -> IstioSummary:
        rng = self.demo_random(context)
        components = tuple(
            MeshComponent(name=name, namespace="istio-system", status=RUNNING_STATUS, ready="1/1")
            for name in ("istiod", "istio-ingressgateway", "istio-egressgateway")
        )
        running, health = self._summarize_components(components)
        return IstioSummary(
            installed=True,
            version="1.19.0",
            components=components,
            running_components=running,
            component_health=health,
            namespaces=("istio-system", "default"),
            virtual_services=rng.randint(1, 5),
            gateways=rng.randint(1, 2),
            adapters=_DEMO_ADAPTERS,
            addons=tuple(
                AddonAdapter(name=name, status="available")
                for name in ("prometheus", "grafana", "jaeger", "kiali")
            ),
        )


class CiliumDerivation(SummaryDerivation):
    """Builds the Cilium summary from workloads reachability and adapters."""

    name = "cilium"

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> CiliumSummary:
        adapters = parse_mesh_adapters(payloads.get(LABEL_ADAPTERS))
        cilium = next(
            (adapter for adapter in adapters if adapter.key == MeshProvider.CILIUM.value),
            None,
        )
        return CiliumSummary(
            status=ACTIVE_STATUS if LABEL_WORKLOADS in payloads else INACTIVE_STATUS,
            adapter=cilium,
            service_names=parse_service_names(payloads.get(LABEL_WORKLOADS)),
            available_adapters=tuple(adapter.key for adapter in adapters),
        )

    def build_demo(self, context: DerivationContext) -> CiliumSummary:
        count = self.demo_random(context).randint(3, 8)
        return CiliumSummary(
            status=INACTIVE_STATUS,
            adapter=_DEMO_ADAPTERS[2],
            service_names=tuple(f"demo-service-{index}" for index in range(1, count + 1)),
            available_adapters=tuple(adapter.key for adapter in _DEMO_ADAPTERS),
        )
