"""Service mesh presenters - Istio, Linkerd and Cilium formatting."""

from __future__ import annotations

from meshify.constants.enums import ViewName
from meshify.constants.limits import MAX_COMPONENT_ROWS_DISPLAY, MAX_SERVICE_NAMES_DISPLAY
from meshify.models.summaries import (
    CiliumSummary,
    IstioSummary,
    LinkerdSummary,
    MeshComponent,
)
from meshify.screens.mixins import PollingPresenter
from meshify.utils.formatting import format_percent, health_markup, status_markup


def component_rows(components: tuple[MeshComponent, ...]) -> list[list[str]]:
    return [
        [component.name, component.namespace, status_markup(component.status), component.ready]
        for component in components[:MAX_COMPONENT_ROWS_DISPLAY]
    ]


class IstioPresenter(PollingPresenter):
    """Presenter for the Istio tab."""

    view = ViewName.ISTIO

    @staticmethod
    def overview(summary: IstioSummary) -> str:
        if not summary.installed:
            return "[red]Istio is not installed[/red]"
        return (
            f"[b]Istio {summary.version or '?'}[/b]  "
            f"components {summary.running_components}/{len(summary.components)} running "
            f"({format_percent(summary.component_health)}) "
            f"{health_markup(summary.component_health)}  "
            f"virtual services {summary.virtual_services}  gateways {summary.gateways}  "
            f"namespaces {', '.join(summary.namespaces) or '-'}"
        )

    @staticmethod
    def adapter_rows(summary: IstioSummary) -> list[list[str]]:
        rows = [
            [adapter.name or adapter.key, adapter.version, status_markup(adapter.status),
             adapter.description]
            for adapter in summary.adapters
        ]
        rows.extend(
            [addon.name, "", status_markup(addon.status), addon.description]
            for addon in summary.addons
        )
        return rows


class LinkerdPresenter(PollingPresenter):
    """Presenter for the Linkerd tab."""

    view = ViewName.LINKERD

    @staticmethod
    def overview(summary: LinkerdSummary) -> str:
        if not summary.installed:
            detail = f": {summary.message}" if summary.message else ""
            return f"[red]Linkerd is not installed{detail}[/red]"
        control_plane = status_markup(summary.control_plane_status)
        return (
            f"[b]Linkerd {summary.version or '?'}[/b]  "
            f"control plane {control_plane}  "
            f"proxies {summary.proxies_healthy}/{summary.proxies_total} "
            f"(coverage {format_percent(summary.coverage)})  "
            f"traffic splits {summary.traffic_splits}  "
            f"service profiles {summary.service_profiles}"
        )

    @staticmethod
    def adapter_pod_rows(summary: LinkerdSummary) -> list[list[str]]:
        return [
            [pod.name, pod.ip, status_markup(pod.status), pod.ready, str(pod.restarts)]
            for pod in summary.adapter_pods
        ]


class CiliumPresenter(PollingPresenter):
    """Presenter for the Cilium tab."""

    view = ViewName.CILIUM

    @staticmethod
    def overview(summary: CiliumSummary) -> str:
        text = f"[b]Cilium[/b]  {status_markup(summary.status)}"
        if summary.adapter is not None:
            text += f"  adapter {summary.adapter.version or '?'} ({summary.adapter.status})"
        else:
            text += "  [dim]adapter not listed[/dim]"
        if summary.available_adapters:
            text += f"  available: {', '.join(summary.available_adapters)}"
        return text

    @staticmethod
    def service_rows(summary: CiliumSummary) -> list[list[str]]:
        return [[name] for name in summary.service_names[:MAX_SERVICE_NAMES_DISPLAY]]


PRESENTERS: dict[ViewName, type[PollingPresenter]] = {
    ViewName.ISTIO: IstioPresenter,
    ViewName.LINKERD: LinkerdPresenter,
    ViewName.CILIUM: CiliumPresenter,
}
