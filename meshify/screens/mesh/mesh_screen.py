"""Service mesh screen: Istio, Linkerd and Cilium tabs plus lifecycle actions."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.css.query import NoMatches
from textual.widgets import DataTable, Static, TabbedContent, TabPane

from meshify.constants.enums import ViewName
from meshify.controllers.mesh import ActionResult
from meshify.keyboard import MESH_SCREEN_BINDINGS
from meshify.models.polling import AggregateSnapshot
from meshify.models.summaries import CiliumSummary, IstioSummary, LinkerdSummary
from meshify.screens.base_screen import BaseScreen, fill_table
from meshify.screens.mesh.config import (
    ADAPTER_POD_TABLE_COLUMNS,
    ADAPTER_TABLE_COLUMNS,
    COMPONENT_TABLE_COLUMNS,
    SERVICE_TABLE_COLUMNS,
    TAB_CILIUM,
    TAB_ISTIO,
    TAB_LINKERD,
    TAB_TITLES,
)
from meshify.screens.mesh.presenter import (
    PRESENTERS,
    CiliumPresenter,
    IstioPresenter,
    LinkerdPresenter,
    component_rows,
)
from meshify.screens.mixins import PollingPresenter

logger = logging.getLogger(__name__)


class MeshScreen(BaseScreen):
    """Service mesh health across providers."""

    ROUTE = "service-mesh-health"
    VIEWS = (ViewName.ISTIO, ViewName.LINKERD, ViewName.CILIUM)
    BINDINGS = MESH_SCREEN_BINDINGS

    DEFAULT_CSS = """
    MeshScreen TabbedContent {
        height: 1fr;
    }
    MeshScreen .mesh-overview {
        height: auto;
        padding: 0 1;
    }
    MeshScreen DataTable {
        height: 1fr;
    }
    """

    def create_presenter(self, view: ViewName) -> PollingPresenter:
        return PRESENTERS[view](self, self.controller)

    def compose_content(self) -> ComposeResult:
        with TabbedContent(initial=TAB_ISTIO):
            with TabPane(TAB_TITLES[TAB_ISTIO], id=TAB_ISTIO):
                yield Static("", id="istio-overview", classes="mesh-overview")
                yield DataTable(id="istio-components", zebra_stripes=True)
                yield DataTable(id="istio-adapters", zebra_stripes=True)
            with TabPane(TAB_TITLES[TAB_LINKERD], id=TAB_LINKERD):
                yield Static("", id="linkerd-overview", classes="mesh-overview")
                yield DataTable(id="linkerd-components", zebra_stripes=True)
                yield DataTable(id="linkerd-adapter-pods", zebra_stripes=True)
            with TabPane(TAB_TITLES[TAB_CILIUM], id=TAB_CILIUM):
                yield Static("", id="cilium-overview", classes="mesh-overview")
                yield DataTable(id="cilium-services", zebra_stripes=True)

    def action_show_tab(self, tab_id: str) -> None:
        with suppress(NoMatches):
            self.query_one(TabbedContent).active = tab_id

    def render_summary(self, view: ViewName, snapshot: AggregateSnapshot) -> None:
        summary = snapshot.summary
        with suppress(NoMatches):
            if isinstance(summary, IstioSummary):
                self._render_istio(summary)
            elif isinstance(summary, LinkerdSummary):
                self._render_linkerd(summary)
            elif isinstance(summary, CiliumSummary):
                self._render_cilium(summary)

    def _render_istio(self, summary: IstioSummary) -> None:
        self.query_one("#istio-overview", Static).update(IstioPresenter.overview(summary))
        fill_table(
            self.query_one("#istio-components", DataTable),
            COMPONENT_TABLE_COLUMNS,
            component_rows(summary.components),
        )
        fill_table(
            self.query_one("#istio-adapters", DataTable),
            ADAPTER_TABLE_COLUMNS,
            IstioPresenter.adapter_rows(summary),
        )

    def _render_linkerd(self, summary: LinkerdSummary) -> None:
        self.query_one("#linkerd-overview", Static).update(LinkerdPresenter.overview(summary))
        fill_table(
            self.query_one("#linkerd-components", DataTable),
            COMPONENT_TABLE_COLUMNS,
            component_rows(summary.components),
        )
        fill_table(
            self.query_one("#linkerd-adapter-pods", DataTable),
            ADAPTER_POD_TABLE_COLUMNS,
            LinkerdPresenter.adapter_pod_rows(summary),
        )

    def _render_cilium(self, summary: CiliumSummary) -> None:
        self.query_one("#cilium-overview", Static).update(CiliumPresenter.overview(summary))
        fill_table(
            self.query_one("#cilium-services", DataTable),
            SERVICE_TABLE_COLUMNS,
            CiliumPresenter.service_rows(summary),
        )

    # =========================================================================
    # Lifecycle actions
    # =========================================================================

    def _run_action(
        self,
        action: Callable[[], Awaitable[ActionResult]],
        refresh_view: ViewName,
    ) -> None:
        async def _worker() -> None:
            result = await action()
            if result.success:
                message = result.message
                if result.ingress_ip:
                    message += f"\nIngress IP: {result.ingress_ip}"
                self.notify(message, title=result.title)
                self.presenters[refresh_view].refresh()
            else:
                self.notify(result.error, title=f"{result.title} failed", severity="error")

        self.notify("Request sent to backend...", timeout=3)
        self.run_worker(_worker(), group="mesh-actions", exit_on_error=False)

    def action_deploy_bookinfo(self) -> None:
        self._run_action(self.controller.deploy_bookinfo, ViewName.ISTIO)

    def action_deploy_emojivoto(self) -> None:
        self._run_action(self.controller.deploy_emojivoto, ViewName.LINKERD)

    def action_install_linkerd(self) -> None:
        self._run_action(self.controller.install_linkerd, ViewName.LINKERD)
