"""Screen-specific keyboard bindings."""

from textual.binding import Binding

MESH_SCREEN_BINDINGS: list[Binding] = [
    Binding("1", "show_tab('tab-istio')", "Istio", show=False),
    Binding("2", "show_tab('tab-linkerd')", "Linkerd", show=False),
    Binding("3", "show_tab('tab-cilium')", "Cilium", show=False),
    Binding("b", "deploy_bookinfo", "Deploy Bookinfo"),
    Binding("e", "deploy_emojivoto", "Deploy Emojivoto"),
    Binding("i", "install_linkerd", "Install Linkerd"),
]

__all__ = [
    "MESH_SCREEN_BINDINGS",
]
