"""Service mesh screen configuration - tab IDs and column definitions."""

from __future__ import annotations

# =============================================================================
# Tab IDs
# =============================================================================

TAB_ISTIO = "tab-istio"
TAB_LINKERD = "tab-linkerd"
TAB_CILIUM = "tab-cilium"

TAB_TITLES: dict[str, str] = {
    TAB_ISTIO: "Istio",
    TAB_LINKERD: "Linkerd",
    TAB_CILIUM: "Cilium",
}

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

COMPONENT_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Component", 32),
    ("Namespace", 18),
    ("Status", 12),
    ("Ready", 8),
]

ADAPTER_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Adapter", 20),
    ("Version", 12),
    ("Status", 12),
    ("Description", 40),
]

ADAPTER_POD_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Pod", 36),
    ("IP", 16),
    ("Status", 12),
    ("Ready", 8),
    ("Restarts", 10),
]

SERVICE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Service", 48),
]
