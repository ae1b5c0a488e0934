"""Dashboard screen configuration - KPI and table definitions."""

from __future__ import annotations

# =============================================================================
# KPI tiles: (widget id, title)
# =============================================================================

KPI_CLUSTERS = "kpi-clusters"
KPI_NODES = "kpi-nodes"
KPI_PODS = "kpi-pods"
KPI_SERVICES = "kpi-services"
KPI_DEPLOYMENTS = "kpi-deployments"
KPI_HEALTH = "kpi-health"

KPI_TILES: list[tuple[str, str]] = [
    (KPI_CLUSTERS, "Clusters"),
    (KPI_NODES, "Nodes"),
    (KPI_PODS, "Pods"),
    (KPI_SERVICES, "Services"),
    (KPI_DEPLOYMENTS, "Deployments"),
    (KPI_HEALTH, "Cluster Health"),
]

# =============================================================================
# Table Column Definitions: list[tuple[str, int]] = [(name, width), ...]
# =============================================================================

WORKLOAD_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Resource", 28),
    ("Count", 10),
]

CLUSTER_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Cluster", 36),
    ("State", 12),
]

SERVICE_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("Service", 48),
]
