"""Dashboard and header derivations (workloads + cluster info)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from meshify.constants.endpoints import LABEL_CLUSTER_INFO, LABEL_WORKLOADS
from meshify.constants.values import (
    CONNECTED_STATUS,
    DEFAULT_VIEW_TITLE,
    UNKNOWN_STATUS,
    VIEW_TITLES,
)
from meshify.controllers.derivations.base import (
    DerivationContext,
    SummaryDerivation,
    as_bool,
    as_dict,
    as_int,
    as_list,
    as_str,
    percentage,
)
from meshify.models.summaries import (
    ClusterEntry,
    DashboardSummary,
    HeaderSummary,
    WorkloadCounts,
)

# Backend JSON key -> WorkloadCounts field
_WORKLOAD_FIELDS: dict[str, str] = {
    "numDaemonSets": "daemon_sets",
    "numDeployments": "deployments",
    "numNodes": "nodes",
    "numPodTemplates": "pod_templates",
    "numReplicationControllers": "replication_controllers",
    "numPods": "pods",
    "numServices": "services",
}


def parse_workloads(payload: Any) -> WorkloadCounts:
    data = as_dict(payload)
    return WorkloadCounts(
        **{field: as_int(data.get(key)) for key, field in _WORKLOAD_FIELDS.items()}
    )


def parse_service_names(payload: Any) -> tuple[str, ...]:
    return tuple(
        as_str(name) for name in as_list(as_dict(payload).get("serviceNames")) if name
    )


def parse_clusters(payload: Any) -> tuple[ClusterEntry, ...]:
    entries = []
    for item in as_list(as_dict(payload).get("clusters")):
        item = as_dict(item)
        name = as_str(item.get("name"))
        if not name:
            continue
        entries.append(ClusterEntry(name=name, active=as_bool(item.get("isactive"))))
    return tuple(entries)


def cluster_count(payload: Any, clusters: tuple[ClusterEntry, ...]) -> int:
    data = as_dict(payload)
    if "numClusters" in data:
        return as_int(data.get("numClusters"))
    return len(clusters)


def cluster_health(payload: Any, clusters: tuple[ClusterEntry, ...]) -> float:
    """Active share of listed clusters, or 100 when the API reports connected."""
    if clusters:
        return percentage(sum(1 for c in clusters if c.active), len(clusters))
    status = as_str(as_dict(payload).get("status")).lower()
    return 100.0 if status == CONNECTED_STATUS else 0.0


class DashboardDerivation(SummaryDerivation):
    """Builds the dashboard summary from workloads and cluster info."""

    name = "dashboard"

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> DashboardSummary:
        workloads = payloads.get(LABEL_WORKLOADS)
        cluster_info = payloads.get(LABEL_CLUSTER_INFO)
        clusters = parse_clusters(cluster_info)
        info = as_dict(cluster_info)
        return DashboardSummary(
            workloads=parse_workloads(workloads),
            service_names=parse_service_names(workloads),
            cluster_count=cluster_count(cluster_info, clusters),
            clusters=clusters,
            connection_status=as_str(info.get("status"), UNKNOWN_STATUS) or UNKNOWN_STATUS,
            connection_message=as_str(info.get("message")),
            cluster_health=cluster_health(cluster_info, clusters),
        )

    def build_demo(self, context: DerivationContext) -> DashboardSummary:
        rng = self.demo_random(context)
        count = rng.randint(1, 3)
        clusters = tuple(
            ClusterEntry(name=f"demo-cluster-{index}", active=True)
            for index in range(1, count + 1)
        )
        services = rng.randint(8, 13)
        return DashboardSummary(
            workloads=WorkloadCounts(
                daemon_sets=rng.randint(2, 6),
                deployments=rng.randint(5, 15),
                nodes=rng.randint(3, 5),
                pod_templates=rng.randint(0, 4),
                replication_controllers=0,
                pods=rng.randint(20, 60),
                services=services,
            ),
            service_names=tuple(f"demo-service-{index}" for index in range(1, services + 1)),
            cluster_count=count,
            clusters=clusters,
            connection_status="demo",
            connection_message="Backend unavailable, showing demo data",
            cluster_health=float(rng.randint(75, 95)),
        )


class HeaderDerivation(SummaryDerivation):
    """Builds the header badge summary for the active view."""

    name = "header"

    def __init__(self, view: str = "dashboard") -> None:
        self._title = VIEW_TITLES.get(view.strip("/").lower(), DEFAULT_VIEW_TITLE)

    @property
    def title(self) -> str:
        return self._title

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> HeaderSummary:
        cluster_info = payloads.get(LABEL_CLUSTER_INFO)
        clusters = parse_clusters(cluster_info)
        return HeaderSummary(
            title=self._title,
            cluster_count=cluster_count(cluster_info, clusters),
            connection_status=as_str(as_dict(cluster_info).get("status"), UNKNOWN_STATUS)
            or UNKNOWN_STATUS,
        )

    def build_demo(self, context: DerivationContext) -> HeaderSummary:
        return HeaderSummary(
            title=self._title,
            cluster_count=self.demo_random(context).randint(1, 3),
            connection_status="demo",
        )
