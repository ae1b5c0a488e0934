"""Dashboard and header summary models."""

from pydantic import BaseModel, ConfigDict


class ClusterEntry(BaseModel):
    """One cluster listed by the backend with its connection state."""

    model_config = ConfigDict(frozen=True)

    name: str
    active: bool = False


class WorkloadCounts(BaseModel):
    """Kubernetes workload counters shown on the dashboard."""

    model_config = ConfigDict(frozen=True)

    daemon_sets: int = 0
    deployments: int = 0
    nodes: int = 0
    pod_templates: int = 0
    replication_controllers: int = 0
    pods: int = 0
    services: int = 0

    @property
    def total_resources(self) -> int:
        return self.pods + self.services + self.deployments


class DashboardSummary(BaseModel):
    """Derived dashboard view: workloads, clusters and connection state."""

    model_config = ConfigDict(frozen=True)

    workloads: WorkloadCounts = WorkloadCounts()
    service_names: tuple[str, ...] = ()
    cluster_count: int = 0
    clusters: tuple[ClusterEntry, ...] = ()
    connection_status: str = "unknown"
    connection_message: str = ""
    cluster_health: float = 0.0


class HeaderSummary(BaseModel):
    """Derived header view: title and cluster badge."""

    model_config = ConfigDict(frozen=True)

    title: str = "Welcome"
    cluster_count: int = 0
    connection_status: str = "unknown"
