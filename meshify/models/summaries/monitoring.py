"""Prometheus/Grafana monitoring summary models."""

from pydantic import BaseModel, ConfigDict


class MonitoringServiceInfo(BaseModel):
    """Health entry of one monitoring service."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: str = "unknown"
    address: str = ""
    port: int = 0
    namespace: str = ""
    health: str = "unknown"
    version: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.address)


class MonitoringStats(BaseModel):
    """Monitoring statistics counters."""

    model_config = ConfigDict(frozen=True)

    active_metrics: int = 0
    active_alerts: int = 0
    warning_alerts: int = 0
    critical_alerts: int = 0
    custom_dashboards: int = 0
    data_retention: str = ""
    scrape_targets: int = 0
    healthy_targets: int = 0


class MonitoringSummary(BaseModel):
    """Derived monitoring view (Prometheus, Grafana, scrape targets)."""

    model_config = ConfigDict(frozen=True)

    services: tuple[MonitoringServiceInfo, ...] = ()
    prometheus_status: str = "inactive"
    grafana_status: str = "inactive"
    stats: MonitoringStats = MonitoringStats()
    target_count: int = 0
    healthy_target_count: int = 0
    target_health: float = 0.0
