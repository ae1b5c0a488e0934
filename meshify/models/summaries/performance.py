"""Performance time-series models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PerformancePoint(BaseModel):
    """One sample of the performance chart, produced once per poll cycle."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    time_label: str
    cluster_health: int = 0
    resource_utilization: int = 0
    service_count: int = 0
    node_count: int = 0
    adapter_count: int = 0
    live: bool = True


class PerformanceSummary(BaseModel):
    """Fixed-length window of performance points, oldest first."""

    model_config = ConfigDict(frozen=True)

    points: tuple[PerformancePoint, ...] = ()
    window_size: int = 24

    @property
    def latest(self) -> PerformancePoint | None:
        return self.points[-1] if self.points else None

    def series(self, field_name: str) -> list[int]:
        """Return one metric across the window, e.g. ``"cluster_health"``."""
        return [int(getattr(point, field_name)) for point in self.points]
