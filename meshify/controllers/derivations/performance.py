"""Performance chart derivation with a fixed-length sample window."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from meshify.constants.defaults import PERFORMANCE_WINDOW_DEFAULT
from meshify.constants.endpoints import (
    LABEL_ADAPTERS,
    LABEL_CLUSTER_INFO,
    LABEL_WORKLOADS,
)
from meshify.constants.limits import (
    PERCENT_MAX,
    PERCENT_MIN,
    UTILIZATION_CEILING,
    UTILIZATION_FLOOR,
)
from meshify.controllers.derivations.base import (
    DerivationContext,
    SummaryDerivation,
    as_dict,
    clamp,
)
from meshify.controllers.derivations.dashboard import (
    cluster_health,
    parse_clusters,
    parse_workloads,
)
from meshify.models.summaries import PerformancePoint, PerformanceSummary


class PerformanceDerivation(SummaryDerivation):
    """Appends one sample per cycle to the window carried by the previous summary."""

    name = "performance"

    def __init__(self, window_size: int = PERFORMANCE_WINDOW_DEFAULT) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self._window_size = window_size

    @property
    def window_size(self) -> int:
        return self._window_size

    def _append(self, point: PerformancePoint, context: DerivationContext) -> PerformanceSummary:
        previous = context.previous
        history = previous.points if isinstance(previous, PerformanceSummary) else ()
        points = (*history, point)[-self._window_size :]
        return PerformanceSummary(points=points, window_size=self._window_size)

    @staticmethod
    def _time_label(context: DerivationContext) -> str:
        return context.timestamp.strftime("%H:%M")

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> PerformanceSummary:
        workloads_payload = payloads.get(LABEL_WORKLOADS)
        cluster_payload = payloads.get(LABEL_CLUSTER_INFO)
        adapters_payload = payloads.get(LABEL_ADAPTERS)

        utilization = 0.0
        service_count = 0
        node_count = 0
        if isinstance(workloads_payload, dict):
            workloads = parse_workloads(workloads_payload)
            utilization = clamp(
                workloads.total_resources * 2, UTILIZATION_FLOOR, UTILIZATION_CEILING
            )
            service_count = workloads.services
            node_count = workloads.nodes

        health = 0.0
        if cluster_payload is not None:
            health = cluster_health(cluster_payload, parse_clusters(cluster_payload))

        point = PerformancePoint(
            timestamp=context.timestamp,
            time_label=self._time_label(context),
            cluster_health=round(clamp(health, PERCENT_MIN, PERCENT_MAX)),
            resource_utilization=round(clamp(utilization, PERCENT_MIN, PERCENT_MAX)),
            service_count=service_count,
            node_count=node_count,
            adapter_count=len(as_dict(adapters_payload)),
            live=True,
        )
        return self._append(point, context)

    def build_demo(self, context: DerivationContext) -> PerformanceSummary:
        rng = self.demo_random(context)
        point = PerformancePoint(
            timestamp=context.timestamp,
            time_label=self._time_label(context),
            cluster_health=rng.randint(75, 95),
            resource_utilization=rng.randint(40, 70),
            service_count=rng.randint(8, 13),
            node_count=rng.randint(3, 5),
            adapter_count=rng.randint(2, 5),
            live=False,
        )
        return self._append(point, context)
