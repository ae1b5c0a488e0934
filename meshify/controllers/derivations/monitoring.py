"""Prometheus/Grafana monitoring derivation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from meshify.constants.endpoints import (
    LABEL_MONITORING_HEALTH,
    LABEL_MONITORING_STATS,
    LABEL_PROMETHEUS_TARGETS,
)
from meshify.constants.values import ACTIVE_STATUS, INACTIVE_STATUS
from meshify.controllers.derivations.base import (
    DerivationContext,
    SummaryDerivation,
    as_dict,
    as_int,
    as_list,
    as_str,
    first_key,
    percentage,
)
from meshify.models.summaries import (
    MonitoringServiceInfo,
    MonitoringStats,
    MonitoringSummary,
)


def parse_services(payload: Any) -> tuple[MonitoringServiceInfo, ...]:
    """Parse health entries; keys may arrive as ``Name`` or ``name``."""
    services = []
    for item in as_list(payload):
        item = as_dict(item)
        name = as_str(first_key(item, "Name", "name"))
        if not name:
            continue
        services.append(
            MonitoringServiceInfo(
                name=name,
                status=as_str(first_key(item, "Status", "status"), "unknown") or "unknown",
                address=as_str(first_key(item, "Address", "address")),
                port=as_int(first_key(item, "Port", "port")),
                namespace=as_str(first_key(item, "Namespace", "namespace")),
                health=as_str(first_key(item, "Health", "health"), "unknown") or "unknown",
                version=as_str(first_key(item, "Version", "version")),
            )
        )
    return tuple(services)


def parse_stats(payload: Any) -> MonitoringStats:
    data = as_dict(payload)
    return MonitoringStats(
        active_metrics=as_int(data.get("active_metrics")),
        active_alerts=as_int(data.get("active_alerts")),
        warning_alerts=as_int(data.get("warning_alerts")),
        critical_alerts=as_int(data.get("critical_alerts")),
        custom_dashboards=as_int(data.get("custom_dashboards")),
        data_retention=as_str(data.get("data_retention")),
        scrape_targets=as_int(data.get("scrape_targets")),
        healthy_targets=as_int(data.get("healthy_targets")),
    )


def service_status(services: tuple[MonitoringServiceInfo, ...], name: str) -> str:
    for service in services:
        if service.name.lower() == name:
            return ACTIVE_STATUS if service.is_active else INACTIVE_STATUS
    return INACTIVE_STATUS


class MonitoringDerivation(SummaryDerivation):
    """Builds the observability summary from health, stats and scrape targets."""

    name = "monitoring"

    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> MonitoringSummary:
        services = parse_services(payloads.get(LABEL_MONITORING_HEALTH))
        targets_doc = as_dict(payloads.get(LABEL_PROMETHEUS_TARGETS))
        targets = as_list(targets_doc.get("targets"))
        total = max(as_int(targets_doc.get("count")), len(targets))
        healthy = sum(
            1 for target in targets if as_str(as_dict(target).get("health")).lower() == "up"
        )
        return MonitoringSummary(
            services=services,
            prometheus_status=service_status(services, "prometheus"),
            grafana_status=service_status(services, "grafana"),
            stats=parse_stats(payloads.get(LABEL_MONITORING_STATS)),
            target_count=total,
            healthy_target_count=healthy,
            target_health=percentage(healthy, total),
        )

    def build_demo(self, context: DerivationContext) -> MonitoringSummary:
        rng = self.demo_random(context)
        scrape_targets = rng.randint(8, 20)
        healthy = rng.randint(scrape_targets // 2, scrape_targets)
        warning = rng.randint(0, 3)
        critical = rng.randint(0, 2)
        return MonitoringSummary(
            services=(
                MonitoringServiceInfo(
                    name="Prometheus", status="running", address="10.0.0.10",
                    port=9090, namespace="monitoring", health="healthy",
                ),
                MonitoringServiceInfo(
                    name="Grafana", status="running", address="10.0.0.11",
                    port=3000, namespace="monitoring", health="healthy",
                ),
            ),
            prometheus_status=ACTIVE_STATUS,
            grafana_status=ACTIVE_STATUS,
            stats=MonitoringStats(
                active_metrics=rng.randint(500, 2000),
                active_alerts=warning + critical,
                warning_alerts=warning,
                critical_alerts=critical,
                custom_dashboards=rng.randint(3, 12),
                data_retention="15d",
                scrape_targets=scrape_targets,
                healthy_targets=healthy,
            ),
            target_count=scrape_targets,
            healthy_target_count=healthy,
            target_health=percentage(healthy, scrape_targets),
        )
