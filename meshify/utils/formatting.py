"""Display formatting helpers shared by presenters."""

from __future__ import annotations

from meshify.constants.enums import ComponentHealth
from meshify.constants.values import DEGRADED, HEALTHY, UNHEALTHY

HEALTHY_THRESHOLD = 80.0
DEGRADED_THRESHOLD = 50.0

_KPI_STATUS: dict[ComponentHealth, str] = {
    ComponentHealth.HEALTHY: "success",
    ComponentHealth.DEGRADED: "warning",
    ComponentHealth.UNHEALTHY: "error",
    ComponentHealth.UNKNOWN: "info",
}

_HEALTH_MARKUP: dict[ComponentHealth, str] = {
    ComponentHealth.HEALTHY: HEALTHY,
    ComponentHealth.DEGRADED: DEGRADED,
    ComponentHealth.UNHEALTHY: UNHEALTHY,
    ComponentHealth.UNKNOWN: "[dim]UNKNOWN[/dim]",
}


def classify_health(percent: float | None) -> ComponentHealth:
    if percent is None:
        return ComponentHealth.UNKNOWN
    if percent >= HEALTHY_THRESHOLD:
        return ComponentHealth.HEALTHY
    if percent >= DEGRADED_THRESHOLD:
        return ComponentHealth.DEGRADED
    return ComponentHealth.UNHEALTHY


def kpi_status(percent: float | None) -> str:
    """Map a health percentage to a CustomKPI status class."""
    return _KPI_STATUS[classify_health(percent)]


def health_markup(percent: float | None) -> str:
    return _HEALTH_MARKUP[classify_health(percent)]


def format_percent(value: float) -> str:
    return f"{value:.0f}%" if float(value).is_integer() else f"{value:.1f}%"


def status_markup(status: str) -> str:
    """Color a backend status word (running/active green, pending yellow, rest red)."""
    lowered = status.lower()
    if lowered in {"running", "active", "healthy", "available", "up", "connected"}:
        return f"[green]{status}[/green]"
    if lowered in {"pending", "degraded", "unknown", "demo"}:
        return f"[yellow]{status}[/yellow]"
    return f"[red]{status}[/red]"
