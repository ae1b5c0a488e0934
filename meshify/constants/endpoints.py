"""Backend endpoint paths and labels.

Paths are relative to the configured backend base URL.
"""

from typing import Final

# ============================================================================
# Kubernetes
# ============================================================================

KUBE_WORKLOADS_PATH: Final = "/api/kube/workloads"
KUBE_CLUSTER_PATH: Final = "/api/kube/cluster"

# ============================================================================
# Service mesh
# ============================================================================

ADAPTERS_PATH: Final = "/api/adapters"
ISTIO_STATUS_PATH: Final = "/api/istio/status"
ISTIO_ADAPTERS_PATH: Final = "/api/istio/adapters"
ISTIO_DEPLOY_BOOKINFO_PATH: Final = "/api/istio/deploy/bookinfo"
LINKERD_STATUS_PATH: Final = "/api/linkerd/status"
LINKERD_ADAPTERS_PATH: Final = "/api/linkerd/adapters"
LINKERD_INSTALL_PATH: Final = "/api/linkerd/install"
LINKERD_EMOJIVOTO_DEPLOY_PATH: Final = "/api/linkerd/applications/{namespace}/emojivoto/deploy"

# ============================================================================
# Monitoring
# ============================================================================

MONITORING_HEALTH_PATH: Final = "/api/prometheusgrafana/health/status"
MONITORING_STATS_PATH: Final = "/api/monitoring/stats"
PROMETHEUS_TARGETS_PATH: Final = "/api/prometheus/targets"

# ============================================================================
# Endpoint labels (keys of a snapshot's outcome mapping)
# ============================================================================

LABEL_WORKLOADS: Final = "workloads"
LABEL_CLUSTER_INFO: Final = "cluster_info"
LABEL_ADAPTERS: Final = "adapters"
LABEL_ISTIO_STATUS: Final = "istio_status"
LABEL_ISTIO_ADAPTERS: Final = "istio_adapters"
LABEL_LINKERD_STATUS: Final = "linkerd_status"
LABEL_LINKERD_ADAPTERS: Final = "linkerd_adapters"
LABEL_MONITORING_HEALTH: Final = "health"
LABEL_MONITORING_STATS: Final = "stats"
LABEL_PROMETHEUS_TARGETS: Final = "targets"

__all__ = [
    "ADAPTERS_PATH",
    "ISTIO_ADAPTERS_PATH",
    "ISTIO_DEPLOY_BOOKINFO_PATH",
    "ISTIO_STATUS_PATH",
    "KUBE_CLUSTER_PATH",
    "KUBE_WORKLOADS_PATH",
    "LABEL_ADAPTERS",
    "LABEL_CLUSTER_INFO",
    "LABEL_ISTIO_ADAPTERS",
    "LABEL_ISTIO_STATUS",
    "LABEL_LINKERD_ADAPTERS",
    "LABEL_LINKERD_STATUS",
    "LABEL_MONITORING_HEALTH",
    "LABEL_MONITORING_STATS",
    "LABEL_PROMETHEUS_TARGETS",
    "LABEL_WORKLOADS",
    "LINKERD_ADAPTERS_PATH",
    "LINKERD_EMOJIVOTO_DEPLOY_PATH",
    "LINKERD_INSTALL_PATH",
    "LINKERD_STATUS_PATH",
    "MONITORING_HEALTH_PATH",
    "MONITORING_STATS_PATH",
    "PROMETHEUS_TARGETS_PATH",
]
