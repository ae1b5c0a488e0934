"""Service mesh (Istio, Linkerd, Cilium) summary models."""

from pydantic import BaseModel, ConfigDict


class MeshComponent(BaseModel):
    """Control-plane component row (deployment in the mesh namespace)."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = ""
    status: str = "Unknown"
    ready: str = "0/0"
    image: str = ""

    @property
    def is_running(self) -> bool:
        return self.status.lower() == "running"


class AdapterPod(BaseModel):
    """Pod backing a mesh adapter, as reported by the adapters endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    ip: str = ""
    status: str = "Unknown"
    ready: str = "0/0"
    restarts: int = 0
    node: str = ""


class MeshAdapter(BaseModel):
    """Service mesh adapter advertised by the backend."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str = ""
    version: str = ""
    status: str = "unknown"
    description: str = ""


class AddonAdapter(BaseModel):
    """Mesh add-on (prometheus, grafana, jaeger, kiali, ...)."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: str = "unknown"
    description: str = ""


class LinkerdSummary(BaseModel):
    """Derived Linkerd view."""

    model_config = ConfigDict(frozen=True)

    installed: bool = False
    version: str = ""
    message: str = ""
    control_plane_status: str = "Unknown"
    control_plane_healthy: bool = False
    proxies_total: int = 0
    proxies_healthy: int = 0
    coverage: float = 0.0
    components: tuple[MeshComponent, ...] = ()
    adapter_pods: tuple[AdapterPod, ...] = ()
    traffic_splits: int = 0
    service_profiles: int = 0


class IstioSummary(BaseModel):
    """Derived Istio view."""

    model_config = ConfigDict(frozen=True)

    installed: bool = False
    version: str = ""
    components: tuple[MeshComponent, ...] = ()
    running_components: int = 0
    component_health: float = 0.0
    namespaces: tuple[str, ...] = ()
    virtual_services: int = 0
    gateways: int = 0
    adapters: tuple[MeshAdapter, ...] = ()
    addons: tuple[AddonAdapter, ...] = ()


class CiliumSummary(BaseModel):
    """Derived Cilium view."""

    model_config = ConfigDict(frozen=True)

    status: str = "inactive"
    adapter: MeshAdapter | None = None
    service_names: tuple[str, ...] = ()
    available_adapters: tuple[str, ...] = ()
