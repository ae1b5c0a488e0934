"""Per-view summary derivations."""

from meshify.controllers.derivations.base import (
    DerivationContext,
    DerivedSummary,
    SummaryDerivation,
)
from meshify.controllers.derivations.dashboard import DashboardDerivation, HeaderDerivation
from meshify.controllers.derivations.mesh import (
    CiliumDerivation,
    IstioDerivation,
    LinkerdDerivation,
)
from meshify.controllers.derivations.monitoring import MonitoringDerivation
from meshify.controllers.derivations.performance import PerformanceDerivation

__all__ = [
    "CiliumDerivation",
    "DashboardDerivation",
    "DerivationContext",
    "DerivedSummary",
    "HeaderDerivation",
    "IstioDerivation",
    "LinkerdDerivation",
    "MonitoringDerivation",
    "PerformanceDerivation",
    "SummaryDerivation",
]
