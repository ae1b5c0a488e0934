"""Summary derivation strategy shared by every polling view.

A derivation turns the settled outcome mapping of one poll cycle into a
view summary. When no endpoint succeeded it produces a synthetic demo
summary instead, and the snapshot is flagged as fallback data.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from meshify.constants.limits import PERCENT_MAX, PERCENT_MIN
from meshify.models.polling import FetchOutcome, FetchSuccess


@dataclass(frozen=True)
class DerivationContext:
    """Inputs a derivation may use besides the outcomes.

    Attributes:
        sequence: Cycle sequence number (also seeds demo data).
        timestamp: Cycle completion time.
        previous: Summary of the last delivered snapshot, if any.
    """

    sequence: int
    timestamp: datetime
    previous: Any = None


@dataclass(frozen=True)
class DerivedSummary:
    """Summary plus the flag telling whether it is synthetic."""

    summary: Any
    using_fallback_data: bool = False


class SummaryDerivation(ABC):
    """Base class for per-view derivations."""

    name: ClassVar[str] = ""

    def derive(
        self,
        outcomes: Mapping[str, FetchOutcome],
        context: DerivationContext,
    ) -> DerivedSummary:
        """Build the view summary for one settled cycle."""
        if not any(isinstance(outcome, FetchSuccess) for outcome in outcomes.values()):
            return DerivedSummary(self.build_demo(context), using_fallback_data=True)
        payloads = {
            label: outcome.payload
            for label, outcome in outcomes.items()
            if isinstance(outcome, FetchSuccess)
        }
        return DerivedSummary(self.build(payloads, context), using_fallback_data=False)

    @abstractmethod
    def build(self, payloads: Mapping[str, Any], context: DerivationContext) -> Any:
        """Build a live summary from the payloads of successful endpoints."""
        ...

    @abstractmethod
    def build_demo(self, context: DerivationContext) -> Any:
        """Build placeholder values used when every endpoint failed."""
        ...

    @staticmethod
    def demo_random(context: DerivationContext) -> random.Random:
        """Return a generator seeded by the cycle so demo data is reproducible."""
        return random.Random(context.sequence)


# =============================================================================
# Defensive payload accessors
# =============================================================================


def as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def as_int(value: Any, default: int = 0) -> int:
    """Coerce numbers and numeric strings; anything else becomes ``default``."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    return default


def as_bool(value: Any) -> bool:
    """Accept real booleans and the ``"true"`` strings the backend emits."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def first_key(mapping: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present value among ``keys`` (``Name`` vs ``name``)."""
    for key in keys:
        if key in mapping and mapping[key] is not None:
            return mapping[key]
    return None


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def percentage(part: float, total: float) -> float:
    """Return ``part`` as a rounded percentage of ``total`` (0 when empty)."""
    if total <= 0:
        return 0.0
    return round(clamp(part / total * 100.0, PERCENT_MIN, PERCENT_MAX), 1)

