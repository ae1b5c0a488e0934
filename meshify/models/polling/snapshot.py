"""Aggregate snapshot model produced once per poll cycle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from meshify.constants.enums import DataMode
from meshify.models.polling.outcome import FetchFailure, FetchOutcome, FetchSuccess


@dataclass(frozen=True)
class AggregateSnapshot:
    """Merged, derived result of one poll cycle across all endpoints.

    Snapshots are frozen and their outcome mapping is read-only. Consumers
    receive them through the update callback and must not mutate the summary.
    """

    sequence: int
    outcomes: Mapping[str, FetchOutcome]
    summary: Any
    timestamp: datetime
    using_fallback_data: bool = False
    errors: Mapping[str, str] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))
        errors = {
            label: outcome.reason
            for label, outcome in self.outcomes.items()
            if isinstance(outcome, FetchFailure)
        }
        object.__setattr__(self, "errors", MappingProxyType(errors))

    @property
    def data_mode(self) -> DataMode:
        return DataMode.FALLBACK if self.using_fallback_data else DataMode.LIVE

    @property
    def succeeded(self) -> tuple[str, ...]:
        """Labels of endpoints that answered successfully."""
        return tuple(
            label
            for label, outcome in self.outcomes.items()
            if isinstance(outcome, FetchSuccess)
        )

    @property
    def failed(self) -> tuple[str, ...]:
        """Labels of endpoints that failed this cycle."""
        return tuple(self.errors)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        summary = self.summary
        if hasattr(summary, "model_dump"):
            summary = summary.model_dump(mode="json")
        return {
            "sequence": self.sequence,
            "timestamp": self.timestamp.isoformat(),
            "data_mode": self.data_mode.value,
            "succeeded": list(self.succeeded),
            "errors": dict(self.errors),
            "summary": summary,
        }
