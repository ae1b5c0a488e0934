"""Per-endpoint fetch outcome models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FetchSuccess:
    """Endpoint answered with a decodable JSON payload."""

    payload: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    """Endpoint failed (network error, non-2xx status, timeout, bad JSON)."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


FetchOutcome = FetchSuccess | FetchFailure


__all__ = [
    "FetchFailure",
    "FetchOutcome",
    "FetchSuccess",
]
