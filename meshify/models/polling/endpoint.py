"""Endpoint descriptor model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EndpointDescriptor:
    """One backend resource polled for data.

    Attributes:
        url: Absolute URL or a path resolved against the backend base URL.
        label: Key of this endpoint's outcome inside a snapshot.
        method: HTTP method used for the request.
    """

    url: str
    label: str
    method: str = "GET"
