"""Meshify backend controller."""

from meshify.controllers.mesh.controller import (
    VIEW_ENDPOINTS,
    VIEW_POLL_INTERVALS,
    ActionResult,
    MeshifyController,
)

__all__ = [
    "VIEW_ENDPOINTS",
    "VIEW_POLL_INTERVALS",
    "ActionResult",
    "MeshifyController",
]
