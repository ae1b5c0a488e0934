"""Service mesh screen package."""

from meshify.screens.mesh.mesh_screen import MeshScreen
from meshify.screens.mesh.presenter import (
    CiliumPresenter,
    IstioPresenter,
    LinkerdPresenter,
)

__all__ = [
    "CiliumPresenter",
    "IstioPresenter",
    "LinkerdPresenter",
    "MeshScreen",
]
