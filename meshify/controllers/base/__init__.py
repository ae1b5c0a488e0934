"""Base controller classes."""

from meshify.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
)

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
]
