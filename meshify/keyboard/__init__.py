"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from meshify.keyboard.app import APP_BINDINGS
from meshify.keyboard.navigation import MESH_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "MESH_SCREEN_BINDINGS",
]
