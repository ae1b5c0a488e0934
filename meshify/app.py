"""Main application class for Meshify."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from meshify.constants.values import APP_TITLE
from meshify.controllers.mesh import MeshifyController
from meshify.keyboard.app import APP_BINDINGS
from meshify.models.state import AppSettings, ConfigLoadError, ConfigManager
from meshify.screens import (
    BaseScreen,
    DashboardScreen,
    MeshScreen,
    MonitoringScreen,
    PerformanceScreen,
)

logger = logging.getLogger(__name__)


class MeshifyApp(App[None]):
    """Terminal dashboard for service mesh clusters."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    settings: AppSettings

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        controller: MeshifyController | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        if settings is None:
            settings = self._load_settings()
        self.settings = settings
        self.controller = controller or MeshifyController(settings)

    @staticmethod
    def _load_settings() -> AppSettings:
        """Load settings from the config file, defaults when it is unusable."""
        try:
            return ConfigManager.load()
        except ConfigLoadError as exc:
            logger.warning("Using default settings: %s", exc)
            return AppSettings()

    def on_mount(self) -> None:
        if self.settings.theme in self.available_themes:
            self.theme = self.settings.theme
        else:
            logger.warning("Unknown theme %r, keeping %r", self.settings.theme, self.theme)
        self._show(DashboardScreen)

    async def on_unmount(self) -> None:
        await self.controller.aclose()

    def _show(self, screen_type: type[BaseScreen]) -> Screen:
        """Make a fresh ``screen_type`` current, unmounting the previous screen.

        Screens are not installed, so leaving one unmounts it and stops its
        poll sessions.
        """
        if isinstance(self.screen, screen_type):
            return self.screen
        screen = screen_type(self.controller)
        if isinstance(self.screen, BaseScreen):
            self.switch_screen(screen)
        else:
            self.push_screen(screen)
        return screen

    def action_nav_dashboard(self) -> None:
        self._show(DashboardScreen)

    def action_nav_performance(self) -> None:
        self._show(PerformanceScreen)

    def action_nav_mesh(self) -> None:
        self._show(MeshScreen)

    def action_nav_monitoring(self) -> None:
        self._show(MonitoringScreen)

    def action_refresh(self) -> None:
        """Trigger an extra poll cycle on the current screen."""
        current_screen = self.screen
        if isinstance(current_screen, BaseScreen):
            current_screen.action_refresh()
        else:
            self.notify("Nothing to refresh", severity="warning")

    def action_show_help(self) -> None:
        self.notify(
            "Keybindings:\n"
            "  d: Dashboard\n"
            "  p: Performance\n"
            "  m: Service Mesh (1 Istio, 2 Linkerd, 3 Cilium)\n"
            "  o: Observability\n"
            "  r: Refresh\n"
            "Service Mesh:\n"
            "  b: Deploy Bookinfo\n"
            "  e: Deploy Emojivoto\n"
            "  i: Install Linkerd\n"
            "  q: Quit",
            severity="information",
            title="Help",
            timeout=15,
        )


__all__ = [
    "MeshifyApp",
]
