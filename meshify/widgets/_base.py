"""Base widget classes for Meshify.

Stateful widgets inherit from StatefulWidget and react to ``is_loading``
through ``watch_is_loading``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from textual.reactive import reactive
from textual.widget import Widget


class BaseWidget(Widget):
    """Base widget applying a fixed set of default CSS classes."""

    _default_classes: ClassVar[str] = ""

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(id=id, classes=classes, **kwargs)
        if self._default_classes:
            self.add_class(*self._default_classes.split())


class StatefulWidget(BaseWidget):
    """Base class for widgets fed by a poll session.

    Attributes:
        is_loading: True while a cycle is in flight.
    """

    is_loading = reactive(False)

    def watch_is_loading(self, loading: bool) -> None:
        """Override to show a loading indicator."""
