"""Reusable widgets for Meshify screens."""

from meshify.widgets._base import BaseWidget, StatefulWidget
from meshify.widgets.kpi import CustomKPI
from meshify.widgets.status import LiveStatus, data_source_markup

__all__ = [
    "BaseWidget",
    "CustomKPI",
    "LiveStatus",
    "StatefulWidget",
    "data_source_markup",
]
