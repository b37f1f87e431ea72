"""Qt utilities and helpers."""

from ic_gui.utils.qt import set_table_headers, set_widget_role
from ic_gui.utils.timers import QtTimerScheduler

__all__ = [
    "set_table_headers",
    "set_widget_role",
    "QtTimerScheduler",
]
