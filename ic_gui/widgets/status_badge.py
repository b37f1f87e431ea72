"""Status badge label."""

from __future__ import annotations

from PySide6.QtWidgets import QLabel, QWidget

from ic_gui.utils import set_widget_role
from ic_table.status import StatusBadge


class StatusBadgeLabel(QLabel):
    """QLabel styled through the badge's status role and variant."""

    def __init__(self, badge: StatusBadge | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._badge: StatusBadge | None = None
        if badge is not None:
            self.set_badge(badge)

    @property
    def badge(self) -> StatusBadge | None:
        return self._badge

    def set_badge(self, badge: StatusBadge) -> None:
        self._badge = badge
        text = f"{badge.icon} {badge.label}" if badge.icon else badge.label
        self.setText(text)
        self.setProperty("variant", badge.variant.value)
        set_widget_role(self, badge.role)
