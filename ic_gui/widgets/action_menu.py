"""Row action menu button."""

from __future__ import annotations

from PySide6.QtWidgets import QMenu, QToolButton, QWidget

from ic_gui.utils import set_widget_role
from ic_table.actions import ActionMenu


def build_qmenu(menu: ActionMenu, parent: QWidget | None = None) -> QMenu:
    """Build a QMenu from an action menu descriptor."""
    qmenu = QMenu(menu.title, parent)
    header = qmenu.addAction(menu.title)
    header.setEnabled(False)
    for item in menu.items:
        if item.separator_before:
            qmenu.addSeparator()
        action = qmenu.addAction(item.label)
        action.setData(item.kind.value)
        if item.destructive:
            action.setProperty("destructive", True)
        action.triggered.connect(lambda _checked=False, item=item: item.trigger())
    return qmenu


class ActionMenuButton(QToolButton):
    """Icon-only trigger that pops up the row's action menu."""

    def __init__(self, menu: ActionMenu, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._menu = menu
        self.setText("⋯")
        self.setToolTip("Open menu")
        self.setAutoRaise(True)
        self.setPopupMode(QToolButton.ToolButtonPopupMode.InstantPopup)
        self.setMenu(build_qmenu(menu, self))
        self.setEnabled(not menu.is_empty)
        set_widget_role(self, "muted")

    @property
    def action_menu(self) -> ActionMenu:
        return self._menu
