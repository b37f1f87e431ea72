"""Selection summary and pagination controls."""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QPushButton, QWidget

from ic_table.models import TableSnapshot


class PaginationBar(QWidget):
    """Footer with the selection summary, page size and page navigation."""

    first_requested = Signal()
    previous_requested = Signal()
    next_requested = Signal()
    last_requested = Signal()
    page_size_changed = Signal(int)

    def __init__(
        self,
        page_size_options: list[int],
        *,
        show_selection: bool = True,
        show_pagination: bool = True,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self._selection_label = QLabel("")
        self._selection_label.setProperty("role", "muted")
        self._selection_label.setVisible(show_selection)
        layout.addWidget(self._selection_label)
        layout.addStretch()

        self._size_combo = QComboBox()
        for size in page_size_options:
            self._size_combo.addItem(str(size), size)
        self._size_combo.currentIndexChanged.connect(self._on_size_changed)

        self._page_label = QLabel("")
        self._first_btn = QPushButton("«")
        self._first_btn.setToolTip("Go to first page")
        self._prev_btn = QPushButton("‹")
        self._prev_btn.setToolTip("Go to previous page")
        self._next_btn = QPushButton("›")
        self._next_btn.setToolTip("Go to next page")
        self._last_btn = QPushButton("»")
        self._last_btn.setToolTip("Go to last page")
        self._first_btn.clicked.connect(self.first_requested)
        self._prev_btn.clicked.connect(self.previous_requested)
        self._next_btn.clicked.connect(self.next_requested)
        self._last_btn.clicked.connect(self.last_requested)

        self._pagination_widgets: list[QWidget] = [
            QLabel("Rows per page"),
            self._size_combo,
            self._page_label,
            self._first_btn,
            self._prev_btn,
            self._next_btn,
            self._last_btn,
        ]
        for widget in self._pagination_widgets:
            widget.setVisible(show_pagination)
            layout.addWidget(widget)

    @property
    def page_text(self) -> str:
        return self._page_label.text()

    @property
    def selection_text(self) -> str:
        return self._selection_label.text()

    def update_state(self, snapshot: TableSnapshot, selection_text: str, page_text: str) -> None:
        self._selection_label.setText(selection_text)
        self._page_label.setText(page_text)
        self._first_btn.setEnabled(snapshot.can_previous_page)
        self._prev_btn.setEnabled(snapshot.can_previous_page)
        self._next_btn.setEnabled(snapshot.can_next_page)
        self._last_btn.setEnabled(snapshot.can_next_page)
        index = self._size_combo.findData(snapshot.pagination.page_size)
        if index < 0:
            self._size_combo.blockSignals(True)
            self._size_combo.addItem(str(snapshot.pagination.page_size), snapshot.pagination.page_size)
            self._size_combo.blockSignals(False)
            index = self._size_combo.count() - 1
        if index != self._size_combo.currentIndex():
            self._size_combo.blockSignals(True)
            self._size_combo.setCurrentIndex(index)
            self._size_combo.blockSignals(False)

    def _on_size_changed(self, index: int) -> None:
        size = self._size_combo.itemData(index)
        if size is not None:
            self.page_size_changed.emit(int(size))
