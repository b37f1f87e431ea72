"""Application setup: build the table window for a dataset."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QMainWindow

from ic_app.dataset import Dataset, load_dataset
from ic_gui.viewmodels import GlobalSearchViewModel, TableViewModel
from ic_gui.views import DataTableView


class MainWindow(QMainWindow):
    """Top-level window hosting one data table view."""

    def __init__(self, dataset: Dataset) -> None:
        super().__init__()
        self._dataset = dataset
        title = dataset.source.stem if dataset.source else "Rows"
        self.setWindowTitle(f"Inventory Console - {title}")
        self.resize(1100, 700)

        table = dataset.build_table()
        self._table_vm = TableViewModel(
            table,
            status_column=dataset.status_column,
            status_renderer=dataset.status_renderer,
            parent=self,
        )
        self._search_vm = GlobalSearchViewModel(table, dataset.search, parent=self)
        self._view = DataTableView(self._table_vm, self._search_vm, title=title)
        self.setCentralWidget(self._view)

    @property
    def table_viewmodel(self) -> TableViewModel:
        return self._table_vm

    @property
    def search_viewmodel(self) -> GlobalSearchViewModel:
        return self._search_vm

    @property
    def view(self) -> DataTableView:
        return self._view

    def closeEvent(self, event: object) -> None:
        self._search_vm.close()
        super().closeEvent(event)


def create_app(dataset_path: Path) -> MainWindow:
    """Load a dataset and create the main window."""
    return MainWindow(load_dataset(dataset_path))
