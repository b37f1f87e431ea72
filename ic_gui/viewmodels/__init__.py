"""ViewModels for the GUI."""

from ic_gui.viewmodels.search_vm import GlobalSearchViewModel
from ic_gui.viewmodels.table_vm import TableViewModel

__all__ = ["GlobalSearchViewModel", "TableViewModel"]
