"""Public API surface for ic_app."""

from ic_app.columns import ColumnSpec, key_accessor
from ic_app.dataset import Dataset, DatasetFile, load_dataset, parse_dataset
from ic_app.formatters import format_cell

__all__ = [
    "ColumnSpec",
    "Dataset",
    "DatasetFile",
    "format_cell",
    "key_accessor",
    "load_dataset",
    "parse_dataset",
]
