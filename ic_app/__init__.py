"""Application layer: dataset loading and column wiring for the table surfaces."""

from ic_app.api import Dataset, load_dataset, parse_dataset

__all__ = ["Dataset", "load_dataset", "parse_dataset"]
