"""Public API surface for ic_common."""

from ic_common.errors import (
    DatasetError,
    ICError,
    TableConfigurationError,
    UnknownColumnError,
    wrap_error,
)
from ic_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "DatasetError",
    "ICError",
    "TableConfigurationError",
    "UnknownColumnError",
    "wrap_error",
]
