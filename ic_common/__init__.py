"""Shared helpers for inventory-console."""

from ic_common.api import ICError, configure_logging

__all__ = ["configure_logging", "ICError"]
