"""Collaborators used by reader plugins around the storage layer."""

from .monitor import LineMonitor, PluginStatus
from .split import expand_table_ranges

__all__ = ["LineMonitor", "PluginStatus", "expand_table_ranges"]
