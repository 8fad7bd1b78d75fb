"""Per-line success/failure counters for reader and writer plugins."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any

from dfsaccess.core.logging import get_logger

logger = get_logger(__name__)


class PluginStatus(str, Enum):
    """Lifecycle status reported by a plugin."""

    WAITING = "waiting"
    CONNECT = "connect"
    READ = "read"
    READ_OVER = "read_over"
    WRITE = "write"
    WRITE_OVER = "write_over"
    SUCCESS = "success"
    FAILURE = "failure"


class LineMonitor:
    """Thread-safe line counters for one target.

    Args:
        target_name: Table or file the plugin is working on
        target_id: Index of the target within its job
    """

    def __init__(self, target_name: str = "", target_id: int = 0):
        self.target_name = target_name
        self.target_id = target_id
        self.status = PluginStatus.WAITING
        self._succeeded = 0
        self._failed = 0
        self._lock = threading.Lock()

    @property
    def succeeded_lines(self) -> int:
        return self._succeeded

    @property
    def failed_lines(self) -> int:
        return self._failed

    def set_succeeded_lines(self, count: int) -> int:
        with self._lock:
            self._succeeded = count
            return self._succeeded

    def set_failed_lines(self, count: int) -> int:
        with self._lock:
            self._failed = count
            return self._failed

    def line_success(self) -> int:
        """Count one good line; returns the new total."""
        with self._lock:
            self._succeeded += 1
            return self._succeeded

    def line_fail(self, info: str) -> int:
        """Count one bad line and log why; returns the new failure total."""
        with self._lock:
            self._failed += 1
            failed = self._failed
        logger.warning("line_failed", target=self.target_name, target_id=self.target_id, info=info)
        return failed

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return {
                "target_name": self.target_name,
                "target_id": self.target_id,
                "status": self.status.value,
                "succeeded_lines": self._succeeded,
                "failed_lines": self._failed,
            }
