"""Caller-owned storage context.

Holds the per-scheme ``ConfigCache`` and the single ``FilesystemHandle``.
The handle is bound to the first target ever acquired through the context;
later ``acquire`` calls return it unchanged even for a different locator, so
one context serves one storage-service target. Use a separate context per
target when more than one is needed in a process.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from pathlib import Path

from dfsaccess.core.config import StorageSettings, get_config
from dfsaccess.core.logging import get_logger

from .config_cache import ConfigCache, SchemeConfiguration
from .handle import FilesystemHandle, build_handle

logger = get_logger(__name__)

HandleFactory = Callable[[SchemeConfiguration], FilesystemHandle]


class StorageContext:
    """Configuration cache plus the lazily created filesystem handle.

    Args:
        settings: Storage settings; defaults to the global ``AppConfig``
        handle_factory: Builds a handle from a bundle (tests inject fakes here)
    """

    def __init__(
        self,
        settings: StorageSettings | None = None,
        handle_factory: HandleFactory | None = None,
    ):
        self.settings = settings or get_config().storage
        self.config_cache = ConfigCache(self.settings)
        self._handle_factory = handle_factory or build_handle
        self._handle: FilesystemHandle | None = None
        self._lock = threading.Lock()

    @property
    def handle(self) -> FilesystemHandle | None:
        """The handle, or None before the first successful ``acquire``."""
        return self._handle

    def resolve_configuration(
        self,
        locator: str,
        identity: str | None = None,
        config_path: str | Path | None = None,
    ) -> SchemeConfiguration:
        return self.config_cache.resolve(locator, identity, config_path)

    def acquire(
        self,
        locator: str,
        identity: str | None = None,
        config_path: str | Path | None = None,
    ) -> FilesystemHandle:
        """Return the context's handle, creating it on first use.

        Arguments are only consulted on the first successful call.
        """
        if self._handle is not None:
            return self._handle
        with self._lock:
            if self._handle is None:
                configuration = self.config_cache.resolve(locator, identity, config_path)
                self._handle = self._handle_factory(configuration)
                logger.info("filesystem_handle_created", endpoint=configuration.default_endpoint)
            return self._handle


_default_context: StorageContext | None = None
_default_lock = threading.Lock()


def get_default_context() -> StorageContext:
    """Process-wide context used by the module-level helpers and the CLI."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = StorageContext()
        return _default_context


def reset_default_context() -> None:
    """Drop the process-wide context; the next call builds a fresh one."""
    global _default_context
    with _default_lock:
        _default_context = None


def resolve_configuration(
    locator: str,
    identity: str | None = None,
    config_path: str | Path | None = None,
) -> SchemeConfiguration:
    """Resolve a bundle through the default context."""
    return get_default_context().resolve_configuration(locator, identity, config_path)


def acquire_filesystem(
    locator: str,
    identity: str | None = None,
    config_path: str | Path | None = None,
) -> FilesystemHandle:
    """Acquire the handle of the default context."""
    return get_default_context().acquire(locator, identity, config_path)
