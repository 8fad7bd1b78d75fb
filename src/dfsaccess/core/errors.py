"""dfsaccess error hierarchy.

Configuration and sniffing errors propagate to the caller; directory
housekeeping records storage failures per entry instead of raising.
"""

from __future__ import annotations

from typing import Optional


class DfsAccessError(Exception):
    """Base exception for all dfsaccess errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for logging/monitoring
        retryable: Whether operation can be safely retried
        recovery_hint: Suggested recovery action
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        retryable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.retryable = retryable
        self.recovery_hint = recovery_hint
        super().__init__(message)

    def __str__(self) -> str:
        base = f"[{self.code}] {self.message}"
        if self.recovery_hint:
            base += f" ({self.recovery_hint})"
        return base


class LocatorFormatError(DfsAccessError):
    """Raised when a locator is not a syntactically valid URI.

    Examples:
        - Whitespace or braces in the path
        - Non-numeric port
        - Broken percent-encoding
    """

    def __init__(self, locator: str, reason: str):
        super().__init__(
            f"Invalid locator {locator!r}: {reason}",
            code="LOCATOR_FORMAT_ERROR",
            retryable=False,
            recovery_hint="Use scheme://host:port/path form",
        )
        self.locator = locator
        self.reason = reason


class ConfigResourceError(DfsAccessError):
    """Raised when a configuration resource exists but cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Cannot read configuration resource {path}: {reason}",
            code="CONFIG_RESOURCE_ERROR",
            retryable=False,
            recovery_hint="Check the site XML file permissions and syntax",
        )
        self.path = path


class StorageIOError(DfsAccessError):
    """Raised on open/read/list/delete failures from the storage client.

    The original client exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        operation: str,
        path: str,
        message: str,
        retryable: bool = True,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            f"{operation} {path}: {message}",
            code="STORAGE_IO_ERROR",
            retryable=retryable,
            recovery_hint=recovery_hint or "Check storage service connectivity",
        )
        self.operation = operation
        self.path = path


class UnsupportedSchemeError(StorageIOError):
    """Raised when no filesystem implementation exists for a scheme."""

    def __init__(self, scheme: str | None):
        super().__init__(
            "create",
            f"{scheme}://",
            f"No FileSystem for scheme: {scheme}",
            retryable=False,
            recovery_hint="Set fs.<scheme>.impl or install the fsspec backend",
        )
        self.scheme = scheme
