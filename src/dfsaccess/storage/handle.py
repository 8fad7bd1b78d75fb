"""Storage client construction and the handle wrapping it.

The client is an fsspec filesystem picked from the bundle: ``fs.<scheme>.impl``
when set (protocol name or dotted class path), else the scheme itself. A
scheme-less bundle takes its scheme from the default endpoint, and only falls
back to local files when no endpoint is configured.
"""

from __future__ import annotations

import importlib
import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import fsspec
from fsspec.spec import AbstractFileSystem

from dfsaccess.core.errors import StorageIOError, UnsupportedSchemeError
from dfsaccess.core.interfaces import StorageClient
from dfsaccess.core.logging import get_logger

from .config_cache import SchemeConfiguration
from .locator import parse_locator

logger = get_logger(__name__)

# Protocols that take host/port/user from the bundle instead of option properties
HDFS_PROTOCOLS = frozenset({"hdfs", "webhdfs"})

_INTEGER = re.compile(r"^[+-]?\d+$")


@contextmanager
def _storage_errors(operation: str, path: str) -> Iterator[None]:
    try:
        yield
    except (OSError, ValueError) as e:
        raise StorageIOError(operation, path, str(e) or type(e).__name__) from e


def client_scheme(configuration: SchemeConfiguration) -> str:
    """Scheme the client is built for: the bundle's, the default endpoint's, or ``file``."""
    if configuration.scheme:
        return configuration.scheme
    endpoint = configuration.default_endpoint
    if endpoint:
        scheme = parse_locator(endpoint).scheme
        if scheme:
            return scheme
    return "file"


def coerce_option(value: str) -> Any:
    """Convert ``true``/``false`` and integer property values to Python types."""
    text = value.strip()
    if text.lower() in ("true", "false"):
        return text.lower() == "true"
    if _INTEGER.match(text):
        return int(text)
    return value


def resolve_filesystem_class(configuration: SchemeConfiguration) -> type[AbstractFileSystem]:
    """Find the fsspec implementation for the bundle's scheme.

    Raises:
        UnsupportedSchemeError: If no implementation can be found or imported.
    """
    scheme = client_scheme(configuration)
    target = configuration.get(f"fs.{scheme}.impl") or scheme

    try:
        if "." in target:
            module_name, _, class_name = target.rpartition(".")
            cls = getattr(importlib.import_module(module_name), class_name)
        else:
            cls = fsspec.get_filesystem_class(target)
    except (ImportError, AttributeError, ValueError) as e:
        logger.error("filesystem_class_unavailable", scheme=scheme, impl=target, error=str(e))
        raise UnsupportedSchemeError(scheme) from e

    if not (isinstance(cls, type) and issubclass(cls, AbstractFileSystem)):
        raise UnsupportedSchemeError(scheme)
    return cls


def client_options(configuration: SchemeConfiguration, protocol: str) -> dict[str, Any]:
    """Constructor options for the client of *protocol*."""
    if protocol in HDFS_PROTOCOLS:
        options: dict[str, Any] = {}
        endpoint = configuration.default_endpoint
        if endpoint:
            parsed = parse_locator(endpoint)
            if parsed.host:
                options["host"] = parsed.host
            if parsed.port is not None:
                options["port"] = parsed.port
        if configuration.identity:
            options["user"] = configuration.identity.split(",")[0].strip()
        return options

    prefix = f"fs.{client_scheme(configuration)}.option."
    return {
        key[len(prefix) :]: coerce_option(value)
        for key, value in configuration.properties.items()
        if key.startswith(prefix)
    }


def create_client(configuration: SchemeConfiguration) -> StorageClient:
    """Build the storage client bound to *configuration*.

    Raises:
        UnsupportedSchemeError: If the scheme has no filesystem implementation
        StorageIOError: If the client cannot connect
    """
    cls = resolve_filesystem_class(configuration)
    protocol = cls.protocol if isinstance(cls.protocol, str) else cls.protocol[0]
    options = client_options(configuration, protocol)
    logger.info(
        "storage_client_create",
        impl=f"{cls.__module__}.{cls.__name__}",
        endpoint=configuration.default_endpoint,
        options=sorted(options),
    )
    with _storage_errors("connect", configuration.default_endpoint or protocol):
        return cls(**options)


class FilesystemHandle:
    """Storage client bound to the bundle it was created from.

    All listing, deleting and sniffing goes through this object; client
    ``OSError``/``ValueError`` failures surface as ``StorageIOError``.
    """

    def __init__(self, client: StorageClient, configuration: SchemeConfiguration):
        self.client = client
        self.configuration = configuration

    def __repr__(self) -> str:
        return f"FilesystemHandle(endpoint={self.configuration.default_endpoint!r})"

    def open(self, path: str) -> IO[bytes]:
        with _storage_errors("open", path):
            return self.client.open(path, "rb")

    def ls(self, path: str) -> list[str]:
        with _storage_errors("list", path):
            entries = self.client.ls(path, detail=False)
        return [entry if isinstance(entry, str) else entry["name"] for entry in entries]

    def glob(self, pattern: str) -> list[str]:
        with _storage_errors("glob", pattern):
            return list(self.client.glob(pattern))

    def isdir(self, path: str) -> bool:
        with _storage_errors("stat", path):
            return self.client.isdir(path)

    def delete(self, path: str, recursive: bool = False) -> bool:
        """Delete *path*; returns False when it does not exist.

        A non-recursive delete removes files and empty directories only.
        """
        with _storage_errors("delete", path):
            if not self.client.exists(path):
                return False
            if self.client.isdir(path):
                if recursive:
                    self.client.rm(path, recursive=True)
                else:
                    self.client.rmdir(path)
            else:
                self.client.rm(path)
        return True


def build_handle(configuration: SchemeConfiguration) -> FilesystemHandle:
    """Create a client for *configuration* and wrap it in a handle."""
    return FilesystemHandle(create_client(configuration), configuration)
