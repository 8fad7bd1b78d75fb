"""Access layer over a hierarchical storage service.

## Submodules

- `locator.py`: Locator parsing
- `site_config.py`: Site XML property resources
- `config_cache.py`: Per-scheme configuration bundles
- `handle.py`: Storage client construction and the filesystem handle
- `context.py`: Caller-owned context (config cache + handle)
- `directory.py`: Listing and bulk deletion
- `codecs.py`: Compression codec registry
- `sniffer.py`: File-type classification

Usage::

    from dfsaccess.storage import StorageContext, classify, list_entries

    ctx = StorageContext()
    fs = ctx.acquire("hdfs://nodeA:9000/data/in", identity="etl,etl")
    for path in list_entries(fs, "hdfs://nodeA:9000/data/in/part-*", use_glob=True):
        print(path, classify(fs, path).value)
"""

from .codecs import Codec, CodecRegistry
from .config_cache import ConfigCache, SchemeConfiguration
from .context import (
    StorageContext,
    acquire_filesystem,
    get_default_context,
    reset_default_context,
    resolve_configuration,
)
from .directory import DeleteReport, DeleteResult, delete_entries, list_entries
from .handle import FilesystemHandle, create_client
from .locator import Locator, parse_locator
from .sniffer import WRITABLE_TYPES, FileTypeClassification, classify, python_type_for
from .site_config import load_site_properties

__all__ = [
    # Configuration
    "Locator",
    "parse_locator",
    "load_site_properties",
    "SchemeConfiguration",
    "ConfigCache",
    # Handle
    "FilesystemHandle",
    "create_client",
    "StorageContext",
    "get_default_context",
    "reset_default_context",
    "resolve_configuration",
    "acquire_filesystem",
    # Directories
    "list_entries",
    "delete_entries",
    "DeleteReport",
    "DeleteResult",
    # Sniffing
    "Codec",
    "CodecRegistry",
    "FileTypeClassification",
    "classify",
    "WRITABLE_TYPES",
    "python_type_for",
]
