"""dfsaccess - storage access layer for ETL reader plugins.

Sits between a reader plugin and a distributed, hierarchical storage service:

1. **Core** (`dfsaccess.core`)
   - Configuration management
   - Logging
   - Error handling
   - Storage client interface

2. **Storage** (`dfsaccess.storage`)
   - Per-scheme configuration bundles
   - Lazily created filesystem handle
   - Directory listing and bulk deletion
   - File-type sniffing (plain, compressed, sequence container)

3. **Plugin collaborators** (`dfsaccess.plugin`)
   - Line counters
   - Table range expansion

4. **CLI** (`dfsaccess.cli`)

## Quick Start

```python
from dfsaccess.storage import StorageContext, classify, delete_entries, list_entries

ctx = StorageContext()
fs = ctx.acquire("hdfs://nodeA:9000/data/in", identity="etl,etl")

for path in list_entries(fs, "hdfs://nodeA:9000/data/in/part-*", use_glob=True):
    print(path, classify(fs, path))

report = delete_entries(fs, "hdfs://nodeA:9000/tmp/job-1", recursive=True)
report.raise_for_failures()
```
"""

__version__ = "1.0.0"

from .core import (
    AppConfig,
    ConfigResourceError,
    DfsAccessError,
    LocatorFormatError,
    StorageIOError,
    configure_logging,
    get_config,
    get_logger,
    reload_config,
)
from .storage import (
    FileTypeClassification,
    FilesystemHandle,
    SchemeConfiguration,
    StorageContext,
    acquire_filesystem,
    classify,
    delete_entries,
    list_entries,
    resolve_configuration,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "AppConfig",
    "get_config",
    "reload_config",
    "get_logger",
    "configure_logging",
    # Errors
    "DfsAccessError",
    "LocatorFormatError",
    "ConfigResourceError",
    "StorageIOError",
    # Storage
    "SchemeConfiguration",
    "FilesystemHandle",
    "StorageContext",
    "resolve_configuration",
    "acquire_filesystem",
    "list_entries",
    "delete_entries",
    "classify",
    "FileTypeClassification",
]
