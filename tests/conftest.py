import sys
from pathlib import Path

# Ensure src/ is on sys.path for imports like `import dfsaccess.*`
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))

import pytest
import structlog

from dfsaccess.core import get_config, reload_config
from dfsaccess.storage import StorageContext, reset_default_context

# Loggers must not be cached so structlog.testing.capture_logs sees every event.
structlog.configure(cache_logger_on_first_use=False)

SITE_XML = """<?xml version="1.0"?>
<configuration>
  <property>
    <name>fs.default.name</name>
    <value>hdfs://site-node:8020</value>
  </property>
  <property>
    <name>hadoop.job.ugi</name>
    <value>site-user,site-group</value>
  </property>
  <property>
    <name>dfs.replication</name>
    <value>3</value>
  </property>
</configuration>
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the fallback site configuration at an empty temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("DFS_HOME_DIR", str(home))
    reload_config()
    reset_default_context()
    yield home
    reset_default_context()


@pytest.fixture
def settings(isolated_home):
    return get_config().storage


@pytest.fixture
def context(settings):
    """A fresh caller-owned storage context."""
    return StorageContext(settings)


@pytest.fixture
def site_xml(tmp_path):
    """A site configuration file outside the home directory."""
    path = tmp_path / "site" / "hadoop-site.xml"
    path.parent.mkdir()
    path.write_text(SITE_XML)
    return path


@pytest.fixture
def lake(tmp_path):
    """A small local directory tree standing in for a storage namespace.

    lake/
        _SUCCESS
        part-00000
        part-00001
        part-00002.gz
        nested/inner.txt
    """
    root = tmp_path / "lake"
    root.mkdir()
    (root / "_SUCCESS").write_bytes(b"")
    (root / "part-00000").write_text("a\tb\n")
    (root / "part-00001").write_text("c\td\n")
    (root / "part-00002.gz").write_bytes(b"\x1f\x8b\x08\x00")
    (root / "nested").mkdir()
    (root / "nested" / "inner.txt").write_text("inner\n")
    return root


@pytest.fixture
def local_fs(context, lake):
    """Handle bound to the local filesystem through a file:// locator."""
    return context.acquire(f"file://{lake}")
