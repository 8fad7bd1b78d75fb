"""Hadoop-style site configuration resources.

Resource format::

    <configuration>
      <property>
        <name>fs.default.name</name>
        <value>hdfs://nodeA:9000</value>
      </property>
    </configuration>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from dfsaccess.core.errors import ConfigResourceError
from dfsaccess.core.logging import get_logger

logger = get_logger(__name__)


def load_site_properties(path: Path | str) -> dict[str, str]:
    """Load name/value pairs from a site XML resource.

    A missing resource yields an empty mapping. Properties without a name are
    skipped, a missing value reads as ``""`` and later duplicates win.

    Raises:
        ConfigResourceError: If the resource exists but cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("config_resource_missing", path=str(path))
        return {}

    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ConfigResourceError(str(path), f"malformed XML: {e}") from e
    except OSError as e:
        raise ConfigResourceError(str(path), e.strerror or str(e)) from e

    if root.tag != "configuration":
        raise ConfigResourceError(str(path), f"unexpected root element <{root.tag}>")

    properties: dict[str, str] = {}
    for prop in root.iter("property"):
        name = (prop.findtext("name") or "").strip()
        if not name:
            continue
        properties[name] = (prop.findtext("value") or "").strip()

    logger.debug("config_resource_loaded", path=str(path), properties=len(properties))
    return properties
