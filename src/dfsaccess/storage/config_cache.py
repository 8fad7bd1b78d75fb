"""Per-scheme configuration bundles.

A bundle is built once per storage-service scheme and reused for the lifetime
of its cache: later requests for the same scheme get the cached bundle back,
whatever identity or resource path they pass.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path

from dfsaccess.core.config import StorageSettings, get_config
from dfsaccess.core.logging import get_logger

from .locator import parse_locator
from .site_config import load_site_properties

logger = get_logger(__name__)


@dataclass
class SchemeConfiguration:
    """Configuration bundle for one storage-service scheme.

    Attributes:
        scheme: Locator scheme the bundle was built for (None if scheme-less)
        source: Site resource the properties were loaded from
        properties: Arbitrary string properties, including endpoint and identity
    """

    scheme: str | None
    source: Path
    properties: dict[str, str] = field(default_factory=dict)
    default_fs_property: str = "fs.default.name"
    identity_property: str = "hadoop.job.ugi"

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.properties.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.properties[key] = value

    @property
    def default_endpoint(self) -> str | None:
        return self.properties.get(self.default_fs_property)

    @property
    def identity(self) -> str | None:
        return self.properties.get(self.identity_property)


class ConfigCache:
    """Resolves and memoizes one ``SchemeConfiguration`` per scheme."""

    def __init__(self, settings: StorageSettings | None = None):
        self.settings = settings or get_config().storage
        self._bundles: dict[str | None, SchemeConfiguration] = {}
        self._lock = threading.Lock()

    def __contains__(self, scheme: str | None) -> bool:
        return scheme in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)

    def resolve(
        self,
        locator: str,
        identity: str | None = None,
        config_path: str | Path | None = None,
    ) -> SchemeConfiguration:
        """Return the bundle for *locator*'s scheme, building it on first use.

        Args:
            locator: URI-like path; only its scheme, host and port are used
            identity: Opaque identity passed through to the storage client
            config_path: Local site XML file; ignored when blank or missing

        Raises:
            LocatorFormatError: If *locator* is not a valid URI
            ConfigResourceError: If the selected resource cannot be read
        """
        parsed = parse_locator(locator)
        with self._lock:
            cached = self._bundles.get(parsed.scheme)
            if cached is not None:
                return cached

            source = self._select_source(config_path)
            bundle = SchemeConfiguration(
                scheme=parsed.scheme,
                source=source,
                properties=load_site_properties(source),
                default_fs_property=self.settings.default_fs_property,
                identity_property=self.settings.identity_property,
            )
            logger.info("config_resource_selected", path=str(source), scheme=parsed.scheme)
            logger.info("default_identity", identity=bundle.identity)

            if parsed.endpoint is not None:
                bundle.set(bundle.default_fs_property, parsed.endpoint)
                logger.info("default_endpoint_set", endpoint=parsed.endpoint)
            if identity is not None:
                bundle.set(bundle.identity_property, identity)
                logger.info("identity_override", identity=identity)

            self._bundles[parsed.scheme] = bundle
            return bundle

    def _select_source(self, config_path: str | Path | None) -> Path:
        if config_path is not None and str(config_path).strip():
            candidate = Path(config_path).expanduser()
            if candidate.is_file():
                return candidate
            logger.debug("config_path_ignored", path=str(config_path))
        return self.settings.default_config_path()
