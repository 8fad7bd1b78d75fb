"""Compression codec registry keyed by filename suffix.

Follows Hadoop's codec factory: the codec set comes from the
``io.compression.codecs`` property when present, and a path resolves to the
codec with the longest matching suffix. Whether fsspec can actually decompress
a codec in this interpreter is reported separately as ``available``.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from fsspec.compression import available_compressions

from dfsaccess.core.logging import get_logger

from .config_cache import SchemeConfiguration

logger = get_logger(__name__)

CODECS_PROPERTY = "io.compression.codecs"

# Hadoop codec class (simple) names → codec name
HADOOP_CODEC_NAMES = {
    "DefaultCodec": "deflate",
    "DeflateCodec": "deflate",
    "GzipCodec": "gzip",
    "BZip2Codec": "bz2",
    "SnappyCodec": "snappy",
    "Lz4Codec": "lz4",
    "ZStandardCodec": "zstd",
}


@dataclass(frozen=True)
class Codec:
    """A compression codec resolvable by filename suffix."""

    name: str
    suffix: str

    @property
    def available(self) -> bool:
        return self.name in available_compressions()


DEFAULT_CODECS: tuple[Codec, ...] = (
    Codec("deflate", ".deflate"),
    Codec("gzip", ".gz"),
    Codec("bz2", ".bz2"),
    Codec("xz", ".xz"),
    Codec("lzma", ".lzma"),
    Codec("lz4", ".lz4"),
    Codec("zstd", ".zst"),
    Codec("snappy", ".snappy"),
    Codec("snappy", ".sz"),
    Codec("zip", ".zip"),
)


class CodecRegistry:
    """Suffix → codec lookup."""

    def __init__(self, codecs: tuple[Codec, ...] | list[Codec] = DEFAULT_CODECS):
        self.codecs = tuple(codecs)

    @classmethod
    def from_configuration(cls, configuration: SchemeConfiguration | None) -> CodecRegistry:
        """Build the registry from ``io.compression.codecs``, or the defaults."""
        listed = configuration.get(CODECS_PROPERTY) if configuration is not None else None
        if not listed or not listed.strip():
            return cls()

        names: list[str] = []
        for item in listed.split(","):
            item = item.strip()
            if not item:
                continue
            simple = item.rpartition(".")[2]
            name = HADOOP_CODEC_NAMES.get(simple, simple.lower())
            if not any(codec.name == name for codec in DEFAULT_CODECS):
                logger.warning("unknown_codec", codec=item)
                continue
            names.append(name)
        return cls(tuple(codec for codec in DEFAULT_CODECS if codec.name in names))

    def codec_for(self, path: str) -> Codec | None:
        """Codec registered for the longest matching suffix of *path*'s filename."""
        filename = posixpath.basename(path.rstrip("/"))
        best: Codec | None = None
        for codec in self.codecs:
            if filename.endswith(codec.suffix) and (best is None or len(codec.suffix) > len(best.suffix)):
                best = codec
        return best

    def suffixes(self) -> list[str]:
        return sorted(codec.suffix for codec in self.codecs)
