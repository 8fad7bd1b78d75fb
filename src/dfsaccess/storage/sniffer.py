"""File-type sniffing before a reader picks its decoding strategy.

Checks run in order:
    1. empty file → PLAIN_TEXT
    2. ``SE`` magic followed by ``Q`` → SEQUENCE_CONTAINER
    3. codec registered for the filename suffix → COMPRESSED_TEXT
    4. otherwise → PLAIN_TEXT

Storage errors propagate as ``StorageIOError``; the stream is always closed.
"""

from __future__ import annotations

import struct
from enum import Enum

from dfsaccess.core.errors import StorageIOError
from dfsaccess.core.logging import get_logger

from .codecs import CodecRegistry
from .config_cache import SchemeConfiguration
from .handle import FilesystemHandle

logger = get_logger(__name__)

SEQUENCE_MAGIC = 0x5345  # "SE", read as a big-endian short
SEQUENCE_MARKER = b"Q"


class FileTypeClassification(str, Enum):
    """On-disk encoding of a file."""

    PLAIN_TEXT = "PlainText"
    COMPRESSED_TEXT = "CompressedText"
    SEQUENCE_CONTAINER = "SequenceContainer"


# Hadoop Writable key/value classes → Python type a sequence reader yields
WRITABLE_TYPES: dict[str, type] = {
    "org.apache.hadoop.io.BooleanWritable": bool,
    "org.apache.hadoop.io.ByteWritable": int,
    "org.apache.hadoop.io.IntWritable": int,
    "org.apache.hadoop.io.VIntWritable": int,
    "org.apache.hadoop.io.LongWritable": int,
    "org.apache.hadoop.io.VLongWritable": int,
    "org.apache.hadoop.io.DoubleWritable": float,
    "org.apache.hadoop.io.FloatWritable": float,
    "org.apache.hadoop.io.Text": str,
    "org.apache.hadoop.io.BytesWritable": bytes,
}


def python_type_for(class_name: str) -> type | None:
    """Python type for a Writable class name, or None if unsupported."""
    return WRITABLE_TYPES.get(class_name.strip())


def classify(
    handle: FilesystemHandle,
    path: str,
    configuration: SchemeConfiguration | None = None,
    registry: CodecRegistry | None = None,
) -> FileTypeClassification:
    """Classify *path* by magic bytes, then by compression suffix.

    Args:
        handle: Filesystem handle to read through
        path: File to inspect
        configuration: Bundle whose codec settings apply (defaults to the handle's)
        registry: Explicit codec registry, overriding *configuration*

    Raises:
        StorageIOError: If the file cannot be opened or read
    """
    if registry is None:
        registry = CodecRegistry.from_configuration(configuration or handle.configuration)

    try:
        with handle.open(path) as stream:
            prefix = stream.read(2)
            if not prefix:
                kind = FileTypeClassification.PLAIN_TEXT
            elif (
                len(prefix) == 2
                and struct.unpack(">H", prefix)[0] == SEQUENCE_MAGIC
                and stream.read(1) == SEQUENCE_MARKER
            ):
                kind = FileTypeClassification.SEQUENCE_CONTAINER
            else:
                stream.seek(0)
                if registry.codec_for(path) is None:
                    kind = FileTypeClassification.PLAIN_TEXT
                else:
                    kind = FileTypeClassification.COMPRESSED_TEXT
    except (OSError, ValueError) as e:
        raise StorageIOError("read", path, str(e) or type(e).__name__) from e

    logger.debug("file_classified", path=path, file_type=kind.value)
    return kind
