"""Locator parsing.

A locator is a URI-like string such as ``hdfs://nodeA:9000/data/in/part-*``.
Only RFC 3986 generic syntax is checked, with non-ASCII printable characters
allowed as in IRIs. Glob characters are legal path characters, so ``?`` stays
part of the path rather than starting a query.
"""

from __future__ import annotations

import re
import string
import unicodedata
from dataclasses import dataclass
from urllib.parse import urlsplit

from dfsaccess.core.errors import LocatorFormatError

_URI_CHARS = frozenset(string.ascii_letters + string.digits + "-._~:/?#[]@!$&'()*+,;=%")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def _is_legal(char: str) -> bool:
    if char in _URI_CHARS:
        return True
    # Non-ASCII letters, marks, digits and symbols; never spaces or controls
    return not char.isascii() and unicodedata.category(char)[0] not in "CZ"


@dataclass(frozen=True)
class Locator:
    """Parsed locator components.

    ``host`` keeps its original case; ``scheme`` is lower-cased.
    """

    raw: str
    scheme: str | None
    host: str | None
    port: int | None
    path: str

    @property
    def endpoint(self) -> str | None:
        """``scheme://host:port`` (port omitted when absent), or None without a scheme."""
        if self.scheme is None:
            return None
        authority = self.host or ""
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        return f"{self.scheme}://{authority}"


def _split_authority(locator: str, netloc: str) -> tuple[str | None, int | None]:
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        close = hostport.find("]")
        if close < 0:
            raise LocatorFormatError(locator, "unterminated IPv6 host")
        host = hostport[: close + 1]
        rest = hostport[close + 1 :]
        if rest and not rest.startswith(":"):
            raise LocatorFormatError(locator, "unexpected text after IPv6 host")
        port_text = rest[1:]
    else:
        if hostport.count(":") > 1:
            raise LocatorFormatError(locator, "too many ':' in authority")
        host, _, port_text = hostport.partition(":")
        if "[" in host or "]" in host:
            raise LocatorFormatError(locator, "brackets outside an IPv6 host")

    port = None
    if port_text:
        if not port_text.isdigit():
            raise LocatorFormatError(locator, f"non-numeric port {port_text!r}")
        port = int(port_text)
        if port > 65535:
            raise LocatorFormatError(locator, f"port {port} out of range")
    return host or None, port


def parse_locator(locator: str) -> Locator:
    """Parse *locator* into scheme, host, port and path.

    Raises:
        LocatorFormatError: If the locator is not a syntactically valid URI.
    """
    if not isinstance(locator, str) or not locator.strip():
        raise LocatorFormatError(str(locator), "empty locator")

    illegal = sorted({c for c in locator if not _is_legal(c)})
    if illegal:
        raise LocatorFormatError(locator, f"illegal character(s) {''.join(illegal)!r}")
    if _BAD_PERCENT.search(locator):
        raise LocatorFormatError(locator, "malformed percent-encoding")

    head, sep, _ = locator.partition(":")
    if sep and "/" not in head and "?" not in head and "#" not in head:
        if not head:
            raise LocatorFormatError(locator, "expected scheme name before ':'")
        if not _SCHEME.match(head):
            raise LocatorFormatError(locator, f"illegal scheme name {head!r}")

    try:
        parts = urlsplit(locator)
    except ValueError as e:
        raise LocatorFormatError(locator, str(e)) from e

    host, port = _split_authority(locator, parts.netloc)

    # Path runs from the end of the authority to the fragment, '?' included
    path = locator.partition("#")[0]
    if parts.scheme:
        path = path[len(parts.scheme) + 1 :]
    if path.startswith("//"):
        path = path[2 + len(parts.netloc) :]

    return Locator(
        raw=locator,
        scheme=parts.scheme or None,
        host=host,
        port=port,
        path=path,
    )
