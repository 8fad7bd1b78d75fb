"""Table name range expansion used when planning which sources to read."""

from __future__ import annotations

import re

from dfsaccess.core.logging import get_logger

logger = get_logger(__name__)

_RANGE = re.compile(r"(\w+)\[(\d+)-(\d+)\](.*)")


def expand_table_ranges(tables: str) -> list[str]:
    """Expand ``name[a-b]suffix`` items into enumerated table names.

    Items are comma separated. Bounds are inclusive and swapped when reversed;
    a start bound with a leading zero pads every number to the start's width.
    Items without a range are kept as-is (trimmed).

    Example:
        >>> expand_table_ranges("tbl[08-10]_log, users")
        ['tbl08_log', 'tbl09_log', 'tbl10_log', 'users']
    """
    names: list[str] = []
    for item in tables.split(","):
        item = item.strip()
        match = _RANGE.fullmatch(item)
        if match is None:
            names.append(item)
            continue

        prefix, start, end, suffix = match.groups()
        if int(start) > int(end):
            start, end = end, start
        width = len(start) if start.startswith("0") else 0
        expanded = [
            f"{prefix}{str(k).zfill(width)}{suffix.strip()}"
            for k in range(int(start), int(end) + 1)
        ]
        logger.debug("table_range_expanded", item=item, count=len(expanded))
        names.extend(expanded)
    return names
