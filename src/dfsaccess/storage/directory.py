"""Directory listing and bulk deletion.

Listing degrades to an empty result on storage failure unless ``strict`` is
requested. Deletion never raises for a single bad entry: every entry gets a
``DeleteResult`` and the caller decides whether failures abort its run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dfsaccess.core.errors import StorageIOError
from dfsaccess.core.logging import get_logger

from .handle import FilesystemHandle

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of deleting one entry."""

    path: str
    deleted: bool
    error: str | None = None


@dataclass
class DeleteReport:
    """Per-entry outcomes of one ``delete_entries`` call."""

    pattern: str
    results: list[DeleteResult] = field(default_factory=list)

    @property
    def deleted(self) -> list[str]:
        return [r.path for r in self.results if r.deleted]

    @property
    def failed(self) -> list[DeleteResult]:
        return [r for r in self.results if not r.deleted]

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        """Raise ``StorageIOError`` if any entry could not be deleted."""
        failed = self.failed
        if failed:
            names = ", ".join(r.path for r in failed)
            raise StorageIOError("delete", self.pattern, f"{len(failed)} entries failed: {names}")


def list_entries(
    handle: FilesystemHandle,
    pattern: str,
    use_glob: bool = False,
    strict: bool = False,
) -> list[str]:
    """List entries under *pattern*.

    Args:
        handle: Filesystem handle
        pattern: Literal directory, or a glob pattern when *use_glob*
        use_glob: Expand ``*``, ``?`` and ``[...]`` against the namespace
        strict: Raise instead of returning ``[]`` on storage failure

    Returns:
        Sorted entry paths; empty when nothing matches

    Example:
        >>> list_entries(handle, "hdfs://nodeA:9000/data/in/part-*", use_glob=True)
        ['/data/in/part-00000', '/data/in/part-00001']
    """
    try:
        entries = handle.glob(pattern) if use_glob else handle.ls(pattern)
    except StorageIOError as e:
        if strict:
            raise
        logger.error("listing_failed", pattern=pattern, glob=use_glob, error=str(e))
        return []
    return sorted(entries)


def delete_entries(
    handle: FilesystemHandle,
    pattern: str,
    recursive: bool = False,
    use_glob: bool = False,
) -> DeleteReport:
    """Delete every entry resolved by ``list_entries``, one at a time.

    Args:
        recursive: Allow removal of non-empty directories

    Returns:
        DeleteReport with one result per resolved entry
    """
    report = DeleteReport(pattern=pattern)
    for path in list_entries(handle, pattern, use_glob):
        logger.debug("deleting_entry", path=path, recursive=recursive)
        try:
            if handle.delete(path, recursive):
                report.results.append(DeleteResult(path, True))
            else:
                logger.warning("delete_skipped", path=path, reason="not found")
                report.results.append(DeleteResult(path, False, "not found"))
        except StorageIOError as e:
            logger.error("delete_failed", path=path, recursive=recursive, error=str(e))
            report.results.append(DeleteResult(path, False, str(e)))

    logger.info(
        "delete_entries_complete",
        pattern=pattern,
        deleted=len(report.deleted),
        failed=len(report.failed),
    )
    return report
