"""Lookup of extracted artifacts inside the cache tree."""

from pathlib import Path

from ..ports import LoggerPort
from .errors import DirectoryReadError


def list_dir(path: Path) -> list[Path]:
    """List the immediate children of a directory."""
    try:
        return list(Path(path).iterdir())
    except OSError as e:
        raise DirectoryReadError(str(path), str(e)) from e


class TreeLookup:
    """Two-level search for a named artifact below a cache root.

    Extracted layers put the directories callers look for (``configs``,
    ``release-manifests``) exactly one level below their bucket, so the
    search never goes deeper than ``root/<bucket>/<child>``.
    """

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def find(self, root: Path, name_fragment: str) -> Path | None:
        """Return the first grandchild of ``root`` whose path contains the fragment.

        Children are visited in directory listing order, which is not sorted.
        """
        try:
            buckets = list_dir(root)
        except DirectoryReadError as e:
            self.logger.warning(str(e))
            return None

        for bucket in buckets:
            if not bucket.is_dir():
                self.logger.trace(f"not a bucket directory {bucket}")
                continue
            try:
                children = list_dir(bucket)
            except DirectoryReadError as e:
                self.logger.warning(str(e))
                continue
            for child in children:
                if name_fragment in str(child):
                    self.logger.debug(f"found {name_fragment} at {child}")
                    return child

        self.logger.debug(f"no match for {name_fragment} under {root}")
        return None
