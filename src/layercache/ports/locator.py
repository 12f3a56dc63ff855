"""Blob locator port interface."""

from pathlib import Path
from typing import Protocol


class BlobLocatorPort(Protocol):
    """Port for resolving layer blobs on disk."""

    def blob_path(self, blobs_root: Path, hex_digest: str) -> Path:
        """Get path of the compressed archive for a blob."""
        ...
